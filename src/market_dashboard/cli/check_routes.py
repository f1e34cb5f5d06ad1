"""CLI to exercise the market dashboard API routes against a running server.

Usage:
  check-routes health
  check-routes markets --region europe
  check-routes stock AAPL:NASDAQ --range 1M --head 5
"""
import argparse
import json
import sys

import httpx


def print_json(data: object) -> None:
    print(json.dumps(data, indent=2, default=str))


def cmd_health(client: httpx.Client, _: argparse.Namespace) -> int:
    r = client.get("/")
    r.raise_for_status()
    print_json(r.json())
    return 0


def cmd_markets(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.get("/api/markets", params={"region": args.region})
    r.raise_for_status()
    data = r.json()
    counts = {bucket: len(items) for bucket, items in data.items()}
    print(f"Markets for {args.region}: {counts}")
    if args.verbose:
        print_json(data)
    return 0


def cmd_stock(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.get("/api/stock", params={"symbol": args.symbol, "timeRange": args.range})
    r.raise_for_status()
    data = r.json()
    points = data["graph"]["graph"]
    print(f"{data['title']} ({data['stock']}:{data['exchange']}) - {len(points)} points for {args.range}")
    print_json(data["summary"])
    print_json(points[: args.head] if args.head else points)
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Exercise market dashboard API routes")
    parser.add_argument(
        "--base-url",
        default="http://127.0.0.1:8001",
        help="API base URL (default: http://127.0.0.1:8001)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="Request timeout in seconds (default: 30)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Command")

    subparsers.add_parser("health", help="GET / health check")

    p = subparsers.add_parser("markets", help="GET /api/markets")
    p.add_argument("--region", default="us", help="Region tab (default: us)")
    p.add_argument("-v", "--verbose", action="store_true", help="Print every listing")

    p = subparsers.add_parser("stock", help="GET /api/stock")
    p.add_argument("symbol", help='Ticker with exchange (e.g. "AAPL:NASDAQ")')
    p.add_argument("--range", default="1D", help="Time range token (default: 1D)")
    p.add_argument("--head", type=int, default=0, help="Show only first N points (0 = all)")

    args = parser.parse_args()
    handlers = {"health": cmd_health, "markets": cmd_markets, "stock": cmd_stock}

    try:
        with httpx.Client(base_url=args.base_url.rstrip("/"), timeout=args.timeout) as client:
            return handlers[args.command](client, args)
    except httpx.HTTPStatusError as e:
        print(f"HTTP error: {e.response.status_code}", file=sys.stderr)
        if e.response.content:
            try:
                print(e.response.json(), file=sys.stderr)
            except ValueError:
                print(e.response.text, file=sys.stderr)
        return 1
    except httpx.RequestError as e:
        print(f"Request error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

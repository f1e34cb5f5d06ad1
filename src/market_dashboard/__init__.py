"""Market dashboard backend: normalized market indexes and stock quotes."""

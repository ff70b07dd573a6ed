"""Command-line tools for cachestore."""

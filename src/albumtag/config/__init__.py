"""Application settings and path policy."""

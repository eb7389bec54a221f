"""Configuration package: paths, persisted settings and derived constants."""

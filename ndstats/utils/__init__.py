"""Support code shared across the package (logging setup)."""

"""Framework layer: configuration and logging setup."""

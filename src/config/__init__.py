"""Configuration: settings and logging setup."""

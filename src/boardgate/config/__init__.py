"""Configuration: settings models, TOML discovery and logging setup."""

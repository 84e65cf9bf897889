"""Configuration layer — TOML discovery, settings merge, logging setup."""

"""Configuration layer — config file discovery, settings and logging setup."""

"""Configuration — jsmk.toml models, discovery, settings, logging."""

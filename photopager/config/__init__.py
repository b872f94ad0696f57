"""Configuration module: exports Settings, load_consumer_key, and a module-level singleton."""

from photopager.config.credentials import load_consumer_key
from photopager.config.settings import Settings

settings = Settings()

__all__ = ["Settings", "load_consumer_key", "settings"]

"""Configuration package for payment patterns."""
from .settings import get_settings, Settings

__all__ = ["Settings", "get_settings"]

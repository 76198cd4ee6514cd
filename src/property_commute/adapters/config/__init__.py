"""Configuration adapters."""

from property_commute.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]

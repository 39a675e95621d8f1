"""Configuration adapters."""

from location_service.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]

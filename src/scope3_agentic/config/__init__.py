# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Configuration module."""

from .client_config import BASE_URLS, ClientConfig
from .settings import Settings, get_settings

__all__ = ["BASE_URLS", "ClientConfig", "Settings", "get_settings"]

"""Configuration management."""

from .global_config import GlobalConfig, ServiceConfig, config_path, init_config

__all__ = ["GlobalConfig", "ServiceConfig", "config_path", "init_config"]

"""Logging infrastructure package."""

from .logger import LoggerBuilder, get_app_logger, get_usage_logger

__all__ = ["LoggerBuilder", "get_app_logger", "get_usage_logger"]

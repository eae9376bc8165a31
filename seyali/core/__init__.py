"""
Core utilities shared by the Seyali Status Service and Status Page.

This package provides logging configuration and Logfire monitoring helpers.
"""

from seyali.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]

"""
Logging configuration and utilities for pair actions.
"""
from .config import configure_logging, get_chain_logger, get_logger, log_action_step

__all__ = ["configure_logging", "get_chain_logger", "get_logger", "log_action_step"]

# Flagpick CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for flagpick."""
import logging

logger: logging.Logger = logging.getLogger("flagpick")

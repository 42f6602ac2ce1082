"""
🎨 Logging System for otpvault
==============================

Features:
- ✅ Millisecond precision timestamps
- ✅ Colored console output (level-based)
- ✅ Automatic password/secret/key filtering
- ✅ File rotation
- ✅ Simple API: log(message, level="INFO")

Usage:
    from otpvault.utils.logging import log, get_logger, setup_logging

    setup_logging()

    # Simple API:
    log("Tokens exported")
    log("Failed to decrypt", level="ERROR")

    # Advanced API:
    logger = get_logger(__name__)
    logger.info("Parsing andOTP backup...")
"""

from .api import log, get_logger, ROOT_LOGGER_NAME
from .setup import setup_logging
from .colors import Colors
from .filters import SensitiveDataFilter
from .formatters import ColoredFormatter

__all__ = [
    'log',
    'get_logger',
    'ROOT_LOGGER_NAME',
    'setup_logging',
    'Colors',
    'SensitiveDataFilter',
    'ColoredFormatter',
]

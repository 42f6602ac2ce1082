"""
🎨 Colored Formatter for Console Output
"""

import logging
from .colors import Colors


class ColoredFormatter(logging.Formatter):
    """Форматтер с цветным выводом для консоли"""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.DEBUG,
        logging.INFO: Colors.INFO,
        logging.WARNING: Colors.WARNING,
        logging.ERROR: Colors.ERROR,
        logging.CRITICAL: Colors.CRITICAL,
    }

    def format(self, record):
        levelname_original = record.levelname

        level_color = self.LEVEL_COLORS.get(record.levelno, Colors.RESET)
        record.levelname = f"{level_color}{record.levelname:<8}{Colors.RESET}"
        try:
            formatted = super().format(record)
        finally:
            # Другие handlers должны видеть исходное имя уровня
            record.levelname = levelname_original

        # Подсвечиваем timestamp: "[2025-01-15 10:30:45.123] ..."
        timestamp, sep, rest = formatted.partition(']')
        if sep:
            formatted = f"{Colors.TIMESTAMP}{timestamp}{sep}{Colors.RESET}{rest}"

        return formatted

"""
📁 Logger Configuration and Setup
"""

import sys
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from .filters import SensitiveDataFilter
from .formatters import ColoredFormatter


CONSOLE_FORMAT = '[%(asctime)s.%(msecs)03d] [%(levelname)-8s] %(message)s'
FILE_FORMAT = '[%(asctime)s.%(msecs)03d] [%(levelname)-8s] [%(name)s] %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(
    log_dir: Optional[Union[str, Path]] = None,
    log_file: Optional[str] = None,
    console_level: Optional[Union[int, str]] = None,
    file_level: int = logging.DEBUG,
    max_bytes: Optional[int] = None,
    backup_count: Optional[int] = None,
    enable_colors: Optional[bool] = None
) -> logging.Logger:
    """
    Настройка системы логирования

    Незаданные аргументы берутся из Settings (переменные OTPVAULT_*).

    Args:
        log_dir: Директория для логов (пустая строка - без файлового лога)
        log_file: Имя файла лога
        console_level: Уровень логирования для консоли
        file_level: Уровень логирования для файла
        max_bytes: Максимальный размер файла лога (байты)
        backup_count: Количество backup файлов
        enable_colors: Включить цветной вывод

    Returns:
        Настроенный root logger
    """
    from ...config import get_settings
    settings = get_settings()

    if log_dir is None:
        log_dir = settings.LOG_DIR
    if log_file is None:
        log_file = settings.LOG_FILE
    if console_level is None:
        console_level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL
    if isinstance(console_level, str):
        console_level = logging.getLevelName(console_level.upper())
    if max_bytes is None:
        max_bytes = settings.LOG_MAX_BYTES
    if backup_count is None:
        backup_count = settings.LOG_BACKUP_COUNT
    if enable_colors is None:
        enable_colors = settings.LOG_COLORS

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Повторный вызов не должен дублировать handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    # ==================
    # CONSOLE HANDLER
    # ==================

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)

    if enable_colors and sys.stdout.isatty():
        console_formatter = ColoredFormatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT)
    else:
        console_formatter = logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT)

    console_handler.setFormatter(console_formatter)
    console_handler.addFilter(SensitiveDataFilter())
    root_logger.addHandler(console_handler)

    # ==================
    # FILE HANDLER (with rotation)
    # ==================

    log_path = None
    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path / log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        file_handler.addFilter(SensitiveDataFilter())
        root_logger.addHandler(file_handler)

    logging.info("=" * 60)
    logging.info(f"{settings.APP_NAME} Logging System Initialized")
    if log_path is not None:
        logging.info(f"   Log file: {(log_path / log_file).absolute()}")
        logging.info(f"   Max file size: {max_bytes / (1024*1024):.1f}MB per file")
        logging.info(f"   Backup count: {backup_count} files")
    else:
        logging.info("   File logging: disabled")
    logging.info(f"   Colors: {'enabled' if enable_colors else 'disabled'}")
    logging.info("=" * 60)

    return root_logger

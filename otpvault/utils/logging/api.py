"""
🎯 Simple API for Logging
"""

import logging
from typing import Optional


ROOT_LOGGER_NAME = "otpvault"


def log(message: str, level: str = "INFO"):
    """
    Простой API для логирования

    Args:
        message: Сообщение для логирования
        level: Уровень логирования (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Examples:
        log("Export finished")
        log("Decryption failed", level="ERROR")
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    level = level.upper()
    if level == "DEBUG":
        logger.debug(message)
    elif level == "INFO":
        logger.info(message)
    elif level == "WARNING" or level == "WARN":
        logger.warning(message)
    elif level == "ERROR":
        logger.error(message)
    elif level == "CRITICAL":
        logger.critical(message)
    else:
        logger.info(message)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Получить logger для модуля (advanced API)

    Args:
        name: Имя модуля (обычно __name__)

    Returns:
        logging.Logger instance

    Example:
        logger = get_logger(__name__)
        logger.info("Processing data...")
    """
    if name is None:
        name = ROOT_LOGGER_NAME
    return logging.getLogger(name)

"""
Pytest fixtures для тестов otpvault

Содержит общие fixtures для всех тестов:
- Тестовые токены всех типов
- Хранилище файлов в памяти
- Восстановление конфигурации логирования и настроек
"""
import logging
import pytest
from typing import Dict, Generator, List, Tuple

import pyotp

from otpvault.config import get_settings
from otpvault.models import OTPToken, ShaAlgorithm, TokenType
from otpvault.services.andotp import AndOtpCrypto
from otpvault.services.storage import FileStatus


# ==================== STORAGE ====================

class MemoryStorage:
    """Хранилище файлов в памяти с возможностью имитировать ошибки"""

    def __init__(self):
        self.files: Dict[str, bytes] = {}
        self.fail_reads = False
        self.fail_writes = False
        self.writes = 0

    def read_file(self, path) -> Tuple[FileStatus, bytes]:
        if self.fail_reads or str(path) not in self.files:
            return FileStatus.FAILURE, b""
        return FileStatus.SUCCESS, self.files[str(path)]

    def write_file(self, path, data: bytes) -> FileStatus:
        self.writes += 1
        if self.fail_writes:
            return FileStatus.FAILURE
        self.files[str(path)] = bytes(data)
        return FileStatus.SUCCESS


@pytest.fixture
def memory_storage() -> MemoryStorage:
    """
    Создать пустое хранилище в памяти.

    Returns:
        MemoryStorage: Хранилище
    """
    return MemoryStorage()


# ==================== TOKEN FIXTURES ====================

@pytest.fixture
def totp_token() -> OTPToken:
    """
    Создать TOTP токен.

    Returns:
        OTPToken: TOTP, 6 цифр, 30 секунд, SHA1
    """
    token = OTPToken(TokenType.TOTP)
    token.label = "GitHub:octocat"
    token.secret = pyotp.random_base32()
    token.digits = 6
    token.period = 30
    token.set_algorithm(ShaAlgorithm.SHA1)
    return token


@pytest.fixture
def hotp_token() -> OTPToken:
    """
    Создать HOTP токен.

    Returns:
        OTPToken: HOTP, 8 цифр, счётчик 42, SHA256
    """
    token = OTPToken(TokenType.HOTP)
    token.label = "VPN"
    token.secret = pyotp.random_base32()
    token.digits = 8
    token.counter = 42
    token.set_algorithm("sha256")
    return token


@pytest.fixture
def steam_token() -> OTPToken:
    """
    Создать Steam токен с уже нормализованными параметрами.

    Returns:
        OTPToken: Steam, 5 цифр, 30 секунд, SHA1
    """
    token = OTPToken(TokenType.STEAM)
    token.label = "Steam"
    token.secret = pyotp.random_base32()
    token.digits = 5
    token.period = 30
    token.set_algorithm(ShaAlgorithm.SHA1)
    return token


@pytest.fixture
def sample_tokens(totp_token, hotp_token, steam_token) -> List[OTPToken]:
    """
    Коллекция из токенов всех типов.

    Returns:
        List[OTPToken]: TOTP, HOTP, Steam
    """
    return [totp_token, hotp_token, steam_token]


@pytest.fixture
def crypto() -> AndOtpCrypto:
    return AndOtpCrypto()


# ==================== ENVIRONMENT FIXTURES ====================

@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """
    Сбросить кэш настроек до и после теста.

    Тесты меняют переменные окружения OTPVAULT_* через monkeypatch.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_logging() -> Generator[None, None, None]:
    """
    Вернуть handlers root logger после теста, вызывающего setup_logging.
    """
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)

"""
Core module

Базовые компоненты: исключения
"""
from .exceptions import OtpVaultError, CodecError, MigrationError

__all__ = [
    'OtpVaultError',
    'CodecError',
    'MigrationError',
]

"""
Модели токенов: текущая (OTPToken) и старого формата (LegacyOTPToken)
"""

from .token import (
    MIN_DIGITS,
    MAX_DIGITS,
    MIN_PERIOD,
    MAX_PERIOD,
    MIN_COUNTER,
    MAX_COUNTER,
    TokenType,
    ShaAlgorithm,
    OTPToken,
)

from .legacy import (
    LegacyTokenType,
    LegacyOTPToken,
    remaining_validity,
)


__all__ = [
    # Limits
    'MIN_DIGITS',
    'MAX_DIGITS',
    'MIN_PERIOD',
    'MAX_PERIOD',
    'MIN_COUNTER',
    'MAX_COUNTER',
    # Current model
    'TokenType',
    'ShaAlgorithm',
    'OTPToken',
    # Legacy model
    'LegacyTokenType',
    'LegacyOTPToken',
    'remaining_validity',
]

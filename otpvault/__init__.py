"""
otpvault - ядро менеджера OTP-токенов

Модель токенов TOTP/HOTP/Steam, миграция старого формата,
импорт/экспорт бэкапов andOTP.
"""

__version__ = "1.0.0"

"""
Исключения otpvault.

Используются внутри сервисов; публичные точки входа импорта/экспорта
перехватывают их и возвращают False.
"""


class OtpVaultError(Exception):
    """Базовое исключение otpvault"""
    pass


class CodecError(OtpVaultError):
    """Структурная ошибка JSON: документ не парсится или корень не массив"""
    pass


class MigrationError(OtpVaultError):
    """Токен старого формата нельзя отнести ни к одному из текущих типов"""
    pass

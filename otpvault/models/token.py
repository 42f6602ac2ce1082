"""
Модель OTP-токена.

Один класс OTPToken с дискриминантом TokenType вместо иерархии
TOTPToken/HOTPToken/SteamToken. Модель хранит только параметры генерации
(секрет, длина кода, период, счётчик, алгоритм), сам код здесь не считается.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


# Ограничения генератора OTP
MIN_DIGITS = 3
MAX_DIGITS = 10
MIN_PERIOD = 1
MAX_PERIOD = 120
MIN_COUNTER = 0
MAX_COUNTER = 0x7FFFFFFF


class TokenType(Enum):
    """Тип токена"""
    TOTP = "totp"
    HOTP = "hotp"
    STEAM = "steam"

    @property
    def is_time_based(self) -> bool:
        """True для токенов с периодом, False для токенов со счётчиком"""
        return self is not TokenType.HOTP


class ShaAlgorithm(Enum):
    """HMAC-алгоритм токена"""
    INVALID = 0
    SHA1 = 1
    SHA256 = 2
    SHA512 = 3

    @classmethod
    def from_name(cls, name: str) -> "ShaAlgorithm":
        """
        Разобрать название алгоритма без учёта регистра.

        Неизвестное название даёт INVALID, исключение не бросается.
        """
        if not isinstance(name, str):
            return cls.INVALID
        key = name.strip().upper()
        if key in ("SHA1", "SHA256", "SHA512"):
            return cls[key]
        return cls.INVALID

    @property
    def display_name(self) -> str:
        if self is ShaAlgorithm.INVALID:
            return "(invalid)"
        return self.name


@dataclass
class OTPToken:
    """
    OTP-токен.

    Attributes:
        type: Тип токена, задаётся при создании и больше не меняется
        label: Отображаемое имя
        secret: Общий секрет (обычно base32)
        digits: Длина кода
        period: Шаг времени в секундах (TOTP/Steam)
        counter: Счётчик (HOTP)
        algorithm: HMAC-алгоритм
    """
    type: TokenType
    label: str = ""
    secret: str = ""
    digits: int = 0
    period: int = 0
    counter: int = 0
    algorithm: ShaAlgorithm = ShaAlgorithm.INVALID

    def __setattr__(self, name, value):
        if name == "type" and "type" in self.__dict__:
            raise AttributeError("Тип токена нельзя изменить после создания")
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        # секрет в repr не попадает
        return (
            f"OTPToken(type={self.type.name}, label={self.label!r}, "
            f"digits={self.digits}, period={self.period}, counter={self.counter}, "
            f"algorithm={self.algorithm.display_name})"
        )

    def set_algorithm(self, algorithm: Union[ShaAlgorithm, str]) -> None:
        """Установить алгоритм из enum или из строки ("sha256", "SHA1", ...)"""
        if isinstance(algorithm, ShaAlgorithm):
            self.algorithm = algorithm
        else:
            self.algorithm = ShaAlgorithm.from_name(algorithm)

    @property
    def algorithm_name(self) -> str:
        return self.algorithm.display_name

    def valid(self) -> bool:
        """Минимальная проверка: токен невалиден, только если пусты и label, и secret"""
        return bool(self.label or self.secret)

    def in_range(self) -> bool:
        """Проверить числовые параметры на допустимые для типа диапазоны"""
        if not MIN_DIGITS <= self.digits <= MAX_DIGITS:
            return False
        if self.type.is_time_based:
            return MIN_PERIOD <= self.period <= MAX_PERIOD
        return MIN_COUNTER <= self.counter <= MAX_COUNTER

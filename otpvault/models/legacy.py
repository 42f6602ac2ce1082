"""
Токен старого формата.

Старый формат хранил тип и его текстовое имя рядом с полями всех вариантов
сразу. Объект создаётся из старых данных, один раз конвертируется в OTPToken
(см. services.migration) и выбрасывается.
"""

import time
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

from .token import (
    MAX_COUNTER,
    MAX_DIGITS,
    MAX_PERIOD,
    MIN_COUNTER,
    MIN_DIGITS,
    MIN_PERIOD,
    ShaAlgorithm,
)


class LegacyTokenType(Enum):
    """Тип токена старого формата"""
    NONE = 0
    TOTP = 1
    HOTP = 2
    STEAM = 3
    AUTHY = 4


def remaining_validity(second: int, period: int) -> int:
    """
    Сколько секунд осталось до следующего шага времени.

    К результату добавляется 1 секунда, чтобы не показывать "0 секунд".
    Если секунда текущей минуты больше периода, результат берётся по модулю.

    Args:
        second: Секунда текущей минуты (0..59, 60 для високосной)
        period: Шаг времени в секундах

    Returns:
        Оставшиеся секунды; 0 при period == 0
    """
    if period == 0:
        return 0

    validity = period - second
    if validity < 0:
        return period - (second % period) + 1
    return validity + 1


@dataclass
class LegacyOTPToken:
    """Токен старого формата, все поля доступны независимо от типа"""

    MIN_DIGITS = MIN_DIGITS
    MAX_DIGITS = MAX_DIGITS
    MIN_PERIOD = MIN_PERIOD
    MAX_PERIOD = MAX_PERIOD
    MIN_COUNTER = MIN_COUNTER
    MAX_COUNTER = MAX_COUNTER

    type: LegacyTokenType = LegacyTokenType.NONE
    type_name: str = ""
    label: str = ""
    icon: str = ""
    secret: str = ""
    digits: int = 0
    period: int = 0
    counter: int = 0
    algorithm: ShaAlgorithm = ShaAlgorithm.INVALID

    def __repr__(self) -> str:
        return (
            f"LegacyOTPToken(type={self.type.name}, label={self.label!r}, "
            f"algorithm={self.algorithm_string()})"
        )

    def copy(self) -> "LegacyOTPToken":
        """Независимая копия токена"""
        return replace(self)

    def clear(self) -> None:
        """Затереть все поля (секрет в первую очередь)"""
        self.secret = ""
        self.type = LegacyTokenType.NONE
        self.type_name = ""
        self.label = ""
        self.icon = ""
        self.digits = 0
        self.period = 0
        self.counter = 0
        self.algorithm = ShaAlgorithm.INVALID

    def set_algorithm(self, algorithm: Union[ShaAlgorithm, str]) -> None:
        if isinstance(algorithm, ShaAlgorithm):
            self.algorithm = algorithm
        else:
            self.algorithm = ShaAlgorithm.from_name(algorithm)

    def algorithm_string(self) -> str:
        return self.algorithm.display_name

    def valid(self) -> bool:
        return bool(self.label or self.secret)

    def remaining_token_validity(self, now: Optional[float] = None) -> int:
        """
        Оставшееся время действия кода по локальным часам.

        Args:
            now: Unix-время (по умолчанию текущее)
        """
        if now is None:
            now = time.time()
        return remaining_validity(time.localtime(now).tm_sec, self.period)

    def debug(self) -> str:
        """Отладочный дамп без значения секрета"""
        lines = [
            "OTPToken {",
            f"  type      = {self.type_name}",
            f"  label     = {self.label}",
            f"  secret    = {'(empty)' if not self.secret else '(not empty)'}",
            f"  digits    = {self.digits}",
            f"  period    = {self.period}",
            f"  counter   = {self.counter}",
            f"  algorithm = {self.algorithm_string()}",
            "}",
        ]
        return "\n".join(lines)

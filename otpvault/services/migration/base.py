"""
Базовые типы миграции токенов старого формата.

Содержит:
- MigrationStatus - статус конвертации одного токена
- MigrationResult - результат конвертации одного токена
- MigrationReport - итог пакетной конвертации
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ...models import OTPToken


class MigrationStatus(Enum):
    """Статус миграции токена"""
    SUCCESS = "success"
    SKIPPED = "skipped"


@dataclass
class MigrationResult:
    """
    Результат конвертации одного токена.

    Attributes:
        index: Позиция токена во входной последовательности
        status: SUCCESS или SKIPPED
        token: Новый токен (только при SUCCESS)
        reason: Причина пропуска (только при SKIPPED)
    """
    index: int
    status: MigrationStatus
    token: Optional[OTPToken] = None
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.status is MigrationStatus.SUCCESS


@dataclass
class MigrationReport:
    """Итог пакетной миграции"""
    results: List[MigrationResult] = field(default_factory=list)

    @property
    def tokens(self) -> List[OTPToken]:
        return [r.token for r in self.results if r.ok]

    @property
    def skipped(self) -> List[MigrationResult]:
        return [r for r in self.results if not r.ok]

"""
Миграция токенов старого формата
"""

from .base import MigrationStatus, MigrationResult, MigrationReport
from .adapter import (
    DEFAULT_TYPE_MAP,
    default_classifier,
    migrate_token,
    migrate_tokens,
)
from ...models.legacy import remaining_validity

__all__ = [
    'MigrationStatus',
    'MigrationResult',
    'MigrationReport',
    'DEFAULT_TYPE_MAP',
    'default_classifier',
    'migrate_token',
    'migrate_tokens',
    'remaining_validity',
]

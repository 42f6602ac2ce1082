"""
Конвертация токенов старого формата в OTPToken.

Правило выбора нового типа - внешняя политика (classify). Адаптер только
гарантирует, что label, secret, digits, period, counter и algorithm
переносятся без изменений, а новый токен не делит состояние со старым.
"""

from typing import Callable, Iterable, Optional

from ...core.exceptions import MigrationError
from ...models import LegacyOTPToken, LegacyTokenType, OTPToken, TokenType
from ...utils.logging import get_logger
from .base import MigrationReport, MigrationResult, MigrationStatus

logger = get_logger(__name__)

Classifier = Callable[[LegacyTokenType], Optional[TokenType]]


DEFAULT_TYPE_MAP = {
    LegacyTokenType.TOTP: TokenType.TOTP,
    LegacyTokenType.HOTP: TokenType.HOTP,
    LegacyTokenType.STEAM: TokenType.STEAM,
    # Authy - обычный TOTP с другими параметрами по умолчанию
    LegacyTokenType.AUTHY: TokenType.TOTP,
}


def default_classifier(legacy_type: LegacyTokenType) -> Optional[TokenType]:
    """Политика по умолчанию; None для типов без соответствия (NONE)"""
    return DEFAULT_TYPE_MAP.get(legacy_type)


def migrate_token(legacy: LegacyOTPToken, classify: Classifier = default_classifier) -> OTPToken:
    """
    Сконвертировать один токен.

    Args:
        legacy: Токен старого формата
        classify: Политика выбора нового типа

    Returns:
        Новый токен с теми же значениями полей

    Raises:
        MigrationError: Политика не знает, во что превратить этот тип
    """
    new_type = classify(legacy.type)
    if new_type is None:
        raise MigrationError(f"Нет соответствия для типа {legacy.type.name} ({legacy.type_name!r})")

    # str неизменяемы, поэтому копирование значений не создаёт общих буферов
    return OTPToken(
        new_type,
        label=legacy.label,
        secret=legacy.secret,
        digits=legacy.digits,
        period=legacy.period,
        counter=legacy.counter,
        algorithm=legacy.algorithm,
    )


def migrate_tokens(
    legacy_tokens: Iterable[LegacyOTPToken],
    classify: Classifier = default_classifier
) -> MigrationReport:
    """
    Пакетная миграция.

    Невалидные и неклассифицируемые токены пропускаются, остальные
    конвертируются в исходном порядке.
    """
    report = MigrationReport()

    for index, legacy in enumerate(legacy_tokens):
        if not legacy.valid():
            report.results.append(MigrationResult(
                index=index,
                status=MigrationStatus.SKIPPED,
                reason="пустые label и secret"
            ))
            continue

        try:
            token = migrate_token(legacy, classify)
        except MigrationError as e:
            report.results.append(MigrationResult(
                index=index,
                status=MigrationStatus.SKIPPED,
                reason=str(e)
            ))
            continue

        report.results.append(MigrationResult(
            index=index,
            status=MigrationStatus.SUCCESS,
            token=token
        ))

    logger.info(
        f"Миграция токенов: сконвертировано {len(report.tokens)}, "
        f"пропущено {len(report.skipped)}"
    )
    return report

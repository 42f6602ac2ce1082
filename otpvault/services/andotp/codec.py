"""
Преобразование токенов в JSON andOTP и обратно.

Схема записи (корень - JSON-массив):
    {
        "secret": "", "label": "",
        "period": 30,            # TOTP/STEAM
        "counter": 0,            # HOTP
        "digits": 6,
        "type": "TOTP/HOTP/STEAM",
        "algorithm": "SHA1",
        "thumbnail": "Default", "last_used": 0, "tags": []
    }

Импорт терпим к отдельным битым записям: такая запись пропускается,
остальные импортируются. Нечитаемый документ или корень не-массив - ошибка
всего импорта (CodecError).
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import ValidationError

from ...config import get_settings
from ...core.exceptions import CodecError
from ...models import OTPToken, TokenType
from ...utils.logging import get_logger
from .constants import (
    DEFAULT_LAST_USED,
    DEFAULT_THUMBNAIL,
    REQUIRED_FIELDS,
    STEAM_ALGORITHM,
    STEAM_DEFAULT_PERIOD,
    STEAM_DIGITS,
    TYPE_NAMES,
)
from .schemas import ENTRY_SCHEMAS, HotpEntry, SteamEntry, TotpEntry

logger = get_logger(__name__)


@dataclass
class EntryResult:
    """
    Результат разбора одной записи массива.

    Attributes:
        index: Позиция записи в массиве
        token: Токен, если запись разобрана
        reason: Причина пропуска, если нет
    """
    index: int
    token: Optional[OTPToken] = None
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.token is not None


@dataclass
class ParseReport:
    """Итог разбора документа andOTP"""
    results: List[EntryResult] = field(default_factory=list)

    @property
    def tokens(self) -> List[OTPToken]:
        return [r.token for r in self.results if r.ok]

    @property
    def skipped(self) -> List[EntryResult]:
        return [r for r in self.results if not r.ok]


# ==================== EXPORT ====================

def token_to_entry(token: OTPToken) -> Dict[str, Any]:
    """Сериализовать токен в запись andOTP"""
    type_name = TYPE_NAMES.get(token.type)
    if type_name is None:
        raise CodecError(f"Неизвестный тип токена: {token.type!r}")

    entry: Dict[str, Any] = {
        "secret": token.secret,
        "label": token.label,
    }

    # Поля, не относящиеся к типу, не пишем
    if token.type.is_time_based:
        entry["period"] = token.period
    else:
        entry["counter"] = token.counter

    entry["digits"] = token.digits
    entry["type"] = type_name

    if token.type is TokenType.STEAM:
        entry["algorithm"] = STEAM_ALGORITHM.name
        entry["digits"] = STEAM_DIGITS
    else:
        entry["algorithm"] = token.algorithm_name

    entry["thumbnail"] = DEFAULT_THUMBNAIL
    entry["last_used"] = DEFAULT_LAST_USED
    entry["tags"] = []

    return entry


def tokens_to_json(tokens: Iterable[OTPToken]) -> str:
    """
    Сериализовать коллекцию токенов в JSON-массив andOTP.

    Raises:
        CodecError: Токен не удалось сериализовать
    """
    entries = [token_to_entry(token) for token in tokens]

    try:
        return json.dumps(entries, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise CodecError(f"Ошибка сериализации JSON: {e}") from e


# ==================== IMPORT ====================

def _reject_constant(name: str):
    # NaN/Infinity не являются валидным JSON
    raise ValueError(f"Недопустимая константа JSON: {name}")


def _describe(error: ValidationError) -> str:
    # Только имена полей: значения могут содержать секрет
    fields = sorted({".".join(str(part) for part in err["loc"]) for err in error.errors()})
    return "неверные поля: " + ", ".join(fields)


def entry_to_token(
    entry: Any,
    index: int = 0,
    steam_period: int = STEAM_DEFAULT_PERIOD
) -> EntryResult:
    """
    Разобрать одну запись andOTP.

    Никогда не бросает исключений: любая проблема записи превращается
    в EntryResult с причиной пропуска.

    Args:
        entry: Элемент JSON-массива
        index: Позиция элемента в массиве
        steam_period: Период для записей STEAM без валидного period
    """
    if not isinstance(entry, dict):
        return EntryResult(index=index, reason="запись не является объектом")

    missing = [name for name in REQUIRED_FIELDS if name not in entry]
    if missing:
        return EntryResult(index=index, reason=f"нет обязательных полей: {', '.join(missing)}")

    type_name = entry["type"]
    schema = ENTRY_SCHEMAS.get(type_name) if isinstance(type_name, str) else None
    if schema is None:
        return EntryResult(index=index, reason=f"неизвестный тип: {type_name!r}")

    try:
        parsed = schema.model_validate(entry)
    except ValidationError as e:
        return EntryResult(index=index, reason=_describe(e))

    if isinstance(parsed, TotpEntry):
        token = OTPToken(TokenType.TOTP, label=parsed.label, secret=parsed.secret)
        token.period = parsed.period
        token.digits = parsed.digits
        token.set_algorithm(parsed.algorithm)
    elif isinstance(parsed, HotpEntry):
        token = OTPToken(TokenType.HOTP, label=parsed.label, secret=parsed.secret)
        token.counter = parsed.counter
        token.digits = parsed.digits
        token.set_algorithm(parsed.algorithm)
    elif isinstance(parsed, SteamEntry):
        token = OTPToken(TokenType.STEAM, label=parsed.label, secret=parsed.secret)
        token.period = parsed.period if parsed.period is not None else steam_period
        token.digits = STEAM_DIGITS
        token.algorithm = STEAM_ALGORITHM
    else:
        return EntryResult(index=index, reason=f"неизвестный тип: {type_name!r}")

    return EntryResult(index=index, token=token)


def parse_entries(text: Union[str, bytes]) -> ParseReport:
    """
    Разобрать документ andOTP.

    Args:
        text: JSON-текст

    Returns:
        ParseReport с разобранными и пропущенными записями

    Raises:
        CodecError: Документ не парсится или корень не массив
        ValidationError: Неверные настройки OTPVAULT_*
    """
    steam_period = get_settings().STEAM_DEFAULT_PERIOD

    try:
        document = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, TypeError, RecursionError) as e:
        raise CodecError(f"Файл повреждён: невалидный JSON ({type(e).__name__})") from e

    if not isinstance(document, list):
        raise CodecError("Корневой элемент JSON должен быть массивом")

    report = ParseReport()
    for index, entry in enumerate(document):
        result = entry_to_token(entry, index, steam_period)
        if not result.ok:
            logger.debug(f"Запись #{index} пропущена: {result.reason}")
        report.results.append(result)

    return report

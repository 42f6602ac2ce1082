"""
Сервис импорта/экспорта токенов в формате andOTP.

Позволяет:
- Экспортировать токены в JSON-бэкап andOTP (открытый или зашифрованный)
- Импортировать токены из такого бэкапа
- Использовать пароль для шифрования AES-256-GCM, совместимого с andOTP
"""

from pathlib import Path
from typing import Iterable, List, Union

from ...models import OTPToken
from .constants import ExportType, IV_SIZE, TAG_SIZE
from .crypto import AndOtpCrypto
from .codec import (
    EntryResult,
    ParseReport,
    entry_to_token,
    parse_entries,
    token_to_entry,
    tokens_to_json,
)
from .exporter import AndOtpExporter
from .importer import AndOtpImporter


def export_tokens(
    target: Union[str, Path],
    tokens: Iterable[OTPToken],
    export_type: ExportType = ExportType.ENCRYPTED,
    password: str = ""
) -> bool:
    """Экспортировать токены в файл на локальной ФС"""
    return AndOtpExporter().export_tokens(target, tokens, export_type, password)


def import_tokens(
    source: Union[str, Path],
    target: List[OTPToken],
    export_type: ExportType = ExportType.ENCRYPTED,
    password: str = ""
) -> bool:
    """Импортировать токены из файла на локальной ФС"""
    return AndOtpImporter().import_tokens(source, target, export_type, password)


__all__ = [
    'ExportType',
    'IV_SIZE',
    'TAG_SIZE',
    'AndOtpCrypto',
    'EntryResult',
    'ParseReport',
    'entry_to_token',
    'parse_entries',
    'token_to_entry',
    'tokens_to_json',
    'AndOtpExporter',
    'AndOtpImporter',
    'export_tokens',
    'import_tokens',
]

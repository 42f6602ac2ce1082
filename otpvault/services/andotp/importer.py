"""
Модуль импорта токенов из бэкапа andOTP.

Цепочка: чтение файла -> (расшифровка) -> JSON -> токены.
Ошибка чтения, расшифровки или структуры документа - импорт целиком
не удался, в целевой список ничего не добавляется. Отдельные битые записи
пропускаются.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from ...models import OTPToken
from ..storage import FileStatus, FileSystemStorage, TokenStorage
from .codec import ParseReport, parse_entries
from .constants import ExportType
from .crypto import AndOtpCrypto

logger = logging.getLogger(__name__)


class AndOtpImporter:
    """
    Импортёр токенов.

    Добавляет разобранные токены в конец списка, переданного вызывающим.
    """

    def __init__(self, storage: Optional[TokenStorage] = None):
        """
        Инициализация импортёра.

        Args:
            storage: Хранилище файлов (по умолчанию локальная ФС)
        """
        self.storage = storage if storage is not None else FileSystemStorage()
        self.crypto = AndOtpCrypto()

    def read_report(
        self,
        source: Union[str, Path],
        export_type: ExportType = ExportType.ENCRYPTED,
        password: str = ""
    ) -> Optional[ParseReport]:
        """
        Прочитать и разобрать бэкап без добавления токенов.

        Returns:
            ParseReport или None при ошибке чтения/расшифровки/структуры
        """
        try:
            status, data = self.storage.read_file(source)
            if status is not FileStatus.SUCCESS:
                logger.error(f"Импорт прерван: не удалось прочитать {source}")
                return None

            if not data:
                logger.error(f"Импорт прерван: файл {source} пуст")
                return None

            if export_type is ExportType.ENCRYPTED:
                success, data, error = self.crypto.decrypt(data, password)
                if not success:
                    logger.error(f"Импорт прерван: {error}")
                    return None
            elif export_type is not ExportType.PLAIN_TEXT:
                logger.error(f"Неизвестный вид импорта: {export_type!r}")
                return None

            return parse_entries(data.decode('utf-8'))

        except Exception as e:
            logger.error(f"Ошибка импорта: {type(e).__name__}: {e}")
            return None

    def import_tokens(
        self,
        source: Union[str, Path],
        target: List[OTPToken],
        export_type: ExportType = ExportType.ENCRYPTED,
        password: str = ""
    ) -> bool:
        """
        Импортировать токены из файла.

        Args:
            source: Путь к файлу бэкапа
            target: Список, в конец которого добавляются токены
            export_type: PLAIN_TEXT или ENCRYPTED
            password: Пароль для расшифровки (для ENCRYPTED)

        Returns:
            True если документ прочитан (даже если часть записей пропущена)
        """
        report = self.read_report(source, export_type, password)
        if report is None:
            return False

        tokens = report.tokens
        target.extend(tokens)

        if report.skipped:
            logger.warning(f"Импорт: пропущено записей {len(report.skipped)}")
        logger.info(f"Импорт завершён: {len(tokens)} токенов из {source}")
        return True

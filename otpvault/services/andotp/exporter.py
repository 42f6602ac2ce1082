"""
Модуль экспорта токенов в бэкап andOTP.

Цепочка: токены -> JSON -> (шифрование) -> запись файла.
Ошибка на любом шаге прерывает экспорт, файл не пишется.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from ...models import OTPToken
from ..storage import FileStatus, FileSystemStorage, TokenStorage
from .codec import tokens_to_json
from .constants import ExportType
from .crypto import AndOtpCrypto

logger = logging.getLogger(__name__)


class AndOtpExporter:
    """
    Экспортёр токенов.

    Создаёт JSON-бэкап andOTP, открытый или зашифрованный паролем,
    который можно импортировать в andOTP или обратно в otpvault.
    """

    def __init__(self, storage: Optional[TokenStorage] = None):
        """
        Инициализация экспортёра.

        Args:
            storage: Хранилище файлов (по умолчанию локальная ФС)
        """
        self.storage = storage if storage is not None else FileSystemStorage()
        self.crypto = AndOtpCrypto()

    def export_tokens(
        self,
        target: Union[str, Path],
        tokens: Iterable[OTPToken],
        export_type: ExportType = ExportType.ENCRYPTED,
        password: str = ""
    ) -> bool:
        """
        Экспортировать токены в файл.

        Args:
            target: Путь к файлу бэкапа
            tokens: Токены для экспорта
            export_type: PLAIN_TEXT или ENCRYPTED
            password: Пароль для шифрования (для ENCRYPTED)

        Returns:
            True если файл записан
        """
        try:
            tokens = list(tokens)
            json_data = tokens_to_json(tokens).encode('utf-8')

            if export_type is ExportType.PLAIN_TEXT:
                data = json_data
            elif export_type is ExportType.ENCRYPTED:
                success, data, error = self.crypto.encrypt(json_data, password)
                if not success:
                    logger.error(f"Экспорт прерван: {error}")
                    return False
            else:
                logger.error(f"Неизвестный вид экспорта: {export_type!r}")
                return False

            status = self.storage.write_file(target, data)
            if status is not FileStatus.SUCCESS:
                logger.error(f"Экспорт прерван: не удалось записать {target}")
                return False

        except Exception as e:
            logger.error(f"Ошибка экспорта: {type(e).__name__}: {e}")
            return False

        logger.info(f"Экспорт завершён: {len(tokens)} токенов -> {target} ({export_type.value})")
        return True

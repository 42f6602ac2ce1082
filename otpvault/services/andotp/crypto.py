"""
Криптографический модуль для зашифрованных бэкапов andOTP.

Использует:
- SHA-256 от пароля как ключ (без соли и итераций - так делает andOTP)
- AES-256-GCM для шифрования данных
- Уникальный случайный IV для каждого бэкапа

Формат зашифрованного файла:
[IV (12)][ENCRYPTED_DATA][AUTH_TAG (16)]

Деривация ключа слабая против перебора паролей офлайн, но менять её нельзя:
иначе файлы перестанут открываться в andOTP.
"""

import os
import hashlib
import logging
from contextlib import contextmanager
from typing import Iterator, Optional, Tuple

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from .constants import IV_SIZE, TAG_SIZE

logger = logging.getLogger(__name__)


@contextmanager
def random_iv(size: int) -> Iterator[bytearray]:
    """
    Выделить буфер со случайным IV.

    Буфер затирается нулями на выходе, в том числе при исключении.
    """
    iv = bytearray(os.urandom(size))
    try:
        yield iv
    finally:
        for i in range(len(iv)):
            iv[i] = 0


class AndOtpCrypto:
    """
    Класс для шифрования/дешифрования бэкапов andOTP.

    Объект не хранит ключей и контекстов шифра: каждый вызов создаёт свои,
    поэтому один экземпляр можно использовать из разных потоков.
    """

    IV_SIZE = IV_SIZE  # 96 бит для GCM
    TAG_SIZE = TAG_SIZE  # 128 бит

    @staticmethod
    def derive_key(password: str) -> bytes:
        """
        Получить ключ шифрования из пароля пользователя.

        Args:
            password: Пароль пользователя

        Returns:
            32 байта SHA-256 или пустой ключ для пустого пароля
        """
        if not password:
            return b""
        return hashlib.sha256(password.encode('utf-8')).digest()

    def encrypt(self, data: bytes, password: str) -> Tuple[bool, Optional[bytes], str]:
        """
        Зашифровать данные с использованием пароля.

        Args:
            data: Данные для шифрования (не пустые)
            password: Пароль пользователя

        Returns:
            (success, encrypted_data, error_message)
        """
        if not data:
            return False, None, "Нет данных для шифрования"

        try:
            with random_iv(self.IV_SIZE) as iv:
                aesgcm = AESGCM(self.derive_key(password))
                # AESGCM возвращает ciphertext || tag
                encrypted_data = aesgcm.encrypt(bytes(iv), bytes(data), None)
                result = bytes(iv) + encrypted_data
        except Exception as e:
            logger.error(f"Ошибка шифрования: {type(e).__name__}: {e}")
            return False, None, f"Ошибка шифрования: {e}"

        logger.info(f"Данные зашифрованы: {len(data)} байт -> {len(result)} байт")

        return True, result, ""

    def decrypt(self, encrypted_data: bytes, password: str) -> Tuple[bool, Optional[bytes], str]:
        """
        Расшифровать данные с использованием пароля.

        Args:
            encrypted_data: Зашифрованные данные
            password: Пароль пользователя

        Returns:
            (success, data, error_message)
        """
        # Проверяем минимальный размер до любой криптографии
        if encrypted_data is None or len(encrypted_data) < self.IV_SIZE + self.TAG_SIZE:
            return False, None, "Файл повреждён или имеет неверный формат"

        try:
            nonce = bytes(encrypted_data[:self.IV_SIZE])
            ciphertext = bytes(encrypted_data[self.IV_SIZE:])

            aesgcm = AESGCM(self.derive_key(password))

            try:
                decrypted_data = aesgcm.decrypt(nonce, ciphertext, None)
            except InvalidTag:
                return False, None, "Неверный пароль или файл повреждён"

        except Exception as e:
            logger.error(f"Ошибка расшифровки: {type(e).__name__}: {e}")
            return False, None, f"Ошибка расшифровки: {e}"

        logger.info(f"Данные расшифрованы: {len(encrypted_data)} байт -> {len(decrypted_data)} байт")

        return True, decrypted_data, ""

    def verify_password(self, encrypted_data: bytes, password: str) -> bool:
        """
        Проверить правильность пароля.

        Args:
            encrypted_data: Зашифрованные данные
            password: Пароль для проверки

        Returns:
            True если пароль верный
        """
        success, _, _ = self.decrypt(encrypted_data, password)
        return success

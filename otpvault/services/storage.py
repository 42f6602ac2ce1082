"""
Чтение и запись файлов бэкапов.

Ядро импорта/экспорта работает с хранилищем только через контракт
TokenStorage: read_file(path) -> (status, bytes), write_file(path, data) -> status.
FileSystemStorage - реализация для локальной файловой системы.
"""

import os
import logging
import tempfile
from enum import Enum
from pathlib import Path
from typing import Protocol, Tuple, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class FileStatus(Enum):
    """Результат операции с файлом"""
    SUCCESS = "success"
    FAILURE = "failure"


class TokenStorage(Protocol):
    """Контракт хранилища файлов"""

    def read_file(self, path: PathLike) -> Tuple[FileStatus, bytes]:
        ...

    def write_file(self, path: PathLike, data: bytes) -> FileStatus:
        ...


class FileSystemStorage:
    """
    Хранилище на локальной файловой системе.

    Запись атомарная: данные пишутся во временный файл рядом с целевым,
    сбрасываются на диск и переименовываются поверх. При ошибке целевой
    файл остаётся нетронутым.
    """

    def read_file(self, path: PathLike) -> Tuple[FileStatus, bytes]:
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            logger.error(f"Не удалось прочитать файл {path}: {e}")
            return FileStatus.FAILURE, b""
        return FileStatus.SUCCESS, data

    def write_file(self, path: PathLike, data: bytes) -> FileStatus:
        target = Path(path)
        if isinstance(data, str):
            data = data.encode('utf-8')

        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{target.name}.",
                suffix=".tmp",
                dir=str(target.parent)
            )
            with os.fdopen(fd, 'wb') as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, target)
            tmp_path = None
        except OSError as e:
            logger.error(f"Не удалось записать файл {target}: {e}")
            return FileStatus.FAILURE
        finally:
            if tmp_path is not None:
                try:
                    os.unlink(tmp_path)
                except OSError:
                    pass

        logger.info(f"Файл записан: {target} ({len(data)} байт)")
        return FileStatus.SUCCESS

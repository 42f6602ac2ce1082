"""
Константы формата andOTP
"""

from enum import Enum

from ...models import ShaAlgorithm, TokenType


class ExportType(Enum):
    """Вид файла бэкапа"""
    PLAIN_TEXT = "plain"
    ENCRYPTED = "encrypted"


# Размер IV перед шифротекстом
IV_SIZE = 12

# Размер тега аутентификации в конце файла
TAG_SIZE = 16

# Имена типов в JSON
TYPE_NAMES = {
    TokenType.TOTP: "TOTP",
    TokenType.HOTP: "HOTP",
    TokenType.STEAM: "STEAM",
}

# Обязательные поля любой записи
REQUIRED_FIELDS = ("type", "secret", "label")

# Заглушки полей, которые ядро не заполняет
DEFAULT_THUMBNAIL = "Default"
DEFAULT_LAST_USED = 0

# Steam всегда экспортируется как 5 цифр SHA1
STEAM_DIGITS = 5
STEAM_ALGORITHM = ShaAlgorithm.SHA1

# Период Steam, если в записи его нет (переопределяется OTPVAULT_STEAM_DEFAULT_PERIOD)
STEAM_DEFAULT_PERIOD = 30

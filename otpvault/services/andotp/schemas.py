from typing import Annotated, Optional

from pydantic import BaseModel, Field, StrictStr, ValidationError, field_validator

from ...models import (
    MAX_COUNTER,
    MAX_DIGITS,
    MAX_PERIOD,
    MIN_COUNTER,
    MIN_DIGITS,
    MIN_PERIOD,
)


# Целые JSON без приведения строк, bool и float, в пределах модели токена
Digits = Annotated[int, Field(strict=True, ge=MIN_DIGITS, le=MAX_DIGITS)]
Period = Annotated[int, Field(strict=True, ge=MIN_PERIOD, le=MAX_PERIOD)]
Counter = Annotated[int, Field(strict=True, ge=MIN_COUNTER, le=MAX_COUNTER)]


# andOTP entry schemas
class AndOtpEntryBase(BaseModel):
    """Поля, обязательные для любого типа"""
    type: StrictStr
    secret: StrictStr
    label: StrictStr


class TotpEntry(AndOtpEntryBase):
    period: Period
    digits: Digits
    algorithm: StrictStr


class HotpEntry(AndOtpEntryBase):
    counter: Counter
    digits: Digits
    algorithm: StrictStr


class SteamEntry(AndOtpEntryBase):
    # digits и algorithm у Steam фиксированы, period необязателен
    period: Optional[Period] = None

    @field_validator("period", mode="wrap")
    @classmethod
    def drop_invalid_period(cls, value, handler):
        """Неверный period не отбрасывает запись: берётся период по умолчанию"""
        try:
            return handler(value)
        except ValidationError:
            return None


ENTRY_SCHEMAS = {
    "TOTP": TotpEntry,
    "HOTP": HotpEntry,
    "STEAM": SteamEntry,
}

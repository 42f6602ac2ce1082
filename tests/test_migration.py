"""
Тесты токена старого формата и миграции в OTPToken
"""
import time

import pytest

from otpvault.core.exceptions import MigrationError
from otpvault.models import (
    LegacyOTPToken,
    LegacyTokenType,
    OTPToken,
    ShaAlgorithm,
    TokenType,
)
from otpvault.services.migration import (
    MigrationStatus,
    default_classifier,
    migrate_token,
    migrate_tokens,
    remaining_validity,
)


@pytest.fixture
def legacy_totp() -> LegacyOTPToken:
    """
    Токен старого формата TOTP.

    Returns:
        LegacyOTPToken: TOTP с иконкой и текстовым типом
    """
    token = LegacyOTPToken(
        type=LegacyTokenType.TOTP,
        type_name="TOTP",
        label="Mail",
        icon="mail.png",
        secret="JBSWY3DPEHPK3PXP",
        digits=7,
        period=45,
        counter=3,
    )
    token.set_algorithm("sha512")
    return token


# ==================== VALIDITY WINDOW ====================

class TestRemainingValidity:

    def test_wraps_when_second_exceeds_period(self):
        assert remaining_validity(45, 30) == 16

    def test_adds_one_second_buffer(self):
        assert remaining_validity(10, 60) == 51
        assert remaining_validity(0, 30) == 31
        assert remaining_validity(30, 30) == 1

    def test_small_period(self):
        # 7 - (59 % 7) + 1
        assert remaining_validity(59, 7) == 5

    @pytest.mark.parametrize("second", [0, 1, 29, 45, 59])
    def test_zero_period(self, second):
        assert remaining_validity(second, 0) == 0

    def test_never_negative(self):
        for period in range(1, 121):
            for second in range(0, 61):
                assert remaining_validity(second, period) >= 1

    def test_token_uses_local_wall_clock(self, legacy_totp):
        # Секунда минуты 45 (смещения часовых поясов кратны минуте)
        now = 1_699_999_980 + 45
        assert time.localtime(now).tm_sec == 45

        legacy_totp.period = 30
        assert legacy_totp.remaining_token_validity(now) == 16

        legacy_totp.period = 0
        assert legacy_totp.remaining_token_validity(now) == 0


# ==================== LEGACY MODEL ====================

class TestLegacyToken:

    def test_defaults(self):
        token = LegacyOTPToken()
        assert token.type is LegacyTokenType.NONE
        assert token.type_name == ""
        assert token.algorithm is ShaAlgorithm.INVALID
        assert not token.valid()

    def test_limits(self):
        assert LegacyOTPToken.MIN_DIGITS == 3
        assert LegacyOTPToken.MAX_DIGITS == 10
        assert LegacyOTPToken.MIN_PERIOD == 1
        assert LegacyOTPToken.MAX_PERIOD == 120
        assert LegacyOTPToken.MIN_COUNTER == 0
        assert LegacyOTPToken.MAX_COUNTER == 0x7FFFFFFF

    def test_algorithm_string(self, legacy_totp):
        assert legacy_totp.algorithm_string() == "SHA512"
        legacy_totp.set_algorithm("whirlpool")
        assert legacy_totp.algorithm_string() == "(invalid)"

    def test_copy_is_independent(self, legacy_totp):
        copy = legacy_totp.copy()
        assert copy == legacy_totp

        legacy_totp.clear()
        assert copy.secret == "JBSWY3DPEHPK3PXP"
        assert copy.label == "Mail"
        assert copy.icon == "mail.png"

    def test_clear_wipes_everything(self, legacy_totp):
        legacy_totp.clear()
        assert legacy_totp == LegacyOTPToken()

    def test_debug_hides_secret(self, legacy_totp):
        dump = legacy_totp.debug()
        assert "JBSWY3DPEHPK3PXP" not in dump
        assert "secret    = (not empty)" in dump
        assert "algorithm = SHA512" in dump

        legacy_totp.secret = ""
        assert "secret    = (empty)" in legacy_totp.debug()

    def test_repr_hides_secret(self, legacy_totp):
        assert "JBSWY3DPEHPK3PXP" not in repr(legacy_totp)


# ==================== MIGRATION ====================

class TestMigrateToken:

    def test_preserves_fields(self, legacy_totp):
        token = migrate_token(legacy_totp)

        assert token == OTPToken(
            TokenType.TOTP,
            label="Mail",
            secret="JBSWY3DPEHPK3PXP",
            digits=7,
            period=45,
            counter=3,
            algorithm=ShaAlgorithm.SHA512,
        )

    def test_result_outlives_legacy(self, legacy_totp):
        token = migrate_token(legacy_totp)
        legacy_totp.clear()

        assert token.secret == "JBSWY3DPEHPK3PXP"
        assert token.label == "Mail"
        assert token.algorithm is ShaAlgorithm.SHA512

    @pytest.mark.parametrize("legacy_type,expected", [
        (LegacyTokenType.TOTP, TokenType.TOTP),
        (LegacyTokenType.HOTP, TokenType.HOTP),
        (LegacyTokenType.STEAM, TokenType.STEAM),
        (LegacyTokenType.AUTHY, TokenType.TOTP),
    ])
    def test_default_classifier(self, legacy_type, expected):
        legacy = LegacyOTPToken(type=legacy_type, label="x")
        assert migrate_token(legacy).type is expected

    def test_unclassifiable_type(self):
        assert default_classifier(LegacyTokenType.NONE) is None
        with pytest.raises(MigrationError):
            migrate_token(LegacyOTPToken(label="orphan"))

    def test_custom_classifier(self, legacy_totp):
        token = migrate_token(legacy_totp, classify=lambda legacy_type: TokenType.STEAM)
        assert token.type is TokenType.STEAM
        assert token.digits == 7


class TestMigrateTokens:

    def test_batch_skips_bad_tokens_and_keeps_order(self, legacy_totp):
        hotp = LegacyOTPToken(type=LegacyTokenType.HOTP, label="VPN", counter=9)
        empty = LegacyOTPToken(type=LegacyTokenType.TOTP)
        untyped = LegacyOTPToken(label="unknown")

        report = migrate_tokens([legacy_totp, empty, hotp, untyped])

        assert [t.label for t in report.tokens] == ["Mail", "VPN"]
        assert [r.index for r in report.skipped] == [1, 3]
        assert all(r.status is MigrationStatus.SKIPPED for r in report.skipped)
        assert all(r.reason for r in report.skipped)
        assert report.results[2].token.counter == 9

    def test_empty_input(self):
        report = migrate_tokens([])
        assert report.tokens == []
        assert report.skipped == []

"""Unit tests for Settings"""

from pydantic import ValidationError
import pytest

from src.platform.config.core_setting import Settings


@pytest.mark.unit
class TestSettings:
    def test_reference_policy_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in (
            'MAX_TICKETS_PER_PURCHASE',
            'ADULT_TICKET_PRICE',
            'CHILD_TICKET_PRICE',
            'INFANT_TICKET_PRICE',
        ):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.MAX_TICKETS_PER_PURCHASE == 20
        assert settings.ADULT_TICKET_PRICE == 20
        assert settings.CHILD_TICKET_PRICE == 10
        assert settings.INFANT_TICKET_PRICE == 0

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('MAX_TICKETS_PER_PURCHASE', '6')
        monkeypatch.setenv('CHILD_TICKET_PRICE', '7')

        settings = Settings(_env_file=None)

        assert settings.MAX_TICKETS_PER_PURCHASE == 6
        assert settings.CHILD_TICKET_PRICE == 7

    def test_negative_price_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, ADULT_TICKET_PRICE=-1)

    def test_zero_cap_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, MAX_TICKETS_PER_PURCHASE=0)

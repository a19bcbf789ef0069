"""Tests for the settings service."""

import pytest
from decimal import Decimal

from budgetbook.domain.errors import ValidationError
from budgetbook.domain.settings import FIXED_MONTHLY_BUDGET_KEY


def test_get_setting_default(settings_service):
    """Test missing keys return the default."""
    assert settings_service.get_setting("missing") is None
    assert settings_service.get_setting("missing", "0") == "0"


def test_set_setting_stores_string(settings_service):
    """Test values are stored as strings and upserted."""
    settings_service.set_setting("theme", 1)
    settings_service.set_setting("theme", "dark")

    assert settings_service.get_setting("theme") == "dark"


def test_fixed_monthly_budget_roundtrip(settings_service):
    """Test saving Y with a comma decimal separator."""
    stored = settings_service.set_fixed_monthly_budget("1200,50")

    assert stored == Decimal("1200.50")
    assert settings_service.get_setting(FIXED_MONTHLY_BUDGET_KEY) == "1200.50"
    assert settings_service.get_fixed_monthly_budget() == Decimal("1200.50")


def test_fixed_monthly_budget_defaults_to_zero(settings_service):
    """Test Y reads as zero when never saved."""
    assert settings_service.get_fixed_monthly_budget() == Decimal("0")


@pytest.mark.parametrize("raw", ["", "abc", "NaN", "Infinity"])
def test_fixed_monthly_budget_bad_value_reads_zero(settings_service, raw):
    """Test empty, non-numeric and non-finite stored values read as zero."""
    settings_service.set_setting(FIXED_MONTHLY_BUDGET_KEY, raw)

    assert settings_service.get_fixed_monthly_budget() == Decimal("0")


def test_set_fixed_monthly_budget_rejects_text(settings_service):
    """Test saving a non-numeric Y is rejected."""
    with pytest.raises(ValidationError):
        settings_service.set_fixed_monthly_budget("a lot")

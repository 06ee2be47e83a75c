"""Tests for currency configuration use cases."""

from unittest.mock import MagicMock

import pytest

from dericer.application.use_cases.manage_currency_configs import (
    ListCurrencyConfigsUseCase,
    RegisterCurrencyConfigUseCase,
)
from dericer.domain.errors import ValidationError
from dericer.domain.models import CurrencyConfig


def test_list_currency_configs_returns_stored_configs() -> None:
    storage = MagicMock()
    configs = [CurrencyConfig(currency="USD", decimals=2, zero_minor_value=0)]
    storage.load_currency_configs.return_value = configs

    assert ListCurrencyConfigsUseCase(storage).execute() == configs


def test_register_replaces_existing_currency_config() -> None:
    storage = MagicMock()
    storage.load_currency_configs.return_value = [
        CurrencyConfig(currency="USD", decimals=2, zero_minor_value=0),
        CurrencyConfig(currency="EUR", decimals=2, zero_minor_value=0),
    ]
    use_case = RegisterCurrencyConfigUseCase(storage, logger=MagicMock())

    config = use_case.execute("USD", decimals=0, zero_minor_value=5)

    assert config == CurrencyConfig(currency="USD", decimals=0, zero_minor_value=5)
    storage.save_currency_configs.assert_called_once_with(
        [
            CurrencyConfig(currency="EUR", decimals=2, zero_minor_value=0),
            config,
        ]
    )


def test_register_rejects_invalid_decimals_without_saving() -> None:
    storage = MagicMock()
    use_case = RegisterCurrencyConfigUseCase(storage, logger=MagicMock())

    with pytest.raises(ValidationError):
        use_case.execute("BTC", decimals=8)

    storage.save_currency_configs.assert_not_called()

"""Use cases for currency configuration."""

from dericer.application.ports.storage import StoragePort
from dericer.domain.models import CurrencyConfig
from dericer.domain.services.currency import create_currency_config
from dericer.infrastructure.logging.logger import get_app_logger


class ListCurrencyConfigsUseCase:
    """Return the registered currency configurations."""

    def __init__(self, storage: StoragePort) -> None:
        """Initialize the use case with its required dependencies."""
        self._storage = storage

    def execute(self) -> list[CurrencyConfig]:
        """Return every stored configuration."""
        return self._storage.load_currency_configs()


class RegisterCurrencyConfigUseCase:
    """Add or replace the configuration of a currency."""

    def __init__(self, storage: StoragePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            storage: Port persisting ledger records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._storage = storage
        self._logger = logger or get_app_logger()

    def execute(
        self,
        currency: str,
        decimals: int | None = None,
        zero_minor_value: int | None = None,
    ) -> CurrencyConfig:
        """Validate the configuration and rewrite the collection.

        Raises:
            ValidationError: If decimals or the zero threshold are invalid.
        """
        config = create_currency_config(
            currency,
            decimals=decimals,
            zero_minor_value=zero_minor_value,
        )
        configs = [
            existing
            for existing in self._storage.load_currency_configs()
            if existing.currency != currency
        ]
        configs.append(config)
        self._storage.save_currency_configs(configs)
        self._logger.info(
            f"Registered currency {currency} decimals={config.decimals} "
            f"zero_minor_value={config.zero_minor_value}"
        )
        return config


__all__ = ["ListCurrencyConfigsUseCase", "RegisterCurrencyConfigUseCase"]

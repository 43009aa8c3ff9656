"""Application service for the business settings document.

Settings live in a single JSON object (``settings.json``), loaded on startup
and rewritten on every update. A change of base currency converts all stored
amounts first; the new currency is persisted only if that conversion fully
succeeded.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from shopdesk.application.services.currency_service import CurrencyService
from shopdesk.application.services.event_broadcaster import EventBroadcaster
from shopdesk.domain.currency import SUPPORTED_CURRENCIES
from shopdesk.domain.entities import BusinessSettings, merge_settings, utc_timestamp
from shopdesk.domain.entities.business_settings import BusinessInfo
from shopdesk.domain.exceptions import CurrencyConversionError, StorageReadError
from shopdesk.infrastructure.storage.json_file import read_json, write_json

logger = logging.getLogger(__name__)

SETTINGS_UPDATED_EVENT = "settings_updated"


class SettingsService:
    """Loads, merges and persists settings; broadcasts every saved change."""

    def __init__(
        self,
        settings_path: Path,
        update_lock: asyncio.Lock,
        currency_service: CurrencyService,
        broadcaster: EventBroadcaster | None = None,
        default_currency: str = "USD",
    ):
        self._path = settings_path
        self._lock = update_lock
        self._currency = currency_service
        self._broadcaster = broadcaster
        self._default_currency = default_currency

    def defaults(self) -> dict[str, Any]:
        return BusinessSettings(
            business_info=BusinessInfo(currency=self._default_currency)
        ).to_document()

    async def _read(self) -> BusinessSettings:
        defaults = self.defaults()
        stored = await asyncio.to_thread(read_json, self._path, defaults)
        if not isinstance(stored, dict):
            raise StorageReadError(str(self._path), "Expected a JSON object")
        return BusinessSettings.model_validate(merge_settings(defaults, stored))

    async def _write(self, settings: BusinessSettings) -> dict[str, Any]:
        document = settings.to_document()
        await asyncio.to_thread(write_json, self._path, document)
        if self._broadcaster is not None:
            await self._broadcaster.broadcast(SETTINGS_UPDATED_EVENT, document)
        return document

    async def load(self) -> BusinessSettings:
        """Current settings, with defaults filled in for missing fields.

        Creates the file with defaults when it does not exist yet.
        """
        return await self._read()

    async def update(self, changes: dict[str, Any]) -> BusinessSettings:
        """Merge ``changes`` into the stored settings and persist them.

        Raises:
            CurrencyConversionError: the base currency changed and at least one
                collection could not be converted. Settings are not saved,
                but collections converted before the failure stay converted.
        """
        async with self._lock:
            current = await self._read()
            updated = BusinessSettings.model_validate(
                merge_settings(current.to_document(), changes)
            )

            old_currency, new_currency = current.currency, updated.currency
            if old_currency != new_currency:
                logger.info("Base currency changing from %s to %s", old_currency, new_currency)
                outcome = await self._currency.convert_collections(old_currency, new_currency)
                if not outcome.succeeded:
                    raise CurrencyConversionError(old_currency, new_currency, outcome.failed)

            await self._write(updated)

        logger.info("Settings saved")
        return updated

    def validate_document(self, document: Any) -> BusinessSettings:
        """Build complete settings from a stored or uploaded document.

        Raises:
            ValueError: the document is malformed or names an unsupported currency.
        """
        if not isinstance(document, dict):
            raise ValueError("'settings' must be an object")
        try:
            settings = BusinessSettings.model_validate(merge_settings(self.defaults(), document))
        except ValidationError as exc:
            raise ValueError(f"Invalid settings: {exc.errors()[0]['msg']}") from exc
        if settings.currency not in SUPPORTED_CURRENCIES:
            raise ValueError(f"Unsupported currency in settings: {settings.currency!r}")
        return settings

    async def replace(self, settings: BusinessSettings) -> BusinessSettings:
        """Overwrite settings as-is, without any currency conversion (restore)."""
        async with self._lock:
            await self._write(settings)
        return settings

    async def record_backup(self) -> str:
        """Stamp ``backup.lastBackup`` with the current time and return it."""
        timestamp = utc_timestamp()
        async with self._lock:
            current = await self._read()
            current.backup.last_backup = timestamp
            await self._write(current)
        return timestamp

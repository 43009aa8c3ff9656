"""Application service for exporting and restoring a snapshot of the data files."""

import logging
from collections.abc import Mapping
from typing import Any

from shopdesk.application.interfaces import EntityStore
from shopdesk.application.services.settings_service import SettingsService
from shopdesk.domain.entities import BusinessSettings
from shopdesk.domain.exceptions import InvalidBackupError, StorageError

logger = logging.getLogger(__name__)

BACKUP_VERSION = "1.0.0"

# Collections included in a backup, besides the settings document
BACKUP_COLLECTIONS: tuple[str, ...] = ("customers", "inventory", "sales", "suppliers")


class BackupService:
    """Builds backup documents and writes them back."""

    def __init__(self, stores: Mapping[str, EntityStore], settings_service: SettingsService):
        self._stores = stores
        self._settings = settings_service

    async def create_backup(self) -> dict[str, Any]:
        """Snapshot settings and the backed-up collections.

        A file that cannot be read is exported as ``null`` so the rest of the
        backup is still usable.
        """
        backup: dict[str, Any] = {}

        try:
            backup["settings"] = (await self._settings.load()).to_document()
        except StorageError:
            logger.exception("Could not read settings for backup")
            backup["settings"] = None

        for name in BACKUP_COLLECTIONS:
            try:
                backup[name] = await self._stores[name].read_document()
            except StorageError:
                logger.exception("Could not read %s for backup", name)
                backup[name] = None

        created_at = await self._settings.record_backup()
        backup["metadata"] = {"createdAt": created_at, "version": BACKUP_VERSION}
        logger.info("Backup created at %s", created_at)
        return backup

    async def restore_backup(self, backup: Any) -> list[str]:
        """Write each section present in ``backup`` back to its file.

        Every section, down to the individual records, is validated before
        anything is written, so a rejected backup leaves all files untouched.

        Returns:
            Names of the restored sections.

        Raises:
            InvalidBackupError: missing metadata/version or a malformed section.
        """
        if not isinstance(backup, dict):
            raise InvalidBackupError("Backup must be a JSON object")
        metadata = backup.get("metadata")
        if not isinstance(metadata, dict) or not metadata.get("version"):
            raise InvalidBackupError("Invalid backup format: missing metadata.version")

        settings: BusinessSettings | None = None
        sections: dict[str, dict[str, Any]] = {}
        try:
            if backup.get("settings"):
                settings = self._settings.validate_document(backup["settings"])
            for name in BACKUP_COLLECTIONS:
                document = backup.get(name)
                if document is None:
                    continue
                self._stores[name].validate_document(document)
                sections[name] = document
        except ValueError as e:
            raise InvalidBackupError(f"Invalid backup format: {e}") from e

        restored: list[str] = []
        if settings is not None:
            await self._settings.replace(settings)
            restored.append("settings")
        for name, document in sections.items():
            await self._stores[name].write_document(document)
            restored.append(name)

        logger.info("Restored backup sections: %s", restored)
        return restored

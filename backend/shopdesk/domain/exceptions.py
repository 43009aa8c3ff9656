"""Domain-specific exceptions: framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class BusinessRuleError(Exception):
    """Raised when a request is well-formed but violates a business rule."""


class StorageError(Exception):
    """Base class for failures of the flat-file storage layer."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{message}: {path}")


class StorageReadError(StorageError):
    """Raised when a collection file exists but cannot be read or parsed.

    A missing file is never reported this way; it is an empty collection.
    """

    def __init__(self, path: str, reason: str = "Could not read collection file"):
        super().__init__(path, reason)


class StorageWriteError(StorageError):
    """Raised when a collection file cannot be written."""

    def __init__(self, path: str, reason: str = "Could not write collection file"):
        super().__init__(path, reason)


class UnknownCurrencyError(ValueError):
    """Raised when a conversion involves a currency outside the rate table."""

    def __init__(self, currency: str):
        self.currency = currency
        super().__init__(f"Unsupported currency: {currency!r}")


class CurrencyConversionError(Exception):
    """Raised when a multi-collection currency conversion did not fully succeed.

    Collections that were converted before the failure stay converted.
    """

    def __init__(self, from_currency: str, to_currency: str, failed: list[str]):
        self.from_currency = from_currency
        self.to_currency = to_currency
        self.failed = failed
        super().__init__(
            f"Currency conversion {from_currency} -> {to_currency} failed for: "
            f"{', '.join(failed)}"
        )


class InvalidBackupError(ValueError):
    """Raised when an uploaded backup document is not in the expected format."""

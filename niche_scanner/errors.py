"""
Exceptions surfaced to callers of the scoring engine.

Neither error is retryable: the scorer is a pure function, so calling it
again with the same catalog and profile fails the same way.
"""

from __future__ import annotations

from typing import Any, Iterable


class NicheScannerError(ValueError):
    """Base class for malformed-input errors raised by ``niche_scanner``."""


class EmptyCatalogError(NicheScannerError):
    """Raised when the catalog has no niches.

    Catalog-wide averages are undefined for zero records.
    """

    def __init__(self, source: str | None = None) -> None:
        self.source = source
        where = f" ({source})" if source else ""
        super().__init__(
            f"Catalog{where} contains no micro-niches; "
            "at least one record is required to rank and summarise."
        )


class InvalidEnumValueError(NicheScannerError):
    """Raised when a catalog record or profile value is outside its enumeration.

    Attributes:
        field:   Name of the offending field (e.g. ``"searchTrend"``).
        value:   The rejected raw value.
        allowed: Accepted values, for the error message.
        index:   Catalog record index, or ``None`` for profile values.
    """

    def __init__(
        self,
        field: str,
        value: Any,
        allowed: Iterable[str],
        index: int | None = None,
    ) -> None:
        self.field   = field
        self.value   = value
        self.allowed = tuple(allowed)
        self.index   = index
        where = f"Record at index {index}: " if index is not None else ""
        super().__init__(
            f"{where}invalid {field} {value!r}. "
            f"Valid values: {list(self.allowed)}"
        )

"""Base entity classes for all domain entities."""

from dataclasses import asdict, dataclass, field, fields
from datetime import datetime
from typing import Any, ClassVar


@dataclass
class BaseEntity:
    """Base class for all entities."""

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to dictionary."""
        return asdict(self)


@dataclass
class ResourceRecord(BaseEntity):
    """A normalized provider row bound to one location.

    Subclasses declare their payload columns as plain dataclass fields and name
    their table in ``TABLE``. The keyword-only fields are filled in by the store.
    """

    TABLE: ClassVar[str] = ""

    id: int | None = field(default=None, kw_only=True)
    location_id: int | None = field(default=None, kw_only=True)
    created_at: datetime | None = field(default=None, kw_only=True)

    @classmethod
    def columns(cls) -> list[str]:
        """Payload column names, in declaration order."""
        return [f.name for f in fields(cls) if not f.kw_only]

    def values(self) -> list[Any]:
        """Payload values matching ``columns()``."""
        return [getattr(self, name) for name in self.columns()]

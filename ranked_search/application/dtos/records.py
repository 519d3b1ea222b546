"""Read-model records returned by the default search targets."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SubjectRecord:
    """Subject row as returned by search (tenant-scoped)."""

    id: str
    tenant_id: str
    display_name: str | None
    external_ref: str | None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "SubjectRecord":
        return cls(
            id=row["id"],
            tenant_id=row["tenant_id"],
            display_name=row.get("display_name"),
            external_ref=row.get("external_ref"),
        )

    @property
    def display_title(self) -> str:
        return self.display_name or self.external_ref or self.id


@dataclass(frozen=True)
class EventRecord:
    """Event row as returned by search (tenant-scoped)."""

    id: str
    tenant_id: str
    subject_id: str
    event_type: str

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "EventRecord":
        return cls(
            id=row["id"],
            tenant_id=row["tenant_id"],
            subject_id=row["subject_id"],
            event_type=row["event_type"],
        )

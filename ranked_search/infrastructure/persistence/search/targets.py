"""Default search targets.

Each entry assumes a FULLTEXT index over exactly its search_columns, in
that order (MySQL requires MATCH columns to equal an index definition).
"""

from ranked_search.application.dtos.records import EventRecord, SubjectRecord
from ranked_search.domain.value_objects.search import (
    SearchTargetRegistry,
    TargetConfig,
)

SUBJECTS = TargetConfig(
    entity_kind="subjects",
    table="subject",
    search_columns=("display_name", "external_ref"),
    id_column="id",
    output_columns=("id", "tenant_id", "display_name", "external_ref"),
    scope_predicate="tenant_id = :scope",
    record_factory=SubjectRecord.from_row,
)

EVENTS = TargetConfig(
    entity_kind="events",
    table="event",
    search_columns=("event_type",),
    id_column="id",
    output_columns=("id", "tenant_id", "subject_id", "event_type"),
    scope_predicate="tenant_id = :scope",
    record_factory=EventRecord.from_row,
)

DEFAULT_TARGETS: tuple[TargetConfig, ...] = (SUBJECTS, EVENTS)


def build_default_registry() -> SearchTargetRegistry:
    """Registry of the built-in entity kinds (subjects, events)."""
    return SearchTargetRegistry(DEFAULT_TARGETS)

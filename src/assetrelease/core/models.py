"""Core domain models."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

RELEASE_METADATA_KEY = "release"


def resolve_metadata(metadata: dict[str, str], name: str) -> str | None:
    """Look up a user metadata entry regardless of key case.

    S3 returns user metadata keys lowercased, other SDKs canonicalize them
    (``Release``), so both spellings must resolve to the same entry.
    """
    if name in metadata:
        return metadata[name]
    lowered = name.lower()
    for key, value in metadata.items():
        if key.lower() == lowered:
            return value
    return None


def parse_release(value: str | None) -> int:
    """Parse a release tag, treating missing or malformed values as release 0."""
    if value is None:
        return 0
    try:
        return int(value.strip())
    except ValueError:
        return 0


@dataclass(frozen=True)
class LocalFile:
    """A matched on-disk asset."""

    key: str
    path: Path
    content_type: str | None = None
    content_encoding: str | None = None


@dataclass(frozen=True)
class RemoteObject:
    """Snapshot of an object currently stored in the bucket."""

    key: str
    cache_control: str | None = None
    content_type: str | None = None
    content_encoding: str | None = None
    metadata: dict[str, str] = field(default_factory=dict)

    @property
    def release_tag(self) -> str | None:
        return resolve_metadata(self.metadata, RELEASE_METADATA_KEY)

    @property
    def release(self) -> int:
        return parse_release(self.release_tag)


class Action(str, Enum):
    """Decided action for one key."""

    UPLOAD = "upload"
    UPDATE = "update"
    DELETE = "delete"
    KEEP = "keep"
    SKIP = "skip"


CHANGE_ACTIONS = frozenset({Action.UPLOAD, Action.UPDATE, Action.DELETE})


@dataclass(frozen=True)
class PlanEntry:
    """One key of the execution plan.

    ``local`` is set for uploads, ``desired`` carries the fully merged object
    for metadata updates.
    """

    key: str
    action: Action
    local: LocalFile | None = None
    desired: RemoteObject | None = None
    reasons: tuple[str, ...] = ()


@dataclass
class Plan:
    """Reconciliation result: exactly one entry per key."""

    release: int
    entries: dict[str, PlanEntry] = field(default_factory=dict)

    @property
    def sorted_keys(self) -> list[str]:
        return sorted(self.entries)

    @property
    def has_changes(self) -> bool:
        return any(entry.action in CHANGE_ACTIONS for entry in self.entries.values())

    def by_action(self, action: Action) -> list[PlanEntry]:
        """Entries with the given action, in key order."""
        return [self.entries[key] for key in self.sorted_keys if self.entries[key].action is action]

    def counts(self) -> dict[Action, int]:
        counts = {action: 0 for action in Action}
        for entry in self.entries.values():
            counts[entry.action] += 1
        return counts

    def __len__(self) -> int:
        return len(self.entries)


@dataclass
class ExecutionResult:
    """Outcome of executing a plan."""

    uploaded: list[str] = field(default_factory=list)
    updated: list[str] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def failed_count(self) -> int:
        return len(self.errors)

    @property
    def ok(self) -> bool:
        return not self.errors

"""
Script Registry
Page-scoped, ordered, bucketed collection of pending scripts.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from functools import cached_property
from enum import Enum

from .core.hash import Algorithm, hash_string
from .core.logging_config import get_logger

logger = get_logger(__name__)


class ScriptPosition(str, Enum):
    """Page positions a script can be emitted at, in page order."""
    HEAD = "head"
    BEGIN = "begin"
    END = "end"
    READY = "ready"
    LOAD = "load"


@dataclass(frozen=True)
class ScriptEntry:
    """One registered script."""
    position: ScriptPosition
    key: str
    script: str


@dataclass(frozen=True)
class RegistrySnapshot:
    """Immutable view of a registry at a point in time."""
    entries: tuple[ScriptEntry, ...]

    @cached_property
    def keys(self) -> frozenset[tuple[ScriptPosition, str]]:
        return frozenset((e.position, e.key) for e in self.entries)

    def contains(self, position: ScriptPosition, key: str) -> bool:
        return (ScriptPosition(position), key) in self.keys

    def __len__(self) -> int:
        return len(self.entries)


class ScriptRegistry:
    """
    Ordered mapping of position -> ordered mapping of key -> script body.

    Owned by the page/view rendering the widget. Insertion order inside a
    bucket is the execution order on the page.
    """

    def __init__(self, key_algorithm: Algorithm = Algorithm.XXHASH64):
        self.key_algorithm = key_algorithm
        self._buckets: dict[ScriptPosition, dict[str, str]] = {}

    def register(
        self,
        script: str,
        position: ScriptPosition = ScriptPosition.READY,
        key: str | None = None,
    ) -> str:
        """
        Append a script to a bucket.

        Args:
            script: Script body
            position: Bucket to append to
            key: Entry key (defaults to the digest of the body)

        Returns:
            The key the script is stored under
        """
        position = ScriptPosition(position)
        if key is None:
            key = hash_string(script, self.key_algorithm)

        # Re-registering a key replaces the body in place
        self._buckets.setdefault(position, {})[key] = script
        logger.debug("script_registered", position=position.value, key=key)
        return key

    def remove(self, position: ScriptPosition, key: str) -> bool:
        """Remove an entry. Returns False when it was not present."""
        bucket = self._buckets.get(ScriptPosition(position))
        if bucket is None or key not in bucket:
            return False
        del bucket[key]
        return True

    def scripts(self, position: ScriptPosition) -> list[str]:
        """Script bodies of one bucket, in execution order."""
        return list(self._buckets.get(ScriptPosition(position), {}).values())

    def entries(self) -> Iterator[ScriptEntry]:
        """Enumerate every entry, bucket by bucket, in insertion order."""
        for position, bucket in self._buckets.items():
            for key, script in bucket.items():
                yield ScriptEntry(position, key, script)

    def snapshot(self) -> RegistrySnapshot:
        """Capture the registry as it is now."""
        return RegistrySnapshot(tuple(self.entries()))

    def diff(self, before: RegistrySnapshot) -> list[ScriptEntry]:
        """
        Entries present now but absent from a snapshot.

        Args:
            before: Snapshot taken earlier

        Returns:
            New entries in registry order
        """
        known = before.keys
        return [e for e in self.entries() if (e.position, e.key) not in known]

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Export as plain nested dictionaries (position value -> key -> body)."""
        return {position.value: dict(bucket) for position, bucket in self._buckets.items()}

    def __contains__(self, item: tuple[ScriptPosition, str]) -> bool:
        position, key = item
        return key in self._buckets.get(ScriptPosition(position), {})

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets.values())

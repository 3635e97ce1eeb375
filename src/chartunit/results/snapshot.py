"""
Snapshot counters reported alongside test results.
"""

from typing import Protocol

from attrs import frozen


class SnapshotCache(Protocol):
    """Read-only view of the snapshot store used while a suite runs."""

    def count_created(self) -> int: ...

    def count_compared(self) -> int: ...

    def count_failed(self) -> int: ...


@frozen
class SnapshotCounting:
    """Created, compared and failed snapshot counts."""

    created: int = 0
    compared: int = 0
    failed: int = 0

    @classmethod
    def observe(cls, cache: SnapshotCache | None) -> "SnapshotCounting":
        """Read the current counts of a snapshot cache; zeros without one."""
        if cache is None:
            return cls()
        return cls(
            created=cache.count_created(),
            compared=cache.count_compared(),
            failed=cache.count_failed(),
        )

    def __add__(self, other: "SnapshotCounting") -> "SnapshotCounting":
        return SnapshotCounting(
            created=self.created + other.created,
            compared=self.compared + other.compared,
            failed=self.failed + other.failed,
        )

    def __sub__(self, other: "SnapshotCounting") -> "SnapshotCounting":
        return SnapshotCounting(
            created=self.created - other.created,
            compared=self.compared - other.compared,
            failed=self.failed - other.failed,
        )

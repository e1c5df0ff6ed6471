"""Compare two directory hash listings by file name."""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from dirhash.scanner import FileHash


class FileStatus(Enum):
    IDENTICAL = "identical"
    DIFFERENT = "different"
    LEFT_ONLY = "left-only"
    RIGHT_ONLY = "right-only"


@dataclass
class ComparisonResult:
    identical: int = 0
    different: int = 0
    left_only: int = 0
    right_only: int = 0
    statuses: dict[str, FileStatus] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return self.identical + self.different + self.left_only + self.right_only

    @property
    def in_sync(self) -> bool:
        return self.total == self.identical

    def names(self, status: FileStatus) -> list[str]:
        """Return the file names classified as status, in byte order."""
        return sorted(
            (name for name, s in self.statuses.items() if s is status),
            key=os.fsencode,
        )

    def record(self, name: str, status: FileStatus) -> None:
        """Classify name as status and bump the matching count."""
        self.statuses[name] = status
        if status is FileStatus.IDENTICAL:
            self.identical += 1
        elif status is FileStatus.DIFFERENT:
            self.different += 1
        elif status is FileStatus.LEFT_ONLY:
            self.left_only += 1
        else:
            self.right_only += 1


def compare(left: Iterable[FileHash], right: Iterable[FileHash]) -> ComparisonResult:
    """Classify every file name in left and right into exactly one bucket.

    Input order does not matter; names are matched by lookup.
    """
    left_hashes = {fh.name: fh.hash for fh in left}
    right_hashes = {fh.name: fh.hash for fh in right}

    result = ComparisonResult()
    for name, digest in left_hashes.items():
        if name not in right_hashes:
            result.record(name, FileStatus.LEFT_ONLY)
        elif right_hashes[name] == digest:
            result.record(name, FileStatus.IDENTICAL)
        else:
            result.record(name, FileStatus.DIFFERENT)

    for name in right_hashes:
        if name not in left_hashes:
            result.record(name, FileStatus.RIGHT_ONLY)

    return result

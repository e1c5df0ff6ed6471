"""Hash every file directly inside a directory."""

import os
from dataclasses import dataclass
from pathlib import Path

from dirhash.hasher import Algorithm, hash_file


class DirectoryReadError(OSError):
    """A directory does not exist or cannot be listed."""

    def __init__(self, path: Path | str, reason: str):
        super().__init__(f"Cannot read directory {path}: {reason}")
        self.path = Path(path)


@dataclass(frozen=True)
class FileHash:
    name: str
    hash: str


def scan_directory(
    directory: Path | str,
    algorithm: Algorithm = Algorithm.SHA256,
) -> list[FileHash]:
    """Hash the immediate non-directory entries of a directory.

    Subdirectories are skipped; there is no recursion. Symlinks and other
    special entries are hashed like regular files. The result is sorted by
    name.

    Raises DirectoryReadError if the directory cannot be listed, and lets the
    first FileReadError propagate, so a scan either covers every file or
    returns nothing.
    """
    directory = Path(directory)
    try:
        with os.scandir(directory) as it:
            entries = [entry for entry in it if not entry.is_dir(follow_symlinks=False)]
    except OSError as exc:
        raise DirectoryReadError(directory, exc.strerror or str(exc)) from exc

    hashes = [
        FileHash(name=entry.name, hash=hash_file(directory / entry.name, algorithm))
        for entry in entries
    ]
    # Byte order of the on-disk name, not code point order of the decoded str
    hashes.sort(key=lambda fh: os.fsencode(fh.name))
    return hashes

"""SHA-256 / SHA-512 file hashing."""

import hashlib
from enum import Enum
from pathlib import Path

CHUNK_SIZE = 65536  # 64 KB


class FileReadError(OSError):
    """A file could not be opened or fully read while hashing."""

    def __init__(self, path: Path | str, reason: str):
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = Path(path)


class Algorithm(Enum):
    SHA256 = "sha256"
    SHA512 = "sha512"

    @property
    def label(self) -> str:
        return self.name

    @property
    def digest_length(self) -> int:
        """Length of the hex digest in characters."""
        return self.new().digest_size * 2

    def new(self):
        return hashlib.new(self.value)

    @classmethod
    def from_name(cls, name: str) -> "Algorithm":
        """Parse 'sha256', 'SHA-512', 'sha_512' and similar spellings."""
        key = name.strip().lower().replace("-", "").replace("_", "")
        for algorithm in cls:
            if algorithm.value == key:
                return algorithm
        raise ValueError(f"algorithm must be 'sha256' or 'sha512', got '{name}'")


def hash_file(path: Path | str, algorithm: Algorithm = Algorithm.SHA256) -> str:
    """Return the hex digest of a file, read in 64 KB chunks."""
    digest = algorithm.new()
    try:
        with open(path, "rb") as f:
            while chunk := f.read(CHUNK_SIZE):
                digest.update(chunk)
    except OSError as exc:
        raise FileReadError(path, exc.strerror or str(exc)) from exc
    return digest.hexdigest()

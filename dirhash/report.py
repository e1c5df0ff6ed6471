"""Text reports for hash listings and directory comparisons."""

import os
from pathlib import Path

from dirhash.comparator import ComparisonResult, FileStatus
from dirhash.hasher import Algorithm
from dirhash.scanner import FileHash

STATUS_MARKERS = {
    FileStatus.IDENTICAL: "==",
    FileStatus.DIFFERENT: "!=",
    FileStatus.LEFT_ONLY: "<<",
    FileStatus.RIGHT_ONLY: ">>",
}


def display_name(name: os.PathLike | str) -> str:
    """Render a file name for text output; undecodable bytes become \\xNN escapes."""
    return os.fsencode(name).decode("utf-8", "backslashreplace")


class Report:
    """Prints report lines and keeps them for an optional log file."""

    def __init__(self, echo: bool = True):
        self.echo = echo
        self.lines: list[str] = []

    def log(self, msg: str = "") -> None:
        if self.echo:
            print(msg)
        self.lines.append(msg)

    def extend(self, lines: list[str]) -> None:
        for line in lines:
            self.log(line)

    def write(self, log_file: Path) -> Path:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        log_file.write_text("\n".join(self.lines) + "\n", encoding="utf-8")
        return log_file


def format_hash_listing(hashes: list[FileHash], algorithm: Algorithm) -> list[str]:
    lines = [
        "",
        f"File Hashes ({algorithm.label}):",
        "-" * 40,
    ]
    lines.extend(f"{display_name(fh.name)}: {fh.hash}" for fh in hashes)
    return lines


def format_comparison(
    result: ComparisonResult,
    left: Path,
    right: Path,
    algorithm: Algorithm,
    verbose: bool = False,
) -> list[str]:
    """Render the four comparison counts, optionally preceded by per-file lines."""
    lines = [
        f"Directory Comparison ({algorithm.label})",
        "=" * 60,
        f"Left:  {display_name(left)}",
        f"Right: {display_name(right)}",
        "",
    ]

    if verbose:
        for name in sorted(result.statuses, key=os.fsencode):
            lines.append(f"{STATUS_MARKERS[result.statuses[name]]} {display_name(name)}")
        lines.append("")

    lines.extend([
        f"Identical:  {result.identical}",
        f"Different:  {result.different}",
        f"Left only:  {result.left_only}",
        f"Right only: {result.right_only}",
    ])
    return lines

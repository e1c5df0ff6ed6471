"""Command-line entry points for dirhash."""

import sys

from dirhash.comparator import compare
from dirhash.config import ScanConfig, build_config
from dirhash.hasher import FileReadError
from dirhash.report import Report, display_name, format_comparison, format_hash_listing
from dirhash.scanner import DirectoryReadError, scan_directory


def _finish(report: Report, config: ScanConfig) -> None:
    if config.log_file:
        report.write(config.log_file)
        print(f"\nLog written to: {display_name(config.log_file)}")


def run_hash(config: ScanConfig) -> int:
    """Print the hash listing for a single directory; return the exit status."""
    directory = config.directories[0]
    try:
        hashes = scan_directory(directory, config.algorithm)
    except (DirectoryReadError, FileReadError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    report = Report()
    report.extend(format_hash_listing(hashes, config.algorithm))
    _finish(report, config)
    return 0


def run_compare(config: ScanConfig) -> int:
    """Compare two directories and print the counts; return the exit status."""
    left_dir, right_dir = config.directories
    try:
        left = scan_directory(left_dir, config.algorithm)
        right = scan_directory(right_dir, config.algorithm)
    except (DirectoryReadError, FileReadError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    result = compare(left, right)

    report = Report()
    report.extend(format_comparison(
        result, left_dir, right_dir, config.algorithm, verbose=config.verbose,
    ))
    _finish(report, config)

    if config.strict and not result.in_sync:
        return 1
    return 0


def main(argv: list[str] | None = None) -> None:
    """Entry point for `dirhash`."""
    config = build_config(argv)
    sys.exit(run_hash(config))


def compare_main(argv: list[str] | None = None) -> None:
    """Entry point for `dirhash-compare`."""
    config = build_config(argv, compare=True)
    sys.exit(run_compare(config))


if __name__ == "__main__":
    main()

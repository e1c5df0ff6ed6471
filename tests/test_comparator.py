"""Tests for dirhash.comparator."""

import pytest

from dirhash.comparator import ComparisonResult, FileStatus, compare
from dirhash.scanner import FileHash, scan_directory


def _fh(name, digest):
    return FileHash(name, digest)


LEFT = [_fh("a", "11"), _fh("b", "22"), _fh("c", "33"), _fh("d", "44")]
RIGHT = [_fh("a", "11"), _fh("b", "99"), _fh("e", "55")]


def test_classifies_every_bucket():
    """Each name lands in the bucket matching its presence and hash."""
    result = compare(LEFT, RIGHT)
    assert (result.identical, result.different, result.left_only, result.right_only) == (1, 1, 2, 1)
    assert result.names(FileStatus.IDENTICAL) == ["a"]
    assert result.names(FileStatus.DIFFERENT) == ["b"]
    assert result.names(FileStatus.LEFT_ONLY) == ["c", "d"]
    assert result.names(FileStatus.RIGHT_ONLY) == ["e"]


def test_bucket_sums_match_sides():
    """identical + different + one-sided equals the size of each side."""
    result = compare(LEFT, RIGHT)
    assert result.identical + result.different + result.left_only == len(LEFT)
    assert result.identical + result.different + result.right_only == len(RIGHT)
    union = {fh.name for fh in LEFT} | {fh.name for fh in RIGHT}
    assert set(result.statuses) == union
    assert result.total == len(union)


def test_compare_with_itself():
    """Comparing a listing with itself reports everything identical."""
    result = compare(LEFT, LEFT)
    assert result.identical == len(LEFT)
    assert result.different == result.left_only == result.right_only == 0
    assert result.in_sync


def test_symmetry():
    """Swapping sides keeps shared counts and swaps the one-sided ones."""
    forward = compare(LEFT, RIGHT)
    backward = compare(RIGHT, LEFT)
    assert forward.identical == backward.identical
    assert forward.different == backward.different
    assert forward.left_only == backward.right_only
    assert forward.right_only == backward.left_only


def test_order_independent():
    """Input order does not change the result."""
    assert compare(list(reversed(LEFT)), RIGHT) == compare(LEFT, RIGHT)


@pytest.mark.parametrize("left, right, expected", [
    ([], [], (0, 0, 0, 0)),
    (LEFT, [], (0, 0, 4, 0)),
    ([], RIGHT, (0, 0, 0, 3)),
])
def test_empty_sides(left, right, expected):
    """An empty side makes every name on the other side one-sided."""
    result = compare(left, right)
    assert (result.identical, result.different, result.left_only, result.right_only) == expected


def test_hash_equality_is_exact():
    """Digests are compared as exact strings."""
    result = compare([_fh("a", "abc")], [_fh("a", "ABC")])
    assert result.different == 1


def test_empty_result_is_in_sync():
    """A fresh result is empty and in sync."""
    assert ComparisonResult().in_sync
    assert ComparisonResult().total == 0


def test_directory_scenario(tmp_path):
    """a.txt shared, b.txt only left, c.txt only right."""
    left_dir = tmp_path / "A"
    right_dir = tmp_path / "B"
    left_dir.mkdir()
    right_dir.mkdir()
    (left_dir / "a.txt").write_text("hello")
    (left_dir / "b.txt").write_text("world")
    (right_dir / "a.txt").write_text("hello")
    (right_dir / "c.txt").write_text("xyz")

    result = compare(scan_directory(left_dir), scan_directory(right_dir))
    assert (result.identical, result.different, result.left_only, result.right_only) == (1, 0, 1, 1)
    assert result.names(FileStatus.LEFT_ONLY) == ["b.txt"]
    assert result.names(FileStatus.RIGHT_ONLY) == ["c.txt"]


def test_modified_file_scenario(tmp_path):
    """Same name with different content counts as different."""
    left_dir = tmp_path / "A"
    right_dir = tmp_path / "B"
    left_dir.mkdir()
    right_dir.mkdir()
    (left_dir / "a.txt").write_text("v1")
    (right_dir / "a.txt").write_text("v2")

    result = compare(scan_directory(left_dir), scan_directory(right_dir))
    assert result.different == 1
    assert result.statuses == {"a.txt": FileStatus.DIFFERENT}


def test_record_updates_counts():
    """record stores the status and bumps the matching count."""
    result = ComparisonResult()
    result.record("a", FileStatus.IDENTICAL)
    result.record("b", FileStatus.RIGHT_ONLY)
    result.record("c", FileStatus.RIGHT_ONLY)
    assert (result.identical, result.different, result.left_only, result.right_only) == (1, 0, 0, 2)
    assert result.names(FileStatus.RIGHT_ONLY) == ["b", "c"]
    assert not result.in_sync

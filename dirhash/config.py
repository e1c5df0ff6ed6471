"""Configuration loading and validation for dirhash."""

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

import yaml

from dirhash.hasher import Algorithm


@dataclass
class ScanConfig:
    directories: list[Path]
    algorithm: Algorithm = Algorithm.SHA256
    log_file: Path | None = None
    verbose: bool = False
    strict: bool = False


def _build_parser(compare: bool = False) -> argparse.ArgumentParser:
    if compare:
        parser = argparse.ArgumentParser(
            prog="dirhash-compare",
            description="Compare the files of two directories by content hash",
        )
        parser.add_argument(
            "--left", "-l",
            type=Path,
            default=None,
            help="Left directory to compare (default: current directory)",
        )
        parser.add_argument(
            "--right", "-r",
            type=Path,
            default=None,
            help="Right directory to compare (default: current directory)",
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="List the classification of every file",
        )
        parser.add_argument(
            "--strict",
            action="store_true",
            help="Exit with status 1 unless both directories hold identical files",
        )
    else:
        parser = argparse.ArgumentParser(
            prog="dirhash",
            description="Print the content hash of every file in a directory",
        )
        parser.add_argument(
            "--dir", "-d",
            type=Path,
            default=None,
            help="Directory path to scan (default: current directory)",
        )
    parser.add_argument(
        "--sha512", "-s",
        action="store_true",
        help="Use SHA512 instead of SHA256",
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to an optional YAML configuration file",
    )
    parser.add_argument(
        "--log",
        type=Path,
        default=None,
        help="Path to write a copy of the report",
    )
    return parser


def _load_yaml(path: Path) -> dict:
    with open(path) as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a YAML mapping, got {type(data).__name__}")
    return data


def _resolve(key: str, raw, base_dir: Path) -> Path:
    if not isinstance(raw, (str, Path)):
        raise ValueError(f"{key} must be a path string, got {type(raw).__name__}")
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = base_dir / path
    return path.resolve()


def _flag(data: dict, key: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise ValueError(f"{key} must be true or false, got {value!r}")
    return value


def _validate_and_resolve(
    data: dict,
    compare: bool = False,
    base_dir: Path | None = None,
) -> ScanConfig:
    """Build a ScanConfig from a mapping; relative paths are resolved against base_dir."""
    base_dir = base_dir if base_dir is not None else Path.cwd()

    raw_algorithm = data.get("algorithm", Algorithm.SHA256.value)
    if not isinstance(raw_algorithm, str):
        raise ValueError(f"algorithm must be a string, got {type(raw_algorithm).__name__}")
    algorithm = Algorithm.from_name(raw_algorithm)

    keys = ("left", "right") if compare else ("dir",)
    directories = [_resolve(key, data.get(key, "."), base_dir) for key in keys]

    log_file = data.get("log_file")
    if log_file is not None:
        log_file = _resolve("log_file", log_file, base_dir)

    return ScanConfig(
        directories=directories,
        algorithm=algorithm,
        log_file=log_file,
        verbose=_flag(data, "verbose"),
        strict=_flag(data, "strict"),
    )


def build_config(cli_args: list[str] | None = None, compare: bool = False) -> ScanConfig:
    """Parse CLI args, merge an optional YAML config, validate, and return ScanConfig.

    Flags given on the command line take precedence over the YAML file.
    """
    parser = _build_parser(compare)
    ns = parser.parse_args(cli_args)

    data: dict = {}
    base_dir = Path.cwd()
    if ns.config is not None:
        config_path = ns.config.expanduser().resolve()
        if not config_path.exists():
            print(f"Error: config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        try:
            data = _load_yaml(config_path)
        except (ValueError, yaml.YAMLError) as exc:
            parser.error(str(exc))
        base_dir = config_path.parent

    # CLI values are made absolute so they are not rebased onto the config directory
    overrides = {"left": ns.left, "right": ns.right} if compare else {"dir": ns.dir}
    overrides["log_file"] = ns.log
    for key, value in overrides.items():
        if value is not None:
            data[key] = value.expanduser().resolve()
    if ns.sha512:
        data["algorithm"] = Algorithm.SHA512.value
    if compare:
        for key in ("verbose", "strict"):
            if getattr(ns, key):
                data[key] = True

    try:
        return _validate_and_resolve(data, compare=compare, base_dir=base_dir)
    except ValueError as exc:
        parser.error(str(exc))

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .engine import run_generation
from .errors import GenerationError
from .ir import REFERENCES
from .parsing.model import UNKNOWN
from .registry import build_default_registry
from .validation import duplicate_identities

VERSION_FILE = "Version.txt"


def resolve_game_version(root_dir: Path) -> str:
    """Trimmed contents of the Version.txt next to the data directory, else 'Unknown'."""
    try:
        return (root_dir / VERSION_FILE).read_text(encoding="utf-8").strip()
    except OSError:
        return UNKNOWN


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="python -m defgraph",
        description="Build a cross-referenced dataset from game definition XML files.",
    )
    parser.add_argument("-p", "--path", help="Base installation directory (must contain Data/).")
    parser.add_argument("--target", default="dataset", help="Output target (default: dataset).")
    parser.add_argument("--out", default=".", help="Output directory for generated artifacts.")
    parser.add_argument(
        "--version",
        default=None,
        metavar="VERSION",
        help="Version string for the dataset stats. If omitted: contents of Version.txt, else 'Unknown'.",
    )
    parser.add_argument(
        "--list-targets",
        action="store_true",
        help="List available output targets and exit.",
    )
    parser.add_argument(
        "--config",
        help="Optional JSON config file providing target-specific options.",
    )
    parser.add_argument(
        "--option",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override or add a single target option (may be repeated).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log per-file progress.")
    return parser.parse_args(argv)


def _coerce_option_value(raw_value: str) -> object:
    # Best-effort type coercion: bool -> int -> float -> str.
    lowered = raw_value.lower()
    if lowered in {"true", "false"}:
        return lowered == "true"
    try:
        return int(raw_value)
    except ValueError:
        pass
    try:
        return float(raw_value)
    except ValueError:
        return raw_value


def _parse_extra_options(config_path: str | None, options: list[str]) -> dict:
    extra: dict[str, object] = {}

    if config_path:
        config_file = Path(config_path)
        payload = json.loads(config_file.read_text(encoding="utf-8"))
        if isinstance(payload, dict):
            extra.update(payload)
        else:
            raise ValueError(f"Config file {config_file} must contain a JSON object.")

    for item in options or []:
        if "=" not in item:
            raise ValueError(f"Invalid --option value '{item}'. Expected KEY=VALUE.")
        key, raw_value = item.split("=", 1)
        key = key.strip()
        if not key:
            raise ValueError(f"Invalid --option value '{item}': empty key.")
        extra[key] = _coerce_option_value(raw_value.strip())

    return extra


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    registry = build_default_registry()

    if args.list_targets:
        print("Available targets:")
        for name, filename in registry.describe():
            print(f"  - {name} ({filename})")
        return 0

    if not args.path:
        raise SystemExit("Error: --path is required unless --list-targets is used.")

    root_dir = Path(args.path)
    version = args.version if args.version is not None else resolve_game_version(root_dir)
    try:
        extra = _parse_extra_options(args.config, args.option)
    except ValueError as exc:
        raise SystemExit(f"Error: {exc}") from exc

    print(f"Root path: {root_dir}")
    try:
        result = run_generation(
            registry=registry,
            target_name=args.target,
            root_dir=root_dir,
            output_dir=Path(args.out),
            version=version,
            extra=extra,
        )
    except GenerationError as exc:
        print(f"Generation failed: {exc}", file=sys.stderr)
        return 1

    report = result.scan.report
    print("Scan complete:")
    print(f"  Files found: {report.files_found}")
    print(f"  Files processed: {report.files_processed}")
    print(f"  Errors: {report.files_failed}")
    print(f"  Total definitions: {report.records_found}")
    print(f"  References found: {len(result.scan.graph.edges_with_label(REFERENCES))}")
    shared = duplicate_identities(result.scan.index.by_identity)
    if shared:
        print(f"  Names shared by several definitions: {len(shared)}")
    for artifact in result.artifacts:
        print(f"Wrote {artifact.artifact_type}: {artifact.path} ({artifact.size_bytes} bytes)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

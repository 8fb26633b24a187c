"""
Command-line interface for heprecord.

Usage:
    heprecord demo [--json] [--validate]
    heprecord doctor
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

import heprecord

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="heprecord",
        description="Generated event record with contiguous mother/daughter lists.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {heprecord.__version__}"
    )
    parser.add_argument(
        "--log-level", choices=_LOG_LEVELS, default="WARNING",
        help="Console logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log-file", default=None,
        help="Also write DEBUG-level log output to this file",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- demo ---
    demo_parser = subparsers.add_parser(
        "demo",
        help="Build and print a sample neutrino-nucleus event",
        description="Build a sample event whose entries arrive out of "
        "genealogical order, forcing a daughter-list compaction.",
    )
    demo_parser.add_argument(
        "--json", dest="as_json", action="store_true",
        help="Output the record as JSON",
    )
    demo_parser.add_argument(
        "--validate", action="store_true",
        help="Run consistency checks on the record",
    )

    # --- doctor ---
    doctor_parser = subparsers.add_parser(
        "doctor",
        help="Environment & capability check",
    )
    doctor_parser.add_argument("--json", dest="as_json", action="store_true")

    return parser


def _cmd_demo(args: argparse.Namespace) -> int:
    from .demo import sample_record
    from .validation import validate

    try:
        record = sample_record()
    except (ValueError, IndexError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    report = validate(record) if args.validate else None

    if args.as_json:
        out = record.to_dict()
        summary = record.get_summary()
        if summary is not None:
            out["summary"] = summary.as_string()
        if report is not None:
            out["validation"] = report.to_dict()
        print(json.dumps(out, indent=2, sort_keys=True))
    else:
        summary = record.get_summary()
        if summary is not None:
            print(f"Interaction: {summary.as_string()}")
        print(str(record))
        if report is not None:
            print(str(report))

    if report is not None and not report.is_valid:
        return 2
    return 0


def _cmd_doctor(args: argparse.Namespace) -> int:
    from .doctor import doctor_report

    rep = doctor_report()
    if args.as_json:
        print(json.dumps(rep, indent=2, sort_keys=True))
    else:
        print(rep["summary"])
        for item in rep["checks"]:
            status = "OK" if item["ok"] else "FAIL"
            print(f"- {status}: {item['name']}: {item['detail']}")
    return 0 if all(c["ok"] for c in rep["checks"]) else 2


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    from .logger import setup_logger

    setup_logger(level=getattr(logging, args.log_level), log_file=args.log_file)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "demo": _cmd_demo,
        "doctor": _cmd_doctor,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    return handler(args)


if __name__ == "__main__":
    raise SystemExit(main())

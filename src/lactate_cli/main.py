"""Compute lactate thresholds and training zones from a step-test table.

Usage:
    python -m lactate_cli steps.tsv --mode hr
    python -m lactate_cli - --mode sr --athlete "Jane Doe" < steps.csv
    lactate-thresholds steps.tsv --output report.json
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from lactate_engine.engine import ThresholdEngine
from lactate_engine.exceptions import LactateEngineError
from lactate_engine.models.enums import BOAT_CLASSES, ProtocolMode
from lactate_engine.models.session import SessionDetails
from lactate_engine.parsing import parse_step_table
from lactate_engine.serialization import to_json_string

from lactate_cli.config import CURVE_SAMPLES, DEFAULT_MODE, JSON_INDENT, LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def _read_table(source: str) -> str:
    """Read table text from a file path, or stdin for '-'."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _sample_count(text: str) -> int:
    """argparse type for --samples: an integer of at least 2."""
    value = int(text)
    if value < 2:
        raise argparse.ArgumentTypeError(f"must be at least 2, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Lactate threshold (LT1/LT2) and training zone calculator",
    )
    parser.add_argument("table", help="Step table file (tab/semicolon/comma separated), or '-' for stdin")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in ProtocolMode],
        default=DEFAULT_MODE,
        help="Quantity controlled during the test: hr, speed or sr (default: %(default)s)",
    )
    parser.add_argument("--athlete", default="", help="Athlete name")
    parser.add_argument("--date", default="", help="Test date")
    parser.add_argument("--boat-class", choices=BOAT_CLASSES, default=BOAT_CLASSES[0])
    parser.add_argument("--protocol", default="", help="Protocol description")
    parser.add_argument("--comments", default="")
    parser.add_argument("--indent", type=int, default=JSON_INDENT, help="JSON indent (default: %(default)s)")
    parser.add_argument(
        "--samples",
        type=_sample_count,
        default=CURVE_SAMPLES,
        help="Points per exported curve series (default: %(default)s)",
    )
    parser.add_argument("--output", "-o", help="Write JSON here instead of stdout")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.samples < 2:
        # LACTATE_CURVE_SAMPLES default bypasses the type check
        parser.error(f"--samples must be at least 2, got {args.samples} (LACTATE_CURVE_SAMPLES)")

    try:
        text = _read_table(args.table)
    except OSError as exc:
        logger.error("Cannot read step table %s: %s", args.table, exc)
        return 1

    session = SessionDetails(
        athlete_name=args.athlete,
        test_date=args.date,
        boat_class=args.boat_class,
        protocol=args.protocol,
        comments=args.comments,
    )

    try:
        rows = parse_step_table(text)
        bundle = ThresholdEngine().calculate(rows, ProtocolMode(args.mode), session=session)
        output = to_json_string(bundle, indent=args.indent, curve_samples=args.samples)
    except LactateEngineError as exc:
        logger.error("Calculation failed: %s", exc)
        return 1

    if args.output:
        Path(args.output).write_text(output + "\n", encoding="utf-8")
        logger.info("Wrote report to %s", args.output)
    else:
        sys.stdout.write(output + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())

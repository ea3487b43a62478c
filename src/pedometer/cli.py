"""Command line entry point: count steps in a recorded accelerometer file."""

import argparse
import json
import sys
from typing import List, Optional

from .config import settings
from .errors import PedometerError
from .logging import setup_logging
from .models import Trial
from .pipeline import Pipeline
from .reporting import render_text, report, summarize
from .user import UserProfile

EXIT_OK = 0
EXIT_BAD_INPUT = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pedometer",
        description="Estimate steps and distance from triaxial accelerometer data",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="File with samples as x,y,z;x,y,z or x,y,z|x,y,z;... ('-' reads stdin)",
    )
    parser.add_argument("--gender", help="male or female")
    parser.add_argument("--height", help="Height, in the same unit as stride")
    parser.add_argument("--stride", help="Explicit stride, overrides gender and height")
    parser.add_argument("--trial-name", help="Label for this recording")
    parser.add_argument(
        "--expected-steps",
        type=int,
        help="Steps counted by hand, reported against the detected count",
    )
    parser.add_argument("--json", action="store_true", help="Print a JSON summary")
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not emit threshold and peak diagnostics",
    )
    return parser.parse_args(argv)


def read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    with open(source, encoding="utf-8") as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logger = setup_logging(settings.service_name, settings)

    try:
        raw = read_input(args.input)
        user = UserProfile(gender=args.gender, height=args.height, stride=args.stride)
        trial = None
        if args.trial_name is not None or args.expected_steps is not None:
            trial = Trial(name=args.trial_name, expected_steps=args.expected_steps)
        pipeline = Pipeline.run(raw, user, trial)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Could not read input", source=args.input, error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT
    except PedometerError as e:
        logger.error("Rejected input", error=type(e).__name__, detail=str(e))
        print(f"error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    if settings.report_diagnostics and not args.quiet:
        report(pipeline.detection)

    if args.json:
        print(json.dumps(summarize(pipeline), indent=2))
    else:
        print(render_text(pipeline))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

"""
Console application entry point.

This module builds the school and starts the menu. Using a factory
(create_school) because:
- Easier to test with different configurations
- Explicit about initialization order
- Each call gives an independent school; there is no global instance

Run with:
    python -m swimschool
    swimschool --no-seed --log-level DEBUG
"""

import argparse
import logging
import sys
from datetime import date
from typing import Callable, Optional

from .cli.console import Console
from .config.settings import LOG_LEVELS, Settings, get_settings
from .core.booking.school import SwimmingSchool
from .infrastructure.memory import create_memory_context
from .infrastructure.seed import seed_school


logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, level.upper(), logging.WARNING),
    )


def create_school(
    settings: Settings,
    clock: Optional[Callable[[], date]] = None,
) -> SwimmingSchool:
    """
    School factory.

    Builds empty in-memory stores and, when enabled, fills them with the
    demo timetable.
    """
    context = create_memory_context(clock)

    if settings.seed_demo_data:
        seed_school(
            context,
            weeks=settings.timetable_weeks,
            capacity=settings.lesson_capacity,
        )

    logger.info(
        "School created",
        extra={
            "school_name": settings.school_name,
            "seeded": settings.seed_demo_data,
        }
    )

    return SwimmingSchool(context)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Lesson booking console for a junior swimming school",
    )
    parser.add_argument(
        "--no-seed",
        action="store_true",
        help="Start with an empty school instead of the demo data",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        help="Override LOG_LEVEL from the environment",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)

    overrides = {}
    if args.no_seed:
        overrides["seed_demo_data"] = False
    if args.log_level:
        overrides["log_level"] = args.log_level
    settings = get_settings().model_copy(update=overrides)

    configure_logging(settings.log_level)

    problems = settings.validate_required_fields()
    if problems:
        logger.error(
            "Invalid configuration",
            extra={"problems": problems}
        )
        for problem in problems:
            print(f"ERROR: {problem}", file=sys.stderr)
        return 1

    school = create_school(settings)

    try:
        return Console(school, school_name=settings.school_name).run()
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        logger.info("Interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())

"""CLI entry point for govee-control."""

import argparse
import asyncio
import logging
import sys

from govee_control.models.event import EventName, EventRequest
from govee_control.runner import run_event
from govee_control.utils.errors import GoveeControlError, classify_exception

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="govee-control",
        description="Control a Govee light through the Govee cloud API",
    )
    parser.add_argument(
        "-e",
        "--event",
        required=True,
        help="Event: " + ", ".join(e.value for e in EventName),
    )
    parser.add_argument(
        "--hex",
        type=str,
        help="Hex color code (#RRGGBB or RRGGBB)",
    )
    parser.add_argument(
        "--prevent-override",
        action="store_true",
        help="Do not turn the light on to set a color if it is off",
    )
    parser.add_argument(
        "--config-dir",
        type=str,
        help="Path to config directory",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    try:
        request = EventRequest.create(
            args.event,
            hex=args.hex,
            prevent_override=args.prevent_override,
        )
        result = asyncio.run(run_event(request, config_dir=args.config_dir))
    except GoveeControlError as e:
        error = classify_exception(e)
        logger.debug(f"Event failed ({error.category.value})")
        print(f"Error: {error.message}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception("Unexpected error")
        print(f"Error: {classify_exception(e).message}", file=sys.stderr)
        return 1

    print(result.message)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Command line entrypoint: draw one set of lottery numbers and explain it.

Usage:
  quantum-lottery --balls 6 --max 59
  quantum-lottery --source system --quiet
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from quantum_lottery.errors import AppError, InvalidDrawSpecError, RandomSourceError
from quantum_lottery.logging_config import configure_logging
from quantum_lottery.random_source import ByteSource, build_byte_source
from quantum_lottery.services.draw_service import LotteryDrawService, describe_draw
from quantum_lottery.utils.formatting import format_sequence

if TYPE_CHECKING:
    from quantum_lottery.config import BaseConfig

logger = logging.getLogger(__name__)


def _build_parser(config: type[BaseConfig]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pick lottery numbers from quantum random bytes")
    parser.add_argument("--balls", dest="ball_count", type=int, default=config.DEFAULT_BALL_COUNT)
    parser.add_argument("--max", dest="max_number", type=int, default=config.DEFAULT_MAX_NUMBER)
    parser.add_argument(
        "--source",
        dest="random_source",
        choices=("qrng", "system"),
        default=config.RANDOM_SOURCE,
        help="Where random bytes come from (default: RANDOM_SOURCE or qrng)",
    )
    parser.add_argument("--url", dest="qrng_url", type=str, default=config.QRNG_URL)
    parser.add_argument("--timeout", dest="timeout_seconds", type=float, default=config.QRNG_TIMEOUT)
    parser.add_argument("--retries", dest="retries", type=int, default=config.QRNG_RETRIES)
    parser.add_argument("--log-level", dest="log_level", type=str, default=config.LOG_LEVEL)
    parser.add_argument("--quiet", action="store_true", help="Only print the drawn numbers")
    return parser


def main(argv: Sequence[str] | None = None, byte_source: ByteSource | None = None) -> int:
    """Draw lottery numbers and print how they were derived."""

    load_dotenv()

    # Config reads the environment at import time, so only after .env is loaded.
    from quantum_lottery.config import get_config

    config = get_config()
    args = _build_parser(config).parse_args(argv)

    configure_logging(level_name=args.log_level)
    # Progress goes to stdout below; keep the service's INFO records out of stderr.
    logging.getLogger("quantum_lottery.services").setLevel(logging.WARNING)

    limit = config.MAX_NUMBER_LIMIT
    if args.max_number > limit:
        print(f"error: --max must be <= {limit}", file=sys.stderr)
        return 2

    source = byte_source or build_byte_source(
        {
            "RANDOM_SOURCE": args.random_source,
            "QRNG_URL": args.qrng_url,
            "QRNG_TIMEOUT": args.timeout_seconds,
            "QRNG_RETRIES": args.retries,
            "QRNG_BACKOFF": config.QRNG_BACKOFF,
            "QRNG_API_KEY": config.QRNG_API_KEY,
        }
    )
    service = LotteryDrawService(source)

    try:
        result = service.draw(args.ball_count, args.max_number)
    except InvalidDrawSpecError as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        return 2
    except RandomSourceError as exc:
        logger.error("Random source failure: %s", exc.message)
        print(f"error: {exc.message}", file=sys.stderr)
        return 1
    except OSError as exc:
        logger.error("Random source failure: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except AppError as exc:
        logger.error("Draw aborted: %s (%s)", exc.message, exc.details)
        print(f"error: {exc.message}", file=sys.stderr)
        return 3

    if args.quiet:
        print(format_sequence(result.numbers))
    else:
        for line in describe_draw(result):
            print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

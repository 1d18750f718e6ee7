"""Command-line entry point for the fruit salad demo."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from fruitsalad.config import DEFAULT_FRUITS, SessionConfig
from fruitsalad.sequence import create_sequence
from fruitsalad.session import SaladSession
from fruitsalad.types import BACKENDS

logger = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    """Parse CLI args for the interactive session."""
    parser = argparse.ArgumentParser(
        prog="fruitsalad",
        description="Build a fruit salad in a linked list or a deque from a text menu.",
    )
    parser.add_argument("fruits", nargs="*", metavar="FRUIT", help="initial fruits (front to back)")
    parser.add_argument("--backend", choices=BACKENDS, default="linked")
    parser.add_argument("--seed", type=int, default=None, help="seed for shuffling and random picks")
    ends = parser.add_mutually_exclusive_group()
    ends.add_argument("--ends-only", dest="ends_only", action="store_true", default=None)
    ends.add_argument("--any-position", dest="ends_only", action="store_false")
    parser.add_argument("--no-prepare", dest="prepare", action="store_false",
                        help="skip the opening shuffle and additions")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    return parser.parse_args(argv)


def build_config(argv: Sequence[str] | None = None) -> SessionConfig:
    args = _parse_args(argv)
    return SessionConfig(
        backend=args.backend,
        seed=args.seed,
        initial_fruits=tuple(args.fruits) or DEFAULT_FRUITS,
        ends_only=args.ends_only,
        prepare=args.prepare,
        log_level=args.log_level,
    )


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Run one interactive session and return the exit status."""
    config = build_config(argv)
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logger.debug("Starting session with %s", config)

    sequence = create_sequence(config.initial_fruits, backend=config.backend)
    session = SaladSession(
        sequence,
        config.make_rng(),
        ends_only=bool(config.ends_only),
        stdin=stdin,
        stdout=stdout,
    )
    out = stdout if stdout is not None else sys.stdout
    title = "LinkedList" if config.backend == "linked" else "VecDeque"
    out.write(f"=== {title} Fruit Salad Challenge ===\n")

    try:
        if config.prepare:
            session.prepare()
        session.run()
    except KeyboardInterrupt:
        out.write("\n")
        return 130
    return 0

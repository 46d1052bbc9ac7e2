#!/usr/bin/env python3
"""predsets/main.py: CLI entry-point for predsets.

Usage examples
--------------
    # Bounded quantifiers print true/false
    predsets eval 'forall({2, 4, 6}, even)'
    predsets eval 'exists([1..100], x * x == 49)' --bound 100

    # Set expressions are probed for membership
    predsets eval 'map({1, 2, 3}, x * 2)' --member 4 --member 5

    # Syntax check only
    predsets check 'union({1}, filter([1..9], odd))'

Exit codes
----------
    0   Success (quantifier true, or membership probes printed).
    1   The expression is invalid or failed while evaluating.
    2   Usage or configuration error (bad --bound / PREDSETS_BOUND).
    3   A quantifier evaluated to false.

The module doubles as ``python -m predsets`` via the companion
``predsets/__main__.py`` which simply calls :func:`main`.
"""

from __future__ import annotations

import argparse
import logging
import sys
import textwrap
from typing import List, Optional, Sequence, TextIO

from predsets import __version__
from predsets.bounds import ENV_VAR, Bound
from predsets.errors import BoundError, ExpressionError

_log = logging.getLogger("predsets")

# Exit codes ----------------------------------------------------------------

EXIT_OK: int = 0
EXIT_ERROR: int = 1
EXIT_INFRA: int = 2
EXIT_FALSE: int = 3


# ===========================================================================
# Utility helpers
# ===========================================================================

def _configure_logging(verbosity: int) -> None:
    """Set up the ``predsets`` logger.

    Parameters
    ----------
    verbosity:
        0 → WARNING, 1 → INFO, 2+ → DEBUG.
    """
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)-5.5s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root = logging.getLogger("predsets")
    root.setLevel(level)
    root.addHandler(handler)


def _resolve_bound(raw: Optional[int]) -> Bound:
    """``--bound`` wins over ``PREDSETS_BOUND``, which wins over the default."""
    if raw is not None:
        return Bound(raw)
    return Bound.from_env()


def _fmt_bool(value: bool) -> str:
    return "true" if value else "false"


# ===========================================================================
# Sub-command handlers
# ===========================================================================

def cmd_eval(args: argparse.Namespace, out: Optional[TextIO] = None) -> int:
    """Evaluate an expression; print a verdict or membership answers."""
    from predsets.expr import evaluate

    out = out or sys.stdout

    bound = _resolve_bound(args.bound)
    _log.info("Evaluating %r over %r", args.expression, bound)
    result = evaluate(args.expression, bound)

    if isinstance(result, bool):
        out.write(_fmt_bool(result) + "\n")
        return EXIT_OK if result else EXIT_FALSE

    members: List[int] = args.member or []
    if not members:
        _log.warning(
            "Set expressions cannot be listed; pass --member N to probe."
        )
    for n in members:
        out.write(f"{n}: {_fmt_bool(n in result)}\n")
    return EXIT_OK


def cmd_check(args: argparse.Namespace, out: Optional[TextIO] = None) -> int:
    """Parse an expression without evaluating it."""
    from predsets.expr import parse_expression

    out = out or sys.stdout

    parse_expression(args.expression)
    out.write("ok\n")
    return EXIT_OK


# ===========================================================================
# Argument parser
# ===========================================================================

def _build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser with subcommands."""

    parser = argparse.ArgumentParser(
        prog="predsets",
        description=(
            "Evaluate set-builder expressions over integer predicate sets.\n\n"
            "Bounded queries (forall, exists, map) scan [1, BOUND]."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent(f"""\
            examples:
              predsets eval 'forall({{2, 4, 6}}, even)'
              predsets eval 'map({{1, 2, 3}}, x * 2)' --member 4
              predsets check 'diff([1..10], {{3}})'

            environment:
              {ENV_VAR}   default bound when --bound is not given
        """),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v info, -vv debug).",
    )
    parser.add_argument(
        "--bound",
        type=int,
        default=None,
        metavar="N",
        help=f"Scan [1, N] in bounded queries (default: ${ENV_VAR} or 1000).",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    # --- eval --------------------------------------------------------------
    p_eval = subparsers.add_parser(
        "eval",
        help="Evaluate a set expression or quantifier.",
    )
    p_eval.add_argument("expression", help="Expression text.")
    p_eval.add_argument(
        "-m", "--member",
        type=int,
        action="append",
        metavar="N",
        help="Probe membership of N in a set result (repeatable).",
    )
    p_eval.set_defaults(func=cmd_eval)

    # --- check -------------------------------------------------------------
    p_check = subparsers.add_parser(
        "check",
        help="Check expression syntax without evaluating.",
    )
    p_check.add_argument("expression", help="Expression text.")
    p_check.set_defaults(func=cmd_check)

    return parser


# ===========================================================================
# Main entry point
# ===========================================================================

def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the predsets CLI.

    Parameters
    ----------
    argv:
        Command-line arguments.  ``None`` → ``sys.argv[1:]``.

    Returns
    -------
    int
        Exit code (see module docstring for semantics).
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    # No subcommand given → print help.
    if not hasattr(args, "func"):
        parser.print_help(sys.stderr)
        return EXIT_INFRA

    try:
        return args.func(args)
    except BoundError as exc:
        _log.error("Invalid bound: %s", exc)
        return EXIT_INFRA
    except ExpressionError as exc:
        sys.stderr.write(f"{exc}\n")
        return EXIT_ERROR
    except KeyboardInterrupt:
        _log.info("Interrupted by user.")
        return 130  # Standard UNIX convention for SIGINT


if __name__ == "__main__":
    raise SystemExit(main())

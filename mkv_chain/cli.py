# mkv_chain/cli.py
# Command-line entry point.
#
# Standard invocation:
#   python -m mkv_chain demo --steps 3
#   python -m mkv_chain run chain.json --steps 10 --output state.json
#   python -m mkv_chain absorbing chain.json
#   python -m mkv_chain verify
#
# EXIT CODES:
#   0  -- Success.
#   1  -- Golden verification mismatch.
#   2  -- Input / serialization error (missing file, corrupt document).
#   3  -- Linalg or chain error.

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from mkv_chain.core.markov_chain import ChainError, MarkovChain
from mkv_chain.linalg import LinalgError, SquareMatrix, Vector
from mkv_chain.storage.serializer import KIND_CHAIN, SerializationError, load, save
from mkv_chain.utils.constants import (
    PACKAGE_VERSION,
    REFERENCE_INITIAL_STATE,
    REFERENCE_RESULT,
    REFERENCE_STEPS,
    REFERENCE_TRANSITION_ROWS,
)
from mkv_chain.verification.bit_comparator import compare_vectors

EXIT_OK: int = 0
EXIT_MISMATCH: int = 1
EXIT_INPUT_ERROR: int = 2
EXIT_CHAIN_ERROR: int = 3


def reference_chain() -> MarkovChain:
    """The 3-node chain whose take_to(3) is the golden regression value."""
    return MarkovChain(
        SquareMatrix(REFERENCE_TRANSITION_ROWS),
        Vector(REFERENCE_INITIAL_STATE),
    )


def _format_vector(vector: Vector) -> str:
    return "[" + ", ".join(repr(x) for x in vector) + "]"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fixed-dimension Markov chain stepping",
        prog="python -m mkv_chain",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="mkv_chain " + PACKAGE_VERSION,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    demo = sub.add_parser("demo", help="Step the built-in 3-node chain.")
    demo.add_argument(
        "--steps",
        type=int,
        default=REFERENCE_STEPS,
        help="Number of steps to run (default: %(default)s).",
    )

    run = sub.add_parser("run", help="Step a chain loaded from a JSON document.")
    run.add_argument("chain_path", help="Path to a serialized chain document.")
    run.add_argument("--steps", type=int, required=True, help="Number of steps.")
    run.add_argument(
        "--output",
        default=None,
        help="Optional path to write the resulting state as a vector document.",
    )

    absorbing = sub.add_parser(
        "absorbing", help="List columns that pass the absorbing-state check."
    )
    absorbing.add_argument("chain_path", help="Path to a serialized chain document.")

    sub.add_parser("verify", help="Bit-compare the golden 3-node result.")
    return parser


def _cmd_demo(args: argparse.Namespace) -> int:
    chain = reference_chain()
    for step, state in enumerate(chain.iter_states(args.steps)):
        print(f"step {step}: {_format_vector(state)}")
    return EXIT_OK


def _cmd_run(args: argparse.Namespace) -> int:
    chain = load(Path(args.chain_path), expect_kind=KIND_CHAIN)
    result = chain.take_to(args.steps)
    print(_format_vector(result))
    if args.output is not None:
        save(result, Path(args.output))
    return EXIT_OK


def _cmd_absorbing(args: argparse.Namespace) -> int:
    chain = load(Path(args.chain_path), expect_kind=KIND_CHAIN)
    indices = chain.absorbing_states()
    if indices:
        print("absorbing columns: " + ", ".join(str(i) for i in indices))
    else:
        print("no absorbing state")
    return EXIT_OK


def _cmd_verify(args: argparse.Namespace) -> int:
    actual = reference_chain().take_to(REFERENCE_STEPS)
    report = compare_vectors(Vector(REFERENCE_RESULT), actual)
    if report.passed:
        print("PASS: " + _format_vector(actual))
        return EXIT_OK
    print("FAIL: " + _format_vector(actual), file=sys.stderr)
    for note in report.notes:
        print("  " + note, file=sys.stderr)
    for m in report.mismatches:
        print(
            f"  {m.field_name}: expected {m.expected_value_hex} "
            f"got {m.actual_value_hex}",
            file=sys.stderr,
        )
    return EXIT_MISMATCH


_COMMANDS = {
    "demo":      _cmd_demo,
    "run":       _cmd_run,
    "absorbing": _cmd_absorbing,
    "verify":    _cmd_verify,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        return _COMMANDS[args.command](args)
    except (OSError, SerializationError) as exc:
        print(f"INPUT_ERROR: {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except (LinalgError, ChainError) as exc:
        print(f"CHAIN_ERROR: {exc}", file=sys.stderr)
        return EXIT_CHAIN_ERROR

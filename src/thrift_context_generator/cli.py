"""Command-line interface for inspecting how Thrift names are mangled into Java names."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from thrift_context_generator.errors import InvalidArgumentError
from thrift_context_generator.mangling import to_constant_name, to_member_name, to_type_name

logger = logging.getLogger(__name__)

STYLES = {
    "type": to_type_name,
    "member": to_member_name,
    "constant": to_constant_name,
}


def setup_parser() -> argparse.ArgumentParser:
    """Setup for the parser.

    Returns:
        argparse.ArgumentParser: The parser after setup.
    """
    parser = argparse.ArgumentParser(description="Show the Java names generated for Thrift identifiers.")

    parser.add_argument(
        "names",
        type=str,
        nargs="+",
        help="Thrift identifiers to mangle, e.g. user_id.",
    )

    parser.add_argument(
        "-s",
        "--style",
        choices=[*STYLES, "all"],
        default="all",
        help="naming convention to apply; 'all' prints the type, member and constant names side by side.",
    )

    return parser


def _mangle(name: str, style: str) -> str:
    if style != "all":
        return STYLES[style](name)

    # Constant names are derived from the member name, as for enum constants.
    member_name = to_member_name(name)
    return "\t".join([name, to_type_name(name), member_name, to_constant_name(member_name)])


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the name mangling tool.

    Args:
        argv (Sequence[str] | None, optional): Run arguments. Defaults to None.

    Returns:
        int: Error code.
    """
    logging.basicConfig(level=logging.INFO)

    parser = setup_parser()
    args = parser.parse_args(argv)

    for name in args.names:
        try:
            print(_mangle(name, args.style))
        except InvalidArgumentError as e:
            parser.error(f"cannot mangle {name!r}: {e}")

    logger.debug(f"Mangled {len(args.names)} name(s) in style '{args.style}'")
    return 0

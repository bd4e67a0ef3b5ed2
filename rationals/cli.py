#!/usr/bin/env python3
"""Parse, combine and evaluate rationals from the command line."""

import argparse
import logging
import operator
import sys
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np

from .complex import Complex, complex_of_rational
from .rational import Rational
from .traits import DEFAULT_RADIX

logger = logging.getLogger(__name__)

DTYPES = {"float32": np.float32, "float64": np.float64}

OPERATORS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "%": operator.mod,
}

PARFILE_DEFAULTS: Dict[str, Any] = {"radix": DEFAULT_RADIX, "dtype": "float64"}


def load_parfile(path: Optional[str]) -> Dict[str, Any]:
    """Return CLI defaults, overridden by the keys of the TOML file at ``path``."""
    params = dict(PARFILE_DEFAULTS)
    if path is None:
        return params
    parfile = Path(path).expanduser().resolve()
    if not parfile.exists():
        raise FileNotFoundError(f"Parfile not found: {parfile}")
    with parfile.open("rb") as pf:
        loaded = tomllib.load(pf)
    unknown = sorted(set(loaded) - set(PARFILE_DEFAULTS))
    if unknown:
        raise ValueError(f"Unknown parfile keys in {parfile}: {', '.join(unknown)}")
    params.update(loaded)
    logger.debug("loaded parfile %s: %s", parfile, params)
    return params


def resolve_dtype(name: str) -> Any:
    try:
        return DTYPES[name]
    except KeyError:
        raise ValueError(
            f"Unsupported dtype {name!r}; expected one of {', '.join(sorted(DTYPES))}"
        ) from None


def describe(value: Rational, dtype: Any) -> str:
    return f"{value} = {value.evaluate(dtype)}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rationals",
        description="Parse, combine and evaluate exact rational numbers.",
    )
    parser.add_argument("--parfile", dest="parfile", help="TOML file with radix/dtype defaults")
    parser.add_argument("--radix", type=int, help="Base used to parse numerators and denominators")
    parser.add_argument("--dtype", choices=sorted(DTYPES), help="Floating type used for evaluation")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)

    show = commands.add_parser("show", help="Print the canonical form and value of rationals")
    show.add_argument("values", nargs="+", help="Rationals written as num/den or num:den")

    calc = commands.add_parser("calc", help="Apply an arithmetic operator to two rationals")
    calc.add_argument("left")
    calc.add_argument("op", choices=sorted(OPERATORS))
    calc.add_argument("right")

    convert = commands.add_parser(
        "convert", help="Rewrite a ratio of Gaussian integers as a complex of rationals"
    )
    convert.add_argument("value", help="For example '1+2i/3-4i'")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    params = load_parfile(args.parfile)
    radix = args.radix if args.radix is not None else int(params["radix"])
    dtype = resolve_dtype(args.dtype if args.dtype is not None else str(params["dtype"]))

    if args.command == "show":
        for text in args.values:
            print(describe(Rational.from_str_radix(text, radix), dtype))
    elif args.command == "calc":
        left = Rational.from_str_radix(args.left, radix)
        right = Rational.from_str_radix(args.right, radix)
        result = OPERATORS[args.op](left, right)
        print(describe(result, dtype))
    elif args.command == "convert":
        value = complex_of_rational(Rational.from_str_radix(args.value, radix, item_type=Complex))
        print(f"{value} = {value.evaluate(dtype)}")


def run(argv: Optional[List[str]] = None) -> None:
    try:
        main(argv)
    except Exception as exc:  # noqa: BLE001
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    run()

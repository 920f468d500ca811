"""Command line demo: ``python -m biglimb [VALUE ...]``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import config
from .bigint import BigInt, multiply
from .errors import BigIntError
from .selfcheck import run_selfcheck

DEFAULT_VALUES = ["-123456789", "2"]


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="biglimb", description="Arbitrary-precision integer demo.")
    parser.add_argument("values", nargs="*", metavar="VALUE", help="decimal integers (default: %(default)s)",
                        default=DEFAULT_VALUES)
    parser.add_argument("--log-level", default=None, help="logging level (env BIGLIMB_LOG_LEVEL)")
    parser.add_argument("--report-on-success", action="store_true", default=None,
                        help="log passing self-check groups too (env BIGLIMB_REPORT_ON_SUCCESS)")
    parser.add_argument("--selfcheck", action="store_true", help="run the built-in checks and exit")
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.log_level(args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.selfcheck:
        results = run_selfcheck(report_on_success=config.report_on_success(args.report_on_success))
        print(f"{results.passed} / {results.attempted} check groups passed")
        return 0 if results.ok else 1

    try:
        values = [BigInt(text) for text in args.values]
    except BigIntError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    product = BigInt("1")
    for value in values:
        print(value)
        product = multiply(product, value)
    print(f"product: {product}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

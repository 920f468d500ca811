"""Built-in self-test suite run by ``python -m biglimb --selfcheck``."""

from __future__ import annotations

from .bigint import BigInt, multiply, pow2
from .errors import DivisionByZero
from .report import CheckResults

POW2_128 = "340282366920938463463374607431768211456"
FACTOR_A = "92837508234109812317501984209810928409182094187192"
FACTOR_B = "19874891279817498172489713987498173849713897489171"
PRODUCT = (
    "1845135382842094292477330511000308347437097594612006265189858865520503519713569495483976002866897832"
)


def check_powers(results: CheckResults) -> None:
    results.check_eq(str(pow2(0)), "1")
    results.check_eq(str(pow2(32)), "4294967296")
    results.check_eq(str(pow2(128)), POW2_128)


def check_parse(results: CheckResults) -> None:
    value = BigInt("64424509677")
    results.check_eq(value.limbs, (237, 15), "limbs of 64424509677")
    results.check(not value.negative, "64424509677 is positive")
    for text in ("0", "7", "-123456789", "4294967295", "4294967296", POW2_128):
        results.check_eq(str(BigInt(text)), text, "round trip")
    results.check_eq(str(BigInt("+0042")), "42", "leading sign and zeros")


def check_ordering(results: CheckResults) -> None:
    zero, neg_zero = BigInt("0"), BigInt("-0")
    one, neg_one = BigInt("1"), BigInt("-1")
    results.check(zero == neg_zero, "0 == -0")
    results.check(neg_one < zero < one, "-1 < 0 < 1")
    results.check(BigInt("4294967295") < BigInt("4294967296"), "limb count breaks ties")
    results.check(BigInt("-4294967296") < BigInt("-4294967295"), "negative limb count")


def check_multiply(results: CheckResults) -> None:
    a, b = BigInt(FACTOR_A), BigInt(FACTOR_B)
    results.check_eq(str(multiply(a, b)), PRODUCT)
    results.check_eq(str(a), FACTOR_A, "operands untouched")
    results.check_eq(str(multiply(a, BigInt("1"))), FACTOR_A, "identity")
    results.check(multiply(a, BigInt("0")).is_zero(), "annihilation")


def check_division(results: CheckResults) -> None:
    value = BigInt("1000000000000000000007")
    quotient, remainder = value.divmod_small(10)
    results.check_eq(str(quotient), "100000000000000000000")
    results.check_eq(remainder, 7)
    before = value.limbs
    try:
        value.idiv(0)
    except DivisionByZero:
        results.check(value.limbs == before, "division by zero leaves value untouched")
    else:
        results.check(False, "division by zero must raise")


SUITES = (
    ("powers", check_powers),
    ("parse", check_parse),
    ("ordering", check_ordering),
    ("multiply", check_multiply),
    ("division", check_division),
)


def run_selfcheck(report_on_success: bool = False) -> CheckResults:
    results = CheckResults("BigInt", report_on_success=report_on_success)
    for name, suite in SUITES:
        child = CheckResults(name, report_on_success=report_on_success)
        suite(child)
        results.aggregate(child)
    results.report()
    return results

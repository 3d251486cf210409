from collections.abc import Iterable
from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal, localcontext

from domain.models.currency import RateEntry, RateSnapshot


def normalize_code(code: str) -> str:
    """Canonical form of a currency code as stored in the snapshot."""
    return code.lower()


def normalize_snapshot(rates: dict[str, RateEntry]) -> RateSnapshot:
    # Codes that collapse to the same key keep the last entry seen
    return {normalize_code(code): entry for code, entry in rates.items()}


def find_missing_codes(codes: Iterable[str], snapshot: RateSnapshot) -> set[str]:
    return {code for code in codes if normalize_code(code) not in snapshot}


def exact_precision(*operands: Decimal) -> int:
    """Significant digits that hold products and differences of ``operands`` without rounding."""
    return sum(len(d.as_tuple().digits) + abs(d.as_tuple().exponent) for d in operands) + 2


def cross_rate(target: Decimal, base: Decimal, scale: int) -> Decimal:
    """Value of ``target`` in units of ``base``, rounded half-up to ``scale`` digits.

    The quotient is truncated with guard digits to spare before the single
    half-up rounding, so it is never rounded twice.
    """
    with localcontext() as ctx:
        ctx.prec = max(target.adjusted() - base.adjusted() + 2, 0) + scale + 2
        ctx.rounding = ROUND_DOWN
        quotient = target / base
        return quotient.quantize(Decimal(1).scaleb(-scale), rounding=ROUND_HALF_UP)

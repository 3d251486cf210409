from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class RateEntry:
    name: str
    unit: str
    value: Decimal
    kind: str  # upstream "type": crypto, fiat or commodity


# Lowercase currency code -> entry, replaced wholesale on every refresh
RateSnapshot = dict[str, RateEntry]


@dataclass(frozen=True)
class CurrencyRateView:
    source: str
    rates: dict[str, Decimal] = field(default_factory=dict)


@dataclass(frozen=True)
class ConversionResult:
    rate: Decimal
    amount: Decimal
    result: Decimal
    fee: Decimal


@dataclass(frozen=True)
class ExchangeResult:
    from_currency: str  # echoed exactly as the caller sent it
    conversions: dict[str, ConversionResult] = field(default_factory=dict)

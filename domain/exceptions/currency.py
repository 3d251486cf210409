from collections.abc import Iterable


class CurrencyException(Exception):
    pass


class CurrencyNotFoundError(CurrencyException):
    def __init__(self, currencies: str | Iterable[str]):
        if isinstance(currencies, str):
            currencies = [currencies]
        self.currencies = frozenset(currencies)

        if len(self.currencies) == 1:
            message = f"Currency {next(iter(self.currencies))} not found in exchange rates."
        else:
            message = f"Currencies not found in exchange rates: {', '.join(sorted(self.currencies))}"
        super().__init__(message)


class CalculationError(CurrencyException):
    pass

class UpstreamError(CurrencyException):
    pass

class CacheError(CurrencyException):
    pass

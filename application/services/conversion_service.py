from collections.abc import Iterable
from decimal import Decimal, InvalidOperation, Overflow, localcontext

from application.services.rate_lookup import RateLookupService
from domain.exceptions.currency import CalculationError
from domain.models.currency import ConversionResult, ExchangeResult
from domain.normalization import exact_precision, normalize_code


class ConversionService:
	def __init__(self, rate_lookup: RateLookupService, fee_rate: Decimal = Decimal('0.01')):
		self.rate_lookup = rate_lookup
		self.fee_rate = fee_rate

	async def convert(
		self, from_currency: str, to_currencies: Iterable[str], amount: Decimal
	) -> ExchangeResult:
		if amount <= 0:
			raise CalculationError('Amount must be greater than zero.')

		targets = set(to_currencies)
		if not targets:
			return ExchangeResult(from_currency=from_currency, conversions={})

		view = await self.rate_lookup.lookup(from_currency, filter=targets)

		conversions = {}
		for currency in targets:
			code = normalize_code(currency).upper()
			rate = view.rates.get(code)
			if rate is None:
				raise CalculationError(f'Invalid exchange rate for currency: {currency}')

			conversions[code] = self._apply_fee(amount, rate, code)

		return ExchangeResult(from_currency=from_currency, conversions=conversions)

	def _apply_fee(self, amount: Decimal, rate: Decimal, code: str) -> ConversionResult:
		# Every operand digit is kept; results are never rounded
		try:
			with localcontext() as ctx:
				ctx.prec = exact_precision(amount, rate, self.fee_rate)
				raw_result = amount * rate
				fee = raw_result * self.fee_rate
				result = raw_result - fee
		except (Overflow, InvalidOperation) as e:
			raise CalculationError(f'Amount {amount} cannot be converted to {code}: out of range') from e

		return ConversionResult(rate=rate, amount=amount, result=result, fee=fee)

"""
Monetary precision helpers.

Key Principles:
1. NEVER use float for money
2. Quantize Decimals to the currency's minor unit before storing or comparing
3. Use ROUND_HALF_EVEN (banker's rounding) to prevent systematic bias
"""

from decimal import Decimal, ROUND_HALF_EVEN
from typing import Union

from django.conf import settings

# Currency minor unit exponents (how many decimal places).
# Order amounts are stored with two decimal places, so three-decimal
# currencies are not supported.
CURRENCY_EXPONENT = {
    "USD": 2,
    "EUR": 2,
    "GBP": 2,
    "CAD": 2,
    "AUD": 2,
    "INR": 2,
    "JPY": 0,
    "KRW": 0,
}

ZERO = Decimal("0.00")


def currency_exponent(currency: str) -> int:
    """
    Get the number of decimal places for a currency.

    Examples:
        >>> currency_exponent("USD")
        2
        >>> currency_exponent("JPY")
        0
    """
    return CURRENCY_EXPONENT.get(currency.upper(), 2)


def quantize(currency: str, amount: Union[Decimal, str, int, float]) -> Decimal:
    """
    Round to currency decimals using banker's rounding (ROUND_HALF_EVEN).

    Examples:
        >>> quantize("USD", "10.127")
        Decimal('10.13')
        >>> quantize("USD", "10.125")
        Decimal('10.12')
    """
    if isinstance(amount, float):
        # Convert float to string first to avoid binary precision artifacts
        amount = str(amount)

    exponent = Decimal(10) ** -currency_exponent(currency)
    return Decimal(amount).quantize(exponent, rounding=ROUND_HALF_EVEN)


def to_money(amount: Union[Decimal, str, int, float, None]) -> Decimal:
    """Quantize an amount in the configured default currency. None counts as zero."""
    if amount is None:
        return quantize(settings.DEFAULT_CURRENCY, ZERO)
    return quantize(settings.DEFAULT_CURRENCY, amount)

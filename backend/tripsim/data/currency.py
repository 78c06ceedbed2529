"""Currency utilities: static conversion between working currencies."""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")

# Static exchange rates to USD (can be updated periodically)
EXCHANGE_RATES_TO_USD: dict[str, Decimal] = {
    "USD": Decimal("1.0"),
    "BRL": Decimal("0.18"),
    "ARS": Decimal("0.0011"),
    "CLP": Decimal("0.0011"),
    "COP": Decimal("0.00025"),
    "MXN": Decimal("0.058"),
    "CAD": Decimal("0.74"),
    "GBP": Decimal("1.27"),
    "EUR": Decimal("1.08"),
    "JPY": Decimal("0.0067"),
    "AUD": Decimal("0.65"),
    "AED": Decimal("0.27"),
}

CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$", "BRL": "R$", "ARS": "AR$", "CLP": "CL$", "COP": "CO$",
    "MXN": "MX$", "CAD": "CA$", "GBP": "£", "EUR": "€",
    "JPY": "¥", "AUD": "A$", "AED": "AED",
}

# Display symbols that sometimes end up in currency fields
_SYMBOL_TO_CODE = {"R$": "BRL", "$": "USD", "€": "EUR", "£": "GBP"}


def normalize_code(currency: str | None, default: str = "USD") -> str:
    """Upper-case ISO code; maps known display symbols back to their code."""
    if not currency:
        return default
    c = currency.strip()
    return _SYMBOL_TO_CODE.get(c, c.upper())


def convert(amount: Decimal, from_currency: str, to_currency: str) -> Decimal:
    """Convert between two currencies via USD. Unknown currencies count as 1.0."""
    src = normalize_code(from_currency)
    dst = normalize_code(to_currency)
    if src == dst:
        return amount
    src_rate = EXCHANGE_RATES_TO_USD.get(src, Decimal("1.0"))
    dst_rate = EXCHANGE_RATES_TO_USD.get(dst, Decimal("1.0"))
    if dst_rate == 0:
        return amount
    return (amount * src_rate / dst_rate).quantize(CENT, rounding=ROUND_HALF_UP)


def format_price(amount: Decimal | float, currency: str = "BRL") -> str:
    """Format a price with currency symbol for display."""
    code = normalize_code(currency)
    symbol = CURRENCY_SYMBOLS.get(code, code + " ")
    return f"{symbol}{round(amount):,}"

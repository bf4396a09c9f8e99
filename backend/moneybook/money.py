"""
Money arithmetic on integer minor units (cents).

Amounts are always ``int`` counts of minor units. Intermediate values are
``Decimal`` and every result that could be fractional is rounded half-to-even
to a whole minor unit before it is returned. Floats never hold an amount.
"""

import re
import unicodedata
from decimal import ROUND_HALF_EVEN, Context, Decimal, DecimalException, InvalidOperation
from functools import wraps

from .constants import CURRENCY_SYMBOLS, ISO_4217_CURRENCY_CODES
from .errors import DivisionByZero, ParseError

DEFAULT_CURRENCY = "EUR"
DEFAULT_LOCALE = "pt-PT"

MINOR_UNITS = 2
MAX_DIGITS = 400
RATE_PLACES = Decimal("0.000001")

# decimal separator, grouping separator, symbol placement
LOCALE_CONVENTIONS = {
    "pt-PT": (",", ".", "suffix"),
    "pt-BR": (",", ".", "prefix"),
    "de-DE": (",", ".", "suffix"),
    "es-ES": (",", ".", "suffix"),
    "it-IT": (",", ".", "suffix"),
    "nl-NL": (",", ".", "prefix"),
    "fr-FR": (",", " ", "suffix"),
    "en-US": (".", ",", "prefix"),
    "en-GB": (".", ",", "prefix"),
    "en-IE": (".", ",", "prefix"),
}

_NUMERAL = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$")
_ISO_CODE = re.compile(r"[A-Z]{3}")
_WHITESPACE = re.compile(r"\s+")
_SYMBOLS = sorted(set(CURRENCY_SYMBOLS.values()), key=len, reverse=True)


def _conventions(locale):
    normalized = (locale or DEFAULT_LOCALE).replace("_", "-")
    if normalized in LOCALE_CONVENTIONS:
        return LOCALE_CONVENTIONS[normalized]
    language = normalized.split("-")[0].lower()
    for key, value in LOCALE_CONVENTIONS.items():
        if key.split("-")[0] == language:
            return value
    return LOCALE_CONVENTIONS[DEFAULT_LOCALE]


def _context(*values):
    # Enough digits for every integer and fractional place plus a rounding tail.
    digits = 0
    for value in values:
        _sign, coefficient, exponent = value.as_tuple()
        digits += len(coefficient) + abs(exponent)
    if digits > MAX_DIGITS:
        raise ParseError("Value is out of the supported range.")
    return Context(prec=digits + 34, rounding=ROUND_HALF_EVEN)


def _amount(value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Amounts must be integer minor units, got {type(value).__name__}.")
    return Decimal(value)


def _factor(value):
    if isinstance(value, bool):
        raise TypeError("Factor must be a number.")
    if isinstance(value, Decimal):
        factor = value
    elif isinstance(value, int):
        factor = Decimal(value)
    elif isinstance(value, float):
        # repr gives the shortest decimal that round-trips, so 6.5 stays 6.5.
        factor = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            factor = Decimal(value.strip())
        except InvalidOperation as exc:
            raise ParseError(f"'{value}' is not a valid number.") from exc
    else:
        raise TypeError(f"Factor must be a number, got {type(value).__name__}.")
    if not factor.is_finite():
        raise ParseError("Factor must be a finite number.")
    return factor


def _bounded(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (DivisionByZero, ParseError):
            raise
        except DecimalException as exc:
            raise ParseError("Value is out of the supported range.") from exc

    return wrapper


def _strip_iso_code(match):
    code = match.group(0)
    return "" if code in ISO_4217_CURRENCY_CODES else code


def _to_minor_units(value, context):
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_EVEN, context=context))


def format_currency(cents, currency=DEFAULT_CURRENCY, locale=DEFAULT_LOCALE):
    """
    Render minor units as a display string, e.g. ``123456`` -> ``"1.234,56 €"`` in pt-PT.
    """
    amount = _amount(cents)
    amount = amount.scaleb(-MINOR_UNITS, context=_context(amount))
    decimal_sep, group_sep, position = _conventions(locale)
    code = (currency or DEFAULT_CURRENCY).upper()
    symbol = CURRENCY_SYMBOLS.get(code, code)

    number = f"{abs(amount):,.{MINOR_UNITS}f}"
    number = number.replace(",", "\0").replace(".", decimal_sep).replace("\0", group_sep)
    sign = "-" if amount < 0 else ""
    if position == "prefix":
        spacer = " " if symbol[-1].isalpha() else ""
        return f"{sign}{symbol}{spacer}{number}"
    return f"{sign}{number} {symbol}"


def parse_currency(value, locale=DEFAULT_LOCALE):
    """
    Parse a display string back into minor units using the locale's separators.

    Currency symbols, ISO codes and whitespace are ignored. Fractions of a
    minor unit round half-to-even.
    """
    if not isinstance(value, str):
        raise ParseError("Amount must be given as text.")
    decimal_sep, group_sep, _position = _conventions(locale)

    cleaned = value
    for symbol in _SYMBOLS:
        cleaned = cleaned.replace(symbol, "")
    cleaned = _ISO_CODE.sub(_strip_iso_code, cleaned)
    cleaned = "".join(char for char in cleaned if unicodedata.category(char) != "Sc")
    cleaned = _WHITESPACE.sub("", cleaned)
    if not cleaned:
        raise ParseError("Enter an amount.")
    if not group_sep.isspace():
        cleaned = cleaned.replace(group_sep, "")
    cleaned = cleaned.replace(decimal_sep, ".")

    if not _NUMERAL.match(cleaned):
        raise ParseError(f"'{value}' is not a valid amount.")
    amount = Decimal(cleaned)
    context = _context(amount)
    return _to_minor_units(amount.scaleb(MINOR_UNITS, context=context), context)


@_bounded
def calculate_percentage(cents, percent):
    """
    ``percent`` percent of ``cents``: 15 -> 15%, 6.5 -> 6.5%.
    """
    amount = _amount(cents)
    rate = _factor(percent)
    context = _context(amount, rate)
    result = context.divide(context.multiply(amount, rate), Decimal(100))
    return _to_minor_units(result, context)


@_bounded
def add_currency(a, b):
    left, right = _amount(a), _amount(b)
    return int(_context(left, right).add(left, right))


@_bounded
def subtract_currency(a, b):
    left, right = _amount(a), _amount(b)
    return int(_context(left, right).subtract(left, right))


@_bounded
def multiply_currency(cents, factor):
    amount = _amount(cents)
    multiplier = _factor(factor)
    context = _context(amount, multiplier)
    return _to_minor_units(context.multiply(amount, multiplier), context)


@_bounded
def divide_currency(cents, divisor):
    amount = _amount(cents)
    denominator = _factor(divisor)
    if denominator.is_zero():
        raise DivisionByZero("Cannot divide an amount by zero.")
    context = _context(amount, denominator)
    return _to_minor_units(context.divide(amount, denominator), context)


@_bounded
def normalize_rate(value):
    """
    Exchange rates keep six fractional digits and must be positive.
    """
    rate = _factor(value)
    context = _context(rate)
    rate = rate.quantize(RATE_PLACES, rounding=ROUND_HALF_EVEN, context=context)
    if rate <= 0:
        raise ParseError("Exchange rate must be positive.")
    return rate

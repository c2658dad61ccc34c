# py
import math
import re

# Longest numeric prefix, same grammar browsers use for parseFloat; ASCII digits only
_NUMERIC_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")

# ECMAScript whitespace and line terminators, BOM included
_LEADING_SPACE = "\t\n\v\f\r \xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"


def parse_float(text: str) -> float:
    """Parse the leading number in ``text``; trailing garbage is ignored, no number gives NaN."""
    match = _NUMERIC_PREFIX.match(text.lstrip(_LEADING_SPACE))
    if not match:
        return math.nan
    return float(match.group(0))


def is_positive_number(value: float, strict: bool = True) -> bool:
    if strict:
        return math.isfinite(value) and value > 0
    # NaN compares false against everything, so it slips through the lenient guard
    return not value <= 0

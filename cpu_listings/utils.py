# cpu_listings/utils.py
"""Shared utilities: logging setup and number coercion for request input."""
import os
import re
import math
import logging
from dotenv import load_dotenv

load_dotenv()

def get_logger(name=__name__):
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        level=getattr(logging, level, logging.INFO)
    )
    return logging.getLogger(name)

logger = get_logger("cpu-listings")

_DECIMAL_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_PREFIXED_RE = re.compile(r"0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_BASES = {"x": 16, "o": 8, "b": 2}

def coerce_number(raw):
    """Coerce a query/form value to a float the way a browser's Number() does.

    Missing or blank input is 0, unparsable input is NaN. Callers comparing
    against NaN get False, so a bad budget filters everything out.
    """
    if raw is None:
        return 0.0
    text = str(raw).strip()
    if not text:
        return 0.0
    if text in ("Infinity", "+Infinity"):
        return math.inf
    if text == "-Infinity":
        return -math.inf
    m = _PREFIXED_RE.fullmatch(text)
    if m:
        digits = m.group(1)
        try:
            return float(int(digits[1:], _BASES[digits[0].lower()]))
        except OverflowError:
            return math.inf
    if _DECIMAL_RE.fullmatch(text):
        return float(text)
    return math.nan

def json_number(value):
    """Shape a float the way JSON.stringify prints it.

    Non-finite values become None and whole numbers below 1e21 lose their
    trailing ".0".
    """
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        if value.is_integer() and abs(value) < 1e21:
            return int(value)
    return value

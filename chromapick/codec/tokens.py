import math
import re
from typing import List, Optional, Tuple

from ..utils.num_utils import clamp

NUMBER_RE = re.compile(
    r"^([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:e[+-]?\d+)?)(%|deg|rad|grad|turn)?$",
    re.IGNORECASE,
)
FUNCTION_RE = re.compile(r"^([a-z-]+)\s*\((.*)\)$", re.IGNORECASE | re.DOTALL)


def split_components(text: str, function_names: Tuple[str, ...]) -> Tuple[List[str], Optional[str]]:
    """
    Split a functional color body into three channel tokens and an optional alpha token.

    Accepts ``name(a, b, c[, alpha])``, ``name(a b c[ / alpha])`` or the same
    bodies without the function wrapper.

    Raises:
        ValueError: wrong function name, wrong token count or empty tokens
    """
    body = text.strip()
    match = FUNCTION_RE.match(body)
    if match:
        name = match.group(1).lower()
        if name not in function_names:
            raise ValueError(f"expected one of {function_names}, got {name}()")
        body = match.group(2)
    elif "(" in body or ")" in body:
        raise ValueError("unbalanced parentheses")

    parts = body.split("/")
    if len(parts) > 2:
        raise ValueError("more than one '/' separator")

    if "," in parts[0]:
        tokens = [t.strip() for t in parts[0].split(",")]
        if any(not t for t in tokens):
            raise ValueError("empty component")
    else:
        tokens = parts[0].split()

    alpha: Optional[str] = None
    if len(parts) == 2:
        alpha_tokens = parts[1].split()
        if len(tokens) != 3 or len(alpha_tokens) != 1:
            raise ValueError("expected three channels before '/' and one alpha after it")
        alpha = alpha_tokens[0]
    elif len(tokens) == 4:
        alpha = tokens.pop()
    elif len(tokens) != 3:
        raise ValueError(f"expected 3 or 4 components, got {len(tokens)}")

    return tokens, alpha


def parse_number(token: str) -> Tuple[float, Optional[str]]:
    """Parse ``12``, ``12.5%``, ``1.2rad``... into (value, lower-cased unit or None)."""
    match = NUMBER_RE.match(token.strip())
    if not match:
        raise ValueError(f"not a number: {token!r}")
    value = float(match.group(1))
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {token!r}")
    unit = match.group(2)
    return value, unit.lower() if unit else None


def parse_percentage(token: str) -> float:
    """Parse a percentage channel (``%`` optional) clamped to [0, 100]."""
    value, unit = parse_number(token)
    if unit not in (None, "%"):
        raise ValueError(f"unexpected unit {unit!r} in {token!r}")
    return clamp(value, 0.0, 100.0)


def parse_alpha(token: str) -> float:
    """
    Parse an alpha token into a fraction in [0, 1].

    ``50%`` and bare values above 1 are on a 0-100 scale; bare values up to 1
    are already fractions.
    """
    value, unit = parse_number(token)
    if unit == "%":
        value = value / 100
    elif unit is not None:
        raise ValueError(f"unexpected unit {unit!r} in alpha {token!r}")
    elif value > 1:
        value = value / 100
    return clamp(value, 0.0, 1.0)

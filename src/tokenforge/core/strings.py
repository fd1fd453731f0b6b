"""
String utility functions for tokenforge.

Provides the name transformations shared by the exporters.
"""

from __future__ import annotations

import re

_UPPER = re.compile(r"([A-Z])")


def camel_to_kebab(name: str) -> str:
    """
    Convert a camelCase key to kebab-case.

    Examples:
        >>> camel_to_kebab("cardForeground")
        'card-foreground'
        >>> camel_to_kebab("background")
        'background'
    """
    return _UPPER.sub(r"-\1", name).lower()


def parse_css_number(value: str) -> int | float:
    """
    Parse the leading number of a CSS length such as ``16px`` or ``1.25``.

    Integral values come back as ``int`` so JSON output reads ``16``, not
    ``16.0``. A value with no leading number parses as 0.

    Examples:
        >>> parse_css_number("16px")
        16
        >>> parse_css_number("1.25")
        1.25
    """
    match = re.match(r"\s*([-+]?(?:\d+\.?\d*|\.\d+))", value)
    if match is None:
        return 0
    number = float(match.group(1))
    return int(number) if number.is_integer() else number

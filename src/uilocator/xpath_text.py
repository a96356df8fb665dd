from __future__ import annotations

import string


def xpath_literal(value: str) -> str:
    """Quote ``value`` as an XPath 1.0 string expression.

    XPath has no escape sequence inside literals, so text holding both quote
    characters is split on ``'`` and stitched back together with ``concat()``.
    """
    if "'" not in value:
        return f"'{value}'"
    if '"' not in value:
        return f'"{value}"'
    pieces = value.split("'")
    quoted = [f"'{piece}'" for piece in pieces]
    return "concat(" + ", \"'\", ".join(quoted) + ")"


def _case_folding_table(text: str) -> dict[str, str]:
    table = dict(zip(string.ascii_uppercase, string.ascii_lowercase))
    for char in text:
        upper = char.upper()
        lower = upper.lower()
        if len(upper) != 1 or len(lower) != 1 or upper == lower:
            continue
        table.setdefault(upper, lower)
        # variant lowercase forms such as final sigma fold onto the same letter
        if char != table[upper]:
            table.setdefault(char, table[upper])
    return table


def fold_case(text: str) -> str:
    """Lower ``text`` with the same mapping ``lower_attribute`` applies to the attribute."""
    table = _case_folding_table(text)
    return "".join(table.get(char, char) for char in text)


def lower_attribute(attribute: str, text: str = "") -> str:
    # translate() is the only case folding available in XPath 1.0
    table = _case_folding_table(text)
    return f"translate(@{attribute},'{''.join(table)}','{''.join(table.values())}')"


def ends_with(subject: str, literal: str, *, native: bool = False) -> str:
    if native:
        return f"ends-with({subject},{literal})"
    return f"substring({subject},string-length({subject})-string-length({literal})+1)={literal}"

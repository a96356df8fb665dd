from __future__ import annotations


def is_enclosed(text: str, opening: str = "{", closing: str = "}") -> bool:
    value = text.strip()
    return len(value) >= 2 and value.startswith(opening) and value.endswith(closing)


def brace_groups(text: str, opening: str = "{", closing: str = "}") -> list[str]:
    """Split ``{a}{b}{c}`` into ``["a", "b", "c"]``.

    Only top-level groups are returned; nested braces stay inside their group.
    Raises ``ValueError`` on unbalanced braces or on non-blank text between groups.
    """
    groups: list[str] = []
    depth = 0
    start = -1
    for position, char in enumerate(text):
        if char == opening:
            if depth == 0:
                start = position + 1
            depth += 1
        elif char == closing:
            depth -= 1
            if depth < 0:
                raise ValueError(f"Unbalanced '{closing}' at position {position}")
            if depth == 0:
                groups.append(text[start:position])
        elif depth == 0 and not char.isspace():
            raise ValueError(f"Unexpected {char!r} outside of braces at position {position}")

    if depth != 0:
        raise ValueError(f"Unclosed '{opening}'")
    return groups

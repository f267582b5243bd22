"""Parsing of raw ``[COUNT:]NAME`` device specifier tokens."""

from __future__ import annotations

from domain.link.errors import InvalidSpecifierError


def _as_int(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


def parse_specifier(token: str) -> tuple[int, str]:
    """Split a token into ``(count, name)``.

    ``NAME`` alone means one device. ``COUNT:NAME`` is the documented form;
    the older ``NAME:COUNT`` order is still accepted when only the second
    part is a number. Counts are not range-checked here: Endpoint.add rejects
    non-positive ones.

    Raises:
        InvalidSpecifierError: On empty names, more than one ``:``, or two
            parts neither of which is an integer
    """
    parts = token.split(":")
    if len(parts) == 1:
        name = parts[0].strip()
        if not name:
            raise InvalidSpecifierError(token)
        return (1, name)
    if len(parts) != 2:
        raise InvalidSpecifierError(token)

    first, second = parts
    count = _as_int(first)
    if count is not None and second.strip():
        return (count, second.strip())
    count = _as_int(second)
    if count is not None and first.strip():
        return (count, first.strip())
    raise InvalidSpecifierError(token)

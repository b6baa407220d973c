"""
Escaping of JSON object keys into XML element names.

Keys are rendered as XML NCNames (no colon). A character that is not allowed
at its position is written as ``_xHHHH_`` (uppercase hex, at least four
digits). An underscore directly followed by ``x`` is escaped the same way, so
every ``_x`` in an escaped name starts an escape sequence and the mapping can
be inverted. The empty key is written as ``_x_``.
"""

from typing import List, Tuple

ESCAPE_PREFIX = "_x"
ESCAPE_SUFFIX = "_"
EMPTY_NAME = ESCAPE_PREFIX + ESCAPE_SUFFIX

# XML 1.0 (fifth edition) NameStartChar, without ":"
_NAME_START_RANGES: Tuple[Tuple[int, int], ...] = (
    (ord("A"), ord("Z")),
    (ord("_"), ord("_")),
    (ord("a"), ord("z")),
    (0xC0, 0xD6),
    (0xD8, 0xF6),
    (0xF8, 0x2FF),
    (0x370, 0x37D),
    (0x37F, 0x1FFF),
    (0x200C, 0x200D),
    (0x2070, 0x218F),
    (0x2C00, 0x2FEF),
    (0x3001, 0xD7FF),
    (0xF900, 0xFDCF),
    (0xFDF0, 0xFFFD),
    (0x10000, 0xEFFFF),
)

_NAME_EXTRA_RANGES: Tuple[Tuple[int, int], ...] = (
    (ord("-"), ord("-")),
    (ord("."), ord(".")),
    (ord("0"), ord("9")),
    (0xB7, 0xB7),
    (0x300, 0x36F),
    (0x203F, 0x2040),
)


def _in_ranges(code: int, ranges: Tuple[Tuple[int, int], ...]) -> bool:
    for low, high in ranges:
        if low <= code <= high:
            return True
    return False


def is_name_start_char(char: str) -> bool:
    """Check if a character may start an XML NCName."""
    return _in_ranges(ord(char), _NAME_START_RANGES)


def is_name_char(char: str) -> bool:
    """Check if a character may appear after the first position of an NCName."""
    code = ord(char)
    return _in_ranges(code, _NAME_START_RANGES) or _in_ranges(code, _NAME_EXTRA_RANGES)


def is_valid_name(name: str) -> bool:
    """Check if a string is a valid XML NCName."""
    if not name or not is_name_start_char(name[0]):
        return False
    return all(is_name_char(char) for char in name[1:])


def escape_name(key: str) -> str:
    """
    Escape a JSON object key into a valid XML element name.

    Args:
        key: Object key as decoded from JSON

    Returns:
        Deterministic NCName for the key
    """
    if not key:
        return EMPTY_NAME

    parts: List[str] = []
    for index, char in enumerate(key):
        if index == 0:
            allowed = is_name_start_char(char)
        else:
            allowed = is_name_char(char)

        # "_x" always opens an escape in the output
        if char == "_" and key[index + 1:index + 2] == "x":
            allowed = False

        if allowed:
            parts.append(char)
        else:
            parts.append(f"{ESCAPE_PREFIX}{ord(char):04X}{ESCAPE_SUFFIX}")

    return "".join(parts)


def unescape_name(name: str) -> str:
    """
    Recover the original key from a name produced by ``escape_name``.

    Raises:
        ValueError: If the name contains a malformed escape sequence
    """
    if name == EMPTY_NAME:
        return ""

    parts: List[str] = []
    index = 0
    while index < len(name):
        if name.startswith(ESCAPE_PREFIX, index):
            end = name.find(ESCAPE_SUFFIX, index + len(ESCAPE_PREFIX))
            digits = name[index + len(ESCAPE_PREFIX):end] if end != -1 else ""
            if not digits:
                raise ValueError(f"Malformed escape sequence in name {name!r} at {index}")
            parts.append(chr(int(digits, 16)))
            index = end + len(ESCAPE_SUFFIX)
        else:
            parts.append(name[index])
            index += 1

    return "".join(parts)

# Structargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Pure predicates classifying a single token of the argument vector.

The parse driver owns the only state involved (whether `--` has been seen) and
passes it in, so every function here is side-effect free.

Functions:
- is_sentinel: The `--` end-of-options token.
- is_negative_number: `-3`, `-3.14`, `-.5`, `-1e5`.
- is_option_like: Token that should be matched against optional fields.
- normalize: Drop every non-alphabetic character.
- matches_field_as_long / matches_field_as_short /
  matches_field_alphanumeric_normalized / matches_field: Token-to-field matching.
"""
import re

SENTINEL = "--"

_NEGATIVE_NUMBER = re.compile(r"^-(\d+(\.\d*)?|\.\d+)([eE][-+]?\d+)?$")


def is_sentinel(token: str) -> bool:
    return token == SENTINEL


def is_negative_number(token: str) -> bool:
    """Return True if the token is a negative numeric literal."""
    return bool(_NEGATIVE_NUMBER.match(token))


def is_option_like(
    token: str,
    double_dash_seen: bool = False,
    allow_negative_numbers: bool = True,
) -> bool:
    """
    Return True if the token should be treated as an option.

    Args:
        token (str): The token to classify.
        double_dash_seen (bool): Whether `--` has already ended option parsing.
        allow_negative_numbers (bool): Classify negative numeric literals as values.

    Returns:
        bool: True for `-x`, `--name` and similar; False for values, `-`, `--`
        and, when allowed, negative numbers.
    """
    if double_dash_seen or len(token) < 2 or token[0] != "-":
        return False
    if is_sentinel(token):
        return False
    if allow_negative_numbers and is_negative_number(token):
        return False
    return True


def normalize(text: str) -> str:
    """Drop every non-alphabetic character: `--input-file` → `inputfile`."""
    return "".join(char for char in text if char.isalpha())


def matches_field_as_long(token: str, name: str) -> bool:
    return token == f"--{name}"


def matches_field_as_short(token: str, name: str) -> bool:
    return bool(name) and token == f"-{name[0]}"


def matches_field_alphanumeric_normalized(token: str, name: str) -> bool:
    normalized = normalize(token)
    return bool(normalized) and normalized == normalize(name)


def matches_field(token: str, name: str) -> bool:
    """Return True if the token selects the optional field `name`."""
    return (
        matches_field_as_long(token, name)
        or matches_field_as_short(token, name)
        or matches_field_alphanumeric_normalized(token, name)
    )

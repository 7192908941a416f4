from typing import FrozenSet

from .exceptions import InvalidCombinatorError

COMBINATORS: FrozenSet[str] = frozenset({" ", "+", "~", ">"})

def is_valid_combinator(combinator: str) -> bool:
    """Check if a token is one of the four CSS combinators."""
    return isinstance(combinator, str) and combinator in COMBINATORS

def validate_combinator(combinator: str) -> str:
    """
    Validate a combinator token.

    The token must match exactly, so ' > ' or '>>' are rejected rather than
    trimmed.

    Args:
        combinator: The combinator token

    Returns:
        The same token

    Raises:
        InvalidCombinatorError: If the token is not ' ', '+', '~' or '>'
    """
    if not is_valid_combinator(combinator):
        raise InvalidCombinatorError(
            f"Invalid combinator {combinator!r}, expected one of ' ', '+', '~', '>'"
        )
    return combinator

def combinator_separator(combinator: str) -> str:
    """Return the separator placed between two selectors, e.g. ' + '."""
    return f" {validate_combinator(combinator)} "

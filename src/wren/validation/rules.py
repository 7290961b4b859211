"""Built-in validation rules for wren forms.

Each validator is a callable with the signature::

    def rule(value: str) -> str | None:
        '''Return error message, or None if valid.'''

Messages read as a predicate of the field's label, so a template can
render ``City can't be blank``. Parameterized validators are factory
functions that return a validator.
"""

import re
from collections.abc import Callable, Iterable

type Validator = Callable[[str], str | None]


def required(value: str) -> str | None:
    """Field must be present and non-blank."""
    if not value or not value.strip():
        return "can't be blank"
    return None


def max_length(n: int) -> Validator:
    """String must be at most *n* characters."""

    def check(value: str) -> str | None:
        if len(value) > n:
            return f"is too long (maximum is {n} characters)"
        return None

    return check


def matches(pattern: str, message: str | None = None) -> Validator:
    """Value must match the given regex pattern. Empty values pass."""
    compiled = re.compile(pattern)

    def check(value: str) -> str | None:
        if value and not compiled.match(value):
            return message or "is invalid"
        return None

    return check


def one_of(choices: Iterable[str]) -> Validator:
    """Value must be one of *choices*. Empty values pass."""
    allowed = frozenset(choices)

    def check(value: str) -> str | None:
        if value and value not in allowed:
            return "is not included in the list"
        return None

    return check

"""Validation result: immutable container for validated data or errors."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """The outcome of validating form data against a set of rules.

    The result is falsy when invalid, so you can write::

        result = validate(form, rules)
        if not result:
            return Template("addresses/new.html", form=form, errors=result.errors)

    ``errors`` maps field names to lists of messages. Messages are
    written to follow the field's label::

        {"city": ["can't be blank"]}
    """

    data: dict[str, str]
    errors: dict[str, list[str]]

    @property
    def is_valid(self) -> bool:
        """True if validation passed with no errors."""
        return not self.errors

    def __bool__(self) -> bool:
        """Falsy when invalid, which enables ``if not result:`` pattern."""
        return self.is_valid

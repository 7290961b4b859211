"""Form validation: composable rules, clean results.

Usage::

    from wren.validation import validate, required, max_length

    result = validate(form_values(form), {
        "line1": [required, max_length(200)],
        "city": [required],
    })
    if not result:
        return Template("addresses/new.html", form=form, errors=result.errors), 422
"""

from collections.abc import Mapping

from wren.validation.result import ValidationResult
from wren.validation.rules import Validator, matches, max_length, one_of, required

__all__ = [
    "ValidationResult",
    "Validator",
    "matches",
    "max_length",
    "one_of",
    "required",
    "validate",
]


def validate(
    data: Mapping[str, str],
    rules: dict[str, list[Validator]],
) -> ValidationResult:
    """Validate data against a set of rules.

    Args:
        data: Any mapping of field names to string values:
            ``FormData``, ``QueryParams``, or a plain ``dict``.
        rules: Field name to a list of validators. Each returns an
            error message on failure, or ``None`` on success.

    Returns:
        A ``ValidationResult``. ``data`` holds the cleaned values of
        fields that passed.
    """
    errors: dict[str, list[str]] = {}
    cleaned: dict[str, str] = {}

    for field_name, validators in rules.items():
        value = (data.get(field_name) or "").strip()

        field_errors: list[str] = []
        for validator in validators:
            error = validator(value)
            if error is not None:
                field_errors.append(error)
                # Nothing else to check on a blank value
                if validator is required:
                    break

        if field_errors:
            errors[field_name] = field_errors
        else:
            cleaned[field_name] = value

    return ValidationResult(data=cleaned, errors=errors)

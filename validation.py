"""
Form checks. Each check returns an error message, or "" when the value is fine,
so callers can show it inline next to the field.
"""

import re

from formatting import to_number

EMAIL_PATTERN = re.compile(r".+@.+\..+")
MIN_NAME_LENGTH = 3


class ValidationError(ValueError):
    """Raised with a {field: message} map when a submission is rejected."""

    def __init__(self, errors: dict):
        self.errors = dict(errors)
        super().__init__("; ".join(f"{k}: {v}" for k, v in self.errors.items()))


def validate_email(email, token=None) -> str:
    # Returning users are identified by their token
    if token:
        return ""
    if not EMAIL_PATTERN.search((email or "").strip()):
        return "Please enter a valid email address"
    return ""


def validate_liquid_net_worth(value) -> str:
    if (to_number(value, 0.0) or 0.0) <= 0:
        return "Please enter a non-zero liquid net worth"
    return ""


def validate_name(name, kind: str = "asset") -> str:
    if len((name or "").strip()) < MIN_NAME_LENGTH:
        return f"Every {kind} name must be at least {MIN_NAME_LENGTH} characters."
    return ""


def submission_errors(answers, email=None, token=None) -> dict:
    errors = {}
    msg = validate_liquid_net_worth(answers.liquid_net_worth)
    if msg:
        errors["liquid_net_worth"] = msg
    msg = validate_email(email, token)
    if msg:
        errors["email"] = msg
    return errors


def require_valid(errors: dict):
    if errors:
        raise ValidationError(errors)

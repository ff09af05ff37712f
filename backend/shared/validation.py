"""
Declarative field rules for request models.

Rules are attached to fields with ``Annotated`` so that the constraints of
each request live next to its shape, not inside route handlers::

    class LoginRequest(RuleModel):
        email: Annotated[str, valid_email("Please include a valid email")] = ""

Every rule raises a ``PydanticCustomError`` of type ``field_rule`` whose
message is exactly the text given to the rule. The API layer turns those
errors into ``{"errors": [{"msg": ..., "param": ...}]}``.
"""

from typing import Any

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, BeforeValidator, ConfigDict, model_validator
from pydantic_core import PydanticCustomError, PydanticUndefined

RULE_ERROR_TYPE = "field_rule"


def _fail(message: str) -> PydanticCustomError:
    return PydanticCustomError(RULE_ERROR_TYPE, message)


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    return False


def required(message: str) -> BeforeValidator:
    """Reject missing, null and whitespace-only values."""

    def check(value: Any) -> Any:
        if _is_blank(value):
            raise _fail(message)
        return value

    return BeforeValidator(check)


def valid_email(message: str) -> BeforeValidator:
    """Accept a syntactically valid address; normalizes to lower case."""

    def check(value: Any) -> Any:
        if not isinstance(value, str) or not value.strip():
            raise _fail(message)
        try:
            validate_email(value.strip(), check_deliverability=False)
        except EmailNotValidError:
            raise _fail(message)
        return value.strip().lower()

    return BeforeValidator(check)


def min_length(length: int, message: str) -> BeforeValidator:
    """Require a string of at least ``length`` characters."""

    def check(value: Any) -> Any:
        if not isinstance(value, str) or len(value) < length:
            raise _fail(message)
        return value

    return BeforeValidator(check)


def present(message: str) -> BeforeValidator:
    """Reject missing, null and empty values. Whitespace counts as a value."""

    def check(value: Any) -> Any:
        if not isinstance(value, str) or value == "":
            raise _fail(message)
        return value

    return BeforeValidator(check)


def comma_list(message: str) -> BeforeValidator:
    """Require a comma-separated string naming at least one item."""

    def check(value: Any) -> Any:
        if not isinstance(value, str) or not any(item.strip() for item in value.split(",")):
            raise _fail(message)
        return value

    return BeforeValidator(check)


def empty_as_none() -> BeforeValidator:
    """Read an empty string as an absent value."""

    def convert(value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    return BeforeValidator(convert)


class RuleModel(BaseModel):
    """
    Base for request bodies validated by field rules.

    Defaults are validated too, so an omitted field reports its own rule
    message instead of pydantic's generic "Field required".
    """

    model_config = ConfigDict(
        validate_default=True,
        populate_by_name=True,
    )

    @model_validator(mode="before")
    @classmethod
    def fill_aliased_defaults(cls, data: Any) -> Any:
        # An omitted aliased field is fed in under its alias so that its
        # rule error is located by the wire name, e.g. "from".
        if not isinstance(data, dict):
            return data
        missing = {}
        for name, field in cls.model_fields.items():
            if field.alias is None or field.alias == name:
                continue
            if field.alias in data or name in data:
                continue
            if field.default is PydanticUndefined:
                continue
            missing[field.alias] = field.default
        return {**data, **missing} if missing else data

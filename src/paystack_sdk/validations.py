"""Pre-flight parameter validation for resource methods.

Every check either returns ``None`` or raises a ``ValidationError`` subclass.
Nothing here performs I/O, so resource methods run these before touching the
connection and a malformed payload never costs a request.

Example:
    validate_fields(
        payload,
        {
            "email": {"type": "email", "required": True},
            "amount": {"type": "positive_integer", "required": True},
            "currency": {"type": "currency"},
        },
    )

Only the first failure is reported. Rule tables are walked in order and later
fields are never checked once one fails.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence, Sized
from datetime import date, datetime
import logging
import re
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from paystack_sdk._keys import has_key, key_name, lookup
from paystack_sdk.errors import (
    ConfigurationError,
    InvalidFormatError,
    InvalidValueError,
    MissingParameterError,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

log = logging.getLogger(__name__)

RuleKind = Literal[
    "presence",
    "email",
    "positive_integer",
    "reference",
    "date",
    "currency",
    "inclusion",
    "raw_hash",
]

_EMAIL_RE = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")
_REFERENCE_RE = re.compile(r"[A-Za-z0-9._=-]+")
_CURRENCY_RE = re.compile(r"[A-Z]{3}")


class ValidationRule(BaseModel):
    """One entry of a rule table passed to ``validate_fields``."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    kind: RuleKind = Field(default="presence", alias="type")
    required: bool = False
    #: Only meaningful (and mandatory) for ``inclusion`` rules.
    allowed_values: tuple[str, ...] | None = None
    case_sensitive: bool = False

    @model_validator(mode="after")
    def _check_allowed_values(self) -> ValidationRule:
        if self.kind == "inclusion" and not self.allowed_values:
            raise ValueError("inclusion rules need allowed_values")
        if self.kind != "inclusion" and self.allowed_values is not None:
            raise ValueError("allowed_values only applies to inclusion rules")
        return self


RuleTable = Mapping[Hashable, "ValidationRule | Mapping[str, Any]"]


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, Sized):
        return len(value) == 0
    return False


# --- Individual checks ---


def require_hash(value: Any, name: str = "Payload") -> None:
    """Require a mapping (dict-like) value."""
    if not isinstance(value, Mapping):
        raise InvalidFormatError(name, "Hash")


def require_present(value: Any, name: str = "Parameter") -> None:
    """Require a value that is neither ``None`` nor empty."""
    if _is_blank(value):
        raise MissingParameterError(name)


def require_all_present(
    payload: Mapping[Any, Any],
    required_fields: Iterable[Hashable],
    operation_name: str = "Operation",
) -> None:
    """Require every field of *required_fields* to be a key of *payload*.

    The first missing field, in the order given, is the one reported.
    """
    for field in required_fields:
        if not has_key(payload, field):
            log.debug("%s: missing required field %r", operation_name, field)
            raise MissingParameterError(key_name(field))


def require_positive_integer(
    value: Any, name: str = "Parameter", *, allow_none: bool = True
) -> None:
    """Require an ``int`` greater than or equal to 1."""
    if value is None:
        if not allow_none:
            raise MissingParameterError(name)
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidValueError(name, "must be a positive integer")


def require_email_format(
    value: Any, name: str = "Email", *, allow_none: bool = False
) -> None:
    """Require a ``local@domain.tld`` address without whitespace."""
    if value is None:
        if not allow_none:
            raise MissingParameterError(name)
        return
    if not isinstance(value, str) or not _EMAIL_RE.fullmatch(value):
        raise InvalidFormatError(name, "valid email address")


def require_reference_format(value: Any, name: str = "Reference") -> None:
    """Require letters, digits and the characters ``. _ = -`` only."""
    if not isinstance(value, str) or not _REFERENCE_RE.fullmatch(value):
        raise InvalidFormatError(
            name, "alphanumeric characters and the following: -, ., =, _"
        )


def require_date_format(
    value: Any, name: str = "Date", *, allow_none: bool = True
) -> None:
    """Require a ``date``/``datetime`` or a ``YYYY-MM-DD``/ISO 8601 string."""
    if value is None:
        if not allow_none:
            raise MissingParameterError(name)
        return
    if isinstance(value, (date, datetime)):
        return
    if not isinstance(value, str):
        raise InvalidFormatError(name, "YYYY-MM-DD or ISO8601")
    try:
        datetime.fromisoformat(value.strip())
    except ValueError as exc:
        raise InvalidFormatError(name, "YYYY-MM-DD or ISO8601") from exc


def require_currency_format(
    value: Any, name: str = "Currency", *, allow_none: bool = True
) -> None:
    """Require a 3-letter uppercase ISO 4217 code."""
    if value is None:
        if not allow_none:
            raise MissingParameterError(name)
        return
    if not isinstance(value, str) or not _CURRENCY_RE.fullmatch(value):
        raise InvalidFormatError(name, "3-letter ISO code (e.g., NGN, USD, GHS)")


def require_inclusion(
    value: Any,
    allowed_values: Sequence[str],
    name: str = "Parameter",
    *,
    allow_none: bool = True,
    case_sensitive: bool = False,
) -> None:
    """Require *value* to be one of *allowed_values*."""
    if value is None:
        if not allow_none:
            raise MissingParameterError(name)
        return

    if case_sensitive or not isinstance(value, str):
        found = value in allowed_values
    else:
        wanted = value.casefold()
        found = any(
            isinstance(allowed, str) and allowed.casefold() == wanted
            for allowed in allowed_values
        )
    if not found:
        raise InvalidValueError(name, f"must be one of: {', '.join(allowed_values)}")


# --- Composite runner ---


def _coerce_rule(
    field: Hashable, rule: ValidationRule | Mapping[str, Any]
) -> ValidationRule:
    if isinstance(rule, ValidationRule):
        return rule
    hint = "Rules look like {'type': 'email', 'required': True}."
    if not isinstance(rule, Mapping):
        raise ConfigurationError(
            f"Invalid validation rule for {key_name(field)!r}", hint=hint
        )
    try:
        return ValidationRule.model_validate(dict(rule))
    except PydanticValidationError as exc:
        raise ConfigurationError(
            f"Invalid validation rule for {key_name(field)!r}", hint=hint
        ) from exc


def _check(value: Any, name: str, rule: ValidationRule) -> None:
    allow_none = not rule.required
    match rule.kind:
        case "presence":
            if rule.required:
                require_present(value, name)
        case "email":
            require_email_format(value, name, allow_none=allow_none)
        case "positive_integer":
            require_positive_integer(value, name, allow_none=allow_none)
        case "reference":
            require_reference_format(value, name)
        case "date":
            require_date_format(value, name, allow_none=allow_none)
        case "currency":
            require_currency_format(value, name, allow_none=allow_none)
        case "inclusion":
            require_inclusion(
                value,
                rule.allowed_values or (),
                name,
                allow_none=allow_none,
                case_sensitive=rule.case_sensitive,
            )
        case "raw_hash":
            require_hash(value, name)


def validate_fields(payload: Any, validations: RuleTable) -> None:
    """Validate *payload* against a rule table, stopping at the first failure.

    Args:
        payload: The request payload; must be a mapping.
        validations: Field name to ``ValidationRule`` (or an equivalent dict).

    Raises:
        InvalidFormatError: If *payload* is not a mapping or a field is malformed.
        MissingParameterError: If a required field is absent.
        InvalidValueError: If a field holds an unacceptable value.
        ConfigurationError: If the rule table itself is malformed.
    """
    require_hash(payload, "Payload")
    rules = {field: _coerce_rule(field, rule) for field, rule in validations.items()}

    required = [field for field, rule in rules.items() if rule.required]
    if required:
        require_all_present(payload, required)

    for field, rule in rules.items():
        value = lookup(payload, field)
        if value is None:
            if rule.required:
                raise MissingParameterError(key_name(field))
            continue
        _check(value, key_name(field), rule)

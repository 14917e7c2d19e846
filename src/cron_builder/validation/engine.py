from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from cron_builder.core.config import get_settings
from cron_builder.core.errors import (
    AboveMaximumError,
    BelowMinimumError,
    InvalidCharacterError,
    NotAnArrayError,
    RangeHighInvalidError,
    RangeLowInvalidError,
    TooManyFieldsError,
)
from cron_builder.core.models import (
    FIELD_BOUNDS,
    MAX_FIELDS,
    WILDCARD,
    CronField,
)

logger = logging.getLogger(__name__)

_LEADING_CHAR = re.compile(r"^[0-9*-]")
_STRICT_TOKEN = re.compile(r"\*|[0-9]+(?:-[0-9]+)?")
_LEADING_INT = re.compile(r"^[0-9]+")
# Wider than any field maximum; longer runs are clamped before int().
_MAX_DIGITS = 9


def _leading_int(text: str) -> int | None:
    # "5x" reads as 5, "*5" reads as nothing.
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    digits = match.group().lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS:
        return 10**_MAX_DIGITS
    return int(digits)


def _too_many_fields() -> TooManyFieldsError:
    return TooManyFieldsError(f"Invalid cron expression; limited to {MAX_FIELDS} values.")


class CronValidator:
    """Stateless rule checks for cron fields, tokens and whole expressions.

    Bounds and field order are module constants in ``cron_builder.core.models``,
    so a single validator can be shared between any number of builders.
    """

    def __init__(self, strict: bool | None = None) -> None:
        self.strict = get_settings().strict_tokens if strict is None else strict

    def validate_expression(self, expression: Mapping[Any, Any]) -> None:
        """Validate a field -> tokens mapping.

        Missing fields are skipped; defaulting them is up to the caller.
        """
        if len(expression) > MAX_FIELDS:
            raise _too_many_fields()

        for field, tokens in expression.items():
            if not tokens:
                continue
            if not isinstance(tokens, (list, tuple)):
                raise NotAnArrayError(
                    f'Invalid value for "{field}"; Value must be in the form of an Array.'
                )
            for token in tokens:
                self.validate_value(field, token)

    def validate_string(self, expression: str) -> None:
        """Validate up to five space delimited fields by position."""
        parts = expression.split(" ")
        if len(parts) > MAX_FIELDS:
            raise _too_many_fields()

        for position, part in enumerate(parts):
            self.validate_value(CronField.at(position), part)

    def validate_value(self, field: Any, value: Any) -> None:
        measure = CronField.parse(field)
        bounds = FIELD_BOUNDS[measure]

        if not isinstance(value, str) or not _LEADING_CHAR.match(value):
            logger.debug("Rejected %r for %s: unsupported character", value, measure.value)
            raise InvalidCharacterError('Invalid value; Only numbers 0-9, "-", and "*" chars are allowed')
        if self.strict and not _STRICT_TOKEN.fullmatch(value):
            logger.debug("Rejected %r for %s: not a whole token", value, measure.value)
            raise InvalidCharacterError(
                f'Invalid value; "{value}" must be "*", a number, or a range of two numbers'
            )

        if value == WILDCARD:
            return

        if "-" in value:
            low, high = value.split("-", 1)
            low_value = _leading_int(low)
            if not low or (low_value is not None and bounds.below(low_value)):
                raise RangeLowInvalidError(
                    f'Invalid value; bottom of range is not valid for "{measure.value}". '
                    f"Limit is {bounds.minimum}."
                )
            high_value = _leading_int(high)
            if not high or (high_value is not None and bounds.above(high_value)):
                raise RangeHighInvalidError(
                    f'Invalid value; top of range is not valid for "{measure.value}". '
                    f"Limit is {bounds.maximum}."
                )
            return

        number = _leading_int(value)
        if number is None:
            return
        if bounds.below(number):
            raise BelowMinimumError(
                f'Invalid value; given value is not valid for "{measure.value}". '
                f'Minimum value is "{bounds.minimum}".'
            )
        if bounds.above(number):
            raise AboveMaximumError(
                f'Invalid value; given value is not valid for "{measure.value}". '
                f'Maximum value is "{bounds.maximum}".'
            )

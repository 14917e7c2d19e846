from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from cron_builder.core.errors import NotAnArrayError
from cron_builder.core.models import FIELD_ORDER, CronField, default_interval, is_default
from cron_builder.validation.engine import CronValidator

logger = logging.getLogger(__name__)


class CronBuilder:
    """Mutable five-field cron expression that is validated on every write.

    Every mutation runs through ``CronValidator`` before the expression is
    touched, so a rejected call leaves the previous state as it was.

    >>> builder = CronBuilder("5 4 * * *")
    >>> builder.add_value("dayOfTheWeek", "1")
    >>> builder.build()
    '5 4 * * 1'
    """

    def __init__(self, initial_expression: str | None = None, *, validator: CronValidator | None = None) -> None:
        self.validator = validator or CronValidator()
        self._expression: dict[CronField, list[str]] = {field: default_interval() for field in FIELD_ORDER}

        if initial_expression:
            self.validator.validate_string(initial_expression)
            parts = initial_expression.split(" ")
            for position, part in enumerate(parts):
                if part:
                    self._expression[CronField.at(position)] = [part]

    def __str__(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"CronBuilder({self.build()!r})"

    def build(self) -> str:
        return " ".join(",".join(self._expression[field]) for field in FIELD_ORDER)

    def add_value(self, field: Any, value: str) -> None:
        self.validator.validate_value(field, value)
        measure = CronField.parse(field)
        tokens = self._expression[measure]

        if is_default(tokens):
            self._expression[measure] = [value]
        elif value not in tokens:
            tokens.append(value)
        logger.debug("Added %r to %s -> %s", value, measure.value, self.get(measure))

    def remove_value(self, field: Any, value: str) -> str | None:
        """Remove one explicit token; an emptied field falls back to ``*``.

        Returns a message instead of raising when the field is already ``*``.
        """
        measure = CronField.parse(field)
        tokens = self._expression[measure]

        if is_default(tokens):
            message = (
                f'The value for "{measure.value}" is already at the default value of "*" - this is a no-op.'
            )
            logger.debug(message)
            return message

        remaining = [token for token in tokens if token != value]
        self._expression[measure] = remaining or default_interval()
        logger.debug("Removed %r from %s -> %s", value, measure.value, self.get(measure))
        return None

    def get(self, field: Any) -> str:
        return ",".join(self._expression[CronField.parse(field)])

    def set(self, field: Any, values: list[str] | tuple[str, ...]) -> str:
        if not isinstance(values, (list, tuple)):
            raise NotAnArrayError("Invalid value; Value must be in the form of an Array.")

        for value in values:
            self.validator.validate_value(field, value)

        measure = CronField.parse(field)
        # No fallback to "*" here: set(field, []) leaves the slot empty.
        self._expression[measure] = list(values)
        logger.debug("Set %s -> %s", measure.value, self.get(measure))
        return self.get(measure)

    def get_all(self) -> dict[str, list[str]]:
        return {field.value: list(self._expression[field]) for field in FIELD_ORDER}

    def set_all(self, expression: Mapping[Any, Any]) -> None:
        self.validator.validate_expression(expression)

        replacement = {field: default_interval() for field in FIELD_ORDER}
        for field, values in expression.items():
            measure = CronField.parse(field)
            if values:
                replacement[measure] = list(values)
        self._expression = replacement
        logger.debug("Replaced expression -> %s", self.build())

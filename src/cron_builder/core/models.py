from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from cron_builder.core.errors import InvalidFieldError


WILDCARD = "*"
DEFAULT_INTERVAL: tuple[str, ...] = (WILDCARD,)
MAX_FIELDS = 5

_FIELD_ALIASES = {
    "day_of_the_month": "dayOfTheMonth",
    "day_of_month": "dayOfTheMonth",
    "day_of_the_week": "dayOfTheWeek",
    "day_of_week": "dayOfTheWeek",
}


class CronField(str, Enum):
    MINUTE = "minute"
    HOUR = "hour"
    DAY_OF_THE_MONTH = "dayOfTheMonth"
    MONTH = "month"
    DAY_OF_THE_WEEK = "dayOfTheWeek"

    @classmethod
    def _missing_(cls, value: object) -> "CronField | None":
        if isinstance(value, str) and value in _FIELD_ALIASES:
            return cls(_FIELD_ALIASES[value])
        return None

    @classmethod
    def parse(cls, value: Any) -> "CronField":
        try:
            return cls(value)
        except ValueError:
            raise InvalidFieldError(
                "Invalid measureOfTime; Valid options are: " + ", ".join(FIELD_NAMES)
            ) from None

    @classmethod
    def at(cls, position: int) -> "CronField":
        return FIELD_ORDER[position]


class FieldBounds(BaseModel):
    model_config = ConfigDict(frozen=True)

    minimum: int = Field(..., ge=0)
    maximum: int = Field(..., ge=0)

    @model_validator(mode="after")
    def _check_order(self) -> "FieldBounds":
        if self.maximum < self.minimum:
            raise ValueError("maximum must be >= minimum")
        return self

    def below(self, value: int) -> bool:
        return value < self.minimum

    def above(self, value: int) -> bool:
        return value > self.maximum


# Position in this tuple is the position in the serialized expression.
FIELD_ORDER: tuple[CronField, ...] = (
    CronField.MINUTE,
    CronField.HOUR,
    CronField.DAY_OF_THE_MONTH,
    CronField.MONTH,
    CronField.DAY_OF_THE_WEEK,
)
FIELD_NAMES: tuple[str, ...] = tuple(field.value for field in FIELD_ORDER)

FIELD_BOUNDS: MappingProxyType[CronField, FieldBounds] = MappingProxyType(
    {
        CronField.MINUTE: FieldBounds(minimum=0, maximum=59),
        CronField.HOUR: FieldBounds(minimum=0, maximum=23),
        CronField.DAY_OF_THE_MONTH: FieldBounds(minimum=1, maximum=31),
        CronField.MONTH: FieldBounds(minimum=1, maximum=12),
        CronField.DAY_OF_THE_WEEK: FieldBounds(minimum=0, maximum=7),
    }
)


def default_interval() -> list[str]:
    return list(DEFAULT_INTERVAL)


def is_default(tokens: list[str]) -> bool:
    return len(tokens) == 1 and tokens[0] == WILDCARD

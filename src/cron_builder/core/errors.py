from __future__ import annotations

from enum import Enum


class CronErrorCode(str, Enum):
    TOO_MANY_FIELDS = "TOO_MANY_FIELDS"
    INVALID_FIELD = "INVALID_FIELD"
    INVALID_CHARACTER = "INVALID_CHARACTER"
    RANGE_LOW_INVALID = "RANGE_LOW_INVALID"
    RANGE_HIGH_INVALID = "RANGE_HIGH_INVALID"
    BELOW_MINIMUM = "BELOW_MINIMUM"
    ABOVE_MAXIMUM = "ABOVE_MAXIMUM"
    NOT_AN_ARRAY = "NOT_AN_ARRAY"


class CronExpressionError(ValueError):
    """Base class for every rejected field, token or expression."""

    code: CronErrorCode

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TooManyFieldsError(CronExpressionError):
    code = CronErrorCode.TOO_MANY_FIELDS


class InvalidFieldError(CronExpressionError):
    code = CronErrorCode.INVALID_FIELD


class InvalidCharacterError(CronExpressionError):
    code = CronErrorCode.INVALID_CHARACTER


class RangeLowInvalidError(CronExpressionError):
    code = CronErrorCode.RANGE_LOW_INVALID


class RangeHighInvalidError(CronExpressionError):
    code = CronErrorCode.RANGE_HIGH_INVALID


class BelowMinimumError(CronExpressionError):
    code = CronErrorCode.BELOW_MINIMUM


class AboveMaximumError(CronExpressionError):
    code = CronErrorCode.ABOVE_MAXIMUM


class NotAnArrayError(CronExpressionError, TypeError):
    code = CronErrorCode.NOT_AN_ARRAY

"""Field, token and expression checks for the builder."""

from cron_builder.validation.engine import CronValidator

__all__ = ["CronValidator"]

"""Incremental cron expression builder."""

from cron_builder.builder.service import CronBuilder

__all__ = ["CronBuilder"]

"""Utility functions."""

from .config import load_config, get_default_config
from .datetime_utils import add_days, days_between, month_label, parse_iso_date

__all__ = ['load_config', 'get_default_config', 'add_days', 'days_between', 'month_label', 'parse_iso_date']

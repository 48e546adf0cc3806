"""Memento mori life calendar: one dot per week of an expected lifespan."""

from memento_mori.calendar_math import completed_years, parse_date, total_weeks, weeks_lived
from memento_mori.clock import SimulationClock
from memento_mori.config import DEFAULT_CONFIG, CalendarConfig, Person, load_config, parse_config
from memento_mori.errors import ConfigError, InvalidDateError, MementoError, UnknownLayoutError
from memento_mori.layouts import LAYOUTS, Layout, get_layout
from memento_mori.render import (
    GridState,
    RenderResult,
    RenderSnapshot,
    format_summary,
    render,
    wrap_text,
)
from memento_mori.special_days import SpecialDay, resolve_special_day
from memento_mori.surface import Surface

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "LAYOUTS",
    "CalendarConfig",
    "ConfigError",
    "GridState",
    "InvalidDateError",
    "Layout",
    "MementoError",
    "Person",
    "RenderResult",
    "RenderSnapshot",
    "SimulationClock",
    "SpecialDay",
    "Surface",
    "UnknownLayoutError",
    "completed_years",
    "format_summary",
    "get_layout",
    "load_config",
    "parse_config",
    "parse_date",
    "render",
    "resolve_special_day",
    "total_weeks",
    "weeks_lived",
    "wrap_text",
]

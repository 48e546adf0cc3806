import datetime
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from loguru import logger

from memento_mori.calendar_math import parse_date
from memento_mori.errors import ConfigError, InvalidDateError
from memento_mori.layouts import DEFAULT_LAYOUT
from memento_mori.special_days import SpecialDay

DEFAULT_BIRTHDATE: str = "1987-08-17"
DEFAULT_LIFESPAN: int = 80
DEFAULT_CONFIG_FILENAME: str = "config.json"


@dataclass(frozen=True)
class Person:
    birthdate: datetime.date
    expected_lifespan: int = DEFAULT_LIFESPAN


@dataclass(frozen=True)
class CalendarConfig:
    person: Person
    special_days: tuple[SpecialDay, ...] = field(default_factory=tuple)
    layout: str = DEFAULT_LAYOUT


DEFAULT_CONFIG = CalendarConfig(person=Person(birthdate=parse_date(DEFAULT_BIRTHDATE)))


def _parse_person(raw: Any) -> Person:
    if raw is None:
        return DEFAULT_CONFIG.person
    if not isinstance(raw, Mapping):
        raise ConfigError("'person' must be an object")

    birthdate = raw.get("birthdate", DEFAULT_BIRTHDATE)
    if not isinstance(birthdate, str):
        raise InvalidDateError(birthdate)

    lifespan = raw.get("expectedLifespan", DEFAULT_LIFESPAN)
    # bool is an int subclass
    if isinstance(lifespan, bool) or not isinstance(lifespan, int) or lifespan <= 0:
        raise ConfigError(f"Invalid expectedLifespan {lifespan!r}, must be a positive integer")

    return Person(birthdate=parse_date(birthdate), expected_lifespan=lifespan)


def _parse_special_days(raw: Any) -> tuple[SpecialDay, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise ConfigError("'specialDays' must be a list")

    special_days: list[SpecialDay] = []
    for position, entry in enumerate(raw):
        if not isinstance(entry, Mapping) or not isinstance(entry.get("date"), str):
            raise ConfigError(f"specialDays[{position}] needs a \"date\" in MM-DD form")
        special_days.append(
            SpecialDay(
                date=entry["date"].strip(),
                title=str(entry.get("title", "")),
                quote=str(entry.get("quote", "")),
            )
        )
    return tuple(special_days)


def parse_config(data: Mapping[str, Any]) -> CalendarConfig:
    """Builds a CalendarConfig, filling every missing key from the defaults."""
    layout = data.get("layout", DEFAULT_LAYOUT)
    if not isinstance(layout, str):
        raise ConfigError(f"Invalid layout {layout!r}")
    return CalendarConfig(
        person=_parse_person(data.get("person")),
        special_days=_parse_special_days(data.get("specialDays")),
        layout=layout,
    )


def load_config(path: str | Path = DEFAULT_CONFIG_FILENAME) -> CalendarConfig:
    """Reads a JSON config file.

    A missing or unreadable file, malformed JSON, or a document that isn't an
    object is logged and replaced by DEFAULT_CONFIG. Values that are present
    but invalid raise ConfigError.
    """
    config_path = Path(path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.warning("Config file {} not found, using defaults", config_path)
        return DEFAULT_CONFIG
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.warning("Unable to read config file {} ({}), using defaults", config_path, exc)
        return DEFAULT_CONFIG

    if not isinstance(data, dict):
        logger.warning("Config file {} does not hold a JSON object, using defaults", config_path)
        return DEFAULT_CONFIG

    config = parse_config(data)
    logger.debug(
        "Loaded config from {}: birthdate={}, lifespan={}, {} special day(s)",
        config_path,
        config.person.birthdate,
        config.person.expected_lifespan,
        len(config.special_days),
    )
    return config

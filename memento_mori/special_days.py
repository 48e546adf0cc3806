import datetime
from collections.abc import Iterable
from dataclasses import dataclass
from zoneinfo import ZoneInfo

from loguru import logger

# All special days are matched against the civil date in this zone, wherever
# the caller happens to be.
SPECIAL_DAY_TZ_NAME: str = "America/New_York"
EASTERN: ZoneInfo = ZoneInfo(SPECIAL_DAY_TZ_NAME)


@dataclass(frozen=True)
class SpecialDay:
    date: str  # "MM-DD"
    title: str = ""
    quote: str = ""


def local_noon(day: datetime.date) -> datetime.datetime:
    """Noon on the given date in the machine's local zone, as an aware datetime."""
    return datetime.datetime(day.year, day.month, day.day, 12).astimezone()


def month_day_key(moment: datetime.datetime | datetime.date) -> str:
    """The "MM-DD" string of a moment as seen in the Eastern zone.

    Plain dates are taken at local noon; naive datetimes are read as local
    time.
    """
    if not isinstance(moment, datetime.datetime):
        moment = local_noon(moment)
    return moment.astimezone(EASTERN).strftime("%m-%d")


def resolve_special_day(
    moment: datetime.datetime | datetime.date, special_days: Iterable[SpecialDay]
) -> SpecialDay | None:
    key = month_day_key(moment)
    for special_day in special_days:
        if special_day.date == key:
            logger.debug("Special day {} matched: {}", key, special_day.title)
            return special_day
    return None

import datetime

from memento_mori.errors import InvalidDateError

WEEKS_PER_YEAR: int = 52
GREGORIAN_CYCLE_YEARS: int = 400
DATE_FORMATS: tuple[str, ...] = ("%Y/%m/%d", "%Y-%m-%d", "%d/%m/%Y", "%d-%m-%Y")


def parse_date(datestr: str) -> datetime.date:
    for form in DATE_FORMATS:
        try:
            parsed: datetime.datetime = datetime.datetime.strptime(datestr.strip(), form)  # noqa: DTZ007
        except ValueError:
            continue
        else:
            return parsed.date()

    raise InvalidDateError(datestr)


def as_date(value: datetime.date | datetime.datetime | str) -> datetime.date:
    if isinstance(value, str):
        return parse_date(value)
    if isinstance(value, datetime.datetime):
        return value.date()
    return value


def anniversary(birthdate: datetime.date, year: int) -> datetime.date:
    """Birthday anniversary in the given year.

    A 29 February birthday rolls over to 1 March in non-leap years.
    """
    try:
        return datetime.date(year, birthdate.month, birthdate.day)
    except ValueError:
        if (birthdate.month == 2) and (birthdate.day == 29):  # noqa: PLR2004
            return datetime.date(year, 3, 1)
        raise


def completed_years(
    birthdate: datetime.date | str, reference: datetime.date | datetime.datetime | str
) -> int:
    """Whole birthday-to-birthday years between birthdate and reference (the age)."""
    birth = as_date(birthdate)
    now = as_date(reference)
    years = now.year - birth.year
    if now < anniversary(birth, now.year):
        years -= 1
    return years


def last_anniversary(
    birthdate: datetime.date | str, reference: datetime.date | datetime.datetime | str
) -> datetime.date:
    """Most recent anniversary on or before reference.

    Raises ValueError when that anniversary would fall in year 0; use
    days_since_anniversary for such references.
    """
    birth = as_date(birthdate)
    now = as_date(reference)
    this_year = anniversary(birth, now.year)
    if now < this_year:
        return anniversary(birth, now.year - 1)
    return this_year


def days_since_anniversary(
    birthdate: datetime.date | str, reference: datetime.date | datetime.datetime | str
) -> int:
    """Days from the most recent birthday anniversary to reference.

    Works for references in year 1, whose previous anniversary would fall in
    year 0.
    """
    birth = as_date(birthdate)
    now = as_date(reference)
    if now.year == datetime.MINYEAR:
        # The Gregorian calendar repeats every 400 years, leap days included
        now = now.replace(year=now.year + GREGORIAN_CYCLE_YEARS)
    return (now - last_anniversary(birth, now)).days


def weeks_lived(
    birthdate: datetime.date | str, reference: datetime.date | datetime.datetime | str
) -> int:
    """Weeks lived, counting every completed year as exactly 52 weeks.

    Datetimes are truncated to their calendar date, so callers should pass
    values already expressed in the civil zone they care about. The result is
    negative when the reference precedes the birthdate.
    """
    birth = as_date(birthdate)
    now = as_date(reference)
    weeks_since: int = days_since_anniversary(birth, now) // 7
    return completed_years(birth, now) * WEEKS_PER_YEAR + weeks_since


def total_weeks(lifespan_years: int) -> int:
    return lifespan_years * WEEKS_PER_YEAR

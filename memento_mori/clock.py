import datetime

from loguru import logger

from memento_mori.special_days import local_noon


class SimulationClock:
    """The single "current date" every render is computed from.

    The value is only ever replaced, never partially updated.
    """

    def __init__(self, current: datetime.datetime | None = None) -> None:
        self._current: datetime.datetime = current or self._now()

    @staticmethod
    def _now() -> datetime.datetime:
        return datetime.datetime.now().astimezone()

    @property
    def current(self) -> datetime.datetime:
        return self._current

    @property
    def today(self) -> datetime.date:
        return self._current.date()

    def set_date(self, day: datetime.date) -> datetime.datetime:
        # Noon keeps the civil date stable across small offset shifts
        self._current = local_noon(day)
        logger.debug("Simulated date set to {}", self._current.isoformat())
        return self._current

    def reset(self) -> datetime.datetime:
        self._current = self._now()
        logger.debug("Simulated date reset to {}", self._current.isoformat())
        return self._current

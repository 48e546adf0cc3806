"""Shared fixtures for the memento_mori test suite."""

import datetime

import pytest

from memento_mori.config import CalendarConfig, Person
from memento_mori.special_days import SpecialDay
from memento_mori.surface import Surface


class RecordingSurface(Surface):
    """Surface double that records draw calls instead of rasterizing them.

    Text is measured as a fixed width per character.
    """

    def __init__(self, char_width: float = 10) -> None:
        self.char_width = char_width
        self.ops: list[tuple] = []
        self.font: tuple[str, float] | None = None

    def clear(self, color=(1.0, 1.0, 1.0)) -> None:
        self.ops.append(("clear", color))

    def fill_rect(self, x, y, width, height, color) -> None:
        self.ops.append(("fill_rect", x, y, width, height, color))

    def stroke_rect(self, x, y, width, height, color, line_width=1) -> None:
        self.ops.append(("stroke_rect", x, y, width, height, color, line_width))

    def fill_circle(self, x, y, radius, color) -> None:
        self.ops.append(("fill_circle", x, y, radius, color))

    def stroke_circle(self, x, y, radius, color, line_width=1) -> None:
        self.ops.append(("stroke_circle", x, y, radius, color, line_width))

    def set_font(self, family, size) -> None:
        self.font = (family, size)

    def fill_text(self, text, x, y, color) -> None:
        self.ops.append(("fill_text", text, x, y, color))

    def text_width(self, text) -> float:
        return len(text) * self.char_width

    def count(self, *kinds: str) -> int:
        return sum(1 for op in self.ops if op[0] in kinds)

    @property
    def filled(self) -> int:
        return self.count("fill_circle", "fill_rect")

    @property
    def outlined(self) -> int:
        return self.count("stroke_circle", "stroke_rect")

    @property
    def texts(self) -> list[str]:
        return [op[1] for op in self.ops if op[0] == "fill_text"]


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def person() -> Person:
    return Person(birthdate=datetime.date(1990, 6, 15), expected_lifespan=80)


@pytest.fixture
def config(person: Person) -> CalendarConfig:
    return CalendarConfig(
        person=person,
        special_days=(
            SpecialDay(date="12-25", title="Christmas", quote="Memento mori."),
            SpecialDay(date="01-01", title="New Year", quote="Carpe diem, quam minimum credula postero."),
        ),
    )


@pytest.fixture
def make_surface():
    return RecordingSurface

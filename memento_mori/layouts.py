"""Interchangeable ways of laying out one marker per week on the display.

Every layout shares the same contract: clear to white, then for each week
index below ``total_weeks`` draw a solid black marker when the week has been
lived and a thin light-gray outline otherwise. Nothing is drawn for indices
at or beyond ``total_weeks``, however many weeks were actually lived.
"""

import math
from collections.abc import Iterator

from memento_mori.calendar_math import WEEKS_PER_YEAR
from memento_mori.errors import UnknownLayoutError
from memento_mori.surface import (
    BLACK,
    DISPLAY_HEIGHT,
    DISPLAY_WIDTH,
    FAINT_GRAY,
    LIGHT_GRAY,
    SILVER_GRAY,
    WHITE,
    Color,
    Surface,
)

CENTER_X: float = DISPLAY_WIDTH / 2
CENTER_Y: float = DISPLAY_HEIGHT / 2
MIN_YEARS: int = 80
GOLDEN_RATIO: float = (1 + math.sqrt(5)) / 2

Position = tuple[int, float, float]
MarkerSize = float | tuple[float, float]


def year_rows(total_weeks: int) -> int:
    """Rows needed for one row per year, never fewer than the usual 80."""
    return max(MIN_YEARS, math.ceil(total_weeks / WEEKS_PER_YEAR))


class Layout:
    name: str = ""
    description: str = ""
    PAST_COLOR: Color = BLACK
    FUTURE_COLOR: Color = LIGHT_GRAY
    LINE_WIDTH: float = 1
    DOT_RADIUS: float = 2

    def positions(self, total_weeks: int) -> Iterator[Position]:
        """Yields (week index, x, y) for every week in [0, total_weeks)."""
        raise NotImplementedError

    def marker_size(self, total_weeks: int) -> MarkerSize:
        return self.DOT_RADIUS

    def draw_marker(
        self, surface: Surface, x: float, y: float, size: MarkerSize, *, past: bool
    ) -> None:
        if past:
            surface.fill_circle(x, y, size, self.PAST_COLOR)
        else:
            surface.stroke_circle(x, y, size, self.FUTURE_COLOR, self.LINE_WIDTH)

    def render(self, surface: Surface, weeks_lived: int, total_weeks: int) -> None:
        surface.clear(WHITE)
        size = self.marker_size(total_weeks)
        for index, x, y in self.positions(total_weeks):
            self.draw_marker(surface, x, y, size, past=index < weeks_lived)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


class SpiralLayout(Layout):
    name = "spiral"
    description = "Archimedean spiral from the center outward"
    ANGLE_STEP: float = 0.3
    RADIUS_GROWTH: float = 0.18

    def positions(self, total_weeks: int) -> Iterator[Position]:
        for i in range(total_weeks):
            angle = i * self.ANGLE_STEP
            radius = i * self.RADIUS_GROWTH
            yield i, CENTER_X + math.cos(angle) * radius, CENTER_Y + math.sin(angle) * radius


class ConcentricLayout(Layout):
    name = "concentric"
    description = "One ring per year, like tree rings"
    MAX_RADIUS: float = 220

    def positions(self, total_weeks: int) -> Iterator[Position]:
        rings = year_rows(total_weeks)
        angle_step = 2 * math.pi / WEEKS_PER_YEAR
        for i in range(total_weeks):
            year, week = divmod(i, WEEKS_PER_YEAR)
            radius = (year + 1) * (self.MAX_RADIUS / rings)
            angle = week * angle_step - math.pi / 2  # 12 o'clock
            yield i, CENTER_X + math.cos(angle) * radius, CENTER_Y + math.sin(angle) * radius


class WaveLayout(Layout):
    name = "wave"
    description = "Rows of 80 weeks displaced by a sine wave"
    COLUMNS: int = 80
    AMPLITUDE: float = 30
    FREQUENCY: float = 0.1

    def positions(self, total_weeks: int) -> Iterator[Position]:
        rows = max(1, math.ceil(total_weeks / self.COLUMNS))
        cell_width = DISPLAY_WIDTH / self.COLUMNS
        cell_height = DISPLAY_HEIGHT / rows
        for i in range(total_weeks):
            row, col = divmod(i, self.COLUMNS)
            x = col * cell_width + cell_width / 2
            y = row * cell_height + cell_height / 2 + math.sin(i * self.FREQUENCY) * self.AMPLITUDE
            yield i, x, y


class CircularProgressLayout(Layout):
    name = "circular"
    description = "A single ring, clockwise from the top"
    RADIUS: float = 200
    DOT_RADIUS = 3

    def positions(self, total_weeks: int) -> Iterator[Position]:
        for i in range(total_weeks):
            angle = (i / total_weeks) * 2 * math.pi - math.pi / 2
            yield i, CENTER_X + math.cos(angle) * self.RADIUS, CENTER_Y + math.sin(angle) * self.RADIUS


class FibonacciLayout(Layout):
    name = "fibonacci"
    description = "Sunflower spiral using the golden angle"
    SCALE: float = 3

    def positions(self, total_weeks: int) -> Iterator[Position]:
        for i in range(total_weeks):
            angle = i * 2 * math.pi / GOLDEN_RATIO
            radius = self.SCALE * math.sqrt(i)
            yield i, CENTER_X + math.cos(angle) * radius, CENTER_Y + math.sin(angle) * radius


class TimelineLayout(Layout):
    """Years as rows and weeks as columns, one rectangle per week.

    Positions are the top-left corners of the cells.
    """

    name = "timeline"
    description = "Years as rows of 52 rectangles"
    FUTURE_COLOR = FAINT_GRAY

    @staticmethod
    def cell_size(total_weeks: int) -> tuple[float, float]:
        return DISPLAY_WIDTH / WEEKS_PER_YEAR, DISPLAY_HEIGHT / year_rows(total_weeks)

    def positions(self, total_weeks: int) -> Iterator[Position]:
        cell_width, cell_height = self.cell_size(total_weeks)
        for i in range(total_weeks):
            year, week = divmod(i, WEEKS_PER_YEAR)
            yield i, week * cell_width, year * cell_height

    def marker_size(self, total_weeks: int) -> MarkerSize:
        cell_width, cell_height = self.cell_size(total_weeks)
        return cell_width - 1, cell_height - 1

    def draw_marker(
        self, surface: Surface, x: float, y: float, size: MarkerSize, *, past: bool
    ) -> None:
        box_width, box_height = size
        if past:
            surface.fill_rect(x, y, box_width, box_height, self.PAST_COLOR)
        else:
            surface.stroke_rect(
                x + 0.5, y + 0.5, box_width - 1, box_height - 1, self.FUTURE_COLOR, self.LINE_WIDTH
            )


class VerticalColumnsLayout(TimelineLayout):
    """Same cells as the timeline, filled column by column."""

    name = "columns"
    description = "Weeks as columns, drawn top to bottom"

    def positions(self, total_weeks: int) -> Iterator[Position]:
        cell_width, cell_height = self.cell_size(total_weeks)
        years = year_rows(total_weeks)
        for week in range(WEEKS_PER_YEAR):
            for year in range(years):
                index = year * WEEKS_PER_YEAR + week
                if index < total_weeks:
                    yield index, week * cell_width, year * cell_height


class GridLayout(Layout):
    name = "grid"
    description = "Small dots, 52 per row, one row per year"
    FUTURE_COLOR = SILVER_GRAY

    def positions(self, total_weeks: int) -> Iterator[Position]:
        rows = year_rows(total_weeks)
        cell_width = DISPLAY_WIDTH / WEEKS_PER_YEAR
        cell_height = DISPLAY_HEIGHT / rows
        offset_x = (DISPLAY_WIDTH - WEEKS_PER_YEAR * cell_width) / 2
        offset_y = (DISPLAY_HEIGHT - rows * cell_height) / 2
        for i in range(total_weeks):
            row, col = divmod(i, WEEKS_PER_YEAR)
            yield (
                i,
                offset_x + col * cell_width + cell_width / 2,
                offset_y + row * cell_height + cell_height / 2,
            )

    def marker_size(self, total_weeks: int) -> MarkerSize:
        cell_height = DISPLAY_HEIGHT / year_rows(total_weeks)
        return min(DISPLAY_WIDTH / WEEKS_PER_YEAR, cell_height) / 3


DEFAULT_LAYOUT: str = "grid"

LAYOUTS: dict[str, Layout] = {
    layout.name: layout
    for layout in (
        GridLayout(),
        SpiralLayout(),
        ConcentricLayout(),
        WaveLayout(),
        TimelineLayout(),
        CircularProgressLayout(),
        FibonacciLayout(),
        VerticalColumnsLayout(),
    )
}


def get_layout(name: str) -> Layout:
    try:
        return LAYOUTS[name.strip().lower()]
    except KeyError:
        raise UnknownLayoutError(name, list(LAYOUTS)) from None

import datetime
from collections.abc import Iterator
from dataclasses import dataclass

from loguru import logger

from memento_mori.calendar_math import as_date, completed_years, total_weeks, weeks_lived
from memento_mori.config import CalendarConfig, Person
from memento_mori.layouts import Layout, get_layout
from memento_mori.special_days import SpecialDay, resolve_special_day
from memento_mori.surface import BLACK, WHITE, Surface

QUOTE_FONT: str = "serif"
QUOTE_FONT_SIZE: float = 36
QUOTE_LINE_HEIGHT: float = 50
QUOTE_MARGIN: float = 60


@dataclass(frozen=True)
class GridState:
    weeks_lived: int
    total_weeks: int

    def is_past(self, index: int) -> bool:
        return index < self.weeks_lived

    def statuses(self) -> Iterator[str]:
        for index in range(self.total_weeks):
            yield "past" if self.is_past(index) else "future"

    @property
    def past_count(self) -> int:
        return min(max(self.weeks_lived, 0), self.total_weeks)

    @property
    def future_count(self) -> int:
        return self.total_weeks - self.past_count

    @property
    def percentage(self) -> float:
        """Share of the lifespan lived, clamped to [0, 100] for display."""
        if self.total_weeks <= 0:
            return 0.0
        return min(max(self.weeks_lived / self.total_weeks * 100, 0.0), 100.0)


@dataclass(frozen=True)
class RenderSnapshot:
    """Everything a single render depends on."""

    config: CalendarConfig
    current: datetime.datetime | datetime.date
    layout: Layout | None = None

    @property
    def active_layout(self) -> Layout:
        return self.layout or get_layout(self.config.layout)


@dataclass(frozen=True)
class RenderResult:
    grid: GridState
    age: int
    simulated_date: datetime.date
    special_day: SpecialDay | None = None


def compute_grid_state(person: Person, reference: datetime.date | datetime.datetime) -> GridState:
    return GridState(
        weeks_lived=weeks_lived(person.birthdate, reference),
        total_weeks=total_weeks(person.expected_lifespan),
    )


def wrap_text(surface: Surface, text: str, max_width: float) -> list[str]:
    """Greedy word wrap using the surface's current font for measurement.

    Only the edges of the text are trimmed; runs of spaces between words are
    kept. Words are never split, so a single word wider than max_width gets a
    line of its own.
    """
    lines: list[str] = []
    current_line = ""
    for word in text.strip().split(" "):
        candidate = f"{current_line} {word}" if current_line else word
        if current_line and surface.text_width(candidate) > max_width:
            lines.append(current_line.rstrip())
            current_line = word
        else:
            current_line = candidate
    if current_line:
        lines.append(current_line)
    return lines


def render_quote(surface: Surface, special_day: SpecialDay) -> list[str]:
    surface.clear(WHITE)
    surface.set_font(QUOTE_FONT, QUOTE_FONT_SIZE)
    lines = wrap_text(surface, special_day.quote, surface.width - 2 * QUOTE_MARGIN)
    start_y = surface.height / 2 - (len(lines) - 1) * QUOTE_LINE_HEIGHT / 2
    for index, line in enumerate(lines):
        surface.fill_text(line, surface.width / 2, start_y + index * QUOTE_LINE_HEIGHT, BLACK)
    return lines


def render(surface: Surface, snapshot: RenderSnapshot) -> RenderResult:
    """Draws either the special-day quote or the active layout."""
    person = snapshot.config.person
    grid = compute_grid_state(person, snapshot.current)
    special_day = resolve_special_day(snapshot.current, snapshot.config.special_days)

    if special_day is not None:
        logger.debug("Rendering quote for special day '{}'", special_day.title)
        render_quote(surface, special_day)
    else:
        layout = snapshot.active_layout
        logger.debug(
            "Rendering {} layout: {} of {} weeks lived",
            layout.name,
            grid.weeks_lived,
            grid.total_weeks,
        )
        layout.render(surface, grid.weeks_lived, grid.total_weeks)

    return RenderResult(
        grid=grid,
        age=completed_years(person.birthdate, snapshot.current),
        simulated_date=as_date(snapshot.current),
        special_day=special_day,
    )


def format_summary(result: RenderResult) -> str:
    lines = [
        f"Weeks Lived: {result.grid.weeks_lived} of {result.grid.total_weeks}"
        f" ({result.grid.percentage:.1f}%)",
        f"Current Age: {result.age} years",
        f"Simulated Date: {result.simulated_date.isoformat()}",
    ]
    if result.special_day is not None:
        lines.append(f"Special Day: {result.special_day.title}")
    return "\n".join(lines)

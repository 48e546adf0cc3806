import dataclasses
import datetime

import pytest

from memento_mori.config import DEFAULT_CONFIG
from memento_mori.layouts import get_layout
from memento_mori.render import (
    QUOTE_LINE_HEIGHT,
    GridState,
    RenderSnapshot,
    compute_grid_state,
    format_summary,
    render,
    render_quote,
    wrap_text,
)
from memento_mori.special_days import EASTERN, SpecialDay


def eastern_noon(year: int, month: int, day: int) -> datetime.datetime:
    return datetime.datetime(year, month, day, 12, tzinfo=EASTERN)


class TestWrapText:
    def test_empty_text_has_no_lines(self, surface):
        assert wrap_text(surface, "", 100) == []
        assert wrap_text(surface, "   ", 100) == []

    def test_short_text_is_one_trimmed_line(self, surface):
        assert wrap_text(surface, "  memento mori  ", 1000) == ["memento mori"]

    def test_wraps_greedily_on_word_boundaries(self, surface):
        assert wrap_text(surface, "one two three four", 75) == ["one two", "three", "four"]

    def test_never_splits_long_words(self, surface):
        assert wrap_text(surface, "a extraordinarily b", 50) == ["a", "extraordinarily", "b"]

    def test_exact_fit_stays_on_the_line(self, surface):
        assert wrap_text(surface, "abcd efgh", 90) == ["abcd efgh"]

    def test_runs_of_inner_spaces_survive(self, surface):
        assert wrap_text(surface, "  memento   mori  ", 10_000) == ["memento   mori"]

    def test_spaces_at_a_break_are_dropped(self, surface):
        assert wrap_text(surface, "abc   defgh", 60) == ["abc", "defgh"]


class TestGridState:
    def test_statuses(self):
        grid = GridState(weeks_lived=2, total_weeks=4)
        assert list(grid.statuses()) == ["past", "past", "future", "future"]
        assert (grid.past_count, grid.future_count) == (2, 2)

    def test_percentage_is_clamped_for_display(self):
        assert GridState(weeks_lived=5000, total_weeks=4160).percentage == 100.0
        assert GridState(weeks_lived=-10, total_weeks=4160).percentage == 0.0
        assert GridState(weeks_lived=5000, total_weeks=4160).weeks_lived == 5000

    def test_counts_never_exceed_total(self):
        grid = GridState(weeks_lived=5000, total_weeks=4160)
        assert (grid.past_count, grid.future_count) == (4160, 0)

    def test_compute_grid_state(self, person):
        grid = compute_grid_state(person, datetime.date(2024, 6, 15))
        assert grid == GridState(weeks_lived=1768, total_weeks=4160)
        assert grid.percentage == pytest.approx(42.5)


class TestRender:
    def test_ordinary_day_draws_the_configured_layout(self, surface, config):
        result = render(surface, RenderSnapshot(config=config, current=eastern_noon(2024, 6, 15)))
        assert result.special_day is None
        assert result.age == 34
        assert result.grid == GridState(weeks_lived=1768, total_weeks=4160)
        assert result.simulated_date == datetime.date(2024, 6, 15)
        assert surface.filled == 1768
        assert surface.outlined == 4160 - 1768
        assert surface.count("stroke_circle") == surface.outlined
        assert surface.texts == []

    def test_explicit_layout_overrides_config(self, surface, config):
        snapshot = RenderSnapshot(
            config=config, current=eastern_noon(2024, 6, 15), layout=get_layout("timeline")
        )
        render(surface, snapshot)
        assert surface.count("fill_rect") == 1768
        assert surface.count("fill_circle", "stroke_circle") == 0

    def test_layout_named_in_config(self, surface, config):
        config = dataclasses.replace(config, layout="spiral")
        snapshot = RenderSnapshot(config=config, current=eastern_noon(2024, 6, 15))
        assert snapshot.active_layout.name == "spiral"
        render(surface, snapshot)
        assert surface.filled == 1768

    def test_special_day_replaces_the_grid_with_the_quote(self, surface, config):
        result = render(surface, RenderSnapshot(config=config, current=eastern_noon(2024, 12, 25)))
        assert result.special_day.title == "Christmas"
        assert surface.texts == ["Memento mori."]
        assert surface.filled == 0
        assert surface.outlined == 0
        # numbers are still computed for the summary
        assert result.grid.weeks_lived == weeks_for(config, datetime.date(2024, 12, 25))

    def test_rendering_is_a_pure_function_of_the_snapshot(self, make_surface, config):
        snapshot = RenderSnapshot(config=config, current=eastern_noon(2030, 3, 3))
        first, second = make_surface(), make_surface()
        assert render(first, snapshot) == render(second, snapshot)
        assert first.ops == second.ops

    def test_outlived_expectancy(self, surface, config):
        result = render(surface, RenderSnapshot(config=config, current=eastern_noon(2090, 6, 20)))
        assert result.grid.weeks_lived == 100 * 52
        assert result.grid.percentage == 100.0
        assert surface.filled == 4160
        assert surface.outlined == 0

    def test_plain_date_snapshot(self, surface, config):
        result = render(surface, RenderSnapshot(config=config, current=datetime.date(2024, 6, 15)))
        assert result.simulated_date == datetime.date(2024, 6, 15)
        assert result.grid.weeks_lived == 1768
        assert result.age == 34

    def test_first_year_of_the_calendar(self, surface):
        moment = datetime.datetime(1, 1, 2, 12, tzinfo=datetime.UTC)
        result = render(surface, RenderSnapshot(config=DEFAULT_CONFIG, current=moment))
        assert result.grid.weeks_lived == -1987 * 52 + 19
        assert result.grid.percentage == 0.0
        assert surface.filled == 0
        assert surface.outlined == 4160


def weeks_for(config, day):
    return compute_grid_state(config.person, day).weeks_lived


class TestRenderQuote:
    def test_lines_are_centered_around_the_middle(self, surface):
        quote = "word " * 20  # 99 chars at 10 units each, wraps at 680
        lines = render_quote(surface, SpecialDay(date="01-01", quote=quote))
        assert len(lines) == 2
        assert surface.ops[0][0] == "clear"
        assert surface.font == ("serif", 36)
        text_ops = [op for op in surface.ops if op[0] == "fill_text"]
        assert [op[2] for op in text_ops] == [400, 400]
        assert [op[3] for op in text_ops] == [
            240 - QUOTE_LINE_HEIGHT / 2,
            240 + QUOTE_LINE_HEIGHT / 2,
        ]

    def test_empty_quote_draws_only_background(self, surface):
        assert render_quote(surface, SpecialDay(date="01-01")) == []
        assert surface.ops == [("clear", (1.0, 1.0, 1.0))]


class TestSummary:
    def test_scenario_summary(self, surface, config):
        result = render(surface, RenderSnapshot(config=config, current=eastern_noon(2024, 6, 15)))
        assert format_summary(result) == (
            "Weeks Lived: 1768 of 4160 (42.5%)\n"
            "Current Age: 34 years\n"
            "Simulated Date: 2024-06-15"
        )

    def test_summary_names_the_special_day(self, surface, config):
        result = render(surface, RenderSnapshot(config=config, current=eastern_noon(2024, 1, 1)))
        assert format_summary(result).splitlines()[-1] == "Special Day: New Year"

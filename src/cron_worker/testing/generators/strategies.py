"""Testing generators – Hypothesis property-based testing strategies.

Requires the ``hypothesis`` package::

    pip install "cron-worker[test]"
"""
from __future__ import annotations

from datetime import UTC, datetime

import hypothesis.strategies as st
from hypothesis.strategies import SearchStrategy


def _field(low: int, high: int, max_step: int) -> SearchStrategy[str]:
    return st.one_of(
        st.just("*"),
        st.integers(low, high).map(str),
        st.integers(1, max_step).map(lambda n: f"*/{n}"),
        st.integers(low, high - 1).flatmap(
            lambda a: st.integers(a + 1, high).map(lambda b: f"{a}-{b}")
        ),
    )


@st.composite
def cron_expression_strategy(draw: st.DrawFn) -> str:
    """Five-field cron expressions that match at least once a year.

    Day-of-month stays within 1-28 so every month has a matching day.

    Example::

        @given(cron_expression_strategy(), instant_strategy())
        def test_next_is_strictly_after(expr, instant):
            assert parse_cron(expr).next(instant) > instant
    """
    minute = draw(_field(0, 59, 30))
    hour = draw(_field(0, 23, 12))
    dom = draw(st.one_of(st.just("*"), st.integers(1, 28).map(str)))
    month = draw(st.one_of(st.just("*"), st.integers(1, 12).map(str)))
    dow = draw(st.one_of(st.just("*"), st.integers(0, 6).map(str)))
    return f"{minute} {hour} {dom} {month} {dow}"


def instant_strategy(
    min_value: datetime = datetime(2000, 1, 1),
    max_value: datetime = datetime(2099, 12, 31),
) -> SearchStrategy[datetime]:
    """UTC-aware instants with microsecond resolution."""
    return st.datetimes(min_value=min_value, max_value=max_value, timezones=st.just(UTC))


__all__ = ["cron_expression_strategy", "instant_strategy"]

"""Tests for block time allocation."""

import pytest

from axle.workouts.compiler.time_allocator import BlockBudget, allocate_block_time, round_half_up


def test_thirty_minute_split():
    """Test the nominal 20/70/10 split for a 30 minute session."""
    budget = allocate_block_time(30)
    assert budget == BlockBudget(warmup_sec=360, main_sec=1260, cooldown_sec=180)
    assert budget.total_sec == 1800


def test_sixty_minute_split():
    """Test a session long enough that no floor applies."""
    budget = allocate_block_time(60)
    assert budget == BlockBudget(warmup_sec=720, main_sec=2520, cooldown_sec=360)
    assert budget.total_sec == 3600


def test_floors_dominate_short_sessions():
    """Test floors push a 10 minute session above its nominal length."""
    budget = allocate_block_time(10)
    assert budget == BlockBudget(warmup_sec=300, main_sec=600, cooldown_sec=180)
    assert budget.total_sec == 1080
    assert budget.total_sec > 10 * 60


@pytest.mark.parametrize("duration_min", [10, 11, 15, 20, 25, 33, 45, 60, 90, 119, 120])
def test_every_budget_respects_floors(duration_min):
    """Test per-block floors and the plan minimum hold for every duration."""
    budget = allocate_block_time(duration_min)
    assert budget.warmup_sec >= 300
    assert budget.main_sec >= 600
    assert budget.cooldown_sec >= 180
    assert budget.total_sec >= 300
    assert budget.total_sec >= duration_min * 60


def test_round_half_up():
    """Test halves round up rather than to even."""
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.4) == 2
    assert round_half_up(-2.5) == -2

"""
Tests for core state models and the stat model.
"""

from core.effects import apply_delta, apply_stat, decay_all
from core.state import (
    TERMINAL_NONE,
    ActiveEvent,
    Stats,
    Upgrades,
    default_start_state,
    state_from_dict,
    state_to_dict,
    stats_from_mapping,
    stats_to_dict,
)


class TestSessionState:

    def test_default_start_state(self):
        state = default_start_state()

        assert state.stats == Stats(health=100, water=50, sunlight=50, nutrients=50)
        assert state.upgrades == Upgrades(0, 0, 0)
        assert state.growth_index == 0
        assert state.score == 0
        assert state.turns == 0
        assert state.turns_in_level == 0
        assert state.active_event is None
        assert state.special_cooldown == 0
        assert state.terminal == TERMINAL_NONE

    def test_stats_from_mapping_clamps(self):
        s = stats_from_mapping({"health": 150, "water": -20, "sunlight": 30})
        assert s == Stats(health=100, water=0, sunlight=30, nutrients=50)

    def test_state_dict_roundtrip_keeps_event(self, make_state):
        state = make_state(
            health=40,
            upgrades=Upgrades(strongRoots=2, wideLeaves=0, thickBark=1),
            active_event=ActiveEvent(kind="pests", remaining_turns=2),
            growth_index=3,
            score=120,
        )
        assert state_from_dict(state_to_dict(state)) == state


class TestStatModel:

    def test_apply_stat_clamps_both_ends(self):
        assert apply_stat(95, 20) == 100
        assert apply_stat(3, -10) == 0
        assert apply_stat(40, 15) == 55

    def test_apply_delta_ignores_missing_keys(self):
        s = apply_delta(Stats(50, 50, 50, 50), {"water": 30})
        assert s == Stats(health=50, water=80, sunlight=50, nutrients=50)

    def test_decay_without_upgrades(self):
        s = decay_all(Stats(100, 50, 50, 50), Upgrades())
        assert s == Stats(health=100, water=42, sunlight=44, nutrients=43)

    def test_strong_roots_slow_water_decay(self):
        s = decay_all(Stats(100, 50, 50, 50), Upgrades(strongRoots=2))
        assert s.water == 46

    def test_water_decay_never_becomes_gain(self):
        s = decay_all(Stats(100, 50, 50, 50), Upgrades(strongRoots=6))
        assert s.water == 50

    def test_low_resource_costs_health(self):
        # nutrients 25 -> 18 after decay, under the threshold of 20
        s = decay_all(Stats(80, 60, 60, 25), Upgrades())
        assert s.nutrients == 18
        assert s.health == 70

    def test_threshold_is_checked_after_decay(self):
        # sunlight 26 -> 20 is exactly at the threshold, not below it
        s = decay_all(Stats(80, 60, 26, 60), Upgrades())
        assert s.sunlight == 20
        assert s.health == 80

    def test_health_penalty_clamps_at_zero(self):
        s = decay_all(Stats(4, 0, 0, 0), Upgrades())
        assert s == Stats(health=0, water=0, sunlight=0, nutrients=0)


def test_core_selfcheck_runs(capsys):
    from core.selfcheck import run_smoke

    final = run_smoke(turns=40)
    assert "OK: core smoke test passed." in capsys.readouterr().out
    assert all(0 <= v <= 100 for v in stats_to_dict(final).values())

"""
Tests for the level table, event catalog and upgrade modifiers.
"""

import pytest

from core.events import (
    EVENT_CATALOG,
    EventKind,
    advance_event,
    event_delta,
    get_event_spec,
    roll_event,
)
from core.levels import LEVELS, MAX_LEVEL_INDEX, can_level_up, get_level, has_won, is_max_level
from core.state import TERMINAL_LOST, ActiveEvent, Stats, Upgrades
from core.upgrades import add_upgrade, pest_damage, water_decay

from conftest import ScriptedRandom


class TestLevelTable:

    def test_final_level_is_terminal(self):
        assert LEVELS[-1].turns_to_next == 0
        assert all(lvl.turns_to_next > 0 for lvl in LEVELS[:-1])
        assert MAX_LEVEL_INDEX == 5

    def test_first_level_has_no_special(self):
        assert get_level(0).special is None
        assert [lvl.special for lvl in LEVELS[1:]] == [
            "photosynthesis",
            "root_network",
            "seasonal_cycle",
            "ecosystem",
            "immortal",
        ]

    def test_can_level_up_threshold(self, make_state):
        assert not can_level_up(make_state(turns_in_level=4))
        assert can_level_up(make_state(turns_in_level=5))
        assert can_level_up(make_state(turns_in_level=9))

    def test_no_level_up_at_max_or_after_end(self, make_state):
        assert not can_level_up(make_state(growth_index=MAX_LEVEL_INDEX, turns_in_level=50))
        assert not can_level_up(make_state(turns_in_level=5, terminal=TERMINAL_LOST))

    def test_has_won_only_at_max_level(self, make_state):
        assert is_max_level(MAX_LEVEL_INDEX)
        assert has_won(make_state(growth_index=MAX_LEVEL_INDEX, turns_in_level=0))
        assert not has_won(make_state(growth_index=4, turns_in_level=99))


class TestEventCatalog:

    def test_durations(self):
        assert {k.value: spec.duration for k, spec in EVENT_CATALOG.items()} == {
            "pests": 3,
            "drought": 2,
            "rainstorm": 2,
            "heatwave": 2,
        }

    def test_effects(self):
        up = Upgrades()
        assert event_delta("pests", up) == {"health": -15}
        assert event_delta("drought", up) == {"water": -15}
        assert event_delta("rainstorm", up) == {"water": 25, "sunlight": -10}
        assert event_delta("heatwave", up) == {"water": -20, "sunlight": 15}

    @pytest.mark.parametrize("bark,damage", [(0, 15), (1, 12), (3, 6), (4, 5), (9, 5)])
    def test_thick_bark_reduces_pest_damage(self, bark, damage):
        assert pest_damage(Upgrades(thickBark=bark)) == damage
        assert event_delta("pests", Upgrades(thickBark=bark)) == {"health": -damage}

    def test_roll_below_chance_triggers(self):
        rng = ScriptedRandom(values=[0.149], choice_index=1)
        ev = roll_event(rng)
        assert ev == ActiveEvent(kind="drought", remaining_turns=2)

    def test_roll_at_chance_does_not_trigger(self):
        assert roll_event(ScriptedRandom(values=[0.15])) is None

    def test_advance_counts_down_then_ends(self):
        ev = ActiveEvent(kind="rainstorm", remaining_turns=2)
        s, ev = advance_event(ev, Stats(100, 90, 5, 50), Upgrades())
        assert s == Stats(health=100, water=100, sunlight=0, nutrients=50)
        assert ev == ActiveEvent(kind="rainstorm", remaining_turns=1)

        s, ev = advance_event(ev, s, Upgrades())
        assert ev is None

    def test_get_event_spec_accepts_enum_or_str(self):
        assert get_event_spec("heatwave") is get_event_spec(EventKind.HEATWAVE)
        assert get_event_spec("pests").icon == "🐛"


class TestUpgrades:

    def test_add_upgrade_increments_one_kind(self):
        up = add_upgrade(Upgrades(), "thickBark")
        assert up == Upgrades(strongRoots=0, wideLeaves=0, thickBark=1)

    def test_add_unknown_upgrade_is_ignored(self):
        up = Upgrades(strongRoots=1)
        assert add_upgrade(up, "goldenPetals") is up

    def test_water_decay(self):
        assert water_decay(Upgrades()) == 8
        assert water_decay(Upgrades(strongRoots=3)) == 2
        assert water_decay(Upgrades(strongRoots=5)) == 0

"""
Tests for special ability bonuses and activations.
"""

import pytest

from core.specials import SPECIAL_COOLDOWN, activate_special, bonus_for, can_activate
from core.state import Stats

from conftest import ScriptedRandom


class TestBonusFor:

    @pytest.mark.parametrize(
        "special,action,bonus",
        [
            ("photosynthesis", "sunlight", 10),
            ("photosynthesis", "water", 0),
            ("root_network", "water", 8),
            ("root_network", "nutrients", 0),
            ("ecosystem", "nutrients", 12),
            ("ecosystem", "sunlight", 0),
            ("immortal", "water", 5),
            ("immortal", "nutrients", 5),
            (None, "water", 0),
            ("unknown_tag", "water", 0),
        ],
    )
    def test_fixed_bonuses(self, special, action, bonus, calm_rng):
        assert bonus_for(action, special, calm_rng) == bonus

    def test_seasonal_bonus_on_lucky_draw(self):
        assert bonus_for("water", "seasonal_cycle", ScriptedRandom(values=[0.29])) == 15

    def test_seasonal_bonus_misses(self):
        assert bonus_for("water", "seasonal_cycle", ScriptedRandom(values=[0.3])) == 0

    def test_only_seasonal_draws_randomness(self):
        rng = ScriptedRandom()
        bonus_for("sunlight", "photosynthesis", rng)
        bonus_for("water", "immortal", rng)
        assert rng.random_calls == 0


class TestActivateSpecial:

    def test_photosynthesis(self):
        res = activate_special("photosynthesis", Stats(80, 50, 50, 50), 0)
        assert res.activated
        assert res.stats == Stats(health=90, water=50, sunlight=80, nutrients=50)
        assert res.score == 25
        assert res.cooldown == SPECIAL_COOLDOWN
        assert res.text == "☀️ Enhanced Photosynthesis!"

    def test_root_network(self):
        res = activate_special("root_network", Stats(80, 50, 50, 50), 0)
        assert res.stats == Stats(health=80, water=75, sunlight=50, nutrients=65)
        assert res.score == 20

    def test_seasonal_cycle_raises_all_four(self):
        res = activate_special("seasonal_cycle", Stats(50, 50, 50, 50), 0)
        assert res.stats == Stats(health=65, water=65, sunlight=65, nutrients=65)
        assert res.score == 30

    def test_ecosystem(self):
        res = activate_special("ecosystem", Stats(50, 50, 50, 50), 0)
        assert res.stats == Stats(health=75, water=50, sunlight=50, nutrients=50)
        assert res.score == 35

    def test_immortal_clamps(self):
        res = activate_special("immortal", Stats(90, 90, 10, 50), 0)
        assert res.stats == Stats(health=100, water=100, sunlight=30, nutrients=70)
        assert res.score == 50

    def test_cooling_down_is_noop(self):
        stats = Stats(50, 50, 50, 50)
        res = activate_special("ecosystem", stats, 2)
        assert not res.activated
        assert res.stats is stats
        assert res.cooldown == 2
        assert res.score == 0

    def test_no_tag_spends_cooldown_without_effect(self):
        stats = Stats(50, 50, 50, 50)
        assert not can_activate(None, 0)
        res = activate_special(None, stats, 0)
        assert not res.activated
        assert res.stats is stats
        assert res.cooldown == 3
        assert res.score == 0

"""
Tests for the ArmorItem business object.
"""
import dataclasses

import pytest

from src.business_objects import ArmorItem, StateValidationError


class TestArmorItem:

    def test_valid_item(self):
        armor = ArmorItem("new enchanted helmet", cost=12.5, defense=40.0)
        assert armor.description == "new enchanted helmet"
        assert armor.cost == 12.5
        assert armor.defense == 40.0

    def test_zero_defense_is_allowed(self):
        assert ArmorItem("rusty bucket", cost=1.0, defense=0.0).defense == 0.0

    @pytest.mark.parametrize("cost", [0.0, -3.0, float("nan")])
    def test_non_positive_cost_rejected(self, cost):
        with pytest.raises(StateValidationError):
            ArmorItem("helm", cost=cost, defense=1.0)

    def test_negative_defense_rejected(self):
        with pytest.raises(StateValidationError):
            ArmorItem("helm", cost=1.0, defense=-1.0)

    def test_empty_description_rejected(self):
        with pytest.raises(StateValidationError):
            ArmorItem("", cost=1.0, defense=1.0)

    def test_immutable(self):
        armor = ArmorItem("helm", cost=1.0, defense=1.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            armor.cost = 2.0  # type: ignore[misc]

"""
Tests for the component catalog.
"""

import pytest

from spacecraft_builder.model.catalog import (
    ANCHOR_TYPE,
    CATEGORIES,
    COMPONENT_CATALOG,
    ComponentSpec,
    ComponentType,
    components_by_category,
    footprint,
    get_category,
    is_layered,
    material_cost,
    parse_component_type,
)


class TestCatalogEntries:
    """Every component type has a well-formed entry."""

    def test_every_type_has_entry(self):
        assert set(COMPONENT_CATALOG) == set(ComponentType)

    def test_footprints_are_positive(self):
        for component_type in ComponentType:
            width, height = footprint(component_type)
            assert width >= 1 and height >= 1

    def test_costs_are_non_negative(self):
        for component_type in ComponentType:
            assert all(v >= 0 for v in material_cost(component_type).values())

    def test_raptor_engine_is_two_cells_tall(self):
        assert footprint(ComponentType.RAPTOR_ENGINE) == (1, 2)

    def test_layered_flags(self):
        assert not is_layered(ComponentType.STEEL_BLOCK)
        assert not is_layered(ComponentType.CENTRAL)
        assert is_layered(ComponentType.LASER_WEAPON)
        assert is_layered(ComponentType.MISSILE_LAUNCHER)
        assert is_layered(ComponentType.RAPTOR_ENGINE)

    def test_anchor_is_central(self):
        assert ANCHOR_TYPE is ComponentType.CENTRAL

    def test_material_cost_returns_copy(self):
        cost = material_cost(ComponentType.STEEL_BLOCK)
        cost['steel'] = 9999
        assert material_cost(ComponentType.STEEL_BLOCK)['steel'] == 10


class TestComponentSpec:
    def test_rejects_empty_footprint(self):
        with pytest.raises(ValueError):
            ComponentSpec("Broken", "Blocks", (0, 1))

    def test_rejects_negative_cost(self):
        with pytest.raises(ValueError):
            ComponentSpec("Broken", "Blocks", (1, 1), material_cost={'steel': -1})


class TestCategories:
    def test_grouping_follows_menu_order(self):
        grouped = components_by_category()
        assert tuple(grouped) == CATEGORIES

    def test_every_type_listed_once(self):
        grouped = components_by_category()
        listed = [t for types in grouped.values() for t in types]
        assert sorted(listed, key=lambda t: t.value) == sorted(ComponentType, key=lambda t: t.value)

    def test_weapons_category(self):
        grouped = components_by_category()
        assert grouped["Weapons"] == [ComponentType.LASER_WEAPON, ComponentType.MISSILE_LAUNCHER]
        assert get_category(ComponentType.RAPTOR_ENGINE) == "Engines"


class TestParse:
    @pytest.mark.parametrize("component_type", list(ComponentType))
    def test_parse_tag_name(self, component_type):
        assert parse_component_type(component_type.value) is component_type

    def test_parse_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown component type"):
            parse_component_type("WarpDrive")

    def test_str_is_tag_name(self):
        assert str(ComponentType.STEEL_BLOCK) == "SteelBlock"

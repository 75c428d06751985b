"""Tests for the maneuver registry query API."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from gurps_maneuvers.domain.catalog import DEFAULT_ICON_BASE_PATH
from gurps_maneuvers.domain.enums import DefensePolicy, MovePolicy
from gurps_maneuvers.domain.errors import UnknownManeuver
from gurps_maneuvers.domain.maneuver import ManeuverDefinition
from gurps_maneuvers.domain.models import StatusMarker
from gurps_maneuvers.domain.registry import (
    ManeuverRegistry,
    get_registry,
    initialize_registry,
    reset_registry,
)

REGISTRY = ManeuverRegistry.initialize()
NAMES = REGISTRY.names()
PRIMARY_ICONS = [REGISTRY.get_icon(name) for name in NAMES]


class FlagMarker:
    def __init__(self, status_id):
        self.status_id = status_id

    def get_flag(self, scope, key):
        if (scope, key) == ("core", "statusId"):
            return self.status_id
        return None


class TestLookup:
    """Tests for get/find and their aliases."""

    @pytest.mark.parametrize("name", NAMES)
    def test_icon_is_prefixed(self, name):
        icon = REGISTRY.get(name).icon
        assert icon
        assert icon.startswith(DEFAULT_ICON_BASE_PATH)

    @pytest.mark.parametrize("name", NAMES)
    def test_own_icon_is_a_maneuver_icon(self, name):
        assert REGISTRY.is_maneuver_icon(REGISTRY.get(name).icon)

    def test_unknown_name_raises(self):
        with pytest.raises(UnknownManeuver, match="Unknown maneuver 'dance'") as info:
            REGISTRY.get("dance")
        assert info.value.name == "dance"

    def test_unknown_maneuver_is_a_lookup_error(self):
        with pytest.raises(LookupError):
            REGISTRY.get_maneuver("dance")

    def test_find_returns_none_for_unknown(self):
        assert REGISTRY.find("dance") is None
        assert REGISTRY.find("attack") == REGISTRY.get("attack")

    def test_get_is_deterministic(self):
        assert REGISTRY.get("attack") == REGISTRY.get("attack")

    def test_get_icon(self):
        assert REGISTRY.get_icon("wait") == DEFAULT_ICON_BASE_PATH + "man-wait.png"
        with pytest.raises(UnknownManeuver):
            REGISTRY.get_icon("dance")

    def test_aim_is_full_turn(self):
        assert REGISTRY.get("aim").is_full_turn is True

    def test_all_out_attack_family(self):
        aoa = REGISTRY.get("allout_attack")
        assert aoa.move_policy is MovePolicy.HALF
        assert aoa.defense_policy is DefensePolicy.NONE
        assert REGISTRY.get("aoa_determined").alt_icon_path == aoa.icon

    def test_contains_and_len(self):
        assert "feint" in REGISTRY
        assert "dance" not in REGISTRY
        assert len(REGISTRY) == len(NAMES)


class TestIcons:
    """Tests for icon classification."""

    def test_is_maneuver_icon_requires_full_primary_path(self):
        assert REGISTRY.is_maneuver_icon(DEFAULT_ICON_BASE_PATH + "man-defense.png")
        assert not REGISTRY.is_maneuver_icon("icons/svg/skull.svg")
        assert not REGISTRY.is_maneuver_icon("man-attack.png")

    def test_alt_icon_does_not_classify(self):
        definition = ManeuverDefinition.create(
            name="lunge", label="Lunge", icon="lunge.png", base_path="b/", alt="shared.png"
        )
        registry = ManeuverRegistry({"lunge": definition})
        assert registry.is_maneuver_icon("b/lunge.png")
        assert not registry.is_maneuver_icon("b/shared.png")
        assert registry.get_by_icon("b/shared.png") == []

    def test_get_maneuver_icons_filters(self):
        paths = ["a.png", PRIMARY_ICONS[3], "b.png", PRIMARY_ICONS[0]]
        assert REGISTRY.get_maneuver_icons(paths) == [PRIMARY_ICONS[3], PRIMARY_ICONS[0]]

    @given(st.lists(st.sampled_from(PRIMARY_ICONS) | st.text(max_size=20), max_size=30))
    def test_get_maneuver_icons_is_ordered_subsequence_and_idempotent(self, paths):
        once = REGISTRY.get_maneuver_icons(paths)
        assert REGISTRY.get_maneuver_icons(once) == once
        remaining = iter(paths)
        assert all(any(item == candidate for candidate in remaining) for item in once)

    def test_get_by_icon(self):
        matches = REGISTRY.get_by_icon(REGISTRY.get_icon("allout_attack"))
        assert [m.name for m in matches] == ["allout_attack"]
        assert REGISTRY.get_by_icon("nothing.png") == []


class TestMarkers:
    """Tests for status marker classification."""

    def test_marker_with_maneuver_status(self):
        assert REGISTRY.is_marker_maneuver(FlagMarker("maneuver"))
        assert not REGISTRY.is_marker_maneuver(FlagMarker("prone"))

    def test_marker_without_flag_capability(self):
        assert REGISTRY.is_marker_maneuver(object()) is False
        assert REGISTRY.is_marker_maneuver({"statusId": "maneuver"}) is False

    def test_filter_none_is_empty(self):
        assert REGISTRY.filter_maneuver_markers(None) == []

    def test_filter_keeps_order(self):
        a = StatusMarker.from_payload(REGISTRY.get("attack"))
        b = StatusMarker.condition("prone", "Prone", "icons/prone.svg")
        c = FlagMarker("maneuver")
        assert REGISTRY.filter_maneuver_markers([a, b, object(), c]) == [a, c]


class TestExport:
    def test_export_all_covers_catalog(self):
        exported = REGISTRY.export_all()
        assert list(exported) == NAMES
        assert exported["ready"] == REGISTRY.get("ready")
        assert REGISTRY.get_all_data() == exported

    def test_get_all_returns_definitions(self):
        definitions = REGISTRY.get_all()
        assert definitions["wait"].move_policy is MovePolicy.NONE


class TestSingleton:
    def test_get_registry_is_cached(self):
        assert get_registry() is get_registry()

    def test_initialize_registry_replaces_singleton(self):
        try:
            registry = initialize_registry("custom/")
            assert get_registry() is registry
            assert registry.get_icon("attack") == "custom/man-attack.png"
        finally:
            reset_registry()

    def test_reset_registry_rebuilds_with_defaults(self):
        first = get_registry()
        reset_registry()
        second = get_registry()
        assert first is not second
        assert second.get_icon("attack") == DEFAULT_ICON_BASE_PATH + "man-attack.png"

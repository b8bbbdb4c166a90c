"""Tests for the built-in region plugins and the shared classifier."""

import logging

import pytest

import app.regions  # noqa: F401
from app.regions.achilles.plugin import AchillesPlugin
from app.regions.base import UNKNOWN_CATEGORY, RegionPlugin
from app.regions.foot.plugin import FootPlugin
from app.regions.knee.plugin import KneePlugin
from app.regions.registry import RegionRegistry
from app.regions.shoulder.plugin import ShoulderPlugin
from app.schemas.readiness import Mode
from app.schemas.region import Severity

ALL_PLUGINS = [KneePlugin(), AchillesPlugin(), ShoulderPlugin(), FootPlugin()]


@pytest.fixture
def knee():
    return KneePlugin()


# ======================================================================
# Table integrity (every region)
# ======================================================================


@pytest.mark.parametrize("plugin", ALL_PLUGINS, ids=lambda p: p.region_id)
class TestRegionTables:
    """Static tables are consistent with each other."""

    def test_is_region_plugin(self, plugin):
        assert isinstance(plugin, RegionPlugin)

    def test_every_mode_has_a_plan(self, plugin):
        for mode in Mode:
            assert len(plugin.default_plan(mode)) >= 2

    def test_plans_reference_known_drills(self, plugin):
        for mode in Mode:
            for drill_id in plugin.default_plan(mode):
                assert plugin.get_drill(drill_id) is not None, drill_id

    def test_high_demand_drills_are_known(self, plugin):
        for drill_id in plugin.high_demand_drills:
            assert drill_id in plugin.drills

    def test_high_demand_drills_not_in_reset_plan(self, plugin):
        assert not set(plugin.default_plan(Mode.RESET)) & plugin.high_demand_drills

    def test_drill_tags_are_known_restrictions(self, plugin):
        for drill in plugin.drills.values():
            for tag in drill.movement_tags:
                assert tag in plugin.movement_labels, (drill.drill_id, tag)

    def test_drill_keys_match_ids(self, plugin):
        for drill_id, drill in plugin.drills.items():
            assert drill.drill_id == drill_id

    def test_positive_tags_present(self, plugin):
        for tag in ("nothing", "good"):
            assert plugin.classify(tag).category == "positive"
            assert plugin.classify(tag).severity == Severity.NONE

    def test_default_plan_is_a_copy(self, plugin):
        plan = plugin.default_plan(Mode.TRAINING)
        plan.clear()
        assert plugin.default_plan(Mode.TRAINING)

    def test_detail_serialises_plans_by_mode_name(self, plugin):
        detail = plugin.detail()
        assert set(detail.default_plans) == {"RESET", "TRAINING", "GAME"}
        assert detail.region_id == plugin.region_id


# ======================================================================
# Classifier
# ======================================================================


class TestClassifier:
    """Severity lookups through the shared base-class classifier."""

    @pytest.mark.parametrize("tag", ["stabbing", "locking", "giving_way", "numbness"])
    def test_knee_danger_tags(self, knee, tag):
        assert knee.classify(tag).severity == Severity.DANGER
        assert knee.has_danger([tag])

    @pytest.mark.parametrize("tag", ["sharp", "catching", "grinding", "hot", "unstable"])
    def test_knee_warning_tags(self, knee, tag):
        assert knee.has_warning([tag])
        assert not knee.has_danger([tag])

    def test_danger_is_not_a_warning(self, knee):
        # has_warning matches the warning severity exactly
        assert not knee.has_warning(["locking"])

    def test_empty_set_is_neutral(self, knee):
        assert not knee.has_danger([])
        assert not knee.has_warning([])

    def test_neutral_tags(self, knee):
        assert not knee.has_danger(["stiff", "achy"])
        assert not knee.has_warning(["stiff", "achy"])

    def test_unknown_tag_fails_open(self, knee, caplog):
        with caplog.at_level(logging.WARNING, logger="app.regions.base"):
            result = knee.classify("made_up_tag")
        assert result.category == UNKNOWN_CATEGORY
        assert result.severity == Severity.NONE
        assert "made_up_tag" in caplog.text

    def test_tag_meaning_depends_on_region(self):
        # "stabbing" is a knee danger sign but not in the achilles catalog
        assert KneePlugin().has_danger(["stabbing"])
        assert not AchillesPlugin().has_danger(["stabbing"])

    def test_achilles_has_no_danger_tags(self):
        plugin = AchillesPlugin()
        assert not plugin.has_danger(plugin.sensation_catalog.keys())

    @pytest.mark.parametrize("tag", ["slipping", "numbness", "radiating"])
    def test_shoulder_danger_tags(self, tag):
        assert ShoulderPlugin().has_danger([tag])

    @pytest.mark.parametrize("tag", ["stabbing", "tearing_feeling", "numbness"])
    def test_foot_danger_tags(self, tag):
        assert FootPlugin().has_danger([tag])


# ======================================================================
# Registry
# ======================================================================


class TestRegistry:
    """Built-ins are registered on import."""

    def test_builtin_regions(self):
        assert RegionRegistry.ids() == ["achilles", "foot", "knee", "shoulder"]

    def test_get_unknown_returns_none(self):
        assert RegionRegistry.get("elbow") is None

    def test_get_or_raise_unknown(self):
        with pytest.raises(KeyError, match="elbow"):
            RegionRegistry.get_or_raise("elbow")

    def test_duplicate_registration_rejected(self):
        with pytest.raises(ValueError, match="knee"):
            RegionRegistry.register(KneePlugin())

    def test_register_and_unregister(self):
        class ElbowPlugin(KneePlugin):
            @property
            def region_id(self) -> str:
                return "elbow_test"

        RegionRegistry.register(ElbowPlugin())
        try:
            assert RegionRegistry.get("elbow_test") is not None
        finally:
            RegionRegistry.unregister("elbow_test")
        assert RegionRegistry.get("elbow_test") is None

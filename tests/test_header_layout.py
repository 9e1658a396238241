"""
Header Layout Engine Tests

Logo height tiers, header/non-header placement, collision flags and the
title override precedence.
"""
import logging
import pytest
from unittest.mock import patch

from constants import LOGO_HEIGHTS, LOGO_POSITIONS, LOGO_SIZE_TIERS, TITLE_POSITIONS
from services.header_layout import (
    ResolvedHeaderLayout,
    _override_anchor,
    get_header_layout,
    get_standard_logo_height,
    title_anchor_of,
)


class TestStandardLogoHeight:

    @pytest.mark.parametrize("tier", LOGO_SIZE_TIERS)
    def test_valid_tiers_are_positive(self, tier):
        assert get_standard_logo_height(tier) > 0

    def test_monotonic_across_tiers(self):
        heights = [get_standard_logo_height(t) for t in LOGO_SIZE_TIERS]
        assert heights == sorted(heights)

    def test_known_values(self):
        assert get_standard_logo_height("small") == 24
        assert get_standard_logo_height("medium") == 36
        assert get_standard_logo_height("large") == 48
        assert get_standard_logo_height("extra-large") == 60

    @pytest.mark.parametrize("missing", [None, ""])
    def test_missing_tier_uses_medium_silently(self, missing, caplog):
        with caplog.at_level(logging.WARNING, logger="services.header_layout"):
            assert get_standard_logo_height(missing) == LOGO_HEIGHTS["medium"]
        assert caplog.records == []

    @pytest.mark.parametrize("unknown", ["huge", "MEDIUM", 42, ["small"]])
    def test_unknown_tier_falls_back_and_warns(self, unknown, caplog):
        with caplog.at_level(logging.WARNING, logger="services.header_layout"):
            assert get_standard_logo_height(unknown) == LOGO_HEIGHTS["medium"]
        assert any("Unrecognized logo size tier" in r.getMessage() for r in caplog.records)


class TestHeaderLayout:

    @pytest.mark.parametrize("logo_position", ["none", "footer-left", "footer-center", "footer-right", None, "sidebar"])
    @pytest.mark.parametrize("title_position", list(TITLE_POSITIONS) + ["header-left", "diagonal"])
    def test_non_header_logo_passes_title_through(self, logo_position, title_position):
        layout = get_header_layout(logo_position, title_position)

        assert layout.is_header_logo is False
        assert layout.is_any_collision is False
        assert not (layout.is_collision_left or layout.is_collision_center or layout.is_collision_right)
        assert layout.final_title_position == title_position

    def test_missing_title_defaults_to_left(self):
        layout = get_header_layout("none", None)
        assert layout.final_title_position == "left"

    def test_left_collision_moves_title_to_center(self):
        layout = get_header_layout("header-left", "left")

        assert layout.is_header_logo is True
        assert layout.logo_alignment == "left"
        assert layout.is_collision_left is True
        assert layout.is_collision_center is False
        assert layout.is_collision_right is False
        assert layout.is_any_collision is True
        assert layout.final_title_position == "center"

    def test_header_prefixed_title_keeps_its_vocabulary(self):
        layout = get_header_layout("header-left", "header-left")

        assert layout.is_collision_left is True
        assert layout.is_any_collision is True
        assert layout.final_title_position == "header-center"

    def test_right_collision_moves_title_to_center(self):
        layout = get_header_layout("header-right", "right")

        assert layout.is_collision_right is True
        assert layout.final_title_position == "center"

    def test_center_collision_moves_title_to_left(self):
        layout = get_header_layout("header-center", "center")

        assert layout.is_collision_center is True
        assert layout.final_title_position == "left"

    def test_no_collision_keeps_title(self):
        layout = get_header_layout("header-center", "header-right")

        assert layout.is_header_logo is True
        assert layout.logo_alignment == "center"
        assert layout.is_any_collision is False
        assert layout.final_title_position == "header-right"

    def test_missing_title_collides_with_left_logo(self):
        # Missing title means 'left', which is the logo's slot
        layout = get_header_layout("header-left", None)
        assert layout.is_collision_left is True
        assert layout.final_title_position == "center"

    @pytest.mark.parametrize("logo_position", ["header", "header-middle", "header-"])
    def test_header_without_known_anchor_aligns_left(self, logo_position):
        layout = get_header_layout(logo_position, "right")
        assert layout.is_header_logo is True
        assert layout.logo_alignment == "left"
        assert layout.is_any_collision is False

    @pytest.mark.parametrize("title_position", ["diagonal", "footer-left", 7])
    def test_unknown_title_never_collides(self, title_position):
        layout = get_header_layout("header-left", title_position)
        assert layout.is_any_collision is False
        assert layout.final_title_position == title_position

    def test_unknown_logo_position_does_not_raise(self):
        layout = get_header_layout("top-banner-xl", "left")
        assert layout.is_header_logo is False
        assert layout.final_title_position == "left"

    @pytest.mark.parametrize("logo_position", LOGO_POSITIONS)
    @pytest.mark.parametrize("title_position", TITLE_POSITIONS)
    def test_resolved_title_never_shares_logo_slot(self, logo_position, title_position):
        layout = get_header_layout(logo_position, title_position)
        if layout.is_header_logo:
            assert title_anchor_of(layout.final_title_position) != layout.logo_alignment

    @pytest.mark.parametrize("logo_position", LOGO_POSITIONS)
    @pytest.mark.parametrize("title_position", TITLE_POSITIONS)
    def test_any_collision_matches_slot_flags(self, logo_position, title_position):
        layout = get_header_layout(logo_position, title_position)
        flags = [layout.is_collision_left, layout.is_collision_center, layout.is_collision_right]
        assert sum(flags) <= 1
        assert layout.is_any_collision == any(flags)

    def test_repeated_calls_are_identical(self):
        first = get_header_layout("header-left", "left")
        second = get_header_layout("header-left", "left")
        assert first == second
        assert first.to_dict() == second.to_dict()
        assert first is not second

    def test_layout_is_immutable(self):
        layout = get_header_layout("header-left", "left")
        with pytest.raises(Exception):
            layout.final_title_position = "left"

    def test_to_dict_keys(self):
        data = get_header_layout("header-right", "right").to_dict()
        assert data == {
            "isHeaderLogo": True,
            "logoAlignment": "right",
            "finalTitlePosition": "center",
            "isCollisionLeft": False,
            "isCollisionCenter": False,
            "isCollisionRight": True,
            "isAnyCollision": True,
        }


def test_title_anchor_of():
    assert title_anchor_of("center") == "center"
    assert title_anchor_of("header-right") == "right"
    assert title_anchor_of("diagonal") == "left"
    assert title_anchor_of(None) == "left"


def test_resolved_layout_defaults():
    layout = ResolvedHeaderLayout(is_header_logo=False, logo_alignment="left", final_title_position="left")
    assert layout.is_any_collision is False


class TestOverrideAnchor:

    def test_precedence_table(self):
        assert _override_anchor("left", "left") == "center"
        assert _override_anchor("right", "right") == "center"
        assert _override_anchor("center", "center") == "left"

    def test_anchor_without_precedence_keeps_requested(self):
        assert _override_anchor("middle", "middle") == "middle"

    def test_no_free_candidate_keeps_requested(self):
        with patch.dict("services.header_layout.TITLE_OVERRIDE_PRECEDENCE", {"left": ("left",)}):
            assert _override_anchor("left", "left") == "left"
            layout = get_header_layout("header-left", "left")

        assert layout.is_collision_left is True
        assert layout.final_title_position == "left"

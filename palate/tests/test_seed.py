from __future__ import annotations

import pytest

from palate.profile.models import TasteTag
from palate.profile.seed import seed_profile_from_tags


def test_no_tags_is_neutral():
    assert seed_profile_from_tags([]).scores() == [5.0] * 6


def test_heat():
    profile = seed_profile_from_tags(["heat"])
    assert profile.spice == 7.5
    assert [profile.sweet, profile.salty, profile.sour, profile.bitter, profile.umami] == [5.0] * 5


def test_heat_and_sweet():
    profile = seed_profile_from_tags([TasteTag.heat, TasteTag.sweet])
    assert profile.spice == 7.5
    assert profile.sweet == 7.5
    assert profile.sour == 5.5
    assert profile.salty == profile.bitter == profile.umami == 5.0


def test_purist_lowers_several_dimensions():
    profile = seed_profile_from_tags(["purist"])
    assert profile.spice == 3.5
    assert profile.sweet == 4.0
    assert profile.salty == 4.5
    assert profile.bitter == 4.5
    assert profile.sour == profile.umami == 5.0


def test_savory_and_herby():
    profile = seed_profile_from_tags(["savory", "herby"])
    assert profile.umami == pytest.approx(8.5)
    assert profile.salty == 6.5
    assert profile.bitter == pytest.approx(5.8)


def test_order_does_not_matter_without_clamping():
    a = seed_profile_from_tags(["citrus", "sweet", "herby"])
    b = seed_profile_from_tags(["herby", "sweet", "citrus"])
    assert a == b
    assert a.sweet == 8.0
    assert a.sour == 7.5


def test_clamps_at_ten():
    profile = seed_profile_from_tags(["sweet", "sweet", "citrus"])
    assert profile.sweet == 10.0


def test_clamps_after_each_tag():
    # 5 -> 7.5 -> 10 -> 10 (10.5 capped) -> 9.0; summing first would give 9.5
    profile = seed_profile_from_tags(["sweet", "sweet", "citrus", "purist"])
    assert profile.sweet == 9.0


def test_unknown_tag_is_rejected():
    with pytest.raises(ValueError):
        seed_profile_from_tags(["umami"])

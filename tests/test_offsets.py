"""Tests for version tags and offset profiles."""

import dataclasses

import pytest

from gen4save.core.errors import UnknownVersion
from gen4save.core.offsets import (
    CREATURE_FIELDS,
    PROFILES,
    GameVersion,
    get_profile,
    parse_version,
    supported_versions,
)


def test_paired_versions_share_profile():
    assert get_profile("diamond") is get_profile("pearl")
    assert get_profile("heartgold") is get_profile("soulsilver")
    assert get_profile("platinum") is not get_profile("diamond")


def test_three_distinct_profiles():
    assert len({id(p) for p in PROFILES.values()}) == 3


def test_diamond_pearl_offsets():
    p = get_profile(GameVersion.DIAMOND)
    assert (p.trainer_name, p.trainer_id, p.secret_id) == (0x64, 0x74, 0x76)
    assert (p.checksum_end, p.checksum_offset) == (0xC0EC, 0xC0FE)
    assert (p.lead_creature, p.play_time) == (0x98, 0x86)


def test_platinum_offsets():
    p = get_profile("platinum")
    assert p.checksum_end == 0xCF18
    assert p.checksum_offset == 0xCF2A
    assert p.lead_creature == 0xA0
    assert p.play_time == 0x8A


def test_tags_are_case_insensitive():
    assert parse_version(" SoulSilver ") is GameVersion.SOULSILVER


@pytest.mark.parametrize("tag", ["black", "", "ruby", "diamondpearl"])
def test_unknown_version(tag):
    with pytest.raises(UnknownVersion):
        get_profile(tag)


def test_unknown_version_is_value_error():
    with pytest.raises(ValueError):
        get_profile("emerald")


def test_profiles_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        get_profile("diamond").lead_creature = 0


def test_creature_fields_shared():
    for profile in PROFILES.values():
        assert profile.creature is CREATURE_FIELDS
    assert CREATURE_FIELDS.species == 0x08
    assert CREATURE_FIELDS.ability == 0x15
    assert CREATURE_FIELDS.move_pp == 0x10


def test_supported_versions():
    assert supported_versions() == ("diamond", "pearl", "platinum", "heartgold", "soulsilver")

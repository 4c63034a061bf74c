"""Tests for picking the active small block."""

import struct

import pytest

from gen4save.core.errors import BufferTooSmall, SaveNeverWritten
from gen4save.core.offsets import SMALL_BLOCK_OFFSETS, get_profile
from gen4save.features.block_selector import BlockSelector, PlayTime, read_play_time


def _selector(version="diamond"):
    return BlockSelector(get_profile(version))


def test_tie_goes_to_second_block(make_save):
    data = make_save(play_times=((5, 6, 7), (5, 6, 7)))
    assert _selector().select(data) == 1


def test_first_block_newer(make_save):
    data = make_save(play_times=((2, 0, 0), (1, 59, 59)))
    assert _selector().select(data) == 0


def test_second_block_newer(make_save):
    data = make_save(play_times=((1, 59, 59), (2, 0, 0)))
    assert _selector().select(data) == 1


def test_hours_use_both_bytes(make_save):
    data = make_save(play_times=((300, 0, 0), (299, 59, 59)))
    assert _selector().select(data) == 0


def test_uses_version_offsets(make_save):
    data = make_save("platinum", play_times=((9, 0, 0), (8, 0, 0)))
    assert _selector("platinum").select(data) == 0


def test_never_saved(make_save):
    data = make_save()
    profile = get_profile("diamond")
    struct.pack_into('<H', data, SMALL_BLOCK_OFFSETS[0] + profile.play_time, 0xFFFF)
    with pytest.raises(SaveNeverWritten):
        _selector().select(data)


def test_too_small():
    with pytest.raises(BufferTooSmall):
        _selector().select(bytes(0x40000))


def test_read_play_time(make_save):
    data = make_save(play_times=((12, 34, 56), (0, 0, 1)))
    pt = read_play_time(data, 0, get_profile("diamond"))
    assert pt == PlayTime(12, 34, 56)
    assert pt.total_seconds == 12 * 3600 + 34 * 60 + 56
    assert str(pt) == "12:34:56"

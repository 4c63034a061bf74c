"""Tests for the save CRC and the creature word-sum."""

import struct

import pytest

from gen4save.core.checksum import CRC_TABLE, creature_checksum, crc16_ccitt, save_checksum
from gen4save.core.errors import BufferTooSmall
from gen4save.core.offsets import get_profile


def test_crc_table_matches_cartridge_table():
    assert len(CRC_TABLE) == 256
    assert CRC_TABLE[0] == 0x0000
    assert CRC_TABLE[1] == 0x1021
    assert CRC_TABLE[16] == 0x1231
    assert CRC_TABLE[255] == 0x1EF0


def test_crc16_ccitt_check_value():
    assert crc16_ccitt(b"123456789") == 0x29B1


def test_crc16_empty_is_init():
    assert crc16_ccitt(b"") == 0xFFFF


def test_save_checksum_stops_before_footer():
    profile = get_profile("diamond")
    block = bytearray(profile.checksum_offset + 2)
    base = save_checksum(block, profile)

    # Bytes from the footer on are not covered
    block[profile.checksum_end] = 0xAA
    block[profile.checksum_offset] = 0x55
    assert save_checksum(block, profile) == base

    # The last byte before the footer is
    block[profile.checksum_end - 1] = 0x01
    assert save_checksum(block, profile) != base


def test_save_checksum_too_small():
    profile = get_profile("platinum")
    with pytest.raises(BufferTooSmall):
        save_checksum(bytes(profile.checksum_end - 1), profile)


def test_creature_checksum_zero_payload():
    assert creature_checksum(bytes(128)) == 0


def test_creature_checksum_wraps_to_16_bits():
    payload = bytearray(128)
    struct.pack_into('<HH', payload, 0, 0xFFFF, 0x0002)
    assert creature_checksum(payload) == 0x0001


def test_creature_checksum_is_little_endian_words():
    payload = bytearray(128)
    payload[0] = 0x01
    payload[3] = 0x01
    assert creature_checksum(payload) == 0x0101


def test_creature_checksum_stable_and_sensitive():
    payload = bytearray(range(128))
    first = creature_checksum(payload)
    assert creature_checksum(payload) == first
    payload[77] ^= 0x10
    assert creature_checksum(payload) != first


def test_creature_checksum_ignores_trailing_bytes():
    payload = bytes(range(128))
    assert creature_checksum(payload + b"\xff" * 8) == creature_checksum(payload)


def test_creature_checksum_too_small():
    with pytest.raises(BufferTooSmall):
        creature_checksum(bytes(127))

"""Synthetic save images for the test suite."""

import struct
from typing import Optional, Sequence, Tuple

import pytest

from gen4save.core.checksum import creature_checksum, save_checksum
from gen4save.core.cipher import crypt_payload
from gen4save.core.offsets import (
    CREATURE_HEADER_SIZE,
    CREATURE_PAYLOAD_SIZE,
    SAVE_SIZE,
    SMALL_BLOCK_OFFSETS,
    get_profile,
)
from gen4save.core.text import encode_trainer_name


def build_save(
    version: str = "diamond",
    play_times: Sequence[Tuple[int, int, int]] = ((10, 30, 15), (10, 30, 20)),
    trainer: str = "ASH",
    pv: int = 0,
    payload: Optional[bytes] = None,
    trainer_id: int = 12345,
    secret_id: int = 54321,
) -> bytearray:
    """
    Build a 512 KiB image with both small blocks populated and valid.

    ``payload`` is the decrypted 128-byte creature payload, zeros by default.
    """
    profile = get_profile(version)
    data = bytearray(SAVE_SIZE)
    payload = bytes(payload if payload is not None else bytes(CREATURE_PAYLOAD_SIZE))
    checksum = creature_checksum(payload)

    for start, (hours, minutes, seconds) in zip(SMALL_BLOCK_OFFSETS, play_times):
        struct.pack_into('<HBB', data, start + profile.play_time, hours, minutes, seconds)
        name = encode_trainer_name(trainer)
        data[start + profile.trainer_name:start + profile.trainer_name + len(name)] = name
        struct.pack_into('<HH', data, start + profile.trainer_id, trainer_id, secret_id)

        lead = start + profile.lead_creature
        struct.pack_into('<IHH', data, lead, pv, 0, checksum)
        data[lead + CREATURE_HEADER_SIZE:lead + CREATURE_HEADER_SIZE + CREATURE_PAYLOAD_SIZE] = \
            crypt_payload(payload, checksum)

        crc = save_checksum(data[start:start + profile.checksum_end], profile)
        struct.pack_into('<H', data, start + profile.checksum_offset, crc)
    return data


def decrypt_lead(data: bytes, version: str, block: int) -> Tuple[int, bytes]:
    """Independently decrypt the lead creature: (stored checksum, payload)."""
    profile = get_profile(version)
    lead = SMALL_BLOCK_OFFSETS[block] + profile.lead_creature
    stored = struct.unpack_from('<H', data, lead + profile.creature.checksum)[0]
    raw = data[lead + CREATURE_HEADER_SIZE:lead + CREATURE_HEADER_SIZE + CREATURE_PAYLOAD_SIZE]
    return stored, bytes(crypt_payload(raw, stored))


@pytest.fixture
def make_save():
    return build_save


@pytest.fixture
def decrypt():
    return decrypt_lead


@pytest.fixture
def diamond_save():
    return build_save("diamond")

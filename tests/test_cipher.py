"""Tests for the sub-block permutation and the keystream cipher."""

import random
import struct

import pytest

from gen4save.core.checksum import creature_checksum
from gen4save.core.cipher import (
    BLOCK_ORDER,
    CreatureRecord,
    block_offsets,
    crypt_payload,
    decrypt_payload,
    encrypt_payload,
    permutation_index,
)
from gen4save.core.errors import BufferTooSmall
from gen4save.core.offsets import SubBlock


def test_zero_pv_is_identity_order():
    assert permutation_index(0) == 0
    assert block_offsets(0) == (0, 32, 64, 96)


def test_permutation_is_deterministic():
    pv = 0xDEADBEEF
    assert permutation_index(pv) == permutation_index(pv)


@pytest.mark.parametrize("pv, index", [
    (0x00002000, 1),
    (0x0000A000, 5),
    (24 << 13, 0),
    (0x0003E000, 31 % 24),
    (0xFFFC1FFF, 0),    # only bits 13-17 count
])
def test_permutation_index_uses_bits_13_to_17(pv, index):
    assert permutation_index(pv) == index


def test_order_table_rows_are_permutations():
    assert len(BLOCK_ORDER) == 24
    assert len(set(BLOCK_ORDER)) == 24
    for row in BLOCK_ORDER:
        assert sorted(row) == [0, 32, 64, 96]


def test_dcab_row():
    # D first, then C, then A, then B
    assert BLOCK_ORDER[22] == (64, 96, 32, 0)


def test_keystream_known_answer():
    out = crypt_payload(bytes(128), 0)
    assert out[:6] == bytes([0x00, 0x00, 0x7E, 0xE9, 0x71, 0x52])

    out = crypt_payload(bytes(128), 0xBEEF)
    assert out[:4] == bytes([0x58, 0x96, 0xE6, 0x4D])


def test_crypt_is_self_inverse():
    rng = random.Random(4)
    for seed in (0, 1, 0x7FFF, 0xFFFF, rng.randrange(0x10000)):
        payload = bytes(rng.randrange(256) for _ in range(128))
        assert decrypt_payload(encrypt_payload(payload, seed), seed) == payload
        assert crypt_payload(crypt_payload(payload, seed), seed) == payload


def test_crypt_changes_payload():
    payload = bytes(128)
    assert crypt_payload(payload, 0x1234) != payload


def test_crypt_does_not_modify_input():
    payload = bytearray(range(128))
    crypt_payload(payload, 0x4321)
    assert payload == bytearray(range(128))


def test_crypt_too_small():
    with pytest.raises(BufferTooSmall):
        crypt_payload(bytes(100), 0)


def _record(pv: int, payload: bytes) -> bytes:
    checksum = creature_checksum(payload)
    return struct.pack('<IHH', pv, 0, checksum) + bytes(crypt_payload(payload, checksum))


def test_record_decrypts_payload():
    payload = bytes(range(128))
    record = CreatureRecord(_record(0x12345678, payload))
    assert record.payload == payload
    assert record.personality_value == 0x12345678
    assert record.stored_checksum == creature_checksum(payload)


def test_record_addresses_through_permutation():
    pv = 0x0000A000      # ADCB: A=0, B=96, C=64, D=32
    payload = bytearray(128)
    struct.pack_into('<H', payload, 96, 0x0155)     # first move, sub-block B
    record = CreatureRecord(_record(pv, bytes(payload)))

    assert record.offsets == (0, 96, 64, 32)
    assert record.offset(SubBlock.B, 0x08) == 96 + 0x08
    assert record.read_u16(SubBlock.B, 0x08) == 0x0155


def test_seal_unchanged_record_round_trips():
    raw = _record(0x00C0FFEE, bytes(range(128)))
    assert CreatureRecord(raw).seal() == raw


def test_seal_after_edit_reseeds_cipher():
    raw = _record(0, bytes(128))
    record = CreatureRecord(raw)
    record.write_u16(SubBlock.A, 0x08, 25)
    sealed = record.seal()

    new_checksum = struct.unpack_from('<H', sealed, 6)[0]
    assert new_checksum == 25
    assert bytes(crypt_payload(sealed[8:], new_checksum))[:2] == b"\x19\x00"


def test_record_too_small():
    with pytest.raises(BufferTooSmall):
        CreatureRecord(bytes(0x87))

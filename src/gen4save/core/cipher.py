"""
Creature record obfuscation for Gen 4 saves.

Two layers protect the 128-byte payload of a creature record:

  1. Sub-block shuffle: the four 32-byte sub-blocks A/B/C/D are stored in
     one of 24 orders chosen by bits 13-17 of the personality value.
     Nothing is moved; fields are addressed through the order table.
  2. Keystream XOR: a linear congruential generator seeded with the
     creature checksum yields one 16-bit mask per payload word, applied in
     physical order. The transform is its own inverse.

Because the keystream is seeded by the checksum of the *decrypted* payload,
checksum and ciphertext must always be rewritten together.
"""

import struct
import logging
from typing import Tuple

from .checksum import creature_checksum
from .errors import BufferTooSmall
from .offsets import (
    CREATURE_EDIT_SIZE,
    CREATURE_FIELDS,
    CREATURE_HEADER_SIZE,
    CREATURE_PAYLOAD_SIZE,
    SubBlock,
)

logger = logging.getLogger(__name__)

# ── Constants ──────────────────────────────────────────────────────────────────

LCG_MULT    = 0x41C64E6D
LCG_ADD     = 0x00006073
PV_SHIFT_MASK = 0x3E000
PV_SHIFT    = 13

# Physical offset of sub-blocks (A, B, C, D) for each order index
BLOCK_ORDER: Tuple[Tuple[int, int, int, int], ...] = (
    (0, 32, 64, 96),    # ABCD
    (0, 32, 96, 64),    # ABDC
    (0, 64, 32, 96),    # ACBD
    (0, 96, 32, 64),    # ACDB
    (0, 64, 96, 32),    # ADBC
    (0, 96, 64, 32),    # ADCB
    (32, 0, 64, 96),    # BACD
    (32, 0, 96, 64),    # BADC
    (64, 0, 32, 96),    # BCAD
    (96, 0, 32, 64),    # BCDA
    (64, 0, 96, 32),    # BDAC
    (96, 0, 64, 32),    # BDCA
    (32, 64, 0, 96),    # CABD
    (32, 96, 0, 64),    # CADB
    (64, 32, 0, 96),    # CBAD
    (96, 32, 0, 64),    # CBDA
    (64, 96, 0, 32),    # CDAB
    (96, 64, 0, 32),    # CDBA
    (32, 64, 96, 0),    # DABC
    (32, 96, 64, 0),    # DACB
    (64, 32, 96, 0),    # DBAC
    (96, 32, 64, 0),    # DBCA
    (64, 96, 32, 0),    # DCAB
    (96, 64, 32, 0),    # DCBA
)


def permutation_index(pv: int) -> int:
    """Order-table row for a personality value."""
    return ((pv & PV_SHIFT_MASK) >> PV_SHIFT) % 24


def block_offsets(pv: int) -> Tuple[int, int, int, int]:
    """Physical payload offsets of sub-blocks A, B, C and D."""
    return BLOCK_ORDER[permutation_index(pv)]


def crypt_payload(payload: bytes, seed: int) -> bytearray:
    """
    XOR the 128-byte payload with the LCG keystream for ``seed``.

    Encryption and decryption are the same operation.
    """
    if len(payload) < CREATURE_PAYLOAD_SIZE:
        raise BufferTooSmall(CREATURE_PAYLOAD_SIZE, len(payload))

    out = bytearray(payload[:CREATURE_PAYLOAD_SIZE])
    state = seed & 0xFFFFFFFF
    for i in range(0, CREATURE_PAYLOAD_SIZE, 2):
        state = (state * LCG_MULT + LCG_ADD) & 0xFFFFFFFF
        out[i]     ^= (state >> 16) & 0xFF
        out[i + 1] ^= (state >> 24) & 0xFF
    return out


encrypt_payload = crypt_payload
decrypt_payload = crypt_payload


# ── Decrypted record view ──────────────────────────────────────────────────────

class CreatureRecord:
    """
    Decrypted working copy of the first 0x88 bytes of a creature record.

    Edits land in this copy only; :meth:`seal` produces the re-encrypted
    bytes to write back.
    """

    def __init__(self, raw: bytes):
        if len(raw) < CREATURE_EDIT_SIZE:
            raise BufferTooSmall(CREATURE_EDIT_SIZE, len(raw))
        self.data = bytearray(raw[:CREATURE_EDIT_SIZE])
        self.stored_checksum = self._u16(CREATURE_FIELDS.checksum)
        self.data[CREATURE_HEADER_SIZE:] = decrypt_payload(
            self.data[CREATURE_HEADER_SIZE:], self.stored_checksum)
        self.offsets = block_offsets(self.personality_value)
        logger.debug(f"Decrypted creature pv={self.personality_value:#010x} "
                     f"seed={self.stored_checksum:#06x} order={permutation_index(self.personality_value)}")

    def _u16(self, pos: int) -> int:
        return struct.unpack_from('<H', self.data, pos)[0]

    @property
    def personality_value(self) -> int:
        return struct.unpack_from('<I', self.data, CREATURE_FIELDS.personality_value)[0]

    @property
    def payload(self) -> bytes:
        return bytes(self.data[CREATURE_HEADER_SIZE:])

    def offset(self, block: SubBlock, field_offset: int) -> int:
        """Record-relative position of a field inside a logical sub-block."""
        return self.offsets[block.value] + field_offset

    def read_u8(self, block: SubBlock, field_offset: int) -> int:
        return self.data[self.offset(block, field_offset)]

    def read_u16(self, block: SubBlock, field_offset: int) -> int:
        return self._u16(self.offset(block, field_offset))

    def read_u32(self, block: SubBlock, field_offset: int) -> int:
        return struct.unpack_from('<I', self.data, self.offset(block, field_offset))[0]

    def read_bytes(self, block: SubBlock, field_offset: int, size: int) -> bytes:
        pos = self.offset(block, field_offset)
        return bytes(self.data[pos:pos + size])

    def write_u8(self, block: SubBlock, field_offset: int, value: int) -> None:
        self.data[self.offset(block, field_offset)] = value & 0xFF

    def write_u16(self, block: SubBlock, field_offset: int, value: int) -> None:
        struct.pack_into('<H', self.data, self.offset(block, field_offset), value & 0xFFFF)

    def write_bytes(self, block: SubBlock, field_offset: int, value: bytes) -> None:
        pos = self.offset(block, field_offset)
        self.data[pos:pos + len(value)] = value

    def compute_checksum(self) -> int:
        return creature_checksum(self.data[CREATURE_HEADER_SIZE:])

    def seal(self) -> bytes:
        """Store the fresh checksum and re-encrypt with it as the seed."""
        checksum = self.compute_checksum()
        sealed = bytearray(self.data)
        struct.pack_into('<H', sealed, CREATURE_FIELDS.checksum, checksum)
        sealed[CREATURE_HEADER_SIZE:] = encrypt_payload(sealed[CREATURE_HEADER_SIZE:], checksum)
        logger.debug(f"Sealed creature checksum {self.stored_checksum:#06x} -> {checksum:#06x}")
        return bytes(sealed)

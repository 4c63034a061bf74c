"""
Checksums protecting a Gen 4 save.

  - Save checksum: CRC-16/CCITT (poly 0x1021, init 0xFFFF, no final XOR)
    over the small block up to the footer.
  - Creature checksum: 16-bit sum of the 64 little-endian words of the
    decrypted 128-byte payload. This is a weak integrity check, not a
    hash; different payloads can collide.
"""

import struct
from typing import List

from .errors import BufferTooSmall
from .offsets import CREATURE_PAYLOAD_SIZE, OffsetProfile

CRC_POLY    = 0x1021
CRC_INIT    = 0xFFFF


def _build_crc_table() -> List[int]:
    table = []
    for i in range(256):
        crc = i << 8
        for _ in range(8):
            crc = ((crc << 1) ^ CRC_POLY) if crc & 0x8000 else (crc << 1)
        table.append(crc & 0xFFFF)
    return table


CRC_TABLE = tuple(_build_crc_table())


def crc16_ccitt(data: bytes, init: int = CRC_INIT) -> int:
    """Table-driven CRC-16/CCITT over the whole of ``data``."""
    crc = init
    for b in data:
        crc = ((crc << 8) & 0xFFFF) ^ CRC_TABLE[(b ^ (crc >> 8)) & 0xFF]
    return crc


def save_checksum(block: bytes, profile: OffsetProfile) -> int:
    """CRC of a small block from its first byte up to the footer."""
    if len(block) < profile.checksum_end:
        raise BufferTooSmall(profile.checksum_end, len(block))
    return crc16_ccitt(memoryview(block)[:profile.checksum_end])


def creature_checksum(payload: bytes) -> int:
    """Word-sum of a decrypted creature payload, truncated to 16 bits."""
    if len(payload) < CREATURE_PAYLOAD_SIZE:
        raise BufferTooSmall(CREATURE_PAYLOAD_SIZE, len(payload))
    words = struct.unpack_from('<64H', payload)
    return sum(words) & 0xFFFF

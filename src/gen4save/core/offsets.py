"""
Offset tables for Gen 4 (Nintendo DS) Pokemon save files.

Supported games, grouped by shared small-block layout:

  - Diamond / Pearl
  - Platinum
  - HeartGold / SoulSilver

Save File Format:
  - 512 KiB (0x80000) image holding two mirrored halves
  - Half 1 starts at 0x00000, half 2 at 0x40000
  - Each half starts with a "small block" (trainer data + party)
    followed by a "big block" (PC boxes, not handled here)
  - The small block ends with a footer; the CRC-16 of everything before
    the footer is stored in it

Creature Record (party slot, 236 bytes, only the first 0x88 are touched):
  - 0x00: personality value (u32, clear)
  - 0x04: flags, bit 2 = bad egg (u16, clear)
  - 0x06: checksum of the decrypted payload (u16, clear)
  - 0x08: 128-byte encrypted payload = 4 shuffled 32-byte sub-blocks A/B/C/D

Field offsets inside the payload are given record-relative as if the
sub-block sat at physical position 0; add the sub-block's permuted offset.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple, Union

from .errors import UnknownVersion

# ── Constants ──────────────────────────────────────────────────────────────────

SAVE_SIZE               = 0x80000   # 512 KiB full image
SMALL_BLOCK_OFFSETS     = (0x00000, 0x40000)

CREATURE_HEADER_SIZE    = 0x08      # PV + flags + checksum
SUB_BLOCK_SIZE          = 0x20
CREATURE_PAYLOAD_SIZE   = 4 * SUB_BLOCK_SIZE
CREATURE_EDIT_SIZE      = CREATURE_HEADER_SIZE + CREATURE_PAYLOAD_SIZE

TRAINER_NAME_CHARS      = 7
TRAINER_NAME_WIDTH      = 16        # 8 units incl. terminator
NICKNAME_CHARS          = 10
NICKNAME_WIDTH          = 22        # 11 units incl. terminator


class GameVersion(Enum):
    """Version tags accepted by the editor."""
    DIAMOND     = "diamond"
    PEARL       = "pearl"
    PLATINUM    = "platinum"
    HEARTGOLD   = "heartgold"
    SOULSILVER  = "soulsilver"


class SubBlock(Enum):
    """Logical creature sub-blocks, valued by their index in a permutation row."""
    A = 0   # species, item, OT ids, ability
    B = 1   # moves, PP, IVs
    C = 2   # nickname
    D = 3   # not handled


# ── Data Classes ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CreatureFields:
    """Creature record field table, shared by every version."""
    personality_value:  int = 0x00
    skip_checksum:      int = 0x04
    checksum:           int = 0x06
    payload:            int = 0x08

    # Sub-block A
    species:            int = 0x08
    held_item:          int = 0x0A
    trainer_id:         int = 0x0C
    secret_id:          int = 0x0E
    ability:            int = 0x15

    # Sub-block B
    moveset:            int = 0x08
    move_pp:            int = 0x10
    move_pp_ups:        int = 0x14
    ivs:                int = 0x18

    # Sub-block C
    nickname:           int = 0x08


CREATURE_FIELDS = CreatureFields()


@dataclass(frozen=True)
class OffsetProfile:
    """Small-block offsets for one family of versions."""
    name:               str
    trainer_name:       int
    trainer_id:         int
    secret_id:          int
    checksum_end:       int     # CRC covers [0, checksum_end)
    checksum_offset:    int     # u16 LE storage
    lead_creature:      int
    play_time:          int     # hours u16, minutes u8, seconds u8
    creature:           CreatureFields = field(default=CREATURE_FIELDS)

    @property
    def min_block_size(self) -> int:
        """Bytes a small block must span for every field to be addressable."""
        return max(
            self.checksum_end,
            self.checksum_offset + 2,
            self.lead_creature + CREATURE_EDIT_SIZE,
            self.trainer_name + TRAINER_NAME_WIDTH,
            self.play_time + 4,
        )


DIAMOND_PEARL = OffsetProfile(
    name="Diamond/Pearl",
    trainer_name=0x64,
    trainer_id=0x74,
    secret_id=0x76,
    checksum_end=0xC0EC,
    checksum_offset=0xC0FE,
    lead_creature=0x98,
    play_time=0x86,
)

PLATINUM = OffsetProfile(
    name="Platinum",
    trainer_name=0x68,
    trainer_id=0x78,
    secret_id=0x7A,
    checksum_end=0xCF18,
    checksum_offset=0xCF2A,
    lead_creature=0xA0,
    play_time=0x8A,
)

HEARTGOLD_SOULSILVER = OffsetProfile(
    name="HeartGold/SoulSilver",
    trainer_name=0x64,
    trainer_id=0x74,
    secret_id=0x76,
    checksum_end=0xF618,
    checksum_offset=0xF626,
    lead_creature=0x98,
    play_time=0x86,
)

PROFILES: Dict[GameVersion, OffsetProfile] = {
    GameVersion.DIAMOND:    DIAMOND_PEARL,
    GameVersion.PEARL:      DIAMOND_PEARL,
    GameVersion.PLATINUM:   PLATINUM,
    GameVersion.HEARTGOLD:  HEARTGOLD_SOULSILVER,
    GameVersion.SOULSILVER: HEARTGOLD_SOULSILVER,
}


def parse_version(tag: Union[str, GameVersion]) -> GameVersion:
    """Resolve a version tag (case-insensitive string or enum member)."""
    if isinstance(tag, GameVersion):
        return tag
    try:
        return GameVersion(str(tag).strip().lower())
    except ValueError:
        raise UnknownVersion(str(tag)) from None


def get_profile(tag: Union[str, GameVersion]) -> OffsetProfile:
    """Return the offset profile for a version tag."""
    return PROFILES[parse_version(tag)]


def supported_versions() -> Tuple[str, ...]:
    return tuple(v.value for v in GameVersion)

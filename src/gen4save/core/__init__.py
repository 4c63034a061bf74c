"""Binary format engine: offsets, text codec, checksums and creature cipher."""

from .errors import (
    SaveEditError,
    UnknownVersion,
    SaveNeverWritten,
    InvalidCharacter,
    NameTooLong,
    UnknownSpecies,
    UnknownAbility,
    UnknownMove,
    InvalidMoveSlot,
    BufferTooSmall,
)
from .offsets import GameVersion, OffsetProfile, SubBlock, get_profile
from .checksum import crc16_ccitt, save_checksum, creature_checksum
from .cipher import CreatureRecord, block_offsets, crypt_payload, permutation_index

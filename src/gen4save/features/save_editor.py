"""
Lead-creature and trainer editing for Gen 4 (DS) Pokemon saves.

Every creature edit runs the same fixed pipeline against the active small
block:

  1. Validate the request (names, slot, text) before touching the image
  2. Decrypt the lead creature with its stored checksum as seed
  3. Apply one field mutation to the decrypted copy
  4. Recompute the creature checksum over the decrypted payload
  5. Store it and re-encrypt the payload with it as the new seed
  6. Recompute and store the CRC-16 of the small block

The image is only written in steps 5-6, so a failed validation leaves it
exactly as it was after the last successful edit.
"""

import struct
import logging
from dataclasses import dataclass, field, asdict
from typing import Callable, Dict, List, Mapping, Any, Optional, Union

from ..core.checksum import save_checksum
from ..core.cipher import CreatureRecord
from ..core.errors import (
    BufferTooSmall,
    InvalidMoveSlot,
    UnknownAbility,
    UnknownMove,
    UnknownSpecies,
)
from ..core.offsets import (
    CREATURE_EDIT_SIZE,
    NICKNAME_CHARS,
    NICKNAME_WIDTH,
    SMALL_BLOCK_OFFSETS,
    TRAINER_NAME_CHARS,
    TRAINER_NAME_WIDTH,
    GameVersion,
    SubBlock,
    get_profile,
    parse_version,
)
from ..core.text import decode_string, encode_nickname, encode_trainer_name
from ..data.tables import (
    ABILITIES,
    ABILITY_NAMES,
    MOVES,
    MOVE_NAMES,
    SPECIES,
    SPECIES_NAMES,
)
from .block_selector import BlockSelector, PlayTime, read_play_time

logger = logging.getLogger(__name__)

MOVE_SLOTS = (1, 2, 3, 4)
SHINY_THRESHOLD = 8


# ── Data Classes ───────────────────────────────────────────────────────────────

@dataclass
class CreatureSummary:
    """Decrypted view of the lead creature."""
    personality_value:  int
    stored_checksum:    int
    computed_checksum:  int
    species_id:         int
    held_item:          int
    trainer_id:         int
    secret_id:          int
    ability_id:         int
    move_ids:           List[int]
    move_pp:            List[int]
    move_pp_ups:        List[int]
    ivs:                Dict[str, int]
    nickname:           str
    species_name:       str = ""
    ability_name:       str = ""
    move_names:         List[str] = field(default_factory=list)

    @property
    def checksum_valid(self) -> bool:
        return self.stored_checksum == self.computed_checksum

    @property
    def is_shiny(self) -> bool:
        pv = self.personality_value
        value = self.trainer_id ^ self.secret_id ^ (pv >> 16) ^ (pv & 0xFFFF)
        return value < SHINY_THRESHOLD

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d['checksum_valid'] = self.checksum_valid
        d['is_shiny'] = self.is_shiny
        return d


@dataclass
class SaveSummary:
    """Read-only snapshot of the active small block."""
    version:        str
    profile:        str
    active_block:   int
    trainer_name:   str
    trainer_id:     int
    secret_id:      int
    play_time:      PlayTime
    save_checksum:  int
    save_checksum_valid: bool
    lead:           CreatureSummary

    def to_dict(self) -> Dict[str, Any]:
        return {
            'version':             self.version,
            'profile':             self.profile,
            'active_block':        self.active_block,
            'trainer_name':        self.trainer_name,
            'trainer_id':          self.trainer_id,
            'secret_id':           self.secret_id,
            'play_time':           self.play_time.to_dict(),
            'save_checksum':       self.save_checksum,
            'save_checksum_valid': self.save_checksum_valid,
            'lead':                self.lead.to_dict(),
        }


def _lookup(table: Mapping[str, Any], name: str) -> Optional[str]:
    """Return the table's spelling of ``name``, matching case-insensitively."""
    if name in table:
        return name
    wanted = name.strip().lower()
    for key in table:
        if key.lower() == wanted:
            return key
    return None


def _unpack_ivs(packed: int) -> Dict[str, int]:
    return {
        'hp':              (packed >>  0) & 0x1F,
        'attack':          (packed >>  5) & 0x1F,
        'defense':         (packed >> 10) & 0x1F,
        'speed':           (packed >> 15) & 0x1F,
        'special_attack':  (packed >> 20) & 0x1F,
        'special_defense': (packed >> 25) & 0x1F,
    }


# ── Save Editor ────────────────────────────────────────────────────────────────

class SaveEditor:
    """
    Edits one in-memory save image.

    The active block is chosen once when the editor is created and reused
    for every edit of the session.
    """

    def __init__(self, data: Union[bytes, bytearray], version: Union[str, GameVersion]):
        self.version = parse_version(version)
        self.profile = get_profile(self.version)

        needed = SMALL_BLOCK_OFFSETS[1] + self.profile.min_block_size
        if len(data) < needed:
            raise BufferTooSmall(needed, len(data))

        self.data = data if isinstance(data, bytearray) else bytearray(data)
        self.active_block = BlockSelector(self.profile).select(self.data)
        self.block_start = SMALL_BLOCK_OFFSETS[self.active_block]
        self.creature_start = self.block_start + self.profile.lead_creature
        logger.debug(f"{self.profile.name}: editing small block {self.active_block + 1} "
                     f"at {self.block_start:#07x}")

    def to_bytes(self) -> bytes:
        return bytes(self.data)

    # ── Checksums ──────────────────────────────────────────────────────────

    def _small_block(self) -> bytes:
        return self.data[self.block_start:self.block_start + self.profile.checksum_end]

    @property
    def stored_save_checksum(self) -> int:
        return struct.unpack_from('<H', self.data, self.block_start + self.profile.checksum_offset)[0]

    def compute_save_checksum(self) -> int:
        return save_checksum(self._small_block(), self.profile)

    def _update_save_checksum(self) -> int:
        crc = self.compute_save_checksum()
        struct.pack_into('<H', self.data, self.block_start + self.profile.checksum_offset, crc)
        logger.debug(f"Save checksum -> {crc:#06x}")
        return crc

    def verify(self) -> Dict[str, bool]:
        """Compare stored checksums with freshly computed ones."""
        record = self._read_creature()
        return {
            'save_checksum':     self.stored_save_checksum == self.compute_save_checksum(),
            'creature_checksum': record.stored_checksum == record.compute_checksum(),
        }

    # ── Creature pipeline ──────────────────────────────────────────────────

    def _read_creature(self) -> CreatureRecord:
        return CreatureRecord(self.data[self.creature_start:self.creature_start + CREATURE_EDIT_SIZE])

    def _edit_creature(self, description: str, mutate: Callable[[CreatureRecord], None]) -> None:
        record = self._read_creature()
        if record.stored_checksum != record.compute_checksum():
            logger.warning("Lead creature checksum does not match its payload; "
                           "it will be overwritten")

        mutate(record)
        sealed = record.seal()

        self.data[self.creature_start:self.creature_start + CREATURE_EDIT_SIZE] = sealed
        self._update_save_checksum()
        logger.info(f"Edited lead creature: {description}")

    def edit_species(self, name: str) -> int:
        """
        Change the lead creature's species and reset its nickname to the
        species name in capitals. Returns the species id written.
        """
        key = _lookup(SPECIES, name)
        if key is None:
            raise UnknownSpecies(name)
        species_id = SPECIES[key]
        nickname = encode_nickname(key)
        fields = self.profile.creature

        def mutate(record: CreatureRecord) -> None:
            record.write_u16(SubBlock.A, fields.species, species_id)
            record.write_bytes(SubBlock.C, fields.nickname, nickname)

        self._edit_creature(f"species {key} (#{species_id})", mutate)
        return species_id

    def edit_ability(self, name: str) -> int:
        key = _lookup(ABILITIES, name)
        if key is None:
            raise UnknownAbility(name)
        ability_id = ABILITIES[key]
        fields = self.profile.creature

        def mutate(record: CreatureRecord) -> None:
            record.write_u8(SubBlock.A, fields.ability, ability_id)

        self._edit_creature(f"ability {key} (#{ability_id})", mutate)
        return ability_id

    def edit_move(self, name: str, slot: int) -> int:
        """
        Put a move in slot 1-4 and refill its PP.

        The PP byte goes to ``move_pp + slot`` and the byte after it,
        the layout existing saves edited by this tool already carry.
        """
        if not isinstance(slot, int) or isinstance(slot, bool) or slot not in MOVE_SLOTS:
            raise InvalidMoveSlot(slot)
        key = _lookup(MOVES, name)
        if key is None:
            raise UnknownMove(name)
        move_id, pp = MOVES[key]
        fields = self.profile.creature

        def mutate(record: CreatureRecord) -> None:
            record.write_u16(SubBlock.B, fields.moveset + (slot - 1) * 2, move_id)
            record.write_u8(SubBlock.B, fields.move_pp + slot, pp)
            record.write_u8(SubBlock.B, fields.move_pp + slot + 1, pp)

        self._edit_creature(f"move {key} (#{move_id}, {pp} PP) in slot {slot}", mutate)
        return move_id

    def make_shiny(self) -> None:
        """
        Make the lead creature shiny by copying its personality value
        into its original-trainer ids, which zeroes the shiny XOR.
        """
        fields = self.profile.creature

        def mutate(record: CreatureRecord) -> None:
            pv = record.personality_value
            record.write_u16(SubBlock.A, fields.trainer_id, pv & 0xFFFF)
            record.write_u16(SubBlock.A, fields.secret_id, pv >> 16)

        self._edit_creature("shiny", mutate)

    # ── Trainer ────────────────────────────────────────────────────────────

    def rename_trainer(self, name: str) -> None:
        encoded = encode_trainer_name(name)
        pos = self.block_start + self.profile.trainer_name
        self.data[pos:pos + TRAINER_NAME_WIDTH] = encoded
        self._update_save_checksum()
        logger.info(f"Renamed trainer to {name}")

    # ── Inspection ─────────────────────────────────────────────────────────

    def _summarize_creature(self) -> CreatureSummary:
        record = self._read_creature()
        fields = self.profile.creature

        species_id = record.read_u16(SubBlock.A, fields.species)
        ability_id = record.read_u8(SubBlock.A, fields.ability)
        move_ids = [record.read_u16(SubBlock.B, fields.moveset + i * 2) for i in range(4)]
        move_pp = list(record.read_bytes(SubBlock.B, fields.move_pp, 4))
        nickname = decode_string(record.read_bytes(SubBlock.C, fields.nickname, NICKNAME_WIDTH),
                                 NICKNAME_CHARS, errors="replace")

        return CreatureSummary(
            personality_value=record.personality_value,
            stored_checksum=record.stored_checksum,
            computed_checksum=record.compute_checksum(),
            species_id=species_id,
            held_item=record.read_u16(SubBlock.A, fields.held_item),
            trainer_id=record.read_u16(SubBlock.A, fields.trainer_id),
            secret_id=record.read_u16(SubBlock.A, fields.secret_id),
            ability_id=ability_id,
            move_ids=move_ids,
            move_pp=move_pp,
            move_pp_ups=list(record.read_bytes(SubBlock.B, fields.move_pp_ups, 4)),
            ivs=_unpack_ivs(record.read_u32(SubBlock.B, fields.ivs)),
            nickname=nickname,
            species_name=SPECIES_NAMES.get(species_id, f"#{species_id}"),
            ability_name=ABILITY_NAMES.get(ability_id, f"#{ability_id}"),
            move_names=[MOVE_NAMES.get(m, f"#{m}") for m in move_ids if m],
        )

    def inspect(self) -> SaveSummary:
        """Decode the active block without changing the image."""
        p = self.profile
        start = self.block_start
        name_field = self.data[start + p.trainer_name:start + p.trainer_name + TRAINER_NAME_WIDTH]
        stored = self.stored_save_checksum

        return SaveSummary(
            version=self.version.value,
            profile=p.name,
            active_block=self.active_block + 1,
            trainer_name=decode_string(name_field, TRAINER_NAME_CHARS, errors="replace"),
            trainer_id=struct.unpack_from('<H', self.data, start + p.trainer_id)[0],
            secret_id=struct.unpack_from('<H', self.data, start + p.secret_id)[0],
            play_time=read_play_time(self.data, start, p),
            save_checksum=stored,
            save_checksum_valid=stored == self.compute_save_checksum(),
            lead=self._summarize_creature(),
        )

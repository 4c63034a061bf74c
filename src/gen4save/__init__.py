"""
Gen 4 (Nintendo DS) Pokemon save editor.

Reads and edits the trainer and lead creature of Diamond, Pearl, Platinum,
HeartGold and SoulSilver saves while keeping both checksum layers valid.
"""

from .core.errors import SaveEditError
from .core.offsets import GameVersion, get_profile
from .features.save_editor import SaveEditor
from .features.storage import load_save, write_save

__version__ = "1.0.0"

__all__ = [
    "GameVersion",
    "SaveEditError",
    "SaveEditor",
    "get_profile",
    "load_save",
    "write_save",
]

"""
Error taxonomy for the Gen 4 save editor.

Every failure is raised before any byte of the save image is written, so a
caller can catch ``SaveEditError``, re-prompt, and keep using the same image.
"""

from typing import Any


class SaveEditError(Exception):
    """Base class for every editor failure."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class UnknownVersion(SaveEditError, ValueError):
    def __init__(self, tag: str):
        super().__init__(f"Unknown game version: {tag!r}", tag)


class SaveNeverWritten(SaveEditError):
    def __init__(self):
        super().__init__("Save the game at least twice before editing")


class InvalidCharacter(SaveEditError, ValueError):
    def __init__(self, value: Any):
        super().__init__(f"Invalid character for in-game text: {value!r}", value)


class NameTooLong(SaveEditError, ValueError):
    def __init__(self, name: str, max_chars: int):
        super().__init__(f"Name {name!r} is longer than {max_chars} characters", name)
        self.max_chars = max_chars


class UnknownSpecies(SaveEditError, ValueError):
    def __init__(self, name: str):
        super().__init__(f"Unknown species: {name!r}", name)


class UnknownAbility(SaveEditError, ValueError):
    def __init__(self, name: str):
        super().__init__(f"Unknown ability: {name!r}", name)


class UnknownMove(SaveEditError, ValueError):
    def __init__(self, name: str):
        super().__init__(f"Unknown move: {name!r}", name)


class InvalidMoveSlot(SaveEditError, ValueError):
    def __init__(self, slot: Any):
        super().__init__(f"Move slot must be 1-4, got {slot!r}", slot)


class BufferTooSmall(SaveEditError, ValueError):
    def __init__(self, needed: int, actual: int):
        super().__init__(f"Buffer too small: need {needed} bytes, got {actual}", actual)
        self.needed = needed

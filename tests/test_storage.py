"""Tests for reading and writing save files."""

import logging

from gen4save.core.offsets import SAVE_SIZE
from gen4save.features.save_editor import SaveEditor
from gen4save.features.storage import load_save, write_save


def test_load_returns_mutable_copy(tmp_path, make_save):
    path = tmp_path / "game.sav"
    path.write_bytes(bytes(make_save()))

    data = load_save(path)
    assert isinstance(data, bytearray)
    assert len(data) == SAVE_SIZE


def test_round_trip_through_disk(tmp_path, make_save):
    path = tmp_path / "game.sav"
    write_save(path, make_save())

    editor = SaveEditor(load_save(str(path)), "diamond")
    editor.edit_species("Pikachu")
    write_save(path, editor.to_bytes())

    reloaded = SaveEditor(load_save(path), "diamond")
    assert reloaded.inspect().lead.species_id == 25
    assert reloaded.verify() == {'save_checksum': True, 'creature_checksum': True}


def test_unexpected_size_warns(tmp_path, caplog):
    path = tmp_path / "short.sav"
    path.write_bytes(bytes(1024))

    with caplog.at_level(logging.WARNING, logger="gen4save.features.storage"):
        data = load_save(path)
    assert len(data) == 1024
    assert "expected" in caplog.text


def test_write_returns_path(tmp_path):
    path = write_save(tmp_path / "out.sav", b"\x01\x02")
    assert path.read_bytes() == b"\x01\x02"

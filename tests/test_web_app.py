"""Tests for the Flask endpoints."""

import io

import pytest

from gen4save.config import EditorConfig
from gen4save.features.save_editor import SaveEditor
from gen4save.web.app import create_app


@pytest.fixture
def client():
    app = create_app(EditorConfig(secret_key="test"))
    app.config['TESTING'] = True
    return app.test_client()


def _upload(data, **form):
    form["sav_file"] = (io.BytesIO(bytes(data)), "game.sav")
    return form


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "ok"


def test_versions(client):
    resp = client.get("/api/versions")
    assert resp.get_json()["versions"] == ["diamond", "pearl", "platinum", "heartgold", "soulsilver"]


def test_inspect(client, make_save):
    resp = client.post("/api/save/inspect", data=_upload(make_save(), version="diamond"),
                       content_type="multipart/form-data")
    body = resp.get_json()
    assert resp.status_code == 200
    assert body["success"] is True
    assert body["save"]["trainer_name"] == "ASH"
    assert body["checks"] == {"save_checksum": True, "creature_checksum": True}


def test_edit_species_returns_edited_file(client, make_save):
    resp = client.post("/api/save/edit",
                       data=_upload(make_save(), version="diamond", operation="species", value="Pikachu"),
                       content_type="multipart/form-data")
    assert resp.status_code == 200
    assert "game.sav" in resp.headers["Content-Disposition"]

    lead = SaveEditor(resp.data, "diamond").inspect().lead
    assert lead.species_id == 25
    assert lead.nickname == "PIKACHU"


def test_edit_move(client, make_save):
    resp = client.post("/api/save/edit",
                       data=_upload(make_save("platinum"), version="platinum", operation="move",
                                    value="Surf", slot="3"),
                       content_type="multipart/form-data")
    assert resp.status_code == 200
    assert SaveEditor(resp.data, "platinum").inspect().lead.move_ids == [0, 0, 57, 0]


@pytest.mark.parametrize("slot", ["first", "\u00b2", "0"])
def test_edit_move_bad_slot(client, make_save, slot):
    resp = client.post("/api/save/edit",
                       data=_upload(make_save(), version="diamond", operation="move",
                                    value="Surf", slot=slot),
                       content_type="multipart/form-data")
    assert resp.status_code == 400
    assert resp.get_json()["error_type"] == "InvalidMoveSlot"


def test_unknown_species(client, make_save):
    resp = client.post("/api/save/edit",
                       data=_upload(make_save(), version="diamond", operation="species", value="Agumon"),
                       content_type="multipart/form-data")
    body = resp.get_json()
    assert resp.status_code == 400
    assert body["success"] is False
    assert body["error_type"] == "UnknownSpecies"


def test_unknown_version(client, make_save):
    resp = client.post("/api/save/inspect", data=_upload(make_save(), version="gold"),
                       content_type="multipart/form-data")
    assert resp.status_code == 400
    assert resp.get_json()["error_type"] == "UnknownVersion"


def test_missing_file(client):
    resp = client.post("/api/save/edit", data={"operation": "shiny"},
                       content_type="multipart/form-data")
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "No file provided"


def test_unknown_operation(client, make_save):
    resp = client.post("/api/save/edit",
                       data=_upload(make_save(), version="diamond", operation="delete"),
                       content_type="multipart/form-data")
    assert resp.status_code == 400
    assert "Unknown operation" in resp.get_json()["error"]

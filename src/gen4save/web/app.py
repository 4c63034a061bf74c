"""
Gen 4 Save Editor
Flask Web Application
"""

import io
import os
import logging
import tempfile
from datetime import datetime
from typing import Optional, Tuple

from flask import Flask, Response, jsonify, request, send_file
from flask_cors import CORS

from ..config import EditorConfig
from ..core.errors import SaveEditError
from ..core.offsets import supported_versions
from ..features.save_editor import SaveEditor
from ..features.storage import load_save

logger = logging.getLogger(__name__)

EDIT_OPERATIONS = ("species", "ability", "move", "shiny", "trainer_name")


def _error(message: str, status: int = 400, error_type: str = "") -> Tuple[Response, int]:
    return jsonify({"success": False, "error": message, "error_type": error_type}), status


def _open_upload() -> Tuple[Optional[SaveEditor], Optional[str]]:
    """Load the uploaded ``sav_file`` into an editor for the requested version."""
    f = request.files["sav_file"]
    with tempfile.NamedTemporaryFile(suffix=".sav", delete=False) as tmp:
        f.save(tmp.name)
        tmp_path = tmp.name
    try:
        data = load_save(tmp_path)
    finally:
        os.unlink(tmp_path)
    return SaveEditor(data, request.form.get("version", "")), f.filename


def _apply_edit(editor: SaveEditor, operation: str) -> None:
    value = request.form.get("value", "")
    if operation == "species":
        editor.edit_species(value)
    elif operation == "ability":
        editor.edit_ability(value)
    elif operation == "move":
        slot = request.form.get("slot", "")
        editor.edit_move(value, int(slot) if slot.isdecimal() else slot)
    elif operation == "shiny":
        editor.make_shiny()
    elif operation == "trainer_name":
        editor.rename_trainer(value)


def create_app(config: Optional[EditorConfig] = None) -> Flask:
    config = config or EditorConfig.from_env()

    app = Flask(__name__)
    app.config['SECRET_KEY'] = config.secret_key
    app.config['MAX_CONTENT_LENGTH'] = config.max_upload_bytes
    app.config['EDITOR_CONFIG'] = config

    # Enable CORS for API endpoints
    CORS(app, resources={r"/api/*": {"origins": "*"}})

    @app.errorhandler(SaveEditError)
    def handle_save_error(e: SaveEditError):
        logger.error(f"Rejected request: {e}")
        return _error(str(e), 400, type(e).__name__)

    @app.errorhandler(OSError)
    def handle_os_error(e: OSError):
        logger.error(f"Storage failure: {e}")
        return _error("Could not read the uploaded save", 500, "OSError")

    @app.route("/health")
    def health_check():
        return jsonify({
            "status": "ok",
            "timestamp": datetime.now().isoformat(),
        })

    @app.route("/api/versions")
    def api_versions():
        return jsonify({"versions": list(supported_versions())})

    @app.route("/api/save/inspect", methods=["POST"])
    def api_save_inspect():
        """Decode an uploaded save without changing it."""
        if "sav_file" not in request.files:
            return _error("No file provided")
        editor, _ = _open_upload()
        summary = editor.inspect()
        return jsonify({"success": True, "save": summary.to_dict(), "checks": editor.verify()})

    @app.route("/api/save/edit", methods=["POST"])
    def api_save_edit():
        """Apply one edit to an uploaded save and send the result back."""
        if "sav_file" not in request.files:
            return _error("No file provided")
        operation = request.form.get("operation", "")
        if operation not in EDIT_OPERATIONS:
            return _error(f"Unknown operation: {operation!r}")

        editor, filename = _open_upload()
        _apply_edit(editor, operation)
        return send_file(
            io.BytesIO(editor.to_bytes()),
            mimetype="application/octet-stream",
            as_attachment=True,
            download_name=filename or "edited.sav",
        )

    return app


def main() -> None:
    config = EditorConfig.from_env()
    logging.basicConfig(level=getattr(logging, config.log_level, logging.INFO))
    app = create_app(config)
    logger.info(f"Starting save editor on {config.host}:{config.port} (debug={config.debug})")
    app.run(debug=config.debug, host=config.host, port=config.port)


if __name__ == '__main__':
    main()

from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import current_owner, json_body, owner_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/notes", methods=["POST"], endpoint="save_note")
    @owner_required
    def save_note():
        data = json_body()
        container.note_service.save_note(current_owner(), data.get("note"))
        return jsonify({"success": True, "status": "Note Saved"})

    @app.route("/api/notes/latest", methods=["GET"], endpoint="latest_note")
    @owner_required
    def latest_note():
        note = container.note_service.latest_note(current_owner())
        return jsonify(note.to_dict())

from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import current_owner, json_body, owner_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["POST"], endpoint="record_attendance")
    @owner_required
    def record_attendance():
        data = json_body()
        written = container.attendance_service.record_attendance(
            current_owner(),
            work_date=data.get("date"),
            laborer_ids=data.get("ids"),
        )
        return jsonify({"success": True, "status": "Saved", "count": written})

from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import current_owner, json_body, owner_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/laborers", methods=["GET"], endpoint="list_laborers")
    @owner_required
    def list_laborers():
        laborers = container.laborer_service.list_laborers(current_owner())
        return jsonify([lab.to_dict() for lab in laborers])

    @app.route("/api/laborers", methods=["POST"], endpoint="create_laborer")
    @owner_required
    def create_laborer():
        data = json_body()
        laborer = container.laborer_service.create_laborer(
            current_owner(),
            name=data.get("name"),
            daily_wage=data.get("dailyWage"),
        )
        return jsonify(laborer.to_dict()), 201

    @app.route("/api/laborers/<laborer_id>", methods=["DELETE"], endpoint="delete_laborer")
    @owner_required
    def delete_laborer(laborer_id: str):
        container.laborer_service.delete_laborer(current_owner(), laborer_id)
        return jsonify({"success": True, "message": "Laborer deleted"})

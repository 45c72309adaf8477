from __future__ import annotations

import csv
import io

from flask import Flask, jsonify

from ..common.web import current_owner, owner_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/salary", methods=["GET"], endpoint="salary_report")
    @owner_required
    def salary_report():
        lines = container.salary_report_service.generate_report(current_owner())
        return jsonify([line.to_dict() for line in lines])

    @app.route("/api/salary/summary", methods=["GET"], endpoint="salary_summary")
    @owner_required
    def salary_summary():
        svc = container.salary_report_service
        lines = svc.generate_report(current_owner())
        return jsonify(
            {
                "lines": [line.to_dict() for line in lines],
                "totals": svc.summarize(lines).to_dict(),
            }
        )

    @app.route("/api/salary.csv", methods=["GET"], endpoint="salary_report_csv")
    @owner_required
    def salary_report_csv():
        lines = container.salary_report_service.generate_report(current_owner())

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=["name", "days_worked", "salary"])
        writer.writeheader()
        for line in lines:
            writer.writerow(
                {
                    "name": line.name,
                    "days_worked": line.days_worked,
                    # Presentation only: the computed value is never rounded.
                    "salary": f"{line.salary:.2f}",
                }
            )

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": "attachment; filename=salary_report.csv"},
        )

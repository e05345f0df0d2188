from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import parse_iso_date
from ..common.web import instructor_required, json_error
from ..container import Container
from .csv_export import to_csv
from .service import DAY_EXPORT_FIELDS, TERM_EXPORT_FIELDS


def register(app: Flask, container: Container) -> None:
    def _parse_key(value: str):
        try:
            return parse_iso_date(value)
        except ValueError:
            return None

    def _csv_response(text: str, filename: str):
        return app.response_class(
            text.encode("utf-8"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/instructor/roster", methods=["GET"], endpoint="instructor_roster")
    @instructor_required
    def instructor_roster():
        roster = container.report_service.roster()
        return jsonify(
            {
                "success": True,
                "count": len(roster),
                "roster": [{"uid": r.uid, "email": r.email, "displayName": r.display_name} for r in roster],
            }
        )

    @app.route("/instructor/days", methods=["GET"], endpoint="instructor_days")
    @instructor_required
    def instructor_days():
        term = container.schedule.term
        return jsonify(
            {
                "success": True,
                "term": {"start": term.start.isoformat(), "end": term.end.isoformat()},
                "days": container.report_service.term_overview(),
            }
        )

    @app.route("/instructor/days/<date_key>", methods=["GET"], endpoint="instructor_day")
    @instructor_required
    def instructor_day(date_key: str):
        day = _parse_key(date_key)
        if day is None:
            return json_error("Date must be YYYY-MM-DD", 400)

        report = container.report_service.day_report(day)
        return jsonify({"success": True, **report.to_dict()})

    @app.route("/instructor/export/<date_key>.csv", methods=["GET"], endpoint="instructor_day_csv")
    @instructor_required
    def instructor_day_csv(date_key: str):
        day = _parse_key(date_key)
        if day is None:
            return json_error("Date must be YYYY-MM-DD", 400)

        rows = container.report_service.day_export_rows(day)
        return _csv_response(to_csv(DAY_EXPORT_FIELDS, rows), f"attendance_{day.isoformat()}.csv")

    @app.route("/instructor/export.csv", methods=["GET"], endpoint="instructor_term_csv")
    @instructor_required
    def instructor_term_csv():
        rows = container.report_service.term_export_rows()
        term = container.schedule.term
        filename = f"attendance_{term.start.strftime('%Y%m%d')}_{term.end.strftime('%Y%m%d')}.csv"
        return _csv_response(to_csv(TERM_EXPORT_FIELDS, rows), filename)

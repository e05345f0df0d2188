from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.web import current_identity, json_error, text_field
from ..core.exceptions import CheckInError, NotAuthenticated, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/checkin/status", methods=["GET"], endpoint="checkin_status")
    def checkin_status():
        status = container.checkin_service.status(current_identity())
        return jsonify({"success": True, **status.to_dict()})

    @app.route("/checkin", methods=["POST"], endpoint="checkin")
    def checkin():
        data = request.get_json(silent=True) or {}
        claimed = text_field(data, "password")

        try:
            result = container.checkin_service.check_in(current_identity(), claimed)
        except CheckInError as e:
            status_code = 401 if isinstance(e, NotAuthenticated) else 400
            return json_error(str(e), status_code)
        except ValidationError as e:
            return json_error(str(e), 400)
        except Exception:
            logger.exception("Check-in failed")
            return json_error("System error during check-in", 500)

        message = "Marked present. Have a great class!" if result.newly_marked else "You're already marked present for today."
        return jsonify(
            {
                "success": True,
                "date": result.record.date_key,
                "newly_marked": result.newly_marked,
                "message": message,
            }
        )

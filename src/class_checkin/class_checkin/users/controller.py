from __future__ import annotations

import logging

from flask import Flask, jsonify, request, session

from ..common.web import json_error, login_required, text_field
from ..core.exceptions import AuthenticationError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/auth/session", methods=["POST"], endpoint="sign_in")
    def sign_in():
        data = request.get_json(silent=True) or {}
        token = text_field(data, "id_token")

        try:
            s_user = container.auth_service.sign_in(token)
        except (AuthenticationError, ValidationError) as e:
            # Provider messages are surfaced verbatim.
            return json_error(str(e), 401)
        except Exception:
            logger.exception("Sign-in failed")
            return json_error("System error during sign-in", 500)

        session.clear()
        session["uid"] = s_user.uid
        session["email"] = s_user.email
        session["name"] = s_user.display_name
        session["role"] = s_user.role.value

        return jsonify(
            {
                "success": True,
                "user": {
                    "uid": s_user.uid,
                    "email": s_user.email,
                    "displayName": s_user.display_name,
                    "role": s_user.role.value,
                },
            }
        )

    @app.route("/auth/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        return jsonify(
            {
                "success": True,
                "user": {
                    "uid": session["uid"],
                    "email": session.get("email"),
                    "displayName": session.get("name"),
                    "role": session.get("role"),
                },
            }
        )

    @app.route("/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True})

import logging

from flask import Blueprint, g, jsonify

from careersync.auth import (
    create_token,
    exchange_google_code,
    fetch_google_userinfo,
    token_required,
)
from careersync.errors import APIError, BadRequest, json_body

logger = logging.getLogger(__name__)

bp = Blueprint("auth", __name__, url_prefix="/api/auth")


@bp.route("/google", methods=["POST"])
def google_login():
    """Exchange a Google authorization code for an app JWT."""
    code = json_body().get("code")
    if not code:
        raise BadRequest("Authorization code is required")

    try:
        tokens = exchange_google_code(code)
        user = fetch_google_userinfo(tokens.get("access_token", ""))
        token = create_token(user)
    except APIError:
        raise
    except Exception:
        logger.exception("Auth error")
        return jsonify({"error": "Internal server error"}), 500

    logger.info("Signed in %s", user.get("email"))
    return jsonify({"token": token, "user": user})


@bp.route("/me", methods=["GET"])
@token_required
def me():
    claims = {k: v for k, v in g.user.items() if k != "exp"}
    return jsonify({"user": claims})

import logging

import requests
from flask import Blueprint, jsonify

from careersync.auth import current_user_id
from careersync.content import DEFAULT_NOTIFICATIONS, DEFAULT_PROFILE
from careersync.db import db, upsert
from careersync.errors import json_body
from careersync.llm import get_llm, message_text
from careersync.models import NotificationSettings, UserAPIKeys, UserProfile

logger = logging.getLogger(__name__)

bp = Blueprint("user", __name__, url_prefix="/api/user")

OPENAI_MODELS_URL = "https://api.openai.com/v1/models"

PROFILE_FIELDS = ("name", "email", "phone", "location", "bio")
NOTIFICATION_FIELDS = {
    "emailNotifications": "email_notifications",
    "pushNotifications": "push_notifications",
    "jobAlerts": "job_alerts",
    "weeklyReports": "weekly_reports",
}


def _text(value):
    return None if value is None else str(value)


# ---------- Profile ----------

@bp.route("/profile", methods=["GET"])
def get_profile():
    user_id = current_user_id()
    try:
        row = UserProfile.query.filter_by(user_id=user_id).first()
    except Exception:
        logger.exception("Error fetching profile for %s", user_id)
        return jsonify({"error": "Failed to fetch profile"}), 500
    return jsonify(row.to_dict() if row else DEFAULT_PROFILE)


@bp.route("/profile", methods=["PUT"])
def update_profile():
    user_id = current_user_id()
    payload = json_body()
    values = {field: _text(payload.get(field)) for field in PROFILE_FIELDS}
    try:
        row = upsert(UserProfile, user_id, values)
    except Exception:
        db.session.rollback()
        logger.exception("Error updating profile for %s", user_id)
        return jsonify({"error": "Failed to update profile"}), 500
    return jsonify(row.to_dict())


# ---------- API keys ----------

@bp.route("/api-keys", methods=["GET"])
def get_api_keys():
    user_id = current_user_id()
    try:
        row = UserAPIKeys.query.filter_by(user_id=user_id).first()
    except Exception:
        logger.exception("Error fetching API keys for %s", user_id)
        return jsonify({"error": "Failed to fetch API keys"}), 500
    if row is None:
        return jsonify({"geminiKey": "", "openaiKey": ""})
    return jsonify(row.masked())


@bp.route("/api-keys", methods=["PUT"])
def update_api_keys():
    user_id = current_user_id()
    payload = json_body()
    values = {
        "gemini_key": _text(payload.get("geminiKey")) or None,
        "openai_key": _text(payload.get("openaiKey")) or None,
    }
    try:
        upsert(UserAPIKeys, user_id, values)
    except Exception:
        db.session.rollback()
        logger.exception("Error updating API keys for %s", user_id)
        return jsonify({"error": "Failed to update API keys"}), 500
    return jsonify({"message": "API keys updated successfully"})


def _gemini_key_works(key: str) -> bool:
    return bool(message_text(get_llm(api_key=key).invoke("Test message")).strip())

def _openai_key_works(key: str) -> bool:
    resp = requests.get(
        OPENAI_MODELS_URL,
        headers={"Authorization": f"Bearer {key}", "Content-Type": "application/json"},
        timeout=20,
    )
    return resp.ok

KEY_CHECKS = {
    "gemini": ("Gemini", _gemini_key_works),
    "openai": ("OpenAI", _openai_key_works),
}


@bp.route("/test-api-key", methods=["POST"])
def test_api_key():
    payload = json_body()
    provider = (_text(payload.get("provider")) or "").lower()
    key = (_text(payload.get("key")) or "").strip()

    if not key:
        return jsonify({"valid": False, "error": "API key is required"}), 400
    if provider not in KEY_CHECKS:
        return jsonify({"valid": False, "error": "Unsupported provider"}), 400

    label, check = KEY_CHECKS[provider]
    try:
        valid = check(key)
    except Exception as e:
        # any provider failure means the key is not usable
        logger.info("%s key test failed: %s", label, e)
        valid = False

    if not valid:
        return jsonify({"valid": False, "message": f"Invalid {label} API key"}), 400
    return jsonify({"valid": True, "message": f"{label} API key is valid"})


# ---------- Notifications ----------

@bp.route("/notifications", methods=["GET"])
def get_notifications():
    user_id = current_user_id()
    try:
        row = NotificationSettings.query.filter_by(user_id=user_id).first()
    except Exception:
        logger.exception("Error fetching notification settings for %s", user_id)
        return jsonify({"error": "Failed to fetch notification settings"}), 500
    return jsonify(row.to_dict() if row else DEFAULT_NOTIFICATIONS)


@bp.route("/notifications", methods=["PUT"])
def update_notifications():
    user_id = current_user_id()
    payload = json_body()
    values = {}
    for key, column in NOTIFICATION_FIELDS.items():
        value = payload.get(key)
        values[column] = bool(DEFAULT_NOTIFICATIONS[key] if value is None else value)
    try:
        row = upsert(NotificationSettings, user_id, values)
    except Exception:
        db.session.rollback()
        logger.exception("Error updating notification settings for %s", user_id)
        return jsonify({"error": "Failed to update notification settings"}), 500
    return jsonify(row.to_dict())

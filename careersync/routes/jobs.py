import logging
from datetime import date, datetime

from flask import Blueprint, jsonify, request

from careersync.analytics import compute_analytics, compute_stats, range_start, DEFAULT_RANGE
from careersync.auth import current_user_id
from careersync.db import db
from careersync.errors import APIError, BadRequest, NotFound, json_body
from careersync.models import JobApplication

logger = logging.getLogger(__name__)

bp = Blueprint("jobs", __name__, url_prefix="/api/jobs")

# request key -> column; snake_case keys are accepted as well
FIELDS = {
    "jobTitle": "job_title",
    "companyName": "company_name",
    "location": "location",
    "salary": "salary",
    "jobType": "job_type",
    "status": "status",
    "appliedDate": "applied_date",
    "notes": "notes",
    "jobUrl": "job_url",
    "contactPerson": "contact_person",
    "contactEmail": "contact_email",
    "interviewDate": "interview_date",
    "followUpDate": "follow_up_date",
}
DATE_COLUMNS = {"applied_date", "interview_date", "follow_up_date"}


def _parse_date(value, column):
    if value in (None, ""):
        return None
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        raise BadRequest(f"Invalid date for {column}: {text}")


def _application_data(payload: dict) -> dict:
    """
    Maps a request body onto column values. Missing optional fields become
    None; title and company are required.
    """
    data = {}
    for key, column in FIELDS.items():
        value = payload.get(key, payload.get(column))
        if column in DATE_COLUMNS:
            value = _parse_date(value, column)
        elif value is not None:
            value = str(value).strip() or None
        data[column] = value

    if not data["job_title"] or not data["company_name"]:
        raise BadRequest("Job title and company name are required")

    data["job_type"] = data["job_type"] or "full-time"
    data["status"] = (data["status"] or "applied").lower()
    return data


def _get_owned(app_id: int, user_id: str) -> JobApplication:
    row = JobApplication.query.filter_by(id=app_id, user_id=user_id).first()
    if row is None:
        raise NotFound("Application not found")
    return row


@bp.route("", methods=["GET"])
def list_applications():
    user_id = current_user_id()
    try:
        rows = (
            JobApplication.query.filter_by(user_id=user_id)
            .order_by(JobApplication.created_at.desc(), JobApplication.id.desc())
            .all()
        )
        return jsonify({"applications": [r.to_dict() for r in rows]})
    except Exception:
        logger.exception("Error fetching applications for %s", user_id)
        return jsonify({"error": "Failed to fetch applications"}), 500


@bp.route("", methods=["POST"])
def create_application():
    user_id = current_user_id()
    data = _application_data(json_body())
    data["applied_date"] = data["applied_date"] or date.today()

    try:
        row = JobApplication(user_id=user_id, **data)
        db.session.add(row)
        db.session.commit()
    except Exception:
        db.session.rollback()
        logger.exception("Error creating application for %s", user_id)
        return jsonify({"error": "Failed to create application"}), 500

    return jsonify({"application": row.to_dict()}), 201


@bp.route("/<int:app_id>", methods=["PUT"])
def update_application(app_id: int):
    user_id = current_user_id()
    data = _application_data(json_body())

    try:
        row = _get_owned(app_id, user_id)
        for column, value in data.items():
            if column == "applied_date" and value is None:
                # a full-record PUT without a date keeps the original one
                continue
            setattr(row, column, value)
        row.updated_at = datetime.utcnow()
        db.session.commit()
    except APIError:
        raise
    except Exception:
        db.session.rollback()
        logger.exception("Error updating application %s", app_id)
        return jsonify({"error": "Failed to update application"}), 500

    return jsonify({"application": row.to_dict()})


@bp.route("/<int:app_id>", methods=["DELETE"])
def delete_application(app_id: int):
    user_id = current_user_id()
    try:
        row = _get_owned(app_id, user_id)
        db.session.delete(row)
        db.session.commit()
    except APIError:
        raise
    except Exception:
        db.session.rollback()
        logger.exception("Error deleting application %s", app_id)
        return jsonify({"error": "Failed to delete application"}), 500

    return jsonify({"message": "Application deleted successfully"})


@bp.route("/analytics", methods=["GET"])
def analytics():
    user_id = current_user_id()
    start = range_start(request.args.get("range", DEFAULT_RANGE))
    try:
        rows = (
            JobApplication.query.filter_by(user_id=user_id)
            .filter(JobApplication.applied_date >= start)
            .order_by(JobApplication.applied_date.asc())
            .all()
        )
        return jsonify(compute_analytics(rows))
    except Exception:
        logger.exception("Error computing analytics for %s", user_id)
        return jsonify({"error": "Failed to fetch analytics data"}), 500


@bp.route("/stats", methods=["GET"])
def stats():
    user_id = current_user_id()
    try:
        rows = JobApplication.query.filter_by(user_id=user_id).all()
        return jsonify(compute_stats(rows))
    except Exception:
        logger.exception("Error fetching stats for %s", user_id)
        return jsonify({"error": "Failed to fetch statistics"}), 500

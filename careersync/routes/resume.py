import logging

from flask import Blueprint, current_app, g, jsonify, make_response, render_template
from werkzeug.utils import secure_filename

from careersync.auth import token_required
from careersync.db import db, upsert
from careersync.errors import APIError, BadRequest, json_body
from careersync.extractors import ExtractionError
from careersync.graph import tailor_resume_node
from careersync.models import Resume
from careersync.routes.ats import read_upload

logger = logging.getLogger(__name__)

bp = Blueprint("resume", __name__, url_prefix="/api/resume")


def _resume_data(payload: dict) -> dict:
    resume_data = payload.get("resumeData")
    if not isinstance(resume_data, dict) or not resume_data:
        raise BadRequest("Resume data is required")
    if not isinstance(resume_data.get("personalInfo") or {}, dict):
        raise BadRequest("personalInfo must be an object")
    return resume_data


def _ats_score(value):
    """Whole-number score from a JSON number or numeric string, or None."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise BadRequest("atsScore must be a number")
    try:
        return int(round(float(value)))
    except (TypeError, ValueError, OverflowError):
        raise BadRequest("atsScore must be a number")


def _resume_name(resume_data: dict) -> str:
    name = (resume_data.get("personalInfo") or {}).get("name")
    return name.strip() if isinstance(name, str) else ""


@bp.route("/parse", methods=["POST"])
@token_required
def parse():
    upload = read_upload()
    try:
        result = current_app.extensions["careersync_graphs"]["parse"].invoke({"upload": upload})
    except ExtractionError as e:
        raise BadRequest(str(e))
    except APIError:
        raise
    except Exception as e:
        logger.exception("Error parsing resume")
        return jsonify({"error": "Failed to parse resume", "details": str(e)}), 500

    if result.get("resume_data") is None:
        raise BadRequest("Could not extract text from resume")

    return jsonify({
        "success": True,
        "resumeData": result["resume_data"],
        "message": "Resume parsed successfully",
    })


@bp.route("/tailor", methods=["POST"])
@token_required
def tailor():
    payload = json_body()
    resume_data = payload.get("resumeData")
    jd_text = (payload.get("jobDescription") or "").strip()
    if not resume_data or not jd_text:
        raise BadRequest("Resume data and job description are required")

    try:
        state = tailor_resume_node({"resume_data": resume_data, "job_description": jd_text})
    except Exception as e:
        logger.exception("Error tailoring resume")
        return jsonify({"error": "Failed to tailor resume", "details": str(e)}), 500

    return jsonify({
        "success": True,
        "resumeData": state["tailored_resume"],
        "message": "Resume tailored successfully",
    })


@bp.route("/save", methods=["POST"])
@token_required
def save():
    payload = json_body()
    resume_data = _resume_data(payload)
    ats_score = _ats_score(payload.get("atsScore"))
    user_id = str(g.user["id"])

    values = {"content": resume_data}
    if ats_score is not None:
        values["ats_score"] = ats_score

    try:
        # the title is fixed when the row is first created
        upsert(Resume, user_id, values, insert_only={"title": f"{_resume_name(resume_data) or 'My'} Resume"})
    except Exception as e:
        db.session.rollback()
        logger.exception("Error saving resume for %s", user_id)
        return jsonify({"error": "Failed to save resume", "details": str(e)}), 500

    return jsonify({"success": True, "message": "Resume saved successfully"})


@bp.route("/get", methods=["GET"])
@token_required
def get_resume():
    user_id = str(g.user["id"])
    try:
        row = Resume.query.filter_by(user_id=user_id).first()
    except Exception as e:
        logger.exception("Error fetching resume for %s", user_id)
        return jsonify({"error": "Failed to fetch resume", "details": str(e)}), 500

    return jsonify({"success": True, "resume": row.to_dict() if row else None})


@bp.route("/download", methods=["POST"])
@token_required
def download():
    payload = json_body()
    resume_data = _resume_data(payload)
    info = resume_data.get("personalInfo") or {}

    try:
        html = render_template(
            "resume.html",
            info=info,
            summary=resume_data.get("summary"),
            experience=resume_data.get("experience") or [],
            education=resume_data.get("education") or [],
            skills=resume_data.get("skills") or [],
            projects=resume_data.get("projects") or [],
        )
    except Exception as e:
        logger.exception("Error generating resume download")
        return jsonify({"error": "Failed to generate resume download", "details": str(e)}), 500

    filename = secure_filename(_resume_name(resume_data)) or "resume"
    resp = make_response(html)
    resp.headers["Content-Type"] = "text/html; charset=utf-8"
    resp.headers["Content-Disposition"] = f'attachment; filename="{filename}.html"'
    return resp

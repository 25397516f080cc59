import logging

from flask import Blueprint, current_app, jsonify

from careersync.content import COVER_LETTER_TEMPLATES, COVER_LETTER_TIPS
from careersync.errors import BadRequest, json_body

logger = logging.getLogger(__name__)

bp = Blueprint("cover_letter", __name__, url_prefix="/api/cover-letter")


@bp.route("/generate", methods=["POST"])
def generate():
    form = json_body()
    personal = form.get("personalInfo")
    if not isinstance(personal, dict):
        personal = {}
    if not form.get("jobTitle") or not form.get("companyName") or not personal.get("name"):
        raise BadRequest(
            "Missing required fields",
            payload={"message": "Job title, company name, and personal name are required"},
        )

    try:
        result = current_app.extensions["careersync_graphs"]["cover_letter"].invoke({
            "form": form,
            "job_description": form.get("jobDescription") or "",
            "job_url": form.get("jobUrl") or "",
        })
    except Exception as e:
        logger.exception("Cover letter generation error")
        return jsonify({"error": "Failed to generate cover letter", "message": str(e)}), 500

    return jsonify({
        "success": True,
        "coverLetter": result["cover_letter"],
        "message": "Cover letter generated successfully",
    })


@bp.route("/templates", methods=["GET"])
def templates():
    return jsonify({"success": True, "templates": COVER_LETTER_TEMPLATES})


@bp.route("/tips", methods=["GET"])
def tips():
    return jsonify({"success": True, "tips": COVER_LETTER_TIPS})

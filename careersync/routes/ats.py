import logging

from flask import Blueprint, current_app, jsonify, request

from careersync.content import ATS_TIPS
from careersync.errors import APIError, BadRequest
from careersync.extractors import ExtractionError

logger = logging.getLogger(__name__)

bp = Blueprint("ats", __name__, url_prefix="/api/ats")


def read_upload(field: str = "resume") -> dict:
    file = request.files.get(field)
    if not file or not (file.filename or "").strip():
        raise BadRequest("No resume file uploaded")
    return {
        "data": file.read(),
        "mimetype": file.mimetype or "",
        "filename": file.filename,
    }


@bp.route("/analyze", methods=["POST"])
def analyze():
    upload = read_upload()
    jd_text = request.form.get("jobDescription", "").strip()
    job_url = request.form.get("jobUrl", "").strip()
    if not jd_text and not job_url:
        raise BadRequest("Job description is required")

    try:
        result = current_app.extensions["careersync_graphs"]["ats"].invoke({
            "upload": upload,
            "job_description": jd_text,
            "job_url": job_url,
        })
    except ExtractionError as e:
        raise BadRequest(str(e))
    except APIError:
        raise
    except Exception as e:
        logger.exception("ATS analysis error")
        return jsonify({"error": "Failed to analyze resume", "message": str(e)}), 500

    if result.get("analysis") is None:
        raise BadRequest("Could not extract text from resume")

    return jsonify({
        "success": True,
        "analysis": result["analysis"],
        "message": "ATS analysis completed successfully",
    })


@bp.route("/tips", methods=["GET"])
def tips():
    return jsonify({"success": True, "tips": ATS_TIPS})

from flask import jsonify, request
from werkzeug.exceptions import HTTPException


class APIError(Exception):
    status_code = 400

    def __init__(self, message: str, status_code: int = None, payload: dict = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.payload = payload or {}

    def to_dict(self) -> dict:
        body = dict(self.payload)
        body["error"] = self.message
        return body


class BadRequest(APIError):
    status_code = 400


class Unauthorized(APIError):
    status_code = 401


class NotFound(APIError):
    status_code = 404


def register_error_handlers(app):
    @app.errorhandler(APIError)
    def handle_api_error(err: APIError):
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        # 404 unknown route, 405, 413 upload too large ...
        if err.code is None or err.code < 400:
            # routing redirects (trailing slash) pass through untouched
            return err
        return jsonify({"error": err.description}), err.code


def json_body() -> dict:
    """
    The request's JSON object, or {} when no body was sent. Any other JSON
    value (list, string, number) is a 400.
    """
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise BadRequest("Request body must be a JSON object")
    return payload

import logging
from datetime import datetime, timedelta, timezone
from functools import wraps

import jwt
import requests
from flask import current_app, g, request

from careersync.errors import APIError, Unauthorized

logger = logging.getLogger(__name__)

DEMO_USER_ID = "demo-user"

GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_USERINFO_URL = "https://www.googleapis.com/oauth2/v2/userinfo"


class OAuthError(APIError):
    status_code = 400


def create_token(user: dict) -> str:
    cfg = current_app.config
    payload = {
        "id": user.get("id"),
        "email": user.get("email"),
        "name": user.get("name"),
        "picture": user.get("picture"),
        "exp": datetime.now(timezone.utc) + timedelta(days=cfg["JWT_EXPIRES_DAYS"]),
    }
    return jwt.encode(payload, cfg["JWT_SECRET"], algorithm=cfg["JWT_ALGORITHM"])


def decode_token(token: str) -> dict:
    cfg = current_app.config
    try:
        claims = jwt.decode(token, cfg["JWT_SECRET"], algorithms=[cfg["JWT_ALGORITHM"]])
    except jwt.ExpiredSignatureError:
        raise Unauthorized("Token expired")
    except jwt.InvalidTokenError:
        raise Unauthorized("Invalid token")
    # signed but without a subject
    if claims.get("id") in (None, ""):
        raise Unauthorized("Invalid token")
    return claims


def _bearer_token():
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def current_user_id() -> str:
    """
    Subject of the bearer token when one is sent, otherwise the shared
    demo account. A malformed or expired token is still a 401.
    """
    if getattr(g, "user", None):
        return str(g.user["id"])
    token = _bearer_token()
    if token is None:
        return DEMO_USER_ID
    g.user = decode_token(token)
    return str(g.user["id"])


def token_required(view):
    @wraps(view)
    def wrapped(*args, **kwargs):
        token = _bearer_token()
        if token is None:
            raise Unauthorized("Access token required")
        g.user = decode_token(token)
        return view(*args, **kwargs)
    return wrapped


def exchange_google_code(code: str) -> dict:
    """Trades an authorization code for Google access/ID tokens."""
    cfg = current_app.config
    resp = requests.post(
        GOOGLE_TOKEN_URL,
        data={
            "code": code,
            "client_id": cfg["GOOGLE_CLIENT_ID"],
            "client_secret": cfg["GOOGLE_CLIENT_SECRET"],
            "redirect_uri": f"{cfg['FRONTEND_URL']}/auth/callback",
            "grant_type": "authorization_code",
        },
        timeout=20,
    )
    if not resp.ok:
        logger.error("Google token error: %s", resp.text)
        raise OAuthError("Failed to exchange code for token")
    return resp.json()


def fetch_google_userinfo(access_token: str) -> dict:
    resp = requests.get(
        GOOGLE_USERINFO_URL,
        headers={"Authorization": f"Bearer {access_token}"},
        timeout=20,
    )
    if not resp.ok:
        logger.error("Google user info error: %s", resp.text)
        raise OAuthError("Failed to get user info")
    return resp.json()

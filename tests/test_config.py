from careersync.config import PLACEHOLDER_DB_URL, PLACEHOLDER_JWT_SECRET, warn_missing


def test_warn_missing_reports_placeholders():
    missing = warn_missing({
        "SQLALCHEMY_DATABASE_URI": PLACEHOLDER_DB_URL,
        "GEMINI_API_KEY": "real-key",
        "GOOGLE_CLIENT_ID": "",
        "GOOGLE_CLIENT_SECRET": "",
        "JWT_SECRET": PLACEHOLDER_JWT_SECRET,
    })
    assert missing == ["DATABASE_URL", "GOOGLE_CLIENT_ID/GOOGLE_CLIENT_SECRET", "JWT_SECRET"]


def test_warn_missing_quiet_when_configured():
    assert warn_missing({
        "SQLALCHEMY_DATABASE_URI": "postgresql://db.example/careersync",
        "GEMINI_API_KEY": "real-key",
        "GOOGLE_CLIENT_ID": "id",
        "GOOGLE_CLIENT_SECRET": "secret",
        "JWT_SECRET": "s3cret",
    }) == []


def test_app_starts_with_test_overrides(app):
    assert app.config["TESTING"] is True
    assert app.config["MAX_CONTENT_LENGTH"] == 10 * 1024 * 1024
    assert {"ats", "parse", "cover_letter"} <= set(app.extensions["careersync_graphs"])

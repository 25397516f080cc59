from careersync.db import db, upsert
from careersync.models import NotificationSettings, Resume


def test_upsert_inserts_then_updates(app):
    with app.app_context():
        row = upsert(Resume, "u1", {"content": {"summary": "first"}}, insert_only={"title": "Jane Resume"})
        assert row.title == "Jane Resume"

        row = upsert(Resume, "u1", {"content": {"summary": "second"}, "ats_score": 70},
                     insert_only={"title": "Other Resume"})
        assert row.title == "Jane Resume"
        assert row.content == {"summary": "second"}
        assert row.ats_score == 70
        assert Resume.query.count() == 1


def test_upsert_refreshes_rows_already_in_session(app):
    with app.app_context():
        loaded = upsert(NotificationSettings, "u1", {"job_alerts": True})
        upsert(NotificationSettings, "u1", {"job_alerts": False})
        assert loaded.job_alerts is False


def test_upsert_without_on_conflict_support(app, monkeypatch):
    monkeypatch.setattr("careersync.db._UPSERT_INSERTS", {})
    with app.app_context():
        db.session.add(Resume(user_id="u1", title="Old Resume", content={}))
        db.session.commit()

        row = upsert(Resume, "u1", {"content": {"summary": "new"}}, insert_only={"title": "New Resume"})
        assert row.title == "Old Resume"
        assert row.content == {"summary": "new"}

        row = upsert(Resume, "u2", {"content": {}}, insert_only={"title": "Second Resume"})
        assert row.title == "Second Resume"
        assert Resume.query.count() == 2

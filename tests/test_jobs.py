from datetime import date, timedelta

import jwt

from careersync.db import db
from careersync.models import JobApplication


def _payload(**overrides):
    body = {
        "jobTitle": "Backend Engineer",
        "companyName": "Acme",
        "location": "Remote",
        "salary": "120k",
        "status": "applied",
        "appliedDate": (date.today() - timedelta(days=3)).isoformat(),
        "jobUrl": "https://acme.example/jobs/1",
    }
    body.update(overrides)
    return body


def test_create_then_list_includes_record(client):
    resp = client.post("/api/jobs", json=_payload())
    assert resp.status_code == 201
    created = resp.get_json()["application"]
    assert created["jobTitle"] == "Backend Engineer"
    assert created["companyName"] == "Acme"

    listed = client.get("/api/jobs").get_json()["applications"]
    assert len(listed) == 1
    row = listed[0]
    assert row["id"] == created["id"]
    for key in ("jobTitle", "companyName", "location", "salary", "status", "appliedDate", "jobUrl"):
        assert row[key] == _payload()[key]


def test_create_defaults_optional_fields(client):
    resp = client.post("/api/jobs", json={"jobTitle": "Analyst", "companyName": "Initech"})
    assert resp.status_code == 201
    app = resp.get_json()["application"]
    assert app["status"] == "applied"
    assert app["jobType"] == "full-time"
    assert app["appliedDate"] == date.today().isoformat()
    assert app["notes"] is None
    assert app["contactEmail"] is None
    assert app["interviewDate"] is None


def test_create_accepts_snake_case_keys(client):
    resp = client.post("/api/jobs", json={"job_title": "SRE", "company_name": "Globex"})
    assert resp.status_code == 201
    assert resp.get_json()["application"]["companyName"] == "Globex"


def test_create_requires_title_and_company(client):
    resp = client.post("/api/jobs", json={"jobTitle": "Engineer"})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Job title and company name are required"

    resp = client.post("/api/jobs", json={"companyName": "Acme"})
    assert resp.status_code == 400


def test_create_rejects_bad_date(client):
    resp = client.post("/api/jobs", json=_payload(appliedDate="next tuesday"))
    assert resp.status_code == 400
    assert "applied_date" in resp.get_json()["error"]


def test_update_application(client):
    app_id = client.post("/api/jobs", json=_payload()).get_json()["application"]["id"]

    resp = client.put(f"/api/jobs/{app_id}", json=_payload(status="interview", notes="Phone screen booked"))
    assert resp.status_code == 200
    updated = resp.get_json()["application"]
    assert updated["status"] == "interview"
    assert updated["notes"] == "Phone screen booked"


def test_update_missing_application_is_404(client):
    resp = client.put("/api/jobs/9999", json=_payload())
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "Application not found"


def test_update_validates_required_fields(client):
    app_id = client.post("/api/jobs", json=_payload()).get_json()["application"]["id"]
    resp = client.put(f"/api/jobs/{app_id}", json={"jobTitle": ""})
    assert resp.status_code == 400


def test_delete_application(client):
    app_id = client.post("/api/jobs", json=_payload()).get_json()["application"]["id"]

    resp = client.delete(f"/api/jobs/{app_id}")
    assert resp.status_code == 200
    assert resp.get_json()["message"] == "Application deleted successfully"
    assert client.get("/api/jobs").get_json()["applications"] == []


def test_delete_missing_application_is_graceful(client):
    resp = client.delete("/api/jobs/424242")
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "Application not found"


def test_applications_are_scoped_per_user(client, make_token):
    other = {"Authorization": f"Bearer {make_token(user_id='someone-else')}"}
    app_id = client.post("/api/jobs", json=_payload(), headers=other).get_json()["application"]["id"]

    assert client.get("/api/jobs").get_json()["applications"] == []
    assert client.delete(f"/api/jobs/{app_id}").status_code == 404
    assert len(client.get("/api/jobs", headers=other).get_json()["applications"]) == 1


def test_invalid_token_is_rejected(client):
    resp = client.get("/api/jobs", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401


def test_analytics_with_unknown_status(app, client):
    recent = date.today() - timedelta(days=5)
    for status in ("applied", "interview", "offer", "rejected"):
        client.post("/api/jobs", json=_payload(status=status, appliedDate=recent.isoformat()))

    with app.app_context():
        db.session.add(JobApplication(
            user_id="demo-user", job_title="Mystery", company_name="Nowhere",
            status="ghosted", applied_date=recent,
        ))
        db.session.commit()

    resp = client.get("/api/jobs/analytics")
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["totalApplications"] == 5
    assert data["responseRate"] == 60
    assert data["interviewRate"] == 40
    assert data["offerRate"] == 20
    distribution = {d["name"]: d["value"] for d in data["statusDistribution"]}
    assert sum(distribution.values()) == 4
    assert distribution["Withdrawn"] == 0
    assert data["applicationTrends"][-1]["applications"] == 5


def test_analytics_range_filters_old_rows(client):
    client.post("/api/jobs", json=_payload(appliedDate=(date.today() - timedelta(days=400)).isoformat()))
    client.post("/api/jobs", json=_payload(appliedDate=(date.today() - timedelta(days=2)).isoformat()))

    assert client.get("/api/jobs/analytics?range=3months").get_json()["totalApplications"] == 1
    assert client.get("/api/jobs/analytics?range=all").get_json()["totalApplications"] == 2


def test_analytics_empty(client):
    data = client.get("/api/jobs/analytics").get_json()
    assert data["totalApplications"] == 0
    assert data["responseRate"] == 0
    assert data["monthlyApplications"] == []
    assert data["applicationTrends"] == []


def test_stats(client):
    client.post("/api/jobs", json=_payload(status="applied", appliedDate="2024-01-10"))
    client.post("/api/jobs", json=_payload(status="offer", appliedDate="2024-01-20"))
    client.post("/api/jobs", json=_payload(status="withdrawn", appliedDate="2024-03-02"))

    data = client.get("/api/jobs/stats").get_json()
    assert data["stats"] == {
        "total": 3, "applied": 1, "interview": 0, "offer": 1, "rejected": 0, "withdrawn": 1,
    }
    assert data["trends"] == [{"month": "2024-01", "count": 2}, {"month": "2024-03", "count": 1}]


def test_create_rejects_non_object_body(client):
    resp = client.post("/api/jobs", json=[_payload()])
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Request body must be a JSON object"
    assert client.get("/api/jobs").get_json()["applications"] == []


def test_update_rejects_non_object_body(client):
    app_id = client.post("/api/jobs", json=_payload()).get_json()["application"]["id"]
    resp = client.put(f"/api/jobs/{app_id}", json="Backend Engineer")
    assert resp.status_code == 400


def test_token_without_subject_is_rejected(client):
    token = jwt.encode({"email": "jane@example.com"}, "test-secret-key-for-hs256-signing-0001", algorithm="HS256")
    resp = client.get("/api/jobs", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401
    assert resp.get_json()["error"] == "Invalid token"


def test_token_with_null_subject_is_rejected(client):
    token = jwt.encode({"id": None}, "test-secret-key-for-hs256-signing-0001", algorithm="HS256")
    resp = client.post("/api/jobs", json=_payload(), headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401
    assert client.get("/api/jobs").get_json()["applications"] == []

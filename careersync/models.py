from datetime import datetime, date
from .db import db

JOB_STATUSES = ("applied", "interview", "offer", "rejected", "withdrawn")


def _iso(value):
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


class TimestampMixin:
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


class JobApplication(TimestampMixin, db.Model):
    __tablename__ = "job_applications"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(255), nullable=False, index=True)

    # job info
    job_title = db.Column(db.String(255), nullable=False)
    company_name = db.Column(db.String(255), nullable=False)
    location = db.Column(db.String(255), nullable=True)
    salary = db.Column(db.String(100), nullable=True)
    job_type = db.Column(db.String(50), nullable=False, default="full-time")
    job_url = db.Column(db.Text, nullable=True)

    # tracking
    status = db.Column(db.String(50), nullable=False, default="applied")
    applied_date = db.Column(db.Date, nullable=True)
    interview_date = db.Column(db.Date, nullable=True)
    follow_up_date = db.Column(db.Date, nullable=True)
    notes = db.Column(db.Text, nullable=True)

    contact_person = db.Column(db.String(255), nullable=True)
    contact_email = db.Column(db.String(255), nullable=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "jobTitle": self.job_title,
            "companyName": self.company_name,
            "location": self.location,
            "salary": self.salary,
            "jobType": self.job_type,
            "status": self.status,
            "appliedDate": _iso(self.applied_date),
            "notes": self.notes,
            "jobUrl": self.job_url,
            "contactPerson": self.contact_person,
            "contactEmail": self.contact_email,
            "interviewDate": _iso(self.interview_date),
            "followUpDate": _iso(self.follow_up_date),
            "createdAt": _iso(self.created_at),
            "updatedAt": _iso(self.updated_at),
        }


class Resume(TimestampMixin, db.Model):
    __tablename__ = "resumes"

    id = db.Column(db.Integer, primary_key=True)
    # one resume per user, saves upsert on this column
    user_id = db.Column(db.String(255), nullable=False, unique=True)
    title = db.Column(db.String(255), nullable=False, default="My Resume")
    content = db.Column(db.JSON, nullable=False, default=dict)
    ats_score = db.Column(db.Integer, nullable=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "userId": self.user_id,
            "title": self.title,
            "content": self.content,
            "atsScore": self.ats_score,
            "createdAt": _iso(self.created_at),
            "updatedAt": _iso(self.updated_at),
        }


class UserProfile(TimestampMixin, db.Model):
    __tablename__ = "user_profiles"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(255), nullable=False, unique=True)
    name = db.Column(db.String(255), nullable=True)
    email = db.Column(db.String(255), nullable=True)
    phone = db.Column(db.String(100), nullable=True)
    location = db.Column(db.String(255), nullable=True)
    bio = db.Column(db.Text, nullable=True)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "location": self.location,
            "bio": self.bio,
        }


class UserAPIKeys(TimestampMixin, db.Model):
    __tablename__ = "user_api_keys"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(255), nullable=False, unique=True)
    gemini_key = db.Column(db.Text, nullable=True)
    openai_key = db.Column(db.Text, nullable=True)

    def masked(self) -> dict:
        return {
            "geminiKey": mask_key(self.gemini_key),
            "openaiKey": mask_key(self.openai_key),
        }


class NotificationSettings(TimestampMixin, db.Model):
    __tablename__ = "user_notification_settings"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(255), nullable=False, unique=True)
    email_notifications = db.Column(db.Boolean, nullable=False, default=True)
    push_notifications = db.Column(db.Boolean, nullable=False, default=False)
    job_alerts = db.Column(db.Boolean, nullable=False, default=True)
    weekly_reports = db.Column(db.Boolean, nullable=False, default=True)

    def to_dict(self) -> dict:
        return {
            "emailNotifications": self.email_notifications,
            "pushNotifications": self.push_notifications,
            "jobAlerts": self.job_alerts,
            "weeklyReports": self.weekly_reports,
        }


def mask_key(key) -> str:
    return f"{key[:8]}..." if key else ""

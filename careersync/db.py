from datetime import datetime

from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError

db = SQLAlchemy()
migrate = Migrate()

# dialects with INSERT ... ON CONFLICT DO UPDATE
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}

def init_db(app):
    # By now, app.config["SQLALCHEMY_DATABASE_URI"] must already be set by create_app()
    db.init_app(app)
    migrate.init_app(app, db)

    # Creates missing tables only; schema changes go through Flask-Migrate
    with app.app_context():
        from careersync import models  # noqa: F401  (registers tables)
        db.create_all()


def upsert(model, user_id: str, values: dict, insert_only: dict = None):
    """
    Writes `values` into the row keyed by the unique user_id column, creating
    it when missing, in a single statement. `insert_only` columns are set only
    when the row is new. Commits and returns the fresh row.

    Concurrent writers for the same user never hit the unique constraint;
    the last write wins.
    """
    values = dict(values, updated_at=datetime.utcnow())
    insert = _UPSERT_INSERTS.get(db.engine.dialect.name)

    if insert is None:
        _upsert_with_retry(model, user_id, values, insert_only or {})
    else:
        stmt = insert(model.__table__).values(user_id=user_id, **(insert_only or {}), **values)
        stmt = stmt.on_conflict_do_update(index_elements=["user_id"], set_=values)
        db.session.execute(stmt)
        db.session.commit()

    return model.query.filter_by(user_id=user_id).populate_existing().one()


def _upsert_with_retry(model, user_id: str, values: dict, insert_only: dict):
    # other dialects: try the insert, fall back to an update if another
    # request created the row first
    row = model.query.filter_by(user_id=user_id).first()
    if row is None:
        try:
            db.session.add(model(user_id=user_id, **insert_only, **values))
            db.session.commit()
            return
        except IntegrityError:
            db.session.rollback()
            row = model.query.filter_by(user_id=user_id).one()
    for column, value in values.items():
        setattr(row, column, value)
    db.session.commit()

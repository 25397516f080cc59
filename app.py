import logging

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS

load_dotenv()

from careersync.config import Config, warn_missing
from careersync.db import init_db
from careersync.errors import register_error_handlers
from careersync.graph import build_ats_graph, build_cover_letter_graph, build_parse_graph
from careersync.logger import setup_logging
from careersync.routes import ats, auth, cover_letter, jobs, resume, user

logger = logging.getLogger(__name__)


def create_app(overrides=None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    setup_logging(app.config["LOG_LEVEL"])
    warn_missing(app.config)

    # DB URI must be final before init_db(app)
    init_db(app)

    CORS(app, resources={r"/api/*": {"origins": app.config["FRONTEND_URL"]}}, supports_credentials=True)
    register_error_handlers(app)

    app.extensions["careersync_graphs"] = {
        "ats": build_ats_graph(),
        "parse": build_parse_graph(),
        "cover_letter": build_cover_letter_graph(),
    }

    for module in (jobs, resume, ats, cover_letter, auth, user):
        app.register_blueprint(module.bp)

    @app.route("/api/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    logger.info("CareerSync API ready (database: %s)", app.config["SQLALCHEMY_DATABASE_URI"].split("://")[0])
    return app


app = create_app()


if __name__ == "__main__":
    app.run(debug=True)

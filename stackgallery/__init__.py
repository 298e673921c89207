import logging
import os

from flask import Flask, jsonify, request, send_from_directory, current_app
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException
from .extensions import db, login_manager

migrate = Migrate()


def create_app(config_object='config.Config'):
    """Build the API application.

    Every resource lives in its own blueprint under ``/api/<resource>``;
    locally stored uploads are served back under ``PUBLIC_MEDIA_PREFIX``.
    """
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO))

    db.init_app(app)
    migrate.init_app(app, db, directory='alembic')
    login_manager.init_app(app)

    @login_manager.user_loader
    def load_user(user_id):
        from .models.user import User
        return db.session.get(User, int(user_id))

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({"error": "Login required"}), 401

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        # HTML pages are not served here; every error is JSON
        if e.code and e.code >= 500:
            current_app.logger.error('%s %s -> %s', request.method, request.path, e)
        return jsonify({"error": e.description}), e.code

    from .blueprints.user import bp as user_bp
    from .blueprints.recruiter import bp as recruiter_bp
    from .blueprints.gallery import bp as gallery_bp
    from .blueprints.media import bp as media_bp
    from .blueprints.question import bp as question_bp
    from .blueprints.answer import bp as answer_bp
    from .blueprints.comment import bp as comment_bp
    from .blueprints.tags import bp as tags_bp

    app.register_blueprint(user_bp, url_prefix="/api/user")
    app.register_blueprint(recruiter_bp, url_prefix="/api/recruiter")
    app.register_blueprint(gallery_bp, url_prefix="/api/gallery")
    app.register_blueprint(media_bp, url_prefix="/api/media")
    app.register_blueprint(question_bp, url_prefix="/api/question")
    app.register_blueprint(answer_bp, url_prefix="/api/answer")
    app.register_blueprint(comment_bp, url_prefix="/api/comment")
    app.register_blueprint(tags_bp, url_prefix="/api/tags")

    prefix = app.config.get('PUBLIC_MEDIA_PREFIX', '/userData').rstrip('/')

    @app.get(f'{prefix}/<path:filename>')
    def user_data(filename):
        return send_from_directory(os.path.abspath(app.config['LOCAL_STORAGE_DIR']), filename)

    @app.get('/')
    def index():
        return jsonify({"message": "stackgallery API ready"})

    return app

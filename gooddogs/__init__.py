import logging
from urllib.parse import urlparse

from flask import Flask, jsonify, request
from flask_talisman import Talisman
from werkzeug.exceptions import HTTPException

from .config import Config, POPUP_MODES
from .extensions import csrf, vote_log
from .views.main import main_bp
from .views.api import api_bp


def create_app(config_class=Config, **overrides):
    # static_url_path='' отдаёт /script.js, /style.css и /images/* прямо из static/
    app = Flask(__name__, static_folder='static', static_url_path='')
    app.config.from_object(config_class)
    app.config.update(overrides)

    _check_config(app)
    app.logger.setLevel(app.config['LOG_LEVEL'])

    csrf.init_app(app)
    vote_log.init_app(app)

    csp = {
        'default-src': "'self'",
        'script-src': "'self'",
        'style-src': "'self'",
        'img-src': ["'self'", 'data:', *_image_origins(app.config['DOG_IMAGES'])],
        'connect-src': "'self'",
        'object-src': "'none'",
        'base-uri': "'self'",
        'form-action': "'self'",
    }
    Talisman(
        app,
        content_security_policy=csp,
        force_https=app.config['FORCE_HTTPS'],
        session_cookie_secure=app.config['FORCE_HTTPS'],
    )

    app.register_blueprint(main_bp)
    app.register_blueprint(api_bp)

    from .cli_commands import register_commands
    register_commands(app)

    _register_error_handlers(app)
    return app


def _check_config(app):
    images = tuple(app.config['DOG_IMAGES'])
    if not images:
        raise ValueError('DOG_IMAGES must contain at least one image')
    app.config['DOG_IMAGES'] = images

    if app.config['VOTE_POPUP_MODE'] not in POPUP_MODES:
        raise ValueError(
            f"VOTE_POPUP_MODE must be one of {', '.join(POPUP_MODES)}, "
            f"got {app.config['VOTE_POPUP_MODE']!r}"
        )

    level = app.config['LOG_LEVEL']
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f'Unknown LOG_LEVEL {level!r}')


def _register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        # Для API отвечаем JSON, остальное как обычно
        if request.path.startswith('/api/'):
            return jsonify({'error': error.description}), error.code
        return error


def _image_origins(images):
    """Внешние хосты картинок, которые надо разрешить в CSP img-src."""
    origins = []
    for image in images:
        parsed = urlparse(image)
        if parsed.scheme and parsed.netloc:
            origin = f'{parsed.scheme}://{parsed.netloc}'
            if origin not in origins:
                origins.append(origin)
    return origins

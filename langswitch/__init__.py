import os

from flask import Flask

from .config import DevelopmentConfig, config_map
from .extensions import babel, limiter


def create_app(config_name: str = None):
    if config_name is None:
        config_name = os.environ.get("FLASK_ENV", "development")

    app = Flask(__name__)
    cfg = config_map.get(config_name, DevelopmentConfig)
    app.config.from_object(cfg)
    if hasattr(cfg, "init_app"):
        cfg.init_app(app)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    limiter.init_app(app)

    # ── Language / Babel ─────────────────────────────────────────────────────
    from .lang.helpers import available_locales, babel_locale, get_active_locale
    from .lang.routes import lang_bp

    babel.init_app(app, locale_selector=babel_locale)
    app.register_blueprint(lang_bp)

    @app.context_processor
    def inject_globals():
        return {
            "current_locale": get_active_locale(),
            "available_locales": available_locales(),
        }

    # ── Pages ────────────────────────────────────────────────────────────────
    from .main.routes import main_bp

    app.register_blueprint(main_bp)

    return app

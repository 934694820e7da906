"""
- OAI Metadata Map -
This flask app implements an API for mapping repository entities onto
OAI metadata profiles (see `oai_metadata_map.plugins.mapping`).
"""

from flask import Flask
from dcm_common.services import DefaultView
from dcm_common.services import extensions

from oai_metadata_map.config import AppConfig
from oai_metadata_map.views import TransformView


def app_factory(config: AppConfig):
    """
    Returns a flask-app-object.

    config -- app config derived from `AppConfig`
    """

    app = Flask(__name__)
    app.config.from_object(config)

    # register extensions
    if config.ALLOW_CORS:
        app.extensions["cors"] = extensions.cors_loader(app)

    def ready():
        """Define condition for readiness."""
        # profiles and plugin are loaded with the config
        return True

    # register blueprints
    app.register_blueprint(
        DefaultView(config, ready=ready).get_blueprint(), url_prefix="/"
    )
    app.register_blueprint(
        TransformView(config).get_blueprint(), url_prefix="/"
    )
    return app

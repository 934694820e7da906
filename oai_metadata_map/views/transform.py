"""
Transform View-class definition
"""

from flask import Blueprint, jsonify, Response
from data_plumber_http.decorators import flask_handler, flask_args, flask_json
from dcm_common import LoggingContext as Context
from dcm_common import services

from oai_metadata_map.config import AppConfig
from oai_metadata_map.models import TransformConfig
from oai_metadata_map.handlers import get_transform_handler
from oai_metadata_map.components import MetadataRecord


class TransformView:
    """View-class for entity-mapping."""

    NAME = "transform"

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def get_blueprint(self) -> Blueprint:
        """Returns a blueprint with all routes of this view."""
        bp = Blueprint(self.NAME, __name__)
        self.configure_bp(bp)
        return bp

    def configure_bp(self, bp: Blueprint, *args, **kwargs) -> None:
        """Registers routes with `bp`."""

        @bp.route("/profiles", methods=["GET"])
        @flask_handler(  # unknown query
            handler=services.no_args_handler,
            json=flask_args,
        )
        def profiles():
            """List available metadata profiles."""
            return (
                jsonify(
                    {
                        identifier: {
                            "label": profile.label,
                            "metadataFormat": profile.metadata_format.json,
                        }
                        for identifier, profile in self.config.profiles.items()
                    }
                ),
                200,
            )

        @bp.route("/transform", methods=["POST"])
        @flask_handler(  # unknown query
            handler=services.no_args_handler,
            json=flask_args,
        )
        @flask_handler(  # process transformation
            handler=get_transform_handler(
                acceptable_profiles=self.config.profiles.keys(),
            ),
            json=flask_json,
        )
        def transform(transform: TransformConfig):
            """Map entity onto metadata profile."""
            profile = self.config.profiles[
                transform.profile or self.config.DEFAULT_PROFILE
            ]
            result = self.config.mapping_plugin.get(
                None, profile=profile.identifier, entity=transform.entity
            )
            if not result.success:
                return jsonify(result.json), 500
            if transform.format == "xml":
                try:
                    xml = MetadataRecord(result.metadata).to_xml(
                        profile.wrapper
                    )
                except ValueError as exc_info:
                    result.success = False
                    result.log.log(
                        Context.ERROR,
                        body=(
                            "Failed to serialize record with profile "
                            + f"'{profile.identifier}' as XML: {exc_info}"
                        ),
                    )
                    return jsonify(result.json), 500
                return Response(xml, mimetype="application/xml", status=200)
            return jsonify(result.json), 200

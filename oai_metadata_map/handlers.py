"""Input handlers for the 'OAI Metadata Map'-app."""

from typing import Iterable

from data_plumber_http import Property, Object, String

from oai_metadata_map.models import TransformConfig


def get_transform_handler(acceptable_profiles: Iterable[str]):
    """
    Returns parameterized handler (based on acceptable_profiles from
    app_config)
    """
    return Object(
        properties={
            Property("transform", required=True): Object(
                model=TransformConfig,
                properties={
                    Property("entity", required=True): Object(
                        free_form=True
                    ),
                    Property("profile"): String(
                        enum=list(acceptable_profiles)
                    ),
                    Property("format", default="json"): String(
                        enum=["json", "xml"]
                    ),
                },
                accept_only=["entity", "profile", "format"],
            ),
        },
        accept_only=["transform"],
    ).assemble()

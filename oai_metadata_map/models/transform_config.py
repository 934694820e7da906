"""
TransformConfig data-model definition
"""

from typing import Optional, Any
from dataclasses import dataclass

from dcm_common.models import DataModel


@dataclass
class TransformConfig(DataModel):
    """
    TransformConfig `DataModel`

    Keyword arguments:
    entity -- entity document to be mapped
    profile -- identifier of the mapping profile
               (default None; uses the app's default profile)
    format -- output format, either 'json' or 'xml'
              (default 'json')
    """

    entity: dict[str, Any]
    profile: Optional[str] = None
    format: str = "json"

"""
Payload Builder Module

Builds Sortly API request bodies for item group creation:
- JSON body when every photo is remote
- Multipart form body with bracket-path field names when local photos
  must be uploaded
"""

from .payload_builder import PayloadEncoder, WirePayload, build_item_group_payload
from .field_builder import FormFieldBuilder, FormPart, bracket_path

__all__ = [
    "PayloadEncoder",
    "WirePayload",
    "FormFieldBuilder",
    "FormPart",
    "bracket_path",
    "build_item_group_payload",
]

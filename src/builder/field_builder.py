"""
Field Builder - Constructs multipart form parts for the Sortly API

Supports:
- Bracket-path field names (item_group[group_attributes][][name])
- String fields, skipped when the value is absent
- Binary file parts carrying the original file name
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Union
import logging

logger = logging.getLogger(__name__)


# Wire contract with the Sortly API. The receiving side parses these names
# positionally and has no schema validation, so they must not change.
ITEM_GROUP = "item_group"
NAME = "name"
ORDER = "order"
LABEL_URL = "label_url"
LABEL_URL_TYPE = "label_url_type"
LABEL_URL_EXTRA = "label_url_extra"
LABEL_URL_EXTRA_TYPE = "label_url_extra_type"
GROUP_ATTRIBUTES = "group_attributes"
OPTIONS = "options"
PHOTOS = "photos"
PHOTO_IDS = "photo_ids"
SORTLY_ID = "sid"


def bracket_path(*keys: str) -> str:
    """
    Build a flat form field name from nested keys

    An empty key marks a repeated array element:
        bracket_path("item_group", "photos", "") -> "item_group[photos][]"
    """
    root, *rest = keys
    return root + "".join(f"[{key}]" for key in rest)


GROUP_NAME_FIELD = bracket_path(ITEM_GROUP, NAME)
LABEL_URL_FIELD = bracket_path(ITEM_GROUP, LABEL_URL)
LABEL_URL_TYPE_FIELD = bracket_path(ITEM_GROUP, LABEL_URL_TYPE)
LABEL_URL_EXTRA_FIELD = bracket_path(ITEM_GROUP, LABEL_URL_EXTRA)
LABEL_URL_EXTRA_TYPE_FIELD = bracket_path(ITEM_GROUP, LABEL_URL_EXTRA_TYPE)
ATTRIBUTE_NAME_FIELD = bracket_path(ITEM_GROUP, GROUP_ATTRIBUTES, "", NAME)
ATTRIBUTE_ORDER_FIELD = bracket_path(ITEM_GROUP, GROUP_ATTRIBUTES, "", ORDER)
OPTION_NAME_FIELD = bracket_path(ITEM_GROUP, GROUP_ATTRIBUTES, "", OPTIONS, "", NAME)
OPTION_ORDER_FIELD = bracket_path(ITEM_GROUP, GROUP_ATTRIBUTES, "", OPTIONS, "", ORDER)
PHOTO_IDS_FIELD = bracket_path(ITEM_GROUP, PHOTO_IDS, "")
PHOTOS_FIELD = bracket_path(ITEM_GROUP, PHOTOS, "")


@dataclass(frozen=True)
class FormPart:
    """One part of a multipart form body"""

    name: str
    value: Union[str, bytes]
    filename: Optional[str] = None  # Set for binary file parts only

    @property
    def is_file(self) -> bool:
        return self.filename is not None


class FormFieldBuilder:
    """Collects form parts in emission order"""

    def __init__(self):
        self.parts: List[FormPart] = []

    def add_string(self, name: str, value: Any) -> None:
        """Add a string field, or nothing when value is None"""
        if value is None:
            return
        self.parts.append(FormPart(name, str(value)))

    def add_file(self, name: str, content: bytes, filename: str) -> None:
        """Add a binary part with attachment file name"""
        logger.debug(f"Attaching {len(content)} bytes as '{filename}' to {name}")
        self.parts.append(FormPart(name, bytes(content), filename))

    def build(self) -> List[FormPart]:
        return list(self.parts)

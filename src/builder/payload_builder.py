"""
Payload Builder - Encodes item group requests for the Sortly API

Integrates:
- FieldBuilder: Bracket-path multipart form parts
- FileSystem: Reads local photos for upload
- Encoding choice: JSON unless a local photo must be uploaded
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from src.filesystem.file_system import FileSystem, LocalFileSystem
from src.schema.models import ItemGroupRequest, ItemGroupSpec, PhotoKind
from src.validator.item_group_validator import ItemGroupValidator
from .field_builder import (
    FormFieldBuilder,
    FormPart,
    GROUP_NAME_FIELD,
    LABEL_URL_FIELD,
    LABEL_URL_TYPE_FIELD,
    LABEL_URL_EXTRA_FIELD,
    LABEL_URL_EXTRA_TYPE_FIELD,
    ATTRIBUTE_NAME_FIELD,
    ATTRIBUTE_ORDER_FIELD,
    OPTION_NAME_FIELD,
    OPTION_ORDER_FIELD,
    PHOTO_IDS_FIELD,
    PHOTOS_FIELD,
)

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
MULTIPART_CONTENT_TYPE = "multipart/form-data"


@dataclass
class WirePayload:
    """A transport-ready request body"""
    content_type: str
    body: Optional[bytes] = None  # JSON mode
    parts: List[FormPart] = field(default_factory=list)  # Multipart mode

    @property
    def is_multipart(self) -> bool:
        return self.content_type == MULTIPART_CONTENT_TYPE

    def field_values(self, name: str) -> List[Any]:
        """Values of every part called name, in form order"""
        return [part.value for part in self.parts if part.name == name]

    def as_requests_kwargs(self) -> Dict[str, Any]:
        """
        Keyword arguments for requests.Session.request

        Multipart parts all go through ``files`` so requests keeps their
        order; string fields are sent without a filename.
        """
        if not self.is_multipart:
            return {
                "data": self.body,
                "headers": {"Content-Type": f"{JSON_CONTENT_TYPE}; charset=utf-8"},
            }

        return {
            "files": [(part.name, (part.filename, part.value)) for part in self.parts],
        }


class PayloadEncoder:
    """
    Encodes a validated ItemGroupRequest

    Usage:
    ```python
    request.validate()
    payload = PayloadEncoder().encode(request, LocalFileSystem())
    session.post(url, **payload.as_requests_kwargs())
    ```

    Encoding assumes the request has already passed validation.
    """

    def encode(self, request: ItemGroupRequest, file_system: FileSystem) -> WirePayload:
        """
        Encode request as JSON, or as multipart when a local photo is present

        Args:
            request: Validated request
            file_system: Source of local photo bytes

        Returns:
            WirePayload ready for the transport

        Raises:
            OSError: A local photo could not be read (not wrapped)
        """
        group = request.item_group

        if not group.has_local_photos():
            logger.debug(f"Encoding item group '{group.name}' as JSON")
            body = json.dumps(request.to_dict()).encode("utf-8")
            return WirePayload(JSON_CONTENT_TYPE, body=body)

        logger.debug(f"Encoding item group '{group.name}' as multipart form")
        parts = self._build_form(group, file_system)
        logger.info(f"Built multipart payload with {len(parts)} parts")
        return WirePayload(MULTIPART_CONTENT_TYPE, parts=parts)

    def _build_form(self, group: ItemGroupSpec, file_system: FileSystem) -> List[FormPart]:
        """Flatten the item group into ordered form parts"""
        form = FormFieldBuilder()

        form.add_string(GROUP_NAME_FIELD, group.name)
        form.add_string(LABEL_URL_FIELD, group.label_url)
        form.add_string(LABEL_URL_TYPE_FIELD, group.label_url_type)
        form.add_string(LABEL_URL_EXTRA_FIELD, group.label_url_extra)
        form.add_string(LABEL_URL_EXTRA_TYPE_FIELD, group.label_url_extra_type)

        # The API groups repeated [] fields positionally, so each attribute's
        # options must follow that attribute directly
        for attribute in group.attributes or []:
            form.add_string(ATTRIBUTE_NAME_FIELD, attribute.name)
            form.add_string(ATTRIBUTE_ORDER_FIELD, attribute.order)

            for option in attribute.options or []:
                form.add_string(OPTION_NAME_FIELD, option.name)
                form.add_string(OPTION_ORDER_FIELD, option.order)

        for photo_id in group.photo_ids or []:
            form.add_string(PHOTO_IDS_FIELD, photo_id)

        for photo in group.photos or []:
            if photo.kind is PhotoKind.PATH:
                content = file_system.read_bytes(photo.content)
                form.add_file(PHOTOS_FIELD, content, file_system.file_name(photo.content))
            elif photo.kind in (PhotoKind.URL, PhotoKind.BLOB):
                form.add_string(PHOTOS_FIELD, photo.content)
            else:
                # Validation has already passed; unknown kinds are filtered out
                logger.debug(f"Skipping photo with unsupported kind: {photo.kind!r}")

        return form.build()


# ============================================================================
# Builder convenience functions
# ============================================================================


def build_item_group_payload(
    request: ItemGroupRequest,
    file_system: Optional[FileSystem] = None,
) -> WirePayload:
    """
    Validate then encode an item group request

    Reads local photos from disk unless another file system is given.
    """
    ItemGroupValidator().validate(request)
    return PayloadEncoder().encode(request, file_system or LocalFileSystem())

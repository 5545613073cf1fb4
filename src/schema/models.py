"""Models for Sortly item group creation requests."""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Dict, Any


def _require_object(data: Any, what: str) -> Dict[str, Any]:
    """Reject documents that are not JSON objects."""
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be a JSON object")
    return data


def _require_list(data: Any, what: str) -> List[Any]:
    """Reject values that are not JSON arrays."""
    if not isinstance(data, list):
        raise ValueError(f"{what} must be a JSON array")
    return data


def _parse_int(value: Any, what: str) -> int:
    """Convert a loaded number to int; booleans and containers are rejected."""
    if isinstance(value, bool):
        raise ValueError(f"Invalid {what}: {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid {what}: {value!r}") from None


def _parse_order(value: Any) -> Optional[int]:
    """Convert a loaded order to int, keeping None as unset."""
    if value is None:
        return None
    return _parse_int(value, "order")


class PhotoKind(Enum):
    """How a photo's content is sourced."""

    PATH = "path"  # Local file, uploaded as a binary part
    URL = "url"
    BLOB = "blob"


@dataclass(frozen=True)
class PhotoInput:
    """A photo attached to an item group.

    Each photo carries exactly one kind, so a local path can never be mixed
    with a URL or blob on the same entry. URL and blob photos are sent the
    same way on the wire.
    """

    kind: PhotoKind
    content: str

    @classmethod
    def from_path(cls, path: str) -> "PhotoInput":
        return cls(PhotoKind.PATH, path)

    @classmethod
    def from_url(cls, url: str) -> "PhotoInput":
        return cls(PhotoKind.URL, url)

    @classmethod
    def from_blob(cls, blob: str) -> "PhotoInput":
        return cls(PhotoKind.BLOB, blob)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PhotoInput":
        """Load from a ``{"type": ..., "content": ...}`` document."""
        data = _require_object(data, "Photo")
        raw_kind = str(data.get("type", "")).lower()
        try:
            kind = PhotoKind(raw_kind)
        except ValueError:
            raise ValueError(f"Unknown photo type: {data.get('type')!r}") from None
        return cls(kind, data.get("content", ""))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"type": self.kind.value, "content": self.content}


@dataclass
class OptionSpec:
    """A selectable value of a group attribute."""

    name: str = ""
    order: Optional[int] = None  # None means unset, 0 is a valid order

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OptionSpec":
        data = _require_object(data, "Option")
        return cls(name=data.get("name", ""), order=_parse_order(data.get("order")))

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "order": self.order}


@dataclass
class AttributeSpec:
    """A classification dimension of an item group (e.g. Color)."""

    name: str = ""
    order: Optional[int] = None
    options: List[OptionSpec] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AttributeSpec":
        data = _require_object(data, "Group attribute")
        return cls(
            name=data.get("name", ""),
            order=_parse_order(data.get("order")),
            options=[
                OptionSpec.from_dict(o)
                for o in _require_list(data.get("options") or [], "options")
            ],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "order": self.order,
            "options": [option.to_dict() for option in self.options],
        }


@dataclass
class ItemGroupSpec:
    """The item group being created."""

    name: str = ""
    sid: Optional[str] = None
    label_url: Optional[str] = None
    label_url_type: Optional[str] = None
    label_url_extra: Optional[str] = None
    label_url_extra_type: Optional[str] = None
    photo_ids: Optional[List[int]] = None
    photos: Optional[List[PhotoInput]] = None
    attributes: List[AttributeSpec] = field(default_factory=list)

    def has_local_photos(self) -> bool:
        """True when at least one photo must be uploaded from disk."""
        return any(photo.kind is PhotoKind.PATH for photo in self.photos or [])

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ItemGroupSpec":
        data = _require_object(data, "item_group")
        photo_ids = data.get("photo_ids")
        if photo_ids is not None:
            photo_ids = [_parse_int(p, "photo id") for p in _require_list(photo_ids, "photo_ids")]
        photos = data.get("photos")
        if photos is not None:
            photos = [PhotoInput.from_dict(p) for p in _require_list(photos, "photos")]
        return cls(
            name=data.get("name", ""),
            sid=data.get("sid"),
            label_url=data.get("label_url"),
            label_url_type=data.get("label_url_type"),
            label_url_extra=data.get("label_url_extra"),
            label_url_extra_type=data.get("label_url_extra_type"),
            photo_ids=photo_ids,
            photos=photos,
            attributes=[
                AttributeSpec.from_dict(a)
                for a in _require_list(data.get("group_attributes") or [], "group_attributes")
            ],
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON wire shape, omitting absent optional fields."""
        data = {
            "name": self.name,
            "sid": self.sid,
            "label_url": self.label_url,
            "label_url_type": self.label_url_type,
            "label_url_extra": self.label_url_extra,
            "label_url_extra_type": self.label_url_extra_type,
            "photo_ids": list(self.photo_ids) if self.photo_ids is not None else None,
            "photos": [p.to_dict() for p in self.photos] if self.photos is not None else None,
            "group_attributes": [a.to_dict() for a in self.attributes],
        }
        return {key: value for key, value in data.items() if value is not None}


@dataclass
class ItemGroupRequest:
    """Request body for creating an item group."""

    item_group: Optional[ItemGroupSpec] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ItemGroupRequest":
        """Load a request from a ``{"item_group": {...}}`` document."""
        data = _require_object(data, "Request document")
        group = data.get("item_group")
        return cls(ItemGroupSpec.from_dict(group) if group is not None else None)

    def to_dict(self) -> Dict[str, Any]:
        if self.item_group is None:
            return {}
        return {"item_group": self.item_group.to_dict()}

    def validate(self) -> None:
        """Raise ValidationError on the first rule violated."""
        from src.validator.item_group_validator import ItemGroupValidator

        ItemGroupValidator().validate(self)

    def as_http_payload(self, file_system):
        """Encode for transport; see PayloadEncoder.encode."""
        from src.builder.payload_builder import PayloadEncoder

        return PayloadEncoder().encode(self, file_system)

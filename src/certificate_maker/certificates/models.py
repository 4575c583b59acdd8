"""Certificate documents as stored in MongoDB and exchanged over HTTP.

Field names are snake_case in Python and camelCase on the wire and in the
store (``bgImage``, ``createdAt``, ``zIndex`` ...). Optional style attributes
stay ``None`` when unset and are dropped from both representations, so an
explicit ``0`` is never confused with "not provided".
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from certificate_maker.exceptions import InvalidObjectIdError

# What the previous backend emitted for never-saved documents
NIL_OBJECT_ID = "0" * 24


def utcnow() -> datetime:
    """Current UTC time at the millisecond precision BSON dates can hold."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def parse_object_id(value: Any) -> ObjectId:
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise InvalidObjectIdError(f"{value!r} is not a valid 24-character hex ObjectId")
    return ObjectId(value)


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class CertificateElement(_CamelModel):
    """One positioned primitive (text, shape, image...) inside a certificate."""

    id: str = Field(default="", description="Unique within the parent certificate only")
    type: str = Field(default="", description="Element kind, e.g. text or shape")
    content: str = ""
    x: float = 0
    y: float = 0
    width: Optional[float] = None
    height: Optional[float] = None
    font_size: Optional[float] = None
    color: Optional[str] = None
    font_family: Optional[str] = None
    font_weight: Optional[str] = None
    z_index: int = 0
    text_align: Optional[str] = None
    border_color: Optional[str] = None
    border_width: Optional[float] = None
    border_style: Optional[str] = None
    border_radius: Optional[float] = None

    @field_validator("id", "type", "content", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class Certificate(_CamelModel):
    """A named visual template; ``id`` stays ``None`` until first insert."""

    id: Optional[str] = Field(default=None, description="Hex ObjectId assigned by the store")
    name: str = ""
    bg_image: str = ""
    elements: list[CertificateElement] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("id", mode="before")
    @classmethod
    def _normalize_id(cls, v: Any) -> Optional[str]:
        if v is None or v == "" or v == NIL_OBJECT_ID:
            return None
        try:
            return str(parse_object_id(v))
        except InvalidObjectIdError as exc:
            raise ValueError(str(exc)) from exc

    @field_validator("bg_image", mode="before")
    @classmethod
    def _null_bg_image(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("elements", mode="before")
    @classmethod
    def _null_elements(cls, v: Any) -> Any:
        return [] if v is None else v

    @property
    def object_id(self) -> Optional[ObjectId]:
        return ObjectId(self.id) if self.id else None

    def to_document(self) -> dict[str, Any]:
        """BSON-ready mapping without ``_id``; datetimes stay native."""
        return self.model_dump(by_alias=True, exclude_none=True, exclude={"id"})

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "Certificate":
        data = dict(doc)
        oid = data.pop("_id", None)
        if oid is not None:
            data["id"] = str(oid)
        return cls.model_validate(data)

"""Strict validation of SiteContent payloads submitted through PUT /api/content."""
from __future__ import annotations

from typing import Annotated, Any, List, Optional

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    TypeAdapter,
    ValidationError,
    field_validator,
)
from pydantic.alias_generators import to_camel

from conference_site.services.content_defaults import SiteContent

NonEmptyStr = Annotated[str, Field(min_length=1)]
_URL_ADAPTER = TypeAdapter(AnyUrl)


class ContentValidationError(ValueError):
    """Raised when a submitted content payload fails validation."""

    def __init__(self, message: str, errors: Optional[List[dict]] = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class _Strict(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        strict=True,
        alias_generator=to_camel,
    )


class ProgramSession(_Strict):
    time: NonEmptyStr
    type: NonEmptyStr
    title: NonEmptyStr
    description: NonEmptyStr


class ProgramDay(_Strict):
    date: NonEmptyStr
    sessions: List[ProgramSession] = Field(min_length=1)


class Speaker(_Strict):
    name: NonEmptyStr
    role: NonEmptyStr
    experience: NonEmptyStr
    description: NonEmptyStr
    tags: List[NonEmptyStr] = Field(min_length=1)
    photo_url: str

    @field_validator("photo_url")
    @classmethod
    def _photo_url_format(cls, value: str) -> str:
        if value:
            try:
                _URL_ADAPTER.validate_python(value)
            except ValidationError as exc:
                raise ValueError("photoUrl must be an absolute URL or empty") from exc
        return value


class PricingOption(_Strict):
    label: str = ""
    period: NonEmptyStr
    price: NonEmptyStr
    features: List[NonEmptyStr] = Field(min_length=1)
    highlight: StrictBool = False


class RegistrationNotifications(_Strict):
    title: NonEmptyStr
    items: List[NonEmptyStr] = Field(min_length=1)


class ContactSection(_Strict):
    title: NonEmptyStr
    phone: NonEmptyStr
    email: NonEmptyStr
    website: NonEmptyStr


class SiteContentModel(_Strict):
    program_days: List[ProgramDay] = Field(min_length=1)
    speakers: List[Speaker] = Field(min_length=1)
    pricing_options: List[PricingOption] = Field(min_length=1)
    registration_notifications: RegistrationNotifications
    contact_section: ContactSection


def validate_site_content(payload: Any) -> SiteContent:
    """Validate `payload` and return it as a camelCase dict.

    Raises ContentValidationError carrying pydantic's error list.
    """
    if not isinstance(payload, dict):
        raise ContentValidationError("payload must be a JSON object")
    try:
        model = SiteContentModel.model_validate(payload)
    except ValidationError as exc:
        raise ContentValidationError("invalid site content", exc.errors(include_url=False)) from exc
    return model.model_dump(by_alias=True, exclude_unset=True)


__all__ = [
    "ContentValidationError",
    "SiteContentModel",
    "validate_site_content",
]

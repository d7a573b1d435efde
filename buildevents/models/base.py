"""Shared base for GitLab webhook payload models."""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from ..errors import DecodeError

T = TypeVar("T", bound="WebhookModel")


class WebhookModel(BaseModel):
    """Permissive model for GitLab webhook payloads.

    Unknown keys are ignored and keys that are absent or ``null`` fall back
    to the field's zero value, so optional GitLab attributes never fail
    decoding. Values of the wrong JSON type are rejected, not coerced.
    """

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    @classmethod
    def decode(cls: type[T], body: bytes | str) -> T:
        """Decode a raw JSON request body.

        Raises:
            DecodeError: body is not JSON or does not fit the payload shape.
        """
        try:
            return cls.model_validate_json(body, strict=True)
        except ValidationError as e:
            raise DecodeError(f"invalid {cls.__name__} payload: {e}") from e


class User(WebhookModel):
    """User that triggered the pipeline or job."""

    id: int = 0
    name: str = ""
    username: str = ""
    avatar_url: str = ""
    email: str = ""


class Runner(WebhookModel):
    """Runner that picked up a job."""

    active: bool = False
    is_shared: bool = False
    id: int = 0
    description: str = ""
    tags: list[str] = []

"""
Base models shared by the JIRA data models.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """
    Base class for models built from JIRA REST responses.

    Subclasses implement ``from_api_response`` to tolerate missing or
    malformed fields, and ``to_simplified_dict`` for display.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        raise NotImplementedError

    def to_simplified_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def not_blank(value: Optional[str]) -> Optional[str]:
    if value is not None and not value.strip():
        raise ValueError("title must not be blank")
    return value


class ProjectBase(BaseModel):
    title: str = Field(max_length=128)
    description: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value):
        return not_blank(value)

class ProjectCreate(ProjectBase):
    pass

class ProjectUpdate(BaseModel):
    """Partial update; only fields present in the body are written."""
    title: Optional[str] = Field(default=None, max_length=128)
    description: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value):
        return not_blank(value)

class ProjectOut(ProjectBase):
    id: int
    user_id: int
    model_config = ConfigDict(from_attributes=True)

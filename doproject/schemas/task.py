from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from doproject.schemas.project import not_blank


class TaskBase(BaseModel):
    title: str = Field(max_length=128)
    description: Optional[str] = None
    completed: bool = False

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value):
        return not_blank(value)

class TaskCreate(TaskBase):
    pass

class TaskUpdate(BaseModel):
    title: Optional[str] = Field(default=None, max_length=128)
    description: Optional[str] = None
    completed: Optional[bool] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value):
        return not_blank(value)

class TaskOut(TaskBase):
    id: int
    project_id: int
    model_config = ConfigDict(from_attributes=True)

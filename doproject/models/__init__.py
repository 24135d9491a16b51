from doproject.models.user import User
from doproject.models.project import Project
from doproject.models.task import Task

__all__ = ["User", "Project", "Task"]

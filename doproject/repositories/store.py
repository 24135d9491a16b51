"""
Cascading deletes for users, projects and tasks.

Children always go before parents (tasks, then projects, then the user row).
Each step is one parameterized DELETE on the caller's session; nothing here
commits. Run these inside ``doproject.database.transaction`` so a failure in
any step, including a missing target row, rolls the earlier steps back.
"""
import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from doproject.exceptions import NotFoundError, StorageError
from doproject.models.project import Project
from doproject.models.task import Task
from doproject.models.user import User

logger = logging.getLogger(__name__)


async def execute_delete(session: AsyncSession, stmt) -> int:
    """Run a DELETE and return how many rows it removed."""
    stmt = stmt.execution_options(synchronize_session=False)
    try:
        res = await session.execute(stmt)
    except SQLAlchemyError as exc:
        logger.exception("delete statement failed")
        raise StorageError(str(exc)) from exc
    return res.rowcount or 0


async def delete_user(session: AsyncSession, user_id: int) -> None:
    owned_projects = select(Project.id).where(Project.user_id == user_id)
    tasks = await execute_delete(
        session, delete(Task).where(Task.project_id.in_(owned_projects))
    )
    projects = await execute_delete(
        session, delete(Project).where(Project.user_id == user_id)
    )
    logger.debug("user %s: removed %d task(s), %d project(s)", user_id, tasks, projects)

    if await execute_delete(session, delete(User).where(User.id == user_id)) == 0:
        logger.info("user %s not found", user_id)
        raise NotFoundError("User not found")


async def delete_project(session: AsyncSession, project_id: int) -> None:
    tasks = await execute_delete(
        session, delete(Task).where(Task.project_id == project_id)
    )
    logger.debug("project %s: removed %d task(s)", project_id, tasks)

    if await execute_delete(session, delete(Project).where(Project.id == project_id)) == 0:
        logger.info("project %s not found", project_id)
        raise NotFoundError("Project not found")


async def delete_task(session: AsyncSession, task_id: int) -> None:
    if await execute_delete(session, delete(Task).where(Task.id == task_id)) == 0:
        logger.info("task %s not found", task_id)
        raise NotFoundError("Task not found")

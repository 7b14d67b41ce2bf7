from typing import Any, Dict, List

from sqlalchemy import DateTime, bindparam, text
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Task

SELECT_ALL_TASKS = "SELECT * FROM tasks"
SELECT_TASK_BY_ID = "SELECT task FROM tasks WHERE id = :id"
INSERT_TASK = (
    "INSERT INTO tasks (task, status, created_at) "
    "VALUES (:task, :status, :created_at) RETURNING id"
)
UPDATE_TASK_BY_ID = "UPDATE tasks SET task = :task WHERE id = :id"
DELETE_TASK_BY_ID = "DELETE FROM tasks WHERE id = :id"


async def get_all_tasks(db: AsyncSession) -> List[Dict[str, Any]]:
    """Get every row of the tasks table"""
    result = await db.execute(text(SELECT_ALL_TASKS))
    return [dict(row) for row in result.mappings().all()]


async def get_task_by_id(db: AsyncSession, task_id: int) -> List[Dict[str, Any]]:
    """Get the description of a task by ID; empty list when there is no such task"""
    result = await db.execute(text(SELECT_TASK_BY_ID), {"id": task_id})
    return [dict(row) for row in result.mappings().all()]


async def create_task(db: AsyncSession, new_task: Task) -> int:
    """Insert a new task and return its ID"""
    statement = text(INSERT_TASK).bindparams(bindparam("created_at", type_=DateTime))
    result = await db.execute(
        statement,
        {
            "task": new_task.task,
            "status": new_task.status,
            "created_at": new_task.created_at,
        },
    )
    task_id = result.scalar_one()
    await db.commit()
    return task_id


async def update_task_by_id(db: AsyncSession, task_id: int, task: Task) -> int:
    """Update the description of a task; only the `task` column changes"""
    result = await db.execute(text(UPDATE_TASK_BY_ID), {"task": task.task, "id": task_id})
    await db.commit()
    return result.rowcount


async def remove_task(db: AsyncSession, task_id: int) -> int:
    """Delete a task by ID"""
    result = await db.execute(text(DELETE_TASK_BY_ID), {"id": task_id})
    await db.commit()
    return result.rowcount

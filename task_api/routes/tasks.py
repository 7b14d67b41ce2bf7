import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from .. import crud
from ..db import get_db
from ..errors import MissingTaskFieldsError
from ..models import Task
from ..schemas import (
    MessageResponse,
    TaskCreate,
    TaskDescription,
    TaskResponse,
    TaskUpdate,
    UpdateResult,
)
from ..utils import validate_task_data

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=List[TaskResponse])
async def list_all_tasks(db: AsyncSession = Depends(get_db)):
    """Get all tasks"""
    return await crud.get_all_tasks(db)


@router.post("", response_model=int)
async def create_a_task(
    task: TaskCreate,
    db: AsyncSession = Depends(get_db)
):
    """Create a new task"""
    is_valid, message = validate_task_data(task.model_dump())
    if not is_valid:
        raise MissingTaskFieldsError(message)

    new_task = Task(**task.model_dump())
    task_id = await crud.create_task(db, new_task)
    logger.info("Created task %s", task_id)
    return task_id


@router.get("/{task_id}", response_model=List[TaskDescription])
async def read_a_task(
    task_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Get a specific task by ID"""
    return await crud.get_task_by_id(db, task_id)


@router.put("/{task_id}", response_model=UpdateResult)
async def update_a_task(
    task_id: int,
    task: TaskUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Update the description of a specific task"""
    affected_rows = await crud.update_task_by_id(db, task_id, Task(**task.model_dump()))
    logger.info("Updated task %s (%d rows)", task_id, affected_rows)
    return UpdateResult(affected_rows=affected_rows)


@router.delete("/{task_id}", response_model=MessageResponse)
async def delete_a_task(
    task_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Delete a specific task"""
    affected_rows = await crud.remove_task(db, task_id)
    logger.info("Deleted task %s (%d rows)", task_id, affected_rows)
    return MessageResponse(message="Task successfully deleted")

from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class TaskBase(BaseModel):
    task: Optional[str] = None
    status: Optional[str] = None


class TaskCreate(TaskBase):
    pass


class TaskUpdate(TaskBase):
    pass


class TaskResponse(BaseModel):
    id: int
    task: str
    status: str
    created_at: Optional[datetime] = None


class TaskDescription(BaseModel):
    task: str


class UpdateResult(BaseModel):
    affected_rows: int


class MessageResponse(BaseModel):
    message: str

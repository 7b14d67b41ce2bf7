from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    task = Column(String, nullable=False)
    status = Column(String, nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    def __init__(self, **kwargs):
        # Stamped at construction, not at insert
        kwargs.setdefault("created_at", datetime.now())
        super().__init__(**kwargs)

    def __repr__(self):
        return f"<Task(id={self.id}, task='{self.task}', status='{self.status}')>"

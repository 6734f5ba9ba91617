from sqlalchemy import Column, Integer, Text

from task_api.database import Base


class Task(Base):
    __tablename__ = "tasks"
    # ids of deleted rows are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    due_date = Column(Text, nullable=True)
    status = Column(Text, nullable=True)

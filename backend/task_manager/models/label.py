from sqlalchemy import Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship

from task_manager.database.base import Base
from task_manager.models.task import task_labels


class Label(Base):
    __tablename__ = "labels"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(1000), unique=True, index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    tasks = relationship("Task", secondary=task_labels, back_populates="labels")

    def add_task(self, task) -> None:
        """Attach ``task`` to this label, keeping ``task.labels`` in step."""
        if task not in self.tasks:
            self.tasks.append(task)
        if self not in task.labels:
            task.labels.append(self)

    def remove_task(self, task) -> None:
        """Detach ``task`` from this label on both sides of the relation."""
        if task in self.tasks:
            self.tasks.remove(task)
        if self in task.labels:
            task.labels.remove(self)

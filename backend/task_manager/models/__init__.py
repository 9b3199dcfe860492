from task_manager.models.label import Label  # noqa: F401
from task_manager.models.task import Task, task_labels  # noqa: F401
from task_manager.models.task_status import TaskStatus  # noqa: F401
from task_manager.models.user import User  # noqa: F401

"""Task commands."""

from .create_task import CreateTaskCommand, CreateTaskHandler
from .update_task import UpdateTaskCommand, UpdateTaskHandler
from .delete_task import DeleteTaskCommand, DeleteTaskHandler
from .update_task_status import UpdateTaskStatusCommand, UpdateTaskStatusHandler
from .assign_task import AssignTaskCommand, AssignTaskHandler

__all__ = [
    "CreateTaskCommand",
    "CreateTaskHandler",
    "UpdateTaskCommand",
    "UpdateTaskHandler",
    "DeleteTaskCommand",
    "DeleteTaskHandler",
    "UpdateTaskStatusCommand",
    "UpdateTaskStatusHandler",
    "AssignTaskCommand",
    "AssignTaskHandler",
]

"""Task queries."""

from .get_task import GetTaskQuery, GetTaskHandler
from .list_tasks import ListTasksQuery, ListTasksHandler
from .task_statistics import TaskStatistics, TaskStatisticsQuery, TaskStatisticsHandler

__all__ = [
    "GetTaskQuery",
    "GetTaskHandler",
    "ListTasksQuery",
    "ListTasksHandler",
    "TaskStatistics",
    "TaskStatisticsQuery",
    "TaskStatisticsHandler",
]

"""Project queries."""

from .get_project import GetProjectQuery, GetProjectHandler
from .list_projects import ListProjectsQuery, ListProjectsHandler
from .projects_ending_soon import ProjectsEndingSoonQuery, ProjectsEndingSoonHandler

__all__ = [
    "GetProjectQuery",
    "GetProjectHandler",
    "ListProjectsQuery",
    "ListProjectsHandler",
    "ProjectsEndingSoonQuery",
    "ProjectsEndingSoonHandler",
]

"""Project commands."""

from .create_project import CreateProjectCommand, CreateProjectHandler
from .update_project import UpdateProjectCommand, UpdateProjectHandler
from .delete_project import DeleteProjectCommand, DeleteProjectHandler
from .manage_members import (
    AddProjectMemberCommand,
    AddProjectMemberHandler,
    RemoveProjectMemberCommand,
    RemoveProjectMemberHandler,
)
from .update_project_status import UpdateProjectStatusCommand, UpdateProjectStatusHandler

__all__ = [
    "CreateProjectCommand",
    "CreateProjectHandler",
    "UpdateProjectCommand",
    "UpdateProjectHandler",
    "DeleteProjectCommand",
    "DeleteProjectHandler",
    "AddProjectMemberCommand",
    "AddProjectMemberHandler",
    "RemoveProjectMemberCommand",
    "RemoveProjectMemberHandler",
    "UpdateProjectStatusCommand",
    "UpdateProjectStatusHandler",
]

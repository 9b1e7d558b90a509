"""Update Project Status Command. Any status may replace any other."""

from dataclasses import dataclass
from logging import getLogger

from workhub.application.common.interfaces import Command, CommandHandler
from workhub.domain.entities.project import Project, ProjectStatus
from workhub.domain.exceptions import EntityNotFoundError
from workhub.domain.ports.repositories import ProjectRepository

logger = getLogger(__name__)


@dataclass(frozen=True)
class UpdateProjectStatusCommand(Command[Project]):
    project_id: str
    status: ProjectStatus


class UpdateProjectStatusHandler(CommandHandler[Project]):
    def __init__(self, project_repository: ProjectRepository):
        self._project_repository = project_repository

    async def execute(self, command: UpdateProjectStatusCommand) -> Project:
        project = await self._project_repository.get_by_id(command.project_id)
        if not project:
            raise EntityNotFoundError.for_id("Project", command.project_id)
        previous = project.status
        project.change_status(command.status)
        await self._project_repository.save(project)
        logger.info(
            "Project %s status %s -> %s", project.id, previous.value, command.status.value
        )
        return project

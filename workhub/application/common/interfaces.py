"""
Base interfaces for CQRS pattern.

Usage:
    @dataclass(frozen=True)
    class CreateProjectCommand(Command[Project]):
        name: str
        organization_id: str

    class CreateProjectHandler(CommandHandler[Project]):
        def __init__(self, project_repository: ProjectRepository):
            self._project_repository = project_repository

        async def execute(self, command: CreateProjectCommand) -> Project:
            project = Project.create(...)
            await self._project_repository.save(project)
            return project
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")


class Command(ABC, Generic[T]):
    """Base class for write operations"""
    pass


class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...


class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass


class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...

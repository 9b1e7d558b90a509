"""
Category commands.

Products reference their category by name, so a category that still has
products can be neither renamed nor deleted.
"""

from dataclasses import dataclass
from logging import getLogger
from typing import Optional

from workhub.application.common.interfaces import Command, CommandHandler
from workhub.domain.entities.category import Category
from workhub.domain.exceptions import (
    DomainValidationError,
    EntityAlreadyExistsError,
    EntityNotFoundError,
    InvalidStateError,
)
from workhub.domain.ports.repositories import CategoryRepository, ProductRepository

logger = getLogger(__name__)


@dataclass(frozen=True)
class CreateCategoryCommand(Command[Category]):
    name: str
    description: Optional[str] = None
    parent_id: Optional[str] = None


@dataclass(frozen=True)
class UpdateCategoryCommand(Command[Category]):
    category_id: str
    name: Optional[str] = None
    description: Optional[str] = None
    parent_id: Optional[str] = None


@dataclass(frozen=True)
class DeleteCategoryCommand(Command[bool]):
    category_id: str


class CreateCategoryHandler(CommandHandler[Category]):
    def __init__(self, category_repository: CategoryRepository):
        self._category_repository = category_repository

    async def execute(self, command: CreateCategoryCommand) -> Category:
        if not command.name or not command.name.strip():
            raise DomainValidationError("Category name must not be blank")
        name = command.name.strip()
        if await self._category_repository.exists_by_name(name):
            raise EntityAlreadyExistsError(f"Category already exists: {name}")
        if command.parent_id and not await self._category_repository.get_by_id(
            command.parent_id
        ):
            raise EntityNotFoundError.for_id("Category", command.parent_id)

        category = Category.create(
            name=name, description=command.description, parent_id=command.parent_id
        )
        await self._category_repository.save(category)
        logger.info("Created category %s (%s)", category.id, category.name)
        return category


class UpdateCategoryHandler(CommandHandler[Category]):
    def __init__(
        self,
        category_repository: CategoryRepository,
        product_repository: ProductRepository,
    ):
        self._category_repository = category_repository
        self._product_repository = product_repository

    async def execute(self, command: UpdateCategoryCommand) -> Category:
        category = await self._category_repository.get_by_id(command.category_id)
        if not category:
            raise EntityNotFoundError.for_id("Category", command.category_id)

        if command.name is not None and command.name.strip() != category.name:
            name = command.name.strip()
            if not name:
                raise DomainValidationError("Category name must not be blank")
            if await self._category_repository.exists_by_name(name):
                raise EntityAlreadyExistsError(f"Category already exists: {name}")
            if await self._product_repository.count_by_category(category.name):
                raise InvalidStateError(
                    f"Category {category.name} has products and cannot be renamed"
                )
            category.name = name
        if command.parent_id is not None:
            if command.parent_id == category.id:
                raise DomainValidationError("A category cannot be its own parent")
            if not await self._category_repository.get_by_id(command.parent_id):
                raise EntityNotFoundError.for_id("Category", command.parent_id)
            category.parent_id = command.parent_id
        if command.description is not None:
            category.description = command.description

        category.touch()
        await self._category_repository.save(category)
        logger.info("Updated category %s", category.id)
        return category


class DeleteCategoryHandler(CommandHandler[bool]):
    def __init__(
        self,
        category_repository: CategoryRepository,
        product_repository: ProductRepository,
    ):
        self._category_repository = category_repository
        self._product_repository = product_repository

    async def execute(self, command: DeleteCategoryCommand) -> bool:
        category = await self._category_repository.get_by_id(command.category_id)
        if not category:
            raise EntityNotFoundError.for_id("Category", command.category_id)
        products = await self._product_repository.count_by_category(category.name)
        if products:
            raise InvalidStateError(
                f"Category {category.name} is used by {products} product(s)"
            )
        deleted = await self._category_repository.delete(category.id)
        logger.info("Deleted category %s (%s)", category.id, category.name)
        return deleted

"""
Product commands.

Steps shared by create/update:
1. SKU must be unique (checked again only when it changes)
2. Category must exist by name
3. Price must not be negative
4. Append PRODUCT_* to the audit trail

Deleting a product is refused while it still has an inventory record.
"""

from dataclasses import dataclass
from decimal import Decimal
from logging import getLogger
from typing import Any, Optional

from workhub.application.common.actor import Actor, SYSTEM
from workhub.application.common.audit import AuditTrail
from workhub.application.common.interfaces import Command, CommandHandler
from workhub.config.settings import Config
from workhub.domain.entities.product import Product
from workhub.domain.exceptions import (
    DomainValidationError,
    EntityAlreadyExistsError,
    EntityNotFoundError,
    InvalidStateError,
)
from workhub.domain.ports.repositories import (
    CategoryRepository,
    InventoryRepository,
    ProductRepository,
)

logger = getLogger(__name__)


def check_price(price: Decimal) -> None:
    if price < 0:
        raise DomainValidationError("Price must not be negative")


@dataclass(frozen=True)
class CreateProductCommand(Command[Product]):
    sku: str
    name: str
    price: Decimal
    category: str
    currency: Optional[str] = None
    description: Optional[str] = None
    subcategory: Optional[str] = None
    attributes: Optional[dict[str, Any]] = None
    images: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    weight: Optional[float] = None
    featured: bool = False
    actor: Actor = SYSTEM


@dataclass(frozen=True)
class UpdateProductCommand(Command[Product]):
    product_id: str
    sku: Optional[str] = None
    name: Optional[str] = None
    price: Optional[Decimal] = None
    category: Optional[str] = None
    description: Optional[str] = None
    subcategory: Optional[str] = None
    images: Optional[tuple[str, ...]] = None
    tags: Optional[tuple[str, ...]] = None
    weight: Optional[float] = None
    active: Optional[bool] = None
    featured: Optional[bool] = None
    actor: Actor = SYSTEM


@dataclass(frozen=True)
class UpdateProductPriceCommand(Command[Product]):
    product_id: str
    price: Decimal
    actor: Actor = SYSTEM


@dataclass(frozen=True)
class UpdateProductAttributesCommand(Command[Product]):
    product_id: str
    attributes: dict[str, Any]
    actor: Actor = SYSTEM


@dataclass(frozen=True)
class DeleteProductCommand(Command[bool]):
    product_id: str
    actor: Actor = SYSTEM


class CreateProductHandler(CommandHandler[Product]):
    def __init__(
        self,
        product_repository: ProductRepository,
        category_repository: CategoryRepository,
        audit_trail: AuditTrail,
    ):
        self._product_repository = product_repository
        self._category_repository = category_repository
        self._audit_trail = audit_trail

    async def execute(self, command: CreateProductCommand) -> Product:
        if not command.sku or not command.sku.strip():
            raise DomainValidationError("SKU must not be blank")
        if not command.name or not command.name.strip():
            raise DomainValidationError("Product name must not be blank")
        check_price(command.price)
        sku = command.sku.strip()
        if await self._product_repository.exists_by_sku(sku):
            raise EntityAlreadyExistsError(f"Product with SKU already exists: {sku}")
        if not await self._category_repository.exists_by_name(command.category):
            raise EntityNotFoundError(f"Category not found: {command.category}")

        product = Product.create(
            sku=sku,
            name=command.name.strip(),
            price=command.price,
            category=command.category,
            currency=command.currency or Config.DEFAULT_CURRENCY,
            description=command.description,
            subcategory=command.subcategory,
            attributes=command.attributes,
            images=list(command.images),
            tags=list(command.tags),
            weight=command.weight,
            featured=command.featured,
        )
        await self._product_repository.save(product)
        await self._audit_trail.record(
            "PRODUCT_CREATED",
            "Product",
            product.id,
            actor=command.actor,
            changes={"sku": product.sku, "price": str(product.price)},
        )
        logger.info("Created product %s (%s)", product.id, product.sku)
        return product


class UpdateProductHandler(CommandHandler[Product]):
    def __init__(
        self,
        product_repository: ProductRepository,
        category_repository: CategoryRepository,
        audit_trail: AuditTrail,
    ):
        self._product_repository = product_repository
        self._category_repository = category_repository
        self._audit_trail = audit_trail

    async def execute(self, command: UpdateProductCommand) -> Product:
        product = await self._product_repository.get_by_id(command.product_id)
        if not product:
            raise EntityNotFoundError.for_id("Product", command.product_id)

        changes: dict[str, Any] = {}
        if command.sku is not None and command.sku.strip() != product.sku:
            sku = command.sku.strip()
            if not sku:
                raise DomainValidationError("SKU must not be blank")
            if await self._product_repository.exists_by_sku(sku):
                raise EntityAlreadyExistsError(f"Product with SKU already exists: {sku}")
            product.sku = sku
            changes["sku"] = sku
        if command.category is not None and command.category != product.category:
            if not await self._category_repository.exists_by_name(command.category):
                raise EntityNotFoundError(f"Category not found: {command.category}")
            product.category = command.category
            changes["category"] = command.category
        if command.price is not None:
            check_price(command.price)
            product.price = command.price
            changes["price"] = str(command.price)
        if command.name is not None:
            if not command.name.strip():
                raise DomainValidationError("Product name must not be blank")
            product.name = command.name.strip()
            changes["name"] = product.name
        for name in ("description", "subcategory", "weight", "active", "featured"):
            value = getattr(command, name)
            if value is not None:
                setattr(product, name, value)
                changes[name] = value
        if command.images is not None:
            product.images = list(command.images)
            changes["images"] = product.images
        if command.tags is not None:
            product.tags = list(command.tags)
            changes["tags"] = product.tags

        product.touch()
        await self._product_repository.save(product)
        await self._audit_trail.record(
            "PRODUCT_UPDATED", "Product", product.id, actor=command.actor, changes=changes
        )
        logger.info("Updated product %s: %s", product.id, sorted(changes))
        return product


class UpdateProductPriceHandler(CommandHandler[Product]):
    def __init__(self, product_repository: ProductRepository, audit_trail: AuditTrail):
        self._product_repository = product_repository
        self._audit_trail = audit_trail

    async def execute(self, command: UpdateProductPriceCommand) -> Product:
        check_price(command.price)
        product = await self._product_repository.get_by_id(command.product_id)
        if not product:
            raise EntityNotFoundError.for_id("Product", command.product_id)

        previous = product.price
        product.change_price(command.price)
        await self._product_repository.save(product)
        await self._audit_trail.record(
            "PRODUCT_UPDATED",
            "Product",
            product.id,
            actor=command.actor,
            changes={"price": {"from": str(previous), "to": str(product.price)}},
        )
        logger.info("Product %s price %s -> %s", product.id, previous, product.price)
        return product


class UpdateProductAttributesHandler(CommandHandler[Product]):
    def __init__(self, product_repository: ProductRepository, audit_trail: AuditTrail):
        self._product_repository = product_repository
        self._audit_trail = audit_trail

    async def execute(self, command: UpdateProductAttributesCommand) -> Product:
        product = await self._product_repository.get_by_id(command.product_id)
        if not product:
            raise EntityNotFoundError.for_id("Product", command.product_id)

        product.merge_attributes(command.attributes)
        await self._product_repository.save(product)
        await self._audit_trail.record(
            "PRODUCT_UPDATED",
            "Product",
            product.id,
            actor=command.actor,
            changes={"attributes": dict(command.attributes)},
        )
        return product


class DeleteProductHandler(CommandHandler[bool]):
    def __init__(
        self,
        product_repository: ProductRepository,
        inventory_repository: InventoryRepository,
        audit_trail: AuditTrail,
    ):
        self._product_repository = product_repository
        self._inventory_repository = inventory_repository
        self._audit_trail = audit_trail

    async def execute(self, command: DeleteProductCommand) -> bool:
        product = await self._product_repository.get_by_id(command.product_id)
        if not product:
            raise EntityNotFoundError.for_id("Product", command.product_id)
        if await self._inventory_repository.exists_by_product(product.id):
            raise InvalidStateError(
                f"Product {product.sku} has an inventory record and cannot be deleted"
            )

        deleted = await self._product_repository.delete(product.id)
        await self._audit_trail.record(
            "PRODUCT_DELETED",
            "Product",
            product.id,
            actor=command.actor,
            changes={"sku": product.sku},
        )
        logger.info("Deleted product %s (%s)", product.id, product.sku)
        return deleted

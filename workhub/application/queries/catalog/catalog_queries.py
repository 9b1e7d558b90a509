"""Catalogue queries: categories, single products and product listings."""

from dataclasses import dataclass
from decimal import Decimal
from logging import getLogger
from typing import Optional

from workhub.application.common.interfaces import Query, QueryHandler
from workhub.domain.entities.category import Category
from workhub.domain.entities.product import Product
from workhub.domain.exceptions import DomainValidationError, EntityNotFoundError
from workhub.domain.ports.repositories import CategoryRepository, ProductRepository
from workhub.domain.value_objects.page import Page, PageRequest

logger = getLogger(__name__)


@dataclass(frozen=True)
class ListCategoriesQuery(Query[list[Category]]):
    pass


@dataclass(frozen=True)
class GetCategoryQuery(Query[Category]):
    category_id: str


@dataclass(frozen=True)
class GetProductQuery(Query[Product]):
    product_id: Optional[str] = None
    sku: Optional[str] = None


@dataclass(frozen=True)
class ProductExistsQuery(Query[bool]):
    sku: str


@dataclass(frozen=True)
class SearchProductsQuery(Query[Page[Product]]):
    """
    With tags set, products carrying any of them are returned. Otherwise a
    category alone lists that category (which must exist); any other mix
    of query/category/price range runs a combined search.
    """

    page: PageRequest
    query: Optional[str] = None
    category: Optional[str] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    tags: tuple[str, ...] = ()


class ListCategoriesHandler(QueryHandler[list[Category]]):
    def __init__(self, category_repository: CategoryRepository):
        self._category_repository = category_repository

    async def execute(self, query: ListCategoriesQuery) -> list[Category]:
        return await self._category_repository.find_all()


class GetCategoryHandler(QueryHandler[Category]):
    def __init__(self, category_repository: CategoryRepository):
        self._category_repository = category_repository

    async def execute(self, query: GetCategoryQuery) -> Category:
        category = await self._category_repository.get_by_id(query.category_id)
        if not category:
            raise EntityNotFoundError.for_id("Category", query.category_id)
        return category


class GetProductHandler(QueryHandler[Product]):
    def __init__(self, product_repository: ProductRepository):
        self._product_repository = product_repository

    async def execute(self, query: GetProductQuery) -> Product:
        if query.product_id:
            product = await self._product_repository.get_by_id(query.product_id)
            if not product:
                raise EntityNotFoundError.for_id("Product", query.product_id)
            return product
        if query.sku:
            product = await self._product_repository.get_by_sku(query.sku)
            if not product:
                raise EntityNotFoundError(f"Product not found with SKU: {query.sku}")
            return product
        raise DomainValidationError("Either product_id or sku is required")


class ProductExistsHandler(QueryHandler[bool]):
    def __init__(self, product_repository: ProductRepository):
        self._product_repository = product_repository

    async def execute(self, query: ProductExistsQuery) -> bool:
        return await self._product_repository.exists_by_sku(query.sku)


class SearchProductsHandler(QueryHandler[Page[Product]]):
    def __init__(
        self,
        product_repository: ProductRepository,
        category_repository: CategoryRepository,
    ):
        self._product_repository = product_repository
        self._category_repository = category_repository

    async def execute(self, query: SearchProductsQuery) -> Page[Product]:
        if (
            query.min_price is not None
            and query.max_price is not None
            and query.min_price > query.max_price
        ):
            raise DomainValidationError("min_price must not exceed max_price")

        if query.tags:
            return await self._product_repository.find_by_tags(list(query.tags), query.page)

        if query.category:
            if not await self._category_repository.exists_by_name(query.category):
                raise EntityNotFoundError(f"Category not found: {query.category}")
            if not query.query and query.min_price is None and query.max_price is None:
                return await self._product_repository.find_by_category(
                    query.category, query.page
                )

        logger.debug("Product search query=%r category=%r", query.query, query.category)
        return await self._product_repository.search(
            query.query, query.category, query.min_price, query.max_price, query.page
        )

"""Catalogue queries."""

from .catalog_queries import (
    GetCategoryHandler,
    GetCategoryQuery,
    GetProductHandler,
    GetProductQuery,
    ListCategoriesHandler,
    ListCategoriesQuery,
    ProductExistsHandler,
    ProductExistsQuery,
    SearchProductsHandler,
    SearchProductsQuery,
)

__all__ = [
    "GetCategoryHandler",
    "GetCategoryQuery",
    "GetProductHandler",
    "GetProductQuery",
    "ListCategoriesHandler",
    "ListCategoriesQuery",
    "ProductExistsHandler",
    "ProductExistsQuery",
    "SearchProductsHandler",
    "SearchProductsQuery",
]

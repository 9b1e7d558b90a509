"""Catalogue commands: categories and products."""

from .category_commands import (
    CreateCategoryCommand,
    CreateCategoryHandler,
    DeleteCategoryCommand,
    DeleteCategoryHandler,
    UpdateCategoryCommand,
    UpdateCategoryHandler,
)
from .product_commands import (
    CreateProductCommand,
    CreateProductHandler,
    DeleteProductCommand,
    DeleteProductHandler,
    UpdateProductAttributesCommand,
    UpdateProductAttributesHandler,
    UpdateProductCommand,
    UpdateProductHandler,
    UpdateProductPriceCommand,
    UpdateProductPriceHandler,
)

__all__ = [
    "CreateCategoryCommand",
    "CreateCategoryHandler",
    "DeleteCategoryCommand",
    "DeleteCategoryHandler",
    "UpdateCategoryCommand",
    "UpdateCategoryHandler",
    "CreateProductCommand",
    "CreateProductHandler",
    "DeleteProductCommand",
    "DeleteProductHandler",
    "UpdateProductAttributesCommand",
    "UpdateProductAttributesHandler",
    "UpdateProductCommand",
    "UpdateProductHandler",
    "UpdateProductPriceCommand",
    "UpdateProductPriceHandler",
]

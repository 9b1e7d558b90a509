"""
MongoDB index definitions.

Uniqueness constraints (username, email, sku, ...) are enforced here as
well as checked in the command handlers, so concurrent creates cannot
both succeed. ``create_index`` is idempotent; this runs at startup.
"""

import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING, IndexModel

logger = logging.getLogger(__name__)

INDEXES: dict[str, list[IndexModel]] = {
    "users": [
        IndexModel([("username", ASCENDING)], unique=True),
        IndexModel([("email", ASCENDING)], unique=True),
        IndexModel([("roles", ASCENDING)]),
        IndexModel([("organization_id", ASCENDING)]),
    ],
    "profiles": [IndexModel([("user_id", ASCENDING)], unique=True)],
    "sessions": [
        IndexModel([("token", ASCENDING)], unique=True),
        IndexModel([("user_id", ASCENDING), ("active", ASCENDING)]),
        # Mongo removes a session once expires_at has passed
        IndexModel([("expires_at", ASCENDING)], expireAfterSeconds=0),
    ],
    "organizations": [IndexModel([("name", ASCENDING)], unique=True)],
    "projects": [
        IndexModel([("organization_id", ASCENDING)]),
        IndexModel([("team_members.user_id", ASCENDING)]),
        IndexModel([("status", ASCENDING), ("end_date", ASCENDING)]),
    ],
    "tasks": [
        IndexModel([("project_id", ASCENDING), ("status", ASCENDING)]),
        IndexModel([("assignee_id", ASCENDING)]),
        IndexModel([("due_date", ASCENDING)]),
    ],
    "documents": [
        IndexModel([("project_id", ASCENDING)]),
        IndexModel([("organization_id", ASCENDING)]),
    ],
    "comments": [
        IndexModel([("document_id", ASCENDING), ("created_at", ASCENDING)]),
        IndexModel([("parent_comment_id", ASCENDING)]),
    ],
    "notifications": [
        IndexModel([("user_id", ASCENDING), ("read", ASCENDING), ("created_at", DESCENDING)]),
    ],
    "audit_logs": [
        IndexModel([("entity_type", ASCENDING), ("entity_id", ASCENDING), ("timestamp", DESCENDING)]),
        IndexModel([("user_id", ASCENDING), ("timestamp", DESCENDING)]),
    ],
    "forms": [IndexModel([("name", ASCENDING)], unique=True)],
    "form_submissions": [
        IndexModel([("form_id", ASCENDING)]),
        IndexModel([("user_id", ASCENDING)]),
    ],
    "workflows": [
        IndexModel([("name", ASCENDING)], unique=True),
        IndexModel([("form_id", ASCENDING)]),
    ],
    "categories": [IndexModel([("name", ASCENDING)], unique=True)],
    "products": [
        IndexModel([("sku", ASCENDING)], unique=True),
        IndexModel([("category", ASCENDING), ("price", ASCENDING)]),
        IndexModel([("tags", ASCENDING)]),
    ],
    "inventory": [IndexModel([("product_id", ASCENDING)], unique=True)],
    "orders": [
        IndexModel([("order_number", ASCENDING)], unique=True),
        IndexModel([("user_id", ASCENDING), ("created_at", DESCENDING)]),
        IndexModel([("status", ASCENDING)]),
    ],
}


async def ensure_indexes(database: AsyncIOMotorDatabase) -> None:
    for collection_name, indexes in INDEXES.items():
        await database[collection_name].create_indexes(indexes)
    logger.info("[Mongo] Indexes ensured for %d collections", len(INDEXES))

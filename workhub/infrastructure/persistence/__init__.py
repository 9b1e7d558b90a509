"""
Persistence Layer - Database implementations.

Contains MongoDB (motor) repository implementations for domain ports.
"""

from workhub.infrastructure.persistence.indexes import ensure_indexes
from workhub.infrastructure.persistence.mongo_audit_log_repository import (
    MongoAuditLogRepository,
)
from workhub.infrastructure.persistence.mongo_category_repository import (
    MongoCategoryRepository,
)
from workhub.infrastructure.persistence.mongo_client import (
    close_mongo_client,
    create_mongo_client,
    get_database,
)
from workhub.infrastructure.persistence.mongo_comment_repository import (
    MongoCommentRepository,
)
from workhub.infrastructure.persistence.mongo_document_repository import (
    MongoDocumentRepository,
)
from workhub.infrastructure.persistence.mongo_form_repository import (
    MongoFormRepository,
    MongoFormSubmissionRepository,
)
from workhub.infrastructure.persistence.mongo_inventory_repository import (
    MongoInventoryRepository,
)
from workhub.infrastructure.persistence.mongo_notification_repository import (
    MongoNotificationRepository,
)
from workhub.infrastructure.persistence.mongo_order_repository import (
    MongoOrderRepository,
)
from workhub.infrastructure.persistence.mongo_organization_repository import (
    MongoOrganizationRepository,
)
from workhub.infrastructure.persistence.mongo_product_repository import (
    MongoProductRepository,
)
from workhub.infrastructure.persistence.mongo_profile_repository import (
    MongoProfileRepository,
)
from workhub.infrastructure.persistence.mongo_project_repository import (
    MongoProjectRepository,
)
from workhub.infrastructure.persistence.mongo_session_repository import (
    MongoSessionRepository,
)
from workhub.infrastructure.persistence.mongo_task_repository import (
    MongoTaskRepository,
)
from workhub.infrastructure.persistence.mongo_user_repository import (
    MongoUserRepository,
)
from workhub.infrastructure.persistence.mongo_workflow_repository import (
    MongoWorkflowRepository,
)

__all__ = [
    "ensure_indexes",
    "create_mongo_client",
    "get_database",
    "close_mongo_client",
    "MongoAuditLogRepository",
    "MongoCategoryRepository",
    "MongoCommentRepository",
    "MongoDocumentRepository",
    "MongoFormRepository",
    "MongoFormSubmissionRepository",
    "MongoInventoryRepository",
    "MongoNotificationRepository",
    "MongoOrderRepository",
    "MongoOrganizationRepository",
    "MongoProductRepository",
    "MongoProfileRepository",
    "MongoProjectRepository",
    "MongoSessionRepository",
    "MongoTaskRepository",
    "MongoUserRepository",
    "MongoWorkflowRepository",
]

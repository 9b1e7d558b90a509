"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the application layer needs
- Does NOT specify implementation (MongoDB, in-memory, etc.)

Infrastructure layer provides implementations.
"""

from workhub.domain.ports.repositories.audit_log_repository import AuditLogRepository
from workhub.domain.ports.repositories.category_repository import CategoryRepository
from workhub.domain.ports.repositories.comment_repository import CommentRepository
from workhub.domain.ports.repositories.document_repository import DocumentRepository
from workhub.domain.ports.repositories.form_repository import (
    FormRepository,
    FormSubmissionRepository,
)
from workhub.domain.ports.repositories.inventory_repository import InventoryRepository
from workhub.domain.ports.repositories.notification_repository import (
    NotificationRepository,
)
from workhub.domain.ports.repositories.order_repository import OrderRepository
from workhub.domain.ports.repositories.organization_repository import (
    OrganizationRepository,
)
from workhub.domain.ports.repositories.product_repository import ProductRepository
from workhub.domain.ports.repositories.profile_repository import ProfileRepository
from workhub.domain.ports.repositories.project_repository import ProjectRepository
from workhub.domain.ports.repositories.session_repository import SessionRepository
from workhub.domain.ports.repositories.task_repository import TaskRepository
from workhub.domain.ports.repositories.user_repository import UserRepository
from workhub.domain.ports.repositories.workflow_repository import WorkflowRepository

__all__ = [
    "AuditLogRepository",
    "CategoryRepository",
    "CommentRepository",
    "DocumentRepository",
    "FormRepository",
    "FormSubmissionRepository",
    "InventoryRepository",
    "NotificationRepository",
    "OrderRepository",
    "OrganizationRepository",
    "ProductRepository",
    "ProfileRepository",
    "ProjectRepository",
    "SessionRepository",
    "TaskRepository",
    "UserRepository",
    "WorkflowRepository",
]

"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Can change state over time
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from workhub.domain.entities.audit_log import AuditLog
from workhub.domain.entities.category import Category
from workhub.domain.entities.comment import Comment, CommentStatus
from workhub.domain.entities.document import Document
from workhub.domain.entities.form import (
    Form,
    FormField,
    FormSubmission,
    SubmissionStatus,
)
from workhub.domain.entities.inventory import Inventory
from workhub.domain.entities.notification import Notification, RelatedEntity
from workhub.domain.entities.order import Order, OrderItem, OrderStatus
from workhub.domain.entities.organization import Organization, OrganizationSettings
from workhub.domain.entities.product import Product
from workhub.domain.entities.profile import Profile
from workhub.domain.entities.project import Project, ProjectStatus, TeamMember
from workhub.domain.entities.session import Session
from workhub.domain.entities.task import Task, TaskPriority, TaskStatus
from workhub.domain.entities.user import Role, User
from workhub.domain.entities.workflow import Workflow, WorkflowStep

__all__ = [
    "AuditLog",
    "Category",
    "Comment",
    "CommentStatus",
    "Document",
    "Form",
    "FormField",
    "FormSubmission",
    "SubmissionStatus",
    "Inventory",
    "Notification",
    "RelatedEntity",
    "Order",
    "OrderItem",
    "OrderStatus",
    "Organization",
    "OrganizationSettings",
    "Product",
    "Profile",
    "Project",
    "ProjectStatus",
    "TeamMember",
    "Session",
    "Task",
    "TaskPriority",
    "TaskStatus",
    "Role",
    "User",
    "Workflow",
    "WorkflowStep",
]

"""
In-memory implementations of the repository ports.

Entities are deep-copied on the way in and out, so a handler that mutates
an entity without saving it leaves the store untouched (same as MongoDB).
"""

import copy
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Optional

from workhub.domain.entities.audit_log import AuditLog
from workhub.domain.entities.category import Category
from workhub.domain.entities.comment import Comment
from workhub.domain.entities.document import Document
from workhub.domain.entities.form import Form, FormSubmission
from workhub.domain.entities.inventory import Inventory
from workhub.domain.entities.notification import Notification
from workhub.domain.entities.order import Order, OrderStatus
from workhub.domain.entities.organization import Organization
from workhub.domain.entities.product import Product
from workhub.domain.entities.profile import Profile
from workhub.domain.entities.project import Project, ProjectStatus
from workhub.domain.entities.session import Session
from workhub.domain.entities.task import CLOSED_TASK_STATUSES, Task, TaskPriority, TaskStatus
from workhub.domain.entities.user import User
from workhub.domain.entities.workflow import Workflow
from workhub.domain.ports.repositories import (
    AuditLogRepository,
    CategoryRepository,
    CommentRepository,
    DocumentRepository,
    FormRepository,
    FormSubmissionRepository,
    InventoryRepository,
    NotificationRepository,
    OrderRepository,
    OrganizationRepository,
    ProductRepository,
    ProfileRepository,
    ProjectRepository,
    SessionRepository,
    TaskRepository,
    UserRepository,
    WorkflowRepository,
)
from workhub.domain.value_objects.email_address import EmailAddress
from workhub.domain.value_objects.page import Page, PageRequest, requested_sort_field
from workhub.infrastructure.security import WerkzeugPasswordHasher

# Cheap hashing keeps the suite fast; scrypt is the production default
TEST_HASHER = WerkzeugPasswordHasher(method="pbkdf2:sha256:1000")
DEFAULT_PASSWORD = "correct-horse-1"


def _contains(value: Optional[str], term: str) -> bool:
    return value is not None and term.lower() in value.lower()


class InMemoryStore:
    """Dict keyed by id plus the paging/sorting the Mongo base class does."""

    default_sort: tuple[str, bool] = ("created_at", True)

    def __init__(self):
        self.items: dict[str, Any] = {}

    def add(self, entity: Any) -> Any:
        """Seed an entity synchronously (test setup)."""
        self._put(entity)
        return entity

    def _put(self, entity: Any, key: Optional[str] = None) -> None:
        self.items[key or entity.id] = copy.deepcopy(entity)

    def _get(self, key: str) -> Optional[Any]:
        entity = self.items.get(key)
        return copy.deepcopy(entity) if entity is not None else None

    def _select(self, predicate: Callable[[Any], bool] = lambda _: True) -> list[Any]:
        return [copy.deepcopy(e) for e in self.items.values() if predicate(e)]

    def _first(self, predicate: Callable[[Any], bool]) -> Optional[Any]:
        matches = self._select(predicate)
        return matches[0] if matches else None

    def _remove(self, predicate: Callable[[Any], bool]) -> int:
        keys = [key for key, entity in self.items.items() if predicate(entity)]
        for key in keys:
            del self.items[key]
        return len(keys)

    def _sorted(self, entities: list[Any], page: Optional[PageRequest] = None) -> list[Any]:
        requested = requested_sort_field(page, self.sortable_fields)
        if requested:
            field_name, descending = requested, page.descending
        else:
            field_name, descending = self.default_sort

        def key(entity):
            value = getattr(entity, field_name, None)
            if hasattr(value, "value"):
                value = value.value
            return (value is None, value if value is not None else 0)

        return sorted(entities, key=key, reverse=descending)

    def _page(self, predicate: Callable[[Any], bool], page: PageRequest) -> Page:
        matches = self._sorted(self._select(predicate), page)
        return Page.of(matches[page.offset : page.offset + page.size], len(matches), page)


class InMemoryUserRepository(InMemoryStore, UserRepository):
    default_sort = ("username", False)

    async def get_by_id(self, user_id: str) -> Optional[User]:
        return self._get(user_id)

    async def get_by_email(self, email: EmailAddress) -> Optional[User]:
        return self._first(lambda u: u.email.value == email.value)

    async def get_by_username(self, username: str) -> Optional[User]:
        return self._first(lambda u: u.username == username)

    async def exists_by_id(self, user_id: str) -> bool:
        return user_id in self.items

    async def exists_by_email(self, email: EmailAddress) -> bool:
        return await self.get_by_email(email) is not None

    async def exists_by_username(self, username: str) -> bool:
        return await self.get_by_username(username) is not None

    async def find_all(self, page: PageRequest) -> Page[User]:
        return self._page(lambda _: True, page)

    async def find_by_role(self, role: str, page: PageRequest) -> Page[User]:
        return self._page(lambda u: role in u.roles, page)

    async def find_by_organization(self, organization_id: str, page: PageRequest) -> Page[User]:
        return self._page(lambda u: u.organization_id == organization_id, page)

    async def search(self, term: str, page: PageRequest) -> Page[User]:
        return self._page(
            lambda u: any(
                _contains(v, term) for v in (u.username, u.email.value, u.first_name, u.last_name)
            ),
            page,
        )

    async def save(self, user: User) -> None:
        self._put(user)

    async def delete(self, user_id: str) -> bool:
        return self._remove(lambda u: u.id == user_id) > 0


class InMemoryProfileRepository(InMemoryStore, ProfileRepository):
    async def get_by_user_id(self, user_id: str) -> Optional[Profile]:
        return self._first(lambda p: p.user_id == user_id)

    async def save(self, profile: Profile) -> None:
        self._put(profile)

    async def delete_by_user_id(self, user_id: str) -> int:
        return self._remove(lambda p: p.user_id == user_id)


class InMemorySessionRepository(InMemoryStore, SessionRepository):
    async def get_by_token(self, token: str) -> Optional[Session]:
        return self._first(lambda s: s.token == token)

    async def find_active_by_user(self, user_id: str) -> list[Session]:
        return self._select(lambda s: s.user_id == user_id and s.active)

    async def save(self, session: Session) -> None:
        self._put(session)

    async def invalidate_by_user(self, user_id: str, keep_session_id: Optional[str] = None) -> int:
        count = 0
        for session in self.items.values():
            if session.user_id == user_id and session.active and session.id != keep_session_id:
                session.active = False
                count += 1
        return count

    async def delete_by_user(self, user_id: str) -> int:
        return self._remove(lambda s: s.user_id == user_id)


class InMemoryOrganizationRepository(InMemoryStore, OrganizationRepository):
    default_sort = ("name", False)

    async def get_by_id(self, organization_id: str) -> Optional[Organization]:
        return self._get(organization_id)

    async def exists_by_id(self, organization_id: str) -> bool:
        return organization_id in self.items

    async def exists_by_name(self, name: str) -> bool:
        return self._first(lambda o: o.name == name) is not None

    async def find_all(self, page: PageRequest) -> Page[Organization]:
        return self._page(lambda _: True, page)

    async def search_by_name(self, term: str, page: PageRequest) -> Page[Organization]:
        return self._page(lambda o: _contains(o.name, term), page)

    async def save(self, organization: Organization) -> None:
        self._put(organization)

    async def delete(self, organization_id: str) -> bool:
        return self._remove(lambda o: o.id == organization_id) > 0


class InMemoryProjectRepository(InMemoryStore, ProjectRepository):
    async def get_by_id(self, project_id: str) -> Optional[Project]:
        return self._get(project_id)

    async def exists_by_id(self, project_id: str) -> bool:
        return project_id in self.items

    async def find_all(self, page: PageRequest) -> Page[Project]:
        return self._page(lambda _: True, page)

    async def find_ids_by_organization(self, organization_id: str) -> list[str]:
        return [p.id for p in self._select(lambda p: p.organization_id == organization_id)]

    async def find_by_organization(self, organization_id: str, page: PageRequest) -> Page[Project]:
        return self._page(lambda p: p.organization_id == organization_id, page)

    async def find_by_status(self, status: ProjectStatus, page: PageRequest) -> Page[Project]:
        return self._page(lambda p: p.status == status, page)

    async def find_by_member(self, user_id: str, page: PageRequest) -> Page[Project]:
        return self._page(lambda p: user_id in p.member_ids, page)

    async def search(self, term: str, page: PageRequest) -> Page[Project]:
        return self._page(
            lambda p: _contains(p.name, term) or _contains(p.description, term), page
        )

    async def find_ending_before(
        self, deadline: datetime, excluded_statuses: list[ProjectStatus]
    ) -> list[Project]:
        return self._select(
            lambda p: p.end_date is not None
            and p.end_date < deadline
            and p.status not in excluded_statuses
        )

    async def save(self, project: Project) -> None:
        self._put(project)

    async def delete(self, project_id: str) -> bool:
        return self._remove(lambda p: p.id == project_id) > 0

    async def delete_by_organization(self, organization_id: str) -> int:
        return self._remove(lambda p: p.organization_id == organization_id)


class InMemoryTaskRepository(InMemoryStore, TaskRepository):
    async def get_by_id(self, task_id: str) -> Optional[Task]:
        return self._get(task_id)

    async def find_all(self, page: PageRequest) -> Page[Task]:
        return self._page(lambda _: True, page)

    async def find_by_project(self, project_id: str, page: PageRequest) -> Page[Task]:
        return self._page(lambda t: t.project_id == project_id, page)

    async def find_by_assignee(self, user_id: str, page: PageRequest) -> Page[Task]:
        return self._page(lambda t: t.assignee_id == user_id, page)

    async def find_by_status(self, status: TaskStatus, page: PageRequest) -> Page[Task]:
        return self._page(lambda t: t.status == status, page)

    async def find_by_priority(self, priority: TaskPriority, page: PageRequest) -> Page[Task]:
        return self._page(lambda t: t.priority == priority, page)

    async def find_overdue(self, now: datetime, page: PageRequest) -> Page[Task]:
        return self._page(
            lambda t: t.due_date is not None
            and t.due_date < now
            and t.status not in CLOSED_TASK_STATUSES,
            page,
        )

    async def search(self, term: str, page: PageRequest) -> Page[Task]:
        return self._page(
            lambda t: _contains(t.title, term) or _contains(t.description, term), page
        )

    async def count_by_project(self, project_id: str) -> int:
        return len(self._select(lambda t: t.project_id == project_id))

    async def count_by_project_and_status(self, project_id: str, status: TaskStatus) -> int:
        return len(self._select(lambda t: t.project_id == project_id and t.status == status))

    async def unassign_user(self, user_id: str) -> int:
        count = 0
        for task in self.items.values():
            if task.assignee_id == user_id:
                task.assignee_id = None
                count += 1
        return count

    async def save(self, task: Task) -> None:
        self._put(task)

    async def delete(self, task_id: str) -> bool:
        return self._remove(lambda t: t.id == task_id) > 0

    async def delete_by_project(self, project_id: str) -> int:
        return self._remove(lambda t: t.project_id == project_id)


class InMemoryDocumentRepository(InMemoryStore, DocumentRepository):
    async def get_by_id(self, document_id: str) -> Optional[Document]:
        return self._get(document_id)

    async def exists_by_id(self, document_id: str) -> bool:
        return document_id in self.items

    async def find_all(self, page: PageRequest) -> Page[Document]:
        return self._page(lambda _: True, page)

    async def find_by_project(self, project_id: str, page: PageRequest) -> Page[Document]:
        return self._page(lambda d: d.project_id == project_id, page)

    async def find_by_organization(self, organization_id: str, page: PageRequest) -> Page[Document]:
        return self._page(lambda d: d.organization_id == organization_id, page)

    async def find_by_type(self, type: str, page: PageRequest) -> Page[Document]:
        return self._page(lambda d: d.type == type, page)

    async def search(self, term: str, page: PageRequest) -> Page[Document]:
        return self._page(
            lambda d: _contains(d.name, term) or _contains(d.description, term), page
        )

    async def find_ids_by_project(self, project_id: str) -> list[str]:
        return [d.id for d in self._select(lambda d: d.project_id == project_id)]

    async def find_ids_by_organization(self, organization_id: str) -> list[str]:
        return [d.id for d in self._select(lambda d: d.organization_id == organization_id)]

    async def save(self, document: Document) -> None:
        self._put(document)

    async def delete(self, document_id: str) -> bool:
        return self._remove(lambda d: d.id == document_id) > 0

    async def delete_by_project(self, project_id: str) -> int:
        return self._remove(lambda d: d.project_id == project_id)

    async def delete_by_organization(self, organization_id: str) -> int:
        return self._remove(lambda d: d.organization_id == organization_id)


class InMemoryCommentRepository(InMemoryStore, CommentRepository):
    default_sort = ("created_at", False)

    async def get_by_id(self, comment_id: str) -> Optional[Comment]:
        return self._get(comment_id)

    async def find_by_document(self, document_id: str, page: PageRequest) -> Page[Comment]:
        return self._page(lambda c: c.document_id == document_id, page)

    async def find_replies(self, parent_comment_id: str) -> list[Comment]:
        return self._sorted(self._select(lambda c: c.parent_comment_id == parent_comment_id))

    async def save(self, comment: Comment) -> None:
        self._put(comment)

    async def delete(self, comment_id: str) -> bool:
        return self._remove(lambda c: c.id == comment_id) > 0

    async def delete_replies(self, parent_comment_id: str) -> int:
        return self._remove(lambda c: c.parent_comment_id == parent_comment_id)

    async def delete_by_document(self, document_id: str) -> int:
        return self._remove(lambda c: c.document_id == document_id)


class InMemoryNotificationRepository(InMemoryStore, NotificationRepository):
    async def get_by_id(self, notification_id: str) -> Optional[Notification]:
        return self._get(notification_id)

    async def find_by_user(
        self, user_id: str, unread_only: bool, page: PageRequest
    ) -> Page[Notification]:
        return self._page(
            lambda n: n.user_id == user_id and (not unread_only or not n.read), page
        )

    async def count_unread(self, user_id: str) -> int:
        return len(self._select(lambda n: n.user_id == user_id and not n.read))

    async def mark_all_read(self, user_id: str) -> int:
        count = 0
        for notification in self.items.values():
            if notification.user_id == user_id and not notification.read:
                notification.read = True
                count += 1
        return count

    async def save(self, notification: Notification) -> None:
        self._put(notification)

    async def delete(self, notification_id: str) -> bool:
        return self._remove(lambda n: n.id == notification_id) > 0

    async def delete_by_user(self, user_id: str) -> int:
        return self._remove(lambda n: n.user_id == user_id)


class InMemoryAuditLogRepository(InMemoryStore, AuditLogRepository):
    default_sort = ("timestamp", True)

    async def append(self, entry: AuditLog) -> None:
        self._put(entry)

    async def find_by_entity(
        self, entity_type: str, entity_id: str, page: PageRequest
    ) -> Page[AuditLog]:
        return self._page(
            lambda a: a.entity_type == entity_type and a.entity_id == entity_id, page
        )

    async def find_by_user(self, user_id: str, page: PageRequest) -> Page[AuditLog]:
        return self._page(lambda a: a.user_id == user_id, page)


class InMemoryFormRepository(InMemoryStore, FormRepository):
    async def get_by_id(self, form_id: str) -> Optional[Form]:
        return self._get(form_id)

    async def exists_by_name(self, name: str) -> bool:
        return self._first(lambda f: f.name == name) is not None

    async def find_all(self, active_only: bool, page: PageRequest) -> Page[Form]:
        return self._page(lambda f: not active_only or f.active, page)

    async def save(self, form: Form) -> None:
        self._put(form)

    async def delete(self, form_id: str) -> bool:
        return self._remove(lambda f: f.id == form_id) > 0


class InMemoryFormSubmissionRepository(InMemoryStore, FormSubmissionRepository):
    default_sort = ("submitted_at", True)

    async def get_by_id(self, submission_id: str) -> Optional[FormSubmission]:
        return self._get(submission_id)

    async def find_by_form(self, form_id: str, page: PageRequest) -> Page[FormSubmission]:
        return self._page(lambda s: s.form_id == form_id, page)

    async def find_by_user(self, user_id: str, page: PageRequest) -> Page[FormSubmission]:
        return self._page(lambda s: s.user_id == user_id, page)

    async def save(self, submission: FormSubmission) -> None:
        self._put(submission)

    async def delete_by_form(self, form_id: str) -> int:
        return self._remove(lambda s: s.form_id == form_id)


class InMemoryWorkflowRepository(InMemoryStore, WorkflowRepository):
    async def get_by_id(self, workflow_id: str) -> Optional[Workflow]:
        return self._get(workflow_id)

    async def exists_by_name(self, name: str) -> bool:
        return self._first(lambda w: w.name == name) is not None

    async def find_all(self, page: PageRequest) -> Page[Workflow]:
        return self._page(lambda _: True, page)

    async def find_by_form(self, form_id: str) -> list[Workflow]:
        return self._sorted(self._select(lambda w: w.form_id == form_id))

    async def save(self, workflow: Workflow) -> None:
        self._put(workflow)

    async def delete(self, workflow_id: str) -> bool:
        return self._remove(lambda w: w.id == workflow_id) > 0


class InMemoryCategoryRepository(InMemoryStore, CategoryRepository):
    default_sort = ("name", False)

    async def get_by_id(self, category_id: str) -> Optional[Category]:
        return self._get(category_id)

    async def get_by_name(self, name: str) -> Optional[Category]:
        return self._first(lambda c: c.name == name)

    async def exists_by_name(self, name: str) -> bool:
        return await self.get_by_name(name) is not None

    async def find_all(self) -> list[Category]:
        return self._sorted(self._select())

    async def save(self, category: Category) -> None:
        self._put(category)

    async def delete(self, category_id: str) -> bool:
        return self._remove(lambda c: c.id == category_id) > 0


class InMemoryProductRepository(InMemoryStore, ProductRepository):
    async def get_by_id(self, product_id: str) -> Optional[Product]:
        return self._get(product_id)

    async def get_by_sku(self, sku: str) -> Optional[Product]:
        return self._first(lambda p: p.sku == sku)

    async def exists_by_sku(self, sku: str) -> bool:
        return await self.get_by_sku(sku) is not None

    async def find_by_category(self, category: str, page: PageRequest) -> Page[Product]:
        return self._page(lambda p: p.category == category, page)

    async def find_by_tags(self, tags: list[str], page: PageRequest) -> Page[Product]:
        return self._page(lambda p: any(tag in p.tags for tag in tags), page)

    async def search(
        self,
        query: Optional[str],
        category: Optional[str],
        min_price: Optional[Decimal],
        max_price: Optional[Decimal],
        page: PageRequest,
    ) -> Page[Product]:
        def matches(p: Product) -> bool:
            if query and not any(_contains(v, query) for v in (p.name, p.description, p.sku)):
                return False
            if category and p.category != category:
                return False
            if min_price is not None and p.price < min_price:
                return False
            if max_price is not None and p.price > max_price:
                return False
            return True

        return self._page(matches, page)

    async def count_by_category(self, category: str) -> int:
        return len(self._select(lambda p: p.category == category))

    async def save(self, product: Product) -> None:
        self._put(product)

    async def delete(self, product_id: str) -> bool:
        return self._remove(lambda p: p.id == product_id) > 0


class InMemoryInventoryRepository(InMemoryStore, InventoryRepository):
    async def get_by_product(self, product_id: str) -> Optional[Inventory]:
        return self._first(lambda i: i.product_id == product_id)

    async def exists_by_product(self, product_id: str) -> bool:
        return await self.get_by_product(product_id) is not None

    async def find_low_stock(self) -> list[Inventory]:
        return self._select(lambda i: i.is_low_stock)

    async def save(self, inventory: Inventory) -> None:
        self._put(inventory)


class InMemoryOrderRepository(InMemoryStore, OrderRepository):
    async def get_by_id(self, order_id: str) -> Optional[Order]:
        return self._get(order_id)

    async def get_by_order_number(self, order_number: str) -> Optional[Order]:
        return self._first(lambda o: o.order_number == order_number)

    async def find_by_user(self, user_id: str, page: PageRequest) -> Page[Order]:
        return self._page(lambda o: o.user_id == user_id, page)

    async def find_all_by_user(self, user_id: str) -> list[Order]:
        return self._sorted(self._select(lambda o: o.user_id == user_id))

    async def find_all(self, page: PageRequest) -> Page[Order]:
        return self._page(lambda _: True, page)

    async def find_by_status(self, status: OrderStatus, page: PageRequest) -> Page[Order]:
        return self._page(lambda o: o.status == status, page)

    async def save(self, order: Order) -> None:
        self._put(order)


class FakeRepositories:
    """One instance of every in-memory repository, shared by a test."""

    def __init__(self):
        self.users = InMemoryUserRepository()
        self.profiles = InMemoryProfileRepository()
        self.sessions = InMemorySessionRepository()
        self.organizations = InMemoryOrganizationRepository()
        self.projects = InMemoryProjectRepository()
        self.tasks = InMemoryTaskRepository()
        self.documents = InMemoryDocumentRepository()
        self.comments = InMemoryCommentRepository()
        self.notifications = InMemoryNotificationRepository()
        self.audit_logs = InMemoryAuditLogRepository()
        self.forms = InMemoryFormRepository()
        self.form_submissions = InMemoryFormSubmissionRepository()
        self.workflows = InMemoryWorkflowRepository()
        self.categories = InMemoryCategoryRepository()
        self.products = InMemoryProductRepository()
        self.inventory = InMemoryInventoryRepository()
        self.orders = InMemoryOrderRepository()

"""
API Routers - FastAPI endpoint definitions.
"""

from workhub.presentation.api.audit_logs import router as audit_logs_router
from workhub.presentation.api.auth import limiter
from workhub.presentation.api.auth import router as auth_router
from workhub.presentation.api.categories import router as categories_router
from workhub.presentation.api.comments import router as comments_router
from workhub.presentation.api.documents import router as documents_router
from workhub.presentation.api.forms import router as forms_router
from workhub.presentation.api.inventory import router as inventory_router
from workhub.presentation.api.metrics import router as metrics_router
from workhub.presentation.api.notifications import router as notifications_router
from workhub.presentation.api.orders import router as orders_router
from workhub.presentation.api.organizations import router as organizations_router
from workhub.presentation.api.products import router as products_router
from workhub.presentation.api.projects import router as projects_router
from workhub.presentation.api.tasks import router as tasks_router
from workhub.presentation.api.users import router as users_router
from workhub.presentation.api.workflows import router as workflows_router

__all__ = [
    "limiter",
    "auth_router",
    "users_router",
    "organizations_router",
    "projects_router",
    "tasks_router",
    "documents_router",
    "comments_router",
    "notifications_router",
    "audit_logs_router",
    "forms_router",
    "workflows_router",
    "categories_router",
    "products_router",
    "inventory_router",
    "orders_router",
    "metrics_router",
]

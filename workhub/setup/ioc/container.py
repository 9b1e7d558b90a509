"""
Dishka DI Container Setup.

Guidelines:
- Registers all dependencies (database, repositories, services, handlers)
- Maps abstract ports to concrete implementations
- Manages lifecycle (APP = singleton, REQUEST = per-request)

Flow:
  Container → provides → MongoProjectRepository → to → CreateProjectHandler
                                  ↓
                          uses ProjectRepository port

Tests build the same container with an extra provider that overrides the
repository ports with in-memory fakes (see tests/conftest.py); the Mongo
client is then never created.
"""

from typing import AsyncIterable

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide, provide_all
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from workhub.application.commands.auth import (
    ExtendSessionHandler,
    LoginHandler,
    LogoutHandler,
)
from workhub.application.commands.catalog import (
    CreateCategoryHandler,
    CreateProductHandler,
    DeleteCategoryHandler,
    DeleteProductHandler,
    UpdateCategoryHandler,
    UpdateProductAttributesHandler,
    UpdateProductHandler,
    UpdateProductPriceHandler,
)
from workhub.application.commands.comments import (
    CreateCommentHandler,
    DeleteCommentHandler,
    EditCommentHandler,
    ModerateCommentHandler,
    ReactToCommentHandler,
)
from workhub.application.commands.documents import (
    CreateDocumentHandler,
    DeleteDocumentHandler,
    UpdateDocumentHandler,
)
from workhub.application.commands.forms import (
    CreateFormHandler,
    DeleteFormHandler,
    SetFormActiveHandler,
    SubmitFormHandler,
    UpdateFormHandler,
    UpdateSubmissionStatusHandler,
)
from workhub.application.commands.inventory import (
    CreateInventoryHandler,
    RestockInventoryHandler,
)
from workhub.application.commands.notifications import (
    CreateNotificationHandler,
    DeleteNotificationHandler,
    MarkAllNotificationsReadHandler,
    MarkNotificationReadHandler,
)
from workhub.application.commands.orders import (
    CancelOrderHandler,
    PlaceOrderHandler,
    UpdateOrderStatusHandler,
    UpdateShippingAddressHandler,
)
from workhub.application.commands.organizations import (
    CreateOrganizationHandler,
    DeleteOrganizationHandler,
    UpdateOrganizationHandler,
)
from workhub.application.commands.projects import (
    AddProjectMemberHandler,
    CreateProjectHandler,
    DeleteProjectHandler,
    RemoveProjectMemberHandler,
    UpdateProjectHandler,
    UpdateProjectStatusHandler,
)
from workhub.application.commands.tasks import (
    AssignTaskHandler,
    CreateTaskHandler,
    DeleteTaskHandler,
    UpdateTaskHandler,
    UpdateTaskStatusHandler,
)
from workhub.application.commands.users import (
    ChangePasswordHandler,
    CreateUserHandler,
    DeleteUserHandler,
    SetUserActiveHandler,
    UpdateProfileHandler,
    UpdateUserHandler,
)
from workhub.application.commands.workflows import (
    CreateWorkflowHandler,
    DeleteWorkflowHandler,
    SetWorkflowActiveHandler,
    UpdateWorkflowHandler,
)
from workhub.application.common.audit import AuditTrail
from workhub.application.common.notifier import Notifier
from workhub.application.queries.audit_logs import ListAuditLogsHandler
from workhub.application.queries.auth import AuthenticateSessionHandler
from workhub.application.queries.catalog import (
    GetCategoryHandler,
    GetProductHandler,
    ListCategoriesHandler,
    ProductExistsHandler,
    SearchProductsHandler,
)
from workhub.application.queries.comments import (
    ListCommentRepliesHandler,
    ListDocumentCommentsHandler,
)
from workhub.application.queries.documents import GetDocumentHandler, ListDocumentsHandler
from workhub.application.queries.forms import (
    GetFormHandler,
    ListFormsHandler,
    ListSubmissionsHandler,
)
from workhub.application.queries.inventory import GetInventoryHandler, ListLowStockHandler
from workhub.application.queries.notifications import (
    CountUnreadNotificationsHandler,
    ListNotificationsHandler,
)
from workhub.application.queries.orders import (
    GetOrderHandler,
    ListOrdersHandler,
    UserOrderSummaryHandler,
)
from workhub.application.queries.organizations import (
    GetOrganizationHandler,
    ListOrganizationsHandler,
)
from workhub.application.queries.projects import (
    GetProjectHandler,
    ListProjectsHandler,
    ProjectsEndingSoonHandler,
)
from workhub.application.queries.tasks import (
    GetTaskHandler,
    ListTasksHandler,
    TaskStatisticsHandler,
)
from workhub.application.queries.users import (
    GetProfileHandler,
    GetUserHandler,
    ListUsersHandler,
)
from workhub.application.queries.workflows import (
    GetWorkflowHandler,
    ListFormWorkflowsHandler,
    ListWorkflowsHandler,
)
from workhub.application.services import InventoryAdjuster
from workhub.domain.ports.password_hasher import PasswordHasher
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
from workhub.infrastructure.persistence import (
    MongoAuditLogRepository,
    MongoCategoryRepository,
    MongoCommentRepository,
    MongoDocumentRepository,
    MongoFormRepository,
    MongoFormSubmissionRepository,
    MongoInventoryRepository,
    MongoNotificationRepository,
    MongoOrderRepository,
    MongoOrganizationRepository,
    MongoProductRepository,
    MongoProfileRepository,
    MongoProjectRepository,
    MongoSessionRepository,
    MongoTaskRepository,
    MongoUserRepository,
    MongoWorkflowRepository,
    close_mongo_client,
    create_mongo_client,
    ensure_indexes,
    get_database,
)
from workhub.infrastructure.security import WerkzeugPasswordHasher


class AppProvider(Provider):
    """
    Application dependency provider.

    Registers all dependencies and their implementations.
    """

    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_mongo_client(self) -> AsyncIterable[AsyncIOMotorClient]:
        """
        Provide the motor client (singleton, app-scoped).

        - Generator factory: code after ``yield`` runs on container.close()
        """
        client = create_mongo_client()
        yield client
        close_mongo_client(client)

    @provide(scope=Scope.APP)
    async def get_mongo_database(self, client: AsyncIOMotorClient) -> AsyncIOMotorDatabase:
        """Provide the database; indexes are ensured once, on first use."""
        database = get_database(client)
        await ensure_indexes(database)
        return database

    # ==================== SECURITY ====================

    @provide(scope=Scope.APP)
    def get_password_hasher(self) -> PasswordHasher:
        return WerkzeugPasswordHasher()

    # ==================== REPOSITORIES ====================
    # Return type is the port (abstract); implementation is the Mongo class.

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, database: AsyncIOMotorDatabase) -> UserRepository:
        return MongoUserRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, database: AsyncIOMotorDatabase) -> ProfileRepository:
        return MongoProfileRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_session_repository(self, database: AsyncIOMotorDatabase) -> SessionRepository:
        return MongoSessionRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_organization_repository(
        self, database: AsyncIOMotorDatabase
    ) -> OrganizationRepository:
        return MongoOrganizationRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_project_repository(self, database: AsyncIOMotorDatabase) -> ProjectRepository:
        return MongoProjectRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_task_repository(self, database: AsyncIOMotorDatabase) -> TaskRepository:
        return MongoTaskRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_document_repository(self, database: AsyncIOMotorDatabase) -> DocumentRepository:
        return MongoDocumentRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, database: AsyncIOMotorDatabase) -> CommentRepository:
        return MongoCommentRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(
        self, database: AsyncIOMotorDatabase
    ) -> NotificationRepository:
        return MongoNotificationRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_audit_log_repository(self, database: AsyncIOMotorDatabase) -> AuditLogRepository:
        return MongoAuditLogRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_form_repository(self, database: AsyncIOMotorDatabase) -> FormRepository:
        return MongoFormRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_form_submission_repository(
        self, database: AsyncIOMotorDatabase
    ) -> FormSubmissionRepository:
        return MongoFormSubmissionRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_workflow_repository(self, database: AsyncIOMotorDatabase) -> WorkflowRepository:
        return MongoWorkflowRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_category_repository(self, database: AsyncIOMotorDatabase) -> CategoryRepository:
        return MongoCategoryRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_product_repository(self, database: AsyncIOMotorDatabase) -> ProductRepository:
        return MongoProductRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_inventory_repository(self, database: AsyncIOMotorDatabase) -> InventoryRepository:
        return MongoInventoryRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_order_repository(self, database: AsyncIOMotorDatabase) -> OrderRepository:
        return MongoOrderRepository(database)

    # ==================== SERVICES ====================
    # Constructor-injected: dishka reads the __init__ type hints.

    services = provide_all(AuditTrail, Notifier, InventoryAdjuster, scope=Scope.REQUEST)

    # ==================== HANDLERS ====================

    identity_handlers = provide_all(
        LoginHandler,
        LogoutHandler,
        ExtendSessionHandler,
        AuthenticateSessionHandler,
        CreateUserHandler,
        UpdateUserHandler,
        DeleteUserHandler,
        ChangePasswordHandler,
        SetUserActiveHandler,
        UpdateProfileHandler,
        GetUserHandler,
        ListUsersHandler,
        GetProfileHandler,
        CreateOrganizationHandler,
        UpdateOrganizationHandler,
        DeleteOrganizationHandler,
        GetOrganizationHandler,
        ListOrganizationsHandler,
        scope=Scope.REQUEST,
    )

    project_handlers = provide_all(
        CreateProjectHandler,
        UpdateProjectHandler,
        DeleteProjectHandler,
        AddProjectMemberHandler,
        RemoveProjectMemberHandler,
        UpdateProjectStatusHandler,
        GetProjectHandler,
        ListProjectsHandler,
        ProjectsEndingSoonHandler,
        CreateTaskHandler,
        UpdateTaskHandler,
        DeleteTaskHandler,
        UpdateTaskStatusHandler,
        AssignTaskHandler,
        GetTaskHandler,
        ListTasksHandler,
        TaskStatisticsHandler,
        CreateDocumentHandler,
        UpdateDocumentHandler,
        DeleteDocumentHandler,
        GetDocumentHandler,
        ListDocumentsHandler,
        CreateCommentHandler,
        EditCommentHandler,
        ModerateCommentHandler,
        ReactToCommentHandler,
        DeleteCommentHandler,
        ListDocumentCommentsHandler,
        ListCommentRepliesHandler,
        scope=Scope.REQUEST,
    )

    activity_handlers = provide_all(
        CreateNotificationHandler,
        MarkNotificationReadHandler,
        MarkAllNotificationsReadHandler,
        DeleteNotificationHandler,
        ListNotificationsHandler,
        CountUnreadNotificationsHandler,
        ListAuditLogsHandler,
        scope=Scope.REQUEST,
    )

    form_handlers = provide_all(
        CreateFormHandler,
        UpdateFormHandler,
        SetFormActiveHandler,
        DeleteFormHandler,
        SubmitFormHandler,
        UpdateSubmissionStatusHandler,
        GetFormHandler,
        ListFormsHandler,
        ListSubmissionsHandler,
        CreateWorkflowHandler,
        UpdateWorkflowHandler,
        SetWorkflowActiveHandler,
        DeleteWorkflowHandler,
        GetWorkflowHandler,
        ListWorkflowsHandler,
        ListFormWorkflowsHandler,
        scope=Scope.REQUEST,
    )

    commerce_handlers = provide_all(
        CreateCategoryHandler,
        UpdateCategoryHandler,
        DeleteCategoryHandler,
        ListCategoriesHandler,
        GetCategoryHandler,
        CreateProductHandler,
        UpdateProductHandler,
        UpdateProductPriceHandler,
        UpdateProductAttributesHandler,
        DeleteProductHandler,
        GetProductHandler,
        ProductExistsHandler,
        SearchProductsHandler,
        CreateInventoryHandler,
        RestockInventoryHandler,
        GetInventoryHandler,
        ListLowStockHandler,
        PlaceOrderHandler,
        UpdateOrderStatusHandler,
        UpdateShippingAddressHandler,
        CancelOrderHandler,
        GetOrderHandler,
        ListOrdersHandler,
        UserOrderSummaryHandler,
        scope=Scope.REQUEST,
    )


def create_container(*extra_providers: Provider) -> AsyncContainer:
    """
    Create and configure the DI container.

    Providers passed in ``extra_providers`` are registered after AppProvider
    and override its factories for the same types.
    """
    return make_async_container(AppProvider(), *extra_providers)

"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- common.py → ApiResponse envelope, PageResponse, AddressDTO
- identity.py → UserDTO, ProfileDTO, SessionDTO
- organization.py, project.py, document.py, activity.py, forms.py, commerce.py

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from workhub.application.dto.common import AddressDTO, ApiResponse, PageResponse
from workhub.application.dto.identity import ProfileDTO, SessionDTO, UserDTO
from workhub.application.dto.organization import OrganizationDTO, OrganizationSettingsDTO
from workhub.application.dto.project import (
    ProjectDTO,
    TaskDTO,
    TaskStatisticsDTO,
    TeamMemberDTO,
)
from workhub.application.dto.document import CommentDTO, DocumentDTO
from workhub.application.dto.activity import AuditLogDTO, NotificationDTO, RelatedEntityDTO
from workhub.application.dto.forms import (
    FormDTO,
    FormFieldDTO,
    FormSubmissionDTO,
    WorkflowDTO,
    WorkflowStepDTO,
)
from workhub.application.dto.commerce import (
    CategoryDTO,
    InventoryDTO,
    OrderDTO,
    OrderItemDTO,
    OrderSummaryDTO,
    ProductDTO,
)

__all__ = [
    "AddressDTO",
    "ApiResponse",
    "PageResponse",
    "ProfileDTO",
    "SessionDTO",
    "UserDTO",
    "OrganizationDTO",
    "OrganizationSettingsDTO",
    "ProjectDTO",
    "TaskDTO",
    "TaskStatisticsDTO",
    "TeamMemberDTO",
    "CommentDTO",
    "DocumentDTO",
    "AuditLogDTO",
    "NotificationDTO",
    "RelatedEntityDTO",
    "FormDTO",
    "FormFieldDTO",
    "FormSubmissionDTO",
    "WorkflowDTO",
    "WorkflowStepDTO",
    "CategoryDTO",
    "InventoryDTO",
    "OrderDTO",
    "OrderItemDTO",
    "OrderSummaryDTO",
    "ProductDTO",
]

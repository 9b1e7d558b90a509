"""
Notifications API Router.

Users only ever see and change their own notifications. Creating a
notification for someone else is a manager operation; the application also
emits them on project membership and task assignment.
"""

from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from workhub.application.commands.notifications import (
    CreateNotificationCommand,
    CreateNotificationHandler,
    DeleteNotificationCommand,
    DeleteNotificationHandler,
    MarkAllNotificationsReadCommand,
    MarkAllNotificationsReadHandler,
    MarkNotificationReadCommand,
    MarkNotificationReadHandler,
)
from workhub.application.dto import (
    ApiResponse,
    NotificationDTO,
    PageResponse,
    RelatedEntityDTO,
)
from workhub.application.queries.notifications import (
    CountUnreadNotificationsHandler,
    CountUnreadNotificationsQuery,
    ListNotificationsHandler,
    ListNotificationsQuery,
)
from workhub.domain.entities.notification import RelatedEntity
from workhub.domain.value_objects.page import PageRequest
from workhub.presentation.dependencies import (
    AuthUser,
    get_current_user,
    get_page_request,
    require_manager,
)

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateNotificationRequest(BaseModel):
    user_id: str
    type: str = Field(min_length=1)
    title: str = Field(min_length=1)
    message: str
    related_to: Optional[RelatedEntityDTO] = None


class UnreadCountResponse(BaseModel):
    unread: int


class MarkAllReadResponse(BaseModel):
    updated: int


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/v1/notifications", tags=["notifications"])


# ==================== ENDPOINTS ====================


@router.post(
    "", response_model=ApiResponse[NotificationDTO], status_code=status.HTTP_201_CREATED
)
@inject
async def create_notification(
    request: CreateNotificationRequest,
    handler: FromDishka[CreateNotificationHandler],
    current_user: AuthUser = Depends(require_manager),
):
    related = request.related_to
    notification = await handler.execute(
        CreateNotificationCommand(
            user_id=request.user_id,
            type=request.type,
            title=request.title,
            message=request.message,
            related_to=RelatedEntity(type=related.type, id=related.id) if related else None,
        )
    )
    return ApiResponse.ok(NotificationDTO.from_entity(notification), "Notification created")


@router.get("", response_model=PageResponse[NotificationDTO])
@inject
async def list_notifications(
    handler: FromDishka[ListNotificationsHandler],
    unread_only: bool = False,
    page: PageRequest = Depends(get_page_request),
    current_user: AuthUser = Depends(get_current_user),
):
    result = await handler.execute(
        ListNotificationsQuery(user_id=current_user.user_id, page=page, unread_only=unread_only)
    )
    return PageResponse.from_page(result, NotificationDTO.from_entity)


@router.get("/unread-count", response_model=ApiResponse[UnreadCountResponse])
@inject
async def unread_count(
    handler: FromDishka[CountUnreadNotificationsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    count = await handler.execute(CountUnreadNotificationsQuery(user_id=current_user.user_id))
    return ApiResponse.ok(UnreadCountResponse(unread=count))


@router.post("/read-all", response_model=ApiResponse[MarkAllReadResponse])
@inject
async def mark_all_read(
    handler: FromDishka[MarkAllNotificationsReadHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    updated = await handler.execute(
        MarkAllNotificationsReadCommand(user_id=current_user.user_id)
    )
    return ApiResponse.ok(MarkAllReadResponse(updated=updated))


@router.patch("/{notification_id}/read", response_model=ApiResponse[NotificationDTO])
@inject
async def mark_read(
    notification_id: str,
    handler: FromDishka[MarkNotificationReadHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    notification = await handler.execute(
        MarkNotificationReadCommand(
            notification_id=notification_id, user_id=current_user.user_id
        )
    )
    return ApiResponse.ok(NotificationDTO.from_entity(notification))


@router.delete("/{notification_id}", response_model=ApiResponse[None])
@inject
async def delete_notification(
    notification_id: str,
    handler: FromDishka[DeleteNotificationHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    await handler.execute(
        DeleteNotificationCommand(notification_id=notification_id, user_id=current_user.user_id)
    )
    return ApiResponse.ok(None, "Notification deleted")

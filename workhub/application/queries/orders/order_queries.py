"""Order queries: single orders, listings and a per-user summary."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from workhub.application.common.interfaces import Query, QueryHandler
from workhub.domain.entities.order import FULFILLED_STATUSES, Order, OrderStatus
from workhub.domain.exceptions import DomainValidationError, EntityNotFoundError
from workhub.domain.ports.repositories import OrderRepository, UserRepository
from workhub.domain.value_objects.page import Page, PageRequest


@dataclass(frozen=True)
class OrderSummary:
    user_id: str
    total_orders: int
    total_spent: Decimal
    pending_orders: int
    processing_orders: int
    completed_orders: int
    cancelled_orders: int


@dataclass(frozen=True)
class GetOrderQuery(Query[Order]):
    order_id: Optional[str] = None
    order_number: Optional[str] = None


@dataclass(frozen=True)
class ListOrdersQuery(Query[Page[Order]]):
    page: PageRequest
    user_id: Optional[str] = None
    status: Optional[OrderStatus] = None


@dataclass(frozen=True)
class UserOrderSummaryQuery(Query[OrderSummary]):
    user_id: str


class GetOrderHandler(QueryHandler[Order]):
    def __init__(self, order_repository: OrderRepository):
        self._order_repository = order_repository

    async def execute(self, query: GetOrderQuery) -> Order:
        if query.order_id:
            order = await self._order_repository.get_by_id(query.order_id)
            if not order:
                raise EntityNotFoundError.for_id("Order", query.order_id)
            return order
        if query.order_number:
            order = await self._order_repository.get_by_order_number(query.order_number)
            if not order:
                raise EntityNotFoundError(f"Order not found with number: {query.order_number}")
            return order
        raise DomainValidationError("Either order_id or order_number is required")


class ListOrdersHandler(QueryHandler[Page[Order]]):
    def __init__(self, order_repository: OrderRepository):
        self._order_repository = order_repository

    async def execute(self, query: ListOrdersQuery) -> Page[Order]:
        if query.user_id:
            return await self._order_repository.find_by_user(query.user_id, query.page)
        if query.status:
            return await self._order_repository.find_by_status(query.status, query.page)
        return await self._order_repository.find_all(query.page)


class UserOrderSummaryHandler(QueryHandler[OrderSummary]):
    def __init__(
        self, order_repository: OrderRepository, user_repository: UserRepository
    ):
        self._order_repository = order_repository
        self._user_repository = user_repository

    async def execute(self, query: UserOrderSummaryQuery) -> OrderSummary:
        if not await self._user_repository.exists_by_id(query.user_id):
            raise EntityNotFoundError.for_id("User", query.user_id)

        orders = await self._order_repository.find_all_by_user(query.user_id)
        fulfilled = [o for o in orders if o.status in FULFILLED_STATUSES]
        return OrderSummary(
            user_id=query.user_id,
            total_orders=len(orders),
            total_spent=sum((o.total for o in fulfilled), Decimal("0")),
            pending_orders=sum(1 for o in orders if o.status == OrderStatus.PENDING),
            processing_orders=sum(1 for o in orders if o.status == OrderStatus.PROCESSING),
            completed_orders=len(fulfilled),
            cancelled_orders=sum(1 for o in orders if o.status == OrderStatus.CANCELLED),
        )

"""
Tests for order placement, status transitions and their stock effects.

Run with: pytest tests/test_orders.py -v
"""

from decimal import Decimal

import pytest

from workhub.application.commands.orders import (
    CancelOrderCommand,
    CancelOrderHandler,
    OrderLine,
    PlaceOrderCommand,
    PlaceOrderHandler,
    UpdateOrderStatusCommand,
    UpdateOrderStatusHandler,
    UpdateShippingAddressCommand,
    UpdateShippingAddressHandler,
)
from workhub.application.queries.orders import (
    GetOrderHandler,
    GetOrderQuery,
    UserOrderSummaryHandler,
    UserOrderSummaryQuery,
)
from workhub.application.services import InventoryAdjuster
from workhub.domain.entities.inventory import Inventory
from workhub.domain.entities.order import OrderStatus
from workhub.domain.entities.product import Product
from workhub.domain.exceptions import (
    DomainValidationError,
    EntityNotFoundError,
    InvalidStateError,
    ProductOutOfStockError,
)
from workhub.domain.value_objects.address import Address

ADDRESS = Address(street="1 Main St", city="Springfield", country="US")


@pytest.fixture()
def widget(repos):
    product = repos.products.add(
        Product.create(sku="WID-1", name="Widget", price=Decimal("10.00"), category="Tools")
    )
    repos.inventory.add(Inventory.create(product_id=product.id, sku=product.sku, quantity=10))
    return product


@pytest.fixture()
def gadget(repos):
    product = repos.products.add(
        Product.create(sku="GAD-1", name="Gadget", price=Decimal("2.50"), category="Tools")
    )
    repos.inventory.add(Inventory.create(product_id=product.id, sku=product.sku, quantity=1))
    return product


def stock(repos, product):
    return next(i for i in repos.inventory.items.values() if i.product_id == product.id)


def place_handler(repos) -> PlaceOrderHandler:
    return PlaceOrderHandler(
        repos.orders, repos.users, repos.products, InventoryAdjuster(repos.inventory)
    )


def status_handler(repos) -> UpdateOrderStatusHandler:
    return UpdateOrderStatusHandler(repos.orders, InventoryAdjuster(repos.inventory))


async def place(repos, user, *lines):
    return await place_handler(repos).execute(
        PlaceOrderCommand(user_id=user.id, lines=tuple(lines), shipping_address=ADDRESS)
    )


@pytest.mark.anyio
class TestPlaceOrder:
    async def test_reserves_stock_and_prices_lines(self, repos, member, widget, gadget):
        order = await place(
            repos, member.user, OrderLine(widget.id, 3), OrderLine(gadget.id, 1)
        )

        assert order.status == OrderStatus.PENDING
        assert order.total == Decimal("32.50")
        assert order.order_number.startswith("ORD-")
        assert stock(repos, widget).reserved == 3
        assert stock(repos, widget).available == 7
        assert stock(repos, gadget).available == 0

    async def test_out_of_stock_reserves_nothing(self, repos, member, widget, gadget):
        with pytest.raises(ProductOutOfStockError):
            await place(repos, member.user, OrderLine(widget.id, 2), OrderLine(gadget.id, 5))

        assert stock(repos, widget).reserved == 0
        assert repos.orders.items == {}

    async def test_product_without_inventory_is_out_of_stock(self, repos, member):
        product = repos.products.add(
            Product.create(sku="X", name="Phantom", price=Decimal("1"), category="Tools")
        )
        with pytest.raises(ProductOutOfStockError):
            await place(repos, member.user, OrderLine(product.id, 1))

    @pytest.mark.parametrize("lines", [(), (OrderLine("any", 0),)])
    async def test_empty_or_non_positive_lines_are_rejected(self, repos, member, lines):
        with pytest.raises(DomainValidationError):
            await place(repos, member.user, *lines)

    async def test_unknown_user_is_not_found(self, repos, widget):
        with pytest.raises(EntityNotFoundError):
            await place_handler(repos).execute(
                PlaceOrderCommand(user_id="ghost", lines=(OrderLine(widget.id, 1),))
            )


@pytest.mark.anyio
class TestOrderStatus:
    async def test_shipping_from_processing_deducts_once(self, repos, member, widget):
        order = await place(repos, member.user, OrderLine(widget.id, 4))
        handler = status_handler(repos)

        await handler.execute(UpdateOrderStatusCommand(order.id, OrderStatus.PROCESSING))
        shipped = await handler.execute(UpdateOrderStatusCommand(order.id, OrderStatus.SHIPPED))
        await handler.execute(UpdateOrderStatusCommand(order.id, OrderStatus.SHIPPED))
        await handler.execute(UpdateOrderStatusCommand(order.id, OrderStatus.COMPLETED))

        assert shipped.shipped_at is not None
        assert stock(repos, widget).quantity == 6
        assert stock(repos, widget).reserved == 0

    async def test_completing_unshipped_order_deducts(self, repos, member, widget):
        order = await place(repos, member.user, OrderLine(widget.id, 2))

        await status_handler(repos).execute(
            UpdateOrderStatusCommand(order.id, OrderStatus.COMPLETED)
        )

        assert stock(repos, widget).quantity == 8
        assert stock(repos, widget).reserved == 0

    async def test_cancel_releases_reservation(self, repos, member, widget):
        order = await place(repos, member.user, OrderLine(widget.id, 5))
        handler = CancelOrderHandler(repos.orders, status_handler(repos))

        cancelled = await handler.execute(CancelOrderCommand(order.id))

        assert cancelled.status == OrderStatus.CANCELLED
        assert cancelled.cancelled_at is not None
        assert stock(repos, widget).available == 10

    async def test_shipped_order_cannot_be_cancelled(self, repos, member, widget):
        order = await place(repos, member.user, OrderLine(widget.id, 1))
        await status_handler(repos).execute(UpdateOrderStatusCommand(order.id, OrderStatus.SHIPPED))

        with pytest.raises(InvalidStateError):
            await CancelOrderHandler(repos.orders, status_handler(repos)).execute(
                CancelOrderCommand(order.id)
            )

    async def test_address_locked_after_shipping(self, repos, member, widget):
        order = await place(repos, member.user, OrderLine(widget.id, 1))
        handler = UpdateShippingAddressHandler(repos.orders)
        new_address = Address(street="2 Elm St", city="Shelbyville", country="US")

        updated = await handler.execute(UpdateShippingAddressCommand(order.id, new_address))
        assert updated.shipping_address == new_address

        await status_handler(repos).execute(UpdateOrderStatusCommand(order.id, OrderStatus.SHIPPED))
        with pytest.raises(InvalidStateError):
            await handler.execute(UpdateShippingAddressCommand(order.id, ADDRESS))

    async def test_lookup_by_order_number(self, repos, member, widget):
        order = await place(repos, member.user, OrderLine(widget.id, 1))

        found = await GetOrderHandler(repos.orders).execute(
            GetOrderQuery(order_number=order.order_number)
        )

        assert found.id == order.id


@pytest.mark.anyio
class TestOrderSummary:
    async def test_only_fulfilled_orders_count_as_spent(self, repos, member, widget):
        handler = status_handler(repos)
        completed = await place(repos, member.user, OrderLine(widget.id, 2))
        await handler.execute(UpdateOrderStatusCommand(completed.id, OrderStatus.COMPLETED))
        cancelled = await place(repos, member.user, OrderLine(widget.id, 1))
        await handler.execute(UpdateOrderStatusCommand(cancelled.id, OrderStatus.CANCELLED))
        await place(repos, member.user, OrderLine(widget.id, 1))

        summary = await UserOrderSummaryHandler(repos.orders, repos.users).execute(
            UserOrderSummaryQuery(user_id=member.user.id)
        )

        assert summary.total_orders == 3
        assert summary.total_spent == Decimal("20.00")
        assert summary.completed_orders == 1
        assert summary.cancelled_orders == 1
        assert summary.pending_orders == 1


class TestOrdersApi:
    def test_place_and_cancel(self, client, member, widget, repos):
        res = client.post(
            "/api/v1/orders",
            headers=member.headers,
            json={"items": [{"product_id": widget.id, "quantity": 2}]},
        )
        assert res.status_code == 201
        data = res.json()["data"]
        assert Decimal(str(data["total"])) == Decimal("20.00")

        res = client.post(f"/api/v1/orders/{data['id']}/cancel", headers=member.headers)
        assert res.status_code == 200
        assert res.json()["data"]["status"] == "CANCELLED"
        assert stock(repos, widget).reserved == 0

    def test_out_of_stock_is_409(self, client, member, widget):
        res = client.post(
            "/api/v1/orders",
            headers=member.headers,
            json={"items": [{"product_id": widget.id, "quantity": 11}]},
        )
        assert res.status_code == 409
        assert res.json()["success"] is False

    def test_zero_quantity_is_400(self, client, member, widget):
        res = client.post(
            "/api/v1/orders",
            headers=member.headers,
            json={"items": [{"product_id": widget.id, "quantity": 0}]},
        )
        assert res.status_code == 400

    def test_other_users_order_is_forbidden(self, client, member, make_user, widget):
        other = make_user("other")
        res = client.post(
            "/api/v1/orders",
            headers=other.headers,
            json={"items": [{"product_id": widget.id, "quantity": 1}]},
        )
        order_id = res.json()["data"]["id"]

        assert client.get(f"/api/v1/orders/{order_id}", headers=member.headers).status_code == 403

    def test_status_change_requires_manager(self, client, member, manager, widget):
        res = client.post(
            "/api/v1/orders",
            headers=member.headers,
            json={"items": [{"product_id": widget.id, "quantity": 1}]},
        )
        url = f"/api/v1/orders/{res.json()['data']['id']}/status"

        assert client.patch(url, headers=member.headers, json={"status": "PROCESSING"}).status_code == 403
        res = client.patch(url, headers=manager.headers, json={"status": "PROCESSING"})
        assert res.json()["data"]["status"] == "PROCESSING"

    def test_order_summary_endpoint(self, client, member):
        res = client.get(f"/api/v1/users/{member.user.id}/order-summary", headers=member.headers)
        assert res.status_code == 200
        assert res.json()["data"]["total_orders"] == 0

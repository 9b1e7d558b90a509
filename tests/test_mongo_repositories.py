"""
Tests for the MongoDB adapters that need no running server: document
mapping through real BSON encoding, query filters and sort specs.

Run with: pytest tests/test_mongo_repositories.py -v
"""

import re
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import bson
import pytest
from bson.codec_options import CodecOptions
from pymongo import ASCENDING, DESCENDING

from workhub.domain.entities.order import Order, OrderItem, OrderStatus
from workhub.domain.entities.product import Product
from workhub.domain.entities.session import Session
from workhub.domain.exceptions import DomainValidationError
from workhub.domain.value_objects.address import Address
from workhub.domain.value_objects.page import Page, PageRequest
from workhub.infrastructure.persistence import (
    MongoOrderRepository,
    MongoProductRepository,
    MongoProjectRepository,
    MongoSessionRepository,
    MongoUserRepository,
)

# Same decoding the motor client uses (tz_aware=True)
CODEC_OPTIONS = CodecOptions(tz_aware=True)

# BSON dates keep milliseconds only
WHEN = datetime(2024, 3, 9, 14, 30, 15, 123000, tzinfo=timezone.utc)


class StubDatabase:
    """Stands in for AsyncIOMotorDatabase; mapping code never touches the collection."""

    def __getitem__(self, name):
        return None


def through_bson(document: dict) -> dict:
    return bson.decode(bson.encode(document), codec_options=CODEC_OPTIONS)


class TestOrderMapping:
    def test_round_trip_keeps_money_and_dates(self):
        repo = MongoOrderRepository(StubDatabase())
        order = Order.place(
            user_id="u1",
            items=[
                OrderItem("p1", "A-1", "Anvil", 3, Decimal("10.00")),
                OrderItem("p2", "B-2", "Bolt", 1, Decimal("2.50")),
            ],
            shipping_address=Address(street="1 Main St", city="Springfield", country="US"),
        )
        order.status = OrderStatus.SHIPPED
        order.created_at = order.updated_at = WHEN
        order.shipped_at = WHEN + timedelta(days=1)

        loaded = repo._to_entity(through_bson(repo._to_document(order)))

        assert loaded == order
        assert loaded.total == Decimal("32.50")
        assert loaded.items[0].unit_price == Decimal("10.00")
        assert loaded.shipped_at.utcoffset() == timedelta(0)

    def test_total_is_recomputed_from_items(self):
        repo = MongoOrderRepository(StubDatabase())
        order = Order.place(user_id="u1", items=[OrderItem("p1", "A-1", "Anvil", 2, Decimal("1.25"))])
        order.created_at = order.updated_at = WHEN
        document = repo._to_document(order)
        document["total"] = bson.Decimal128("999")

        assert repo._to_entity(through_bson(document)).total == Decimal("2.50")


class TestProductMapping:
    def test_round_trip(self):
        repo = MongoProductRepository(StubDatabase())
        product = Product.create(
            sku="HAM-1",
            name="Hammer",
            price=Decimal("19.99"),
            category="Tools",
            attributes={"color": "red"},
            tags=["sale"],
        )
        product.created_at = product.updated_at = WHEN

        document = through_bson(repo._to_document(product))

        assert isinstance(document["price"], bson.Decimal128)
        assert repo._to_entity(document) == product


class TestSessionMapping:
    def test_round_trip_keeps_aware_expiry(self):
        repo = MongoSessionRepository(StubDatabase())
        session = Session(
            id="s1",
            user_id="u1",
            token="opaque-token",
            created_at=WHEN,
            expires_at=WHEN + timedelta(minutes=30),
            last_activity=WHEN,
            ip_address="10.0.0.1",
        )

        loaded = repo._to_entity(through_bson(repo._to_document(session)))

        assert loaded == session
        assert loaded.is_expired(WHEN + timedelta(minutes=30))


@pytest.mark.anyio
class TestProjectSearchFilter:
    async def test_name_or_description_matched_literally(self):
        repo = MongoProjectRepository(StubDatabase())
        captured = {}

        async def find_page(filter, page):
            captured["filter"] = filter
            return Page.of([], 0, page)

        repo._find_page = find_page
        await repo.search("a.b (c)", PageRequest())

        clauses = captured["filter"]["$or"]
        assert [next(iter(clause)) for clause in clauses] == ["name", "description"]
        pattern = clauses[0]["name"]
        assert pattern["$options"] == "i"

        regex = re.compile(pattern["$regex"], re.IGNORECASE)
        assert regex.search("Project A.B (C) kickoff")
        assert not regex.search("aXb (c)")
        assert not regex.search("a.b c")


class TestSortSpec:
    def test_default_sort_adds_id_tiebreaker(self):
        repo = MongoUserRepository(StubDatabase())
        assert repo._sort_spec(PageRequest()) == [("username", ASCENDING), ("_id", ASCENDING)]

    def test_requested_field_and_direction(self):
        repo = MongoUserRepository(StubDatabase())
        page = PageRequest.parse_sort(0, 20, "created_at,desc")
        assert repo._sort_spec(page) == [("created_at", DESCENDING), ("_id", ASCENDING)]

    def test_id_maps_to_underscore_id(self):
        repo = MongoUserRepository(StubDatabase())
        assert repo._sort_spec(PageRequest.parse_sort(0, 20, "id,asc")) == [("_id", ASCENDING)]

    @pytest.mark.parametrize("sort", ["password_hash,asc", "$where,asc", "no_such_field,desc"])
    def test_unlisted_fields_are_rejected(self, sort):
        repo = MongoUserRepository(StubDatabase())
        with pytest.raises(DomainValidationError):
            repo._sort_spec(PageRequest.parse_sort(0, 20, sort))

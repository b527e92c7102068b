"""Pytest configuration and fixtures"""
import os
import pytest
from datetime import datetime, timezone
from unittest.mock import Mock, AsyncMock

# Set test environment variables
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test_key")

from warung_pos.cart import Cart, CheckoutService
from warung_pos.services.models import TransactionRecord


@pytest.fixture
def mock_supabase_client():
    """Mock async Supabase client; every query ends in an awaited execute()."""
    client = Mock()

    # Builder methods chain back to the same mock
    table_mock = Mock()
    table_mock.select.return_value = table_mock
    table_mock.insert.return_value = table_mock
    table_mock.delete.return_value = table_mock
    table_mock.eq.return_value = table_mock
    table_mock.gte.return_value = table_mock
    table_mock.lt.return_value = table_mock
    table_mock.limit.return_value = table_mock
    table_mock.order.return_value = table_mock
    table_mock.ilike.return_value = table_mock
    table_mock.execute = AsyncMock(return_value=Mock(data=[]))

    client.table.return_value = table_mock

    return client


@pytest.fixture
def cart():
    """Empty cart"""
    return Cart()


@pytest.fixture
def sample_cart():
    """Two ad-hoc 1000s and one Tea at 4000 (total 6000)"""
    cart = Cart()
    cart.add_ad_hoc(1000)
    cart.add_ad_hoc(1000)
    cart.add_catalog_item("p1", "Tea", 4000)
    return cart


@pytest.fixture
def sample_transaction_row():
    """Transaction row as stored in Supabase"""
    return {
        "id": 1,
        "total_amount": 6000,
        "items": (
            '[{"kind": "ad_hoc", "description": "Ad-hoc Rp1000", "unit_price": 1000, '
            '"quantity": 2, "subtotal": 2000}, '
            '{"kind": "catalog", "description": "Tea", "unit_price": 4000, '
            '"quantity": 1, "subtotal": 4000}]'
        ),
        "timestamp": "2025-01-01T08:30:00+00:00",
    }


@pytest.fixture
def sample_product_row():
    """Product row as stored in Supabase"""
    return {
        "id": "p1",
        "name": "Tea",
        "price": 4000,
        "category": "Drinks",
        "is_active": True,
    }


def make_record(total_amount, items, record_id=1) -> TransactionRecord:
    return TransactionRecord(
        id=record_id,
        total_amount=total_amount,
        items=tuple(items),
        timestamp=datetime(2025, 1, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def recorder():
    """Transaction store that echoes what it was given as a record"""
    recorder = Mock()
    recorder.record_transaction = AsyncMock(
        side_effect=lambda total_amount, items: make_record(total_amount, items)
    )
    return recorder


@pytest.fixture
def failing_recorder():
    """Transaction store whose write always fails"""
    recorder = Mock()
    recorder.record_transaction = AsyncMock(side_effect=ConnectionError("database is locked"))
    return recorder


@pytest.fixture
def checkout_service(sample_cart, recorder):
    return CheckoutService(sample_cart, recorder)

"""Unit tests for the customer data service.

The repository is mocked so the tests cover the service's own logic:
field mapping, error translation and metrics.
"""

from __future__ import annotations

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest
from prometheus_client import REGISTRY
from sqlalchemy.exc import IntegrityError, OperationalError

from customer_data_service.core.database.entities.customers import Customer
from customer_data_service.core.database.repositories.customers import CustomerRepository
from customer_data_service.core.errors import (
    CustomerDataNotFoundError,
    CustomerDataServiceError,
    CustomerEmailExistsError,
)
from customer_data_service.core.models.io.customers import CustomerPayload
from customer_data_service.core.service import CustomerDataService


def _sample_value(name: str, labels: dict) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


def _integrity_error() -> IntegrityError:
    return IntegrityError("INSERT INTO customer ...", {}, Exception("UNIQUE constraint failed"))


class TestCustomerDataService:
    """Tests for CustomerDataService operations."""

    @pytest.fixture
    def repository(self):
        return AsyncMock(spec=CustomerRepository)

    @pytest.fixture
    def service(self, repository):
        return CustomerDataService(MagicMock(), repository=repository)

    @pytest.fixture
    def payload(self, sample_customer: Customer) -> CustomerPayload:
        return CustomerPayload(
            id=sample_customer.id,
            first_name="newFirstName",
            last_name="newLastName",
            email_address="new@email.com",
            phone_number="2065550000",
        )

    async def test_save_customer(self, service, repository, payload):
        repository.create.side_effect = lambda entity: entity

        created = await service.save_customer(payload)

        repository.create.assert_awaited_once()
        assert created.first_name == "newFirstName"
        assert created.email_address == "new@email.com"

    async def test_save_customer_ignores_supplied_id(self, service, repository, payload):
        repository.create.side_effect = lambda entity: entity

        created = await service.save_customer(payload)

        assert created.id != payload.id

    async def test_save_customer_email_exists(self, service, repository, payload):
        repository.create.side_effect = _integrity_error()
        labels = {"operation": "savecustomer", "error": "emailexists"}
        before = _sample_value("customerdataservice_operation_errors_total", labels)

        with pytest.raises(CustomerEmailExistsError):
            await service.save_customer(payload)

        assert _sample_value("customerdataservice_operation_errors_total", labels) == before + 1

    async def test_save_customer_database_failure(self, service, repository, payload):
        repository.create.side_effect = OperationalError("INSERT", {}, Exception("database is locked"))

        with pytest.raises(CustomerDataServiceError) as exc_info:
            await service.save_customer(payload)

        assert not isinstance(exc_info.value, CustomerEmailExistsError)
        assert isinstance(exc_info.value.__cause__, OperationalError)

    async def test_save_customer_is_counted(self, service, repository, payload):
        repository.create.side_effect = lambda entity: entity
        labels = {"operation": "savecustomer"}
        before = _sample_value("customerdataservice_operations_total", labels)

        await service.save_customer(payload)

        assert _sample_value("customerdataservice_operations_total", labels) == before + 1

    async def test_fetch_customer_list(self, service, repository, sample_customer):
        repository.list.return_value = [sample_customer]

        customers = await service.fetch_customer_list()

        assert customers == [sample_customer]
        repository.list.assert_awaited_once_with(limit=None, offset=None)

    async def test_fetch_customer_list_paginated(self, service, repository):
        repository.list.return_value = []

        await service.fetch_customer_list(limit=10, offset=20)

        repository.list.assert_awaited_once_with(limit=10, offset=20)

    async def test_find_customer_by_email(self, service, repository, sample_customer):
        repository.get_by_email.return_value = sample_customer

        result = await service.find_customer_by_email("email@email.com")

        assert result == sample_customer
        repository.get_by_email.assert_awaited_once_with("email@email.com")

    async def test_find_customer_by_id(self, service, repository, sample_customer):
        repository.get_by_id.return_value = sample_customer

        result = await service.find_customer_by_id(sample_customer.id)

        assert result == sample_customer

    async def test_find_customer_by_id_not_found(self, service, repository):
        repository.get_by_id.return_value = None

        assert await service.find_customer_by_id(uuid.uuid4()) is None

    async def test_update_customer(self, service, repository, sample_customer, payload):
        sample_customer.middle_name = "Middle"
        repository.get_by_id.return_value = sample_customer
        repository.update.side_effect = lambda entity: entity

        updated = await service.update_customer(payload)

        assert updated is sample_customer
        assert updated.first_name == "newFirstName"
        assert updated.last_name == "newLastName"
        assert updated.email_address == "new@email.com"
        assert updated.phone_number == "2065550000"
        # A missing middle name clears the stored one
        assert updated.middle_name is None
        repository.update.assert_awaited_once_with(sample_customer)

    async def test_update_customer_not_found(self, service, repository, payload):
        repository.get_by_id.return_value = None
        labels = {"operation": "updatecustomer", "error": "customernotfound"}
        before = _sample_value("customerdataservice_operation_errors_total", labels)

        with pytest.raises(CustomerDataNotFoundError) as exc_info:
            await service.update_customer(payload)

        assert exc_info.value.customer_id == payload.id
        repository.update.assert_not_awaited()
        assert _sample_value("customerdataservice_operation_errors_total", labels) == before + 1

    async def test_update_customer_email_exists(self, service, repository, sample_customer, payload):
        repository.get_by_id.return_value = sample_customer
        repository.update.side_effect = _integrity_error()

        with pytest.raises(CustomerEmailExistsError):
            await service.update_customer(payload)

    async def test_update_customer_database_failure(self, service, repository, sample_customer, payload):
        repository.get_by_id.return_value = sample_customer
        repository.update.side_effect = OperationalError("UPDATE", {}, Exception("disk I/O error"))
        labels = {"operation": "updatecustomer", "error": "exception"}
        before = _sample_value("customerdataservice_operation_errors_total", labels)

        with pytest.raises(CustomerDataServiceError):
            await service.update_customer(payload)

        assert _sample_value("customerdataservice_operation_errors_total", labels) == before + 1

    async def test_delete_customer_by_id(self, service, repository, sample_customer):
        repository.delete.return_value = True

        await service.delete_customer_by_id(sample_customer.id)

        repository.delete.assert_awaited_once_with(sample_customer.id)

    async def test_delete_unknown_customer_is_silent(self, service, repository):
        repository.delete.return_value = False

        assert await service.delete_customer_by_id(uuid.uuid4()) is None

    def test_default_repository_uses_session(self):
        session = MagicMock()

        service = CustomerDataService(session)

        assert isinstance(service.repository, CustomerRepository)
        assert service.repository.session is session

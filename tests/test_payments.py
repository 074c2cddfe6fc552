"""
Tests for payment and bill endpoints.
"""
import pytest
import pytest_asyncio

from tests.helpers import API, create_car, create_package, create_payment, create_service

pytestmark = pytest.mark.asyncio


@pytest_asyncio.fixture
async def service_record(auth_client):
    await create_car(auth_client)
    package = await create_package(auth_client)
    return await create_service(auth_client, "RAA123A", package["packageNumber"])


class TestPaymentsEndpoints:
    async def test_scenario_package_service_payment_bill(self, auth_client):
        response = await auth_client.post(
            f"{API}/packages",
            json={"packageName": "Basic Wash", "packageDescription": "Exterior wash", "packagePrice": 5000},
        )
        assert response.status_code == 201
        package_number = response.json()["package"]["packageNumber"]

        await create_car(auth_client)
        response = await auth_client.post(
            f"{API}/services",
            json={"serviceDate": "2025-03-10", "plateNumber": "RAA123A", "packageNumber": package_number},
        )
        assert response.status_code == 201
        record_number = response.json()["servicePackage"]["recordNumber"]

        response = await auth_client.post(
            f"{API}/payments",
            json={"amountPaid": 5000, "paymentDate": "2025-03-10", "recordNumber": record_number},
        )
        assert response.status_code == 201
        payment = response.json()["payment"]

        response = await auth_client.get(f"{API}/payments/bill/{record_number}")
        assert response.status_code == 200
        bill = response.json()
        assert bill["PlateNumber"] == "RAA123A"
        assert bill["DriverName"] == "John Doe"
        assert bill["PhoneNumber"] == "0780000000"
        assert bill["PackageName"] == "Basic Wash"
        assert bill["PackagePrice"] == 5000
        assert bill["RecordNumber"] == record_number
        assert bill["PaymentNumber"] == payment["paymentNumber"]
        assert bill["AmountPaid"] == 5000
        assert bill["PaymentDate"].startswith("2025-03-10")

    async def test_bill_of_unpaid_record(self, auth_client, service_record):
        response = await auth_client.get(f"{API}/payments/bill/{service_record['recordNumber']}")

        assert response.status_code == 200
        bill = response.json()
        assert bill["PackageName"] == "Basic Wash"
        assert bill["PaymentNumber"] is None
        assert bill["AmountPaid"] is None
        assert bill["PaymentDate"] is None

    async def test_bill_of_missing_record(self, auth_client):
        response = await auth_client.get(f"{API}/payments/bill/999")

        assert response.status_code == 404
        assert response.json() == {"message": "Service record not found"}

    async def test_list_and_get_payments(self, auth_client, service_record):
        payment = await create_payment(auth_client, service_record["recordNumber"])

        listing = (await auth_client.get(f"{API}/payments")).json()
        assert len(listing) == 1
        assert listing[0]["PaymentNumber"] == payment["paymentNumber"]
        assert listing[0]["DriverName"] == "John Doe"

        response = await auth_client.get(f"{API}/payments/{payment['paymentNumber']}")
        assert response.status_code == 200
        assert response.json()["AmountPaid"] == 5000
        assert response.json()["ServiceDate"] == "2025-03-10"

    async def test_get_missing_payment(self, auth_client):
        response = await auth_client.get(f"{API}/payments/999")

        assert response.status_code == 404

    @pytest.mark.parametrize("missing", ["amountPaid", "paymentDate", "recordNumber"])
    async def test_create_missing_field(self, auth_client, service_record, missing):
        data = {"amountPaid": 5000, "paymentDate": "2025-03-10", "recordNumber": service_record["recordNumber"]}
        del data[missing]

        response = await auth_client.post(f"{API}/payments", json=data)

        assert response.status_code == 400

    async def test_negative_amount(self, auth_client, service_record):
        response = await auth_client.post(
            f"{API}/payments",
            json={"amountPaid": -5, "paymentDate": "2025-03-10", "recordNumber": service_record["recordNumber"]},
        )

        assert response.status_code == 400

    async def test_nan_amount(self, auth_client, service_record):
        body = (
            '{"amountPaid": NaN, "paymentDate": "2025-03-10", "recordNumber": %d}'
            % service_record["recordNumber"]
        )

        response = await auth_client.post(
            f"{API}/payments", content=body, headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert (await auth_client.get(f"{API}/payments")).json() == []

    async def test_amount_may_differ_from_price(self, auth_client, service_record):
        payment = await create_payment(auth_client, service_record["recordNumber"], amount=4500)

        assert payment["amountPaid"] == 4500

    async def test_second_payment_is_rejected(self, auth_client, service_record):
        await create_payment(auth_client, service_record["recordNumber"])

        response = await auth_client.post(
            f"{API}/payments",
            json={"amountPaid": 5000, "paymentDate": "2025-03-11", "recordNumber": service_record["recordNumber"]},
        )

        assert response.status_code == 409
        assert response.json() == {"message": "Service record is already paid"}

    async def test_payment_for_missing_record(self, auth_client):
        response = await auth_client.post(
            f"{API}/payments",
            json={"amountPaid": 5000, "paymentDate": "2025-03-10", "recordNumber": 999},
        )

        assert response.status_code == 404

"""
Request builders shared by the API tests.
"""
from httpx import AsyncClient

API = "/api"


def user_data(**overrides) -> dict:
    data = {"username": "alice", "password": "abc123", "fullName": "Alice A"}
    data.update(overrides)
    return data


def car_data(**overrides) -> dict:
    data = {
        "plateNumber": "RAA123A",
        "carType": "Sedan",
        "carSize": "Medium",
        "driverName": "John Doe",
        "phoneNumber": "0780000000",
    }
    data.update(overrides)
    return data


def package_data(**overrides) -> dict:
    data = {
        "packageName": "Basic Wash",
        "packageDescription": "Exterior wash",
        "packagePrice": 5000,
    }
    data.update(overrides)
    return data


async def create_car(client: AsyncClient, **overrides) -> dict:
    response = await client.post(f"{API}/cars", json=car_data(**overrides))
    assert response.status_code == 201, response.text
    return response.json()["car"]


async def create_package(client: AsyncClient, **overrides) -> dict:
    response = await client.post(f"{API}/packages", json=package_data(**overrides))
    assert response.status_code == 201, response.text
    return response.json()["package"]


async def create_service(
    client: AsyncClient, plate_number: str, package_number: int, service_date: str = "2025-03-10"
) -> dict:
    response = await client.post(
        f"{API}/services",
        json={"serviceDate": service_date, "plateNumber": plate_number, "packageNumber": package_number},
    )
    assert response.status_code == 201, response.text
    return response.json()["servicePackage"]


async def create_payment(
    client: AsyncClient, record_number: int, amount: float = 5000, payment_date: str = "2025-03-10T09:30:00"
) -> dict:
    response = await client.post(
        f"{API}/payments",
        json={"amountPaid": amount, "paymentDate": payment_date, "recordNumber": record_number},
    )
    assert response.status_code == 201, response.text
    return response.json()["payment"]

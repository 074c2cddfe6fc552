"""
HTTP client for the SmartPark API.

The session cookie set at login is kept by the underlying
``requests.Session`` and sent on every later call. Error responses are
raised as ``smartpark.errors`` classes carrying the server's message.
"""
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union

import requests

from smartpark.errors import error_for_status


class SmartParkClient:
    """Thin wrapper over the REST endpoints."""

    def __init__(
        self,
        base_url: str = "http://localhost:5000/api",
        session: Optional[requests.Session] = None,
        timeout: float = 10.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, json: Optional[dict] = None) -> Any:
        response = self.session.request(
            method, f"{self.base_url}{path}", json=json, timeout=self.timeout
        )
        try:
            body = response.json()
        except ValueError:
            body = None

        if not response.ok:
            message = body.get("message") if isinstance(body, dict) else None
            raise error_for_status(response.status_code, message or response.reason or "Request failed")
        return body

    # Auth

    def register(self, username: str, password: str, full_name: str) -> Dict[str, Any]:
        body = self._request(
            "POST",
            "/auth/register",
            {"username": username, "password": password, "fullName": full_name},
        )
        return body["user"]

    def login(self, username: str, password: str) -> Dict[str, Any]:
        body = self._request("POST", "/auth/login", {"username": username, "password": password})
        return body["user"]

    def check_session(self) -> Dict[str, Any]:
        return self._request("GET", "/auth/check")

    def logout(self) -> None:
        self._request("POST", "/auth/logout")

    # Cars

    def list_cars(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/cars")

    def get_car(self, plate_number: str) -> Dict[str, Any]:
        return self._request("GET", f"/cars/{plate_number}")

    def add_car(
        self, plate_number: str, car_type: str, car_size: str, driver_name: str, phone_number: str
    ) -> Dict[str, Any]:
        body = self._request(
            "POST",
            "/cars",
            {
                "plateNumber": plate_number,
                "carType": car_type,
                "carSize": car_size,
                "driverName": driver_name,
                "phoneNumber": phone_number,
            },
        )
        return body["car"]

    def update_car(
        self, plate_number: str, car_type: str, car_size: str, driver_name: str, phone_number: str
    ) -> Dict[str, Any]:
        body = self._request(
            "PUT",
            f"/cars/{plate_number}",
            {
                "carType": car_type,
                "carSize": car_size,
                "driverName": driver_name,
                "phoneNumber": phone_number,
            },
        )
        return body["car"]

    def delete_car(self, plate_number: str) -> None:
        self._request("DELETE", f"/cars/{plate_number}")

    # Packages

    def list_packages(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/packages")

    def get_package(self, package_number: int) -> Dict[str, Any]:
        return self._request("GET", f"/packages/{package_number}")

    def add_package(self, name: str, description: str, price: float) -> Dict[str, Any]:
        body = self._request(
            "POST",
            "/packages",
            {"packageName": name, "packageDescription": description, "packagePrice": price},
        )
        return body["package"]

    def update_package(self, package_number: int, name: str, description: str, price: float) -> Dict[str, Any]:
        body = self._request(
            "PUT",
            f"/packages/{package_number}",
            {"packageName": name, "packageDescription": description, "packagePrice": price},
        )
        return body["package"]

    def delete_package(self, package_number: int) -> None:
        self._request("DELETE", f"/packages/{package_number}")

    # Service records

    def list_services(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/services")

    def get_service(self, record_number: int) -> Dict[str, Any]:
        return self._request("GET", f"/services/{record_number}")

    def add_service(self, service_date: Union[date, str], plate_number: str, package_number: int) -> Dict[str, Any]:
        body = self._request(
            "POST",
            "/services",
            {
                "serviceDate": _isoformat(service_date),
                "plateNumber": plate_number,
                "packageNumber": package_number,
            },
        )
        return body["servicePackage"]

    def update_service(
        self, record_number: int, service_date: Union[date, str], plate_number: str, package_number: int
    ) -> Dict[str, Any]:
        body = self._request(
            "PUT",
            f"/services/{record_number}",
            {
                "serviceDate": _isoformat(service_date),
                "plateNumber": plate_number,
                "packageNumber": package_number,
            },
        )
        return body["servicePackage"]

    def delete_service(self, record_number: int) -> None:
        self._request("DELETE", f"/services/{record_number}")

    # Payments

    def list_payments(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/payments")

    def get_payment(self, payment_number: int) -> Dict[str, Any]:
        return self._request("GET", f"/payments/{payment_number}")

    def add_payment(
        self, amount_paid: float, payment_date: Union[date, datetime, str], record_number: int
    ) -> Dict[str, Any]:
        body = self._request(
            "POST",
            "/payments",
            {
                "amountPaid": amount_paid,
                "paymentDate": _isoformat(payment_date),
                "recordNumber": record_number,
            },
        )
        return body["payment"]

    def get_bill(self, record_number: int) -> Dict[str, Any]:
        return self._request("GET", f"/payments/bill/{record_number}")

    # Reports

    def daily_report(self, day: Union[date, str]) -> Dict[str, Any]:
        return self._request("GET", f"/reports/daily/{_isoformat(day)}")

    def payments_report(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/reports/payments")

    def summary(self) -> Dict[str, Any]:
        return self._request("GET", "/reports/summary")


def _isoformat(value: Union[date, datetime, str]) -> str:
    return value if isinstance(value, str) else value.isoformat()

"""
List helpers used when presenting API rows: search filters and the
unpaid-record selection for the payment form.
"""
from typing import Iterable, List, Mapping, Sequence

CAR_SEARCH_FIELDS = ("PlateNumber", "DriverName", "CarType")
PAYMENT_SEARCH_FIELDS = ("PlateNumber", "DriverName", "PackageName")
REPORT_SEARCH_FIELDS = ("PlateNumber", "PackageName")


def search(rows: Iterable[Mapping], term: str, fields: Sequence[str]) -> List[Mapping]:
    """Rows where any of ``fields`` contains ``term``, ignoring case.

    An empty term keeps every row.
    """
    needle = (term or "").strip().lower()
    if not needle:
        return list(rows)
    return [
        row for row in rows
        if any(needle in str(row.get(field) or "").lower() for field in fields)
    ]


def unpaid_services(services: Iterable[Mapping], payments: Iterable[Mapping]) -> List[Mapping]:
    """Service records with no payment attached."""
    paid = {payment["RecordNumber"] for payment in payments}
    return [service for service in services if service["RecordNumber"] not in paid]


def default_amount(services: Iterable[Mapping], record_number: int):
    """Package price of the chosen record, used to prefill the amount."""
    for service in services:
        if service["RecordNumber"] == record_number:
            return service["PackagePrice"]
    return None

"""
Plain-text receipts and reports built from API responses.
"""
from typing import Any, Mapping, Optional

WIDTH = 44
CURRENCY = "RWF"


def format_amount(value: Any) -> str:
    if value is None:
        return "-"
    return f"{float(value):,.0f} {CURRENCY}"


def _format_date(value: Optional[str]) -> str:
    if not value:
        return "-"
    # ISO timestamps: keep the date and minutes
    return str(value).replace("T", " ")[:16]


def _line(label: str, value: Any) -> str:
    """Label on the left, value right-aligned."""
    label, value = f"{label}:", str(value)
    padding = WIDTH - len(label) - len(value)
    if padding < 1:
        return f"{label} {value}"
    return label + " " * padding + value


def format_receipt(bill: Mapping[str, Any], business_name: str = "SmartPark Car Wash") -> str:
    """Receipt for one service record as returned by ``/payments/bill``."""
    rule = "-" * WIDTH
    paid = bill.get("PaymentNumber") is not None

    lines = [
        business_name.center(WIDTH),
        "SERVICE RECEIPT".center(WIDTH),
        rule,
        _line("Record No", bill["RecordNumber"]),
        _line("Service date", _format_date(bill.get("ServiceDate"))),
        rule,
        _line("Plate", bill["PlateNumber"]),
        _line("Driver", bill["DriverName"]),
        _line("Phone", bill["PhoneNumber"]),
        _line("Car", f"{bill['CarType']} ({bill['CarSize']})"),
        rule,
        _line("Package", bill["PackageName"]),
        bill.get("PackageDescription") or "",
        _line("Price", format_amount(bill["PackagePrice"])),
        rule,
    ]
    if paid:
        lines += [
            _line("Payment No", bill["PaymentNumber"]),
            _line("Paid on", _format_date(bill.get("PaymentDate"))),
            _line("Amount paid", format_amount(bill.get("AmountPaid"))),
        ]
    else:
        lines.append("NOT PAID".center(WIDTH))
    lines += [rule, "Thank you for your business".center(WIDTH)]
    return "\n".join(lines)


def format_daily_report(report: Mapping[str, Any]) -> str:
    """Daily report as returned by ``/reports/daily/{date}``."""
    header = f"{'Plate':<10} {'Package':<16} {'Amount':>14} {'Time':>6}"
    lines = [
        f"Daily report for {report['date']}",
        "=" * len(header),
        header,
        "-" * len(header),
    ]
    for record in report.get("records", []):
        lines.append(
            f"{record['PlateNumber']:<10} {record['PackageName'][:16]:<16} "
            f"{format_amount(record['AmountPaid']):>14} {_format_date(record['PaymentDate'])[11:16]:>6}"
        )
    if not report.get("records"):
        lines.append("No payments recorded on this date")
    lines += [
        "-" * len(header),
        f"Payments: {report['count']}",
        f"Total: {format_amount(report['totalAmount'])}",
    ]
    return "\n".join(lines)

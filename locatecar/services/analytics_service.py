from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Tuple

from locatecar.exceptions import ValidationError
from locatecar.models.rental import Rental
from locatecar.models.store import Store
from locatecar.services.common import round2
from locatecar.utils.constants import DEFAULT_PAGE_SIZE, DEFAULT_TIMEZONE, TOP_N
from locatecar.utils.filters import as_utc, fmt_local
from locatecar.utils.report_sink import NullReportSink


def _ranking(counts: Dict[str, int], n: int) -> List[Tuple[str, int]]:
    """Count descending; equal counts keep first-encounter order (stable sort)."""
    return sorted(counts.items(), key=lambda kv: kv[1], reverse=True)[:n]


class AnalyticsService:
    """Read-only aggregations and text reports over the rental history."""

    def __init__(self, store: Store, sink=None, timezone: str = DEFAULT_TIMEZONE):
        self.store = store
        self.sink = sink or NullReportSink()
        self.timezone = timezone

    # --------------- Aggregations ---------------
    def revenue_by_period(self, start: datetime, end: datetime) -> float:
        """Sum of final amounts for checkouts in [start, end]; 0.0 if none."""
        if as_utc(end) < as_utc(start):
            raise ValidationError("Error: period end is before its start")
        return self.store.rentals.revenue_in_period(start, end)

    def top_vehicles(self, n: int = TOP_N) -> List[Tuple[str, int]]:
        return _ranking(self.store.rentals.vehicle_ranking(), n)

    def top_customers(self, n: int = TOP_N) -> List[Tuple[str, int]]:
        return _ranking(self.store.rentals.customer_ranking(), n)

    def history(self, page: int = 1, size: int = DEFAULT_PAGE_SIZE) -> List[Rental]:
        return self.store.rentals.sorted_by_date(page, size)

    def summary(self) -> dict:
        rentals = self.store.rentals
        return {
            "totals": {
                "vehicles": self.store.vehicles.count(),
                "customers": self.store.customers.count(),
                "rentals": rentals.count(),
                "open_rentals": len(rentals.open_rentals()),
                "revenue": round2(rentals.total_revenue()),
            },
            "top_vehicles": self.top_vehicles(5),
            "top_customers": self.top_customers(5),
        }

    # --------------- Text reports ---------------
    def revenue_report(self, start: datetime, end: datetime) -> str:
        if as_utc(end) < as_utc(start):
            raise ValidationError("Error: period end is before its start")
        closed = [r for r in self.store.rentals.in_period(start, end) if not r.is_open]
        total = sum((r.final_amount or 0.0 for r in closed), 0.0)

        lines = [
            "REVENUE REPORT",
            f"Period: {fmt_local(start, self.timezone)} to {fmt_local(end, self.timezone)}",
            "",
            f"Rentals: {len(closed)}",
            f"Revenue: {total:.2f}",
        ]
        if closed:
            lines += [f"Average ticket: {total / len(closed):.2f}", "", "DETAILS:"]
            lines += [
                f"- {r.vehicle.model} ({r.vehicle.plate}) | {r.customer.name} | {r.final_amount:.2f}"
                for r in closed
            ]
        body = "\n".join(lines) + "\n"
        self.sink.emit("revenue", body)
        return body

    def _ranking_report(self, title: str, report_name: str, rows: List[Tuple[str, int]]) -> str:
        lines = [title, ""] + [f"{label}: {count} rental(s)" for label, count in rows]
        body = "\n".join(lines) + "\n"
        self.sink.emit(report_name, body)
        return body

    def top_vehicles_report(self) -> str:
        return self._ranking_report("MOST RENTED VEHICLES", "top_vehicles", self.top_vehicles())

    def top_customers_report(self) -> str:
        return self._ranking_report("MOST ACTIVE CUSTOMERS", "top_customers", self.top_customers())

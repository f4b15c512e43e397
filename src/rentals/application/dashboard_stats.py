"""Application service: Dashboard statistics (query).

``pending_returns`` is a reporting-only inference: an order that is neither
returned nor cancelled but whose end date has passed. No "overdue" status
is ever stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from rentals.domain.model.order import Order, OrderStatus
from rentals.domain.model.value_objects import DEFAULT_CURRENCY, Money
from rentals.domain.repository.clothing_set_repository import ClothingSetRepository
from rentals.domain.repository.order_repository import OrderRepository


@dataclass(frozen=True)
class DashboardStatsDTO:
    total_sets: int
    active_rentals: int
    pending_returns: int
    monthly_revenue: str


class DashboardStatsHandler:

    def __init__(
        self,
        clothing_set_repo: ClothingSetRepository,
        order_repo: OrderRepository,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._clothing_set_repo = clothing_set_repo
        self._order_repo = order_repo
        self._currency = currency

    def handle(self, today: date | None = None) -> DashboardStatsDTO:
        today = today or date.today()
        orders = self._order_repo.list_all()
        live = [o for o in orders if o.status != OrderStatus.CANCELLED]

        return DashboardStatsDTO(
            total_sets=len(self._clothing_set_repo.list_all()),
            active_rentals=sum(1 for o in live if o.is_running_on(today)),
            pending_returns=sum(1 for o in orders if o.is_overdue(today)),
            monthly_revenue=self._monthly_revenue(live, today),
        )

    def _monthly_revenue(self, orders: list[Order], today: date) -> str:
        """Totals of orders created this month, one figure per currency.

        With no revenue the configured currency is shown as zero.
        """
        by_currency: dict[str, Money] = {}
        for order in orders:
            created = order.created_at.date()
            if (created.year, created.month) != (today.year, today.month):
                continue
            total = order.total_amount
            running = by_currency.get(total.currency, Money.zero(total.currency))
            by_currency[total.currency] = running + total

        if not by_currency:
            return str(Money.zero(self._currency))
        return ", ".join(str(by_currency[c]) for c in sorted(by_currency))

"""Dashboard figures.

The dashboard shows fixed demonstration figures; nothing is aggregated
from the database.
"""

from admin_backend.api.schemas import (
    DashboardOverview,
    DashboardStats,
    OverviewItem,
    RecentSale,
    RecentSalesResponse,
    StatValue,
)
from admin_backend.services.request_context import RequestContext

MONTHLY_REVENUE = [
    ("Jan", 4500),
    ("Feb", 3200),
    ("Mar", 5100),
    ("Apr", 4800),
    ("May", 6200),
    ("Jun", 5800),
    ("Jul", 4900),
    ("Aug", 5500),
    ("Sep", 6100),
    ("Oct", 5300),
    ("Nov", 4700),
    ("Dec", 6800),
]

RECENT_SALES = [
    ("Olivia Martin", "olivia.martin@email.com", "/avatars/01.png", 1999.00),
    ("Jackson Lee", "jackson.lee@email.com", "/avatars/02.png", 39.00),
    ("Isabella Nguyen", "isabella.nguyen@email.com", "/avatars/03.png", 299.00),
    ("William Kim", "will@email.com", "/avatars/04.png", 99.00),
    ("Sofia Davis", "sofia.davis@email.com", "/avatars/05.png", 39.00),
]

TOTAL_SALES_THIS_MONTH = 2475


class DashboardService:
    """Serve the dashboard cards, chart and recent sales."""

    def __init__(self, ctx: RequestContext | None = None) -> None:
        self.ctx = ctx or RequestContext()

    def get_stats(self) -> DashboardStats:
        self.ctx.ensure_active()
        return DashboardStats(
            total_revenue=StatValue(value=45231.89, change="+20.1% from last month"),
            subscriptions=StatValue(value=2350, change="+180.1% from last month"),
            sales=StatValue(value=12234, change="+19% from last month"),
            active_now=StatValue(value=573, change="+201 since last hour"),
        )

    def get_overview(self) -> DashboardOverview:
        self.ctx.ensure_active()
        return DashboardOverview(
            data=[OverviewItem(name=m, total=t) for m, t in MONTHLY_REVENUE]
        )

    def get_recent_sales(self) -> RecentSalesResponse:
        self.ctx.ensure_active()
        return RecentSalesResponse(
            data=[
                RecentSale(name=name, email=email, avatar=avatar, amount=amount)
                for name, email, avatar, amount in RECENT_SALES
            ],
            total_sales=TOTAL_SALES_THIS_MONTH,
        )

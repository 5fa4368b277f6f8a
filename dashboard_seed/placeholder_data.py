"""Fixed placeholder records used to populate a fresh dashboard database.

Amounts are in cents. Invoices reference customers by id.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from dashboard_seed.schemas import CustomerSeed, InvoiceSeed, RevenueSeed, UserSeed


USERS = [
    UserSeed(
        id="410544b2-4001-4271-9855-fec4b6a6442a",
        name="User",
        email="user@nextmail.com",
        password="123456",
    ),
]

CUSTOMERS = [
    CustomerSeed(
        id="d6e15727-9fe1-4961-8c5b-ea44a9bd81aa",
        name="Evil Rabbit",
        email="evil@rabbit.com",
        image_url="/customers/evil-rabbit.png",
    ),
    CustomerSeed(
        id="3958dc9e-712f-4377-85e9-fec4b6a6442a",
        name="Delba de Oliveira",
        email="delba@oliveira.com",
        image_url="/customers/delba-de-oliveira.png",
    ),
    CustomerSeed(
        id="3958dc9e-742f-4377-85e9-fec4b6a6442a",
        name="Lee Robinson",
        email="lee@robinson.com",
        image_url="/customers/lee-robinson.png",
    ),
    CustomerSeed(
        id="76d65c26-f784-44a2-ac19-586678f7c2f2",
        name="Michael Novotny",
        email="michael@novotny.com",
        image_url="/customers/michael-novotny.png",
    ),
    CustomerSeed(
        id="CC27C14A-0ACF-4F4A-A6C9-D45682C144B9",
        name="Amy Burns",
        email="amy@burns.com",
        image_url="/customers/amy-burns.png",
    ),
    CustomerSeed(
        id="13D07535-C59E-4157-A011-F8D2EF4E0CBB",
        name="Balazs Orban",
        email="balazs@orban.com",
        image_url="/customers/balazs-orban.png",
    ),
]


def _invoice(customer_idx: int, amount: int, status: str, date: str) -> InvoiceSeed:
    return InvoiceSeed(customer_id=CUSTOMERS[customer_idx].id, amount=amount, status=status, date=date)


INVOICES = [
    _invoice(0, 15795, "pending", "2022-12-06"),
    _invoice(1, 20348, "pending", "2022-11-14"),
    _invoice(4, 3040, "paid", "2022-10-29"),
    _invoice(3, 44800, "paid", "2023-09-10"),
    _invoice(5, 34577, "pending", "2023-08-05"),
    _invoice(2, 54246, "pending", "2023-07-16"),
    _invoice(0, 666, "pending", "2023-06-27"),
    _invoice(3, 32545, "paid", "2023-06-09"),
    _invoice(4, 1250, "paid", "2023-06-17"),
    _invoice(5, 8546, "paid", "2023-06-07"),
    _invoice(1, 500, "paid", "2023-08-19"),
    _invoice(5, 8945, "paid", "2023-06-03"),
    _invoice(2, 1000, "paid", "2022-06-05"),
]

REVENUE = [
    RevenueSeed(month="Jan", revenue=2000),
    RevenueSeed(month="Feb", revenue=1800),
    RevenueSeed(month="Mar", revenue=2200),
    RevenueSeed(month="Apr", revenue=2500),
    RevenueSeed(month="May", revenue=2300),
    RevenueSeed(month="Jun", revenue=3200),
    RevenueSeed(month="Jul", revenue=3500),
    RevenueSeed(month="Aug", revenue=3700),
    RevenueSeed(month="Sep", revenue=2500),
    RevenueSeed(month="Oct", revenue=2800),
    RevenueSeed(month="Nov", revenue=3000),
    RevenueSeed(month="Dec", revenue=4800),
]


@dataclass
class SeedDatasets:
    """The four datasets inserted by one seed run, in insertion order."""

    users: List[UserSeed] = field(default_factory=list)
    customers: List[CustomerSeed] = field(default_factory=list)
    invoices: List[InvoiceSeed] = field(default_factory=list)
    revenue: List[RevenueSeed] = field(default_factory=list)

    def counts(self) -> dict:
        return {
            "users": len(self.users),
            "customers": len(self.customers),
            "invoices": len(self.invoices),
            "revenue": len(self.revenue),
        }


def default_datasets() -> SeedDatasets:
    return SeedDatasets(
        users=list(USERS),
        customers=list(CUSTOMERS),
        invoices=list(INVOICES),
        revenue=list(REVENUE),
    )


__all__ = ["USERS", "CUSTOMERS", "INVOICES", "REVENUE", "SeedDatasets", "default_datasets"]

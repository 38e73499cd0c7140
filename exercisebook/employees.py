"""Employees paid by commission, with or without a base salary."""

from __future__ import annotations

from dataclasses import dataclass


def _num(value: float) -> str:
    return f"{value:g}"


@dataclass
class CommissionEmployee:
    """An employee paid a share of gross sales."""

    first_name: str
    last_name: str
    gross_sales: float = 0.0
    commission_rate: float = 0.0

    def earnings(self) -> float:
        return self.commission_rate * self.gross_sales

    def __str__(self) -> str:
        return (
            f"{self.first_name} {self.last_name}: \n"
            f"Gross Sales: {_num(self.gross_sales)}\n"
            f"Commission Rate: {_num(self.commission_rate)}\n"
        )


@dataclass
class BasePlusCommissionEmployee(CommissionEmployee):
    """A commission employee who also earns a fixed base salary."""

    base_salary: float = 0.0

    def earnings(self) -> float:
        return self.base_salary + super().earnings()

    def __str__(self) -> str:
        return super().__str__() + f"Base Salary: {_num(self.base_salary)}\n"
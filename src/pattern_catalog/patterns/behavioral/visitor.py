"""Visitor: compute monthly and yearly cost reports over a closed set of contracts.

Each contract type dispatches to its own ``visit_*`` method, so adding a
report means adding a visitor, not touching the contracts.
"""
from abc import ABC, abstractmethod
from typing import Any, Generic, Iterable, TypeVar

from pydantic import Field

from pattern_catalog.domain.base.value_object import ValueObject
from pattern_catalog.domain.core.exceptions import UnsupportedTypeError

R = TypeVar("R")


class ReportVisitable(ValueObject, ABC):
    @abstractmethod
    def accept(self, visitor: "ReportVisitor[R]") -> R:
        """Dispatch to the visitor method for this contract type."""


class FixedPriceContract(ReportVisitable):
    cost_per_year: int = Field(ge=0)

    def accept(self, visitor: "ReportVisitor[R]") -> R:
        return visitor.visit_fixed_price_contract(self)


class TimeAndMaterialsContract(ReportVisitable):
    cost_per_hour: int = Field(ge=0)
    hours: int = Field(ge=0)

    def accept(self, visitor: "ReportVisitor[R]") -> R:
        return visitor.visit_time_and_materials_contract(self)


class SupportContract(ReportVisitable):
    cost_per_month: int = Field(ge=0)

    def accept(self, visitor: "ReportVisitor[R]") -> R:
        return visitor.visit_support_contract(self)


class ReportVisitor(ABC, Generic[R]):
    """Computes one value per contract."""

    def visit(self, contract: Any) -> R:
        """
        Visit any contract.

        Raises:
            UnsupportedTypeError: If ``contract`` is not a ReportVisitable
        """
        if not isinstance(contract, ReportVisitable):
            raise UnsupportedTypeError(
                f"{type(contract).__name__} cannot be visited by {type(self).__name__}",
                requested=type(contract).__name__,
            )
        return contract.accept(self)

    @abstractmethod
    def visit_fixed_price_contract(self, contract: FixedPriceContract) -> R:
        pass

    @abstractmethod
    def visit_time_and_materials_contract(self, contract: TimeAndMaterialsContract) -> R:
        pass

    @abstractmethod
    def visit_support_contract(self, contract: SupportContract) -> R:
        pass


class MonthlyCostReportVisitor(ReportVisitor[int]):
    def visit_fixed_price_contract(self, contract: FixedPriceContract) -> int:
        return contract.cost_per_year // 12

    def visit_time_and_materials_contract(self, contract: TimeAndMaterialsContract) -> int:
        return contract.cost_per_hour * contract.hours

    def visit_support_contract(self, contract: SupportContract) -> int:
        return contract.cost_per_month


class YearlyReportVisitor(ReportVisitor[int]):
    def visit_fixed_price_contract(self, contract: FixedPriceContract) -> int:
        return contract.cost_per_year

    def visit_time_and_materials_contract(self, contract: TimeAndMaterialsContract) -> int:
        return contract.cost_per_hour * contract.hours

    def visit_support_contract(self, contract: SupportContract) -> int:
        return contract.cost_per_month * 12


def total_cost(contracts: Iterable[Any], visitor: ReportVisitor[int]) -> int:
    """Sum the visitor's result over every contract."""
    return sum(visitor.visit(contract) for contract in contracts)


def demo() -> None:
    project_alpha = FixedPriceContract(cost_per_year=10000)
    project_beta = SupportContract(cost_per_month=500)
    project_gamma = TimeAndMaterialsContract(hours=150, cost_per_hour=10)
    project_kappa = TimeAndMaterialsContract(hours=50, cost_per_hour=50)

    projects = [project_alpha, project_beta, project_gamma, project_kappa]

    monthly_cost = total_cost(projects, MonthlyCostReportVisitor())
    print(f"Monthly cost: {monthly_cost}")

    yearly_cost = total_cost(projects, YearlyReportVisitor())
    print(f"Yearly cost: {yearly_cost}")

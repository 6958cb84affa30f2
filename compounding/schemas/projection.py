"""Data contracts for projection runs."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from compounding.domain.inputs import parameters_from_cards
from compounding.schemas.inputs import InputCard, InputParameters


class YearlySnapshot(BaseModel):
    """End-of-year state, in whole currency units."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(..., ge=1)
    balance: int
    totalContributions: int = Field(..., description="Nominal sum of deposits to date.")
    interestEarned: int = Field(..., description="balance - totalContributions.")
    simpleBalance: int = Field(
        ...,
        description="Balance the same deposits would reach with non-compounding interest.",
    )


class SummaryMetrics(BaseModel):
    """Headline figures derived from the final snapshot."""

    finalBalance: int
    totalContributions: int
    interestEarned: int
    interestMultiplier: float = Field(
        ...,
        description="Interest earned per unit contributed (0 when nothing was contributed).",
    )
    effectiveAnnualRate: float = Field(
        ...,
        description=(
            "Approximate constant annual rate, in percent, that turns total contributions "
            "into the final balance over the horizon. Not an IRR/XIRR."
        ),
    )


class ProjectionRequest(BaseModel):
    """
    Either the four named inputs or the form's list of input cards.

    Named values are taken raw and coerced later, so "", "abc" or null all
    count as zero.
    """

    model_config = ConfigDict(extra="forbid")

    initialAmount: Any = None
    monthlyAmount: Any = None
    interestRate: Any = None
    years: Any = None
    inputs: Optional[List[InputCard]] = None

    @model_validator(mode="after")
    def ensure_single_shape(self) -> "ProjectionRequest":
        if self.inputs is not None:
            named = [
                name
                for name in ("initialAmount", "monthlyAmount", "interestRate", "years")
                if getattr(self, name) is not None
            ]
            if named:
                raise ValueError(
                    f"send either 'inputs' or named fields, not both (got {', '.join(named)})"
                )
        return self

    def to_parameters(self) -> InputParameters:
        if self.inputs is not None:
            return parameters_from_cards(self.inputs)
        return InputParameters.model_validate(
            {
                "initialAmount": self.initialAmount,
                "monthlyAmount": self.monthlyAmount,
                "interestRate": self.interestRate,
                "years": self.years,
            }
        )


class ProjectionResponse(BaseModel):
    parameters: InputParameters
    snapshots: List[YearlySnapshot]
    summary: Optional[SummaryMetrics] = None

"""Data contracts for the four projection inputs."""

from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from compounding.domain.coercion import coerce_number, coerce_years


class InputParameters(BaseModel):
    """Coerced scalar inputs for a projection run."""

    initialAmount: float = Field(0.0, description="Starting lump sum.")
    monthlyAmount: float = Field(0.0, description="Deposit added at the start of every month.")
    interestRate: float = Field(
        0.0,
        description="Annual return expressed as a percent (e.g. 7 for 7%).",
    )
    years: int = Field(0, description="Number of whole years to project.")

    @field_validator("initialAmount", "monthlyAmount", "interestRate", mode="before")
    @classmethod
    def _coerce_amount(cls, value: Any) -> float:
        return coerce_number(value)

    @field_validator("years", mode="before")
    @classmethod
    def _coerce_years(cls, value: Any) -> int:
        return coerce_years(value)


class InputCard(BaseModel):
    """One labelled input field as the form lays it out.

    The value stays raw (usually a string) until it is mapped onto
    InputParameters."""

    model_config = ConfigDict(extra="ignore")

    id: str
    label: str = ""
    value: Any = ""
    placeholder: str = ""


class InputCardsResponse(BaseModel):
    inputs: List[InputCard]

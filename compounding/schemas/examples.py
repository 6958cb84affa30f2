"""Data contracts for the worked examples panel."""

from pydantic import BaseModel


class TimeVsAmount(BaseModel):
    # small deposits over a long horizon vs double deposits over half of it
    longMonthly: float
    longYears: int
    longBalance: int
    shortMonthly: float
    shortYears: int
    shortBalance: int
    timeWins: bool


class LatteFactor(BaseModel):
    dailySpend: float
    monthlyAmount: float
    years: int
    balance: int


class StartYoung(BaseModel):
    monthlyAmount: float
    earlyStartAge: int
    lateStartAge: int
    retirementAge: int
    earlyBalance: int
    lateBalance: int
    difference: int


class WorkedExamples(BaseModel):
    annualRatePercent: float
    timeVsAmount: TimeVsAmount
    latteFactor: LatteFactor
    startYoung: StartYoung

from __future__ import annotations

from typing import Dict, Iterable, List

from compounding.schemas.inputs import InputCard, InputParameters

CARD_IDS = ("initialAmount", "monthlyAmount", "interestRate", "years")


class InputCardError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


def default_cards() -> List[InputCard]:
    """Starting state of the form: nothing up front, 100 a month at 7% for 40 years."""
    return [
        InputCard(id="initialAmount", label="Initial Amount", value="", placeholder="0"),
        InputCard(id="monthlyAmount", label="Monthly Savings", value="100", placeholder="100"),
        InputCard(id="interestRate", label="Annual Return (%)", value="7", placeholder="7"),
        InputCard(id="years", label="Time (Years)", value="40", placeholder="40"),
    ]


def parameters_from_cards(cards: Iterable[InputCard]) -> InputParameters:
    """
    Map an ordered list of input cards onto InputParameters by card id.

    Card order carries no meaning here; a missing card counts as zero.
    Unknown and repeated ids are rejected.
    """
    values: Dict[str, object] = {}
    errors: List[str] = []

    for card in cards:
        if card.id not in CARD_IDS:
            errors.append(f"unknown input id '{card.id}'")
            continue
        if card.id in values:
            errors.append(f"duplicate input id '{card.id}'")
            continue
        values[card.id] = card.value

    if errors:
        raise InputCardError(errors)

    return InputParameters.model_validate({card_id: values.get(card_id) for card_id in CARD_IDS})

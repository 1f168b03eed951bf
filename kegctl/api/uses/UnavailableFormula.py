"""Placeholder for a queried formula that no tap defines."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UnavailableFormula:
    name: str
    full_name: str

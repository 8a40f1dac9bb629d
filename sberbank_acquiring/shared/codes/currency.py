"""
Currency codes in ISO 4217 numeric format.
"""
from __future__ import annotations

from enum import Enum


class Currency(str, Enum):
    EUR = "978"
    RUB = "643"
    UAH = "980"
    USD = "840"

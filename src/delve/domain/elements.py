"""Elemental advantage table used by combat."""
from __future__ import annotations

from typing import Dict

from delve.domain.enums import Element

# Multipliers are kept in integer tenths so damage floors exactly.
ADVANTAGE_TENTHS = 15
RESISTANCE_TENTHS = 7
NEUTRAL_TENTHS = 10

# attacker -> the single defender element it beats; not symmetric.
_BEATS: Dict[Element, Element] = {
    Element.FIRE: Element.WIND,
    Element.WIND: Element.EARTH,
    Element.EARTH: Element.WATER,
    Element.WATER: Element.FIRE,
}


def element_multiplier_tenths(attacker: Element, defender: Element) -> int:
    """Return the damage multiplier, in tenths, for an attacker element hitting a defender element."""
    if _BEATS.get(attacker) is defender:
        return ADVANTAGE_TENTHS
    if attacker is not Element.NONE and attacker is defender:
        return RESISTANCE_TENTHS
    return NEUTRAL_TENTHS


def element_multiplier(attacker: Element, defender: Element) -> float:
    return element_multiplier_tenths(attacker, defender) / 10


def scale_by_element(value: int, attacker: Element, defender: Element) -> int:
    """Apply the element multiplier to ``value``, flooring the result."""
    return value * element_multiplier_tenths(attacker, defender) // 10

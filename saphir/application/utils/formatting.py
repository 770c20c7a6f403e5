from __future__ import annotations

import re
from datetime import date

FRENCH_DAY_NAMES = (
    "lundi",
    "mardi",
    "mercredi",
    "jeudi",
    "vendredi",
    "samedi",
    "dimanche",
)

FRENCH_MONTH_NAMES = (
    "janvier",
    "février",
    "mars",
    "avril",
    "mai",
    "juin",
    "juillet",
    "août",
    "septembre",
    "octobre",
    "novembre",
    "décembre",
)

FRENCH_MONTH_ABBREVIATIONS = (
    "janv.",
    "févr.",
    "mars",
    "avr.",
    "mai",
    "juin",
    "juil.",
    "août",
    "sept.",
    "oct.",
    "nov.",
    "déc.",
)

COUNTRY_PREFIXES = ("+225", "00225", "225")

_WHITESPACE = re.compile(r"\s+")


def format_price(amount: int) -> str:
    """French digit grouping: 150000 -> "150 000"."""
    sign = "-" if amount < 0 else ""
    return sign + f"{abs(amount):,}".replace(",", " ")


def format_long_date(value: date) -> str:
    """e.g. "lundi 19 octobre 2026"."""
    return f"{FRENCH_DAY_NAMES[value.weekday()]} {value.day} {FRENCH_MONTH_NAMES[value.month - 1]} {value.year}"


def format_short_date(value: date, with_year: bool = True) -> str:
    """e.g. "19 oct. 2026", or "19 oct." without the year."""
    text = f"{value.day} {FRENCH_MONTH_ABBREVIATIONS[value.month - 1]}"
    if with_year:
        text += f" {value.year}"
    return text


def normalize_phone(phone: str) -> str:
    """Strip whitespace, then one leading Ivorian country code (+225, 00225 or 225)."""
    compact = _WHITESPACE.sub("", phone or "")
    for prefix in COUNTRY_PREFIXES:
        if compact.startswith(prefix):
            return compact[len(prefix):]
    return compact


def phone_for_chat(phone: str) -> str:
    """Digits-only international number for a chat link: no spaces, no "+", no leading "00"."""
    compact = _WHITESPACE.sub("", phone or "").replace("+", "", 1)
    if compact.startswith("00"):
        compact = compact[2:]
    return compact

# -*- coding: utf-8 -*-
"""Medicines — reference catalog of common diabetes medicines."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from ..models import CatalogCategory
from .models import CatalogMedicine

# key -> (label, [(name, kind, common_dose), ...])
_RAW: Dict[str, Tuple[str, List[Tuple[str, str, str]]]] = {
    "insulin": (
        "ইনসুলিন",
        [
            ("হিউমুলিন এন", "দীর্ঘমেয়াদী", "10-20 ইউনিট"),
            ("নোভোরেপিড", "দ্রুত কার্যকর", "5-15 ইউনিট"),
            ("ল্যান্টাস", "দীর্ঘমেয়াদী", "10-25 ইউনিট"),
            ("হিউমালগ", "দ্রুত কার্যকর", "5-12 ইউনিট"),
        ],
    ),
    "tablets": (
        "ট্যাবলেট",
        [
            ("মেটফরমিন", "বিগুয়ানাইড", "500-1000 মি.গ্রা."),
            ("গ্লিবেনক্লামাইড", "সালফোনাইল ইউরিয়া", "2.5-5 মি.গ্রা."),
            ("গ্লিক্লাজাইড", "সালফোনাইল ইউরিয়া", "40-80 মি.গ্রা."),
            ("পায়োগ্লিটাজোন", "থায়াজোলিডিনডায়োন", "15-30 মি.গ্রা."),
            ("সিটাগ্লিপটিন", "ডিপিপি-4 ইনহিবিটর", "100 মি.গ্রা."),
            ("এমপ্যাগ্লিফ্লোজিন", "এসজিএলটি-2 ইনহিবিটর", "10-25 মি.গ্রা."),
        ],
    ),
    "combinations": (
        "কম্বিনেশন ওষুধ",
        [
            ("গ্লিমেট", "গ্লিমেপিরাইড + মেটফরমিন", "1-2 ট্যাবলেট"),
            ("ডায়াবেকন", "হার্বাল", "1-2 ট্যাবলেট"),
            ("গ্যালভাস মেট", "ভিলডাগ্লিপটিন + মেটফরমিন", "1 ট্যাবলেট"),
        ],
    ),
}

MEDICINES: Dict[str, List[CatalogMedicine]] = {
    key: [CatalogMedicine(name=name, category=key, kind=kind, common_dose=dose) for name, kind, dose in items]
    for key, (_, items) in _RAW.items()
}


def all_medicines() -> List[CatalogMedicine]:
    return [medicine for items in MEDICINES.values() for medicine in items]


def medicines_by_category(category: str) -> List[CatalogMedicine]:
    return list(MEDICINES.get(category, []))


def medicine_categories() -> List[CatalogCategory]:
    return [CatalogCategory(key=key, label=label, item_count=len(items)) for key, (label, items) in _RAW.items()]


def search_medicines(query: Optional[str] = None, category: Optional[str] = None) -> List[CatalogMedicine]:
    medicines = medicines_by_category(category) if category else all_medicines()
    needle = (query or "").strip().casefold()
    if not needle:
        return medicines
    return [m for m in medicines if needle in m.name.casefold()]

# -*- coding: utf-8 -*-
"""Food — reference catalog of common Bangladeshi foods.

Carbohydrate (g) and calorie (kcal) values are per listed portion. Used for
suggestions when logging a food entry; read-only and shared by all users.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from ..models import CatalogCategory
from .models import CatalogFood

# key -> (label, [(name, carbs, portion, calories), ...])
_RAW: Dict[str, Tuple[str, List[Tuple[str, float, str, int]]]] = {
    "rice": (
        "ভাত ও চাল",
        [
            ("সাদা ভাত", 28, "১ কাপ", 130),
            ("বাসমতি চাল", 22, "১ কাপ", 120),
            ("লাল চাল", 23, "১ কাপ", 110),
            ("পোলাও", 35, "১ প্লেট", 220),
            ("বিরিয়ানি", 45, "১ প্লেট", 350),
            ("খিচুড়ি", 30, "১ বাটি", 180),
        ],
    ),
    "fish": (
        "মাছ ও সামুদ্রিক খাবার",
        [
            ("ইলিশ মাছ", 0, "১ টুকরা", 150),
            ("রুই মাছ", 0, "১ টুকরা", 120),
            ("কাতলা মাছ", 0, "১ টুকরা", 140),
            ("পাঙ্গাশ মাছ", 0, "১ টুকরা", 100),
            ("চিংড়ি", 1, "৫০ গ্রাম", 85),
            ("মাছের ঝোল", 5, "১ বাটি", 120),
        ],
    ),
    "meat": (
        "মাংস ও পোল্ট্রি",
        [
            ("গরুর মাংস", 0, "১০০ গ্রাম", 250),
            ("খাসির মাংস", 0, "১০০ গ্রাম", 280),
            ("মুরগির মাংস", 0, "১০০ গ্রাম", 165),
            ("কলিজা", 3, "১০০ গ্রাম", 135),
            ("মুরগির ডিম", 1, "১টি", 70),
            ("কোরমা", 8, "১ বাটি", 300),
        ],
    ),
    "vegetables": (
        "সবজি ও তরকারি",
        [
            ("আলু ভর্তা", 20, "১ বাটি", 120),
            ("বেগুন ভর্তা", 8, "১ বাটি", 80),
            ("পালং শাক", 4, "১ বাটি", 25),
            ("লাউ শাক", 5, "১ বাটি", 30),
            ("করলা ভাজি", 6, "১ বাটি", 45),
            ("আলু ভাজি", 25, "১ বাটি", 150),
            ("ঢেঁড়শ ভাজি", 8, "১ বাটি", 60),
            ("কাঁচকলা তরকারি", 15, "১ বাটি", 90),
        ],
    ),
    "lentils": (
        "ডাল ও বিন",
        [
            ("মসুর ডাল", 18, "১ বাটি", 115),
            ("মুগ ডাল", 15, "১ বাটি", 105),
            ("চানা ডাল", 20, "১ বাটি", 125),
            ("অড়হর ডাল", 22, "১ বাটি", 130),
            ("খেসারি ডাল", 19, "১ বাটি", 120),
        ],
    ),
    "snacks": (
        "নাস্তা ও স্ন্যাকস",
        [
            ("পিঠা", 35, "১টি", 180),
            ("চানাচুর", 25, "৫০ গ্রাম", 200),
            ("মুড়ি", 20, "১ কাপ", 90),
            ("সিঙাড়া", 30, "১টি", 150),
            ("সমুচা", 28, "১টি", 140),
            ("জিলাপি", 40, "১টি", 200),
            ("রসগোল্লা", 25, "১টি", 120),
            ("পায়েস", 35, "১ বাটি", 180),
        ],
    ),
    "breakfast": (
        "নাস্তার খাবার",
        [
            ("রুটি", 15, "১টি", 80),
            ("পরোটা", 25, "১টি", 150),
            ("নান রুটি", 30, "১টি", 180),
            ("ডাল পুরি", 35, "১টি", 200),
            ("হালুয়া", 45, "১ বাটি", 250),
            ("চা (চিনি সহ)", 5, "১ কাপ", 25),
            ("চা (চিনি ছাড়া)", 0, "১ কাপ", 5),
        ],
    ),
    "fruits": (
        "ফল ও ফলের রস",
        [
            ("আম", 25, "১টি মাঝারি", 100),
            ("কলা", 27, "১টি", 110),
            ("আপেল", 25, "১টি মাঝারি", 95),
            ("পেয়ারা", 15, "১টি", 65),
            ("কমলা", 15, "১টি", 60),
            ("আনারস", 20, "১ স্লাইস", 80),
            ("তরমুজ", 12, "১ কাপ", 50),
            ("ডাবের পানি", 8, "১ গ্লাস", 35),
        ],
    ),
}

FOODS: Dict[str, List[CatalogFood]] = {
    key: [
        CatalogFood(name=name, category=key, portion=portion, carbohydrates=carbs, calories=calories)
        for name, carbs, portion, calories in items
    ]
    for key, (_, items) in _RAW.items()
}


def all_foods() -> List[CatalogFood]:
    return [food for items in FOODS.values() for food in items]


def foods_by_category(category: str) -> List[CatalogFood]:
    """Unknown categories yield an empty list."""
    return list(FOODS.get(category, []))


def food_categories() -> List[CatalogCategory]:
    return [CatalogCategory(key=key, label=label, item_count=len(items)) for key, (label, items) in _RAW.items()]


def search_foods(query: Optional[str] = None, category: Optional[str] = None) -> List[CatalogFood]:
    """Case-insensitive substring match on the name, optionally within one category."""
    foods = foods_by_category(category) if category else all_foods()
    needle = (query or "").strip().casefold()
    if not needle:
        return foods
    return [food for food in foods if needle in food.name.casefold()]

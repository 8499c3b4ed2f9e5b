from typing import Dict, Tuple

# Zodiac order (0 = Aries)
SIGNS: Dict[str, Tuple[str, ...]] = {
    "en": (
        "Aries", "Taurus", "Gemini", "Cancer",
        "Leo", "Virgo", "Libra", "Scorpio",
        "Sagittarius", "Capricorn", "Aquarius", "Pisces",
    ),
    "ru": (
        "Овен", "Телец", "Близнецы", "Рак",
        "Лев", "Дева", "Весы", "Скорпион",
        "Стрелец", "Козерог", "Водолей", "Рыбы",
    ),
}

# Nakshatra names in order (Ashwini → Revati)
NAKSHATRAS: Dict[str, Tuple[str, ...]] = {
    "en": (
        "Ashwini", "Bharani", "Krittika", "Rohini", "Mrigashirsha",
        "Ardra", "Punarvasu", "Pushya", "Ashlesha",
        "Magha", "Purva Phalguni", "Uttara Phalguni", "Hasta",
        "Chitra", "Swati", "Vishakha", "Anuradha", "Jyeshtha",
        "Mula", "Purva Ashadha", "Uttara Ashadha", "Shravana",
        "Dhanishta", "Shatabhisha", "Purva Bhadrapada",
        "Uttara Bhadrapada", "Revati",
    ),
    "ru": (
        "Ашвини", "Бхарани", "Криттика", "Рохини", "Мригашира",
        "Ардра", "Пунарвасу", "Пушья", "Ашлеша",
        "Магха", "Пурва Пхалгуни", "Уттара Пхалгуни", "Хаста",
        "Читра", "Свати", "Вишакха", "Ануратха", "Джйештха",
        "Мула", "Пурва Ашадха", "Уттара Ашадха", "Шравана",
        "Дхаништха", "Шатабхиша", "Пурва Бхадрапада",
        "Уттара Бхадрапада", "Ревати",
    ),
}

DEFAULT_LOCALE = "en"

# Sign temperament triads
MOVABLE_SIGNS = frozenset({0, 3, 6, 9})
FIXED_SIGNS = frozenset({1, 4, 7, 10})
DUAL_SIGNS = frozenset({2, 5, 8, 11})


def sign_name(sign: int, locale: str = DEFAULT_LOCALE) -> str:
    return SIGNS.get(locale, SIGNS[DEFAULT_LOCALE])[sign]


def nakshatra_name(index: int, locale: str = DEFAULT_LOCALE) -> str:
    return NAKSHATRAS.get(locale, NAKSHATRAS[DEFAULT_LOCALE])[index]

"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "above_horizon": {
        "ko": "{name}은(는) 지평선 위 {alt:.1f}°, {compass} 방향({az:.1f}°)에 있어요.",
        "en": "{name} is {alt:.1f}° above the horizon, bearing {compass} ({az:.1f}°).",
    },
    "below_horizon": {
        "ko": "{name}은(는) 지평선 아래 {alt:.1f}°, {compass} 방향({az:.1f}°)에 있어요.",
        "en": "{name} is {alt:.1f}° below the horizon, bearing {compass} ({az:.1f}°).",
    },
    "unnamed_star": {
        "ko": "별",
        "en": "The star",
    },
    "N": {"ko": "북", "en": "N"},
    "NNE": {"ko": "북북동", "en": "NNE"},
    "NE": {"ko": "북동", "en": "NE"},
    "ENE": {"ko": "동북동", "en": "ENE"},
    "E": {"ko": "동", "en": "E"},
    "ESE": {"ko": "동남동", "en": "ESE"},
    "SE": {"ko": "남동", "en": "SE"},
    "SSE": {"ko": "남남동", "en": "SSE"},
    "S": {"ko": "남", "en": "S"},
    "SSW": {"ko": "남남서", "en": "SSW"},
    "SW": {"ko": "남서", "en": "SW"},
    "WSW": {"ko": "서남서", "en": "WSW"},
    "W": {"ko": "서", "en": "W"},
    "WNW": {"ko": "서북서", "en": "WNW"},
    "NW": {"ko": "북서", "en": "NW"},
    "NNW": {"ko": "북북서", "en": "NNW"},
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key

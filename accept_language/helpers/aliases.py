"""
Legacy locale alias normalization.

zh-CN = Simplified script, Mandarin grammar: Chinese as written in China
zh-TW = Traditional script, Mandarin grammar: Chinese as written in Taiwan
zh-HK = Traditional script, Cantonese grammar: Chinese as written in Hong Kong
"""

from types import MappingProxyType

LEGACY_LOCALE_ALIASES = MappingProxyType(
    {
        # .NET neutral culture names
        "zh-chs": "zh-Hans",
        "zh-cht": "zh-Hant",
        "zh-cn": "zh-Hans-CN",
        "zh-hk": "zh-Hant-HK",
        "zh-mo": "zh-Hant-MO",
        "zh-sg": "zh-Hans-SG",
        "zh-tw": "zh-Hant-TW",
    }
)


def map_locales(locale: str) -> str:
    """
    Normalize a language range before it is split into subtags.

    Lower-cases the value, turns underscores into hyphens and expands legacy
    aliases (e.g. "zh_TW" -> "zh-Hant-TW"). Anything else passes through in
    lower case.
    """
    value = locale.lower().replace("_", "-")
    return LEGACY_LOCALE_ALIASES.get(value, value)

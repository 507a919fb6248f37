"""Canonical language codes and their per-provider wire vocabularies.

Every provider names languages its own way (Baidu "jp", Youdao "zh-CHS", MyMemory "en-GB", ...).
``Language`` is the single vocabulary callers use; the tables below translate it to and from each
provider's codes. Encoding picks exactly one wire code per language; decoding additionally accepts
a few documented aliases, so decoding can be many-to-one.

Canonical values are ISO 639-1 codes where one exists, ISO 639-3 otherwise.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Final

from models.translation_models import ProviderKind

__all__: list[str] = [
    "Language",
    "auto_detect_code",
    "from_provider_code",
    "supported_languages",
    "to_provider_code",
]


class Language(StrEnum):
    CHINESE = "zh"
    TRADITIONAL_CHINESE = "zh-Hant"
    CLASSICAL_CHINESE = "lzh"
    CANTONESE = "yue"
    HAKKA = "hak"
    ENGLISH = "en"
    OLD_ENGLISH = "ang"
    SCOTS = "sco"
    JAPANESE = "ja"
    KOREAN = "ko"
    FRENCH = "fr"
    MIDDLE_FRENCH = "frm"
    FRANKISH = "frk"
    SPANISH = "es"
    PORTUGUESE = "pt"
    BRAZILIAN_PORTUGUESE = "pt-BR"
    GERMAN = "de"
    LOW_GERMAN = "nds"
    ITALIAN = "it"
    NEAPOLITAN = "nap"
    SARDINIAN = "sc"
    FRIULIAN = "fur"
    RUSSIAN = "ru"
    RUSYN = "rue"
    ARABIC = "ar"
    ALGERIAN_ARABIC = "arq"
    TUNISIAN_ARABIC = "aeb"
    THAI = "th"
    VIETNAMESE = "vi"
    INDONESIAN = "id"
    MALAY = "ms"
    JAVANESE = "jv"
    SUNDANESE = "su"
    HINDI = "hi"
    BENGALI = "bn"
    TURKISH = "tr"
    DUTCH = "nl"
    POLISH = "pl"
    SILESIAN = "szl"
    KASHUBIAN = "csb"
    GREEK = "el"
    ANCIENT_GREEK = "grc"
    CZECH = "cs"
    SLOVAK = "sk"
    SLOVENIAN = "sl"
    ROMANIAN = "ro"
    ROMANI = "rom"
    BULGARIAN = "bg"
    HUNGARIAN = "hu"
    SWEDISH = "sv"
    DANISH = "da"
    FINNISH = "fi"
    NORWEGIAN = "no"
    ICELANDIC = "is"
    FAROESE = "fo"
    ESTONIAN = "et"
    LATVIAN = "lv"
    LATGALIAN = "ltg"
    LITHUANIAN = "lt"
    UKRAINIAN = "uk"
    BELARUSIAN = "be"
    SERBIAN = "sr"
    SERBO_CROATIAN = "sh"
    CROATIAN = "hr"
    BOSNIAN = "bs"
    MONTENEGRIN = "cnr"
    MACEDONIAN = "mk"
    ALBANIAN = "sq"
    UPPER_SORBIAN = "hsb"
    LOWER_SORBIAN = "dsb"
    HEBREW = "he"
    YIDDISH = "yi"
    PERSIAN = "fa"
    URDU = "ur"
    PASHTO = "ps"
    BALUCHI = "bal"
    KURDISH = "ku"
    ZAZA = "zza"
    ARMENIAN = "hy"
    GEORGIAN = "ka"
    AZERBAIJANI = "az"
    KAZAKH = "kk"
    KYRGYZ = "ky"
    UZBEK = "uz"
    TAJIK = "tg"
    TURKMEN = "tk"
    TATAR = "tt"
    CRIMEAN_TATAR = "crh"
    BASHKIR = "ba"
    CHUVASH = "cv"
    OSSETIAN = "os"
    INGUSH = "inh"
    MONGOLIAN = "mn"
    SYRIAC = "syr"
    FILIPINO = "fil"
    TAGALOG = "tl"
    CEBUANO = "ceb"
    HILIGAYNON = "hil"
    PAMPANGA = "pam"
    SWAHILI = "sw"
    LATIN = "la"
    KLINGON = "tlh"
    AFRIKAANS = "af"
    AMHARIC = "am"
    TIGRINYA = "ti"
    OROMO = "om"
    SOMALI = "so"
    HAUSA = "ha"
    IGBO = "ig"
    YORUBA = "yo"
    AKAN = "ak"
    TWI = "tw"
    WOLOF = "wo"
    FULAH = "ff"
    KANURI = "kr"
    BEMBA = "bem"
    LINGALA = "ln"
    KONGO = "kg"
    GANDA = "lg"
    ACHOLI = "ach"
    KINYARWANDA = "rw"
    CHICHEWA = "ny"
    SHONA = "sn"
    ZULU = "zu"
    XHOSA = "xh"
    SESOTHO = "st"
    NORTHERN_SOTHO = "nso"
    SOUTH_NDEBELE = "nr"
    TSONGA = "ts"
    VENDA = "ve"
    MALAGASY = "mg"
    KABYLE = "kab"
    BERBER = "ber"
    BLIN = "byn"
    SONGHAI = "son"
    NKO = "nqo"
    MAURITIAN_CREOLE = "mfe"
    HAITIAN_CREOLE = "ht"
    PAPIAMENTO = "pap"
    BASQUE = "eu"
    CATALAN = "ca"
    GALICIAN = "gl"
    ASTURIAN = "ast"
    ARAGONESE = "an"
    OCCITAN = "oc"
    CORSICAN = "co"
    ROMANSH = "rm"
    WALLOON = "wa"
    LUXEMBOURGISH = "lb"
    LIMBURGISH = "li"
    FRISIAN = "fy"
    IRISH = "ga"
    SCOTTISH_GAELIC = "gd"
    WELSH = "cy"
    BRETON = "br"
    CORNISH = "kw"
    MANX = "gv"
    MALTESE = "mt"
    NORTHERN_SAMI = "se"
    GREENLANDIC = "kl"
    INUKTITUT = "iu"
    CREE = "cr"
    OJIBWA = "oj"
    CHEROKEE = "chr"
    HUPA = "hup"
    HAWAIIAN = "haw"
    MAORI = "mi"
    SAMOAN = "sm"
    TONGAN = "to"
    TAHITIAN = "ty"
    FIJIAN = "fj"
    MARSHALLESE = "mh"
    BISLAMA = "bi"
    TETUM = "tet"
    QUECHUA = "qu"
    AYMARA = "ay"
    GUARANI = "gn"
    YUCATEC_MAYA = "yua"
    QUERETARO_OTOMI = "otq"
    PUNJABI = "pa"
    GUJARATI = "gu"
    MARATHI = "mr"
    KONKANI = "kok"
    MAITHILI = "mai"
    BHOJPURI = "bho"
    NEPALI = "ne"
    ASSAMESE = "as"
    ODIA = "or"
    SANSKRIT = "sa"
    SINDHI = "sd"
    KASHMIRI = "ks"
    SINHALA = "si"
    DHIVEHI = "dv"
    TAMIL = "ta"
    TELUGU = "te"
    KANNADA = "kn"
    MALAYALAM = "ml"
    BURMESE = "my"
    SHAN = "shn"
    KHMER = "km"
    LAO = "lo"
    HMONG = "hmn"
    HMONG_DAW = "mww"
    ESPERANTO = "eo"
    INTERLINGUA = "ia"
    IDO = "io"
    LOJBAN = "jbo"

    @classmethod
    def parse(cls, text: str) -> Language:
        """Parse a canonical code ("en", "zh-Hant") or member name ("english"), case-insensitively.

        Raises:
            ValueError: If the text names no language.
        """
        key: str = text.strip().lower()
        for member in cls:
            if key in (member.value.lower(), member.name.lower()):
                return member
        msg: str = f"Unknown language: '{text}'"
        raise ValueError(msg)


_L = Language

_PROVIDER_CODES: Final[dict[ProviderKind, dict[Language, str]]] = {
    ProviderKind.BAIDU: {
        _L.CHINESE: "zh", _L.TRADITIONAL_CHINESE: "cht", _L.CLASSICAL_CHINESE: "wyw", _L.CANTONESE: "yue",
        _L.HAKKA: "hak", _L.ENGLISH: "en", _L.OLD_ENGLISH: "eno", _L.SCOTS: "sco", _L.JAPANESE: "jp",
        _L.KOREAN: "kor", _L.FRENCH: "fra", _L.MIDDLE_FRENCH: "frm", _L.FRANKISH: "frn", _L.SPANISH: "spa",
        _L.PORTUGUESE: "pt", _L.BRAZILIAN_PORTUGUESE: "pot", _L.GERMAN: "de", _L.LOW_GERMAN: "log",
        _L.ITALIAN: "it", _L.NEAPOLITAN: "nea", _L.SARDINIAN: "srd", _L.FRIULIAN: "fri", _L.RUSSIAN: "ru",
        _L.RUSYN: "ruy", _L.ARABIC: "ara", _L.ALGERIAN_ARABIC: "arq", _L.TUNISIAN_ARABIC: "tua",
        _L.THAI: "th", _L.VIETNAMESE: "vie", _L.INDONESIAN: "id", _L.MALAY: "may", _L.JAVANESE: "jav",
        _L.SUNDANESE: "sun", _L.HINDI: "hi", _L.BENGALI: "ben", _L.TURKISH: "tr", _L.DUTCH: "nl",
        _L.POLISH: "pl", _L.SILESIAN: "sil", _L.KASHUBIAN: "kah", _L.GREEK: "el", _L.ANCIENT_GREEK: "gra",
        _L.CZECH: "cs", _L.SLOVAK: "sk", _L.SLOVENIAN: "slo", _L.ROMANIAN: "rom", _L.ROMANI: "ro",
        _L.BULGARIAN: "bul", _L.HUNGARIAN: "hu", _L.SWEDISH: "swe", _L.DANISH: "dan", _L.FINNISH: "fin",
        _L.NORWEGIAN: "nor", _L.ICELANDIC: "ice", _L.FAROESE: "fao", _L.ESTONIAN: "est", _L.LATVIAN: "lav",
        _L.LATGALIAN: "lag", _L.LITHUANIAN: "lit", _L.UKRAINIAN: "ukr", _L.BELARUSIAN: "bel",
        _L.SERBIAN: "srp", _L.SERBO_CROATIAN: "sec", _L.CROATIAN: "hrv", _L.BOSNIAN: "bos",
        _L.MONTENEGRIN: "mot", _L.MACEDONIAN: "mac", _L.ALBANIAN: "alb", _L.UPPER_SORBIAN: "ups",
        _L.LOWER_SORBIAN: "los", _L.HEBREW: "heb", _L.YIDDISH: "yid", _L.PERSIAN: "per", _L.URDU: "urd",
        _L.PASHTO: "pus", _L.BALUCHI: "bal", _L.KURDISH: "kur", _L.ZAZA: "zaz", _L.ARMENIAN: "arm",
        _L.GEORGIAN: "geo", _L.AZERBAIJANI: "aze", _L.KYRGYZ: "kir", _L.TAJIK: "tgk", _L.TURKMEN: "tuk",
        _L.TATAR: "tat", _L.CRIMEAN_TATAR: "cri", _L.BASHKIR: "bak", _L.CHUVASH: "chv", _L.OSSETIAN: "oss",
        _L.INGUSH: "ing", _L.SYRIAC: "syr", _L.FILIPINO: "fil", _L.TAGALOG: "tgl", _L.CEBUANO: "ceb",
        _L.HILIGAYNON: "hil", _L.PAMPANGA: "pam", _L.SWAHILI: "swa", _L.LATIN: "lat", _L.KLINGON: "kli",
        _L.AFRIKAANS: "afr", _L.AMHARIC: "amh", _L.TIGRINYA: "tir", _L.OROMO: "orm", _L.SOMALI: "som",
        _L.HAUSA: "hau", _L.IGBO: "ibo", _L.YORUBA: "yor", _L.AKAN: "aka", _L.TWI: "twi", _L.WOLOF: "wol",
        _L.FULAH: "ful", _L.KANURI: "kau", _L.BEMBA: "bem", _L.LINGALA: "lin", _L.KONGO: "kon",
        _L.GANDA: "lug", _L.ACHOLI: "ach", _L.KINYARWANDA: "kin", _L.CHICHEWA: "nya", _L.SHONA: "sna",
        _L.ZULU: "zul", _L.XHOSA: "xho", _L.SESOTHO: "sot", _L.NORTHERN_SOTHO: "ped",
        _L.SOUTH_NDEBELE: "nbl", _L.TSONGA: "tso", _L.VENDA: "ven", _L.MALAGASY: "mg", _L.KABYLE: "kab",
        _L.BERBER: "ber", _L.BLIN: "bli", _L.SONGHAI: "sol", _L.NKO: "nqo", _L.MAURITIAN_CREOLE: "mau",
        _L.HAITIAN_CREOLE: "ht", _L.PAPIAMENTO: "pap", _L.BASQUE: "baq", _L.CATALAN: "cat",
        _L.GALICIAN: "glg", _L.ASTURIAN: "ast", _L.ARAGONESE: "arg", _L.OCCITAN: "oci", _L.CORSICAN: "cos",
        _L.ROMANSH: "roh", _L.WALLOON: "wln", _L.LUXEMBOURGISH: "ltz", _L.LIMBURGISH: "lim",
        _L.FRISIAN: "fry", _L.IRISH: "gle", _L.SCOTTISH_GAELIC: "gla", _L.WELSH: "wel", _L.BRETON: "bre",
        _L.CORNISH: "cor", _L.MANX: "glv", _L.MALTESE: "mlt", _L.NORTHERN_SAMI: "sme",
        _L.GREENLANDIC: "kal", _L.INUKTITUT: "iku", _L.CREE: "cre", _L.OJIBWA: "oji", _L.CHEROKEE: "chr",
        _L.HUPA: "hup", _L.HAWAIIAN: "haw", _L.MAORI: "mao", _L.SAMOAN: "sm", _L.MARSHALLESE: "mah",
        _L.BISLAMA: "bis", _L.TETUM: "tet", _L.QUECHUA: "que", _L.AYMARA: "aym", _L.GUARANI: "grn",
        _L.PUNJABI: "pan", _L.GUJARATI: "guj", _L.MARATHI: "mar", _L.KONKANI: "kok", _L.MAITHILI: "mai",
        _L.BHOJPURI: "bho", _L.NEPALI: "nep", _L.ASSAMESE: "asm", _L.ODIA: "ori", _L.SANSKRIT: "san",
        _L.SINDHI: "snd", _L.KASHMIRI: "kas", _L.SINHALA: "sin", _L.DHIVEHI: "div", _L.TAMIL: "tam",
        _L.TELUGU: "tel", _L.KANNADA: "kan", _L.MALAYALAM: "mal", _L.BURMESE: "bur", _L.SHAN: "sha",
        _L.KHMER: "hkm", _L.LAO: "lao", _L.HMONG: "hmn", _L.ESPERANTO: "epo", _L.INTERLINGUA: "ina",
        _L.IDO: "ido", _L.LOJBAN: "loj",
    },
    ProviderKind.YOUDAO: {
        _L.CHINESE: "zh-CHS", _L.TRADITIONAL_CHINESE: "zh-CHT", _L.CANTONESE: "yue", _L.ENGLISH: "en",
        _L.JAPANESE: "ja", _L.KOREAN: "ko", _L.FRENCH: "fr", _L.SPANISH: "es", _L.PORTUGUESE: "pt",
        _L.GERMAN: "de", _L.ITALIAN: "it", _L.RUSSIAN: "ru", _L.ARABIC: "ar", _L.THAI: "th",
        _L.VIETNAMESE: "vi", _L.INDONESIAN: "id", _L.MALAY: "ms", _L.JAVANESE: "jw", _L.SUNDANESE: "su",
        _L.HINDI: "hi", _L.BENGALI: "bn", _L.TURKISH: "tr", _L.DUTCH: "nl", _L.POLISH: "pl", _L.GREEK: "el",
        _L.CZECH: "cs", _L.SLOVAK: "sk", _L.SLOVENIAN: "sl", _L.ROMANIAN: "ro", _L.BULGARIAN: "bg",
        _L.HUNGARIAN: "hu", _L.SWEDISH: "sv", _L.DANISH: "da", _L.FINNISH: "fi", _L.NORWEGIAN: "no",
        _L.ICELANDIC: "is", _L.ESTONIAN: "et", _L.LATVIAN: "lv", _L.LITHUANIAN: "lt", _L.UKRAINIAN: "uk",
        _L.BELARUSIAN: "be", _L.SERBIAN: "sr-Cyrl", _L.CROATIAN: "hr", _L.BOSNIAN: "bs",
        _L.MACEDONIAN: "mk", _L.ALBANIAN: "sq", _L.HEBREW: "he", _L.YIDDISH: "yi", _L.PERSIAN: "fa",
        _L.URDU: "ur", _L.PASHTO: "ps", _L.KURDISH: "ku", _L.ARMENIAN: "hy", _L.GEORGIAN: "ka",
        _L.AZERBAIJANI: "az", _L.KAZAKH: "kk", _L.KYRGYZ: "ky", _L.UZBEK: "uz", _L.TAJIK: "tg",
        _L.MONGOLIAN: "mn", _L.FILIPINO: "tl", _L.CEBUANO: "ceb", _L.SWAHILI: "sw", _L.LATIN: "la",
        _L.KLINGON: "tlh", _L.AFRIKAANS: "af", _L.AMHARIC: "am", _L.SOMALI: "so", _L.HAUSA: "ha",
        _L.IGBO: "ig", _L.YORUBA: "yo", _L.CHICHEWA: "ny", _L.SHONA: "sn", _L.ZULU: "zu", _L.XHOSA: "xh",
        _L.SESOTHO: "st", _L.MALAGASY: "mg", _L.HAITIAN_CREOLE: "ht", _L.BASQUE: "eu", _L.CATALAN: "ca",
        _L.GALICIAN: "gl", _L.CORSICAN: "co", _L.LUXEMBOURGISH: "lb", _L.FRISIAN: "fy", _L.IRISH: "ga",
        _L.SCOTTISH_GAELIC: "gd", _L.WELSH: "cy", _L.MALTESE: "mt", _L.HAWAIIAN: "haw", _L.MAORI: "mi",
        _L.SAMOAN: "sm", _L.TONGAN: "to", _L.TAHITIAN: "ty", _L.FIJIAN: "fj", _L.YUCATEC_MAYA: "yua",
        _L.QUERETARO_OTOMI: "otq", _L.PUNJABI: "pa", _L.GUJARATI: "gu", _L.MARATHI: "mr", _L.NEPALI: "ne",
        _L.SINDHI: "sd", _L.SINHALA: "si", _L.TAMIL: "ta", _L.TELUGU: "te", _L.KANNADA: "kn",
        _L.MALAYALAM: "ml", _L.BURMESE: "my", _L.KHMER: "km", _L.LAO: "lo", _L.HMONG_DAW: "mww",
        _L.ESPERANTO: "eo",
    },
    ProviderKind.CAIYUN: {
        _L.CHINESE: "zh", _L.TRADITIONAL_CHINESE: "zh-Hant", _L.ENGLISH: "en", _L.JAPANESE: "ja",
        _L.KOREAN: "ko", _L.GERMAN: "de", _L.SPANISH: "es", _L.FRENCH: "fr", _L.ITALIAN: "it",
        _L.PORTUGUESE: "pt", _L.RUSSIAN: "ru", _L.TURKISH: "tr", _L.VIETNAMESE: "vi",
    },
    ProviderKind.MYMEMORY: {
        _L.CHINESE: "zh-CN", _L.TRADITIONAL_CHINESE: "zh-TW", _L.ENGLISH: "en-GB", _L.JAPANESE: "ja-JP",
        _L.KOREAN: "ko-KR", _L.FRENCH: "fr-FR", _L.SPANISH: "es-ES", _L.PORTUGUESE: "pt-PT",
        _L.BRAZILIAN_PORTUGUESE: "pt-BR", _L.GERMAN: "de-DE", _L.ITALIAN: "it-IT", _L.RUSSIAN: "ru-RU",
        _L.ARABIC: "ar-SA", _L.THAI: "th-TH", _L.VIETNAMESE: "vi-VN", _L.INDONESIAN: "id-ID",
        _L.MALAY: "ms-MY", _L.HINDI: "hi-IN", _L.BENGALI: "bn-IN", _L.TURKISH: "tr-TR", _L.DUTCH: "nl-NL",
        _L.POLISH: "pl-PL", _L.GREEK: "el-GR", _L.CZECH: "cs-CZ", _L.SLOVAK: "sk-SK", _L.SLOVENIAN: "sl-SI",
        _L.ROMANIAN: "ro-RO", _L.BULGARIAN: "bg-BG", _L.HUNGARIAN: "hu-HU", _L.SWEDISH: "sv-SE",
        _L.DANISH: "da-DK", _L.FINNISH: "fi-FI", _L.NORWEGIAN: "nb-NO", _L.ICELANDIC: "is-IS",
        _L.ESTONIAN: "et-EE", _L.LATVIAN: "lv-LV", _L.LITHUANIAN: "lt-LT", _L.UKRAINIAN: "uk-UA",
        _L.BELARUSIAN: "be-BY", _L.SERBIAN: "sr-RS", _L.CROATIAN: "hr-HR", _L.BOSNIAN: "bs-BA",
        _L.MACEDONIAN: "mk-MK", _L.ALBANIAN: "sq-AL", _L.HEBREW: "he-IL", _L.PERSIAN: "fa-IR",
        _L.URDU: "ur-PK", _L.ARMENIAN: "hy-AM", _L.GEORGIAN: "ka-GE", _L.AZERBAIJANI: "az-AZ",
        _L.KAZAKH: "kk-KZ", _L.UZBEK: "uz-UZ", _L.MONGOLIAN: "mn-MN", _L.FILIPINO: "tl-PH",
        _L.SWAHILI: "sw-KE", _L.LATIN: "la-XN", _L.AFRIKAANS: "af-ZA", _L.BASQUE: "eu-ES",
        _L.CATALAN: "ca-ES", _L.GALICIAN: "gl-ES", _L.IRISH: "ga-IE", _L.WELSH: "cy-GB", _L.MALTESE: "mt-MT",
        _L.NEPALI: "ne-NP", _L.TAMIL: "ta-IN", _L.TELUGU: "te-IN", _L.KHMER: "km-KH",
    },
    ProviderKind.ALIBABA: {
        _L.CHINESE: "zh", _L.TRADITIONAL_CHINESE: "zh-tw", _L.ENGLISH: "en", _L.JAPANESE: "ja",
        _L.KOREAN: "ko", _L.FRENCH: "fr", _L.SPANISH: "es", _L.PORTUGUESE: "pt", _L.GERMAN: "de",
        _L.ITALIAN: "it", _L.RUSSIAN: "ru", _L.ARABIC: "ar", _L.THAI: "th", _L.VIETNAMESE: "vi",
        _L.INDONESIAN: "id", _L.MALAY: "ms", _L.HINDI: "hi", _L.TURKISH: "tr", _L.DUTCH: "nl",
        _L.POLISH: "pl", _L.HEBREW: "he",
    },
}

# Decode-only codes. Never produced by to_provider_code.
_PROVIDER_ALIASES: Final[dict[ProviderKind, dict[str, Language]]] = {
    ProviderKind.BAIDU: {"nob": _L.NORWEGIAN, "nno": _L.NORWEGIAN, "src": _L.SERBIAN},
    ProviderKind.YOUDAO: {"sr-Latn": _L.SERBIAN},
    ProviderKind.CAIYUN: {},
    ProviderKind.MYMEMORY: {
        "zh": _L.CHINESE, "zh-HK": _L.TRADITIONAL_CHINESE, "en": _L.ENGLISH, "en-US": _L.ENGLISH,
        "ja": _L.JAPANESE, "ko": _L.KOREAN, "fr": _L.FRENCH, "es": _L.SPANISH, "pt": _L.PORTUGUESE,
        "de": _L.GERMAN, "it": _L.ITALIAN, "ru": _L.RUSSIAN,
    },
    ProviderKind.ALIBABA: {"zh-cn": _L.CHINESE},
}

_AUTO_DETECT_CODES: Final[dict[ProviderKind, str]] = {
    ProviderKind.BAIDU: "auto",
    ProviderKind.YOUDAO: "auto",
    ProviderKind.CAIYUN: "auto",
    ProviderKind.MYMEMORY: "Autodetect",
    ProviderKind.ALIBABA: "auto",
}


def _build_decode_table(kind: ProviderKind) -> dict[str, Language]:
    table: dict[str, Language] = dict(_PROVIDER_ALIASES[kind])
    # canonical codes win over aliases
    table.update({code: lang for lang, code in _PROVIDER_CODES[kind].items()})
    return table


_DECODE_TABLES: Final[dict[ProviderKind, dict[str, Language]]] = {
    kind: _build_decode_table(kind) for kind in ProviderKind
}
_DECODE_TABLES_CASEFOLD: Final[dict[ProviderKind, dict[str, Language]]] = {
    kind: {code.lower(): lang for code, lang in table.items()} for kind, table in _DECODE_TABLES.items()
}


def to_provider_code(lang: Language, kind: ProviderKind) -> str | None:
    """Return the provider's wire code for a language, or None if the provider does not support it."""
    return _PROVIDER_CODES[kind].get(lang)


def from_provider_code(code: str, kind: ProviderKind) -> Language | None:
    """Return the canonical language for a provider wire code, or None if the code is not recognized.

    An exact match is tried first, then a case-insensitive one.
    """
    lang: Language | None = _DECODE_TABLES[kind].get(code)
    if lang is not None:
        return lang
    return _DECODE_TABLES_CASEFOLD[kind].get(code.lower())


def auto_detect_code(kind: ProviderKind) -> str:
    """Return the wire token a provider expects when the source language should be detected."""
    return _AUTO_DETECT_CODES[kind]


def supported_languages(kind: ProviderKind) -> frozenset[Language]:
    return frozenset(_PROVIDER_CODES[kind])

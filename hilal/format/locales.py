"""Localized month and weekday names.

A LocalizationProvider supplies the names used by HijriDateFormatter.
Providers are looked up by locale tag: a provider for ``"ar"`` serves
``"ar"``, ``"ar-SA"`` and ``"ar_EG"``. Custom providers registered with
:func:`register_provider` take precedence over the built-in English and
Arabic ones, and English is the fallback for unknown locales.

Weekdays are numbered Monday=0 through Sunday=6.

Examples:
    >>> get_provider("ar-SA").full_month_name(9)
    'رمضان'
    >>> get_provider("xx").full_month_name(9)
    'Ramadan'
"""

from __future__ import annotations


class LocalizationProvider:
    """Base provider; subclasses fill in the name tables.

    Out-of-range month or weekday numbers give an empty string.
    """

    locale_identifier: str = ""
    short_month_names: tuple[str, ...] = ()
    full_month_names: tuple[str, ...] = ()
    short_weekday_names: tuple[str, ...] = ()
    full_weekday_names: tuple[str, ...] = ()

    def short_month_name(self, month: int) -> str:
        return _lookup(self.short_month_names, month - 1)

    def full_month_name(self, month: int) -> str:
        return _lookup(self.full_month_names, month - 1)

    def short_weekday_name(self, weekday: int) -> str:
        return _lookup(self.short_weekday_names, weekday)

    def full_weekday_name(self, weekday: int) -> str:
        return _lookup(self.full_weekday_names, weekday)

    def month_number(self, name: str) -> int | None:
        """Return the month (1-12) for a full or short name, or None."""
        for names in (self.full_month_names, self.short_month_names):
            if name in names:
                return names.index(name) + 1
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.locale_identifier!r})"


def _lookup(names: tuple[str, ...], index: int) -> str:
    if 0 <= index < len(names):
        return names[index]
    return ""


class EnglishLocalizationProvider(LocalizationProvider):
    locale_identifier = "en"
    short_month_names = (
        "Muh", "Saf", "Rb1", "Rb2", "Jm1", "Jm2",
        "Raj", "Sha", "Ram", "Shw", "Qid", "Hij",
    )
    full_month_names = (
        "Muharram", "Safar", "Rabi Al Awwal", "Rabi Al Thani",
        "Jumada Al Oula", "Jumada Al Akhira", "Rajab", "Shaban",
        "Ramadan", "Shawwal", "Dhul Qidah", "Dhul Hijjah",
    )
    short_weekday_names = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
    full_weekday_names = (
        "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
    )


class ArabicLocalizationProvider(LocalizationProvider):
    locale_identifier = "ar"
    short_month_names = (
        "محرم", "صفر", "ربيع الأول", "ربيع الثاني", "جمادى الأولى", "جمادى الآخرة",
        "رجب", "شعبان", "رمضان", "شوال", "ذو القعدة", "ذو الحجة",
    )
    full_month_names = short_month_names
    short_weekday_names = ("إثن", "ثلا", "أرب", "خمي", "جمع", "سبت", "أحد")
    full_weekday_names = (
        "الإثنين", "الثلاثاء", "الأربعاء", "الخميس", "الجمعة", "السبت", "الأحد",
    )


ENGLISH = EnglishLocalizationProvider()
ARABIC = ArabicLocalizationProvider()

_BUILTIN_PROVIDERS: tuple[LocalizationProvider, ...] = (ENGLISH, ARABIC)
_custom_providers: list[LocalizationProvider] = []


def _normalize_tag(locale: str) -> str:
    return locale.strip().replace("_", "-").lower()


def _matches(provider: LocalizationProvider, tag: str) -> bool:
    ident = _normalize_tag(provider.locale_identifier)
    return tag == ident or tag.startswith(ident + "-")


def register_provider(provider: LocalizationProvider) -> None:
    """Register a custom provider; the latest registration wins."""
    _custom_providers.insert(0, provider)


def reset_custom_providers() -> None:
    """Forget every provider added with :func:`register_provider`."""
    _custom_providers.clear()


def get_provider(locale: str) -> LocalizationProvider:
    """Return the provider for a locale tag, falling back to English."""
    tag = _normalize_tag(locale)
    for provider in (*_custom_providers, *_BUILTIN_PROVIDERS):
        if _matches(provider, tag):
            return provider
    return ENGLISH


__all__ = [
    "LocalizationProvider",
    "EnglishLocalizationProvider",
    "ArabicLocalizationProvider",
    "ENGLISH",
    "ARABIC",
    "register_provider",
    "reset_custom_providers",
    "get_provider",
]

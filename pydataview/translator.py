"""Translation of user-facing strings.

Renderers only need ``translate(id, category) -> str``. Two implementations
are provided:

- :class:`IdentityTranslator` returns the message id unchanged
- :class:`MessageTranslator` looks messages up in per-locale catalogs
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable


DEFAULT_CATEGORY = "pydataview"

#: Built-in messages of the ``pydataview`` category, keyed by locale.
DEFAULT_MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "Actions": "Actions",
        "No results found.": "No results found.",
    },
    "de": {
        "Actions": "Aktionen",
        "No results found.": "Keine Ergebnisse gefunden.",
    },
    "es": {
        "Actions": "Acciones",
        "No results found.": "No se encontraron resultados.",
    },
    "ru": {
        "Actions": "Действия",
        "No results found.": "Ничего не найдено.",
    },
}


@runtime_checkable
class Translator(Protocol):
    """Translates message ids within a category."""

    def translate(self, id: str, category: str = DEFAULT_CATEGORY) -> str:  # pylint: disable=redefined-builtin
        """Return the translated message."""


class IdentityTranslator:
    """Translator that returns message ids unchanged."""

    def translate(self, id: str, category: str = DEFAULT_CATEGORY) -> str:  # pylint: disable=redefined-builtin
        return str(id)


class MessageTranslator:
    """Catalog-based translator.

    Parameters
    ----------
    locale : str
        Locale used for lookups, e.g. ``"de"``. A regional locale such as
        ``"de-AT"`` falls back to its language.
    catalogs : Mapping, optional
        ``{category: {locale: {id: message}}}`` merged over the built-in
        ``pydataview`` messages.

    Example:
        translator = MessageTranslator("de")
        translator.translate("Actions")  # "Aktionen"
    """

    def __init__(
        self,
        locale: str = "en",
        catalogs: Mapping[str, Mapping[str, Mapping[str, str]]] | None = None,
    ) -> None:
        self.locale = locale
        self._catalogs: dict[str, dict[str, dict[str, str]]] = {
            DEFAULT_CATEGORY: {loc: dict(messages) for loc, messages in DEFAULT_MESSAGES.items()}
        }
        for category, locales in (catalogs or {}).items():
            target = self._catalogs.setdefault(category, {})
            for loc, messages in locales.items():
                target.setdefault(loc, {}).update(messages)

    def with_locale(self, locale: str) -> MessageTranslator:
        """Return a translator sharing the catalogs but using another locale."""
        new = MessageTranslator(locale)
        new._catalogs = self._catalogs
        return new

    def translate(self, id: str, category: str = DEFAULT_CATEGORY) -> str:  # pylint: disable=redefined-builtin
        message_id = str(id)
        locales = self._catalogs.get(category, {})
        for locale in (self.locale, self.locale.split("-")[0].split("_")[0]):
            messages = locales.get(locale)
            if messages and message_id in messages:
                return messages[message_id]
        return message_id

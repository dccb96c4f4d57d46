"""Tests for translators."""

from pydataview.translator import IdentityTranslator, MessageTranslator, Translator


class TestIdentityTranslator:
    """Tests for IdentityTranslator."""

    def test_returns_id(self):
        """Messages are returned unchanged."""
        assert IdentityTranslator().translate("Actions", "pydataview") == "Actions"


class TestMessageTranslator:
    """Tests for MessageTranslator."""

    def test_builtin_messages(self):
        """Built-in messages are translated."""
        translator = MessageTranslator("de")
        assert translator.translate("Actions") == "Aktionen"
        assert translator.translate("No results found.") == "Keine Ergebnisse gefunden."

    def test_regional_locale_falls_back_to_language(self):
        """de-AT uses the de catalog."""
        assert MessageTranslator("de-AT").translate("Actions") == "Aktionen"

    def test_unknown_message_returns_id(self):
        """Unknown ids are returned unchanged."""
        assert MessageTranslator("de").translate("Unknown") == "Unknown"

    def test_custom_category(self):
        """Custom catalogs add categories."""
        translator = MessageTranslator("fr", {"app": {"fr": {"Users": "Utilisateurs"}}})
        assert translator.translate("Users", "app") == "Utilisateurs"
        assert translator.translate("Users", "pydataview") == "Users"

    def test_custom_messages_override_builtin(self):
        """Custom catalogs can override built-in messages."""
        translator = MessageTranslator("en", {"pydataview": {"en": {"Actions": "Manage"}}})
        assert translator.translate("Actions") == "Manage"

    def test_with_locale(self):
        """with_locale() shares catalogs."""
        translator = MessageTranslator("en", {"app": {"es": {"Users": "Usuarios"}}})
        assert translator.with_locale("es").translate("Users", "app") == "Usuarios"

    def test_satisfies_protocol(self):
        """Both translators satisfy the Translator protocol."""
        assert isinstance(MessageTranslator(), Translator)
        assert isinstance(IdentityTranslator(), Translator)

from word_learner.config.game_settings import MESSAGES, get_message, is_supported_word_length


def test_messages_in_each_language():
    assert get_message("es", "new_game") == "Nuevo juego"
    assert get_message("fr", "lost", word="PLAGE") == "Partie terminée ! Le mot était PLAGE."


def test_unknown_language_falls_back_to_english():
    assert get_message("de", "enter") == "Enter"


def test_key_only_defined_for_one_language(monkeypatch):
    monkeypatch.setitem(MESSAGES["fr"], "greeting", "Bonjour")
    assert get_message("fr", "greeting") == "Bonjour"


def test_missing_translation_falls_back_to_english(monkeypatch):
    monkeypatch.setitem(MESSAGES, "fr", {k: v for k, v in MESSAGES["fr"].items() if k != "delete"})
    assert get_message("fr", "delete") == "Delete"


def test_supported_word_lengths():
    assert is_supported_word_length(4)
    assert is_supported_word_length(8)
    assert not is_supported_word_length(3)
    assert not is_supported_word_length(9)

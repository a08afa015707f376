"""Tests for Gronsfeld cipher engine."""

import pytest

from cyrcipher.core.exceptions import EmptyTextError, InvalidCipherTextError, InvalidKeyError
from cyrcipher.services.engines.polyalphabetic.gronsfeld import GronsfeldEngine


class TestGronsfeldKey:
    """Test suite for keyword validation."""

    def test_valid_key(self):
        assert GronsfeldEngine("МИР").encrypt("ААААА") == "МИРМИ"

    def test_long_key(self):
        """Only the leading part of a key longer than the text is used."""
        assert GronsfeldEngine("ДЛИННЫЙКЛЮЧ").encrypt("ААААА") == "ДЛИНН"

    def test_lowercase_key(self):
        engine = GronsfeldEngine("мир")
        assert engine.key == "МИР"
        assert engine.encrypt("ААААА") == "МИРМИ"

    def test_key_with_yo(self):
        engine = GronsfeldEngine("ёж")
        assert engine.key == "ЁЖ"
        assert engine.shifts == (6, 7)

    @pytest.mark.parametrize("key", ["", "МИР123", "МИР,МИР", "МИР МИР", "МИР!", "\t"])
    def test_invalid_keys(self, key):
        with pytest.raises(InvalidKeyError):
            GronsfeldEngine(key)

    def test_latin_letters_are_dropped_from_key(self):
        engine = GronsfeldEngine("МИРabc")
        assert engine.key == "МИР"

    def test_latin_only_key_rejected(self):
        with pytest.raises(InvalidKeyError):
            GronsfeldEngine("KEY")

    def test_latin_letters_rejected_when_not_dropped(self):
        with pytest.raises(InvalidKeyError):
            GronsfeldEngine("МИРabc", drop_unmapped_key_letters=False)

    def test_weak_key_is_identity(self):
        engine = GronsfeldEngine("А")
        assert engine.encrypt("ТЕСТ") == "ТЕСТ"
        assert engine.decrypt(engine.encrypt("ТЕСТ")) == "ТЕСТ"

    def test_parse_key(self):
        assert GronsfeldEngine.parse_key({"keyword": "мир"}) == "мир"
        assert GronsfeldEngine.parse_key("МИР") == "МИР"
        with pytest.raises(InvalidKeyError):
            GronsfeldEngine.parse_key(None)

    def test_generate_random_key(self):
        keys = [GronsfeldEngine.generate_random_key() for _ in range(50)]

        for key in keys:
            assert 4 <= len(key) <= 10
            assert GronsfeldEngine(key).key == key


class TestGronsfeldEncrypt:
    """Test suite for encryption with keyword "В"."""

    @pytest.fixture
    def engine(self):
        return GronsfeldEngine("В")

    def test_upper_case_string(self, engine):
        assert engine.encrypt("ПРИВЕТ") == "СТКДЖФ"

    def test_lower_case_string(self, engine):
        assert engine.encrypt("привет") == "СТКДЖФ"

    def test_string_with_whitespace_and_punctuation(self, engine):
        assert engine.encrypt("ПРИВЕТ, МИР!") == "СТКДЖФОКТ"

    def test_punctuation_does_not_shift_key(self):
        engine = GronsfeldEngine("МИР")
        assert engine.encrypt("ПРИВЕТ, МИР!")[:6] == engine.encrypt("ПРИВЕТ")
        assert engine.encrypt("привет") == engine.encrypt("ПРИВЕТ")

    def test_string_with_numbers(self, engine):
        assert engine.encrypt("ТЕСТ123") == "ФЖУФ"

    def test_empty_string(self, engine):
        with pytest.raises(EmptyTextError):
            engine.encrypt("")

    def test_no_alpha_string(self, engine):
        with pytest.raises(EmptyTextError):
            engine.encrypt("1234+8765=9999")

    def test_latin_only_string(self, engine):
        with pytest.raises(EmptyTextError):
            engine.encrypt("HELLO")

    def test_max_shift_key(self):
        """Key "Я" wraps every letter around the end of the alphabet."""
        assert GronsfeldEngine("Я").encrypt("ПРИВЕТ") == "ОПЗБДС"

    def test_yo_is_its_own_letter(self, engine):
        assert engine.encrypt("Е") == "Ж"
        assert engine.encrypt("ё") == "З"


class TestGronsfeldDecrypt:
    """Test suite for decryption with keyword "В"."""

    @pytest.fixture
    def engine(self):
        return GronsfeldEngine("В")

    def test_upper_case_string(self, engine):
        assert engine.decrypt("СТКДЖФ") == "ПРИВЕТ"

    def test_lower_case_string(self, engine):
        with pytest.raises(InvalidCipherTextError):
            engine.decrypt("сткджф")

    def test_single_lowercase_letter(self, engine):
        with pytest.raises(InvalidCipherTextError):
            engine.decrypt("СТКДЖф")

    def test_whitespace_string(self, engine):
        with pytest.raises(InvalidCipherTextError):
            engine.decrypt("СТК ДЖФ")

    def test_digits_string(self, engine):
        with pytest.raises(InvalidCipherTextError):
            engine.decrypt("СТКДЖФ2024")

    def test_punctuation_string(self, engine):
        with pytest.raises(InvalidCipherTextError):
            engine.decrypt("СТК,ДЖФ")

    def test_latin_string(self, engine):
        with pytest.raises(InvalidCipherTextError):
            engine.decrypt("ABC")

    def test_empty_string(self, engine):
        with pytest.raises(EmptyTextError):
            engine.decrypt("")

    def test_error_reports_position(self, engine):
        with pytest.raises(InvalidCipherTextError) as exc_info:
            engine.decrypt("СТ1")

        assert exc_info.value.details == {"character": "1", "position": 2}

    def test_max_shift_key(self):
        assert GronsfeldEngine("Я").decrypt("ОПЗБДС") == "ПРИВЕТ"


class TestGronsfeldRoundtrip:
    """Test suite for encrypt/decrypt roundtrips."""

    @pytest.mark.parametrize("key", ["А", "В", "МИР", "Я", "ДЛИННЫЙКЛЮЧ", "ёлка"])
    def test_roundtrip_normalizes(self, key):
        engine = GronsfeldEngine(key)
        plaintext = "Съешь же ещё этих мягких французских булок, да выпей чаю!"
        expected = "СЪЕШЬЖЕЕЩЁЭТИХМЯГКИХФРАНЦУЗСКИХБУЛОКДАВЫПЕЙЧАЮ"

        ciphertext = engine.encrypt(plaintext)

        assert len(ciphertext) == len(expected)
        assert engine.decrypt(ciphertext) == expected

    def test_explain(self):
        engine = GronsfeldEngine("МИР")
        explanation = engine.explain("МИРМИ", "ААААА")

        assert "МИР" in explanation
        assert "М=13" in explanation
        assert "33-letter" in explanation

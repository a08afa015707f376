"""Tests for the cipher engine registry."""

import pytest

from cyrcipher.core.exceptions import EngineNotFoundError, InvalidKeyError
from cyrcipher.models.schemas import CipherFamily, CipherType
from cyrcipher.services.engines.polyalphabetic import GronsfeldEngine
from cyrcipher.services.engines.registry import EngineRegistry
from cyrcipher.services.engines.transposition import TableRouteEngine


class TestCipherRegistry:
    """Test the cipher registry."""

    @pytest.fixture
    def registry(self):
        return EngineRegistry()

    def test_all_ciphers_registered(self):
        """Verify all expected ciphers are registered."""
        registered = EngineRegistry.list_registered()

        for cipher_type in CipherType:
            assert cipher_type in registered, f"{cipher_type} not registered"
            assert EngineRegistry.is_registered(cipher_type)

    def test_get_engine_classes_by_family(self, registry):
        poly = registry.get_engine_classes_by_family(CipherFamily.POLYALPHABETIC)
        trans = registry.get_engine_classes_by_family(CipherFamily.TRANSPOSITION)

        assert poly == [GronsfeldEngine]
        assert trans == [TableRouteEngine]

    def test_create_gronsfeld(self, registry):
        engine = registry.create(CipherType.GRONSFELD, "мир")

        assert isinstance(engine, GronsfeldEngine)
        assert engine.encrypt("ААААА") == "МИРМИ"

    def test_create_table_route_from_string_key(self, registry):
        engine = registry.create(CipherType.TABLE_ROUTE, "3")

        assert isinstance(engine, TableRouteEngine)
        assert engine.encrypt("ПРИВЕТМИР") == "ИТРРЕИПВМ"

    def test_create_passes_options(self, registry):
        engine = registry.create(CipherType.TABLE_ROUTE, 150, max_columns=200)
        assert engine.columns == 150

    def test_create_invalid_key(self, registry):
        with pytest.raises(InvalidKeyError):
            registry.create(CipherType.GRONSFELD, "МИР123")
        with pytest.raises(InvalidKeyError):
            registry.create(CipherType.TABLE_ROUTE, 0)

    def test_create_gronsfeld_numeric_key(self, registry):
        with pytest.raises(InvalidKeyError):
            registry.create(CipherType.GRONSFELD, 123)

    def test_unknown_engine(self, registry):
        with pytest.raises(EngineNotFoundError):
            registry.get_engine_class("playfair")

    def test_instances_are_independent(self, registry):
        first = registry.create(CipherType.GRONSFELD, "МИР")
        second = registry.create(CipherType.GRONSFELD, "В")

        assert first is not second
        assert first.key == "МИР"
        assert second.key == "В"

from typing import Annotated, Any

from fastapi import Depends

from cyrcipher.core.config import Settings, get_settings
from cyrcipher.models.schemas import CipherType
from cyrcipher.services.engines.base import CipherEngine
from cyrcipher.services.engines.registry import EngineRegistry


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_registry() -> EngineRegistry:
    """Get engine registry."""
    return EngineRegistry()


RegistryDep = Annotated[EngineRegistry, Depends(get_registry)]


def engine_options(settings: Settings, cipher_type: CipherType) -> dict[str, Any]:
    """Constructor options for an engine, taken from settings."""
    if cipher_type == CipherType.GRONSFELD:
        return {"drop_unmapped_key_letters": settings.drop_unmapped_key_letters}
    if cipher_type == CipherType.TABLE_ROUTE:
        return {"max_columns": settings.transposition_max_columns}
    return {}


def random_key_options(settings: Settings) -> dict[str, Any]:
    """Options for random key generation, taken from settings."""
    return {
        "min_length": settings.random_key_min_length,
        "max_length": settings.random_key_max_length,
        "max_columns": settings.transposition_max_columns,
    }


def build_engine(
    registry: EngineRegistry,
    settings: Settings,
    cipher_type: CipherType,
    key: Any,
) -> CipherEngine:
    """Build a keyed engine configured from settings."""
    return registry.create(cipher_type, key, **engine_options(settings, cipher_type))

from typing import Any, Type

from cyrcipher.core.exceptions import EngineNotFoundError
from cyrcipher.models.schemas import CipherFamily, CipherType
from cyrcipher.services.engines.base import CipherEngine


class EngineRegistry:
    """
    Registry for cipher engines.

    Manages available cipher engine classes and builds keyed instances.
    Instances are never cached since each one owns its key.
    """

    _engines: dict[CipherType, Type[CipherEngine]] = {}

    @classmethod
    def register(cls, engine_class: Type[CipherEngine]) -> Type[CipherEngine]:
        """
        Register a cipher engine class.

        Can be used as a decorator:
            @EngineRegistry.register
            class GronsfeldEngine(CipherEngine):
                ...

        Args:
            engine_class: The engine class to register

        Returns:
            The engine class (for decorator usage)
        """
        cls._engines[engine_class.cipher_type] = engine_class
        return engine_class

    def get_engine_class(self, cipher_type: CipherType) -> Type[CipherEngine]:
        """
        Get the engine class for the specified cipher type.

        Raises:
            EngineNotFoundError: If no engine is registered for the type
        """
        try:
            return self._engines[cipher_type]
        except KeyError:
            raise EngineNotFoundError(str(cipher_type)) from None

    def create(self, cipher_type: CipherType, key: Any, **options: Any) -> CipherEngine:
        """
        Build an engine instance for the given cipher type and raw key.

        Args:
            cipher_type: The type of cipher
            key: Raw key as received from the caller
            **options: Extra constructor options for the engine

        Returns:
            Engine instance bound to the validated key

        Raises:
            EngineNotFoundError: If no engine is registered for the type
            InvalidKeyError: If the key is rejected by the engine
        """
        engine_class = self.get_engine_class(cipher_type)
        return engine_class(engine_class.parse_key(key), **options)

    def get_engine_classes_by_family(self, family: CipherFamily) -> list[Type[CipherEngine]]:
        """List engine classes belonging to a cipher family."""
        return [
            engine_class
            for engine_class in self._engines.values()
            if engine_class.cipher_family == family
        ]

    def get_all_engine_classes(self) -> list[Type[CipherEngine]]:
        """List all registered engine classes."""
        return list(self._engines.values())

    @classmethod
    def list_registered(cls) -> list[CipherType]:
        """
        List all registered cipher types.

        Returns:
            List of registered cipher types
        """
        return list(cls._engines.keys())

    @classmethod
    def is_registered(cls, cipher_type: CipherType) -> bool:
        """
        Check if a cipher type is registered.

        Args:
            cipher_type: The cipher type to check

        Returns:
            True if registered
        """
        return cipher_type in cls._engines


# Import engines to trigger registration
def _load_engines() -> None:
    """Load all engine modules to trigger registration."""
    from cyrcipher.services.engines import polyalphabetic, transposition  # noqa: F401


# Load engines when module is imported
_load_engines()

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from cyrcipher.models.schemas import CipherFamily, CipherType, KeyKind
from cyrcipher.services.preprocessing.alphabet import RUSSIAN, Alphabet
from cyrcipher.services.preprocessing.normalizer import TextNormalizer


class CipherEngine(ABC):
    """
    Abstract base class for all cipher engines.

    An engine is constructed with its key, which is validated once and kept
    immutable afterwards. Each implementation must provide:
    - encrypt(): Normalize and encrypt plaintext
    - decrypt(): Strictly validate and decrypt ciphertext
    - explain(): Generate human-readable explanation
    - parse_key(): Coerce a raw key from an external caller
    - generate_random_key(): Produce a valid random key
    """

    # Cipher metadata
    name: ClassVar[str]
    cipher_type: ClassVar[CipherType]
    cipher_family: ClassVar[CipherFamily]
    key_kind: ClassVar[KeyKind]
    description: ClassVar[str]

    alphabet: ClassVar[Alphabet] = RUSSIAN

    def __init__(self) -> None:
        self._normalizer = TextNormalizer(self.alphabet)

    @abstractmethod
    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt plaintext with the engine's key.

        Args:
            plaintext: Free-form text; non-alphabet characters are dropped

        Returns:
            Ciphertext made of uppercase alphabet letters

        Raises:
            EmptyTextError: If no alphabet letters remain after normalization
        """
        pass

    @abstractmethod
    def decrypt(self, ciphertext: str) -> str:
        """
        Decrypt ciphertext with the engine's key.

        Args:
            ciphertext: Uppercase alphabet letters only

        Returns:
            Normalized plaintext

        Raises:
            EmptyTextError: If the ciphertext is empty
            InvalidCipherTextError: If any character is not an uppercase letter
        """
        pass

    @property
    @abstractmethod
    def key(self) -> str | int:
        """The validated key in its canonical form."""
        pass

    @abstractmethod
    def explain(self, ciphertext: str, plaintext: str) -> str:
        """
        Generate human-readable explanation of a transform.

        Args:
            ciphertext: The ciphertext
            plaintext: The matching plaintext

        Returns:
            Explanation string
        """
        pass

    @classmethod
    @abstractmethod
    def parse_key(cls, key: Any) -> str | int:
        """
        Coerce a raw key into the type the constructor expects.

        Raises:
            InvalidKeyError: If the key cannot be coerced
        """
        pass

    @classmethod
    @abstractmethod
    def generate_random_key(cls, **options: Any) -> str | int:
        """
        Generate a random valid key for this cipher.

        Returns:
            A randomly generated key
        """
        pass

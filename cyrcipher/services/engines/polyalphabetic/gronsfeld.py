import random
from typing import Any

from cyrcipher.core.exceptions import InvalidKeyError
from cyrcipher.models.schemas import CipherFamily, CipherType, KeyKind
from cyrcipher.services.engines.base import CipherEngine
from cyrcipher.services.engines.registry import EngineRegistry


@EngineRegistry.register
class GronsfeldEngine(CipherEngine):
    """
    Gronsfeld cipher engine over the Russian alphabet.

    A polyalphabetic additive cipher: every letter of the keyword is turned
    into its alphabet index, and that index is added (modulo the alphabet
    size) to the plaintext letter at the same position. The key repeats
    cyclically, so it may be shorter, equal to or longer than the text.

    Example with keyword "МИР" (М=13, И=9, Р=17):

    Plain:  А  А  А  А  А
    Shift:  13 9  17 13 9
    Cipher: М  И  Р  М  И
    """

    name = "Gronsfeld Cipher"
    cipher_type = CipherType.GRONSFELD
    cipher_family = CipherFamily.POLYALPHABETIC
    key_kind = KeyKind.WORD
    description = (
        "A polyalphabetic cipher where each letter is shifted forward by the "
        "alphabet index of the matching letter of a repeating keyword. "
        "Non-letters are removed and case is folded before encryption."
    )

    def __init__(self, key: str, drop_unmapped_key_letters: bool = True):
        super().__init__()
        self._shifts = self._get_valid_key(key, drop_unmapped_key_letters)

    @property
    def key(self) -> str:
        return self.alphabet.from_indices(self._shifts)

    @property
    def shifts(self) -> tuple[int, ...]:
        return self._shifts

    def encrypt(self, plaintext: str) -> str:
        """Encrypt using the keyword."""
        work = self.alphabet.to_indices(self._normalizer.normalize(plaintext))
        size = self.alphabet.size
        key_length = len(self._shifts)

        for i, index in enumerate(work):
            work[i] = (index + self._shifts[i % key_length]) % size

        return self.alphabet.from_indices(work)

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt using the keyword."""
        work = self.alphabet.to_indices(self._normalizer.validate_ciphertext(ciphertext))
        size = self.alphabet.size
        key_length = len(self._shifts)

        for i, index in enumerate(work):
            work[i] = (index + size - self._shifts[i % key_length]) % size

        return self.alphabet.from_indices(work)

    def explain(self, ciphertext: str, plaintext: str) -> str:
        """Generate human-readable explanation."""
        key_str = self.key
        shift_desc = ", ".join(f"{c}={s}" for c, s in zip(key_str, self._shifts))

        return (
            f"Gronsfeld cipher with keyword '{key_str}' (length {len(key_str)}). "
            f"Letter shifts: {shift_desc}. "
            f"Each letter of the ciphertext is shifted back by the corresponding "
            f"key letter's position in the {self.alphabet.size}-letter alphabet, "
            f"turning {len(ciphertext)} ciphertext letters into '{plaintext}'."
        )

    @classmethod
    def parse_key(cls, key: Any) -> str:
        """Parse key to keyword string."""
        if isinstance(key, dict):
            key = key.get("key", key.get("keyword", ""))
        if isinstance(key, bool) or key is None:
            raise InvalidKeyError("Invalid key: keyword must be a string")
        return str(key)

    @classmethod
    def generate_random_key(cls, min_length: int = 4, max_length: int = 10, **options: Any) -> str:
        """Generate a random keyword."""
        length = random.randint(min_length, max(min_length, max_length))
        return "".join(random.choice(cls.alphabet.symbols) for _ in range(length))

    def _get_valid_key(self, key: str, drop_unmapped: bool) -> tuple[int, ...]:
        """Validate the keyword and convert it to alphabet indices."""
        if not isinstance(key, str):
            raise InvalidKeyError("Invalid key: keyword must be a string", {"key": repr(key)})
        if not key:
            raise InvalidKeyError("Empty key")

        for position, char in enumerate(key):
            if not char.isalpha():
                raise InvalidKeyError(
                    "Invalid key: non-alphabetic character",
                    {"character": char, "position": position},
                )
            if not drop_unmapped and not self.alphabet.contains(char):
                raise InvalidKeyError(
                    "Invalid key: letter outside the alphabet",
                    {"character": char, "position": position},
                )

        shifts = tuple(self.alphabet.to_indices(key))
        if not shifts:
            raise InvalidKeyError(
                "Invalid key: no letters of the alphabet",
                {"key": key},
            )

        return shifts

from dataclasses import dataclass, field

from cyrcipher.core.exceptions import EmptyTextError, InvalidCipherTextError
from cyrcipher.services.preprocessing.alphabet import RUSSIAN, Alphabet


@dataclass
class NormalizedText:
    """Result of text normalization."""

    text: str
    original: str
    alphabet: str
    removed_chars: dict[str, int] = field(default_factory=dict)


class TextNormalizer:
    """
    Validates and normalizes text for the cipher engines.

    Plaintext is handled leniently: every character outside the alphabet is
    dropped and survivors are folded to uppercase. Ciphertext is handled
    strictly: it must already consist of uppercase alphabet symbols only.
    """

    def __init__(self, alphabet: Alphabet = RUSSIAN):
        self.alphabet = alphabet

    def normalize(self, text: str) -> str:
        """
        Normalize plaintext for encryption.

        Args:
            text: Free-form input text

        Returns:
            Uppercase alphabet letters only

        Raises:
            EmptyTextError: If no alphabet letters survive
        """
        return self.normalize_full(text).text

    def normalize_full(self, text: str) -> NormalizedText:
        """
        Normalize plaintext and report what was removed.

        Args:
            text: Free-form input text

        Returns:
            NormalizedText with details about the normalization

        Raises:
            EmptyTextError: If no alphabet letters survive
        """
        result = []
        removed_chars: dict[str, int] = {}

        for char in text:
            upper = self.alphabet.to_upper(char)
            if upper in self.alphabet:
                result.append(upper)
            else:
                removed_chars[char] = removed_chars.get(char, 0) + 1

        if not result:
            raise EmptyTextError()

        return NormalizedText(
            text="".join(result),
            original=text,
            alphabet=self.alphabet.symbols,
            removed_chars=removed_chars,
        )

    def validate_ciphertext(self, text: str) -> str:
        """
        Check that ciphertext is non-empty uppercase alphabet text.

        Raises:
            EmptyTextError: If the text is empty
            InvalidCipherTextError: On the first character outside the alphabet
        """
        if not text:
            raise EmptyTextError("Empty ciphertext")

        for position, char in enumerate(text):
            if char not in self.alphabet:
                raise InvalidCipherTextError(char, position)

        return text

from typing import Any


class CipherError(Exception):
    """Base exception for all cipher errors."""

    error_code: str = "cipher_error"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(CipherError):
    """Raised when a key or text fails validation."""

    error_code = "validation_error"


class InvalidKeyError(ValidationError):
    """Raised at engine construction when the key is malformed."""

    error_code = "invalid_key"


class EmptyTextError(ValidationError):
    """Raised when there is nothing left to encrypt or decrypt."""

    error_code = "empty_text"

    def __init__(self, message: str = "Empty text: no Cyrillic letters to process"):
        super().__init__(message)


class InvalidCipherTextError(ValidationError):
    """Raised when ciphertext contains anything but uppercase alphabet letters."""

    error_code = "invalid_ciphertext"

    def __init__(self, char: str, position: int):
        super().__init__(
            f"Invalid ciphertext: unexpected character {char!r} at position {position}",
            {"character": char, "position": position},
        )


class EngineError(CipherError):
    """Base exception for cipher engine errors."""

    error_code = "engine_error"


class EngineNotFoundError(EngineError):
    """Raised when requested cipher engine is not found."""

    error_code = "engine_not_found"

    def __init__(self, engine_name: str):
        super().__init__(
            f"Cipher engine '{engine_name}' not found",
            {"engine_name": engine_name},
        )

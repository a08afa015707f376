from collections.abc import Iterable


class Alphabet:
    """
    Fixed symbol <-> index table for a cipher alphabet.

    The table is built once on construction and never mutated. Lowercase
    Cyrillic letters are folded with an explicit range check instead of
    relying on locale-aware case conversion.
    """

    # а..я and А..Я are contiguous in Unicode; ё/Ё sit outside both ranges
    _LOWER_FIRST = "а"
    _LOWER_LAST = "я"
    _UPPER_OFFSET = ord("а") - ord("А")
    _YO_LOWER = "ё"
    _YO_UPPER = "Ё"

    def __init__(self, symbols: str):
        if len(set(symbols)) != len(symbols):
            raise ValueError("Alphabet symbols must be distinct")
        self._symbols = tuple(symbols)
        self._index = {symbol: i for i, symbol in enumerate(self._symbols)}

    @property
    def symbols(self) -> str:
        return "".join(self._symbols)

    @property
    def size(self) -> int:
        return len(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._index

    def __repr__(self) -> str:
        return f"Alphabet({self.symbols!r})"

    def to_upper(self, symbol: str) -> str:
        """Fold a single character to uppercase."""
        if self._LOWER_FIRST <= symbol <= self._LOWER_LAST:
            return chr(ord(symbol) - self._UPPER_OFFSET)
        if symbol == self._YO_LOWER:
            return self._YO_UPPER
        return symbol.upper()

    def contains(self, symbol: str) -> bool:
        """Check membership after case folding."""
        return self.to_upper(symbol) in self._index

    def index_of(self, symbol: str) -> int:
        """
        Return the position of a symbol (after case folding).

        Raises:
            ValueError: If the symbol is not part of the alphabet
        """
        try:
            return self._index[self.to_upper(symbol)]
        except KeyError:
            raise ValueError(f"Symbol {symbol!r} is not in the alphabet") from None

    def symbol_at(self, index: int) -> str:
        """Return the symbol at a zero-based position."""
        if not 0 <= index < len(self._symbols):
            raise IndexError(f"Alphabet index {index} out of range")
        return self._symbols[index]

    def to_indices(self, text: str) -> list[int]:
        """Convert text to indices, silently dropping characters with no slot."""
        indices = []
        for char in text:
            upper = self.to_upper(char)
            if upper in self._index:
                indices.append(self._index[upper])
        return indices

    def from_indices(self, indices: Iterable[int]) -> str:
        """Convert a sequence of indices back to text."""
        return "".join(self.symbol_at(i) for i in indices)


RUSSIAN = Alphabet("АБВГДЕЁЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ")

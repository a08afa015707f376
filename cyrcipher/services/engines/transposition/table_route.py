import random
from typing import Any, ClassVar

from cyrcipher.core.exceptions import InvalidKeyError
from cyrcipher.models.schemas import CipherFamily, CipherType, KeyKind
from cyrcipher.services.engines.base import CipherEngine
from cyrcipher.services.engines.registry import EngineRegistry


@EngineRegistry.register
class TableRouteEngine(CipherEngine):
    """
    Table route transposition cipher engine.

    The plaintext is written into a grid row by row, then the columns are
    read top to bottom starting from the rightmost column. The key is the
    number of columns. Only the last row can be incomplete; its empty cells
    are skipped on readout, so no padding is added.

    Example with 4 columns, plaintext "АБВГД":

    Col:    0 1 2 3
            ───────
            А Б В Г
            Д . . .

    Read columns 3, 2, 1, 0: Г + В + Б + АД = ГВБАД
    """

    name = "Table Route Cipher"
    cipher_type = CipherType.TABLE_ROUTE
    cipher_family = CipherFamily.TRANSPOSITION
    key_kind = KeyKind.INTEGER
    description = (
        "A transposition cipher where plaintext is written into a table by "
        "rows and read out by columns from right to left. The number of "
        "columns is the key."
    )

    MAX_COLUMNS: ClassVar[int] = 100

    def __init__(self, columns: int, max_columns: int | None = None):
        super().__init__()
        self.max_columns = self.MAX_COLUMNS if max_columns is None else max_columns
        self._columns = self._get_valid_key(columns)

    @property
    def key(self) -> int:
        return self._columns

    @property
    def columns(self) -> int:
        return self._columns

    def encrypt(self, plaintext: str) -> str:
        """Encrypt by filling rows and reading columns right to left."""
        text = self._normalizer.normalize(plaintext)
        cols = self._columns
        n = len(text)
        num_rows = (n + cols - 1) // cols

        # Build grid row by row
        grid: list[list[str | None]] = [[None] * cols for _ in range(num_rows)]
        for i, char in enumerate(text):
            grid[i // cols][i % cols] = char

        # Read columns from last to first, skipping empty cells
        result = []
        for col in range(cols - 1, -1, -1):
            for row in grid:
                if row[col] is not None:
                    result.append(row[col])

        return "".join(result)

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt by refilling columns right to left and reading rows."""
        text = self._normalizer.validate_ciphertext(ciphertext)
        cols = self._columns
        n = len(text)
        num_rows = (n + cols - 1) // cols

        # Columns with index >= num_long_cols are one cell short
        num_long_cols = n % cols
        if num_long_cols == 0:
            num_long_cols = cols

        grid: list[list[str | None]] = [[None] * cols for _ in range(num_rows)]
        idx = 0
        for col in range(cols - 1, -1, -1):
            length = num_rows if col < num_long_cols else num_rows - 1
            for row in range(length):
                grid[row][col] = text[idx]
                idx += 1

        # Read row by row
        result = []
        for row in grid:
            for cell in row:
                if cell is not None:
                    result.append(cell)

        return "".join(result)

    def explain(self, ciphertext: str, plaintext: str) -> str:
        """Generate human-readable explanation."""
        n = len(plaintext)
        num_rows = (n + self._columns - 1) // self._columns

        return (
            f"Table route transposition with {self._columns} columns "
            f"({num_rows} rows for {n} letters). "
            f"The ciphertext was written column by column from the rightmost "
            f"column to the leftmost, then read row by row to recover the plaintext."
        )

    @classmethod
    def parse_key(cls, key: Any) -> int:
        """Parse key to number of columns."""
        if isinstance(key, dict):
            key = key.get("columns", key.get("key"))
        if isinstance(key, bool):
            raise InvalidKeyError("Invalid key: number of columns must be an integer")
        try:
            return int(key)
        except (ValueError, TypeError):
            raise InvalidKeyError(
                "Invalid key: number of columns must be an integer",
                {"key": repr(key)},
            ) from None

    @classmethod
    def generate_random_key(cls, max_columns: int | None = None, **options: Any) -> int:
        """Generate a random number of columns (2-10)."""
        upper = min(10, cls.MAX_COLUMNS if max_columns is None else max_columns)
        return random.randint(min(2, upper), upper)

    def _get_valid_key(self, columns: int) -> int:
        """Validate the number of columns."""
        if isinstance(columns, bool) or not isinstance(columns, int):
            raise InvalidKeyError(
                "Invalid key: number of columns must be an integer",
                {"key": repr(columns)},
            )
        if columns <= 0:
            raise InvalidKeyError(
                "Invalid key: number of columns must be positive",
                {"key": columns},
            )
        if columns > self.max_columns:
            raise InvalidKeyError(
                f"Invalid key: number of columns must not exceed {self.max_columns}",
                {"key": columns, "max_columns": self.max_columns},
            )
        return columns

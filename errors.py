# errors.py


class OutOfBounds(IndexError):
    """Raised when a (row, col) pair does not name a cell of the current grid."""

    def __init__(self, row, col, rows, cols):
        super().__init__(f"Cell ({row}, {col}) is outside the {rows}x{cols} grid.")
        self.row = row
        self.col = col


class InvalidConfiguration(ValueError):
    """Raised when rows, cols or label_count is not a positive integer."""

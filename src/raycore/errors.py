# raycore/errors.py


class IndexOutOfRange(IndexError):
    """
    Raised when a vector component is addressed with an index other than 0, 1 or 2.
    """
    def __init__(self, index: int):
        super().__init__(f"Index out of bounds: vector index must be 0, 1, or 2, got {index}")
        self.index = index

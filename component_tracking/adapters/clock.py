class FixedClock:
    def __init__(self, value: int = 100) -> None:
        self._value = value

    def now(self) -> int:
        return self._value


class BlockClock:
    """Logical clock that only moves when told to, like a chain's block height."""

    def __init__(self, height: int = 0) -> None:
        if height < 0:
            raise ValueError("Block height cannot be negative")
        self._height = height

    def now(self) -> int:
        return self._height

    def advance(self, blocks: int = 1) -> int:
        if blocks < 0:
            raise ValueError("Block height never decreases")
        self._height += blocks
        return self._height

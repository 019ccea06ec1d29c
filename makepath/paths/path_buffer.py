"""Fixed-capacity character buffer used as the output of path assembly.

The buffer mirrors a caller-owned character array: it has a fixed number of
slots, a write cursor and a running count of characters written. Writes never
go past the last slot, and a null terminator marks the end of the text.
"""

from typing import List, Optional

from makepath.utils.config.parameters import ParameterLoader


class PathBuffer:
    """Bounded output buffer that always ends up null-terminated."""

    _PARAMS = ParameterLoader()
    _MAX_PATH: int = _PARAMS.get("max_path")
    _TERMINATOR: str = _PARAMS.get("terminator")

    def __init__(self, capacity: Optional[int] = None, growable: bool = False) -> None:
        """Create a buffer of ``capacity`` slots (``MAX_PATH`` by default).

        A ``growable`` buffer has no capacity and never truncates.
        """
        if growable:
            if capacity is not None:
                raise ValueError("A growable buffer cannot have a capacity")
            self._capacity: Optional[int] = None
            self._slots: List[str] = [PathBuffer._TERMINATOR]
        else:
            capacity = PathBuffer._MAX_PATH if capacity is None else capacity
            if not isinstance(capacity, int) or isinstance(capacity, bool):
                raise TypeError("`capacity` must be an integer")
            if capacity < 1:
                raise ValueError("`capacity` must be at least 1")
            self._capacity = capacity
            self._slots = [PathBuffer._TERMINATOR] * capacity
        self._cursor = 0
        self._count = 0

    @property
    def capacity(self) -> Optional[int]:
        """Number of slots, terminator included, or None when growable."""
        return self._capacity

    @property
    def growable(self) -> bool:
        """Whether the buffer grows instead of truncating."""
        return self._capacity is None

    @property
    def count(self) -> int:
        """Characters written since the last ``clear``."""
        return self._count

    @property
    def raw(self) -> str:
        """Full slot contents, terminators included."""
        return "".join(self._slots)

    @property
    def value(self) -> str:
        """Text up to the first null terminator."""
        raw = self.raw
        end = raw.find(PathBuffer._TERMINATOR)
        return raw if end < 0 else raw[:end]

    def __len__(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"PathBuffer(capacity={self._capacity!r}, value={self.value!r})"

    def clear(self) -> None:
        """Reset the cursor and blank every slot."""
        if self._capacity is None:
            self._slots = [PathBuffer._TERMINATOR]
        else:
            self._slots = [PathBuffer._TERMINATOR] * self._capacity
        self._cursor = 0
        self._count = 0

    def put(self, char: str) -> bool:
        """Write one character at the cursor.

        Returns False when this write filled the buffer: the cursor has then
        been moved back one slot and that slot holds the terminator, leaving
        ``capacity - 1`` characters of text.
        """
        if self._capacity is None:
            self._slots.insert(self._cursor, char)
            self._cursor += 1
            self._count += 1
            return True
        self._slots[self._cursor] = char
        self._cursor += 1
        self._count += 1
        if self._count == self._capacity:
            self._cursor -= 1
            self._slots[self._cursor] = PathBuffer._TERMINATOR
            return False
        return True

    def terminate(self) -> None:
        """Write the terminator at the cursor without counting it."""
        if self._capacity is None:
            del self._slots[self._cursor :]
            self._slots.append(PathBuffer._TERMINATOR)
        else:
            self._slots[self._cursor] = PathBuffer._TERMINATOR

"""Exceptions raised by the path helpers."""


class OSQueryError(OSError):
    """The platform could not report the running executable's path."""


class PathLengthExceededError(ValueError):
    """An assembled path does not fit in the requested capacity."""

    def __init__(self, required: int, capacity: int):
        self.required = required
        self.capacity = capacity
        super().__init__(
            f"Assembled path needs {required} characters but capacity allows "
            f"at most {capacity - 1}"
        )

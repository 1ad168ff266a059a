from __future__ import annotations

from typing import Any


class ArgumentTypeError(TypeError):
    def __init__(self, message: str, *, argument: str, value: Any) -> None:
        super().__init__(message)
        self.argument = argument
        self.value = value


class ArgumentRangeError(ValueError):
    def __init__(self, message: str, *, argument: str, value: Any) -> None:
        super().__init__(message)
        self.argument = argument
        self.value = value


class EmptyStockError(Exception):
    def __init__(self, *, artist_uid: str) -> None:
        self.artist_uid = artist_uid
        super().__init__(f"Artist uid={artist_uid} has no items in stock")

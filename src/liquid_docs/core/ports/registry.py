from typing import Protocol


class TypeLookup(Protocol):
    def __contains__(self, identifier: object) -> bool: ...

from abc import ABC, abstractmethod
from typing import Any, Generic, Mapping, Optional, TypeVar

T = TypeVar("T")


class DataParser(ABC, Generic[T]):
    """Turns one decoded row into a domain record, or None to drop it."""

    @abstractmethod
    def parse(self, raw: Mapping[str, Any]) -> Optional[T]:
        pass

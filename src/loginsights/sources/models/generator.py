from abc import ABC, abstractmethod
from typing import Iterator, Any, Optional


class DataGenerator(ABC):
    """Produces records in-process instead of decoding an upload.

    Subclasses yield from ``generate()``; ``count()`` reports the number of
    records up front when it is known, so callers can size a series before
    consuming it.
    """

    @abstractmethod
    def generate(self) -> Iterator[Any]:
        pass

    def count(self) -> Optional[int]:
        return None

    def __iter__(self) -> Iterator[Any]:
        return self.generate()

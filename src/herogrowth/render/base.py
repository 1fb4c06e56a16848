from abc import ABC, abstractmethod
from collections.abc import Mapping

from herogrowth.models.growth import ComparisonTable, EntityResult


class RendererBase(ABC):
    @property
    @abstractmethod
    def name(self) -> str:
        """Returns the name of the renderer."""
        pass

    @abstractmethod
    def render(self, results: Mapping[str, EntityResult], comparison: ComparisonTable) -> str:
        """Render processed heroes and their comparison table, returning the rendered output."""
        pass

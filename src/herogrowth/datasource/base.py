from abc import ABC, abstractmethod

from herogrowth.models.entity import Entity


class DataSourceBase(ABC):
    @property
    @abstractmethod
    def name(self) -> str:
        """Returns the name of the data source."""
        pass

    @abstractmethod
    def load_entities(self) -> dict[str, Entity]:
        """Returns every available hero keyed by name. Unavailable heroes are left out."""
        pass

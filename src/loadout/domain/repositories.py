from abc import ABC, abstractmethod
from typing import List, Optional

from loadout.domain.models.equipment import EquipmentItem


class EquipmentCatalog(ABC):
    @abstractmethod
    def get_by_name(self, name: str) -> Optional[EquipmentItem]:
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> List[EquipmentItem]:
        raise NotImplementedError

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get_by_name(name) is not None

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class LoadoutItemView:
    name: str
    kind: str
    category: str
    detail: str
    quantity: int
    weight: float
    proficient: bool


@dataclass
class EquipmentChoiceView:
    description: str
    option_labels: List[str] = field(default_factory=list)
    selected_index: int = 0


@dataclass
class LoadoutView:
    class_name: str
    background_name: str
    armour_class: int
    items: List[LoadoutItemView] = field(default_factory=list)
    counts_by_kind: Dict[str, int] = field(default_factory=dict)
    choices: List[EquipmentChoiceView] = field(default_factory=list)
    total_weight: float = 0.0
    selection_errors: List[str] = field(default_factory=list)

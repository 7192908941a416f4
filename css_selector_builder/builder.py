from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Tuple
from dataclasses import dataclass
import logging

from .exceptions import RepeatError, OrderError

logger = logging.getLogger(__name__)

class Category(Enum):
    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudoClass"
    PSEUDO_ELEMENT = "pseudoElement"
    RAW = "raw"

@dataclass(frozen=True)
class Fragment:
    category: Category
    text: str
    rank: Optional[int] = None

class SelectorBuilder:
    """
    Fluent builder for a compound CSS selector.

    Parts must be appended in the order element, id, class, attribute,
    pseudo-class, pseudo-element. Element, id and pseudo-element may occur
    once; the others may repeat. Every append returns the builder itself.
    """

    REPEAT_ERROR = (
        "Element, id and pseudo-element should not occur more than one time "
        "inside the selector"
    )
    ORDER_ERROR = (
        "Selector parts should be arranged in the following order: element, id, "
        "class, attribute, pseudo-class, pseudo-element"
    )

    RANKS: Dict[Category, int] = {
        Category.ELEMENT: 1,
        Category.ID: 2,
        Category.CLASS: 3,
        Category.ATTRIBUTE: 4,
        Category.PSEUDO_CLASS: 5,
        Category.PSEUDO_ELEMENT: 6,
    }

    TEMPLATES: Dict[Category, str] = {
        Category.ELEMENT: "{}",
        Category.ID: "#{}",
        Category.CLASS: ".{}",
        Category.ATTRIBUTE: "[{}]",
        Category.PSEUDO_CLASS: ":{}",
        Category.PSEUDO_ELEMENT: "::{}",
        Category.RAW: "{}",
    }

    UNIQUE: FrozenSet[Category] = frozenset({
        Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT
    })

    def __init__(self):
        self._fragments: List[Fragment] = []
        self._max_rank = 0

    def element(self, value: str) -> "SelectorBuilder":
        return self._append(Category.ELEMENT, value)

    def id(self, value: str) -> "SelectorBuilder":
        return self._append(Category.ID, value)

    def class_(self, value: str) -> "SelectorBuilder":
        return self._append(Category.CLASS, value)

    def attribute(self, value: str) -> "SelectorBuilder":
        return self._append(Category.ATTRIBUTE, value)

    attr = attribute

    def pseudo_class(self, value: str) -> "SelectorBuilder":
        return self._append(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> "SelectorBuilder":
        return self._append(Category.PSEUDO_ELEMENT, value)

    def raw(self, value: str) -> "SelectorBuilder":
        """Append literal text that is not subject to order or repeat checks."""
        return self._append(Category.RAW, value)

    def render(self) -> str:
        """Return the selector string. Rendering does not change the builder."""
        return "".join(fragment.text for fragment in self._fragments)

    @property
    def fragments(self) -> Tuple[Fragment, ...]:
        return tuple(self._fragments)

    def _append(self, category: Category, value: str) -> "SelectorBuilder":
        """
        Validate and append one fragment.

        Args:
            category: Category of the new fragment
            value: Selector value without its sigil

        Returns:
            The builder itself

        Raises:
            RepeatError: If a unique category is already present
            OrderError: If the category ranks below a part already appended
        """
        rank = self.RANKS.get(category)

        if category in self.UNIQUE and self._has(category):
            logger.debug(f"Rejected repeated {category.value} {value!r} after {self.render()!r}")
            raise RepeatError(self.REPEAT_ERROR)

        if rank is not None and rank < self._max_rank:
            logger.debug(f"Rejected {category.value} {value!r} after {self.render()!r}")
            raise OrderError(self.ORDER_ERROR)

        self._fragments.append(
            Fragment(category, self.TEMPLATES[category].format(value), rank)
        )
        if rank is not None:
            self._max_rank = rank
        return self

    def _has(self, category: Category) -> bool:
        return any(fragment.category is category for fragment in self._fragments)

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self._fragments)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.render()!r})"

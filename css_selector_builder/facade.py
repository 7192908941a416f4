import logging

from .builder import SelectorBuilder
from .utils import combinator_separator

logger = logging.getLogger(__name__)

class CssSelectorBuilder:
    """Entry points that each start a new SelectorBuilder."""

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().class_(value)

    def attribute(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().attribute(value)

    attr = attribute

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(value)

    def combine(
        self,
        selector1: SelectorBuilder,
        combinator: str,
        selector2: SelectorBuilder
    ) -> SelectorBuilder:
        """
        Join two selectors into a complex selector.

        Args:
            selector1: Left-hand selector
            combinator: One of ' ', '+', '~', '>'
            selector2: Right-hand selector

        Returns:
            A new builder rendering to ``left + " " + combinator + " " + right``.
            Both operands are left unchanged.

        Raises:
            InvalidCombinatorError: If the combinator is not recognized
        """
        separator = combinator_separator(combinator)
        left, right = selector1.render(), selector2.render()
        logger.debug(f"Combining {left!r} and {right!r} with {combinator!r}")
        return SelectorBuilder().raw(left).raw(separator).raw(right)

css_selector_builder = CssSelectorBuilder()

element = css_selector_builder.element
id_ = css_selector_builder.id
class_ = css_selector_builder.class_
attribute = css_selector_builder.attribute
attr = css_selector_builder.attr
pseudo_class = css_selector_builder.pseudo_class
pseudo_element = css_selector_builder.pseudo_element
combine = css_selector_builder.combine

def render(selector: SelectorBuilder) -> str:
    """Render a builder to its selector string."""
    return selector.render()

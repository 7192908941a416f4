# css_selector_builder/__init__.py
from .builder import SelectorBuilder, Fragment, Category
from .facade import (
    CssSelectorBuilder,
    css_selector_builder,
    element,
    id_,
    class_,
    attribute,
    attr,
    pseudo_class,
    pseudo_element,
    combine,
    render
)
from .exceptions import (
    SelectorError,
    RepeatError,
    OrderError,
    InvalidCombinatorError,
    ParseError,
    SerializationError
)
from .utils import COMBINATORS, is_valid_combinator, validate_combinator
from .objects import Rectangle, get_json, from_json, register_factory

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "SelectorBuilder",
    "CssSelectorBuilder",
    "Fragment",
    "Category",
    "css_selector_builder",

    # Entry points
    "element",
    "id_",
    "class_",
    "attribute",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    "render",

    # Exceptions
    "SelectorError",
    "RepeatError",
    "OrderError",
    "InvalidCombinatorError",
    "ParseError",
    "SerializationError",

    # Utility functions
    "COMBINATORS",
    "is_valid_combinator",
    "validate_combinator",

    # Object helpers
    "Rectangle",
    "get_json",
    "from_json",
    "register_factory"
]

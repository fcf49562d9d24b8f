"""cssbuilder: compose CSS selector strings from validated parts."""

from cssbuilder.builder import SelectorBuilder, css_selector_builder
from cssbuilder.config import BuilderConfig
from cssbuilder.errors import (
    CardinalityError,
    FrozenSelectorError,
    InvalidCombinatorError,
    InvalidOperandError,
    OrderError,
    SelectorError,
)
from cssbuilder.model import Combinator, Fragment, FragmentKind
from cssbuilder.selector import CombinedSelector, Selector, SimpleSelector

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "SelectorBuilder",
    "css_selector_builder",
    "BuilderConfig",
    "SelectorError",
    "OrderError",
    "CardinalityError",
    "InvalidCombinatorError",
    "InvalidOperandError",
    "FrozenSelectorError",
    "Combinator",
    "Fragment",
    "FragmentKind",
    "Selector",
    "SimpleSelector",
    "CombinedSelector",
]

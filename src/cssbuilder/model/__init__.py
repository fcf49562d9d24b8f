from cssbuilder.model.combinator import Combinator
from cssbuilder.model.fragment import Fragment, FragmentKind

__all__ = ["Combinator", "Fragment", "FragmentKind"]

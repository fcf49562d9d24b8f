from cssbuilder.selector.base import Selector
from cssbuilder.selector.combined import CombinedSelector
from cssbuilder.selector.simple import SimpleSelector

__all__ = ["Selector", "SimpleSelector", "CombinedSelector"]

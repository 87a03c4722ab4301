"""Line classifiers for the Notedown block scanner.

Each classifier is a mixin that decides whether a single line opens (or
continues) a particular block type. Classifiers are pure: they never move
the scanner's position.
"""

from notedown.scanner.classifiers.fence import FenceClassifierMixin
from notedown.scanner.classifiers.heading import HeadingClassifierMixin
from notedown.scanner.classifiers.list import ListClassifierMixin
from notedown.scanner.classifiers.quote import QuoteClassifierMixin
from notedown.scanner.classifiers.thematic import ThematicClassifierMixin

__all__ = [
    "FenceClassifierMixin",
    "HeadingClassifierMixin",
    "ListClassifierMixin",
    "QuoteClassifierMixin",
    "ThematicClassifierMixin",
]

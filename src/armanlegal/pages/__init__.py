"""NiceGUI pages for Arman Legal.

Import this module to register all page routes with NiceGUI.
"""

from armanlegal.pages import document

__all__ = ["document"]

# Touch modules to prevent linter from removing "unused" imports.
# These imports register @ui.page decorators as a side effect.
_PAGES = (document,)

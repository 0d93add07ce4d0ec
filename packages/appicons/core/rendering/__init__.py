"""Layer renderers.

- BackgroundRenderer: solid, gradient and image backgrounds
- ForegroundRenderer: svg, text and image foregrounds
- FontResolver: font lookup for text foregrounds
"""

from appicons.core.rendering.background import BackgroundRenderer, darken_background
from appicons.core.rendering.fonts import FontResolver
from appicons.core.rendering.foreground import ForegroundRenderer

__all__ = [
    "BackgroundRenderer",
    "ForegroundRenderer",
    "FontResolver",
    "darken_background",
]

"""Top languages SVG card generator."""

from toplangs.aggregate import aggregate
from toplangs.rank import OTHER_LABEL, rank
from toplangs.svg import PALETTE, RenderOptions, render

__all__ = ["aggregate", "rank", "render", "RenderOptions", "PALETTE", "OTHER_LABEL"]
__version__ = "0.1.0"

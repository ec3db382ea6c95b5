"""
Render a language ranking as a self-contained SVG card.

Rendering is split in two passes: ``build_scene`` does all the layout
arithmetic and returns plain shapes, ``serialize`` turns those shapes into
markup. ``render`` chains both.

Card layout, top to bottom:

  title            centered, baseline at TITLE_HEIGHT
  padding
  bar              one contiguous run of colored segments
  padding
  legend rows      row-major grid of swatch + "Label 12.3%"
  padding
"""

import html
import math
from dataclasses import dataclass, field

# ---------------------------------------------------------------------------
# Style
# ---------------------------------------------------------------------------
PALETTE = (
    "#4F8EF7",
    "#F7B32F",
    "#F75F4F",
    "#6FCF97",
    "#9B51E0",
    "#F2994A",
    "#56CCF2",
)

BACKGROUND = "#000"
TEXT_COLOR = "#fff"
TITLE_FONT = "monospace"
TITLE_SIZE = 16
LEGEND_FONT = "sans-serif"
LEGEND_SIZE = 12

TITLE_HEIGHT = 20
SWATCH_SIZE = 15
SWATCH_GAP = 5


@dataclass(frozen=True)
class RenderOptions:
    width: int = 600
    bar_height: int = 12
    legend_item_height: int = 25
    padding: int = 10
    title: str = "Top Languages"
    legend_columns: int = 2
    palette: tuple = PALETTE

    def __post_init__(self):
        if self.legend_columns < 1:
            raise ValueError(f"legend_columns must be at least 1, got {self.legend_columns}")
        if self.width <= 2 * self.padding:
            raise ValueError(
                f"width must exceed twice the padding, got width={self.width} padding={self.padding}"
            )
        if not self.palette:
            raise ValueError("palette must contain at least one color")


# ---------------------------------------------------------------------------
# Scene
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    fill: str


@dataclass(frozen=True)
class Text:
    x: float
    y: float
    content: str
    size: int
    family: str
    fill: str = TEXT_COLOR
    anchor: str = "start"


@dataclass(frozen=True)
class LegendCell:
    swatch: Rect
    label: Text


@dataclass(frozen=True)
class Scene:
    width: float
    height: float
    background: Rect
    title: Text
    segments: list = field(default_factory=list)
    legend: list = field(default_factory=list)


def canvas_height(entry_count, options):
    """Exact height needed for the title, the bar and every legend row."""
    rows = math.ceil(entry_count / options.legend_columns)
    return (
        TITLE_HEIGHT
        + 2 * options.padding
        + options.bar_height
        + rows * options.legend_item_height
        + options.padding
    )


def color_for(index, palette):
    # Colors cycle once the ranking outgrows the palette.
    return palette[index % len(palette)]


def build_scene(ranking, options=None):
    """Lay out background, title, bar segments and legend cells."""
    options = options or RenderOptions()
    width = options.width
    pad = options.padding
    height = canvas_height(len(ranking), options)

    background = Rect(0, 0, width, height, BACKGROUND)
    title = Text(width / 2, TITLE_HEIGHT, options.title,
                 size=TITLE_SIZE, family=TITLE_FONT, anchor="middle")

    bar_y = TITLE_HEIGHT + pad
    bar_width = width - 2 * pad
    segments = []
    cursor_x = pad
    # Edges are snapped to the printed precision so that each segment ends
    # exactly where the next one starts in the markup.
    left = round(cursor_x, 2)
    for idx, entry in enumerate(ranking):
        cursor_x += entry.percent / 100 * bar_width
        right = round(cursor_x, 2)
        segments.append(Rect(left, bar_y, right - left, options.bar_height,
                             color_for(idx, options.palette)))
        left = right

    legend_top = bar_y + options.bar_height + pad
    col_w = bar_width / options.legend_columns
    legend = []
    for idx, entry in enumerate(ranking):
        row, col = divmod(idx, options.legend_columns)
        lx = pad + col * col_w
        ly = legend_top + row * options.legend_item_height
        swatch = Rect(lx, ly, SWATCH_SIZE, SWATCH_SIZE, color_for(idx, options.palette))
        label = Text(lx + SWATCH_SIZE + SWATCH_GAP, ly + SWATCH_SIZE - 3,
                     f"{entry.label} {entry.percent:.1f}%",
                     size=LEGEND_SIZE, family=LEGEND_FONT)
        legend.append(LegendCell(swatch, label))

    return Scene(width, height, background, title, segments, legend)


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------

def fmt(value):
    """Format a coordinate with at most two decimals: 12.0 -> '12', 1.255 -> '1.25'."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def svg_rect(rect):
    return (
        f'<rect x="{fmt(rect.x)}" y="{fmt(rect.y)}" width="{fmt(rect.width)}" '
        f'height="{fmt(rect.height)}" fill="{rect.fill}"/>\n'
    )


def svg_text(text):
    return (
        f'<text x="{fmt(text.x)}" y="{fmt(text.y)}" font-family="{text.family}" '
        f'font-size="{text.size}" fill="{text.fill}" text-anchor="{text.anchor}">'
        f'{html.escape(text.content)}</text>\n'
    )


def serialize(scene):
    """Write a scene out as SVG markup, in paint order."""
    w, h = fmt(scene.width), fmt(scene.height)
    svg = (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" '
        f'viewBox="0 0 {w} {h}">\n'
    )
    svg += svg_rect(scene.background)
    svg += svg_text(scene.title)
    for segment in scene.segments:
        svg += svg_rect(segment)
    for cell in scene.legend:
        svg += svg_rect(cell.swatch)
        svg += svg_text(cell.label)
    svg += "</svg>\n"
    return svg


def render(ranking, options=None):
    """Render a ranking to SVG markup. Same input, same bytes."""
    return serialize(build_scene(ranking, options))

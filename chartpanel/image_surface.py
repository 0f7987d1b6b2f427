from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Union

from PIL import Image, ImageDraw, ImageFont

from .data_model import FontSpec, Size

log = logging.getLogger(__name__)

FontType = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


def _font_candidates(spec: FontSpec) -> list[str]:
    family = spec.family.lower().replace(" ", "")
    names = []
    if spec.bold:
        names += [f"{family}bd.ttf", f"{spec.family}-Bold.ttf", "DejaVuSans-Bold.ttf"]
    names += [f"{family}.ttf", f"{spec.family}.ttf", "DejaVuSans.ttf"]
    return names


def load_font(spec: FontSpec) -> FontType:
    """
    Resolve a FontSpec to a Pillow font. Tries the family's TrueType file
    first, then DejaVu, then Pillow's built-in font at the requested size.
    """
    for name in _font_candidates(spec):
        try:
            return ImageFont.truetype(name, spec.size)
        except OSError:
            continue
    log.debug("no TrueType font for %s, using Pillow default", spec)
    return ImageFont.load_default(size=spec.size)


class ImageSurface:
    """Off-screen render surface drawing into a Pillow RGB image."""

    def __init__(self, width: int, height: int) -> None:
        self.image = Image.new("RGB", (max(1, int(width)), max(1, int(height))))
        self._draw = ImageDraw.Draw(self.image)
        self._fonts: Dict[FontSpec, FontType] = {}

    def size(self) -> Size:
        w, h = self.image.size
        return Size(w, h)

    def fill_rect(self, x: int, y: int, width: int, height: int, color: str) -> None:
        if width <= 0 or height <= 0:
            return
        self._draw.rectangle((x, y, x + width - 1, y + height - 1), fill=color)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: str) -> None:
        self._draw.line((x0, y0, x1, y1), fill=color, width=1)

    def draw_text(self, text: str, x: int, y: int, color: str, font: FontSpec) -> None:
        if not text:
            return
        f = self._font(font)
        if isinstance(f, ImageFont.FreeTypeFont):
            self._draw.text((x, y), text, fill=color, font=f, anchor="ls")
            return
        # bitmap fonts only anchor top-left; lift the text by its height
        _, top, _, bottom = self._draw.textbbox((0, 0), text, font=f)
        self._draw.text((x, y - (bottom - top)), text, fill=color, font=f)

    def _font(self, spec: FontSpec) -> FontType:
        f = self._fonts.get(spec)
        if f is None:
            f = load_font(spec)
            self._fonts[spec] = f
        return f

    def save_png(self, path: Union[str, Path]) -> None:
        self.image.save(str(path), format="PNG")


def render_to_image(panel, width: int, height: int) -> Image.Image:
    """Render a ChartPanel off-screen and return the image."""
    surface = ImageSurface(width, height)
    panel.render(surface)
    return surface.image

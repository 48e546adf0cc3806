import math
from pathlib import Path

try:
    import cairo
except ModuleNotFoundError:  # pragma: no cover - fallback when pycairo isn't available
    import cairocffi as cairo  # type: ignore[no-redef]

from memento_mori.surface import DISPLAY_HEIGHT, DISPLAY_WIDTH, SUPPORTED_SUFFIXES, Color, Surface


class CairoSurface(Surface):
    """Surface backed by a cairo PNG image or PDF page, picked by file suffix."""

    def __init__(
        self,
        filename: str | Path,
        width: int = DISPLAY_WIDTH,
        height: int = DISPLAY_HEIGHT,
    ) -> None:
        self.FILENAME: Path = Path(filename)
        suffix = self.FILENAME.suffix.lower()
        if suffix not in SUPPORTED_SUFFIXES:
            raise ValueError(f"Unsupported output format '{suffix}', use .png or .pdf")
        self.width = width
        self.height = height
        if suffix == ".pdf":
            self.SURFACE = cairo.PDFSurface(str(self.FILENAME), width, height)
        else:
            self.SURFACE = cairo.ImageSurface(cairo.FORMAT_ARGB32, width, height)
        self.CTX: cairo.Context = cairo.Context(self.SURFACE)
        self.set_font("serif", 12)

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        self.CTX.set_source_rgb(*color)
        self.CTX.rectangle(x, y, width, height)
        self.CTX.fill()

    def stroke_rect(
        self, x: float, y: float, width: float, height: float, color: Color, line_width: float = 1
    ) -> None:
        self.CTX.set_source_rgb(*color)
        self.CTX.set_line_width(line_width)
        self.CTX.rectangle(x, y, width, height)
        self.CTX.stroke()

    def _circle(self, x: float, y: float, radius: float) -> None:
        self.CTX.new_sub_path()
        self.CTX.arc(x, y, radius, 0, 2 * math.pi)

    def fill_circle(self, x: float, y: float, radius: float, color: Color) -> None:
        self.CTX.set_source_rgb(*color)
        self._circle(x, y, radius)
        self.CTX.fill()

    def stroke_circle(
        self, x: float, y: float, radius: float, color: Color, line_width: float = 1
    ) -> None:
        self.CTX.set_source_rgb(*color)
        self.CTX.set_line_width(line_width)
        self._circle(x, y, radius)
        self.CTX.stroke()

    def set_font(self, family: str, size: float) -> None:
        self.CTX.select_font_face(family, cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_NORMAL)
        self.CTX.set_font_size(size)

    def fill_text(self, text: str, x: float, y: float, color: Color) -> None:
        x_bearing, y_bearing, width, height, _, _ = self.CTX.text_extents(text)
        self.CTX.set_source_rgb(*color)
        self.CTX.move_to(x - x_bearing - width / 2, y - y_bearing - height / 2)
        self.CTX.show_text(text)

    def text_width(self, text: str) -> float:
        _, _, _, _, x_advance, _ = self.CTX.text_extents(text)
        return x_advance

    def finish(self) -> Path:
        """Flushes the drawing to FILENAME and returns the path."""
        if self.FILENAME.suffix.lower() == ".pdf":
            self.CTX.show_page()
            self.SURFACE.finish()
        else:
            self.SURFACE.write_to_png(str(self.FILENAME))
        return self.FILENAME

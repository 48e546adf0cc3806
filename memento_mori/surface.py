from abc import ABC, abstractmethod

Color = tuple[float, float, float]

DISPLAY_WIDTH: int = 800
DISPLAY_HEIGHT: int = 480

BLACK: Color = (0.0, 0.0, 0.0)
WHITE: Color = (1.0, 1.0, 1.0)
# Outline grays for future weeks (#e0e0e0, #d8d8d8, #f0f0f0)
LIGHT_GRAY: Color = (0xE0 / 255, 0xE0 / 255, 0xE0 / 255)
SILVER_GRAY: Color = (0xD8 / 255, 0xD8 / 255, 0xD8 / 255)
FAINT_GRAY: Color = (0xF0 / 255, 0xF0 / 255, 0xF0 / 255)

SUPPORTED_SUFFIXES: tuple[str, ...] = (".png", ".pdf")


class Surface(ABC):
    """Immediate-mode 2D drawing target the layouts and quote renderer draw on."""

    width: float = DISPLAY_WIDTH
    height: float = DISPLAY_HEIGHT

    def clear(self, color: Color = WHITE) -> None:
        self.fill_rect(0, 0, self.width, self.height, color)

    @abstractmethod
    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None: ...

    @abstractmethod
    def stroke_rect(
        self, x: float, y: float, width: float, height: float, color: Color, line_width: float = 1
    ) -> None: ...

    @abstractmethod
    def fill_circle(self, x: float, y: float, radius: float, color: Color) -> None: ...

    @abstractmethod
    def stroke_circle(
        self, x: float, y: float, radius: float, color: Color, line_width: float = 1
    ) -> None: ...

    @abstractmethod
    def set_font(self, family: str, size: float) -> None: ...

    @abstractmethod
    def fill_text(self, text: str, x: float, y: float, color: Color) -> None:
        """Draws text centered horizontally and vertically on (x, y)."""

    @abstractmethod
    def text_width(self, text: str) -> float: ...

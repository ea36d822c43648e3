"""합성 대상 이미지가 갖춰야 할 기능 집합."""

from typing import Protocol

from .channel import Channel

RGBA = tuple


class Surface(Protocol):
    """composite/extent가 다룰 수 있는 이미지.

    크기 조회, 좌표 기반 픽셀 읽기/쓰기, 네이티브 픽셀 ↔ RGBA 변환,
    같은 종류의 새 이미지 생성을 제공해야 한다. 범위를 벗어난 좌표 접근은
    IndexError를 던진다.
    """

    channel: Channel

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    @property
    def size(self) -> tuple[int, int]: ...

    def get_pixel(self, x: int, y: int): ...

    def put_pixel(self, x: int, y: int, pixel) -> None: ...

    def to_rgba(self, pixel) -> RGBA: ...

    def from_rgba(self, rgba: RGBA): ...

    def blank(self, width: int, height: int, fill) -> "Surface": ...


def check_bounds(surface: Surface, x: int, y: int) -> None:
    """좌표가 이미지 밖이면 IndexError를 던진다."""
    if not (0 <= x < surface.width and 0 <= y < surface.height):
        raise IndexError(
            f"pixel ({x}, {y}) out of range for {surface.width}x{surface.height} image"
        )

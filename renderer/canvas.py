"""Pillow 이미지를 합성 대상(Surface)으로 감싸는 모듈."""

import logging

from PIL import Image

from .channel import Channel, PILLOW_F, U8, U16
from .surface import check_bounds

logger = logging.getLogger(__name__)

# 지원 모드 → 채널 타입
MODES: dict[str, Channel] = {
    "RGBA": U8,
    "RGB": U8,
    "LA": U8,
    "L": U8,
    "I;16": U16,
    "F": PILLOW_F,
}


def _luma(channel: Channel, r, g, b) -> int | float:
    # Pillow의 L 변환과 같은 ITU-R 601 가중치
    return channel.cast((r * 299 + g * 587 + b * 114) / 1000)


class Canvas:
    """Pillow 이미지 기반 캔버스.

    지원하지 않는 모드는 RGBA로 변환해서 감싼다. 이 경우 원본 이미지가 아니라
    변환된 사본이 수정되므로 결과는 image 속성으로 꺼내야 한다.
    """

    def __init__(self, image: Image.Image):
        if image.mode not in MODES:
            logger.debug("지원하지 않는 모드 %s → RGBA 변환", image.mode)
            image = image.convert("RGBA")
        self._image = image
        self._pixels = image.load()
        self.channel = MODES[image.mode]

    @classmethod
    def new(cls, mode: str, size: tuple[int, int], color=0) -> "Canvas":
        """지정 모드·크기·색상으로 새 캔버스를 만든다."""
        return cls(Image.new(mode, size, color))

    @property
    def image(self) -> Image.Image:
        return self._image

    @property
    def mode(self) -> str:
        return self._image.mode

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def size(self) -> tuple[int, int]:
        return self._image.size

    def get_pixel(self, x: int, y: int):
        check_bounds(self, x, y)
        return self._pixels[x, y]

    def put_pixel(self, x: int, y: int, pixel) -> None:
        check_bounds(self, x, y)
        self._pixels[x, y] = pixel

    def to_rgba(self, pixel) -> tuple:
        """네이티브 픽셀을 (R, G, B, A)로 바꾼다."""
        top = self.channel.max_value
        mode = self._image.mode
        if mode == "RGBA":
            return tuple(pixel)
        if mode == "RGB":
            return (*pixel, top)
        if mode == "LA":
            lum, alpha = pixel
            return (lum, lum, lum, alpha)
        return (pixel, pixel, pixel, top)

    def from_rgba(self, rgba: tuple):
        """(R, G, B, A)를 네이티브 픽셀로 바꾼다. 값은 채널 범위로 클램프된다."""
        if len(rgba) != 4:
            raise ValueError(f"RGBA pixel must have 4 channels, got {len(rgba)}")
        r, g, b, a = (self.channel.cast(v) for v in rgba)
        mode = self._image.mode
        if mode == "RGBA":
            return (r, g, b, a)
        if mode == "RGB":
            return (r, g, b)
        if mode == "LA":
            return (_luma(self.channel, r, g, b), a)
        return _luma(self.channel, r, g, b)

    def blank(self, width: int, height: int, fill) -> "Canvas":
        """같은 모드의 새 캔버스를 fill 색으로 채워 만든다."""
        return Canvas.new(self._image.mode, (width, height), fill)

"""메모리 RGBA 비트맵 모듈 — Pillow에 없는 16비트·부동소수 RGBA 저장용."""

from PIL import Image

from .channel import Channel, CHANNELS, U8, U16
from .surface import check_bounds

# 8비트 RGBA 변환 시 잘리는 16비트 이상 흑백 모드
_WIDE_GREY_MODES = ("I;16", "I;16L", "I;16B", "I")


class Bitmap:
    """행 우선 순서로 (R, G, B, A) 튜플을 저장하는 비트맵."""

    def __init__(self, width: int, height: int, channel: Channel = U8, fill=None):
        if width < 0 or height < 0:
            raise ValueError(f"invalid bitmap size {width}x{height}")
        if fill is None:
            fill = (0, 0, 0, 0)
        self._width = width
        self._height = height
        self.channel = channel
        self._data = [self._check(fill)] * (width * height)

    @classmethod
    def from_image(cls, image: Image.Image, channel: Channel = U8) -> "Bitmap":
        """Pillow 이미지를 RGBA로 읽어 지정 채널 범위의 비트맵으로 만든다.

        16비트 흑백(I;16 계열, I)은 8비트 변환을 거치지 않고 U16 값 그대로 읽는다.
        """
        bitmap = cls(image.width, image.height, channel)
        if image.mode in _WIDE_GREY_MODES:
            top = U16.max_value
            pixels = [(v, v, v, top) for v in (U16.cast(v) for v in image.getdata())]
            bitmap._data = [U16.rescale_pixel(p, channel) for p in pixels]
            return bitmap

        rgba = image.convert("RGBA")
        # tobytes로 한 번에 읽는다 (getpixel 반복보다 빠름)
        raw = rgba.tobytes()
        pixels = [tuple(raw[i:i + 4]) for i in range(0, len(raw), 4)]
        bitmap._data = [U8.rescale_pixel(p, channel) for p in pixels]
        return bitmap

    @classmethod
    def of(cls, rows: list[list[tuple]], channel: Channel = U8) -> "Bitmap":
        """픽셀 행 목록으로 비트맵을 만든다. 테스트와 소형 이미지용."""
        height = len(rows)
        width = len(rows[0]) if rows else 0
        bitmap = cls(width, height, channel)
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError("all rows must have the same length")
            for x, pixel in enumerate(row):
                bitmap.put_pixel(x, y, pixel)
        return bitmap

    def _check(self, pixel) -> tuple:
        if len(pixel) != 4:
            raise ValueError(f"RGBA pixel must have 4 channels, got {len(pixel)}")
        return tuple(pixel)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> tuple[int, int]:
        return (self._width, self._height)

    def get_pixel(self, x: int, y: int) -> tuple:
        check_bounds(self, x, y)
        return self._data[y * self._width + x]

    def put_pixel(self, x: int, y: int, pixel) -> None:
        check_bounds(self, x, y)
        self._data[y * self._width + x] = self._check(pixel)

    def to_rgba(self, pixel) -> tuple:
        return pixel

    def from_rgba(self, rgba: tuple) -> tuple:
        return tuple(self.channel.cast(v) for v in self._check(rgba))

    def blank(self, width: int, height: int, fill) -> "Bitmap":
        return Bitmap(width, height, self.channel, fill)

    def rows(self) -> list[list[tuple]]:
        w = self._width
        return [self._data[y * w:(y + 1) * w] for y in range(self._height)]

    def is_opaque_grey(self) -> bool:
        top = self.channel.max_value
        return all(r == g == b and a == top for r, g, b, a in self._data)

    def to_image(self) -> Image.Image:
        """Pillow 이미지로 내보낸다.

        U16 비트맵이 불투명 흑백이면 I;16으로, 그 밖에는 8비트 RGBA로 내보낸다.
        """
        if self.channel == U16 and self.is_opaque_grey():
            image = Image.new("I;16", self.size)
            image.putdata([p[0] for p in self._data])
            return image
        data = bytes(
            int(v) for p in self._data for v in self.channel.rescale_pixel(p, U8)
        )
        return Image.frombytes("RGBA", self.size, data)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Bitmap):
            return NotImplemented
        return (
            self.size == other.size
            and self.channel == other.channel
            and self._data == other._data
        )

    def __repr__(self) -> str:
        return f"Bitmap({self._width}x{self._height}, {self.channel.name})"


def parse_channel(name: str) -> Channel:
    try:
        return CHANNELS[name]
    except KeyError:
        raise ValueError(f"unknown channel type {name!r}; expected one of {sorted(CHANNELS)}")

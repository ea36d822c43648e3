"""채널 저장 타입 모듈 — 8비트·16비트·부동소수 채널의 범위와 변환."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Channel:
    """채널 저장 타입. max_value는 완전 불투명/최대 밝기에 해당하는 값."""

    name: str
    max_value: float
    integral: bool

    def cast(self, value: float) -> int | float:
        """계산된 값을 [0, max_value]로 클램프한 뒤 저장 타입으로 변환한다.

        정수 채널은 가장 가까운 정수로 반올림한다 (round(), 동률은 짝수 쪽).
        """
        if value < 0:
            value = 0
        elif value > self.max_value:
            value = self.max_value
        if self.integral:
            return round(value)
        return float(value)

    def rescale(self, value: float, target: "Channel") -> int | float:
        """이 채널의 값을 다른 채널의 범위로 옮긴다."""
        if target == self:
            return value
        return target.cast(value / self.max_value * target.max_value)

    def rescale_pixel(self, pixel: tuple, target: "Channel") -> tuple:
        if target == self:
            return pixel
        return tuple(self.rescale(v, target) for v in pixel)


U8 = Channel("u8", 255, True)
U16 = Channel("u16", 65535, True)
F32 = Channel("f32", 1.0, False)
# Pillow "F" 모드는 L과 같은 0..255 범위의 실수를 쓴다
PILLOW_F = Channel("f", 255.0, False)

CHANNELS = {c.name: c for c in (U8, U16, F32)}

"""레이어 합성 모듈 — composite / extent와 오버레이 스택 합성."""

import logging

from .blend import CompositeOperator, blend_over, porter_duff
from .canvas import Canvas
from .surface import Surface

logger = logging.getLogger(__name__)


def composite(
    bottom: Surface,
    top: Surface,
    offset_x: int = 0,
    offset_y: int = 0,
    op: CompositeOperator = CompositeOperator.SRC_OVER,
) -> None:
    """top을 bottom의 (offset_x, offset_y)에 합성한다.

    bottom을 제자리에서 수정하며 크기는 바꾸지 않는다. top은 읽기만 한다.
    top이 덮지 않는 bottom 픽셀은 어떤 연산자든 그대로 남는다.
    """
    op = CompositeOperator.parse(op)
    bottom_w, bottom_h = bottom.size
    top_w, top_h = top.size

    if (
        offset_x >= bottom_w
        or offset_x + top_w < 0
        or offset_y >= bottom_h
        or offset_y + top_h < 0
    ):
        logger.debug("겹치는 영역 없음 (offset=%d,%d) → 건너뜀", offset_x, offset_y)
        return

    channel = bottom.channel
    top_channel = top.channel
    max_value = channel.max_value

    # top이 실제로 덮는 bottom 영역만 순회한다
    x0 = max(0, offset_x)
    y0 = max(0, offset_y)
    x1 = min(bottom_w, offset_x + top_w)
    y1 = min(bottom_h, offset_y + top_h)

    for y in range(y0, y1):
        rel_y = y - offset_y
        for x in range(x0, x1):
            rel_x = x - offset_x
            src = top_channel.rescale_pixel(top.to_rgba(top.get_pixel(rel_x, rel_y)), channel)
            dest = bottom.to_rgba(bottom.get_pixel(x, y))

            if op is CompositeOperator.BLEND:
                out = blend_over(dest, src, max_value)
                if out is None:
                    continue
            else:
                out = porter_duff(dest, src, op, max_value)
            bottom.put_pixel(x, y, bottom.from_rgba(out))


def extent(img: Surface, width: int, height: int, offset_x: int = 0, offset_y: int = 0) -> Surface:
    """img를 width x height 새 캔버스에 옮겨 담아 반환한다.

    배경은 img의 (0, 0) 픽셀로 채운다. offset은 새 캔버스 원점이 원본 기준
    어디에 오는지를 뜻하므로, 원본은 (-offset_x, -offset_y)에 놓인다.
    """
    if img.width < 1 or img.height < 1:
        raise ValueError(f"extent needs a non-empty source image, got {img.width}x{img.height}")
    if width < 0 or height < 0:
        raise ValueError(f"invalid extent size {width}x{height}")

    fill = img.get_pixel(0, 0)
    result = img.blank(width, height, fill)
    composite(result, img, -offset_x, -offset_y, CompositeOperator.COPY)
    return result


class LayerCompositor:
    """배경과 오버레이 레이어들을 합성하여 최종 프레임을 생성한다."""

    def __init__(self, width: int, height: int, mode: str = "RGBA",
                 color=(0, 0, 0, 255)):
        self._size = (width, height)
        self._mode = mode
        self._color = color

    @property
    def size(self) -> tuple[int, int]:
        return self._size

    def compose(
        self,
        background: Surface | None = None,
        overlays: list[tuple] | None = None,
    ) -> Canvas:
        """배경 위에 오버레이 레이어들을 차례로 합성한 새 캔버스를 반환한다.

        Args:
            background: 배경 이미지 (None이면 단색 배경). 좌상단 기준으로 놓는다.
            overlays: [(이미지, (x, y))] 또는 [(이미지, (x, y), 연산자)] 리스트.
                연산자를 생략하면 src-over.

        Returns:
            합성된 캔버스
        """
        canvas = Canvas.new(self._mode, self._size, self._color)

        # 배경 레이어
        if background is not None:
            composite(canvas, background, 0, 0, CompositeOperator.COPY)

        # 오버레이 레이어들
        for layer in overlays or []:
            if len(layer) == 2:
                surface, (x, y) = layer
                op = CompositeOperator.SRC_OVER
            else:
                surface, (x, y), op = layer
            logger.debug("레이어 %s 합성: (%d, %d) %s", surface.size, x, y, op)
            composite(canvas, surface, x, y, op)

        return canvas

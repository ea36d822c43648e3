"""픽셀 단위 합성 연산 모듈 — 알파 블렌딩과 Porter-Duff 연산자.

모든 함수는 같은 채널 범위(max_value)의 직선(straight) RGBA 튜플을 받는다.
"""

from enum import Enum


class CompositeOperator(Enum):
    BLEND = "blend"
    # Porter-Duff
    CLEAR = "clear"
    COPY = "copy"
    DEST = "dest"
    SRC_OVER = "src-over"
    DEST_OVER = "dest-over"
    SRC_IN = "src-in"
    DEST_IN = "dest-in"
    SRC_OUT = "src-out"
    DEST_OUT = "dest-out"
    SRC_ATOP = "src-atop"
    DEST_ATOP = "dest-atop"
    XOR = "xor"

    @classmethod
    def parse(cls, name: str) -> "CompositeOperator":
        """'SrcOver', 'src_over', 'src-over' 모두 허용한다."""
        if isinstance(name, cls):
            return name
        key = name.strip().lower().replace("_", "-")
        if key not in _BY_KEY:
            raise ValueError(f"unknown composite operator {name!r}")
        return _BY_KEY[key]

    @property
    def porter_duff(self) -> bool:
        return self is not CompositeOperator.BLEND


# 대소문자 구분 없는 이름 → 연산자 ("srcover" 형태도 허용)
_BY_KEY = {}
for _op in CompositeOperator:
    _BY_KEY[_op.value] = _op
    _BY_KEY[_op.value.replace("-", "")] = _op

# 연산자 → (fs, fd) 계수, 인자는 정규화된 (alpha_s, alpha_d)
FACTORS = {
    CompositeOperator.CLEAR: lambda a_s, a_d: (0.0, 0.0),
    CompositeOperator.COPY: lambda a_s, a_d: (1.0, 0.0),
    CompositeOperator.DEST: lambda a_s, a_d: (0.0, 1.0),
    CompositeOperator.SRC_OVER: lambda a_s, a_d: (1.0, 1.0 - a_s),
    CompositeOperator.DEST_OVER: lambda a_s, a_d: (1.0 - a_d, 1.0),
    CompositeOperator.SRC_IN: lambda a_s, a_d: (a_d, 0.0),
    CompositeOperator.DEST_IN: lambda a_s, a_d: (0.0, a_s),
    CompositeOperator.SRC_OUT: lambda a_s, a_d: (1.0 - a_d, 0.0),
    CompositeOperator.DEST_OUT: lambda a_s, a_d: (0.0, 1.0 - a_s),
    CompositeOperator.SRC_ATOP: lambda a_s, a_d: (a_d, 1.0 - a_s),
    CompositeOperator.DEST_ATOP: lambda a_s, a_d: (1.0 - a_d, a_s),
    CompositeOperator.XOR: lambda a_s, a_d: (1.0 - a_d, 1.0 - a_s),
}


def porter_duff(dest: tuple, src: tuple, op: CompositeOperator, max_value: float = 255) -> tuple:
    """src를 dest 위에 Porter-Duff 연산자로 합성한 (R, G, B, A) 실수 튜플을 반환한다.

    색 채널은 출력 알파로 나누지 않는다 (premultiplied 보정 없음).
    알파 = (as * fs + ad * fd) * max_value. 저장 타입 변환은 호출자가 한다.
    """
    try:
        factors = FACTORS[op]
    except KeyError:
        raise ValueError(f"{op} is not a Porter-Duff operator") from None

    rs, gs, bs, a_s = src
    rd, gd, bd, a_d = dest
    a_s = a_s / max_value
    a_d = a_d / max_value
    fs, fd = factors(a_s, a_d)

    return (
        a_s * rs * fs + a_d * rd * fd,
        a_s * gs * fs + a_d * gd * fd,
        a_s * bs * fs + a_d * bd * fd,
        (a_s * fs + a_d * fd) * max_value,
    )


def blend_over(dest: tuple, src: tuple, max_value: float = 255) -> tuple | None:
    """직선 알파 source-over 블렌딩.

    결과 (R, G, B, A) 실수 튜플을 반환한다. src가 완전 투명이거나 합성 알파가
    0이면 dest를 바꿀 필요가 없으므로 None을 반환한다.
    """
    fg_a = src[3]
    if fg_a == 0:
        return None
    if fg_a >= max_value:
        return tuple(src)

    bg_r, bg_g, bg_b, bg_a = (v / max_value for v in dest)
    fg_r, fg_g, fg_b, fg_a = (v / max_value for v in src)

    alpha = bg_a + fg_a - bg_a * fg_a
    if alpha == 0:
        return None

    def mix(fg, bg):
        return (fg * fg_a + bg * bg_a * (1.0 - fg_a)) / alpha * max_value

    return (
        mix(fg_r, bg_r),
        mix(fg_g, bg_g),
        mix(fg_b, bg_b),
        alpha * max_value,
    )

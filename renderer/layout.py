"""배치 계산 모듈 — gravity 이름으로 이미지 위치를 계산한다."""

# gravity → (가로 비율, 세로 비율)
GRAVITIES = {
    "northwest": (0, 0),
    "north": (1, 0),
    "northeast": (2, 0),
    "west": (0, 1),
    "center": (1, 1),
    "east": (2, 1),
    "southwest": (0, 2),
    "south": (1, 2),
    "southeast": (2, 2),
}


def _parse(gravity: str) -> tuple[int, int]:
    key = gravity.strip().lower().replace("-", "").replace("_", "")
    if key == "centre":
        key = "center"
    if key not in GRAVITIES:
        raise ValueError(f"unknown gravity {gravity!r}; expected one of {list(GRAVITIES)}")
    return GRAVITIES[key]


def place(gravity: str, inner: tuple[int, int], outer: tuple[int, int]) -> tuple[int, int]:
    """inner 크기 이미지를 outer 안에 gravity로 놓을 때 원점 좌표를 반환한다.

    inner가 더 크면 음수가 될 수 있다. 가운데 정렬은 내림으로 계산한다.
    """
    gx, gy = _parse(gravity)
    dx = outer[0] - inner[0]
    dy = outer[1] - inner[1]
    return (dx * gx // 2, dy * gy // 2)


def extent_offset(gravity: str, inner: tuple[int, int], outer: tuple[int, int]) -> tuple[int, int]:
    """extent()에 넘길 offset (새 캔버스 원점의 원본 기준 위치)."""
    x, y = place(gravity, inner, outer)
    return (-x, -y)

"""픽셀 연산 테스트 — Porter-Duff 계수표와 알파 블렌딩."""

import pytest

from renderer.blend import CompositeOperator, FACTORS, blend_over, porter_duff

SRC = (200, 100, 50, 255)
DEST = (10, 20, 30, 255)
ZERO = (0, 0, 0, 255)

# 양쪽이 불투명할 때 각 연산자의 결과
OPAQUE_RESULTS = {
    CompositeOperator.CLEAR: (0, 0, 0, 0),
    CompositeOperator.COPY: SRC,
    CompositeOperator.DEST: DEST,
    CompositeOperator.SRC_OVER: SRC,
    CompositeOperator.DEST_OVER: DEST,
    CompositeOperator.SRC_IN: SRC,
    CompositeOperator.DEST_IN: DEST,
    CompositeOperator.SRC_OUT: (0, 0, 0, 0),
    CompositeOperator.DEST_OUT: (0, 0, 0, 0),
    CompositeOperator.SRC_ATOP: SRC,
    CompositeOperator.DEST_ATOP: DEST,
    CompositeOperator.XOR: (0, 0, 0, 0),
}


def test_every_porter_duff_operator_has_factors():
    ops = {op for op in CompositeOperator if op.porter_duff}
    assert ops == set(FACTORS)
    assert len(ops) == 12


@pytest.mark.parametrize("op, expected", list(OPAQUE_RESULTS.items()), ids=lambda v: str(v))
def test_opaque_inputs(op, expected):
    assert porter_duff(DEST, SRC, op) == pytest.approx(expected)


def test_src_over_semi_transparent_source():
    out = porter_duff((0, 0, 255, 255), (255, 0, 0, 51), CompositeOperator.SRC_OVER)
    assert out == pytest.approx((51, 0, 204, 255))


def test_colour_is_not_divided_by_output_alpha():
    # 투명한 dest 위에 반투명 src를 copy하면 색이 알파만큼 줄어든다
    out = porter_duff((0, 0, 0, 0), (100, 100, 100, 51), CompositeOperator.COPY)
    assert out == pytest.approx((20, 20, 20, 51))


def test_src_in_uses_dest_alpha():
    out = porter_duff((0, 0, 0, 51), (255, 255, 255, 255), CompositeOperator.SRC_IN)
    assert out == pytest.approx((51, 51, 51, 51))


def test_xor_semi_transparent():
    out = porter_duff((0, 0, 255, 102), (255, 0, 0, 153), CompositeOperator.XOR)
    # as=0.6, ad=0.4 → fs=0.6, fd=0.4
    assert out == pytest.approx((0.6 * 255 * 0.6, 0, 0.4 * 255 * 0.4, (0.36 + 0.16) * 255))


def test_alpha_normalised_by_channel_max():
    out = porter_duff((0, 0, 0, 0), (65535, 0, 0, 65535), CompositeOperator.SRC_OVER, 65535)
    assert out == pytest.approx((65535, 0, 0, 65535))

    out = porter_duff((0.0, 0.0, 1.0, 1.0), (1.0, 0.0, 0.0, 0.5), CompositeOperator.SRC_OVER, 1.0)
    assert out == pytest.approx((0.5, 0.0, 0.5, 1.0))


def test_blend_is_not_a_porter_duff_operator():
    with pytest.raises(ValueError):
        porter_duff(DEST, SRC, CompositeOperator.BLEND)


@pytest.mark.parametrize("name", ["SrcOver", "src_over", "SRC-OVER", "src-over", " srcover "])
def test_parse_operator_names(name):
    assert CompositeOperator.parse(name) is CompositeOperator.SRC_OVER


def test_parse_operator_passthrough_and_unknown():
    assert CompositeOperator.parse(CompositeOperator.XOR) is CompositeOperator.XOR
    assert CompositeOperator.parse("DestAtop") is CompositeOperator.DEST_ATOP
    with pytest.raises(ValueError):
        CompositeOperator.parse("multiply")


def test_blend_transparent_source_leaves_dest():
    assert blend_over(DEST, (255, 255, 255, 0)) is None


def test_blend_opaque_source_replaces_dest():
    assert blend_over(DEST, SRC) == SRC


def test_blend_partial_source():
    out = blend_over(ZERO, (255, 255, 255, 51))
    assert out == pytest.approx((51, 51, 51, 255))


def test_blend_over_transparent_dest_keeps_source_colour():
    out = blend_over((0, 0, 0, 0), (200, 100, 50, 51))
    assert out == pytest.approx((200, 100, 50, 51))


def test_dest_with_semi_transparent_dest():
    out = porter_duff((100, 100, 100, 128), SRC, CompositeOperator.DEST)
    a_d = 128 / 255
    assert out == pytest.approx((a_d * 100, a_d * 100, a_d * 100, 128))

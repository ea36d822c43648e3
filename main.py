"""명령행 도구 — 이미지 파일 합성(composite)과 캔버스 확장(extent)."""

import argparse
import logging
import sys

from PIL import Image

from config import load_config
from renderer.bitmap import Bitmap, parse_channel
from renderer.blend import CompositeOperator
from renderer.canvas import Canvas
from renderer.layers import composite, extent
from renderer.layout import extent_offset

logger = logging.getLogger("pixelcomp")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Composite and extend images with Porter-Duff operators",
    )
    parser.add_argument("--config", default=None, help="path to config.json")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument(
        "--depth",
        default=None,
        choices=["u8", "u16", "f32"],
        help="process in an RGBA bitmap of this channel type instead of the file's own mode",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("composite", help="composite TOP onto BOTTOM")
    p.add_argument("bottom")
    p.add_argument("top")
    p.add_argument("output")
    p.add_argument("--op", default=None, help="operator name, e.g. src-over, copy, xor")
    p.add_argument("--offset", type=int, nargs=2, metavar=("X", "Y"), default=None)

    p = sub.add_parser("extent", help="place INPUT on a new canvas of the given size")
    p.add_argument("input")
    p.add_argument("output")
    p.add_argument("--size", type=int, nargs=2, metavar=("W", "H"), required=True)
    group = p.add_mutually_exclusive_group()
    group.add_argument("--offset", type=int, nargs=2, metavar=("X", "Y"), default=None)
    group.add_argument("--gravity", default=None)

    return parser.parse_args(argv)


def _open(path: str, depth: str | None):
    """이미지 파일을 읽어 합성 가능한 Surface로 감싼다."""
    with Image.open(path) as img:
        img.load()
        if depth:
            return Bitmap.from_image(img, parse_channel(depth))
        return Canvas(img.copy())


def _save(surface, path: str) -> None:
    image = surface.to_image() if isinstance(surface, Bitmap) else surface.image
    image.save(path)
    logger.info("저장: %s (%dx%d)", path, surface.width, surface.height)


def run(args, config: dict) -> None:
    if args.command == "composite":
        op = CompositeOperator.parse(args.op or config["composite"]["operator"])
        offset_x, offset_y = args.offset or config["composite"]["offset"]
        bottom = _open(args.bottom, args.depth)
        top = _open(args.top, args.depth)
        logger.info("합성: %s @ (%d, %d) %s", args.top, offset_x, offset_y, op.value)
        composite(bottom, top, offset_x, offset_y, op)
        _save(bottom, args.output)
    else:
        width, height = args.size
        img = _open(args.input, args.depth)
        if args.offset:
            offset_x, offset_y = args.offset
        else:
            gravity = args.gravity or config["extent"]["gravity"]
            offset_x, offset_y = extent_offset(gravity, img.size, (width, height))
        logger.info("확장: %dx%d → %dx%d (offset=%d,%d)",
                    img.width, img.height, width, height, offset_x, offset_y)
        _save(extent(img, width, height, offset_x, offset_y), args.output)


def main(argv=None) -> int:
    args = parse_args(argv)
    config = load_config(args.config)

    level = "DEBUG" if args.verbose else config["logging"]["level"]
    logging.basicConfig(level=level, format="%(asctime)s [%(name)s] %(message)s")

    try:
        run(args, config)
    except (OSError, ValueError) as e:
        logger.error("실패: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

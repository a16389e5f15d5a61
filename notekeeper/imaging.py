"""Recolouring of images."""

from typing import Tuple, Union

from PIL import Image, ImageColor

Color = Union[str, Tuple[int, ...]]


def _rgb(color: Color) -> Tuple[int, int, int]:
    if isinstance(color, str):
        values = ImageColor.getrgb(color)
    else:
        values = tuple(color)
    if len(values) < 3:
        raise ValueError(f"not a colour: {color!r}")
    r, g, b = values[:3]
    return int(r), int(g), int(b)


def replace_color(image: Image.Image, old_color: Color, new_color: Color) -> Image.Image:
    """Replace every pixel whose RGB equals ``old_color`` with ``new_color``.

    The alpha of each replaced pixel is kept. The image is changed in place
    and also returned.
    """
    if image.mode not in ("RGB", "RGBA"):
        raise ValueError(f"unsupported image mode {image.mode!r}")
    old = _rgb(old_color)
    new = _rgb(new_color)

    if image.mode == "RGBA":
        pixels = [
            (*new, pixel[3]) if pixel[:3] == old else pixel
            for pixel in image.getdata()
        ]
    else:
        pixels = [new if tuple(pixel) == old else pixel for pixel in image.getdata()]

    image.putdata(pixels)
    return image
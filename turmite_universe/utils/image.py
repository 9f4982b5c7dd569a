import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw
from typing import Tuple

# Type aliases for clarity
UInt32Array = npt.NDArray[np.uint32]
UInt8Array = npt.NDArray[np.uint8]


def unpack_rgba(buffer: UInt32Array) -> UInt8Array:
    """
    Split packed cell words (RGB in the top 24 bits) into an (H, W, 4) uint8
    array. The low byte holds the rule-state index, not an alpha value, so
    alpha is always written as 255.
    """
    words: UInt32Array = np.asarray(buffer, dtype=np.uint32)
    out: UInt8Array = np.empty(words.shape + (4,), dtype=np.uint8)
    out[..., 0] = (words >> 24) & 0xFF
    out[..., 1] = (words >> 16) & 0xFF
    out[..., 2] = (words >> 8) & 0xFF
    out[..., 3] = 255
    return out


def draw_heading_triangle_on_image(
    image: Image.Image, x0: int, y0: int, size: int, dx: int, dy: int
) -> Image.Image:
    """
    Draw one filled triangle pointing (dx, dy) inside the size x size square
    whose top-left corner is (x0, y0). The triangle's centroid sits on the
    square's center.
    """
    if size < 3 or (dx, dy) == (0, 0):
        return image

    draw = ImageDraw.Draw(image)
    cx, cy = x0 + size / 2.0, y0 + size / 2.0

    tri_height = max(2.0, size * 0.7)
    tri_half_base = max(1.0, size * 0.35)

    ux, uy = dx, dy  # toward the tip
    px, py = -uy, ux  # perpendicular (for base width)

    # centroid is 1/3 of the height from the base toward the tip
    tip_offset = (2.0 / 3.0) * tri_height
    base_offset = (1.0 / 3.0) * tri_height

    tip: Tuple[int, int] = (
        int(round(cx + ux * tip_offset)),
        int(round(cy + uy * tip_offset)),
    )
    base_x = cx - ux * base_offset
    base_y = cy - uy * base_offset
    p2 = (
        int(round(base_x + px * tri_half_base)),
        int(round(base_y + py * tri_half_base)),
    )
    p3 = (
        int(round(base_x - px * tri_half_base)),
        int(round(base_y - py * tri_half_base)),
    )

    draw.polygon([tip, p2, p3], fill=(255, 255, 255, 220), outline=(0, 0, 0, 220))
    return image

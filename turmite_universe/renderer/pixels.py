from PIL import Image

from turmite_universe.moves import HEADING_DELTAS
from turmite_universe.state import State
from turmite_universe.utils.image import (
    UInt32Array,
    draw_heading_triangle_on_image,
    unpack_rgba,
)


DEFAULT_SCALE = 1


def grid_to_image(buffer: UInt32Array, scale: int = DEFAULT_SCALE) -> Image.Image:
    """
    Convert a (H, W) packed cell buffer into an opaque RGBA image of
    (W * scale) x (H * scale) pixels.
    """
    if scale < 1:
        raise ValueError(f"scale must be at least 1, got {scale}")
    img = Image.fromarray(unpack_rgba(buffer))
    if scale == 1:
        return img
    height, width = buffer.shape
    return img.resize((width * scale, height * scale), Image.Resampling.NEAREST)


def render(
    state: State,
    scale: int = DEFAULT_SCALE,
    show_ants: bool = False,
) -> Image.Image:
    """
    Renders the simulation grid as a PIL Image, optionally marking each ant's
    cell with a triangle pointing along its heading.
    """
    img = grid_to_image(state.grid.buffer, scale)
    if show_ants:
        for ant in state.ants:
            dx, dy = HEADING_DELTAS[ant.heading]
            draw_heading_triangle_on_image(
                img, ant.x * scale, ant.y * scale, scale, dx, dy
            )
    return img

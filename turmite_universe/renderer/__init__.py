"""Rendering subpackage.

Turns the packed grid buffer into a Pillow image. The renderer only reads the
buffer (``Grid.buffer``); it never writes cells. Cell colors are already cached
in the buffer, so rendering is a channel split, an optional nearest-neighbour
upscale and optional ant markers.

See :mod:`turmite_universe.renderer.pixels`.
"""

from .pixels import DEFAULT_SCALE, grid_to_image, render

__all__ = ["DEFAULT_SCALE", "grid_to_image", "render"]

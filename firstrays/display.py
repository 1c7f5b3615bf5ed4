"""Matplotlib-based live preview window.

Every frame is a fresh evaluation of the pixel colour function over the whole
image; nothing is cached between frames. The loop ends when the window is
closed.

Example:
    >>> from firstrays.display import LiveView
    >>> view = LiveView(renderer.color_function(sphere, camera), 255, 255)
    >>> view.run()
"""

from __future__ import annotations

import sys
from typing import Optional

import numpy as np
import numpy.typing as npt

from .renderer import PixelColor


class LiveView:
    """Window that re-renders the scene on every redraw."""

    def __init__(
        self,
        pixel_color: PixelColor,
        width: int,
        height: int,
        title: str = "Raytracing in one weekend",
    ) -> None:
        self.pixel_color = pixel_color
        self.width = width
        self.height = height
        self.title = title
        self.closed = False
        self.frames_drawn = 0

    def draw_frame(self) -> npt.NDArray[np.uint8]:
        """Fill a new RGBA frame buffer of shape (height, width, 4).

        The buffer is walked linearly; pixel i is column i % width of
        row i // width and is coloured with pixel_color(column, row).
        """
        frame = np.zeros((self.height, self.width, 4), dtype=np.uint8)
        pixels = frame.reshape(-1, 4)

        for i in range(self.width * self.height):
            x = i % self.width
            y = i // self.width
            pixels[i] = self.pixel_color(x, y)

        self.frames_drawn += 1
        return frame

    def _on_close(self, event) -> None:
        print("The close button was pressed; stopping", file=sys.stderr)
        self.closed = True

    def run(self, interval: float = 0.001, max_frames: Optional[int] = None) -> None:
        """Show the window and redraw until it is closed.

        Args:
            interval: Seconds to yield to the GUI event loop between frames.
            max_frames: Stop after this many frames (None runs until closed).
        """
        import matplotlib.pyplot as plt

        fig, ax = plt.subplots(1, 1)
        fig.canvas.manager.set_window_title(self.title)
        fig.canvas.mpl_connect("close_event", self._on_close)
        ax.axis("off")

        image = ax.imshow(self.draw_frame())
        plt.tight_layout()

        while not self.closed:
            if max_frames is not None and self.frames_drawn >= max_frames:
                break
            plt.pause(interval)
            if self.closed:
                break
            image.set_data(self.draw_frame())

        plt.close(fig)

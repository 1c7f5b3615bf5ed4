"""Tests for the live preview window."""

import pytest
import numpy as np
import matplotlib

matplotlib.use("Agg")

from firstrays.display import LiveView


def coordinate_color(x, y):
    return (x, y, 0, 255)


class TestDrawFrame:
    """Test frame buffer filling."""

    def test_shape(self):
        frame = LiveView(coordinate_color, 5, 3).draw_frame()
        assert frame.shape == (3, 5, 4)
        assert frame.dtype == np.uint8

    def test_column_first_coordinates(self):
        frame = LiveView(coordinate_color, 5, 3).draw_frame()
        # frame[row, column] holds pixel_color(column, row)
        assert frame[2, 4].tolist() == [4, 2, 0, 255]
        assert frame[0, 3].tolist() == [3, 0, 0, 255]

    def test_every_frame_recomputed(self):
        calls = []

        def counting_color(x, y):
            calls.append((x, y))
            return (0, 0, 0, 255)

        view = LiveView(counting_color, 4, 2)
        view.draw_frame()
        view.draw_frame()
        assert len(calls) == 2 * 4 * 2
        assert view.frames_drawn == 2

    def test_frames_are_independent_buffers(self):
        view = LiveView(coordinate_color, 2, 2)
        first = view.draw_frame()
        second = view.draw_frame()
        assert first is not second
        assert np.array_equal(first, second)


class TestRun:
    """Test the redraw loop."""

    def test_stops_after_max_frames(self):
        view = LiveView(coordinate_color, 4, 4)
        view.run(interval=0.001, max_frames=3)
        assert view.frames_drawn == 3

    def test_close_stops_loop(self, capsys):
        view = LiveView(coordinate_color, 4, 4)
        view._on_close(None)
        assert view.closed
        assert "close button" in capsys.readouterr().err

        view.run(interval=0.001)
        assert view.frames_drawn == 1

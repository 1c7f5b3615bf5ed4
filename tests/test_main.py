"""Tests for the command line entry point."""

import pytest

from main import main, build_parser


@pytest.fixture
def small_scene(tmp_path):
    path = tmp_path / "scene.yaml"
    path.write_text("render:\n  width: 4\n  height: 3\n")
    return str(path)


class TestArguments:
    """Test argument parsing."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert not args.binary
        assert not args.window
        assert not args.gradient
        assert args.output is None
        assert args.scene is None

    @pytest.mark.parametrize("flag, value", [
        ('--width', '-3'),
        ('--width', '0'),
        ('--height', '0'),
        ('--height', 'tall'),
    ])
    def test_rejects_bad_size(self, flag, value, capsys):
        with pytest.raises(SystemExit) as exc:
            main(['--gradient', flag, value])
        assert exc.value.code == 2
        assert flag in capsys.readouterr().err

    def test_short_flags(self):
        args = build_parser().parse_args(['-b', '-w'])
        assert args.binary
        assert args.window


class TestPPMOutput:
    """Test PPM written to stdout."""

    def test_plain_ppm(self, small_scene, capsysbinary):
        assert main(['--scene', small_scene]) == 0
        lines = capsysbinary.readouterr().out.decode('ascii').splitlines()
        assert lines[:3] == ["P3", "4 3", "255"]
        assert len(lines) == 3 + 4 * 3
        # (0, 0) misses the sphere and keeps the gradient colour
        assert lines[3] == "0 0 0"

    def test_binary_ppm(self, small_scene, capsysbinary):
        assert main(['-b', '--scene', small_scene]) == 0
        out = capsysbinary.readouterr().out
        header = b"P6\n4 3\n255\n"
        assert out.startswith(header)
        assert len(out) == len(header) + 4 * 3 * 3

    def test_gradient_only(self, small_scene, capsysbinary):
        assert main(['--gradient', '--scene', small_scene]) == 0
        lines = capsysbinary.readouterr().out.decode('ascii').splitlines()
        # Row 2 of 3, column 3 of 4: 2*255//4, 3*255//3
        assert lines[-1] == "127 255 0"

    def test_size_override(self, capsysbinary):
        assert main(['--gradient', '--width', '2', '--height', '2']) == 0
        lines = capsysbinary.readouterr().out.decode('ascii').splitlines()
        assert lines[:3] == ["P3", "2 2", "255"]
        assert len(lines) == 3 + 4

    def test_single_override_keeps_other_size(self, small_scene, capsysbinary):
        assert main(['--gradient', '--scene', small_scene, '--height', '1']) == 0
        lines = capsysbinary.readouterr().out.decode('ascii').splitlines()
        assert lines[:3] == ["P3", "4 1", "255"]
        assert len(lines) == 3 + 4

    def test_status_goes_to_stderr(self, small_scene, capsysbinary):
        main(['--scene', small_scene])
        captured = capsysbinary.readouterr()
        assert b"Resolution: 4x3" in captured.err
        assert b"Resolution" not in captured.out


class TestFileOutput:
    """Test saving through Pillow."""

    def test_png(self, small_scene, tmp_path, capsysbinary):
        from PIL import Image

        output = tmp_path / "renders" / "out.png"
        assert main(['--scene', small_scene, '--output', str(output)]) == 0
        assert capsysbinary.readouterr().out == b""

        with Image.open(output) as saved:
            assert saved.size == (4, 3)


class TestErrors:
    """Test error reporting."""

    def test_missing_scene(self, tmp_path, capsys):
        assert main(['--scene', str(tmp_path / "missing.yaml")]) == 1
        assert "not found" in capsys.readouterr().err

    def test_bad_scene(self, tmp_path, capsys):
        path = tmp_path / "bad.yaml"
        path.write_text("sphere:\n  radius: huge\n")
        assert main(['--scene', str(path)]) == 1
        assert "Error" in capsys.readouterr().err

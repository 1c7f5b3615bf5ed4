#!/usr/bin/env python3
"""
firstrays - first rays of a Python ray tracer

Main entry point for rendering the sphere scene.
"""

import argparse
import sys
import time
from pathlib import Path

from firstrays.camera import Camera
from firstrays.renderer import Renderer, RenderSettings
from firstrays.scene_parser import SceneParseError, load_scene, default_scene


def log(message: str) -> None:
    """Status output; stdout is reserved for image data."""
    print(message, file=sys.stderr)


def positive_int(value: str) -> int:
    """argparse type for image dimensions."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='firstrays - trace one ray per pixel against a sphere',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python main.py > sphere.ppm
  python main.py -b > sphere.ppm
  python main.py -w
  python main.py --scene scene.yaml --output render.png
        '''
    )

    parser.add_argument('-b', '--binary', action='store_true',
                        help='Write raw P6 instead of plain P3 PPM')
    parser.add_argument('-w', '--window', action='store_true',
                        help='Show a live preview window instead of writing PPM')
    parser.add_argument('--output', type=str, default=None,
                        help='Save to an image file (format from extension) instead of stdout')
    parser.add_argument('--scene', type=str, default=None,
                        help='Scene file (YAML or JSON); built-in scene if omitted')
    parser.add_argument('--width', type=positive_int, default=None, help='Override image width')
    parser.add_argument('--height', type=positive_int, default=None, help='Override image height')
    parser.add_argument('--gradient', action='store_true',
                        help='Skip tracing and output only the background gradient')
    return parser


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        if args.scene:
            sphere, camera, settings = load_scene(args.scene)
        else:
            sphere, camera, settings = default_scene()
    except SceneParseError as e:
        log(f"Error: {e}")
        return 1

    if args.width is not None or args.height is not None:
        settings = RenderSettings(
            width=args.width if args.width is not None else settings.width,
            height=args.height if args.height is not None else settings.height,
            scale=settings.scale
        )
        camera = Camera(
            camera.position, camera.direction, camera.height,
            image_width=settings.width, image_height=settings.height
        )

    renderer = Renderer(settings)
    if args.gradient:
        pixel_color = renderer.gradient_color
    else:
        pixel_color = renderer.color_function(sphere, camera)

    if args.window:
        from firstrays.display import LiveView
        LiveView(pixel_color, settings.width, settings.height).run()
        return 0

    log(f"Resolution: {settings.width}x{settings.height}")
    start_time = time.time()

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        image = renderer.render_pixels(pixel_color)
        renderer.save_image(image, str(output_path))
        log(f"Saved to: {args.output}")
    else:
        stream = sys.stdout.buffer
        renderer.write_ppm(stream, pixel_color, binary=args.binary)
        stream.flush()

    log(f"Render completed in {time.time() - start_time:.2f} seconds")
    return 0


if __name__ == '__main__':
    sys.exit(main())

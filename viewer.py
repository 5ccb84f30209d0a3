import os
import sys

_VERBOSE_FLAGS = {"--verbose", "-v"}
_cli_verbose = any(arg in _VERBOSE_FLAGS for arg in sys.argv[1:])
_suppress_messages = (not _cli_verbose) and os.environ.get("TF_CPP_MIN_LOG_LEVEL") is None

if _suppress_messages:
    os.environ["TF_CPP_MIN_LOG_LEVEL"] = "3"

from argparse import ArgumentParser

from mandelbrot_viewer import RenderConfig, Viewport, benchmark_sizes, run_benchmark, save_image
from mandelbrot_viewer.benchmark import DEFAULT_CSV
from mandelbrot_viewer.config import (
    DEFAULT_HEIGHT,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_WIDTH,
    DEFAULT_ZOOM_FACTOR,
)
from mandelbrot_viewer.export import DEFAULT_OUTPUT
from mandelbrot_viewer.logs import log, set_verbose
from mandelbrot_viewer.renderer import timed_render


def build_parser():
    parser = ArgumentParser(description="Render and explore the Mandelbrot set.")

    parser.add_argument('--nongui', action='store_true',
                        help='render once without opening a window and save the image')

    parser.add_argument('--test', action='store_true',
                        help='run the render-time benchmark sweep, write the CSV and exit')

    parser.add_argument('--max-iterations', type=int,
                        dest='max_iterations', help='maximum number of escape-time iterations per pixel',
                        metavar='MAX_ITERATIONS', default=DEFAULT_MAX_ITERATIONS)

    parser.add_argument('--width', type=int,
                        dest='width', help='width of the rendered image in pixels',
                        metavar='WIDTH', default=DEFAULT_WIDTH)

    parser.add_argument('--height', type=int,
                        dest='height', help='height of the rendered image in pixels',
                        metavar='HEIGHT', default=DEFAULT_HEIGHT)

    parser.add_argument('--zoom-factor', type=float,
                        dest='zoom_factor', help='window scale applied by the zoom-in key; zoom-out uses its inverse',
                        metavar='ZOOM_FACTOR', default=DEFAULT_ZOOM_FACTOR)

    parser.add_argument('--output', type=str, default=DEFAULT_OUTPUT,
                        help='image written by the save key and by --nongui')

    parser.add_argument('--format', type=str,
                        dest='format', help='image file format. Any format supported by Pillow. Default: "png".',
                        metavar='FORMAT', default='png')

    parser.add_argument('--csv', type=str, default=DEFAULT_CSV,
                        help='results file written by --test')

    parser.add_argument('--bench-start', type=int, default=1000, help='first benchmark size')
    parser.add_argument('--bench-stop', type=int, default=5000, help='last benchmark size (inclusive)')
    parser.add_argument('--bench-step', type=int, default=1000, help='size increment between benchmark runs')

    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable verbose logging, including render times and TensorFlow diagnostics.')

    return parser


def resolve_config(opt, parser: ArgumentParser) -> RenderConfig:
    if opt.max_iterations <= 0:
        parser.error("--max-iterations must be positive.")
    if opt.width <= 0 or opt.height <= 0:
        parser.error("--width and --height must be positive.")
    if opt.zoom_factor <= 0:
        parser.error("--zoom-factor must be positive.")
    if opt.bench_step <= 0:
        parser.error("--bench-step must be positive.")

    image_format = (opt.format or "png").lower().lstrip(".") or "png"
    return RenderConfig(
        max_iterations=opt.max_iterations,
        width=opt.width,
        height=opt.height,
        zoom_factor=opt.zoom_factor,
        output=opt.output,
        image_format=image_format,
    )


def run_headless(config: RenderConfig) -> bool:
    result = timed_render(Viewport(), config.width, config.height, config.max_iterations)
    return save_image(result.pixels, config.output, config.image_format)


def main(argv=None):
    parser = build_parser()
    opt = parser.parse_args(argv)
    set_verbose(opt.verbose)
    config = resolve_config(opt, parser)

    if opt.test:
        sizes = benchmark_sizes(opt.bench_start, opt.bench_stop, opt.bench_step)
        run_benchmark(sizes, config.max_iterations, opt.csv)
        log(f"Performance tests completed. Results saved to {opt.csv}", "status")
        return 0

    if opt.nongui:
        run_headless(config)
        return 0

    from mandelbrot_viewer.window import ViewerWindow

    window = ViewerWindow(config)
    window.show()
    return 0


if __name__ == '__main__':
    sys.exit(main())

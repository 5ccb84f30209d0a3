"""Render-time sweep over square image sizes."""

from __future__ import annotations

import csv
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from .config import DEFAULT_MAX_ITERATIONS
from .logs import log
from .renderer import render
from .viewport import Viewport

CSV_HEADER = ("width", "height", "sequential")
DEFAULT_CSV = "mandelbrot_results.csv"


@dataclass(frozen=True)
class BenchmarkRow:
    width: int
    height: int
    sequential: int


def benchmark_sizes(start: int = 1000, stop: int = 5000, step: int = 1000) -> Iterator[int]:
    """Yield square sizes from ``start`` to ``stop`` inclusive."""

    if step <= 0:
        raise ValueError("step must be positive.")
    size = start
    while size <= stop:
        yield size
        size += step


def time_render(width: int, height: int, max_iterations: int = DEFAULT_MAX_ITERATIONS) -> int:
    """Render the default view once and return the wall-clock time in milliseconds."""

    viewport = Viewport()
    start = time.perf_counter()
    render(viewport, width, height, max_iterations)
    return int((time.perf_counter() - start) * 1000)


def write_results(rows: Iterable[BenchmarkRow], csv_path) -> None:
    with open(csv_path, "w", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(CSV_HEADER)
        for row in rows:
            writer.writerow((row.width, row.height, row.sequential))


def run_benchmark(
    sizes: Iterable[int],
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    csv_path=DEFAULT_CSV,
) -> list[BenchmarkRow]:
    rows: list[BenchmarkRow] = []
    for size in sizes:
        elapsed = time_render(size, size, max_iterations)
        log(f"Rendered {size}x{size} in {elapsed} ms", "status")
        rows.append(BenchmarkRow(width=size, height=size, sequential=elapsed))

    try:
        write_results(rows, Path(csv_path).expanduser())
    except OSError as exc:
        log(f"Error writing CSV file {csv_path}: {exc}", "error")
    return rows

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

EXAMPLES_ROOT = Path("examples/cli-options")
BASE_ARGS = ["--nongui", "--width", "160", "--height", "120"]


@dataclass
class Expected:
    path: Path


@dataclass
class Example:
    name: str
    args: list[str]
    expected: list[Expected]
    clean: list[Path] | None = None

    def full_args(self) -> list[str]:
        return ["python", "viewer.py", *self.args]


EXAMPLES: list[Example] = [
    Example(
        name="nongui",
        args=[*BASE_ARGS, "--output", str(EXAMPLES_ROOT / "nongui" / "mandelbrot.png")],
        expected=[Expected(EXAMPLES_ROOT / "nongui" / "mandelbrot.png")],
        clean=[EXAMPLES_ROOT / "nongui"],
    ),
    Example(
        name="max-iterations",
        args=[*BASE_ARGS, "--max-iterations", "50", "--output", str(EXAMPLES_ROOT / "max-iterations" / "fifty.png")],
        expected=[Expected(EXAMPLES_ROOT / "max-iterations" / "fifty.png")],
        clean=[EXAMPLES_ROOT / "max-iterations"],
    ),
    Example(
        name="size",
        args=["--nongui", "--width", "320", "--height", "90", "--output", str(EXAMPLES_ROOT / "size" / "wide.png")],
        expected=[Expected(EXAMPLES_ROOT / "size" / "wide.png")],
        clean=[EXAMPLES_ROOT / "size"],
    ),
    Example(
        name="format",
        args=[*BASE_ARGS, "--format", "webp", "--output", str(EXAMPLES_ROOT / "format" / "custom.webp")],
        expected=[Expected(EXAMPLES_ROOT / "format" / "custom.webp")],
        clean=[EXAMPLES_ROOT / "format"],
    ),
    Example(
        name="test",
        args=[
            "--test",
            "--bench-start",
            "100",
            "--bench-stop",
            "300",
            "--bench-step",
            "100",
            "--csv",
            str(EXAMPLES_ROOT / "test" / "mandelbrot_results.csv"),
        ],
        expected=[Expected(EXAMPLES_ROOT / "test" / "mandelbrot_results.csv")],
        clean=[EXAMPLES_ROOT / "test"],
    ),
    Example(
        name="verbose",
        args=[*BASE_ARGS, "--verbose", "--output", str(EXAMPLES_ROOT / "verbose" / "diagnostic.png")],
        expected=[Expected(EXAMPLES_ROOT / "verbose" / "diagnostic.png")],
        clean=[EXAMPLES_ROOT / "verbose"],
    ),
]


def _ensure_clean(paths: Iterable[Path]) -> None:
    for path in paths:
        if path.exists():
            if path.is_dir():
                shutil.rmtree(path)
            else:
                path.unlink()


def _prepare(example: Example) -> None:
    _ensure_clean(example.clean or [])
    for expected in example.expected:
        expected.path.parent.mkdir(parents=True, exist_ok=True)


def _verify(example: Example) -> None:
    for expected in example.expected:
        if not expected.path.is_file():
            raise RuntimeError(f"Expected file {expected.path} was not created")


def main() -> None:
    EXAMPLES_ROOT.mkdir(parents=True, exist_ok=True)
    for example in EXAMPLES:
        print(f"\n[cli-example] {example.name}")
        _prepare(example)
        subprocess.run(example.full_args(), check=True)
        _verify(example)
    print("\nAll CLI examples generated successfully.")


if __name__ == "__main__":
    main()

"""Monte Carlo estimate of the integral of cos^3 over the hemisphere."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .vec3 import PI, random_double

DEFAULT_SAMPLES = 1_000_000


def cos_cubed(r2: float) -> float:
    """Return cos^3(theta) for the direction whose z coordinate is ``1 - r2``."""
    cos_theta = 1 - r2
    return cos_theta * cos_theta * cos_theta


def uniform_pdf() -> float:
    """Return the uniform hemisphere density, 1 / (2 pi)."""
    return 1.0 / (2.0 * PI)


def estimate_cos_cubed(samples: int = DEFAULT_SAMPLES) -> float:
    """Estimate the hemisphere integral of cos^3 (exactly pi / 2) from ``samples`` draws."""
    if samples <= 0:
        raise ValueError("samples must be positive")
    total = sum(cos_cubed(random_double()) / uniform_pdf() for _ in range(samples))
    return total / samples


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Estimate the integral of cos^3 over the hemisphere."
    )
    parser.add_argument(
        "-n", "--samples", type=int, default=DEFAULT_SAMPLES, help="number of samples"
    )
    args = parser.parse_args(argv)
    if args.samples <= 0:
        parser.error("samples must be positive")

    print(f"PI/2 = {PI / 2.0:.12f}")
    print(f"Estimate = {estimate_cos_cubed(args.samples):.12f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Example pipeline: sample a seeded point set and print the pruned skeleton."""

import numpy as np

from voronoi_skeleton import PipelineOptions, build_voronoi, format_line


def main() -> None:
    options = PipelineOptions(point_count=6, sampling="rect", collision="cross")
    result = build_voronoi(options, rng=np.random.default_rng(123))
    print("Points:", ", ".join(f"({p.x}, {p.y})" for p in result.points))
    for stage, count in result.stats.items():
        print(f"{stage}: {count}")
    for line in result.lines:
        print(format_line(line))


if __name__ == "__main__":
    main()

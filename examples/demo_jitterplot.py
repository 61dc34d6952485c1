"""Demo: jitter plot of three conditions coloured by day, with medians and a legend."""

import numpy as np

from jitterplot import jitterplot
from jitterplot.pipeline.plotting import build_layout
from jitterplot.pipeline.stats import jitter_report
from jitterplot.utils.logging import configure_logging


def main() -> None:
    configure_logging(level="DEBUG")

    rng = np.random.default_rng(0)
    groups = ["ctrl"] * 40 + ["drug"] * 40 + ["wash"] * 40
    values = np.concatenate([
        rng.normal(0.0, 0.8, 40),
        rng.normal(1.0, 0.8, 40),
        rng.normal(0.4, 0.8, 40),
    ])
    days = [f"day{i % 3 + 1}" for i in range(len(values))]

    options = dict(
        colors=[[0.85, 0.33, 0.1], [0.0, 0.45, 0.74], [0.47, 0.67, 0.19]],
        colorgroup=days,
        show_legend=True,
        display_order=["wash", "ctrl", "drug"],
        title="Response by condition",
        x_label="condition",
        y_label="response",
    )
    print(jitter_report(build_layout(values, groups, **options)))

    surface = jitterplot(values, groups, **options)
    surface.figure.show()


if __name__ == "__main__":
    main()

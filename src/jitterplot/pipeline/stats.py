"""
Summary statistics for a jitter plot layout — pure pandas/numpy.

Computes a per-category stats table and a ragged value table for the samples
drawn by a JitterLayout, and formats both as a TSV report suitable for
copy/paste into a spreadsheet. Categories follow the plot's display order.
Descriptive statistics only.
"""

from __future__ import annotations

from typing import Dict, List

import numpy as np
import pandas as pd

from jitterplot.pipeline.plotting import JitterLayout

STATS_COLUMNS = ["count", "min", "max", "mean", "median", "std", "sem", "cv"]


def layout_frame(layout: JitterLayout) -> pd.DataFrame:
    """One row per drawn sample: group, colour label, value, x position."""
    return pd.DataFrame({
        "group": [s.group for s in layout.samples],
        "color": [s.color_label for s in layout.samples],
        "y": [s.value for s in layout.samples],
        "x": [spec.x_position for spec in layout.specs],
    })


def category_stats_table(layout: JitterLayout, *, cv_epsilon: float = 1e-10) -> pd.DataFrame:
    """
    Stats per group category, in display order.

    Stats: count, min, max, mean, median, std, sem, cv. std and sem use ddof=1.
    cv = std/mean with NaN when |mean| < cv_epsilon. NaN values are skipped.
    """
    tmp = layout_frame(layout)
    if len(tmp) == 0:
        return pd.DataFrame(columns=["group"] + STATS_COLUMNS)

    grp = tmp.groupby("group", sort=False)["y"]
    mean_ = grp.mean()
    std_ = grp.std(ddof=1)
    stats_df = pd.DataFrame({
        "count": grp.count(),
        "min": grp.min(),
        "max": grp.max(),
        "mean": mean_,
        "median": grp.median(),
        "std": std_,
        "sem": grp.sem(ddof=1),
        "cv": (std_ / mean_).where(np.abs(mean_) >= cv_epsilon, np.nan),
    })
    stats_df = stats_df.reindex(layout.category_labels)
    stats_df.insert(0, "group", stats_df.index)
    return stats_df.reset_index(drop=True)


def values_per_category(layout: JitterLayout) -> Dict[str, List[float]]:
    """Map each group label -> its values, in display order."""
    result: Dict[str, List[float]] = {}
    for cat in layout.categories:
        result[cat.label] = [layout.samples[p].value for p in cat.sample_positions]
    return result


def dict_of_lists_to_tsv(data: Dict[str, List[float]]) -> str:
    """
    Convert dict[str, list[float]] to a TSV string with columns = keys,
    padding shorter columns with "".

    Input:
        {"A": [1.1, 2.2, 3.3], "B": [4.4]}

    Output:
        "A\\tB\\n1.1\\t4.4\\n2.2\\t\\n3.3\\t\\n"
    """
    if not data:
        return ""
    max_len = max(len(values) for values in data.values())
    padded = {key: list(values) + [""] * (max_len - len(values)) for key, values in data.items()}
    return pd.DataFrame(padded).to_csv(sep="\t", index=False)


def jitter_report(layout: JitterLayout, *, cv_epsilon: float = 1e-10) -> str:
    """Multi-section TSV report: parameters, stats table, ragged values table."""
    opts = layout.options
    lines: list[str] = []

    lines.append("# Parameters")
    lines.append(f"categories\t{layout.category_labels}")
    lines.append(f"color_categories\t{layout.color_mapping.labels}")
    lines.append(f"jitter_width\t{opts.jitter_width}")
    lines.append(f"jitter_method\t{opts.jitter_method}")
    lines.append(f"seed\t{opts.seed}")
    lines.append(f"show_median\t{opts.show_median}")
    lines.append("")

    lines.append("# Stats (one row per category)")
    stats_df = category_stats_table(layout, cv_epsilon=cv_epsilon)
    lines.append(stats_df.to_csv(sep="\t", index=False) if len(stats_df) > 0 else "(no data)")
    lines.append("")

    lines.append("# Values (ragged, one col per category)")
    lines.append(dict_of_lists_to_tsv(values_per_category(layout)))
    return "\n".join(lines)

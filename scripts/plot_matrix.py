#!/usr/bin/env python3
"""Plot the Needleman-Wunsch score matrix with the traceback path overlaid."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # pylint: disable=C0413

# Ensure repo importability
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from nwalign.algorithms import align  # pylint: disable=C0413
from nwalign.types import AlignmentResult  # pylint: disable=C0413
from nwalign.utils import load_request  # pylint: disable=C0413

from scripts.constants import (  # pylint: disable=C0413
    MATRIX_FIGURES_FOLDER,
    PATH_COLOR,
    PLOT_CMAP,
    PLOT_DPI,
    PLOT_TITLE_FONTSIZE,
)


def plot_score_matrix(
    alignment: AlignmentResult,
    seq1: str,
    seq2: str,
    out_path: Path,
    dpi: int = PLOT_DPI,
    fmt: str = "png",
    annotate: bool = True,
) -> Path:
    """Heatmap of the score matrix; rows follow seq1, columns follow seq2."""
    mat = alignment.matrix
    rows, cols = mat.shape

    fig, ax = plt.subplots(1, 1, figsize=(max(4, cols * 0.5 + 2), max(3, rows * 0.5 + 1)))
    im = ax.imshow(mat, origin="upper", aspect="auto", cmap=PLOT_CMAP)
    fig.colorbar(im, ax=ax, fraction=0.046, pad=0.04, label="score")

    ax.set_xticks(range(cols))
    ax.set_xticklabels(["-"] + list(seq2))
    ax.set_yticks(range(rows))
    ax.set_yticklabels(["-"] + list(seq1))
    ax.set_xlabel("seq2")
    ax.set_ylabel("seq1")
    ax.set_title(out_path.stem, fontsize=PLOT_TITLE_FONTSIZE)

    if annotate:
        for i in range(rows):
            for j in range(cols):
                ax.text(j, i, str(int(mat[i, j])), ha="center", va="center", fontsize=7, color="white")

    path = alignment.path()
    ax.plot(
        [j for _, j in path],
        [i for i, _ in path],
        color=PATH_COLOR,
        linewidth=2,
        marker="o",
        markersize=4,
        label="traceback",
    )
    ax.legend(loc="upper right")
    plt.tight_layout()

    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path = out_path.with_suffix(f".{fmt}")
    plt.savefig(out_path, dpi=dpi)
    plt.close(fig)
    return out_path


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Plot the score matrix and traceback path for an input record."
    )
    parser.add_argument("input", type=Path, help="Input record (JSON or YAML).")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output image path (default: results/figures/<input stem>).",
    )
    parser.add_argument("--fmt", type=str, default="png", help="Image format.")
    parser.add_argument(
        "--no-annotate",
        action="store_true",
        help="Do not print cell values on the heatmap.",
    )
    args = parser.parse_args()

    if not args.input.exists():
        raise FileNotFoundError(f"Input file not found: {args.input}")

    request = load_request(args.input)
    alignment = align(request.seq1, request.seq2, request.scoring)
    out_path = args.output or MATRIX_FIGURES_FOLDER / args.input.stem

    written = plot_score_matrix(
        alignment,
        request.seq1,
        request.seq2,
        out_path,
        fmt=args.fmt,
        annotate=not args.no_annotate,
    )
    print(f"Wrote score matrix plot to {written}")


if __name__ == "__main__":
    main()

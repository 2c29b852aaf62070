"""Constants for the project."""

from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent

# ============================================================================
# Results directories
# ============================================================================
RESULTS_FOLDER = PROJECT_ROOT / "results"
MATRIX_FIGURES_FOLDER = RESULTS_FOLDER / "figures"

# ============================================================================
# Plot styling
# ============================================================================
PLOT_DPI = 150
PLOT_CMAP = "viridis"
PATH_COLOR = "#e4572e"
PLOT_TITLE_FONTSIZE = 14

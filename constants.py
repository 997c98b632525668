from __future__ import annotations

# Chart surface (logical units). The inset plot area is what's left after margins.
CHART_WIDTH: int = 800
CHART_HEIGHT: int = 400
# Room around the chart page when it is embedded in the app.
CHART_FRAME_PADDING: int = 20
MARGIN: dict[str, int] = {"top": 50, "right": 30, "bottom": 50, "left": 60}
INNER_WIDTH: int = CHART_WIDTH - MARGIN["left"] - MARGIN["right"]
INNER_HEIGHT: int = CHART_HEIGHT - MARGIN["top"] - MARGIN["bottom"]

HOURS_DOMAIN: tuple[float, float] = (0.0, 24.0)
HOUR_TICK_STEP: int = 2
Y_PADDING: float = 1.0

LINE_WIDTH: int = 2
MARKER_RADIUS: int = 4

# Cohort keys in display order, with their legend label and colour.
COHORT_KEYS: tuple[str, ...] = ("femEst", "femNonEst", "male")
COHORT_LABELS: dict[str, str] = {
    "femEst": "Female (Estrus)",
    "femNonEst": "Female (Non-Estrus)",
    "male": "Male",
}
COHORT_COLORS: dict[str, str] = {
    "femEst": "red",
    "femNonEst": "blue",
    "male": "green",
}

# Source CSVs per metric, in cohort order.
TEMPERATURE_FILES: tuple[str, ...] = (
    "AvgFemTempEst.csv",
    "AvgFemTempNonEst.csv",
    "AvgMaleTemp.csv",
)
ACTIVITY_FILES: tuple[str, ...] = (
    "AvgFemActEst.csv",
    "AvgFemActNonEst.csv",
    "AvgMaleAct.csv",
)

# Legend block: offset from the inset's right edge, swatch size, row spacing.
LEGEND_OFFSET: int = 150
LEGEND_SWATCH: int = 10
LEGEND_ROW_SPACING: int = 20
LEGEND_LABEL_GAP: int = 15

X_AXIS_LABEL = "Hour of the Day"

# Floating tooltip behaviour.
TOOLTIP_OPACITY: float = 0.9
TOOLTIP_FADE_IN_MS: int = 200
TOOLTIP_FADE_OUT_MS: int = 500
TOOLTIP_OFFSET: tuple[int, int] = (5, -28)

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

import plotly.graph_objects as go

from cohort_data import CohortSeries, Datasets, MetricDataset
from constants import (
    CHART_HEIGHT,
    CHART_WIDTH,
    COHORT_COLORS,
    COHORT_LABELS,
    HOUR_TICK_STEP,
    HOURS_DOMAIN,
    INNER_HEIGHT,
    INNER_WIDTH,
    LEGEND_LABEL_GAP,
    LEGEND_OFFSET,
    LEGEND_ROW_SPACING,
    LEGEND_SWATCH,
    LINE_WIDTH,
    MARGIN,
    MARKER_RADIUS,
    X_AXIS_LABEL,
    Y_PADDING,
)
from tooltip import hover_script, tooltip_html


class ChartKind(str, Enum):
    TEMPERATURE = "temperature"
    ACTIVITY = "activity"


@dataclass(frozen=True)
class ChartConfig:
    title: str
    y_axis_label: str
    metric: MetricDataset


@dataclass(frozen=True)
class DatasetDescriptor:
    name: str
    data: CohortSeries
    color: str


@dataclass(frozen=True)
class LinearScale:
    """Maps a data interval onto a pixel interval of the inset plot area."""

    domain: tuple[float, float]
    range: tuple[float, float]

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            return r0
        return r0 + (value - d0) / (d1 - d0) * (r1 - r0)

    def invert(self, pixel: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if r1 == r0:
            return d0
        return d0 + (pixel - r0) / (r1 - r0) * (d1 - d0)


_VIEW_LABELS = {
    ChartKind.TEMPERATURE: (
        "Average Temperature Throughout the Day",
        "Temperature (°C)",
    ),
    ChartKind.ACTIVITY: (
        "Average Activity Throughout the Day",
        "Activity",
    ),
}


def chart_config(kind: ChartKind | str, datasets: Datasets) -> ChartConfig:
    kind = ChartKind(kind)
    title, y_label = _VIEW_LABELS[kind]
    metric = datasets.temperature if kind is ChartKind.TEMPERATURE else datasets.activity
    return ChartConfig(title=title, y_axis_label=y_label, metric=metric)


def dataset_descriptors(metric: MetricDataset) -> list[DatasetDescriptor]:
    return [
        DatasetDescriptor(name=COHORT_LABELS[key], data=series, color=COHORT_COLORS[key])
        for key, series in metric.items()
    ]


def y_domain(values: Iterable[float]) -> tuple[float, float]:
    """
    Extent of the finite values padded by one unit each side. NaN readings
    are ignored; with nothing left the domain is centred on zero.
    """
    finite = [v for v in values if not math.isnan(v)]
    if not finite:
        return (-Y_PADDING, Y_PADDING)
    return (min(finite) - Y_PADDING, max(finite) + Y_PADDING)


def x_scale() -> LinearScale:
    return LinearScale(domain=HOURS_DOMAIN, range=(0.0, float(INNER_WIDTH)))


def y_scale(metric: MetricDataset) -> LinearScale:
    # Inverted range so larger values plot higher.
    return LinearScale(domain=y_domain(metric.avg_values()), range=(float(INNER_HEIGHT), 0.0))


def _add_legend(
    fig: go.Figure,
    descriptors: list[DatasetDescriptor],
    xs: LinearScale,
    ys: LinearScale,
) -> None:
    # Positions are laid out in inset pixels (origin top-left) and mapped back
    # to data coordinates so they line up with the axes.
    left = INNER_WIDTH - LEGEND_OFFSET
    for i, ds in enumerate(descriptors):
        top = i * LEGEND_ROW_SPACING
        fig.add_shape(
            type="rect",
            x0=xs.invert(left),
            x1=xs.invert(left + LEGEND_SWATCH),
            y0=ys.invert(top),
            y1=ys.invert(top + LEGEND_SWATCH),
            xref="x",
            yref="y",
            fillcolor=ds.color,
            line=dict(width=0),
            layer="above",
            name="legend-swatch",
        )
        fig.add_annotation(
            x=xs.invert(left + LEGEND_LABEL_GAP),
            y=ys.invert(top + LEGEND_SWATCH / 2),
            xref="x",
            yref="y",
            text=ds.name,
            showarrow=False,
            xanchor="left",
            yanchor="middle",
            font=dict(size=12, color="#000"),
            name="legend-label",
        )


def build_chart_figure(kind: ChartKind | str, datasets: Datasets) -> go.Figure:
    """
    Build the daily chart for one metric: a line with circular markers per
    cohort, hover labels on every marker, a legend block in the top-right
    corner, and the title and axis captions for the view.

    A new figure is produced on every call; nothing is shared between calls.
    """
    config = chart_config(kind, datasets)
    xs = x_scale()
    ys = y_scale(config.metric)
    descriptors = dataset_descriptors(config.metric)

    fig = go.Figure()
    for ds in descriptors:
        fig.add_trace(
            go.Scatter(
                x=[s.hour for s in ds.data],
                y=[s.avg_value for s in ds.data],
                mode="lines+markers",
                name=ds.name,
                line=dict(color=ds.color, width=LINE_WIDTH, shape="linear"),
                marker=dict(size=2 * MARKER_RADIUS, color=ds.color, symbol="circle"),
                text=[tooltip_html(ds.name, s) for s in ds.data],
                hovertemplate="%{text}<extra></extra>",
                showlegend=False,
            )
        )

    _add_legend(fig, descriptors, xs, ys)

    fig.update_layout(
        template="simple_white",
        width=CHART_WIDTH,
        height=CHART_HEIGHT,
        autosize=False,
        margin=dict(
            l=MARGIN["left"], r=MARGIN["right"], t=MARGIN["top"], b=MARGIN["bottom"], pad=0
        ),
        title=dict(text=config.title, x=0.5, xanchor="center", font=dict(size=16)),
        hovermode="closest",
        hoverlabel=dict(bgcolor="white", font_size=12),
        showlegend=False,
    )
    fig.update_xaxes(
        range=list(xs.domain),
        tick0=HOURS_DOMAIN[0],
        dtick=HOUR_TICK_STEP,
        ticks="outside",
        title_text=X_AXIS_LABEL,
    )
    fig.update_yaxes(range=list(ys.domain), ticks="outside", title_text=config.y_axis_label)
    return fig


def figure_to_html(fig: go.Figure, *, div_id: str = "chart") -> str:
    """
    Standalone page for the chart. Plotly's own hover label is switched off
    and a floating tooltip that fades in and out follows hover events instead.
    """
    exported = go.Figure(fig)
    exported.update_traces(hoverinfo="none", hovertemplate=None)
    return exported.to_html(
        full_html=True,
        include_plotlyjs="cdn",
        div_id=div_id,
        post_script=hover_script(),
        config=dict(displayModeBar=False),
    )

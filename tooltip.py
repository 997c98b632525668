from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from cohort_data import Sample
from constants import (
    TOOLTIP_FADE_IN_MS,
    TOOLTIP_FADE_OUT_MS,
    TOOLTIP_OFFSET,
    TOOLTIP_OPACITY,
)
from utils.time import format_hour


def _format_value(value: float) -> str:
    return "NaN" if math.isnan(value) else f"{value:.2f}"


def tooltip_lines(cohort_name: str, sample: Sample) -> list[str]:
    return [
        cohort_name,
        f"Hour: {format_hour(sample.hour)}",
        f"Value: {_format_value(sample.avg_value)}",
    ]


def tooltip_text(cohort_name: str, sample: Sample) -> str:
    """Plain form, e.g. 'Male / Hour: 6 / Value: 36.40'."""
    return " / ".join(tooltip_lines(cohort_name, sample))


def tooltip_html(cohort_name: str, sample: Sample) -> str:
    name, *rest = tooltip_lines(cohort_name, sample)
    return "<br>".join([f"<b>{name}</b>", *rest])


@dataclass(frozen=True)
class TooltipState:
    visible: bool = False
    opacity: float = 0.0
    duration_ms: int = 0
    html: str = ""
    left: Optional[float] = None
    top: Optional[float] = None


class TooltipController:
    """
    Hover handler for chart markers. It owns only the floating label:
    entering a marker shows it next to the pointer, leaving fades it out.
    The position is taken once at enter time and not tracked afterwards.
    """

    def __init__(self) -> None:
        self._state = TooltipState()

    @property
    def state(self) -> TooltipState:
        return self._state

    def on_enter(
        self, point: Sample, cohort: str, pointer: Tuple[float, float]
    ) -> TooltipState:
        dx, dy = TOOLTIP_OFFSET
        page_x, page_y = pointer
        self._state = TooltipState(
            visible=True,
            opacity=TOOLTIP_OPACITY,
            duration_ms=TOOLTIP_FADE_IN_MS,
            html=tooltip_html(cohort, point),
            left=page_x + dx,
            top=page_y + dy,
        )
        return self._state

    def on_leave(self) -> TooltipState:
        # Content and position stay put while the label fades.
        self._state = replace(
            self._state,
            visible=False,
            opacity=0.0,
            duration_ms=TOOLTIP_FADE_OUT_MS,
        )
        return self._state


_HOVER_SCRIPT = """
var gd = document.getElementById('{plot_id}');
var tip = document.createElement('div');
tip.className = 'tooltip';
tip.style.cssText = 'position:absolute;pointer-events:none;opacity:0;'
  + 'background:#fff;border:1px solid #999;border-radius:4px;'
  + 'padding:6px;font:12px sans-serif;';
document.body.appendChild(tip);
gd.on('plotly_hover', function(data) {
  var pt = data.points[0];
  tip.innerHTML = pt.text;
  tip.style.transition = 'opacity %(fade_in)dms';
  tip.style.opacity = %(opacity)s;
  tip.style.left = (data.event.pageX %(dx)+d) + 'px';
  tip.style.top = (data.event.pageY %(dy)+d) + 'px';
});
gd.on('plotly_unhover', function() {
  tip.style.transition = 'opacity %(fade_out)dms';
  tip.style.opacity = 0;
});
"""


def hover_script() -> str:
    """
    Browser-side hover handler for the chart page. The fade timings, opacity
    and pointer offset are read off the transitions TooltipController makes,
    so both sides share one definition of the tooltip.
    """
    ctrl = TooltipController()
    shown = ctrl.on_enter(Sample(0.0, 0.0), "", pointer=(0.0, 0.0))
    hidden = ctrl.on_leave()
    return _HOVER_SCRIPT % dict(
        fade_in=shown.duration_ms,
        fade_out=hidden.duration_ms,
        opacity=shown.opacity,
        dx=int(shown.left),
        dy=int(shown.top),
    )

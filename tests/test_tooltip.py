import math

import tooltip
from cohort_data import Sample
from constants import TOOLTIP_FADE_IN_MS, TOOLTIP_FADE_OUT_MS, TOOLTIP_OPACITY
from tooltip import TooltipController, hover_script, tooltip_html, tooltip_text


def test_tooltip_text_format():
    assert tooltip_text("Male", Sample(hour=6, avg_value=36.4)) == "Male / Hour: 6 / Value: 36.40"
    assert (
        tooltip_text("Female (Estrus)", Sample(hour=13.5, avg_value=2.004))
        == "Female (Estrus) / Hour: 13.5 / Value: 2.00"
    )


def test_tooltip_html_bolds_cohort_name():
    assert tooltip_html("Male", Sample(0, 1)) == "<b>Male</b><br>Hour: 0<br>Value: 1.00"


def test_tooltip_text_with_missing_values():
    assert tooltip_text("Male", Sample(math.nan, math.nan)) == "Male / Hour: NaN / Value: NaN"


def test_controller_starts_hidden():
    state = TooltipController().state
    assert not state.visible
    assert state.opacity == 0.0
    assert state.html == ""


def test_enter_shows_label_next_to_pointer():
    ctrl = TooltipController()
    state = ctrl.on_enter(Sample(6, 36.4), "Male", pointer=(100, 200))
    assert state.visible
    assert state.opacity == TOOLTIP_OPACITY
    assert state.duration_ms == TOOLTIP_FADE_IN_MS
    assert state.left == 105
    assert state.top == 172
    assert state.html == "<b>Male</b><br>Hour: 6<br>Value: 36.40"
    assert ctrl.state is state


def test_leave_fades_out_keeping_last_content():
    ctrl = TooltipController()
    ctrl.on_enter(Sample(6, 36.4), "Male", pointer=(100, 200))
    state = ctrl.on_leave()
    assert not state.visible
    assert state.opacity == 0.0
    assert state.duration_ms == TOOLTIP_FADE_OUT_MS
    assert state.html.startswith("<b>Male</b>")
    assert (state.left, state.top) == (105, 172)


def test_reentering_moves_label_to_new_pointer():
    ctrl = TooltipController()
    ctrl.on_enter(Sample(6, 36.4), "Male", pointer=(100, 200))
    ctrl.on_leave()
    state = ctrl.on_enter(Sample(12, 37.0), "Female (Estrus)", pointer=(300, 50))
    assert state.visible
    assert (state.left, state.top) == (305, 22)
    assert "Female (Estrus)" in state.html


def test_hover_script_uses_tooltip_timing():
    script = hover_script()
    assert "{plot_id}" in script
    assert f"opacity {TOOLTIP_FADE_IN_MS}ms" in script
    assert f"opacity {TOOLTIP_FADE_OUT_MS}ms" in script
    assert "pageX +5" in script and "pageY -28" in script


def test_hover_script_follows_controller_transitions(monkeypatch):
    monkeypatch.setattr(tooltip, "TOOLTIP_FADE_IN_MS", 300)
    monkeypatch.setattr(tooltip, "TOOLTIP_OFFSET", (10, -40))
    script = hover_script()
    assert "opacity 300ms" in script
    assert f"opacity {TOOLTIP_FADE_OUT_MS}ms" in script
    assert f"tip.style.opacity = {TOOLTIP_OPACITY};" in script
    assert "pageX +10" in script and "pageY -40" in script

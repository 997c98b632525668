from __future__ import annotations

import logging
from typing import Optional

import streamlit as st
import streamlit.components.v1 as components

from charts import ChartKind, build_chart_figure, figure_to_html
from cohort_data import DatasetLoadError, Datasets, load_datasets
from constants import CHART_FRAME_PADDING, CHART_HEIGHT, CHART_WIDTH

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Toggle buttons keyed by element id, in display order.
VIEW_BUTTONS: dict[str, tuple[ChartKind, str]] = {
    "tempBtn": (ChartKind.TEMPERATURE, "Temperature"),
    "actBtn": (ChartKind.ACTIVITY, "Activity"),
}
DEFAULT_VIEW = "tempBtn"


@st.cache_resource(show_spinner="Loading data...")
def _load_once() -> Optional[Datasets]:
    # Cached for the process lifetime, failures included: no retry.
    try:
        return load_datasets()
    except DatasetLoadError:
        logger.exception("Error loading CSV files")
        return None


def _set_active_view(button_id: str) -> None:
    st.session_state["active_view"] = button_id


def render(kind: ChartKind, datasets: Datasets, mount) -> None:
    """
    Draw the chart for `kind` into `mount`, replacing whatever it held. The
    chart is embedded as its own page so the fading hover tooltip runs there.
    """
    html = figure_to_html(build_chart_figure(kind, datasets))
    with mount.container():
        components.html(
            html,
            width=CHART_WIDTH + CHART_FRAME_PADDING,
            height=CHART_HEIGHT + CHART_FRAME_PADDING,
        )
        st.download_button(
            "Download chart (HTML)",
            data=html,
            file_name=f"{kind.value}_chart.html",
            mime="text/html",
        )


def main() -> None:
    st.set_page_config(page_title="Daily Cycle Charts", page_icon="🐭", layout="centered")
    st.title("Temperature & Activity Throughout the Day")

    datasets = _load_once()
    if datasets is None:
        return

    st.session_state.setdefault("active_view", DEFAULT_VIEW)
    active = st.session_state["active_view"]

    cols = st.columns(len(VIEW_BUTTONS))
    for col, (button_id, (_, label)) in zip(cols, VIEW_BUTTONS.items()):
        with col:
            st.button(
                label,
                key=button_id,
                type="primary" if button_id == active else "secondary",
                on_click=_set_active_view,
                args=(button_id,),
                width="stretch",
            )

    chart = st.empty()
    kind, _ = VIEW_BUTTONS[active]
    render(kind, datasets, chart)


if __name__ == "__main__":
    main()

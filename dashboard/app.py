"""Rally Championship Dashboard.

Interactive standings and statistics view built with Streamlit and
Plotly.  Loads a championship scenario file, replays its races and shows
the resulting standings, per-country points, car performance ratings and
race classifications.

Launch with::

    streamlit run dashboard/app.py
"""

from __future__ import annotations

from pathlib import Path

import plotly.graph_objects as go
import streamlit as st

from rally_engine.config import CHAMPIONSHIP_PATH, load_championship
from rally_engine.core.statistics import (
    calculate_average_points_per_driver,
    country_points,
    find_most_successful_country,
    get_total_races_held,
)


def main() -> None:
    """Entry point for the Streamlit dashboard."""
    st.set_page_config(
        page_title="Rally Championship",
        layout="wide",
    )

    st.title("Rally Championship Dashboard")

    # ── Sidebar ──────────────────────────────────────────────────────────
    st.sidebar.header("Scenario")

    scenario: str = st.sidebar.text_input(
        "Scenario file",
        value=str(CHAMPIONSHIP_PATH),
    )

    try:
        championship = load_championship(Path(scenario))
    except (FileNotFoundError, ValueError) as exc:
        st.error(f"Could not load scenario: {exc}")
        return

    manager = championship.manager

    # ── Section 1: Standings ─────────────────────────────────────────────
    st.header("1 -- Standings")

    standings = manager.standings_frame()
    st.dataframe(standings, hide_index=True, use_container_width=True)

    fig_pts = go.Figure(
        go.Bar(
            x=standings["name"],
            y=standings["points"],
            text=standings["points"],
            textposition="auto",
        )
    )
    fig_pts.update_layout(
        xaxis_title="Driver",
        yaxis_title="Points",
        height=400,
    )
    st.plotly_chart(fig_pts, use_container_width=True)

    # ── Section 2: Statistics ────────────────────────────────────────────
    st.header("2 -- Statistics")

    leader = manager.get_leading_driver()
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Leader", leader.name if leader is not None else "No leader")
    col2.metric("Races held", get_total_races_held(manager))
    col3.metric(
        "Avg points / driver",
        f"{calculate_average_points_per_driver(manager):.2f}",
    )
    col4.metric("Top country", find_most_successful_country(manager))

    by_country = country_points(manager)
    fig_country = go.Figure(
        go.Bar(x=list(by_country.keys()), y=list(by_country.values()))
    )
    fig_country.update_layout(
        xaxis_title="Country",
        yaxis_title="Points",
        height=350,
    )
    st.plotly_chart(fig_country, use_container_width=True)

    # ── Section 3: Car performance ───────────────────────────────────────
    st.header("3 -- Car Performance")

    cars = list(championship.cars.values())
    fig_cars = go.Figure(
        go.Bar(
            x=[car.label for car in cars],
            y=[car.calculate_performance() for car in cars],
            marker_color=[
                "#b5651d" if car.surface.value == "gravel" else "#4a4a4a"
                for car in cars
            ],
        )
    )
    fig_cars.update_layout(
        xaxis_title="Car",
        yaxis_title="Performance rating",
        height=350,
    )
    st.plotly_chart(fig_cars, use_container_width=True)

    # ── Section 4: Race results ──────────────────────────────────────────
    st.header("4 -- Race Results")

    for race in championship.races:
        st.text(race.get_results())


if __name__ == "__main__":
    main()

"""
Wood Board Load Calculator - Streamlit Web GUI.
Checks whether a board on two supports can carry a load, how far it bends,
and the maximum load it should carry.

Run with: streamlit run run.py
"""

import logging

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd
import streamlit as st

from .material_data import DEFAULT_SPECIES, get_material, get_species_names
from .loads import CalculationInputs, LoadType
from .beam_analysis import analyse_board
from .load_curve import sample_curve, curve_to_rows
from .design_checks import run_all_checks
from .config import load_settings
from .logging_config import setup_logging
from .utils import InvalidInputError, format_safety_factor, format_util

logger = logging.getLogger(__name__)

DEFAULT_INPUTS = {
    "length": 120.0,    # cm
    "width": 60.0,      # cm
    "thickness": 3.0,   # cm
    "load": 80.0,       # kg
}


def _render_inputs() -> tuple:
    """Sidebar widgets. Returns (MaterialProperties, CalculationInputs)."""
    st.header("Parameters")

    species = st.selectbox(
        "Wood Species",
        options=get_species_names(),
        index=get_species_names().index(DEFAULT_SPECIES),
        key="species",
    )
    material = get_material(species)
    with st.expander("Material Properties", expanded=False):
        st.write(f"**Density** = {material.density:.0f} kg/m³")
        st.write(f"**MOE** = {material.modulus_of_elasticity:.0f} MPa")
        st.write(f"**MOR** = {material.modulus_of_rupture:.0f} MPa")
        if material.description:
            st.caption(material.description)

    st.divider()

    # ── Dimensions ──
    st.subheader("Dimensions")
    col_l, col_w = st.columns(2)
    with col_l:
        length = st.number_input("Length (cm)", value=DEFAULT_INPUTS["length"],
                                 step=5.0, key="length")
    with col_w:
        width = st.number_input("Width (cm)", value=DEFAULT_INPUTS["width"],
                                step=5.0, key="width")
    thickness = st.slider("Thickness (cm)", min_value=1.0, max_value=10.0,
                          value=DEFAULT_INPUTS["thickness"], step=0.5,
                          key="thickness")

    st.divider()

    # ── Load ──
    st.subheader("Load")
    load = st.number_input("Total Weight (kg)", value=DEFAULT_INPUTS["load"],
                           step=5.0, key="load")
    load_type = st.radio(
        "Load Type",
        options=list(LoadType),
        format_func=lambda t: t.label,
        horizontal=True,
        key="load_type",
        help="Center Point: the whole load at midspan. "
             "Distributed: the same total load spread evenly along the board.",
    )

    inputs = CalculationInputs(
        length=length, width=width, thickness=thickness,
        load=load, load_type=load_type,
    )
    return material, inputs


def _plot_curve(samples, current_load: float):
    """Load vs. deflection chart with current load and safe limit markers."""
    loads = [s.load for s in samples]
    deflections = [s.deflection for s in samples]
    safe_limit = samples[0].safe_limit

    fig, ax = plt.subplots(figsize=(7, 4))
    ax.plot(loads, deflections, color="#ba5e2c", linewidth=2.2, label="Deflection")
    ax.fill_between(loads, deflections, color="#c67636", alpha=0.25)
    ax.axvline(current_load, color="red", linestyle="--", linewidth=1.0, label="Current")
    ax.axvline(safe_limit, color="green", linestyle=":", linewidth=1.0,
               label=f"Rec. max ({safe_limit:.0f} kg)")
    ax.set_xlabel("Load (kg)")
    ax.set_ylabel("Deflection (mm)")
    ax.grid(True, axis="y", alpha=0.3)
    ax.legend(loc="upper left")
    fig.tight_layout()
    return fig


def main():
    st.set_page_config(
        page_title="Wood Board Load Calculator",
        page_icon="\U0001FAB5",
        layout="wide",
    )
    setup_logging()

    st.title("Wood Board Load Calculator")
    st.caption("Simply supported board -- bending stress, deflection and safe load")

    try:
        settings = load_settings()
    except InvalidInputError as exc:
        st.error(f"Configuration error: {exc}")
        return

    with st.sidebar:
        material, inputs = _render_inputs()

    try:
        result = analyse_board(inputs, material, settings)
    except InvalidInputError as exc:
        logger.info("Rejected input: %s", exc)
        st.error(f"Invalid input: {exc}")
        return

    # ── Status ──
    if result.is_safe:
        st.success(f"PASSED -- safety factor {format_safety_factor(result.safety_factor)} "
                   f"> {settings.min_safety_factor:g}")
    else:
        st.error(f"FAILED -- safety factor {format_safety_factor(result.safety_factor)} "
                 f"<= {settings.min_safety_factor:g}. The board may break or sag too far.")

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Deflection", f"{result.deflection:.2f} mm")
    col2.metric("Safety Factor", format_safety_factor(result.safety_factor))
    col3.metric("Rec. Max Load", f"{result.max_load_recommended:.0f} kg")
    col4.metric("Board Weight", f"{result.weight_of_board:.1f} kg")

    # ── Chart ──
    st.subheader("Load vs. Deflection")
    samples = sample_curve(inputs, material, result, settings=settings)
    fig = _plot_curve(samples, inputs.load)
    st.pyplot(fig, clear_figure=True)
    plt.close(fig)
    st.caption(
        f"Based on average {material.name or 'material'} properties "
        f"(MOR {material.modulus_of_rupture:g} MPa, "
        f"MOE {material.modulus_of_elasticity / 1000:g} GPa). Actual wood varies."
    )

    df = pd.DataFrame(curve_to_rows(samples))
    with st.expander("Curve data", expanded=False):
        st.dataframe(df, use_container_width=True, hide_index=True)
        st.download_button(
            "Download CSV",
            data=df.to_csv(index=False).encode("utf-8"),
            file_name="load_deflection_curve.csv",
            mime="text/csv",
        )

    # ── Checks ──
    st.subheader("Design Checks")
    checks = run_all_checks(inputs, material, result, settings)
    st.dataframe(
        pd.DataFrame([
            {
                "Check": c.name,
                "Demand": f"{c.demand:.2f} {c.unit}",
                "Capacity": f"{c.capacity:.2f} {c.unit}",
                "Utilisation": format_util(c.utilisation, c.passed),
                "Details": c.details,
            }
            for c in checks
        ]),
        use_container_width=True,
        hide_index=True,
    )

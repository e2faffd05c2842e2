import logging
import platform
from datetime import datetime
from typing import Dict, List, Tuple

import streamlit as st

import rheosim
from rheosim.comparison import ComparisonSet
from rheosim.crossover import find_flow_point, find_gel_point
from rheosim.models import DEFAULT_PARAMS, ModelKind
from rheosim.plotting import AXIS_TYPES, CHARTS, build_figure
from rheosim.presets import MATERIAL_PROFILES, get_profile
from rheosim.settings import get_settings
from rheosim.sweeps import compute_amplitude_sweep, compute_time_sweep

logger = logging.getLogger("rheosim.app")

try:
    st.set_page_config(page_title="Rheology Playground", page_icon="🧪", layout="wide")
except Exception:
    # set_page_config may have been called already if rendering in-place
    pass

# Inputs shown in the sidebar, grouped as on a rheometer method sheet.
PARAM_GROUPS: Dict[str, List[Tuple[str, str]]] = {
    "Steady shear": [
        ("n", "Flow index n"),
        ("K", "Consistency K [Pa·sⁿ]"),
        ("tau0", "Yield stress τ0 [Pa]"),
        ("gamma_dot_min", "γ̇ min [1/s]"),
        ("gamma_dot_max", "γ̇ max [1/s]"),
    ],
    "Cross / Carreau": [
        ("eta0", "η0 [Pa·s]"),
        ("eta_inf", "η∞ [Pa·s]"),
        ("k_cross", "Cross k [s]"),
        ("m_cross", "Cross m"),
        ("lambda_carreau", "Carreau λ [s]"),
    ],
    "Structure kinetics": [
        ("kb", "Breakdown kb"),
        ("kr", "Rebuild kr [1/s]"),
        ("lambda0", "Initial structure λ0"),
        ("a", "Structural amplification a"),
        ("gamma_dot_low", "Rest shear rate [1/s]"),
        ("gamma_dot_high", "High shear rate [1/s]"),
        ("t_total", "Test duration [s]"),
    ],
    "Viscoelasticity": [
        ("G0", "G0 [Pa]"),
        ("tau_r", "Relaxation time τR [s]"),
        ("k_spring", "Spring modulus [Pa]"),
        ("eta_dashpot", "Dashpot viscosity [Pa·s]"),
        ("freq_min", "f min [Hz]"),
        ("freq_max", "f max [Hz]"),
    ],
    "Amplitude sweep": [
        ("gamma0_min", "γ0 min [%]"),
        ("gamma0_max", "γ0 max [%]"),
        ("gamma_y", "Yield strain γY [%]"),
        ("softening_p", "Softening exponent"),
    ],
    "Gelation": [
        ("gel_rate", "Gelation rate [1/s]"),
        ("gprime_final", "Final G' [Pa]"),
        ("gel_t0", "Induction time [s]"),
    ],
    "Thermal": [
        ("current_temp", "Temperature [°C]"),
        ("temp_min", "T min [°C]"),
        ("temp_max", "T max [°C]"),
        ("temp_sensitivity", "Sensitivity α [1/°C]"),
    ],
}

TABS = [
    ("〰️ Flow Curves", ["flow-viscosity", "flow-stress"]),
    ("📉 Freq. Sweep", ["oscillatory"]),
    ("📈 Amp. Sweep", ["amplitude"]),
    ("⚡ Step-Shear", ["step-shear-viscosity", "step-shear-structure"]),
    ("🔥 Temp. Sweep", ["temperature"]),
    ("🩹 3ITT Recovery", ["self-healing"]),
    ("🐌 Creep/Relax", ["creep"]),
    ("⏳ Time Sweep", ["time-sweep"]),
]


def init_session_state() -> None:
    if "model" not in st.session_state:
        st.session_state.model = get_settings().default_model
    if "params" not in st.session_state:
        st.session_state.params = DEFAULT_PARAMS
    if "comparison" not in st.session_state:
        st.session_state.comparison = ComparisonSet()


def clear_param_inputs() -> None:
    for name in [k for k in st.session_state.keys() if str(k).startswith("param_")]:
        del st.session_state[name]


init_session_state()
comparison: ComparisonSet = st.session_state.comparison

# --- Sidebar: model, presets, parameters, comparison traces ---
st.sidebar.header("Model")
models = list(ModelKind)
st.session_state.model = st.sidebar.selectbox(
    "Constitutive model",
    models,
    index=models.index(st.session_state.model),
    format_func=lambda m: m.label,
)

preset_name = st.sidebar.selectbox("Material preset", [p.name for p in MATERIAL_PROFILES])
preset_cols = st.sidebar.columns(2)
with preset_cols[0]:
    if st.button("Load preset", use_container_width=True):
        profile = get_profile(preset_name)
        st.session_state.model = profile.model
        st.session_state.params = profile.params
        clear_param_inputs()
        st.rerun()
with preset_cols[1]:
    if st.button("Reset", use_container_width=True):
        st.session_state.model = ModelKind.POWER_LAW
        st.session_state.params = DEFAULT_PARAMS
        clear_param_inputs()
        st.rerun()
st.sidebar.caption(get_profile(preset_name).description)

st.sidebar.header("Parameters")
params = st.session_state.params
changes: Dict[str, float] = {}
for group, entries in PARAM_GROUPS.items():
    with st.sidebar.expander(group, expanded=(group == "Steady shear")):
        for name, label in entries:
            current = float(getattr(params, name))
            value = st.number_input(label, value=current, format="%g", key=f"param_{name}")
            if value != current:
                changes[name] = float(value)
if changes:
    params = params.replace(**changes)
    st.session_state.params = params
    logger.debug("Updated parameters: %s", changes)

st.sidebar.header("Comparison traces")
if st.sidebar.button("Add current to comparison", disabled=comparison.is_full(), use_container_width=True):
    comparison.add(st.session_state.model, params)
for trace in comparison.traces:
    cols = st.sidebar.columns([3, 1])
    with cols[0]:
        st.markdown(f"<span style='color:{trace.color}'>■</span> {trace.name} · {trace.model.label}", unsafe_allow_html=True)
    with cols[1]:
        if st.button("✕", key=f"remove_{trace.trace_id}"):
            comparison.remove(trace.trace_id)
            st.rerun()
if comparison.traces and st.sidebar.button("Clear all", use_container_width=True):
    comparison.clear()
    st.rerun()

# --- Main area ---
st.title("🧪 Rheology Playground")
st.caption("Constitutive models under standard rheometer protocols")

model = st.session_state.model
plotted = comparison.plotted(model, params)
gel_point = find_gel_point(compute_time_sweep(model, params))
flow_point = find_flow_point(compute_amplitude_sweep(params))

metric_cols = st.columns(3)
with metric_cols[0]:
    st.metric("Model", model.label)
with metric_cols[1]:
    st.metric("Gel point t [s]", f"{gel_point.x:.1f}" if gel_point else "none")
with metric_cols[2]:
    st.metric("Flow point γ [%]", f"{flow_point.x:.3g}" if flow_point else "none")

markers = {"amplitude": flow_point, "time-sweep": gel_point}
for tab, (label, chart_keys) in zip(st.tabs([label for label, _ in TABS]), TABS):
    with tab:
        cols = st.columns(len(chart_keys))
        for col, key in zip(cols, chart_keys):
            with col:
                spec = CHARTS[key]
                axis_cols = st.columns(2)
                with axis_cols[0]:
                    x_axis = st.radio(
                        "X axis", AXIS_TYPES, index=AXIS_TYPES.index(spec.x_axis), horizontal=True, key=f"axis_{key}_x"
                    )
                with axis_cols[1]:
                    y_axis = st.radio(
                        "Y axis", AXIS_TYPES, index=AXIS_TYPES.index(spec.y_axis), horizontal=True, key=f"axis_{key}_y"
                    )
                fig = build_figure(key, plotted, markers.get(key), x_axis=x_axis, y_axis=y_axis)
                st.plotly_chart(fig, use_container_width=True)

st.divider()

with st.expander("Command-line examples (optional)"):
    st.code(
        """
python -m rheosim.cli flow --model power-law --csv flow.csv
python -m rheosim.cli step-shear --preset "Self-Healing Hydrogel" --set kb=0.8 --csv 3itt.csv
python -m rheosim.cli gel-point --set gel_rate=0.05
        """,
        language="bash",
    )

env_cols = st.columns(3)
with env_cols[0]:
    st.write(f"Python: {platform.python_version()}")
with env_cols[1]:
    st.write(f"RheoSim: {rheosim.__version__}")
with env_cols[2]:
    st.write(f"Launched: {datetime.now().strftime('%Y-%m-%d %H:%M')}")

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

import plotly.graph_objects as go

from .comparison import ComparisonTrace, evaluate_cached
from .crossover import CrossoverPoint


@dataclass(frozen=True)
class ChartSpec:
    experiment: str
    title: str
    x: str
    y: Tuple[str, ...]
    x_axis: str  # "log" or "linear"
    y_axis: str
    x_title: str
    y_title: str
    line_shape: str = "linear"
    y_range: Optional[Tuple[float, float]] = None
    marker_label: Optional[str] = None
    marker_style: Optional[dict] = None


MODULI_TITLE = "Moduli G', G'' [Pa]"
AXIS_TYPES = ("log", "linear")

GEL_POINT_MARKER = dict(symbol="diamond", size=14, color="#2563eb", line=dict(color="white", width=2))
FLOW_POINT_MARKER = dict(symbol="circle", size=14, color="white", line=dict(color="#000", width=2.5))

CHARTS: Dict[str, ChartSpec] = {
    "flow-viscosity": ChartSpec(
        "flow", "Steady-State Flow (Viscosity)", "gammaDot", ("eta",), "log", "log",
        "Shear Rate γ̇ [1/s]", "Viscosity η [Pa·s]", line_shape="spline",
    ),
    "flow-stress": ChartSpec(
        "flow", "Steady-State Flow (Stress)", "gammaDot", ("tau",), "log", "log",
        "Shear Rate γ̇ [1/s]", "Shear Stress τ [Pa]", line_shape="spline",
    ),
    "oscillatory": ChartSpec(
        "oscillatory", "Dynamic Frequency Sweep", "freq", ("Gprime", "GdoublePrime"), "log", "log",
        "Frequency f [Hz]", MODULI_TITLE,
    ),
    "amplitude": ChartSpec(
        "amplitude", "Amplitude Sweep (Structural Limits)", "strain", ("Gprime", "GdoublePrime"), "log", "log",
        "Strain γ [%]", MODULI_TITLE, marker_label="Flow Point", marker_style=FLOW_POINT_MARKER,
    ),
    "step-shear-viscosity": ChartSpec(
        "step-shear", "Step-Shear Structural Recovery", "t", ("eta",), "linear", "log",
        "Time t [s]", "Viscosity η [Pa·s]", line_shape="hv",
    ),
    "step-shear-structure": ChartSpec(
        "step-shear", "Structural Parameter (λ)", "t", ("lambda",), "linear", "linear",
        "Time t [s]", "λ (Structure Level)", y_range=(0.0, 1.1),
    ),
    "temperature": ChartSpec(
        "temperature", "Temperature Sensitivity", "temperature", ("Gprime", "GdoublePrime"), "linear", "log",
        "Temperature T [°C]", MODULI_TITLE,
    ),
    "self-healing": ChartSpec(
        "self-healing", "3-Interval Thixotropy Test (3ITT)", "t", ("eta",), "linear", "log",
        "Time [s]", "Viscosity η [Pa·s]", line_shape="hv",
    ),
    "creep": ChartSpec(
        "creep", "Creep & Recovery Analysis", "t", ("strain",), "linear", "linear",
        "Time t [s]", "Strain ε [-]",
    ),
    "time-sweep": ChartSpec(
        "time-sweep", "Aging & Gelation (Time Sweep)", "t", ("Gprime", "GdoublePrime"), "linear", "log",
        "Time t [s]", MODULI_TITLE, marker_label="Gel Point", marker_style=GEL_POINT_MARKER,
    ),
}

_MODULUS_SUFFIX = {"Gprime": "G'", "GdoublePrime": "G''"}


def _line_style(column_index: int, n_columns: int, color: str, shape: str) -> dict:
    if n_columns == 1:
        return dict(color=color, width=3, shape=shape)
    if column_index == 0:
        return dict(color=color, width=4, shape=shape)
    return dict(color=color, width=1.5, dash="dot", shape=shape)


def build_figure(
    chart_key: str,
    traces: Sequence[ComparisonTrace],
    marker: Optional[CrossoverPoint] = None,
    x_axis: Optional[str] = None,
    y_axis: Optional[str] = None,
) -> go.Figure:
    """Line chart of one experiment for every trace, with an optional crossover marker.

    ``x_axis``/``y_axis`` ("log" or "linear") override the chart's default axis types.
    """
    spec = CHARTS[chart_key]
    for axis in (x_axis, y_axis):
        if axis is not None and axis not in AXIS_TYPES:
            raise ValueError(f"Unknown axis type: {axis}. Use one of {AXIS_TYPES}")
    fig = go.Figure()
    for trace in traces:
        df = evaluate_cached(spec.experiment, trace.model, trace.params)
        for i, column in enumerate(spec.y):
            name = trace.name if len(spec.y) == 1 else f"{trace.name} {_MODULUS_SUFFIX.get(column, column)}"
            fig.add_trace(
                go.Scatter(
                    x=df[spec.x],
                    y=df[column],
                    mode="lines",
                    name=name,
                    line=_line_style(i, len(spec.y), trace.color, spec.line_shape),
                )
            )
    if marker is not None:
        fig.add_trace(
            go.Scatter(
                x=[marker.x],
                y=[marker.y],
                mode="markers",
                name=spec.marker_label or "Crossover",
                showlegend=False,
                marker=spec.marker_style or GEL_POINT_MARKER,
            )
        )
    fig.update_layout(
        title=dict(text=spec.title, x=0.05, xanchor="left"),
        height=540,
        margin=dict(l=65, r=40, t=80, b=65),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
    )
    fig.update_xaxes(type=x_axis or spec.x_axis, title_text=spec.x_title)
    fig.update_yaxes(type=y_axis or spec.y_axis, title_text=spec.y_title)
    if spec.y_range is not None:
        fig.update_yaxes(range=list(spec.y_range))
    return fig

import pytest

from rheosim.comparison import ComparisonSet
from rheosim.crossover import CrossoverPoint
from rheosim.models import DEFAULT_PARAMS, ModelKind
from rheosim.plotting import CHARTS, build_figure


def _plotted():
    traces = ComparisonSet()
    traces.add(ModelKind.NEWTONIAN, DEFAULT_PARAMS)
    return traces.plotted(ModelKind.POWER_LAW, DEFAULT_PARAMS)


def test_every_chart_builds():
    plotted = _plotted()
    for key, spec in CHARTS.items():
        fig = build_figure(key, plotted)
        assert len(fig.data) == len(plotted) * len(spec.y)
        assert fig.layout.xaxis.type == spec.x_axis
        assert fig.layout.yaxis.type == spec.y_axis


def test_moduli_traces_are_named_and_styled():
    fig = build_figure("oscillatory", _plotted())
    assert [d.name for d in fig.data[:2]] == ["Active Simulation G'", "Active Simulation G''"]
    assert fig.data[0].line.width == 4
    assert fig.data[1].line.dash == "dot"
    assert fig.layout.title.text == "Dynamic Frequency Sweep"


def test_crossover_marker_is_appended():
    plotted = _plotted()
    fig = build_figure("time-sweep", plotted, CrossoverPoint(x=60.0, y=3000.0))
    assert len(fig.data) == len(plotted) * 2 + 1
    marker = fig.data[-1]
    assert marker.name == "Gel Point"
    assert list(marker.x) == [60.0]
    assert marker.marker.symbol == "diamond"


def test_structure_chart_has_fixed_range():
    fig = build_figure("step-shear-structure", _plotted())
    assert tuple(fig.layout.yaxis.range) == (0.0, 1.1)
    assert fig.data[0].line.width == 3


def test_axis_types_can_be_overridden():
    fig = build_figure("flow-viscosity", _plotted(), x_axis="linear", y_axis="linear")
    assert fig.layout.xaxis.type == "linear"
    assert fig.layout.yaxis.type == "linear"
    fig = build_figure("creep", _plotted(), y_axis="log")
    assert fig.layout.xaxis.type == CHARTS["creep"].x_axis
    assert fig.layout.yaxis.type == "log"


def test_unknown_axis_type():
    with pytest.raises(ValueError):
        build_figure("oscillatory", _plotted(), x_axis="semilog")


def test_flow_point_marker_differs_from_gel_point():
    point = CrossoverPoint(x=10.0, y=500.0)
    flow = build_figure("amplitude", _plotted(), point).data[-1]
    gel = build_figure("time-sweep", _plotted(), point).data[-1]
    assert flow.name == "Flow Point"
    assert flow.marker.symbol == "circle"
    assert flow.marker.color == "white"
    assert flow.marker.line.color == "#000"
    assert gel.marker.symbol == "diamond"

"""RheoSim: rheology playground engine.

This package evaluates non-Newtonian constitutive and structural-kinetics
models under standard rheometer protocols:
- Flow curves, frequency and amplitude sweeps, temperature sweeps
- Creep/recovery, step-shear (3ITT) and aging time sweeps
- Gel point and flow point detection from crossing moduli
- Material presets, comparison traces and plotly charts

Run the CLI with: python -m rheosim.cli
"""

__all__ = [
    "grids",
    "thermal",
    "models",
    "laws",
    "kinetics",
    "sweeps",
    "crossover",
    "presets",
    "comparison",
]

__version__ = "0.1.0"

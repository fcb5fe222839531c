# app/components - Reusable UI components
from .parameter_inputs import (
    clamp_to_range,
    column_stiffness,
    render_column_helper,
    render_parameter_inputs,
)

__all__ = [
    'clamp_to_range',
    'column_stiffness',
    'render_column_helper',
    'render_parameter_inputs',
]

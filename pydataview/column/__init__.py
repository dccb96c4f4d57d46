"""Column definitions and their renderers."""

from .action import ActionButton, ActionColumn, ActionColumnRenderer
from .base import Cell, Column, ColumnRenderer, DataContext, GlobalContext, SortableOptions
from .checkbox import CheckboxColumn, CheckboxColumnRenderer
from .container import RendererContainer
from .data import DataColumn, DataColumnRenderer
from .header import HeaderContext
from .radio import RadioColumn, RadioColumnRenderer
from .serial import SerialColumn, SerialColumnRenderer


__all__ = [
    "ActionButton",
    "ActionColumn",
    "ActionColumnRenderer",
    "Cell",
    "CheckboxColumn",
    "CheckboxColumnRenderer",
    "Column",
    "ColumnRenderer",
    "DataColumn",
    "DataColumnRenderer",
    "DataContext",
    "GlobalContext",
    "HeaderContext",
    "RadioColumn",
    "RadioColumnRenderer",
    "RendererContainer",
    "SerialColumn",
    "SerialColumnRenderer",
    "SortableOptions",
]

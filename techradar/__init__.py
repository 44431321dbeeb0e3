from .model import (
    Assessment,
    IndexedItem,
    Item,
    Quadrant,
    Trend,
    UnknownEnumValue,
    assessment_as_string,
    assessments,
    ordered_quadrants,
    previous_assessment_of,
    quadrant_as_string,
)
from .random_source import PseudoRandomSource, Range
from .geometry import (
    Cartesian,
    Polar,
    Rect,
    clamp_radius,
    clamp_to_range,
    clamp_to_rect,
    to_cartesian,
    to_polar,
)
from .quadrants import MINIMUM_RADIUS, DRAWING_AREA_HALF_WIDTH, quadrant_area, ring
from .placement import Segment, place
from .classify import Classification, ByAssessment, classify, group, sort_by_name_giving_index
from .legend import (
    legend_horizontal_offset,
    legend_vertical_offset,
    quadrant_legend_offset,
    LegendVerticalOffsetConfig,
)
from .config import RadarConfig, LayoutOptions, get_default_config, set_default_config
from .layout import RadarLayout, Blip, LegendSection, layout_radar
from .consistency import LayoutWarning, check_layout
from .ast import Program, Stmt, Span
from .parser import parse_program
from .validate import validate, ValidationError
from .translator import translate, RadarModel
from .printer import print_program, format_stmt

__all__ = [
    'Assessment',
    'IndexedItem',
    'Item',
    'Quadrant',
    'Trend',
    'UnknownEnumValue',
    'assessment_as_string',
    'assessments',
    'ordered_quadrants',
    'previous_assessment_of',
    'quadrant_as_string',
    'PseudoRandomSource',
    'Range',
    'Cartesian',
    'Polar',
    'Rect',
    'clamp_radius',
    'clamp_to_range',
    'clamp_to_rect',
    'to_cartesian',
    'to_polar',
    'MINIMUM_RADIUS',
    'DRAWING_AREA_HALF_WIDTH',
    'quadrant_area',
    'ring',
    'Segment',
    'place',
    'Classification',
    'ByAssessment',
    'classify',
    'group',
    'sort_by_name_giving_index',
    'legend_horizontal_offset',
    'legend_vertical_offset',
    'quadrant_legend_offset',
    'LegendVerticalOffsetConfig',
    'RadarConfig',
    'LayoutOptions',
    'get_default_config',
    'set_default_config',
    'RadarLayout',
    'Blip',
    'LegendSection',
    'layout_radar',
    'LayoutWarning',
    'check_layout',
    'Program',
    'Stmt',
    'Span',
    'parse_program',
    'validate',
    'ValidationError',
    'translate',
    'RadarModel',
    'print_program',
    'format_stmt',
]

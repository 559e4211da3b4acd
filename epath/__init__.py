from .geometry import DegenerateVectorError, Line, cross, normalized, turn_angle
from .bezier import CubicBezier, QuadBezier
from .config import CurveConfig, get_curve_config, set_curve_config
from .segments import Segment, SegmentKind, segments_from_points
from .subpath import SubPath
from .thinning import thin_subpath
from .rounding import (
    ROUNDING_RULES,
    RoundingRule,
    RoundingWarning,
    classify_turn,
    round_subpath,
    rule_accepts,
)
from .path import Path, round_path, thin_path
from .analysis import ShortSegmentWarning, check_short_segments, format_analysis
from .pathdata import parse_path_data, print_path_data
from .tikz import generate_tikz_code, generate_tikz_document

__all__ = [
    'DegenerateVectorError',
    'Line',
    'cross',
    'normalized',
    'turn_angle',
    'QuadBezier',
    'CubicBezier',
    'CurveConfig',
    'get_curve_config',
    'set_curve_config',
    'Segment',
    'SegmentKind',
    'segments_from_points',
    'SubPath',
    'thin_subpath',
    'ROUNDING_RULES',
    'RoundingRule',
    'RoundingWarning',
    'classify_turn',
    'round_subpath',
    'rule_accepts',
    'Path',
    'round_path',
    'thin_path',
    'ShortSegmentWarning',
    'check_short_segments',
    'format_analysis',
    'parse_path_data',
    'print_path_data',
    'generate_tikz_code',
    'generate_tikz_document',
]

"""Outline builders for the track element shapes."""

from .round_element import round_element_path
from .curved_element import curved_element_path
from .curved_element_enlarged import curved_element_enlarged_path
from .curved_arrow import curved_arrow_path
from .straight_element import straight_element_path
from .polygons import straight_arrow_path, arrow_tip_path, cross_path

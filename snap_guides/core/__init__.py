# Pure-Python snapping core: no Qt imports anywhere below this package.

from loguru import logger

from .exceptions import SnapError, PreconditionError, SettingsError, describe
from .geometry import Axis, OriginMode, center_of, leading_coordinate_for, set_leading_coordinate
from .settings import AxisSettings, DEFAULT_TOLERANCE
from .engine import NoSnap, Snap, SnapResult, NO_SNAP, compute_snap
from .guides import GuideController, install_guides
from .models import Shape

# library records stay silent unless the host application opts in
logger.disable("snap_guides")

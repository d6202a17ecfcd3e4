"""realsave — savings projection with monthly compounding and inflation."""

__version__ = "0.1.0"

from realsave.analytics.metrics import ContributionBreakdown as ContributionBreakdown
from realsave.analytics.metrics import Summary as Summary
from realsave.analytics.metrics import contribution_breakdown as contribution_breakdown
from realsave.analytics.metrics import summarize as summarize
from realsave.analytics.sensitivity import SensitivityReport as SensitivityReport
from realsave.analytics.sensitivity import run_sensitivity as run_sensitivity
from realsave.config.defaults import default_ages as default_ages
from realsave.config.defaults import default_params as default_params
from realsave.config.schema import PlanAges as PlanAges
from realsave.config.schema import ProjectionParams as ProjectionParams
from realsave.config.schema import validate_params as validate_params
from realsave.core.engine import ProjectionResult as ProjectionResult
from realsave.core.engine import TimelineRow as TimelineRow
from realsave.core.engine import compute_timeline as compute_timeline
from realsave.utils.exceptions import InvalidParameterError as InvalidParameterError

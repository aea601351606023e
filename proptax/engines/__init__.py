"""Tax computation engines."""

from proptax.engines.estimator import TaxEstimator

__all__ = ["TaxEstimator"]

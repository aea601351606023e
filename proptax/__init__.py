"""Property tax savings estimator."""

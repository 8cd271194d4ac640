"""Animated climate spiral of monthly global-mean temperature anomalies."""

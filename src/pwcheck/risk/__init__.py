# SPDX-License-Identifier: MIT
"""Risk scoring and labelling."""

from .score import RiskLevel, calculate_risk_score, get_risk_level

__all__ = ["RiskLevel", "calculate_risk_score", "get_risk_level"]

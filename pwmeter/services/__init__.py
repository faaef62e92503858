"""
pwmeter.services
================
Validation, scoring, crack-time, strength and comparison services.
"""
from .comparison_service import compare_password, compare_scores
from .crack_time_service import calculate_crack_time
from .facade import PasswordMeter, analyze
from .score_service import compute_score, score_breakdown
from .strength_service import get_strength, is_valid_strength_scale
from .validator import validate_password

__all__ = [
    "PasswordMeter",
    "analyze",
    "calculate_crack_time",
    "compare_password",
    "compare_scores",
    "compute_score",
    "get_strength",
    "is_valid_strength_scale",
    "score_breakdown",
    "validate_password",
]

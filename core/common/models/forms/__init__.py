"""
Form models package for core.common.
"""

from core.common.models.forms.questionnaire import (
    Questionnaire,
)

__all__ = [
    "Questionnaire",
]

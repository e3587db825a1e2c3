"""Templated feedback derived from score reports."""

from .models import AspectFeedback, FeedbackBundle
from .selector import FeedbackSelector
from .templates import DEFAULT_TEMPLATES, FeedbackTemplates

__all__ = [
    "AspectFeedback",
    "DEFAULT_TEMPLATES",
    "FeedbackBundle",
    "FeedbackSelector",
    "FeedbackTemplates",
]

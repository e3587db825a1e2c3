"""
Data models for generated feedback
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class AspectFeedback(BaseModel):
    """Detailed feedback for one rubric category"""
    overview: str
    performance_level: str
    score: float
    strengths: List[str] = Field(default_factory=list)
    improvements: List[str] = Field(default_factory=list)
    exercises: List[str] = Field(default_factory=list)


class FeedbackBundle(BaseModel):
    """Strengths, improvements and a summary derived from a score report"""
    strengths: List[str] = Field(default_factory=list)
    improvements: List[str] = Field(default_factory=list)
    summary: str = ""
    tier: str = "developing"
    detailed_by_aspect: Optional[Dict[str, AspectFeedback]] = None

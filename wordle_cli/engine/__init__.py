from .feedback import Feedback, pattern
from .evaluate import evaluate
from .scoring import score_strict
from .validation import validate_attempt

__all__ = ["Feedback", "pattern", "evaluate", "score_strict", "validate_attempt"]

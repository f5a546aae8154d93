"""Lao word segmentation and rule-based grammar checking."""

from .checker import LaoGrammarChecker, check, segment, validate
from .config import Config
from .models import (
    DocumentMetadata,
    GrammarCheckResult,
    LineResult,
    WordSpan,
    WordVerdict,
)
from .pipeline import CheckPipeline
from .validators import get_validator

__version__ = "0.1.0"

__all__ = [
    "segment",
    "validate",
    "check",
    "LaoGrammarChecker",
    "WordSpan",
    "GrammarCheckResult",
    "WordVerdict",
    "DocumentMetadata",
    "LineResult",
    "Config",
    "CheckPipeline",
    "get_validator",
]

"""Static analysis, suggestions and validation of rendered SQL."""

from sqlcraft.analysis.analyzer import (
    analyze_query,
    classify_complexity,
    detect_statement_type,
    extract_tables,
)
from sqlcraft.analysis.suggestions import EXAMPLES, SUGGESTIONS, example_for, suggestions_for
from sqlcraft.analysis.validation import SyntaxValidator

__all__ = [
    "analyze_query",
    "classify_complexity",
    "detect_statement_type",
    "extract_tables",
    "EXAMPLES",
    "SUGGESTIONS",
    "example_for",
    "suggestions_for",
    "SyntaxValidator",
]

# Pipeline module

from .analyzer import AnalyzerConfig, ProductAnalyzer, create_analyzer
from .exporter import (
    EXPORT_FORMATS,
    export,
    export_filename,
    to_json,
    to_markdown,
    to_text,
)
from .model_client import (
    ChatModelClient,
    ModelClient,
    classify_upstream_error,
    create_model_client,
)
from .response_parser import (
    decode_response,
    enforce_contract,
    parse_analysis_response,
    strip_code_fences,
)
from .schemas import AnalysisResult
from .validator import MIN_INPUT_LENGTH, validate_input

__all__ = [
    # Analyzer
    "AnalyzerConfig",
    "ProductAnalyzer",
    "create_analyzer",
    # Export
    "EXPORT_FORMATS",
    "export",
    "export_filename",
    "to_json",
    "to_markdown",
    "to_text",
    # Model client
    "ChatModelClient",
    "ModelClient",
    "classify_upstream_error",
    "create_model_client",
    # Parsing
    "decode_response",
    "enforce_contract",
    "parse_analysis_response",
    "strip_code_fences",
    # Schema / validation
    "AnalysisResult",
    "MIN_INPUT_LENGTH",
    "validate_input",
]

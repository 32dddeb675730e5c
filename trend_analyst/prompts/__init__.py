# Prompts module

from .templates import (
    ANALYSIS_PROMPT,
    LIST_FIELDS,
    RESULT_FIELDS,
    TEXT_FIELDS,
    PromptTemplate,
    build_analysis_prompt,
)

__all__ = [
    "ANALYSIS_PROMPT",
    "LIST_FIELDS",
    "RESULT_FIELDS",
    "TEXT_FIELDS",
    "PromptTemplate",
    "build_analysis_prompt",
]

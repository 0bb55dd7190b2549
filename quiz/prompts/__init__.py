"""Quiz Prompts - Templates de geracao e feedback."""

from .templates import (
    FEEDBACK_UNAVAILABLE,
    NO_SUB_SKILLS_PLACEHOLDER,
    build_feedback_prompt,
    build_generation_prompt,
)

__all__ = [
    "FEEDBACK_UNAVAILABLE",
    "NO_SUB_SKILLS_PLACEHOLDER",
    "build_generation_prompt",
    "build_feedback_prompt",
]

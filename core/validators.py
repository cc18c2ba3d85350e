"""
Core Validators

Shared validation functions for all modules.
"""

from typing import Optional


class InvalidArgumentError(ValueError):
    """Raised when a caller passes an argument outside its allowed domain."""


def validate_sentence_count(
    num_sentences: int,
    module_name: str = "Summarizer"
) -> None:
    """
    Validate the requested number of summary sentences.

    Args:
        num_sentences: Target sentence count, must be an int >= 1
        module_name: Name of the module for error messages

    Raises:
        InvalidArgumentError: If num_sentences is not a positive integer
    """
    # bool is an int subclass; True must not pass as 1
    if isinstance(num_sentences, bool) or not isinstance(num_sentences, int):
        raise InvalidArgumentError(
            f"{module_name}: num_sentences must be an integer, "
            f"got {type(num_sentences).__name__}."
        )
    if num_sentences < 1:
        raise InvalidArgumentError(
            f"{module_name}: num_sentences must be at least 1, got {num_sentences}."
        )


def validate_token_count(
    estimated_tokens: int,
    context_limit: int,
    module_name: str = "Module"
) -> None:
    """
    Validate that estimated tokens don't exceed context limit.

    Args:
        estimated_tokens: Estimated token count for the request
        context_limit: Maximum context length for the model
        module_name: Name of the module for error messages

    Raises:
        InvalidArgumentError: If tokens exceed the context limit
    """
    if estimated_tokens > context_limit:
        raise InvalidArgumentError(
            f"{module_name}: Estimated tokens ({estimated_tokens}) exceed "
            f"context limit ({context_limit}). Please reduce input size."
        )


def validate_required_field(
    value: Optional[str],
    field_name: str,
    module_name: str = "Module"
) -> None:
    """
    Validate that a required field is not empty.

    Raises:
        InvalidArgumentError: If value is None or blank
    """
    if not value or not value.strip():
        raise InvalidArgumentError(
            f"{module_name}: {field_name} is required and cannot be empty."
        )

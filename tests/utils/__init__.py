"""Test utilities and helpers."""

from tests.utils.assertions import assert_error_response
from tests.utils.builders import EnvelopeBuilder, cantons_response, success_envelope

__all__ = [
    # Builders
    "EnvelopeBuilder",
    "cantons_response",
    "success_envelope",
    # Assertions
    "assert_error_response",
]

"""Error types and message definitions for custom element expansion.

Every error raised by the core carries a kebab-case ``code`` and, where one
applies, the tag name involved. Human-readable text is generated from the
code so the CLI and library report failures the same way.
"""

from __future__ import annotations


def generate_error_message(code: str, tag_name: str | None = None) -> str:
    """Generate human-readable error message from error code.

    Args:
        code: The error code string (kebab-case format)
        tag_name: Optional tag name to include in the message for context

    Returns:
        Human-readable error message string
    """
    messages = {
        # Template resolution
        "missing-template-function": f"Could not find the template function for {tag_name}",
        "template-not-callable": f"Template registered for <{tag_name}> is not callable",
        # Document structure
        "missing-html-element": "Parsed document has no <html> element",
        "missing-head-element": "Parsed document has no <head> element",
        "missing-body-element": "Parsed document has no <body> element",
    }

    # Return message or fall back to the code itself if not found
    return messages.get(code, code)


class EnhanceError(Exception):
    """Base class for errors raised while expanding a document."""

    code: str
    tag_name: str | None

    def __init__(self, code: str, tag_name: str | None = None) -> None:
        self.code = code
        self.tag_name = tag_name
        super().__init__(generate_error_message(code, tag_name))

    def __str__(self) -> str:
        return str(self.args[0])


class UnresolvedTemplateError(EnhanceError, LookupError):
    """Raised when a custom element has no callable render function."""


class MalformedDocumentError(EnhanceError, ValueError):
    """Raised when the parsed document lacks <html>, <head> or <body>."""

"""Unified exception hierarchy for chat-insights."""


class ChatInsightsError(Exception):
    """Base exception for all chat-insights errors."""


# Parsing
class ChatParseError(ChatInsightsError):
    """Base exception for single-document parse failures."""


class EmptyInputError(ChatParseError):
    """The document has no text payload."""


class FormatNotRecognizedError(ChatParseError):
    """No extraction strategy found any message in the document."""


class MalformedDocumentError(ChatParseError):
    """The HTML parser could not build a document tree."""


# Files
class ExportReadError(ChatInsightsError):
    """Failed to read an export file from disk."""

"""Turn one exported chat document into a ChatAnalysisResult."""

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence

from bs4 import BeautifulSoup, FeatureNotFound

from chat_insights.analytics.assembler import COLORS, assemble_result
from chat_insights.analytics.engine import DEFAULT_INITIATION_GAP_MINUTES, compute_statistics
from chat_insights.analytics.models import ChatAnalysisResult, ParseFailure
from chat_insights.exceptions import (
    ChatInsightsError,
    EmptyInputError,
    ExportReadError,
    MalformedDocumentError,
)
from chat_insights.export.cascade import extract_messages

logger = logging.getLogger(__name__)


DEFAULT_HTML_PARSER = os.environ.get("CHAT_INSIGHTS_HTML_PARSER", "html.parser")


class ChatAnalyzer:
    """Parse export markup and compute its analytics.

    Args:
        html_parser: BeautifulSoup tree builder ("html.parser", "lxml", ...).
        palette: Display colours assigned to senders by rank.
        initiation_gap_minutes: Silence after which a reply counts as
            starting a new conversation.
    """

    def __init__(
        self,
        html_parser: str = DEFAULT_HTML_PARSER,
        palette: Sequence[str] = COLORS,
        initiation_gap_minutes: float = DEFAULT_INITIATION_GAP_MINUTES,
    ):
        if not palette:
            raise ValueError("palette must contain at least one colour")
        self.html_parser = html_parser
        self.palette = tuple(palette)
        self.initiation_gap_minutes = initiation_gap_minutes

    def analyze(
        self,
        text: str | None,
        file_name: str,
        parsed_at: datetime | None = None,
        other_attributes: Mapping[str, Any] | None = None,
    ) -> ChatAnalysisResult:
        """Analyze one document.

        ``parsed_at`` and ``other_attributes`` are copied into the result
        metadata as given.

        Raises:
            EmptyInputError: ``text`` is empty.
            MalformedDocumentError: the HTML parser failed.
            FormatNotRecognizedError: no strategy found any message.
        """
        if not text or not text.strip():
            raise EmptyInputError(f"Empty file content: {file_name}")

        soup = self._parse_tree(text, file_name)
        messages, detected_format = extract_messages(soup)
        # Stable: equal timestamps keep document order.
        messages.sort(key=lambda m: m.timestamp)

        stats = compute_statistics(messages, self.initiation_gap_minutes)
        logger.debug(
            "Analyzed %s: %d messages from %d senders",
            file_name, stats.total_messages, len(stats.senders),
        )
        return assemble_result(
            stats,
            file_name=file_name,
            detected_format=detected_format,
            # Diagnostic only: html.parser counts <html>/<head>/<body> only when
            # the markup has them, other tree builders add them.
            raw_node_count=len(soup.find_all(True)),
            palette=self.palette,
            parsed_at=parsed_at,
            other_attributes=other_attributes,
        )

    def analyze_file(self, path: Path | str) -> ChatAnalysisResult:
        """Read an export file from disk and analyze it."""
        path = Path(path)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise ExportReadError(f"Cannot read export file {path}: {e}") from e
        return self.analyze(data.decode("utf-8", errors="replace"), path.name)

    def analyze_files(
        self, paths: Iterable[Path | str]
    ) -> tuple[list[ChatAnalysisResult], list[ParseFailure]]:
        """Analyze several files, isolating failures per file.

        A bad file never aborts the batch; it shows up in the failure list.
        """
        results: list[ChatAnalysisResult] = []
        failures: list[ParseFailure] = []
        for path in paths:
            path = Path(path)
            try:
                results.append(self.analyze_file(path))
            except ChatInsightsError as e:
                logger.warning("Failed to analyze %s: %s", path.name, e)
                failures.append(ParseFailure(file_name=path.name, error=str(e)))
        return results, failures

    def _parse_tree(self, text: str, file_name: str) -> BeautifulSoup:
        try:
            return BeautifulSoup(text, self.html_parser)
        except FeatureNotFound:
            raise
        except Exception as e:
            raise MalformedDocumentError(f"Cannot parse {file_name}: {e}") from e


def analyze_document(text: str | None, file_name: str, **kwargs) -> ChatAnalysisResult:
    """Analyze one document with a default-configured ChatAnalyzer."""
    parsed_at = kwargs.pop("parsed_at", None)
    other_attributes = kwargs.pop("other_attributes", None)
    return ChatAnalyzer(**kwargs).analyze(
        text, file_name, parsed_at=parsed_at, other_attributes=other_attributes,
    )

"""
Transcripts — discovery, envelope parsing, and aggregate counts.

Conversation logs are JSON-lines files, one per conversation, stored
one level below a projects directory:

    <projects_dir>/<project-slug>/<conversation>.jsonl

Each line is a message envelope: {"type": "user"|"assistant",
"message": {"content": str | [{"type": "text", "text": ...}, ...]}}.
User messages feed the swear analyzers; assistant messages feed the
apology and sycophancy catalogs.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional

from swearcounter.detector import scan_assistant_message, scan_user_message
from swearcounter.lexical import merge_counts, total_count
from swearcounter.rules import RuleSet, default_rules

logger = logging.getLogger(__name__)

_HOME_PREFIX = re.compile(r"-(?:Users|home)-[^-]+-")


@dataclass
class WorstConversation:
    project: str
    swears: int


@dataclass
class ScanCounts:
    """Aggregate tallies across every scanned conversation."""
    swears: dict[str, int] = field(default_factory=dict)
    apologies: dict[str, int] = field(default_factory=dict)
    sycophancy: dict[str, int] = field(default_factory=dict)
    fuzzy_matches: dict[str, int] = field(default_factory=dict)
    indirect_swearing: int = 0
    files_scanned: int = 0
    worst_conversation: Optional[WorstConversation] = None

    @property
    def total_swears(self) -> int:
        return total_count(self.swears)

    @property
    def total_apologies(self) -> int:
        return total_count(self.apologies)

    @property
    def total_sycophancy(self) -> int:
        return total_count(self.sycophancy)

    def merge(self, other: ScanCounts) -> ScanCounts:
        """Fold another tally's counts into this one (files and worst excluded)."""
        merge_counts(self.swears, other.swears)
        merge_counts(self.apologies, other.apologies)
        merge_counts(self.sycophancy, other.sycophancy)
        merge_counts(self.fuzzy_matches, other.fuzzy_matches)
        self.indirect_swearing += other.indirect_swearing
        return self


# ============================================================
# DISCOVERY
# ============================================================

def find_transcript_files(projects_dir: str | Path) -> list[Path]:
    """All top-level conversation logs; sub-agent logs are skipped."""
    root = Path(projects_dir)
    files: list[Path] = []
    try:
        for project in sorted(root.iterdir()):
            if not project.is_dir():
                continue
            for path in sorted(project.iterdir()):
                if path.suffix == ".jsonl" and "subagent" not in path.name:
                    files.append(path)
    except OSError as e:
        # The projects directory may simply not exist yet
        logger.debug("Cannot list transcripts: %s", e, extra={"path": str(root)})
    return files


def project_name(path: Path) -> str:
    """Turn '-Users-jane-code-app' into 'code/app'."""
    slug = _HOME_PREFIX.sub("", path.parent.name, count=1)
    return slug.replace("-", "/")


# ============================================================
# ENVELOPES
# ============================================================

def iter_envelopes(path: str | Path) -> Iterator[dict]:
    """Yield each JSON object in a transcript, skipping blank or bad lines."""
    with open(path, encoding="utf-8", errors="replace") as fh:
        for lineno, line in enumerate(fh, start=1):
            if not line.strip():
                continue
            try:
                envelope = json.loads(line)
            except json.JSONDecodeError:
                logger.debug("Skipping malformed line %d", lineno, extra={"path": str(path)})
                continue
            if isinstance(envelope, dict):
                yield envelope


def _join_text_blocks(content: list) -> str:
    # Blocks with a null or non-string text contribute nothing
    return " ".join(
        block["text"]
        for block in content
        if isinstance(block, dict)
        and block.get("type") == "text"
        and isinstance(block.get("text"), str)
    )


def _message_content(envelope: dict) -> Any:
    message = envelope.get("message")
    if isinstance(message, dict):
        return message.get("content")
    return None


def extract_user_text(envelope: dict) -> Optional[str]:
    """User text, excluding tool results; None for other message types."""
    if envelope.get("type") != "user":
        return None
    content = _message_content(envelope)
    if isinstance(content, list):
        return _join_text_blocks(content)
    if isinstance(content, str):
        return content
    if isinstance(envelope.get("message"), str):
        return envelope["message"]
    return None


def extract_assistant_text(envelope: dict) -> Optional[str]:
    if envelope.get("type") != "assistant":
        return None
    content = _message_content(envelope)
    if isinstance(content, list):
        return _join_text_blocks(content)
    if isinstance(content, str):
        return content
    return None


# ============================================================
# AGGREGATION
# ============================================================

def scan_file(path: Path, rules: Optional[RuleSet] = None) -> ScanCounts:
    """
    Tally one transcript on its own.

    Raises OSError if the file cannot be read; nothing is returned for a
    partially read file, so callers never merge half a conversation.
    """
    rules = rules or default_rules()
    counts = ScanCounts(files_scanned=1)
    for envelope in iter_envelopes(path):
        user_text = extract_user_text(envelope)
        if user_text:
            scan = scan_user_message(user_text, rules)
            merge_counts(counts.swears, scan.swears)
            for match in scan.fuzzy_matches:
                counts.fuzzy_matches[match.label] = counts.fuzzy_matches.get(match.label, 0) + 1
            if scan.has_indirect_swearing:
                counts.indirect_swearing += 1

        assistant_text = extract_assistant_text(envelope)
        if assistant_text:
            scan = scan_assistant_message(assistant_text, rules)
            merge_counts(counts.apologies, scan.apologies)
            merge_counts(counts.sycophancy, scan.sycophancy)
    return counts


def scan_transcripts(
    files: Iterable[str | Path],
    rules: Optional[RuleSet] = None,
) -> ScanCounts:
    """
    Scan every transcript and aggregate the results.

    Unreadable files are logged and skipped; they still count toward
    files_scanned so per-conversation rates stay comparable.
    """
    rules = rules or default_rules()
    files = [Path(f) for f in files]
    counts = ScanCounts(files_scanned=len(files))

    for path in files:
        try:
            file_counts = scan_file(path, rules)
        except OSError as e:
            logger.warning(
                "Skipping unreadable transcript",
                extra={"path": str(path), "error": str(e)},
            )
            continue

        counts.merge(file_counts)
        file_swears = file_counts.total_swears
        worst = counts.worst_conversation
        if file_swears > 0 and (worst is None or file_swears > worst.swears):
            counts.worst_conversation = WorstConversation(project_name(path), file_swears)

    logger.info(
        "Transcript scan complete",
        extra={
            "files_scanned": counts.files_scanned,
            "total_swears": counts.total_swears,
            "total_apologies": counts.total_apologies,
            "total_sycophancy": counts.total_sycophancy,
            "indirect_swearing": counts.indirect_swearing,
        },
    )
    return counts

"""
Mermaid markup normalizer.

Turns raw completion text into best-effort Mermaid markup before it is
handed to the client-side renderer. The work is an ordered pipeline of pure
text stages: trim, strip code fences, cut leading commentary, guarantee a
declaration keyword, and guarantee at least one edge for flowcharts.

The pipeline never raises. Text with no recognisable structure is replaced
by a fixed two-node flowchart so the renderer always receives something
it can draw.

Dependencies: re (stdlib)
System role: Diagram markup post-processing for every model reply and
pasted markup
"""

import logging
import re
from collections.abc import Callable
from enum import Enum
from typing import NamedTuple

logger = logging.getLogger(__name__)


class DiagramKeyword(str, Enum):
    """Declaration keywords accepted at the start of a diagram."""

    GRAPH = "graph"
    FLOWCHART = "flowchart"
    SEQUENCE = "sequenceDiagram"
    CLASS = "classDiagram"
    STATE = "stateDiagram"
    ER = "erDiagram"
    GANTT = "gantt"
    PIE = "pie"
    JOURNEY = "journey"

    @property
    def is_flowchart(self) -> bool:
        """Whether the keyword declares a flowchart-family diagram."""
        return self in FLOWCHART_KEYWORDS


FLOWCHART_KEYWORDS = frozenset({DiagramKeyword.GRAPH, DiagramKeyword.FLOWCHART})

DEFAULT_DECLARATION = "flowchart TD"
DEFAULT_CONNECTION = "    A[Start] --> B[Process]"
FALLBACK_DIAGRAM = "flowchart TD\n    A[Start] --> B[End]"

# "--" alone covers the others; they are kept for readability
CONNECTION_TOKENS = ("-->", "---", "-.->", "==>", "--")

FENCE = "```"

# graph/flowchart take a direction token, so they must be followed by
# whitespace; "Here is the graph:" is not a declaration. Keywords are ASCII:
# without re.ASCII, IGNORECASE folds "ſ" to "s" and "K" to "k".
_DECLARATION_PATTERN = re.compile(
    r"\b(?:(?:{flowchart})(?=\s|$)|(?:{other})\b)".format(
        flowchart="|".join(k.value for k in DiagramKeyword if k.is_flowchart),
        other="|".join(k.value for k in DiagramKeyword if not k.is_flowchart),
    ),
    re.IGNORECASE | re.ASCII,
)
_TAGGED_FENCE_PATTERN = re.compile(r"```[ \t]*mermaid\b", re.IGNORECASE)
_KEYWORDS_BY_NAME = {k.value.casefold(): k for k in DiagramKeyword}

NormalizationStage = Callable[[str], str]


def detect_keyword(text: str) -> DiagramKeyword | None:
    """
    Return the declaration keyword the text starts with.

    Matching is case-insensitive; the text itself is not modified.

    Args:
        text: Candidate diagram markup

    Returns:
        DiagramKeyword | None: Leading keyword, or None when undeclared
    """
    match = _DECLARATION_PATTERN.match(text)
    if match is None:
        return None
    return _KEYWORDS_BY_NAME.get(match.group(0).casefold())


def has_connection(text: str) -> bool:
    """Whether the text contains an arrow-like connection token."""
    return any(token in text for token in CONNECTION_TOKENS)


def needs_fallback(text: str) -> bool:
    """Whether the text has neither a leading keyword nor any edge."""
    return detect_keyword(text) is None and not has_connection(text)


def trim(text: str) -> str:
    return text.strip()


def strip_code_fences(text: str) -> str:
    """
    Keep only the contents of the first code fence.

    A fence tagged ``mermaid`` wins over untagged ones: its body runs to the
    next fence of any kind. Otherwise the text between the first pair of
    fences is kept. An unclosed fence keeps everything after it.
    """
    tagged = _TAGGED_FENCE_PATTERN.search(text)
    if tagged is not None:
        return text[tagged.end():].split(FENCE, 1)[0].strip()
    if FENCE in text:
        return text.split(FENCE)[1].strip()
    return text


def extract_diagram_body(text: str) -> str:
    """Drop any commentary in front of the first declaration keyword."""
    match = _DECLARATION_PATTERN.search(text)
    if match is None:
        return text
    return text[match.start():]


def ensure_declaration(text: str) -> str:
    """
    Guarantee the text starts with a declaration keyword.

    Undeclared text that still has edges becomes a top-down flowchart.
    Anything else is unusable and is replaced by the fallback diagram.
    """
    if needs_fallback(text):
        logger.debug("No diagram structure found, using fallback diagram")
        return FALLBACK_DIAGRAM
    if detect_keyword(text) is None:
        return f"{DEFAULT_DECLARATION}\n{text}"
    return text


def ensure_connectivity(text: str) -> str:
    """Give an edgeless flowchart one default edge."""
    keyword = detect_keyword(text)
    if keyword is not None and keyword.is_flowchart and not has_connection(text):
        return f"{text}\n{DEFAULT_CONNECTION}"
    return text


NORMALIZATION_STAGES: tuple[NormalizationStage, ...] = (
    trim,
    strip_code_fences,
    extract_diagram_body,
    ensure_declaration,
    ensure_connectivity,
)


class NormalizationResult(NamedTuple):
    """Normalized markup and whether the fallback diagram replaced it."""

    diagram: str
    used_fallback: bool


def normalize_with_result(raw: str) -> NormalizationResult:
    """
    Run the normalization pipeline and report how it ended.

    ``used_fallback`` is set only when the declaration stage discarded the
    text, so markup that already equals the fallback diagram is not flagged.

    Args:
        raw: Unprocessed model output or pasted markup

    Returns:
        NormalizationResult: Normalized markup and fallback flag
    """
    text = raw
    used_fallback = False
    for stage in NORMALIZATION_STAGES:
        if stage is ensure_declaration and needs_fallback(text):
            used_fallback = True
        text = stage(text)

    logger.debug(
        f"{__name__}:normalize - raw_len={len(raw)}, normalized_len={len(text)}, "
        f"used_fallback={used_fallback}"
    )
    return NormalizationResult(diagram=text, used_fallback=used_fallback)


def normalize(raw: str) -> str:
    """
    Normalize raw completion text into renderable Mermaid markup.

    Args:
        raw: Unprocessed model output or pasted markup

    Returns:
        str: Non-empty markup starting with a declaration keyword
    """
    return normalize_with_result(raw).diagram

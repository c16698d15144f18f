"""Parser for the AI suggestion block appended to e-book chapters.

Wire format, after the body:

    <!-- AI_SUGGESTIONS -->
    FRAMEWORK: Why-Output-Task 3단계
    IMPROVE: 실패 경험을 추가하면 Real Story가 풍성해져요
    IMAGES: 프로세스 도식, 작업 화면 캡처, 결과물 스크린샷

Fields may come in any order and any of them may be missing. The parser
runs on every streaming update, so it must cope with a half-written
block and never raise.
"""

from __future__ import annotations

import re
from typing import Optional

from blog_writer.content_writer.prompts import NO_FRAMEWORK_TOKEN, SUGGESTIONS_MARKER

from .models import AISuggestions, ParsedOutput

FRAMEWORK = "FRAMEWORK"
IMPROVE = "IMPROVE"
IMAGES = "IMAGES"

# A label also starts a new field mid-line (model wrote two fields on one line)
_LABEL_PATTERN = re.compile(rf"\b({FRAMEWORK}|{IMPROVE}|{IMAGES}):")


def scan_fields(block: str) -> dict[str, str]:
    """Collect labelled values from the text after the marker.

    The first non-empty value of each label wins; labels never seen are
    absent from the result. A label with nothing after it on its line
    takes the next non-blank line, unless that line starts another field.
    """
    fields: dict[str, str] = {}
    pending: Optional[str] = None
    for line in block.splitlines():
        matches = list(_LABEL_PATTERN.finditer(line))
        if not matches:
            value = line.strip()
            if pending and value:
                fields.setdefault(pending, value)
                pending = None
            continue
        pending = None
        for index, match in enumerate(matches):
            end = matches[index + 1].start() if index + 1 < len(matches) else len(line)
            value = line[match.end():end].strip()
            label = match.group(1)
            if value:
                fields.setdefault(label, value)
            elif index == len(matches) - 1 and label not in fields:
                pending = label
    return fields


def _framework(value: Optional[str]) -> Optional[str]:
    if not value or value == NO_FRAMEWORK_TOKEN:
        return None
    return value


def split_images(value: Optional[str]) -> list[str]:
    """Comma-separated image ideas -> trimmed, non-empty entries in order."""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def parse_ai_suggestions(content: str) -> ParsedOutput:
    """Split generated text into body and suggestions.

    Args:
        content: Accumulated generated text (may be partial)

    Returns:
        ParsedOutput; without the marker the body is the input unchanged
    """
    content = content or ""
    marker_index = content.find(SUGGESTIONS_MARKER)
    if marker_index == -1:
        return ParsedOutput(body=content, suggestions=AISuggestions())

    body = content[:marker_index].strip()
    fields = scan_fields(content[marker_index + len(SUGGESTIONS_MARKER):])

    return ParsedOutput(
        body=body,
        suggestions=AISuggestions(
            framework=_framework(fields.get(FRAMEWORK)),
            improve=fields.get(IMPROVE) or None,
            images=split_images(fields.get(IMAGES)),
        ),
    )


def strip_suggestions(content: str) -> str:
    """Body only, without the suggestion block (what the copy action uses)."""
    return parse_ai_suggestions(content).body

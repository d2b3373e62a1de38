"""
JSON extraction from LLM responses.

Models frequently wrap JSON in markdown code fences or add prose around
it; this module isolates the first JSON object or array.
"""

import json
import re
from typing import Any


_CODE_BLOCK_PATTERN = re.compile(r"```(?:json)?\s*([\s\S]*?)```")


def extract_json_from_response(raw_response: str) -> str:
    """
    Extract JSON content from LLM response.

    Handles multiple formats:
    - Raw JSON
    - JSON in markdown code blocks (```json ... ```)
    - JSON with leading/trailing prose

    Args:
        raw_response: Raw LLM response string

    Returns:
        Cleaned JSON string ready for parsing
    """
    content = raw_response.strip()

    match = _CODE_BLOCK_PATTERN.search(content)
    if match:
        content = match.group(1).strip()

    start = min(
        (i for i in (content.find("{"), content.find("[")) if i != -1),
        default=-1,
    )
    if start == -1:
        return content

    opener = content[start]
    closer = "}" if opener == "{" else "]"
    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(content)):
        char = content[i]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == opener:
            depth += 1
        elif char == closer:
            depth -= 1
            if depth == 0:
                return content[start : i + 1]

    # Unbalanced; let the JSON parser report the problem
    return content[start:]


def load_json_response(raw_response: str) -> Any:
    """Extract and decode JSON from an LLM response.

    Raises:
        json.JSONDecodeError: If the extracted content is not valid JSON
    """
    return json.loads(extract_json_from_response(raw_response))

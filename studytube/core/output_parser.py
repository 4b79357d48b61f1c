"""
Tolerant parsing of JSON arrays out of free-text model replies.

Models often wrap the array in code fences, leave trailing commas, forget to
quote keys or use single quotes. `extract_records` strips the wrapping,
tries a strict parse, and only applies the textual repairs when that fails.
The key and quote rewrites never touch text inside double-quoted strings.
Validation of the records themselves happens in the generator.
"""

import json
import re
from typing import Any, Callable, Dict, List

from studytube.core.errors import LLMOutputError

CODE_FENCE = re.compile(r"```(?:json|JSON)?\s*")
TRAILING_COMMA = re.compile(r",(\s*[}\]])")
# Each rewrite pattern matches double-quoted strings first so they are left as is
DOUBLE_QUOTED = r'"(?:[^"\\]|\\.)*"'
BARE_KEY = re.compile(DOUBLE_QUOTED + r"|([{,]\s*)([A-Za-z_][A-Za-z0-9_]*)(\s*):")
SINGLE_QUOTED_VALUE = re.compile(DOUBLE_QUOTED + r"|([:\[,]\s*)'(.*?)'(?=\s*[,}\]])")

SMART_QUOTES = {
    "“": '"',
    "”": '"',
    "‘": "'",
    "’": "'",
}


def strip_code_fences(text: str) -> str:
    return CODE_FENCE.sub("", text)


def outermost_array(text: str) -> str:
    start = text.find("[")
    end = text.rfind("]")
    if start == -1 or end <= start:
        raise LLMOutputError("No JSON array found in model output")
    return text[start:end + 1]


def normalize_quotes(text: str) -> str:
    for smart, plain in SMART_QUOTES.items():
        text = text.replace(smart, plain)
    return text


def remove_trailing_commas(text: str) -> str:
    return TRAILING_COMMA.sub(r"\1", text)


def quote_bare_keys(text: str) -> str:
    def replace(match):
        if match.group(1) is None:
            return match.group(0)
        return f'{match.group(1)}"{match.group(2)}"{match.group(3)}:'
    return BARE_KEY.sub(replace, text)


def convert_single_quotes(text: str) -> str:
    def replace(match):
        if match.group(1) is None:
            return match.group(0)
        return match.group(1) + json.dumps(match.group(2))
    return SINGLE_QUOTED_VALUE.sub(replace, text)


REPAIR_STEPS: List[Callable[[str], str]] = [
    normalize_quotes,
    remove_trailing_commas,
    quote_bare_keys,
    convert_single_quotes,
]


def repair_json_array(raw: str) -> Any:
    """
    Parse the outermost JSON array in a model reply, repairing it if needed.

    Repairs are applied one at a time, cumulatively, and the text is parsed
    after each, so the least invasive repair that works wins.

    Raises:
        LLMOutputError: if no parseable array can be recovered
    """
    if not raw or not raw.strip():
        raise LLMOutputError("Model returned empty output")

    text = outermost_array(strip_code_fences(raw))
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        error = e

    for step in REPAIR_STEPS:
        repaired = step(text)
        if repaired == text:
            continue
        text = repaired
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            error = e

    raise LLMOutputError(f"Could not repair model output: {error}") from error


def _strip_values(record: Dict[str, Any]) -> Dict[str, Any]:
    cleaned = {}
    for key, value in record.items():
        if isinstance(value, str):
            value = value.strip()
        elif isinstance(value, list):
            value = [item.strip() if isinstance(item, str) else item for item in value]
        cleaned[key] = value
    return cleaned


def extract_records(raw: str) -> List[Dict[str, Any]]:
    """
    Turn a model reply into a list of dict records with trimmed string values.

    Entries that are not JSON objects are dropped.

    Raises:
        LLMOutputError: if the reply does not contain a JSON array
    """
    data = repair_json_array(raw)
    if not isinstance(data, list):
        raise LLMOutputError("Parsed data is not an array")
    return [_strip_values(item) for item in data if isinstance(item, dict)]

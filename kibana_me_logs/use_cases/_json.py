"""
Helpers for decoding `cf curl` output.
"""

import json
from typing import Any

from kibana_me_logs.exceptions import MalformedResponseError


def decode_curl_output(lines: list[str], path: str) -> dict[str, Any]:
    """
    Decode the JSON document printed by `cf curl <path>`.

    Raises:
        MalformedResponseError: If the output is empty, not JSON, not an object,
            or a Cloud Controller error document
    """
    text = "\n".join(lines).strip()
    if not text:
        raise MalformedResponseError(f"Empty response from {path}")
    try:
        data = json.loads(text)
    except ValueError as e:
        raise MalformedResponseError(f"Invalid JSON from {path}: {e}")
    if not isinstance(data, dict):
        raise MalformedResponseError(
            f"Expected a JSON object from {path}, got {type(data).__name__}"
        )
    if "error_code" in data or ("code" in data and "description" in data):
        raise MalformedResponseError(
            f"{path} returned an error: {data.get('description') or data.get('error_code')}"
        )
    return data

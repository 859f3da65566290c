import json
import re
from typing import Any, List

from edify.core.errors import ArtifactParseError

# greedy on purpose: first "[" to the LAST "]", across newlines
_ARRAY_RE = re.compile(r"\[.*\]", re.DOTALL)


def extract_json_array(text: str) -> List[Any]:
    """
    Pull the JSON array out of free-form model output.

    Takes the substring from the first '[' to the last ']' inclusive and parses it.
    Prose around the array is ignored. Two separate arrays in one reply will
    therefore fail to parse (the match spans both), which is accepted.

    Raises ArtifactParseError if there is no bracketed substring, it is not
    valid JSON, or it does not decode to a list.
    """
    match = _ARRAY_RE.search(text or "")
    if match is None:
        raise ArtifactParseError("no JSON array found in model output")
    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise ArtifactParseError(f"invalid JSON array: {e}") from e
    except RecursionError as e:
        # absurdly nested output from the model
        raise ArtifactParseError("JSON array nested too deeply") from e
    if not isinstance(data, list):
        raise ArtifactParseError("extracted JSON is not an array")
    return data

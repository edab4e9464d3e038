# kinarai/services/response_extractor.py

"""
Pulls a JSON array out of free model text.

Gemini has no structural guarantee: replies may be wrapped in ```json
fences, preceded by a sentence, or not contain JSON at all. We take the
span from the first "[" to the last "]" and parse it. Anything short of a
clean JSON array is an ExtractionFailure; callers decide what an empty
result means for them.
"""

import json
import logging
from typing import Any, List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from kinarai.core.errors import ExtractionFailure

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def extract_json_array(raw_text: str) -> List[Any]:
    text = (raw_text or "").strip()

    start = text.find("[")
    end = text.rfind("]")
    if start == -1 or end == -1 or end < start:
        raise ExtractionFailure("No JSON array found in model output", raw_text=raw_text)

    try:
        data = json.loads(text[start:end + 1])
    except json.JSONDecodeError as e:
        raise ExtractionFailure(f"Invalid JSON array: {e}", raw_text=raw_text) from e

    if not isinstance(data, list):
        raise ExtractionFailure("Extracted JSON is not an array", raw_text=raw_text)

    return data


def parse_records(items: List[Any], model: Type[T]) -> List[T]:
    records: List[T] = []
    for i, item in enumerate(items):
        if not isinstance(item, dict):
            logger.warning("Skipping %s item %d: not an object (%r)", model.__name__, i, item)
            continue
        try:
            records.append(model.model_validate(item))
        except ValidationError as e:
            logger.warning("Skipping %s item %d: %s", model.__name__, i, e)
    return records


def extract_records(raw_text: str, model: Type[T]) -> List[T]:
    return parse_records(extract_json_array(raw_text), model)

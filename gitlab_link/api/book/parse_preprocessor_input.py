"""Parse the JSON mdBook writes to a preprocessor's stdin."""

import json
from typing import Any

from pydantic import ValidationError

from .PreprocessorContext import PreprocessorContext


def parse_preprocessor_input(raw: str) -> tuple[PreprocessorContext, dict[str, Any]]:
    """Split ``[context, book]`` into a validated context and the raw book.

    Raises:
        ValueError: If the input is not valid JSON or not a ``[context, book]`` pair
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid preprocessor input JSON: {e}") from e

    if not isinstance(data, list) or len(data) != 2:
        raise ValueError("Preprocessor input must be a JSON array [context, book]")

    context_raw, book = data
    if not isinstance(context_raw, dict) or not isinstance(book, dict):
        raise ValueError("Preprocessor input must be a JSON array [context, book] of two objects")

    try:
        context = PreprocessorContext.model_validate(context_raw)
    except ValidationError as e:
        error_list = e.errors()
        first = error_list[0] if error_list else {"msg": str(e), "loc": ()}
        field = ".".join(str(x) for x in first.get("loc", ()))
        detail = f"{field}: {first['msg']}" if field else first["msg"]
        raise ValueError(f"Invalid preprocessor context: {detail}") from e

    return context, book

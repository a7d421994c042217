from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr, ValidationError

COUNT_REQUIRED_ERROR = "Count parameter is required."
NUMBER_REQUIRED_ERROR = "Number parameter is required."

SequenceItem = Union[StrictInt, StrictFloat, StrictStr]


class PatternDetectionInput(BaseModel):
    sequence: List[SequenceItem] = Field(..., min_length=2)


def format_errors(error: ValidationError) -> Dict[str, List[str]]:
    """Flatten a pydantic error into ``{field: [messages]}``.

    Union members add their own tag to ``loc``; only the field and the item
    index are kept so each offending element is reported once per message.
    """
    out: Dict[str, List[str]] = {}
    for err in error.errors():
        loc = [str(p) for p in err["loc"][:2]]
        field = ".".join(loc) or "input"
        messages = out.setdefault(field, [])
        if err["msg"] not in messages:
            messages.append(err["msg"])
    return out


def join_errors(errors: Dict[str, List[str]]) -> str:
    return "; ".join(f"{field}: {', '.join(msgs)}" for field, msgs in errors.items())


def validate_pattern_sequence(sequence: Any) -> Tuple[Optional[List[SequenceItem]], Optional[str]]:
    """Return ``(items, None)`` for a usable sequence, else ``(None, message)``.

    Strings and non-iterables are rejected as a whole; one-shot iterables are
    consumed here, so callers must use the returned list.
    """
    try:
        validated = PatternDetectionInput(sequence=sequence)
    except ValidationError as e:
        return None, join_errors(format_errors(e))
    return validated.sequence, None


def validate_count(count: Optional[int]) -> Optional[str]:
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        return COUNT_REQUIRED_ERROR
    return None


def validate_required_number(n: Optional[float]) -> Optional[str]:
    # 0 is a valid input; only a missing value is rejected
    if n is None:
        return NUMBER_REQUIRED_ERROR
    return None

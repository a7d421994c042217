from __future__ import annotations

from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class LLMOptions(BaseModel):
    """Construction options for a facade; unset fields fall back to the environment."""

    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = None
    model: Optional[str] = None


class NumberAIResult(BaseModel):
    """Base for every operation result.

    Exactly one of the payload field or ``error`` is populated. Payloads are
    kept as the model returned them (no coercion), so a string where a number
    was expected stays a string.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    payload_field: ClassVar[str]

    error: Optional[str] = None

    @model_validator(mode="after")
    def exactly_one_populated(self):
        has_payload = getattr(self, self.payload_field) is not None
        has_error = self.error is not None
        if has_payload == has_error:
            raise ValueError(
                f"exactly one of '{self.payload_field}' or 'error' must be set"
            )
        return self

    @property
    def ok(self) -> bool:
        return self.error is None


class RandomIntResult(NumberAIResult):
    payload_field: ClassVar[str] = "num"
    num: Optional[Any] = None


class RandomFloatResult(RandomIntResult):
    pass


class RandomIntArrayResult(NumberAIResult):
    payload_field: ClassVar[str] = "nums"
    nums: Optional[Any] = None


class RandomFloatArrayResult(RandomIntArrayResult):
    pass


class IsPrimeResult(NumberAIResult):
    payload_field: ClassVar[str] = "is_prime"
    is_prime: Optional[Any] = None


class DescribeNumberResult(NumberAIResult):
    payload_field: ClassVar[str] = "description"
    description: Optional[Any] = None


class PatternDetectionResult(NumberAIResult):
    payload_field: ClassVar[str] = "pattern"
    pattern: Optional[Any] = None


class UnitConversionResult(NumberAIResult):
    payload_field: ClassVar[str] = "value"
    value: Optional[Any] = None
    # "from" is a keyword; serialized under its JSON name
    from_: Optional[Any] = Field(default=None, alias="from")
    to: Optional[Any] = None


class PatternGeneratorResult(NumberAIResult):
    payload_field: ClassVar[str] = "sequence"
    sequence: Optional[Any] = None


class ArithmeticOperationResult(NumberAIResult):
    payload_field: ClassVar[str] = "result"
    result: Optional[Any] = None

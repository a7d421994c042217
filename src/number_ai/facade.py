import logging
import time
from typing import Any, Iterable, Optional, Type, TypeVar, Union

from llm.llm_client import LLMClient, Reply
from llm.providers.base import LLMProvider
from llm.providers.groq_provider import GroqProvider
from llm.providers.openai_provider import OpenAIProvider
from number_ai import prompts
from number_ai.metrics import REQUESTS_TOTAL, REQUEST_LATENCY_SECONDS
from number_ai.models import (
    ArithmeticOperationResult,
    DescribeNumberResult,
    IsPrimeResult,
    LLMOptions,
    NumberAIResult,
    PatternDetectionResult,
    PatternGeneratorResult,
    RandomFloatArrayResult,
    RandomFloatResult,
    RandomIntArrayResult,
    RandomIntResult,
    UnitConversionResult,
)
from number_ai.prompts import Operation
from number_ai.validation import (
    validate_count,
    validate_pattern_sequence,
    validate_required_number,
)

logger = logging.getLogger(__name__)

Number = Union[int, float]
R = TypeVar("R", bound=NumberAIResult)


def _fmt(value: Any) -> str:
    return "not provided" if value is None else str(value)


class NumberAI:
    """Number operations answered by a chat model.

    Every method is a coroutine that performs at most one provider call and
    returns a result model; failures come back in ``result.error`` instead of
    being raised. The instance holds no mutable state, so calls may run
    concurrently.
    """

    def __init__(self, provider: LLMProvider, model: Optional[str] = None):
        self._llm = LLMClient(provider, model=model)

    @property
    def provider(self) -> LLMProvider:
        return self._llm.provider

    @property
    def model(self) -> Optional[str]:
        return self._llm.model

    def _invalid(self, operation: Operation, result_cls: Type[R], message: str) -> R:
        logger.info(f"{operation.value}: rejected before dispatch: {message}")
        REQUESTS_TOTAL.labels(operation=operation.value, outcome="invalid").inc()
        return result_cls(error=message)

    async def _ask(self, operation: Operation, user: str) -> Reply:
        logger.debug(f"{operation.value}: dispatching to model {self.model}")
        started = time.perf_counter()
        reply = await self._llm.ask(
            system=prompts.lookup(operation),
            user=user,
            field=prompts.response_field(operation),
        )
        REQUEST_LATENCY_SECONDS.labels(operation=operation.value).observe(
            time.perf_counter() - started
        )
        REQUESTS_TOTAL.labels(
            operation=operation.value, outcome="ok" if reply.ok else "error"
        ).inc()
        return reply

    async def _run(self, operation: Operation, user: str, result_cls: Type[R]) -> R:
        reply = await self._ask(operation, user)
        if not reply.ok:
            return result_cls(error=reply.error)
        return result_cls(**{result_cls.payload_field: reply.payload})

    async def random_int(self, min: Optional[Number] = None, max: Optional[Number] = None) -> RandomIntResult:
        user = (
            f"MIN: {_fmt(min)}, MAX: {_fmt(max)}. "
            "Please provide a random integer based on the given constraints."
        )
        return await self._run(Operation.RANDOM_INT, user, RandomIntResult)

    async def random_float(self, min: Optional[Number] = None, max: Optional[Number] = None) -> RandomFloatResult:
        user = (
            f"MIN: {_fmt(min)}, MAX: {_fmt(max)}. "
            "Please provide a random float based on the given constraints."
        )
        return await self._run(Operation.RANDOM_FLOAT, user, RandomFloatResult)

    async def random_int_array(
        self,
        count: Optional[int] = None,
        min: Optional[Number] = None,
        max: Optional[Number] = None,
    ) -> RandomIntArrayResult:
        error = validate_count(count)
        if error:
            return self._invalid(Operation.RANDOM_INT_ARRAY, RandomIntArrayResult, error)

        user = (
            f"COUNT: {count}, MIN: {_fmt(min)}, MAX: {_fmt(max)}. "
            "Please provide an array of random integers based on the given constraints."
        )
        return await self._run(Operation.RANDOM_INT_ARRAY, user, RandomIntArrayResult)

    async def random_float_array(
        self,
        count: Optional[int] = None,
        min: Optional[Number] = None,
        max: Optional[Number] = None,
    ) -> RandomFloatArrayResult:
        error = validate_count(count)
        if error:
            return self._invalid(Operation.RANDOM_FLOAT_ARRAY, RandomFloatArrayResult, error)

        user = (
            f"COUNT: {count}, MIN: {_fmt(min)}, MAX: {_fmt(max)}. "
            "Please provide an array of random floats based on the given constraints."
        )
        return await self._run(Operation.RANDOM_FLOAT_ARRAY, user, RandomFloatArrayResult)

    async def is_prime(self, n: Number) -> IsPrimeResult:
        user = f"NUMBER: {_fmt(n)}. Is this number prime?"
        return await self._run(Operation.IS_PRIME, user, IsPrimeResult)

    async def describe_number(self, n: Optional[Number]) -> DescribeNumberResult:
        error = validate_required_number(n)
        if error:
            return self._invalid(Operation.DESCRIBE_NUMBER, DescribeNumberResult, error)

        user = f"NUMBER: {n}. Please describe this number."
        return await self._run(Operation.DESCRIBE_NUMBER, user, DescribeNumberResult)

    async def pattern_detection(self, sequence: Iterable[Union[Number, str]]) -> PatternDetectionResult:
        items, error = validate_pattern_sequence(sequence)
        if error:
            return self._invalid(Operation.PATTERN_DETECTION, PatternDetectionResult, error)

        user = (
            f"SEQUENCE: {', '.join(str(x) for x in items)}. "
            "Please detect the pattern in this sequence."
        )
        return await self._run(Operation.PATTERN_DETECTION, user, PatternDetectionResult)

    async def unit_conversion(self, value: Number, from_unit: str, to_unit: str) -> UnitConversionResult:
        """Convert ``value`` between units.

        A model that cannot convert answers with an error description in
        ``value``; that still counts as a successful result.
        """
        user = (
            f"VALUE: {_fmt(value)}, FROM: {from_unit}, TO: {to_unit}. "
            "Please convert the value."
        )
        reply = await self._ask(Operation.UNIT_CONVERSION, user)
        if not reply.ok:
            return UnitConversionResult(error=reply.error)

        doc = reply.document if isinstance(reply.document, dict) else {}
        return UnitConversionResult(
            value=reply.payload,
            from_=doc.get("from") if doc.get("from") is not None else from_unit,
            to=doc.get("to") if doc.get("to") is not None else to_unit,
        )

    async def pattern_generator(
        self,
        pattern: str,
        from_: Optional[Number] = None,
        to: Optional[Number] = None,
    ) -> PatternGeneratorResult:
        user = (
            f"PATTERN: {pattern}, FROM: {_fmt(from_)}, TO: {_fmt(to)}. "
            "Please generate the sequence."
        )
        return await self._run(Operation.PATTERN_GENERATOR, user, PatternGeneratorResult)

    async def arithmetic_operation(
        self,
        left: Number,
        operator: prompts.ArithmeticOperator,
        right: Optional[Number] = None,
    ) -> ArithmeticOperationResult:
        # operators outside ARITHMETIC_OPERATORS are forwarded unchanged
        user = (
            f"LEFT: {_fmt(left)}, OPERATOR: {operator}, RIGHT: {_fmt(right)}. "
            "Please compute the result."
        )
        return await self._run(Operation.ARITHMETIC_OPERATION, user, ArithmeticOperationResult)


class _VendorNumberAI(NumberAI):
    provider_class: Type[OpenAIProvider] = OpenAIProvider

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None, **provider_kwargs):
        # raises ConfigurationError when no key is configured
        provider = self.provider_class(api_key=api_key, model=model, **provider_kwargs)
        super().__init__(provider)

    @classmethod
    def from_options(cls, options: LLMOptions, **provider_kwargs):
        return cls(api_key=options.api_key, model=options.model, **provider_kwargs)


class NumberAIWithGroq(_VendorNumberAI):
    provider_class = GroqProvider


class NumberAIWithOpenAI(_VendorNumberAI):
    provider_class = OpenAIProvider

"""System prompts for every supported operation.

The wording of each prompt is part of the contract with the response parser:
every prompt names the single JSON field the reply is read from.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, Literal, Tuple

ARITHMETIC_OPERATORS: Tuple[str, ...] = (
    "+",
    "-",
    "*",
    "/",
    "%",
    "^",
    "log",
    "sqrt",
    "abs",
    "sin",
    "cos",
    "tan",
    "mod",
    "floor",
    "ceil",
    "round",
    "min",
    "max",
)

ArithmeticOperator = Literal[
    "+", "-", "*", "/", "%", "^", "log", "sqrt", "abs", "sin", "cos", "tan",
    "mod", "floor", "ceil", "round", "min", "max",
]


class Operation(str, Enum):
    RANDOM_INT = "random_int"
    RANDOM_FLOAT = "random_float"
    RANDOM_INT_ARRAY = "random_int_array"
    RANDOM_FLOAT_ARRAY = "random_float_array"
    IS_PRIME = "is_prime"
    DESCRIBE_NUMBER = "describe_number"
    PATTERN_DETECTION = "pattern_detection"
    UNIT_CONVERSION = "unit_conversion"
    PATTERN_GENERATOR = "pattern_generator"
    ARITHMETIC_OPERATION = "arithmetic_operation"


SYSTEM_PROMPTS: Dict[Operation, str] = {
    Operation.RANDOM_INT: (
        "You are a helpful assistant that generates random integers. "
        "If both minimum and maximum values are provided, generate a random integer between them (inclusive). "
        "If only the minimum value is provided, generate a random integer greater than or equal to that value. "
        "If only the maximum value is provided, generate a random integer less than or equal to that value. "
        "If neither value is provided, generate any random integer. "
        'Provide response in JSON format like this: {"random_integer": <value>}. '
        "Please do not include any additional text or explanations."
    ),
    Operation.RANDOM_FLOAT: (
        "You are a helpful assistant that generates random floats. "
        "If both minimum and maximum values are provided, generate a random float between them (inclusive). "
        "If only the minimum value is provided, generate a random float greater than or equal to that value. "
        "If only the maximum value is provided, generate a random float less than or equal to that value. "
        "If neither value is provided, generate any random float. "
        'Provide response in JSON format like this: {"random_float": <value>}. '
        "Please do not include any additional text or explanations."
    ),
    Operation.RANDOM_INT_ARRAY: (
        "Generate an array of random integers. The user gives the count and optional min/max. "
        "If both min and max are given, generate numbers in that inclusive range. "
        "The array length must match the count. "
        "If only min is given, generate numbers >= min. If only max is given, generate numbers <= max. "
        "If neither is given, generate any integers. "
        'Output only JSON in this format: {"random_int_array": [<value1>, <value2>, ...]} with no extra text.'
    ),
    Operation.RANDOM_FLOAT_ARRAY: (
        "Generate an array of random floats. The user gives the count and optional min/max. "
        "If both min and max are given, generate numbers in that inclusive range. "
        "The array length must match the count. "
        "If only min is given, generate numbers >= min. If only max is given, generate numbers <= max. "
        "If neither is given, generate any floats. "
        'Output only JSON in this format: {"random_float_array": [<value1>, <value2>, ...]} with no extra text.'
    ),
    Operation.IS_PRIME: (
        "Determine if a given integer is prime. "
        "A prime is a natural number >1 with no divisors other than 1 and itself. "
        'Respond only in JSON: {"is_prime": true} or {"is_prime": false}, with no extra text.'
    ),
    Operation.DESCRIBE_NUMBER: (
        "Give an interesting fact or short description about a given number. "
        'Respond only in JSON: {"description": "<your_description_here>"} with no extra text.'
    ),
    Operation.PATTERN_DETECTION: (
        "Detect and describe any patterns in a given sequence of numbers. "
        'Respond only in JSON: {"pattern": "<your_pattern_description_here>"} with no extra text.'
    ),
    Operation.UNIT_CONVERSION: (
        "You are a unit conversion assistant. "
        "Convert the given value from the source unit to the target unit. "
        'Respond only in JSON format: {"value": <value>, "from": "<source unit>", "to": "<target unit>"} '
        "with no extra text. "
        'If the value cannot be converted, fill the "value" field with an appropriate error message '
        "and other fields accordingly."
    ),
    Operation.PATTERN_GENERATOR: (
        "You generate number sequences from a textual rule given by the user. "
        "The user may give a FROM and a TO bound. "
        "If both are given, generate every value of the rule between them (inclusive). "
        "If only FROM is given, generate the first 10 values starting at FROM. "
        "If only TO is given, generate the values up to TO, at most 10. "
        "If neither is given, generate the first 10 values of the rule. "
        'Respond only in JSON: {"sequence": [<value1>, <value2>, ...]} with no extra text.'
    ),
    Operation.ARITHMETIC_OPERATION: (
        "You are a calculator. Apply the given operator to the LEFT and RIGHT operands. "
        "Supported operators: " + ", ".join(ARITHMETIC_OPERATORS) + ". "
        "For sqrt, abs, sin, cos, tan, floor, ceil and round apply the operator to LEFT and ignore RIGHT. "
        "For log use RIGHT as the base. Angles are in radians. "
        'Respond only in JSON: {"result": <number>} with no extra text. '
        'If the operation is undefined, put a short error message in the "result" field.'
    ),
}

RESPONSE_FIELDS: Dict[Operation, str] = {
    Operation.RANDOM_INT: "random_integer",
    Operation.RANDOM_FLOAT: "random_float",
    Operation.RANDOM_INT_ARRAY: "random_int_array",
    Operation.RANDOM_FLOAT_ARRAY: "random_float_array",
    Operation.IS_PRIME: "is_prime",
    Operation.DESCRIBE_NUMBER: "description",
    Operation.PATTERN_DETECTION: "pattern",
    Operation.UNIT_CONVERSION: "value",
    Operation.PATTERN_GENERATOR: "sequence",
    Operation.ARITHMETIC_OPERATION: "result",
}


def lookup(operation: Operation) -> str:
    return SYSTEM_PROMPTS[operation]


def response_field(operation: Operation) -> str:
    return RESPONSE_FIELDS[operation]

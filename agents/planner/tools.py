# Copyright AGNTCY Contributors (https://github.com/agntcy)
# SPDX-License-Identifier: Apache-2.0

"""
Planner Agent Tools

LangChain tools the planner agents may call, registered by the names the
team configuration uses:
- webSearch: SerpAPI Google search
- dateTime: current local date and time
- calculator: arithmetic for budgets and durations
"""

import ast
import json
import logging
import math
import operator
from datetime import datetime
from typing import Optional

from langchain_core.tools import BaseTool, ToolException, tool

from agents.planner.serpapi_tools import search_web
from agents.supervisors.vacation.errors import ConfigurationError

logger = logging.getLogger("vacation.planner.tools")

_BINARY_OPERATORS = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.Div: operator.truediv,
    ast.FloorDiv: operator.floordiv,
    ast.Mod: operator.mod,
    ast.Pow: operator.pow,
}

_UNARY_OPERATORS = {
    ast.UAdd: operator.pos,
    ast.USub: operator.neg,
}

# Keeps "9 ** 9 ** 9" from hanging the agent
_MAX_EXPONENT = 100
# Largest integer result, in bits (about 300 digits)
_MAX_RESULT_BITS = 1024


def evaluate_expression(expression: str) -> float:
    """
    Evaluate an arithmetic expression without executing arbitrary code.

    Supports numbers, parentheses, + - * / // % ** and unary signs.

    Raises:
        ValueError: If the expression contains anything else or is malformed
    """
    try:
        tree = ast.parse(expression.strip(), mode="eval")
    except SyntaxError as e:
        raise ValueError(f"Malformed expression: {expression!r}") from e
    return _evaluate_node(tree.body)


def _evaluate_node(node: ast.AST) -> float:
    if isinstance(node, ast.Constant) and isinstance(node.value, (int, float)) and not isinstance(node.value, bool):
        return node.value
    if isinstance(node, ast.BinOp) and type(node.op) in _BINARY_OPERATORS:
        left = _evaluate_node(node.left)
        right = _evaluate_node(node.right)
        if isinstance(node.op, ast.Pow):
            if abs(right) > _MAX_EXPONENT:
                raise ValueError(f"Exponent too large: {right}")
            if isinstance(left, int) and right > 0 and left.bit_length() * right > _MAX_RESULT_BITS:
                raise ValueError("Result too large")
        try:
            return _check_result(_BINARY_OPERATORS[type(node.op)](left, right))
        except ZeroDivisionError as e:
            raise ValueError("Division by zero") from e
        except OverflowError as e:
            raise ValueError("Result too large") from e
    if isinstance(node, ast.UnaryOp) and type(node.op) in _UNARY_OPERATORS:
        return _UNARY_OPERATORS[type(node.op)](_evaluate_node(node.operand))
    raise ValueError(f"Unsupported element in expression: {type(node).__name__}")


def _check_result(value: float) -> float:
    if isinstance(value, int) and value.bit_length() > _MAX_RESULT_BITS:
        raise ValueError("Result too large")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError("Result too large")
    return value


@tool("webSearch")
async def web_search(query: str, num_results: Optional[int] = None) -> str:
    """
    Search the web for current information about destinations, lodging,
    transportation, activities, restaurants and prices.

    Args:
        query: What to search for
        num_results: Maximum number of results to return

    Returns:
        JSON string with the query, a direct answer if any, and result links
    """
    try:
        data = await search_web(query, num_results)
    except Exception as e:
        logger.error(f"webSearch failed: {e}")
        raise ToolException(f"Web search failed: {e}")
    return json.dumps(data, ensure_ascii=False)


@tool("dateTime")
def date_time(format: Optional[str] = None) -> str:
    """
    Get the current local date and time.

    Args:
        format: Optional strftime format, ISO 8601 when omitted

    Returns:
        The formatted current date and time
    """
    now = datetime.now().astimezone()
    if not format:
        return now.isoformat(timespec="seconds")
    try:
        return now.strftime(format)
    except ValueError as e:
        raise ToolException(f"Invalid date format {format!r}: {e}")


@tool("calculator")
def calculator(expression: str) -> str:
    """
    Evaluate an arithmetic expression such as "2400 - (5 * 180) - 320".

    Args:
        expression: Numbers combined with + - * / // % ** and parentheses

    Returns:
        The numeric result as a string
    """
    try:
        result = evaluate_expression(expression)
        if isinstance(result, float) and result.is_integer():
            result = int(result)
        return str(result)
    except ValueError as e:
        raise ToolException(str(e))


TOOL_REGISTRY: dict[str, BaseTool] = {
    "webSearch": web_search,
    "dateTime": date_time,
    "calculator": calculator,
}


def resolve_tools(
    names: list[str],
    registry: Optional[dict[str, BaseTool]] = None,
) -> list[BaseTool]:
    """
    Look up tools by their registered names.

    Raises:
        ConfigurationError: If a name is not registered
    """
    available = TOOL_REGISTRY if registry is None else registry
    missing = [name for name in names if name not in available]
    if missing:
        raise ConfigurationError(
            f"Unknown tool(s): {', '.join(missing)}. Registered: {', '.join(available) or 'none'}"
        )
    return [available[name] for name in names]

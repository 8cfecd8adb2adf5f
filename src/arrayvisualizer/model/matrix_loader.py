"""
Matrix Loader
=============
Parses user-supplied JSON text into a validated 2D integer matrix.

Why is this file needed?
------------------------
1. Validation: The text box accepts anything. This module is the single place
   that decides whether the text is a rectangular array of 32-bit integers.
2. Error reporting: Every structural problem becomes exactly one LoadError
   whose message names the offending row/column, so the UI can show it verbatim.

Classes:
    LoadError: Base class of all loading failures.
    ParseError: The text is not valid JSON.
    InvalidFormatError: Valid JSON with the wrong shape or content.

Functions:
    load_matrix: JSON text -> read-only numpy int32 array.
"""
from __future__ import annotations

import json
import logging
from typing import Any, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

INT32_MIN: int = int(np.iinfo(np.int32).min)
INT32_MAX: int = int(np.iinfo(np.int32).max)

# Longer digit strings cannot be int32; int() on them may also hit the
# interpreter's int conversion digit limit
MAX_INT_DIGITS: int = 20


class LoadError(ValueError):
    """Raised when JSON text cannot be turned into a matrix."""


class ParseError(LoadError):
    """The input is not syntactically valid JSON."""

    def __init__(self, cause: json.JSONDecodeError | RecursionError) -> None:
        if isinstance(cause, RecursionError):
            detail = "nesting too deep"
        else:
            detail = str(cause)
        super().__init__(f"JSON parse error: {detail}")
        self.cause = cause


class InvalidFormatError(LoadError):
    """The input is valid JSON but not a rectangular array of integers."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid format: {reason}")
        self.reason = reason


def load_matrix(text: str) -> npt.NDArray[np.int32]:
    """
    Load a 2D integer array from JSON text.

    Args:
        text: JSON such as "[[0, 1], [1, 0]]".

    Returns:
        A read-only (rows, cols) numpy array of dtype int32, in input order.

    Raises:
        ParseError: If the text is not valid JSON.
        InvalidFormatError: If the JSON is not a non-empty rectangular array
            of integers that fit into 32 bits.
    """
    try:
        value = json.loads(text, parse_int=_parse_int)
    except (json.JSONDecodeError, RecursionError) as e:
        logger.debug(f"Rejected input, JSON parse error: {e}")
        raise ParseError(e) from e

    try:
        matrix = _build_matrix(value)
    except InvalidFormatError as e:
        logger.debug(f"Rejected input: {e.reason}")
        raise

    logger.debug(f"Loaded matrix with shape {matrix.shape}.")
    return matrix


def _build_matrix(value: Any) -> npt.NDArray[np.int32]:
    if not isinstance(value, list):
        raise InvalidFormatError("root element must be an array")
    if not value:
        raise InvalidFormatError("array cannot be empty")

    first_row = value[0]
    if not isinstance(first_row, list):
        raise InvalidFormatError("each row must be an array")
    cols = len(first_row)
    if cols == 0:
        raise InvalidFormatError("rows cannot be empty")

    rows = len(value)
    matrix = np.empty((rows, cols), dtype=np.int32)

    for row_idx, row in enumerate(value):
        if not isinstance(row, list):
            raise InvalidFormatError(f"row {row_idx} is not an array")
        if len(row) != cols:
            raise InvalidFormatError(
                f"row {row_idx} has {len(row)} columns, expected {cols}"
            )
        for col_idx, cell in enumerate(row):
            matrix[row_idx, col_idx] = _as_int32(cell, row_idx, col_idx)

    matrix.flags.writeable = False
    return matrix


def _as_int32(cell: Any, row_idx: int, col_idx: int) -> int:
    """Validate a single JSON cell and return it as a Python int."""
    if isinstance(cell, _OversizedInt):
        raise InvalidFormatError(
            f"cell at ({row_idx}, {col_idx}) is out of 32-bit integer range"
        )

    # bool is a subclass of int, but JSON true/false are not numbers
    if isinstance(cell, bool):
        raise InvalidFormatError(f"cell at ({row_idx}, {col_idx}) is not an integer")

    if isinstance(cell, int):
        number = cell
    elif isinstance(cell, float) and cell.is_integer():
        number = int(cell)
    else:
        raise InvalidFormatError(f"cell at ({row_idx}, {col_idx}) is not an integer")

    if not INT32_MIN <= number <= INT32_MAX:
        raise InvalidFormatError(
            f"cell at ({row_idx}, {col_idx}) is out of 32-bit integer range"
        )
    return number


class _OversizedInt(str):
    """Digits of a JSON integer too long to be converted, kept for error reporting."""


def _parse_int(digits: str) -> int | _OversizedInt:
    if len(digits.lstrip("-")) > MAX_INT_DIGITS:
        return _OversizedInt(digits)
    return int(digits)

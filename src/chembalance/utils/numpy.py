"""Integer array types for element count data."""

from __future__ import annotations

from typing import Literal, TypeVar

import numpy
from numpy import integer
from numpy.typing import NDArray
from pydantic.functional_serializers import PlainSerializer
from pydantic.functional_validators import BeforeValidator
from typing_extensions import Annotated


def validate_int_array(arr: NDArray | list) -> NDArray:
    """Create an integer array if a nested list is provided.

    Values that do not fit in a 64 bit integer are stored as python ints in an object array.

    """
    if not isinstance(arr, numpy.ndarray):
        arr = numpy.array(arr)
    if arr.dtype.kind not in "iuO":
        raise ValueError(f"Expected an integer array. Got an array with dtype {arr.dtype}.")
    return arr


def array_to_list(arr: NDArray) -> list:
    """Serialize a numpy array as a nested list of python scalars."""
    return arr.tolist()


def check_matrix_shape(X: NDArray, n_rows: int | None = None, n_cols: int | None = None) -> None:
    """Check that an array is a 2D matrix with the expected shape.

    :param X: the array to check
    :param n_rows: the expected number of rows. If ``None``, any number of rows is accepted.
    :param n_cols: the expected number of columns. If ``None``, any number of columns is accepted.
    :raises ValueError: if the array is not 2D or if its shape does not match the expected shape.

    """
    if X.ndim != 2:
        raise ValueError(f"Expected a 2D array. Got an array with {X.ndim} dimensions.")
    rows, cols = X.shape
    if n_rows is not None and rows != n_rows:
        raise ValueError(f"Expected a matrix with {n_rows} rows. Got {rows}.")
    if n_cols is not None and cols != n_cols:
        raise ValueError(f"Expected a matrix with {n_cols} columns. Got {cols}.")


IntDtype = TypeVar("IntDtype", bound=integer)


IntArray = Annotated[
    NDArray[IntDtype],
    BeforeValidator(validate_int_array),
    PlainSerializer(array_to_list, return_type=list),
]

IntArray1D = Annotated[
    NDArray[IntDtype],
    Literal["N"],
    BeforeValidator(validate_int_array),
    PlainSerializer(array_to_list, return_type=list),
]

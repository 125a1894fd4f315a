import numpy as np
import pydantic
import pytest

from chembalance.utils.numpy import IntArray, array_to_list, check_matrix_shape, validate_int_array


class NumpyIntModel(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(arbitrary_types_allowed=True)
    arr: IntArray


class TestValidateIntArray:
    def test_nested_list_is_converted_to_array(self):
        actual = validate_int_array([[1, 2], [3, 4]])
        assert isinstance(actual, np.ndarray)
        assert actual.shape == (2, 2)
        assert np.issubdtype(actual.dtype, np.integer)

    def test_array_is_returned_unchanged(self):
        expected = np.arange(6).reshape((2, 3))
        assert validate_int_array(expected) is expected

    def test_large_integers_are_stored_in_object_array(self):
        actual = validate_int_array([10**20, -(10**20)])
        assert actual.dtype == object
        assert actual.tolist() == [10**20, -(10**20)]

    def test_float_data_raise_error(self):
        with pytest.raises(ValueError):
            validate_int_array([1.5, 2.0])


class TestSerializeIntArray:
    def test_serialize_to_nested_list(self):
        model = NumpyIntModel(arr=np.array([[1, -1], [0, 2]]))
        assert model.model_dump()["arr"] == [[1, -1], [0, 2]]

    def test_array_to_list_returns_python_ints(self):
        actual = array_to_list(np.array([1, 2]))
        assert all(type(x) is int for x in actual)


class TestCheckMatrixShape:
    def test_valid_matrix(self):
        check_matrix_shape(np.zeros((2, 3), dtype=int), n_rows=2, n_cols=3)

    def test_1D_array_raise_error(self):
        with pytest.raises(ValueError):
            check_matrix_shape(np.zeros(3, dtype=int))

    def test_wrong_number_of_rows_raise_error(self):
        with pytest.raises(ValueError):
            check_matrix_shape(np.zeros((2, 3), dtype=int), n_rows=3)

    def test_wrong_number_of_columns_raise_error(self):
        with pytest.raises(ValueError):
            check_matrix_shape(np.zeros((2, 3), dtype=int), n_cols=2)

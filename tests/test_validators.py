import pytest

from src.shift_management.shift_management.common.validators import require_month, require_positive_int, require_year
from src.shift_management.shift_management.core.exceptions import ValidationError


def test_valid_values():
    assert require_year("2024") == 2024
    assert require_month(" 2 ") == 2
    assert require_positive_int("15", "employee id") == 15


@pytest.mark.parametrize("value", [None, "", "abc", "0", "13"])
def test_invalid_month(value):
    with pytest.raises(ValidationError):
        require_month(value)


def test_non_positive_id():
    with pytest.raises(ValidationError):
        require_positive_int("-1", "employee id")

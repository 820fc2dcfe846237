import pytest

from travel.review.domain import Rating
from travel.shared.domain import ValidationException


class TestRating:
    @pytest.mark.parametrize("value", [1, 3, 5])
    def test_valid(self, value):
        assert int(Rating(value)) == value

    @pytest.mark.parametrize("value", [0, 6, -1])
    def test_out_of_range_is_rejected(self, value):
        with pytest.raises(ValidationException):
            Rating(value)

    def test_non_integer_is_rejected(self):
        with pytest.raises(ValidationException):
            Rating(4.5)

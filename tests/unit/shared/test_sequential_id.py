import pytest

from travel.booking.domain import BookingId
from travel.customer.domain import CustomerId
from travel.shared.domain import SequentialId


class TestSequentialId:
    def test_valid_id(self):
        assert SequentialId(1).value == 1
        assert str(SequentialId(42)) == "42"
        assert int(SequentialId(7)) == 7

    @pytest.mark.parametrize("value", [0, -1])
    def test_non_positive_id_is_rejected(self, value):
        with pytest.raises(ValueError):
            SequentialId(value)

    @pytest.mark.parametrize("value", ["1", 1.0, True])
    def test_non_integer_id_is_rejected(self, value):
        with pytest.raises(ValueError):
            SequentialId(value)

    def test_ids_of_different_entities_are_not_equal(self):
        assert CustomerId(1) != BookingId(1)
        assert CustomerId(1) == CustomerId(1)

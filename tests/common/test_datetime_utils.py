import pytest

from labor_tracker.common.datetime_utils import parse_iso_date, truncate_to_day
from labor_tracker.core.exceptions import ValidationError


@pytest.mark.parametrize("value", ["2025-06-01", "2025-06-01T10:00:00", "2025-06-01 10:00:00", "2025-06-01T10:00:00+00:00"])
def test_truncate_to_day(value):
    assert truncate_to_day(value) == "2025-06-01"


def test_parse_iso_date_rejects_garbage():
    with pytest.raises(ValidationError):
        parse_iso_date("01/06/2025")

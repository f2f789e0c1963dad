import time
from datetime import date, datetime

import pandas as pd

from fieldcheck.types import DateType

date_type = DateType()


def test_valid_dates_pass_validate_type():
    assert date_type.validate_type("04 Dec 1995 00:12:00 GMT") is True
    assert date_type.validate_type("2023-01-01") is True
    assert date_type.validate_type("2023-01-01T12:00:00Z") is True
    assert date_type.validate_type(time.time()) is True
    assert date_type.validate_type(datetime.now()) is True
    assert date_type.validate_type(date(2023, 1, 1)) is True
    assert date_type.validate_type(pd.Timestamp("2023-01-01")) is True


def test_invalid_dates_fail_validate_type():
    for value in [
        "04 Dud 1995 00:12:00 GMT",
        "42 Dec 1995 00:12:00 GMT",
        lambda: None,
        None,
        True,
        "str",
        "",
        {},
        [],
        pd.NaT,
        float("nan"),
    ]:
        assert date_type.validate_type(value) is False

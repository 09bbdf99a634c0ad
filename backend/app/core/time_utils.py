# backend/app/core/time_utils.py
from datetime import datetime, timedelta

# Naive UTC epoch. Birthdays are stored naive in UTC and exchanged as epoch ms.
EPOCH = datetime(1970, 1, 1)
_ONE_MS = timedelta(milliseconds=1)


def epoch_millis_to_datetime(millis: int) -> datetime:
    """Raises OverflowError when the instant falls outside datetime's range."""
    return EPOCH + timedelta(milliseconds=millis)


def datetime_to_epoch_millis(value: datetime) -> int:
    if value.tzinfo is not None:
        value = value.replace(tzinfo=None) - value.utcoffset()
    return (value - EPOCH) // _ONE_MS

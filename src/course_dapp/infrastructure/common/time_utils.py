from datetime import UTC, datetime, timedelta

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def to_epoch_millis(value: datetime) -> int:
    """Convert an aware datetime to whole milliseconds since the epoch, flooring sub-ms parts."""
    return (value - EPOCH) // timedelta(milliseconds=1)

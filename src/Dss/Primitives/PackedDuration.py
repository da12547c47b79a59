
import datetime

from ..Exceptions import MalformedDurationError

PACKED_DURATION_LENGTH = 6

## Reads a packed duration from the binary stream at its current position.
## The packed duration is 6 ASCII digits: hh mm ss.
## The hours are not capped at 24 since this is the cumulative length of
## a recording, not a time of day. For instance, "250130" is 25:01:30.
## \param[in] stream - A binary stream that supports the read method.
def read_packed_duration(stream) -> datetime.timedelta:
    field_start_pointer = stream.tell()
    packed_duration = stream.read(PACKED_DURATION_LENGTH)
    if len(packed_duration) != PACKED_DURATION_LENGTH or not packed_duration.isdigit():
        stream.seek(field_start_pointer)
        raise MalformedDurationError(
            f'Packed duration at 0x{field_start_pointer:02x} is not {PACKED_DURATION_LENGTH} ASCII digits: {packed_duration!r}', stream)

    hours = int(packed_duration[0:2])
    minutes = int(packed_duration[2:4])
    seconds = int(packed_duration[4:6])
    return datetime.timedelta(hours = hours, minutes = minutes, seconds = seconds)

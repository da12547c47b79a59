
import datetime

from ..Exceptions import MalformedTimestampError, InvalidDateValueError

## The latest calendar year that a two-digit year may map to. Packed years
## are first read as 20YY; anything later than this rolls back into the 1900s.
## With 2029, "00" through "29" are 2000-2029 and "30" through "99" are 1930-1999.
TWO_DIGIT_YEAR_MAX = 2029

PACKED_DATE_TIME_LENGTH = 12
FIELD_WIDTH = 2

## Reads a packed date-time from the binary stream at its current position.
## The packed date-time is 12 ASCII digits, read as six two-digit fields:
##  YY MM DD hh mm ss
##  |  |  |  |  |  | Second
##  |  |  |  |  | Minute
##  |  |  |  | Hour
##  |  |  | Day
##  |  | Month
##  | Year (windowed by two_digit_year_max)
## \param[in] stream - A binary stream that supports the read method.
## \param[in] two_digit_year_max - The latest year a two-digit year can map to.
## \return A naive datetime.datetime.
def read_packed_date_time(stream, two_digit_year_max: int = TWO_DIGIT_YEAR_MAX) -> datetime.datetime:
    field_start_pointer = stream.tell()
    packed_date_time = stream.read(PACKED_DATE_TIME_LENGTH)
    if len(packed_date_time) != PACKED_DATE_TIME_LENGTH:
        stream.seek(field_start_pointer)
        raise MalformedTimestampError(
            f'Packed date-time at 0x{field_start_pointer:02x} is truncated: {packed_date_time!r}', stream)

    # SPLIT THE FIELD INTO ITS TWO-DIGIT PARTS.
    # bytes.isdigit() only accepts ASCII digits, so signs, spaces,
    # and other characters that int() would tolerate are rejected here.
    parts = []
    for index in range(0, PACKED_DATE_TIME_LENGTH, FIELD_WIDTH):
        part = packed_date_time[index:index + FIELD_WIDTH]
        if not part.isdigit():
            stream.seek(field_start_pointer)
            raise MalformedTimestampError(
                f'Packed date-time at 0x{field_start_pointer:02x} contains non-digit characters: {packed_date_time!r}', stream)
        parts.append(int(part))
    two_digit_year, month, day, hour, minute, second = parts

    # APPLY THE TWO-DIGIT YEAR WINDOW.
    year = 2000 + two_digit_year
    if year > two_digit_year_max:
        year -= 100

    # BUILD THE DATE-TIME.
    # The datetime constructor rejects impossible values rather than normalizing them.
    try:
        return datetime.datetime(year, month, day, hour, minute, second)
    except ValueError as e:
        stream.seek(field_start_pointer)
        raise InvalidDateValueError(
            f'Packed date-time at 0x{field_start_pointer:02x} is not a valid date: {packed_date_time!r} ({e})', stream) from e

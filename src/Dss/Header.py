
## Decodes the fixed 1024-byte header at the start of Olympus DSS
## (Digital Speech Standard) dictation files.
##
## The whole header is read into memory first, and then each field is read
## from its fixed offset. Only these parts of the header are understood:
##  Offset | Length | Contents
##  -------|--------|---------------------------------------------
##       1 |      3 | Format marker, always the ASCII string "dss"
##      38 |     12 | Created-on packed date-time (YYMMDDhhmmss)
##      50 |     12 | Completed-on packed date-time (YYMMDDhhmmss)
##      62 |      6 | Length packed duration (hhmmss)
##     798 |    100 | Comments, NUL-terminated ASCII
## The marker is the only structural check. Nothing else in the header
## (like the byte before the marker) is inspected.

from dataclasses import dataclass
import datetime
import io
import logging

from .Exceptions import NotAValidFileError, InvalidArgumentError
from .Primitives.PackedDateTime import read_packed_date_time, TWO_DIGIT_YEAR_MAX
from .Primitives.PackedDuration import read_packed_duration
from .Primitives.TerminatedString import read_terminated_string

HEADER_LENGTH = 1024

MARKER_OFFSET = 1
MARKER = b'dss'
CREATED_ON_OFFSET = 38
COMPLETED_ON_OFFSET = 50
LENGTH_OFFSET = 62
COMMENTS_OFFSET = 798
COMMENTS_LENGTH = 100

## The metadata decoded from a DSS file header. Immutable once decoded.
@dataclass(frozen = True)
class FileHeader:
    # The caller-supplied label (usually the path) of the decoded file.
    path_name: str
    created_on: datetime.datetime
    completed_on: datetime.datetime
    # The recording length. This can exceed 24 hours.
    length: datetime.timedelta
    comments: str

## Decodes a DSS file header from bytes already read from the start of the file.
## \param[in] header_bytes - The first 1024 bytes of the file. Anything after
##                           the first 1024 bytes is ignored.
## \param[in] source_label - An identifier for the file (e.g. its path), which is
##                           copied into the path_name of the decoded header.
## \param[in] two_digit_year_max - The latest year a two-digit packed year can map to.
## \raises InvalidArgumentError if the source label is empty.
## \raises DssHeaderError (or a subclass) if the header is not valid.
def decode(header_bytes: bytes, source_label: str, two_digit_year_max: int = TWO_DIGIT_YEAR_MAX) -> FileHeader:
    if not source_label:
        raise InvalidArgumentError('A non-empty source label is required.')

    # VERIFY THE WHOLE HEADER IS PRESENT.
    # A short header is treated the same as a malformed one.
    stream = io.BytesIO(bytes(header_bytes[:HEADER_LENGTH]))
    if len(header_bytes) < HEADER_LENGTH:
        raise NotAValidFileError(
            f'{source_label}: Expected a {HEADER_LENGTH}-byte header, but only {len(header_bytes)} bytes are present.', stream)

    # VERIFY THE FORMAT MARKER.
    stream.seek(MARKER_OFFSET)
    marker = stream.read(len(MARKER))
    if marker != MARKER:
        stream.seek(MARKER_OFFSET)
        raise NotAValidFileError(f'{source_label}: Expected marker {MARKER!r}, got {marker!r}.', stream)

    # READ THE TIMESTAMPS.
    stream.seek(CREATED_ON_OFFSET)
    created_on = read_packed_date_time(stream, two_digit_year_max)
    stream.seek(COMPLETED_ON_OFFSET)
    completed_on = read_packed_date_time(stream, two_digit_year_max)

    # READ THE RECORDING LENGTH.
    stream.seek(LENGTH_OFFSET)
    length = read_packed_duration(stream)

    # READ THE COMMENTS.
    stream.seek(COMMENTS_OFFSET)
    comments = read_terminated_string(stream, COMMENTS_LENGTH)

    logging.debug(f'{source_label}: Created {created_on}, completed {completed_on}, length {length}')
    return FileHeader(
        path_name = source_label,
        created_on = created_on,
        completed_on = completed_on,
        length = length,
        comments = comments)

## Reads and decodes a DSS file header from a binary stream.
## The stream MUST be positioned at the start of the file. After this
## function returns, the stream is positioned just past the bytes read.
## Saving and restoring the caller's position is left to the caller (see DssFile).
## \param[in] stream - A binary stream that supports the read and tell methods.
## \param[in] source_label - An identifier for the file (e.g. its path).
## \param[in] two_digit_year_max - The latest year a two-digit packed year can map to.
def read_header(stream, source_label: str, two_digit_year_max: int = TWO_DIGIT_YEAR_MAX) -> FileHeader:
    # VERIFY THE STREAM IS AT THE START.
    if stream.tell() != 0:
        raise InvalidArgumentError(
            f'{source_label}: The stream must be at the start of the file, but it is at 0x{stream.tell():02x}.')

    # READ THE RAW HEADER.
    # A failed read means this is not a usable DSS file.
    try:
        header_bytes = stream.read(HEADER_LENGTH)
    except OSError as e:
        # Nothing usable was read, so there are no bytes to dump.
        raise NotAValidFileError(f'{source_label}: Could not read the header: {e}') from e

    return decode(header_bytes, source_label, two_digit_year_max)

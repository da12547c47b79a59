
from asset_extraction_framework.Exceptions import BinaryParsingError

## The base class for all errors caused by the contents of a DSS file header.
## Like any other BinaryParsingError, the stream passed in should be positioned
## at the start of the offending field so the location of the bad data is known.
class DssHeaderError(BinaryParsingError):
    def __init__(self, message, stream = None, context_length_before = 0x20, context_length_after = 0x20):
        # The hexdump context cannot start before the beginning of the stream.
        # The marker, for one, is within the first 0x20 bytes.
        if stream is not None:
            context_length_before = min(context_length_before, stream.tell())
        super().__init__(message, stream, context_length_before, context_length_after)

## The header is too short to be a DSS header, could not be read,
## or does not carry the "dss" marker.
class NotAValidFileError(DssHeaderError):
    pass

## A packed date-time field contains something other than ASCII digits.
class MalformedTimestampError(DssHeaderError):
    pass

## A packed date-time field contains only digits, but they do not
## describe a real calendar date and time (e.g. month 13 or hour 25).
class InvalidDateValueError(DssHeaderError):
    pass

## The packed duration field contains something other than ASCII digits.
class MalformedDurationError(DssHeaderError):
    pass

## The comment field has no NUL terminator within its fixed length,
## or the text before the terminator is not ASCII.
class MalformedCommentError(DssHeaderError):
    pass

## Raised when the caller misuses the decoder (an empty source label or
## a stream that is not at its start), as opposed to the file being bad.
class InvalidArgumentError(ValueError):
    pass


from ..Exceptions import MalformedCommentError

NUL = b'\x00'

## Reads a NUL-terminated ASCII string stored in a fixed-length field
## from the binary stream at its current position. The whole field is
## always consumed, but anything after the first NUL is ignored.
## \param[in] stream - A binary stream that supports the read method.
## \param[in] field_length - The fixed length of the field, in bytes.
## \return The text before the first NUL, which may be empty.
def read_terminated_string(stream, field_length: int) -> str:
    field_start_pointer = stream.tell()
    field = stream.read(field_length)

    # FIND THE TERMINATOR.
    terminator_index = field.find(NUL)
    if terminator_index == -1:
        stream.seek(field_start_pointer)
        raise MalformedCommentError(
            f'String field at 0x{field_start_pointer:02x} has no NUL terminator in its {field_length} bytes.', stream)

    # DECODE THE TEXT.
    try:
        return field[:terminator_index].decode('ascii')
    except UnicodeDecodeError as e:
        stream.seek(field_start_pointer)
        raise MalformedCommentError(
            f'String field at 0x{field_start_pointer:02x} is not ASCII: {field[:terminator_index]!r}', stream) from e


from asset_extraction_framework.File import File

from .Exceptions import NotAValidFileError
from .Header import FileHeader, read_header
from .Primitives.PackedDateTime import TWO_DIGIT_YEAR_MAX

## An Olympus DSS dictation file. Only the header is read; the audio
## that follows the header is left alone.
class DssFile(File):
    ## Reads the header of the DSS file at the given location.
    ## \param[in] - filepath: The filepath of the file, if it exists on the filesystem.
    ##                        Defaults to None if not provided.
    ## \param[in] - stream: A BytesIO-like object that holds the file data, if the file does
    ##                      not exist on the filesystem. If the stream is seekable, its position
    ##                      is restored after the header is read. Otherwise, it MUST already
    ##                      be at the start of the file and is left just past the header.
    ## \param[in] - two_digit_year_max: The latest year a two-digit packed year can map to.
    ## NOTE: It is an error to provide both a filepath and a stream, as the source of the data
    ##       is then ambiguous.
    def __init__(self, filepath: str = None, stream = None, two_digit_year_max: int = TWO_DIGIT_YEAR_MAX):
        # OPEN THE FILE FOR READING.
        only_filepath_provided = filepath is not None and stream is None
        try:
            super().__init__(filepath = filepath, stream = stream)
        except ValueError as e:
            # An empty file cannot be mapped, and it is certainly too short to hold a header.
            if only_filepath_provided:
                raise NotAValidFileError(f'{filepath}: The file could not be mapped: {e}') from e
            raise
        source_label = filepath or getattr(stream, 'name', None)

        # READ THE HEADER FROM THE START OF THE FILE.
        # Without seeking there is no way to get back to the header, so
        # read_header rejects a stream that is not already at the start.
        if not self._stream_is_seekable():
            self.header: FileHeader = read_header(self.stream, source_label, two_digit_year_max)
            return

        original_position = self.stream.tell()
        self.stream.seek(0)
        try:
            self.header = read_header(self.stream, source_label, two_digit_year_max)
        finally:
            self.stream.seek(original_position)

    ## mmap objects can always seek but do not provide seekable(),
    ## unlike the io streams.
    def _stream_is_seekable(self) -> bool:
        seekable = getattr(self.stream, 'seekable', None)
        if seekable is None:
            return True
        return seekable()

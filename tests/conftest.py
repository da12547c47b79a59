import pytest

from Dss import Header

## Builds a 1024-byte DSS header with the given raw field values placed at
## their documented offsets. Every other byte is zero. Encoding headers is
## only needed to create test data, so this lives with the tests.
def build_header_bytes(
        marker = b'dss',
        created_on = b'130123164500',
        completed_on = b'130123170000',
        length = b'001500',
        comments = b'Test\x00'):
    header = bytearray(Header.HEADER_LENGTH)
    # The byte before the marker is not checked, but real files have one.
    header[0] = 0x02
    header[Header.MARKER_OFFSET:Header.MARKER_OFFSET + len(marker)] = marker
    header[Header.CREATED_ON_OFFSET:Header.CREATED_ON_OFFSET + len(created_on)] = created_on
    header[Header.COMPLETED_ON_OFFSET:Header.COMPLETED_ON_OFFSET + len(completed_on)] = completed_on
    header[Header.LENGTH_OFFSET:Header.LENGTH_OFFSET + len(length)] = length
    header[Header.COMMENTS_OFFSET:Header.COMMENTS_OFFSET + len(comments)] = comments
    return bytes(header)

@pytest.fixture
def build_header():
    return build_header_bytes

## Writes a DSS file with the given header fields (and a bit of fake audio) to disk.
@pytest.fixture
def write_dss_file(tmp_path):
    def write(filename = 'dictation.dss', header_bytes = None, **fields):
        if header_bytes is None:
            header_bytes = build_header_bytes(**fields)
        filepath = tmp_path / filename
        filepath.write_bytes(header_bytes + b'\xaa' * 512)
        return filepath
    return write

#!/usr/bin/python3

## Dumps the raw header of a DSS file, coloring the regions that hold decoded
## fields. Useful for looking at files that fail to decode.

from typing import List, Optional
import argparse

from termcolor import colored

from Dss import Header
from Dss.Primitives.PackedDateTime import PACKED_DATE_TIME_LENGTH
from Dss.Primitives.PackedDuration import PACKED_DURATION_LENGTH

BYTES_PER_ROW = 16

# (start offset, length, color) of each region understood by the decoder.
FIELD_REGIONS = [
    (Header.MARKER_OFFSET, len(Header.MARKER), 'green'),
    (Header.CREATED_ON_OFFSET, PACKED_DATE_TIME_LENGTH, 'cyan'),
    (Header.COMPLETED_ON_OFFSET, PACKED_DATE_TIME_LENGTH, 'magenta'),
    (Header.LENGTH_OFFSET, PACKED_DURATION_LENGTH, 'yellow'),
    (Header.COMMENTS_OFFSET, Header.COMMENTS_LENGTH, 'blue'),
]

## \return The color of the region containing the given offset,
## or None if the decoder does not read that byte.
def get_region_color(offset: int) -> Optional[str]:
    for start, length, color in FIELD_REGIONS:
        if start <= offset < start + length:
            return color
    return None

## Formats the header as hex rows, with each field region colored.
## \param[in] header_bytes - The bytes at the start of the file. Only the
##                           first 1024 are formatted.
## \return One string per row, like "0x0020  00 00 ... |......|".
def format_header_regions(header_bytes: bytes) -> List[str]:
    header_bytes = header_bytes[:Header.HEADER_LENGTH]
    rows = []
    for row_start in range(0, len(header_bytes), BYTES_PER_ROW):
        row = header_bytes[row_start:row_start + BYTES_PER_ROW]
        hex_cells = []
        text_cells = []
        for index, value in enumerate(row):
            color = get_region_color(row_start + index)
            character = chr(value) if 0x20 <= value < 0x7f else '.'
            if color is not None:
                hex_cells.append(colored(f'{value:02x}', color))
                text_cells.append(colored(character, color))
            else:
                hex_cells.append(f'{value:02x}')
                text_cells.append(character)
        rows.append(f'0x{row_start:04x}  {" ".join(hex_cells)}  |{"".join(text_cells)}|')
    return rows

def main(raw_command_line: List[str] = None):
    parser = argparse.ArgumentParser(
        prog = 'DssDump', description = 'Dump the raw header of an Olympus DSS file.')
    parser.add_argument('input', help = 'The DSS file to dump.')
    args = parser.parse_args(raw_command_line)

    with open(args.input, mode = 'rb') as f:
        header_bytes = f.read(Header.HEADER_LENGTH)
    if len(header_bytes) < Header.HEADER_LENGTH:
        print(f'WARNING: Only {len(header_bytes)} of {Header.HEADER_LENGTH} header bytes are present.')

    print('---- START OF DUMP ----')
    for row in format_header_regions(header_bytes):
        print(row)
    print('---- END OF DUMP ----')

if __name__ == '__main__':
    main()

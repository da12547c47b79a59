#! python3

## This program reads the headers of Olympus DSS (Digital Speech Standard)
## dictation files and reports when each recording was made, how long it is,
## and any comments embedded in it.
## Overall Design:
##  - Each matching file is opened and only its fixed 1024-byte header is read.
##    The audio after the header is never touched.
##  - Files with headers that cannot be decoded are reported and skipped so
##    one bad file does not stop a whole directory from being processed.
##  - The decoded headers can be exported to JSON.

from typing import List
import argparse
import os

from asset_extraction_framework.CommandLine import CommandLineArguments
from asset_extraction_framework.Application import Application

from Dss.DssFile import DssFile
from Dss.Exceptions import DssHeaderError
from Dss.Primitives.PackedDateTime import TWO_DIGIT_YEAR_MAX

class DssEngine(Application):
    def __init__(self, application_name: str, two_digit_year_max: int = TWO_DIGIT_YEAR_MAX):
        super().__init__(application_name)
        self.two_digit_year_max = two_digit_year_max
        self.dss_files: List[DssFile] = []
        self.invalid_filepaths: List[str] = []

    def process(self, input_paths):
        # FIND THE DSS FILES.
        matched_dss_files = self.find_matching_files(input_paths, r'.*\.dss$', case_sensitive = False)
        if len(matched_dss_files) == 0:
            print('WARNING: No DSS files found in the input path(s).')
            return

        # READ THE HEADERS.
        for dss_filepath in matched_dss_files:
            try:
                dss_file = DssFile(dss_filepath, two_digit_year_max = self.two_digit_year_max)
            except DssHeaderError as e:
                # Recordings copied off a device are sometimes truncated,
                # but the rest of the directory can still be read.
                print(f'WARNING: Skipping {dss_filepath}, which is not a valid DSS file: {e}')
                self.invalid_filepaths.append(dss_filepath)
                continue

            header = dss_file.header
            print(f'INFO: {header.path_name}: Created {header.created_on}, completed {header.completed_on}, length {header.length}, comments "{header.comments}"')
            self.dss_files.append(dss_file)

    def export_metadata(self, command_line_arguments):
        application_export_subdirectory: str = os.path.join(command_line_arguments.export, self.application_name)
        for dss_file in self.dss_files:
            print(f'INFO: Exporting metadata for {dss_file.header.path_name}')
            dss_file.export_metadata(application_export_subdirectory)

def main(raw_command_line: List[str] = None):
    # PARSE THE DSS-SPECIFIC COMMAND-LINE ARGUMENTS.
    # The remaining arguments are the standard ones shared by all extraction applications.
    dss_argument_parser = argparse.ArgumentParser(add_help = False)
    dss_argument_parser.add_argument(
        '--two-digit-year-max', type = int, default = TWO_DIGIT_YEAR_MAX,
        help = f'The latest year a two-digit year in a header can map to. Defaults to {TWO_DIGIT_YEAR_MAX}.')
    dss_arguments, remaining_command_line = dss_argument_parser.parse_known_args(raw_command_line)

    # PARSE THE COMMAND-LINE ARGUMENTS.
    APPLICATION_NAME = 'DSS Header'
    APPLICATION_DESCRIPTION = 'Reads the headers of Olympus DSS dictation files.'
    command_line = CommandLineArguments(APPLICATION_NAME, APPLICATION_DESCRIPTION)
    command_line_arguments = command_line.parse(remaining_command_line)

    # READ THE HEADERS.
    dss_engine = DssEngine(APPLICATION_NAME, dss_arguments.two_digit_year_max)
    dss_engine.process(command_line_arguments.input)

    # EXPORT THE METADATA, IF REQUESTED.
    if command_line_arguments.export:
        dss_engine.export_metadata(command_line_arguments)

if __name__ == '__main__':
    main()

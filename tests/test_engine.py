import json
import os
import shutil
import subprocess
import tempfile

from Dss import Engine

def test_no_dss_files():
    # An empty directory is not an error, but it is reported.
    empty_directory = tempfile.mkdtemp()
    try:
        engine = Engine.DssEngine('DSS Header')
        engine.process([empty_directory])
        assert engine.dss_files == []
    finally:
        shutil.rmtree(empty_directory)

def test_process_directory(write_dss_file, build_header, capsys):
    # PREPARE A DIRECTORY WITH ONE GOOD AND ONE BAD FILE.
    good_filepath = write_dss_file('GOOD.DSS', comments = b'Ward round\x00')
    bad_filepath = write_dss_file('bad.dss', header_bytes = build_header(marker = b'wav'))
    write_dss_file('ignored.wav')

    # READ THE HEADERS.
    engine = Engine.DssEngine('DSS Header')
    engine.process([os.path.dirname(good_filepath)])

    # VERIFY ONLY THE GOOD FILE WAS DECODED.
    assert [dss_file.header.comments for dss_file in engine.dss_files] == ['Ward round']
    assert [os.path.basename(path) for path in engine.invalid_filepaths] == [os.path.basename(bad_filepath)]
    output = capsys.readouterr().out
    assert 'INFO:' in output and 'Ward round' in output
    assert 'WARNING: Skipping' in output

def test_main_with_two_digit_year_max(write_dss_file, capsys):
    filepath = write_dss_file(created_on = b'450101000000')
    Engine.main([os.path.dirname(filepath), '--two-digit-year-max', '2050'])

    output = capsys.readouterr().out
    assert 'Created 2045-01-01 00:00:00' in output

def test_script_is_runnable():
    # This package includes a command that can be called from the command line,
    # which is defined in setup.py. We shell out rather than just calling the
    # function from Python to make sure the script entry point is installed too.
    CALLABLE_SCRIPT_NAME = 'DssHeader'

    empty_directory = tempfile.mkdtemp()
    try:
        # ATTEMPT TO RUN THE SCRIPT.
        command = [CALLABLE_SCRIPT_NAME, empty_directory]
        result = subprocess.run(command, capture_output = True, text = True)

        # VERIFY THE SCRIPT RAN SUCCESSFULLY.
        script_invoked_successfully = ('No DSS files found' in result.stdout) and (result.returncode == 0)
        if not script_invoked_successfully:
            raise AssertionError(
                f'Received an unexpected result when running `{CALLABLE_SCRIPT_NAME}` from command line!'
                f'\nstdout: {result.stdout}'
                f'\n\nstderr: {result.stderr}')
    finally:
        shutil.rmtree(empty_directory)

def test_empty_file_is_skipped(write_dss_file, tmp_path, capsys):
    write_dss_file('GOOD.DSS')
    (tmp_path / 'empty.dss').write_bytes(b'')

    engine = Engine.DssEngine('DSS Header')
    engine.process([str(tmp_path)])

    assert len(engine.dss_files) == 1
    assert [os.path.basename(path) for path in engine.invalid_filepaths] == ['empty.dss']
    assert 'WARNING: Skipping' in capsys.readouterr().out

def test_export_metadata(write_dss_file):
    # EXPORT THE METADATA.
    filepath = write_dss_file('dictation.dss', comments = b'Ward round\x00')
    temp_dir = tempfile.mkdtemp()
    try:
        Engine.main([os.path.dirname(filepath), '--export', temp_dir])

        # VERIFY THE DECODED FIELDS WERE WRITTEN.
        json_filepath = os.path.join(temp_dir, 'DSS Header', 'dictation.dss', 'dictation.dss.json')
        with open(json_filepath) as json_file:
            metadata = json.load(json_file)
        assert metadata['header']['path_name'] == str(filepath)
        assert metadata['header']['comments'] == 'Ward round'
        assert metadata['header']['created_on'].startswith('2013-01-23T16:45:00')
        assert metadata['header']['completed_on'].startswith('2013-01-23T17:00:00')
    finally:
        shutil.rmtree(temp_dir)

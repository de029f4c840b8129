import io
import logging
import re

from partsdb.logger import setup_logging

TIMESTAMP = r'\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] '


def test_file_gets_everything_console_only_errors(tmp_path):
    log_file = tmp_path / 'logs' / 'app.log'
    console = io.StringIO()
    logger = setup_logging(str(log_file), stream=console)

    logging.getLogger('partsdb.menu').info('Executing query: SELECT * FROM stock ORDER BY id')
    logging.getLogger('partsdb.menu').info('Attempt 1: connection check ERROR: timeout')
    logging.getLogger('partsdb.database').error('could not connect')

    for handler in logger.handlers:
        handler.flush()

    lines = log_file.read_text(encoding='utf-8').splitlines()
    assert len(lines) == 3
    assert all(re.match(TIMESTAMP, line) for line in lines)
    assert lines[0].endswith('Executing query: SELECT * FROM stock ORDER BY id')

    echoed = console.getvalue().splitlines()
    assert len(echoed) == 2
    assert echoed[0].endswith('Attempt 1: connection check ERROR: timeout')
    assert echoed[1].endswith('could not connect')


def test_log_file_is_appended(tmp_path):
    log_file = tmp_path / 'app.log'
    log_file.write_text('[2024-01-01 00:00:00] earlier run\n', encoding='utf-8')

    logger = setup_logging(str(log_file), stream=io.StringIO())
    logger.info('next run')
    for handler in logger.handlers:
        handler.flush()

    lines = log_file.read_text(encoding='utf-8').splitlines()
    assert lines[0] == '[2024-01-01 00:00:00] earlier run'
    assert lines[1].endswith('next run')


def test_setup_twice_does_not_duplicate_handlers(tmp_path):
    setup_logging(str(tmp_path / 'a.log'), stream=io.StringIO())
    logger = setup_logging(str(tmp_path / 'b.log'), stream=io.StringIO())
    assert len(logger.handlers) == 2

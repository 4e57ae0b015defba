"""
ISC License

Copyright (c) 2023 Eric Chickering <eric.chickering@gmail.com>

Permission to use, copy, modify, and/or distribute this software for any
purpose with or without fee is hereby granted, provided that the above
copyright notice and this permission notice appear in all copies.

THE SOFTWARE IS PROVIDED "AS IS" AND THE AUTHOR DISCLAIMS ALL WARRANTIES
WITH REGARD TO THIS SOFTWARE INCLUDING ALL IMPLIED WARRANTIES OF
MERCHANTABILITY AND FITNESS. IN NO EVENT SHALL THE AUTHOR BE LIABLE FOR
ANY SPECIAL, DIRECT, INDIRECT, OR CONSEQUENTIAL DAMAGES OR ANY DAMAGES
WHATSOEVER RESULTING FROM LOSS OF USE, DATA OR PROFITS, WHETHER IN AN ACTION
OF CONTRACT, NEGLIGENCE OR OTHER TORTIOUS ACTION, ARISING OUT OF OR IN
CONNECTION WITH THE USE OR PERFORMANCE OF THIS SOFTWARE.

"""
import argparse
import logging
import sys
import time

from ancestor_path import AncestorExtractionError, AncestorFormatter, extract_ancestors
from config import ConfigurationManager
from log_module import RunLogger

logger = logging.getLogger(__name__)

def build_parser():
    parser = argparse.ArgumentParser(
        prog='xml-ancestor-path',
        description="Write the chain of ancestor elements enclosing the opening tag on a given line of a prettified XML file.",
    )
    parser.add_argument('xml_file', help="Path to the XML file")
    parser.add_argument('line_number', help="Line number of the target element (must be an opening tag)")
    parser.add_argument('output_file', help="Path where the ancestor chain will be written")
    parser.add_argument('-c', '--config', default='~/.xml-ancestor-path/config.yml', help="YAML config file (default: %(default)s)")
    parser.add_argument('-l', '--log-file', help="Debug log file, overrides the config file")
    parser.add_argument('-v', '--verbose', action='store_true', help="Show debug messages on the console")
    parser.add_argument('--summary', action='store_true', help="Repeat this run's warnings and errors at the end")
    return parser

def parse_line_number(value):
    try:
        line_number = int(value)
    except (TypeError, ValueError):
        return None
    return line_number if line_number >= 1 else None

def main(xml_file, line_number, output_file):
    start_time = time.time()
    try:
        logger.info(f"Extracting ancestor chain from {xml_file} at line {line_number}...")

        ancestors = extract_ancestors(xml_file, line_number)
        logger.info(f"Found {len(ancestors)} ancestor(s) in the chain.")

        formatter = AncestorFormatter()
        formatter.format(ancestors, output_file)

        logger.info(f"Success! Ancestor chain written to: {output_file}")
    except AncestorExtractionError as e:
        logger.error(f"Error: {e}")
        return 1
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        logger.debug("Traceback of the unexpected error", exc_info=True)
        return 1

    logger.debug(f"Execution time: {time.time() - start_time:.2f} seconds")
    return 0

def setup_logging(config):
    run_logger = RunLogger(config.log_file, config.console_level, config.file_level,
                           config.log_backup_count, config.log_retention_hours)
    run_logger.setup_logging()
    return run_logger

def cli(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config = ConfigurationManager(args.config).app_config
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.log_file:
        config.log_file = args.log_file
    if args.verbose:
        config.console_level = 'DEBUG'

    run_logger = setup_logging(config)
    start_position = run_logger.mark_start_of_run_in_log()

    line_number = parse_line_number(args.line_number)
    if line_number is None:
        logger.error("Error: Line number must be a positive integer")
        exit_code = 1
    else:
        exit_code = main(args.xml_file, line_number, args.output_file)

    if args.summary:
        run_logger.print_warnings_and_errors_from_log(start_position)
    return exit_code

if __name__ == "__main__":
    sys.exit(cli())

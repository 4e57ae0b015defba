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
import logging
from logging.handlers import TimedRotatingFileHandler
import os
import time

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

class RunLogger:
    def __init__(self, log_file='debug-log.txt', console_level='INFO', file_level='DEBUG', backup_count=1, retention_hours=24):
        self.log_file = log_file
        self.console_level = console_level
        self.file_level = file_level
        self.backup_count = backup_count
        self.retention_hours = retention_hours
        self.handlers = []

    def setup_logging(self):
        # Perform cleanup of old logs before setting up new logging configuration
        self.cleanup_old_logs()

        logger = logging.getLogger('')
        for handler in self.handlers:
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.DEBUG)

        file_handler = TimedRotatingFileHandler(self.log_file, utc=True, when="midnight", interval=1, backupCount=self.backup_count)
        file_handler.setLevel(str(self.file_level).upper())
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

        console_handler = logging.StreamHandler()
        console_handler.setLevel(str(self.console_level).upper())
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))

        self.handlers = [file_handler, console_handler]
        for handler in self.handlers:
            logger.addHandler(handler)

    def mark_start_of_run_in_log(self):
        if os.path.exists(self.log_file):
            position = os.path.getsize(self.log_file)
        else:
            position = 0

        with open(self.log_file, 'a') as file:
            start_marker = f"\n===== Run Start: {time.ctime()} =====\n"
            file.write(start_marker)
        return position

    def print_warnings_and_errors_from_log(self, start_position):
        try:
            with open(self.log_file, 'r') as file:
                file.seek(start_position)  # Jump to the start of the current run
                for line in file:
                    if "WARNING" in line or "ERROR" in line or "CRITICAL" in line:
                        print(line.strip())
        except FileNotFoundError:
            print("Log file not found.")

    def cleanup_old_logs(self):
        if not os.path.exists(self.log_file):
            return

        with open(self.log_file, 'r') as file:
            lines = file.readlines()

        cutoff = time.time() - self.retention_hours * 60 * 60
        with open(self.log_file, 'w') as file:
            file.writelines(line for line in lines if self._logged_after(line, cutoff))

    @staticmethod
    def _logged_after(line, cutoff):
        # Lines without a leading asctime stamp go with the old ones
        parts = line.split()
        if len(parts) < 2:
            return False
        try:
            timestamp = time.strptime(f'{parts[0]} {parts[1]}', '%Y-%m-%d %H:%M:%S,%f')
        except ValueError:
            return False
        return time.mktime(timestamp) > cutoff

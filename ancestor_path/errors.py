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
from enum import Enum


class ErrorKind(Enum):
    """Every way an extraction or formatting request can fail."""
    FILE_NOT_FOUND = 'file_not_found'
    FILE_NOT_READABLE = 'file_not_readable'
    INVALID_LINE_NUMBER = 'invalid_line_number'
    LINE_OUT_OF_RANGE = 'line_out_of_range'
    SELF_CLOSING_TAG_REJECTED = 'self_closing_tag_rejected'
    INCOMPLETE_OR_INVALID_OPENING_TAG = 'incomplete_or_invalid_opening_tag'
    TARGET_NOT_FOUND = 'target_not_found'
    MALFORMED_DOCUMENT = 'malformed_document'
    OUTPUT_DIRECTORY_CREATE_FAILED = 'output_directory_create_failed'
    OUTPUT_WRITE_FAILED = 'output_write_failed'


class AncestorExtractionError(Exception):
    """Base class for failures raised by the extractor and formatter.

    Callers branch on ``kind``; ``message`` is meant for direct display.
    """
    kind = None

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class FileNotFound(AncestorExtractionError):
    kind = ErrorKind.FILE_NOT_FOUND


class FileNotReadable(AncestorExtractionError):
    kind = ErrorKind.FILE_NOT_READABLE


class InvalidLineNumber(AncestorExtractionError):
    kind = ErrorKind.INVALID_LINE_NUMBER


class LineOutOfRange(AncestorExtractionError):
    kind = ErrorKind.LINE_OUT_OF_RANGE


class SelfClosingTagRejected(AncestorExtractionError):
    kind = ErrorKind.SELF_CLOSING_TAG_REJECTED


class IncompleteOrInvalidOpeningTag(AncestorExtractionError):
    kind = ErrorKind.INCOMPLETE_OR_INVALID_OPENING_TAG


class TargetNotFound(AncestorExtractionError):
    kind = ErrorKind.TARGET_NOT_FOUND


class MalformedDocument(AncestorExtractionError):
    kind = ErrorKind.MALFORMED_DOCUMENT


class OutputDirectoryCreateFailed(AncestorExtractionError):
    kind = ErrorKind.OUTPUT_DIRECTORY_CREATE_FAILED


class OutputWriteFailed(AncestorExtractionError):
    kind = ErrorKind.OUTPUT_WRITE_FAILED

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
from .errors import (
    AncestorExtractionError,
    ErrorKind,
    FileNotFound,
    FileNotReadable,
    IncompleteOrInvalidOpeningTag,
    InvalidLineNumber,
    LineOutOfRange,
    MalformedDocument,
    OutputDirectoryCreateFailed,
    OutputWriteFailed,
    SelfClosingTagRejected,
    TargetNotFound,
)
from .extractor import extract_ancestors
from .formatter import AncestorFormatter, escape_attribute
from .models import AncestorChain, AncestorElement, render_opening_tag

__all__ = [
    'AncestorChain',
    'AncestorElement',
    'AncestorExtractionError',
    'AncestorFormatter',
    'ErrorKind',
    'FileNotFound',
    'FileNotReadable',
    'IncompleteOrInvalidOpeningTag',
    'InvalidLineNumber',
    'LineOutOfRange',
    'MalformedDocument',
    'OutputDirectoryCreateFailed',
    'OutputWriteFailed',
    'SelfClosingTagRejected',
    'TargetNotFound',
    'escape_attribute',
    'extract_ancestors',
    'render_opening_tag',
]

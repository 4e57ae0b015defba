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
import os
import re

from lxml import etree

from .errors import (
    FileNotFound,
    FileNotReadable,
    IncompleteOrInvalidOpeningTag,
    InvalidLineNumber,
    LineOutOfRange,
    MalformedDocument,
    SelfClosingTagRejected,
    TargetNotFound,
)
from .models import AncestorChain, AncestorElement

logger = logging.getLogger(__name__)

TRIM_CHARS = ' \t\n\r\0\x0b'
OPENING_TAG_PATTERN = re.compile(r'<[^/][^>]*>')
XML_NAMESPACE = 'http://www.w3.org/XML/1998/namespace'


def extract_ancestors(file_path, target_line: int) -> AncestorChain:
    """
    Return the chain of open elements enclosing the opening tag found on
    ``target_line`` (1-based), root first and the target element last.

    The target line is read straight from the file and must hold exactly one
    complete, non self-closing opening tag. The document is then streamed and
    every element's opening tag is rebuilt from its name and attributes; the
    first element whose rebuilt tag equals the target line text wins and the
    rest of the file is never read.

    Raises an AncestorExtractionError subclass on any failure.
    """
    file_path = os.fspath(file_path)
    validate_file(file_path)
    validate_line_number(target_line)
    target_text = read_target_line(file_path, target_line)
    validate_complete_opening_tag(target_text, target_line)

    logger.debug(f"Looking for '{target_text}' from line {target_line} of {file_path}")
    try:
        with open(file_path, 'rb') as source:
            chain = _match_target(source, target_text, target_line)
    except OSError as e:
        raise FileNotReadable(f"File is not readable: {file_path}") from e

    if chain is None:
        raise TargetNotFound(_not_found_message(target_line))

    logger.debug(f"Matched <{chain[-1].name}> at depth {chain[-1].depth}")
    return chain


def validate_file(file_path):
    if not os.path.exists(file_path):
        raise FileNotFound(f"File not found: {file_path}")
    if not os.path.isfile(file_path) or not os.access(file_path, os.R_OK):
        raise FileNotReadable(f"File is not readable: {file_path}")


def validate_line_number(target_line):
    if isinstance(target_line, bool) or not isinstance(target_line, int) or target_line < 1:
        raise InvalidLineNumber("Line number must be a positive integer")


def read_target_line(file_path, target_line: int) -> str:
    """Trimmed text of ``target_line``. Lines are split on ``\\n`` only."""
    try:
        with open(file_path, 'rb') as handle:
            for line_number, raw_line in enumerate(handle, start=1):
                if line_number == target_line:
                    encoding = 'utf-8-sig' if line_number == 1 else 'utf-8'
                    return raw_line.decode(encoding, errors='replace').strip(TRIM_CHARS)
    except OSError as e:
        raise FileNotReadable(f"File is not readable: {file_path}") from e

    raise LineOutOfRange(f"Line {target_line} is beyond the file length")


def validate_complete_opening_tag(line: str, target_line: int):
    # Self-closing elements have no descendants to point at.
    if line.endswith('/>'):
        raise SelfClosingTagRejected(
            f"Line {target_line} contains a self-closing tag, which is not allowed"
        )

    if not OPENING_TAG_PATTERN.fullmatch(line):
        raise IncompleteOrInvalidOpeningTag(
            f"Line {target_line} does not contain a complete opening tag on a single line"
        )


def _not_found_message(target_line):
    return f"Line {target_line} does not contain a valid opening tag or is beyond the file length"


def _match_target(source, target_text, target_line):
    events = etree.iterparse(
        source,
        events=('start', 'end', 'start-ns'),
        huge_tree=True,
        load_dtd=False,
        no_network=True,
        resolve_entities=False,
    )

    stack = []
    namespace_declarations = []
    # A matching start tag is only confirmed once the next event shows it
    # was not written as <tag/>.
    candidate = None

    try:
        for event, node in events:
            if candidate is not None:
                if event == 'end' and node is candidate and _is_empty(node):
                    logger.debug(f"Skipping self-closing <{stack[-1].name}> with matching attributes")
                    candidate = None
                else:
                    return list(stack)

            if event == 'start-ns':
                namespace_declarations.append(node)
            elif event == 'start':
                element = AncestorElement(
                    name=_qualified_name(node),
                    attributes=_read_attributes(node, namespace_declarations),
                    depth=len(stack),
                )
                namespace_declarations = []
                stack.append(element)
                if element.opening_tag().strip(TRIM_CHARS) == target_text:
                    candidate = node
            else:
                if not stack:
                    raise MalformedDocument(
                        f"Closing tag </{_qualified_name(node)}> has no matching open element"
                    )
                stack.pop()
                _release(node)
    except etree.XMLSyntaxError as e:
        if candidate is not None:
            return list(stack)
        logger.debug(f"Parser stopped before a match: {e}")
        raise TargetNotFound(_not_found_message(target_line)) from e

    return None


def _is_empty(node):
    return node.text is None and len(node) == 0


def _release(node):
    # Keep the partially built tree no larger than the current open path.
    node.clear()
    parent = node.getparent()
    if parent is not None:
        while node.getprevious() is not None:
            del parent[0]


def _qualified_name(node):
    local_name = etree.QName(node).localname
    return f'{node.prefix}:{local_name}' if node.prefix else local_name


def _attribute_name(key, nsmap):
    if not key.startswith('{'):
        return key

    qname = etree.QName(key)
    if qname.namespace == XML_NAMESPACE:
        return f'xml:{qname.localname}'
    for prefix, uri in nsmap.items():
        if prefix and uri == qname.namespace:
            return f'{prefix}:{qname.localname}'
    return qname.localname


def _read_attributes(node, namespace_declarations):
    attributes = {}
    for prefix, uri in namespace_declarations:
        attributes[f'xmlns:{prefix}' if prefix else 'xmlns'] = uri

    nsmap = node.nsmap
    for key, value in node.attrib.items():
        attributes[_attribute_name(key, nsmap)] = value
    return attributes

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
from xml.sax.saxutils import escape

from .errors import OutputDirectoryCreateFailed, OutputWriteFailed
from .models import AncestorChain

logger = logging.getLogger(__name__)


def escape_attribute(value: str) -> str:
    """Escape &, <, > and double quotes. Single quotes are left alone."""
    return escape(value, {'"': '&quot;'})


class AncestorFormatter:
    """
    Writes an ancestor chain as indented opening tags, one per line.

    Closing tags are never written: the output shows the descent path to
    the target, not a well-formed document.
    """
    INDENT_SPACES = 2

    def format(self, ancestors: AncestorChain, output_path) -> None:
        output_path = os.fspath(output_path)
        self.prepare_output_path(output_path)

        output = self.render(ancestors)

        try:
            with open(output_path, 'w', encoding='utf-8', newline='\n') as file:
                file.write(output)
        except OSError as e:
            raise OutputWriteFailed(f"Failed to write output file: {output_path}") from e
        logger.debug(f"Wrote {len(ancestors)} line(s) to {output_path}")

    def render(self, ancestors: AncestorChain) -> str:
        lines = []
        for ancestor in ancestors:
            indent = ' ' * (ancestor.depth * self.INDENT_SPACES)
            line = indent + '<' + ancestor.name
            for name, value in ancestor.attributes.items():
                line += f' {name}="{escape_attribute(value)}"'
            line += '>'
            lines.append(line)

        return '\n'.join(lines) + '\n'

    def prepare_output_path(self, output_path):
        directory = os.path.dirname(output_path)

        if directory and not os.path.isdir(directory):
            try:
                os.makedirs(directory, mode=0o755, exist_ok=True)
            except OSError as e:
                raise OutputDirectoryCreateFailed(f"Failed to create output directory: {directory}") from e
            logger.debug(f"Created output directory {directory}")

        if os.path.exists(output_path) and not os.access(output_path, os.W_OK):
            raise OutputWriteFailed(f"Output file is not writable: {output_path}")

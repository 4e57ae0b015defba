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
from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class AncestorElement:
    """One entry of an ancestor chain.

    ``attributes`` keeps document order; ``depth`` is zero-based, the root
    element sits at depth 0.
    """
    name: str
    attributes: Dict[str, str] = field(default_factory=dict)
    depth: int = 0
    is_self_closing: bool = False

    def opening_tag(self) -> str:
        return render_opening_tag(self.name, self.attributes, self.is_self_closing)


# Root first, target last. chain[i].depth == i.
AncestorChain = List[AncestorElement]


def render_opening_tag(name: str, attributes: Dict[str, str], self_closing: bool = False) -> str:
    """Single-line opening tag text, attribute values taken verbatim."""
    tag = '<' + name
    for attr_name, value in attributes.items():
        tag += f' {attr_name}="{value}"'
    tag += ' />' if self_closing else '>'
    return tag

from typing import Iterator
from xml.etree.ElementTree import Element


def element_text(node: Element) -> str:
    """Concatenated text of the node and all of its descendants."""
    return "".join(node.itertext())


def iter_child_elements(node: Element) -> Iterator[Element]:
    for child in node:
        # Comments and processing instructions carry a callable tag.
        if isinstance(child.tag, str):
            yield child


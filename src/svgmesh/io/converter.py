"""Converters between lxml and domain models.

This module handles the conversion from lxml's element tree to our
namespace-free Element model.
"""

from lxml import etree

from svgmesh.domain.element import Element


def local_name(name: str) -> str:
    """Strip an ``{namespace}`` prefix from a tag or attribute name.

    Examples:
        >>> local_name("{http://www.w3.org/2000/svg}rect")
        'rect'
        >>> local_name("fill")
        'fill'
    """
    return etree.QName(name).localname


def lxml_to_domain(node: etree._Element) -> Element:
    """Convert an lxml element and its descendants to an Element tree.

    Comments, processing instructions and entities have no tag name and
    are skipped. Attribute values are kept as strings.

    Args:
        node: Root lxml element

    Returns:
        Domain Element tree
    """
    root = _convert_single(node)

    stack = [(node, root)]
    while stack:
        source, target = stack.pop()
        for child in source:
            if not isinstance(child.tag, str):
                continue
            converted = _convert_single(child)
            target.children.append(converted)
            stack.append((child, converted))

    return root


def _convert_single(node: etree._Element) -> Element:
    attributes = {local_name(key): value for key, value in node.attrib.items()}
    return Element(name=local_name(node.tag), attributes=attributes)

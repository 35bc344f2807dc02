#
# DecoLabel - dive stop schedule validation library.
#
# Copyright (C) 2026 by DecoLabel Team
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.
#

"""
Dive log tree scanner.

A dive log is converted into a tree of nodes. There are three kinds of
nodes

MAP
    Dictionary, i.e. XML element with attributes and child elements.
SEQUENCE
    List, i.e. XML elements with the same tag and the same parent.
LEAF
    Any other value, i.e. attribute value or element text.

Dive log exporters nest dive records at various levels (i.e. Subsurface
puts dives into ``<dives>`` and ``<trip>`` elements), so the scanner
searches for dive records at any depth of the tree.
"""

import logging
import xml.etree.ElementTree as ET

from .error import LogError

logger = logging.getLogger(__name__)

TEXT_KEY = '#text'


class Node(object):
    """
    Node kind enumeration.
    """
    MAP = 'map'
    SEQUENCE = 'sequence'
    LEAF = 'leaf'


def node_kind(node):
    """
    Determine kind of a node.

    :param node: Tree node.
    """
    if isinstance(node, dict):
        return Node.MAP
    elif isinstance(node, list):
        return Node.SEQUENCE
    else:
        return Node.LEAF


def as_list(node):
    """
    Convert a node into a list of nodes.

    Empty leaf values (`None`, empty string) result in empty list.

    :param node: Tree node.
    """
    if node is None or node == '':
        return []
    return node if node_kind(node) == Node.SEQUENCE else [node]


def first_of(node, *keys):
    """
    Get value of first key, which exists in a map node.

    `None` is returned if the node is not a map or no key exists.

    :param node: Tree node.
    :param keys: Keys to look for.
    """
    if node_kind(node) != Node.MAP:
        return None
    return next((node[k] for k in keys if node.get(k) is not None), None)


def visit(node, f):
    """
    Visit tree nodes depth first, in document order.

    Function `f` is called for every map node.

    :param node: Root node of the tree.
    :param f: Function receiving a map node.
    """
    kind = node_kind(node)
    if kind == Node.MAP:
        f(node)
        children = node.values()
    elif kind == Node.SEQUENCE:
        children = node
    else:
        return

    for child in children:
        visit(child, f)


def find_records(node, key='dive'):
    """
    Find all records stored under a key at any depth of a tree.

    :param node: Root node of the tree.
    :param key: Record key.
    """
    found = []
    visit(node, lambda n: found.extend(as_list(n.get(key))))

    if __debug__:
        logger.debug('found {} record(s) under key "{}"'.format(len(found), key))
    return found


def element_node(elem):
    """
    Convert XML element into a tree node.

    Element attributes and child elements are map keys. Child elements
    with the same tag are converted into a sequence. Element text is stored
    under ``#text`` key, unless element has text only - then the text is
    the node. Empty element is converted into empty string.

    :param elem: XML element.
    """
    node = dict(elem.attrib)
    for child in elem:
        value = element_node(child)
        if child.tag in node:
            prev = node[child.tag]
            if node_kind(prev) != Node.SEQUENCE:
                prev = node[child.tag] = [prev]
            prev.append(value)
        else:
            node[child.tag] = value

    text = (elem.text or '').strip()
    if not node:
        return text
    if text:
        node[TEXT_KEY] = text
    return node


def xml_tree(text):
    """
    Parse XML document into a tree of nodes.

    The root element is the only key of the tree root node. The document
    can be passed as bytes, then its encoding is read from XML declaration.

    :param text: XML document, string or bytes.
    """
    try:
        root = ET.fromstring(text)
    except (ET.ParseError, ValueError) as ex:
        raise LogError('Invalid XML document: {}'.format(ex)) from ex
    return {root.tag: element_node(root)}


# vim: sw=4:et:ai

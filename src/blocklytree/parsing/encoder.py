"""
Blockly XML encoder.

Serializes the tree model back to Blockly XML. Children are written in the
order the Blockly editor itself uses (mutation, fields, values, statements,
next), and mutation attributes are only written when they differ from their
defaults, so decoding the output yields a Document equal to the input.

Text is written by an iterative serializer rather than ET.tostring, which
recurses once per nesting level and cannot cope with long statement stacks.
"""

import logging
from xml.etree import ElementTree as ET
from xml.sax.saxutils import escape

from blocklytree.parsing.options import BLOCKLY_XML_NAMESPACE
from blocklytree.structure.blocks import Block, BlockMutation, Document

logger = logging.getLogger(__name__)

_ATTRIBUTE_ENTITIES = {'"': "&quot;", "\n": "&#10;", "\r": "&#13;", "\t": "&#09;"}
_TEXT_ENTITIES = {"\r": "&#13;"}


def encode_mutation(mutation: BlockMutation) -> ET.Element:
    """
    Encode a mutation, writing only non-default attributes.

    Params:
        mutation: Mutation to encode

    Returns:
        <mutation> element
    """
    element = ET.Element("mutation")

    for attribute in ("at", "at1", "at2"):
        if getattr(mutation, attribute):
            element.set(attribute, "true")
    if mutation.elseif:
        element.set("elseif", str(mutation.elseif))
    if mutation.else_:
        element.set("else", str(mutation.else_))
    if mutation.items:
        element.set("items", str(mutation.items))
    if mutation.mode:
        element.set("mode", mutation.mode)
    if mutation.statement:
        element.set("statement", "true")

    return element


def _encode_single(block: Block) -> tuple[ET.Element, ET.Element | None]:
    """Encode one block without its successor; returns it and its <next> slot."""
    element = ET.Element("block", {"type": block.type})
    if block.x:
        element.set("x", block.x)
    if block.y:
        element.set("y", block.y)

    if block.mutation is not None:
        element.append(encode_mutation(block.mutation))

    for field in block.fields:
        field_element = ET.SubElement(element, "field", {"name": field.name})
        field_element.text = field.value

    for value in block.values:
        value_element = ET.SubElement(element, "value", {"name": value.name})
        for child in value.blocks:
            value_element.append(encode_block(child))

    for statement in block.statements:
        statement_element = ET.SubElement(
            element, "statement", {"name": statement.name}
        )
        for child in statement.blocks:
            statement_element.append(encode_block(child))

    next_element = ET.SubElement(element, "next") if block.next is not None else None
    return element, next_element


def encode_block(block: Block) -> ET.Element:
    """
    Encode a block together with its Next-chain.

    Params:
        block: Head block

    Returns:
        <block> element
    """
    head, slot = _encode_single(block)
    current = block.next
    while current is not None:
        element, next_slot = _encode_single(current)
        slot.append(element)
        slot = next_slot
        current = current.next
    return head


def encode_element(
    document: Document, namespace: str | None = BLOCKLY_XML_NAMESPACE
) -> ET.Element:
    """
    Encode a document to an <xml> element.

    Params:
        document: Document to encode
        namespace: Value for the root xmlns attribute; None omits it

    Returns:
        <xml> root element
    """
    root = ET.Element("xml")
    if namespace:
        root.set("xmlns", namespace)
    for block in document.blocks:
        root.append(encode_block(block))
    return root


def _start_tag(element: ET.Element, empty: bool) -> str:
    attributes = "".join(
        f' {name}="{escape(value, _ATTRIBUTE_ENTITIES)}"'
        for name, value in element.attrib.items()
    )
    return f"<{element.tag}{attributes} />" if empty else f"<{element.tag}{attributes}>"


def serialize_element(root: ET.Element) -> str:
    """
    Serialize an element tree to XML text without recursing.

    Only tags, attributes and element text are written; tails are not,
    since the encoder never produces mixed content.

    Params:
        root: Element to serialize

    Returns:
        XML text without declaration
    """
    parts = []
    # (element, closing) pairs; closing entries emit the end tag
    pending = [(root, False)]

    while pending:
        element, closing = pending.pop()
        if closing:
            parts.append(f"</{element.tag}>")
            continue

        if len(element) == 0 and not element.text:
            parts.append(_start_tag(element, empty=True))
            continue

        parts.append(_start_tag(element, empty=False))
        if element.text:
            parts.append(escape(element.text, _TEXT_ENTITIES))
        pending.append((element, True))
        pending.extend((child, False) for child in reversed(element))

    return "".join(parts)


def encode_document(
    document: Document, namespace: str | None = BLOCKLY_XML_NAMESPACE
) -> str:
    """
    Serialize a document to Blockly XML text.

    Params:
        document: Document to encode
        namespace: Value for the root xmlns attribute; None omits it

    Returns:
        XML text without declaration
    """
    text = serialize_element(encode_element(document, namespace))
    logger.debug("Encoded %d top-level block(s)", len(document.blocks))
    return text

"""
Blockly XML decoder.

This module turns serialized Blockly XML into the immutable tree model.
Decoding is purely structural: it keeps every value, field and statement
socket in serialized order and never checks socket arity, which is the
accessors' job.

Only the elements the tree model knows about are read. Anything else a
Blockly workspace may contain (shadow blocks, comments, variables, data)
is skipped. Namespaces are ignored, so documents carrying the Blockly xmlns
decode the same as bare ones.
"""

import logging
import re
from pathlib import Path
from xml.etree import ElementTree as ET

from blocklytree.exceptions import BlocklyDecodeError, ErrorContext
from blocklytree.parsing.options import DEFAULT_OPTIONS, DecodeOptions
from blocklytree.structure.blocks import (
    Block,
    BlockField,
    BlockMutation,
    BlockStatement,
    BlockValue,
    Document,
)

logger = logging.getLogger(__name__)

_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

# Serialized attribute name -> (model field, kind)
_MUTATION_ATTRIBUTES = {
    "at": ("at", bool),
    "at1": ("at1", bool),
    "at2": ("at2", bool),
    "elseif": ("elseif", int),
    "else": ("else_", int),
    "items": ("items", int),
    "mode": ("mode", str),
    "statement": ("statement", bool),
}


def _local_name(tag: str) -> str:
    """Strip an ElementTree '{namespace}' prefix from a tag."""
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    return tag


def _child_blocks(element: ET.Element) -> list[ET.Element]:
    return [child for child in element if _local_name(child.tag) == "block"]


def _decode_children(
    element: ET.Element, options: DecodeOptions, depth: int
) -> tuple[Block, ...]:
    blocks = []
    for child in _child_blocks(element):
        blocks.append(_decode_chain(child, options, depth))
    return tuple(blocks)


def _character_data(element: ET.Element) -> str:
    """Join every piece of text directly inside an element, skipping child markup."""
    return "".join([element.text or ""] + [child.tail or "" for child in element])


def _parse_bool(raw: str, attribute: str, context: ErrorContext) -> bool:
    if raw in _TRUE_LITERALS:
        return True
    if raw in _FALSE_LITERALS:
        return False
    raise BlocklyDecodeError(
        f"mutation attribute '{attribute}' is not a boolean: {raw!r}", context
    )


def _parse_int(raw: str, attribute: str, context: ErrorContext) -> int:
    if not _INTEGER_PATTERN.fullmatch(raw):
        raise BlocklyDecodeError(
            f"mutation attribute '{attribute}' is not an integer: {raw!r}", context
        )
    return int(raw)


def decode_mutation(
    element: ET.Element, context: ErrorContext | None = None
) -> BlockMutation:
    """
    Decode a <mutation> element.

    Absent or empty attributes keep their defaults (False, 0, ""). Boolean
    and integer attributes are trimmed before parsing.

    Params:
        element: The <mutation> element
        context: Location used in error messages

    Returns:
        Decoded BlockMutation

    Raises:
        BlocklyDecodeError: When a boolean or integer attribute is malformed
    """
    context = context or ErrorContext(element_tag="mutation")
    decoded = {}

    for attribute, (field_name, kind) in _MUTATION_ATTRIBUTES.items():
        raw = element.get(attribute)
        if raw is None:
            continue
        if kind is str:
            decoded[field_name] = raw
            continue

        raw = raw.strip()
        if not raw:
            continue
        if kind is bool:
            decoded[field_name] = _parse_bool(raw, attribute, context)
        else:
            decoded[field_name] = _parse_int(raw, attribute, context)

    return BlockMutation(**decoded)


def _decode_single(
    element: ET.Element, options: DecodeOptions, depth: int, successor: Block | None
) -> Block:
    block_type = element.get("type", "")
    x = element.get("x", "")
    y = element.get("y", "")

    values = []
    fields = []
    statements = []
    mutation = None

    for child in element:
        tag = _local_name(child.tag)

        if tag == "value":
            values.append(
                BlockValue(
                    name=child.get("name", ""),
                    blocks=_decode_children(child, options, depth + 1),
                )
            )
        elif tag == "field":
            fields.append(
                BlockField(name=child.get("name", ""), value=_character_data(child))
            )
        elif tag == "statement":
            statements.append(
                BlockStatement(
                    name=child.get("name", ""),
                    blocks=_decode_children(child, options, depth + 1),
                )
            )
        elif tag == "mutation" and mutation is None:
            mutation = decode_mutation(
                child,
                ErrorContext(block_type=block_type, x=x, y=y, element_tag="mutation"),
            )

    return Block(
        type=block_type,
        x=x,
        y=y,
        values=tuple(values),
        fields=tuple(fields),
        statements=tuple(statements),
        next=successor,
        mutation=mutation,
    )


def _next_element(element: ET.Element) -> ET.Element | None:
    """Return the block held by the first non-empty <next> child, if any."""
    for child in element:
        if _local_name(child.tag) != "next":
            continue
        blocks = _child_blocks(child)
        if blocks:
            return blocks[0]
    return None


def _decode_chain(element: ET.Element, options: DecodeOptions, depth: int) -> Block:
    if depth > options.max_depth:
        raise BlocklyDecodeError(
            f"block nesting exceeds the maximum depth of {options.max_depth}",
            ErrorContext(block_type=element.get("type"), element_tag="block"),
        )

    # Next-chains can be long; walk them iteratively and build from the tail
    chain = []
    current = element
    while current is not None:
        chain.append(current)
        current = _next_element(current)

    successor = None
    for chain_element in reversed(chain):
        successor = _decode_single(chain_element, options, depth, successor)
    return successor


def _decode_top_level(element: ET.Element, options: DecodeOptions) -> Block:
    try:
        return _decode_chain(element, options, 0)
    except RecursionError as e:
        raise BlocklyDecodeError(
            "block nesting exhausted the interpreter stack",
            ErrorContext(block_type=element.get("type"), element_tag="block"),
        ) from e


def decode_block(
    element: ET.Element, options: DecodeOptions | None = None
) -> Block:
    """
    Decode a single <block> element and everything attached to it.

    Params:
        element: The <block> element
        options: Decoder settings; defaults apply when omitted

    Returns:
        Decoded Block, including its Next-chain

    Raises:
        BlocklyDecodeError: When the element is not a block or is malformed
    """
    options = options or DEFAULT_OPTIONS
    tag = _local_name(element.tag)
    if tag != "block":
        raise BlocklyDecodeError(
            f"expected element <block> but found <{tag}>", ErrorContext(element_tag=tag)
        )
    return _decode_top_level(element, options)


def decode_element(
    root: ET.Element, options: DecodeOptions | None = None
) -> Document:
    """
    Decode an already parsed Blockly XML root element.

    Params:
        root: The <xml> root element
        options: Decoder settings; defaults apply when omitted

    Returns:
        Document holding the top-level blocks in serialized order

    Raises:
        BlocklyDecodeError: When the root is not <xml> (and options require it)
            or a block is malformed
    """
    options = options or DEFAULT_OPTIONS
    tag = _local_name(root.tag)
    if options.require_xml_root and tag != "xml":
        raise BlocklyDecodeError(
            f"expected root element <xml> but found <{tag}>", ErrorContext(element_tag=tag)
        )

    blocks = tuple(_decode_top_level(b, options) for b in _child_blocks(root))
    logger.debug("Decoded %d top-level block(s)", len(blocks))
    return Document(blocks=blocks)


def decode_document(
    source: str | bytes, options: DecodeOptions | None = None
) -> Document:
    """
    Decode a serialized Blockly XML document.

    Params:
        source: XML text or bytes
        options: Decoder settings; defaults apply when omitted

    Returns:
        Decoded Document

    Raises:
        BlocklyDecodeError: When the XML is malformed or does not describe
            a block program
    """
    try:
        root = ET.fromstring(source)
    except ET.ParseError as e:
        raise BlocklyDecodeError(f"malformed XML: {e}") from e
    return decode_element(root, options)


def decode_file(
    path: str | Path, options: DecodeOptions | None = None
) -> Document:
    """
    Decode a Blockly XML file.

    Params:
        path: Path to the file
        options: Decoder settings; defaults apply when omitted

    Returns:
        Decoded Document

    Raises:
        BlocklyDecodeError: When the file content cannot be decoded
        OSError: When the file cannot be read
    """
    return decode_document(Path(path).read_bytes(), options)

"""
Blockly XML decoding and encoding.

This package converts between serialized Blockly XML and the immutable
block tree model.
"""

from blocklytree.parsing.decoder import (
    decode_block,
    decode_document,
    decode_element,
    decode_file,
    decode_mutation,
)
from blocklytree.parsing.encoder import (
    encode_block,
    encode_document,
    encode_element,
    encode_mutation,
    serialize_element,
)
from blocklytree.parsing.options import (
    BLOCKLY_XML_NAMESPACE,
    MAX_DECODE_DEPTH,
    DecodeOptions,
)

__all__ = [
    "DecodeOptions",
    "BLOCKLY_XML_NAMESPACE",
    "MAX_DECODE_DEPTH",
    "decode_document",
    "decode_file",
    "decode_element",
    "decode_block",
    "decode_mutation",
    "encode_document",
    "encode_element",
    "encode_block",
    "encode_mutation",
    "serialize_element",
]

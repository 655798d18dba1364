"""
blocklytree - Block tree model and structural accessors for Blockly programs

blocklytree decodes Blockly XML into an immutable tree and provides the
name-keyed lookups an interpreter uses to walk it.
"""

from importlib.metadata import version

from blocklytree.access import (
    block_statement_with_name,
    block_value_with_name,
    field_with_name,
    single_block_statement_with_name,
    single_block_value_with_name,
    single_field_with_name,
)
from blocklytree.diagnostics import DiagnosticCollector, FailureChannel
from blocklytree.parsing import decode_document, decode_file, encode_document
from blocklytree.structure import (
    Block,
    BlockField,
    BlockMutation,
    BlockStatement,
    BlockValue,
    Document,
    iter_chain,
    walk,
)

__version__ = version("blocklytree")

__all__ = [
    "__version__",
    "Document",
    "Block",
    "BlockValue",
    "BlockField",
    "BlockStatement",
    "BlockMutation",
    "FailureChannel",
    "DiagnosticCollector",
    "decode_document",
    "decode_file",
    "encode_document",
    "field_with_name",
    "single_field_with_name",
    "block_value_with_name",
    "block_statement_with_name",
    "single_block_value_with_name",
    "single_block_statement_with_name",
    "iter_chain",
    "walk",
]

"""
Block tree data model.

This module defines the immutable structures a decoded Blockly program is
made of. The model is passive: it records exactly what the serialized
program contains, in serialized order, and performs no validation. Whether
a socket holds the right number of blocks is decided by the accessors in
blocklytree.access.
"""

from blocklytree.core.tree_node import TreeNode
from blocklytree.core.types import Position


class BlockField(TreeNode):
    """
    Named literal attached directly to a block.

    Params:
        name: Field name (e.g., "NUM", "VAR", "OP")
        value: Text payload, kept verbatim; may be empty
    """

    name: str
    value: str = ""


class BlockMutation(TreeNode):
    """
    Structural metadata altering how a block's sockets are interpreted.

    The meaning of each attribute is block-type specific. For example an
    "if" block records its number of elseif clauses in `elseif` and whether
    it has an else clause in `else_`. Absent attributes take their defaults,
    which are meaningful states rather than errors.

    Params:
        at: Boolean flag used by list/text accessor blocks
        at1: First range endpoint flag for sublist/substring blocks
        at2: Second range endpoint flag for sublist/substring blocks
        elseif: Number of elseif clauses
        else_: Number of else clauses (serialized as "else")
        items: Number of item sockets on list/text builder blocks
        mode: Block-specific mode string (e.g., "GET", "REMOVE")
        statement: Whether the block is used in statement position
    """

    at: bool = False
    at1: bool = False
    at2: bool = False
    elseif: int = 0
    else_: int = 0
    items: int = 0
    mode: str = ""
    statement: bool = False


class BlockValue(TreeNode):
    """
    Named expression socket.

    Holds zero or more blocks as serialized, though consumers only accept
    it when exactly one block is attached.
    """

    name: str
    blocks: tuple["Block", ...] = ()


class BlockStatement(TreeNode):
    """
    Named statement socket.

    Holds the head of a stack of statement blocks; the rest of the stack is
    reached through each block's `next`.
    """

    name: str
    blocks: tuple["Block", ...] = ()


class Block(TreeNode):
    """
    A single block of a visual program.

    Params:
        type: Type tag identifying the block's semantics (e.g., "math_number")
        x: Horizontal position, verbatim as serialized
        y: Vertical position, verbatim as serialized
        values: Expression sockets in serialized order
        fields: Literal fields in serialized order
        statements: Statement sockets in serialized order
        next: Following block in the vertical stack, if any
        mutation: Structural metadata, if the block carries any
    """

    type: str = ""
    x: Position = ""
    y: Position = ""
    values: tuple[BlockValue, ...] = ()
    fields: tuple[BlockField, ...] = ()
    statements: tuple[BlockStatement, ...] = ()
    next: "Block | None" = None
    mutation: BlockMutation | None = None

    # Equality, hashing and repr never recurse into attached blocks

    def _structure_key(self) -> tuple:
        """Flatten this block and everything attached to it, in pre-order."""
        key = []
        pending = [self]

        while pending:
            block = pending.pop()
            key.append(
                (
                    block.type,
                    block.x,
                    block.y,
                    block.fields,
                    block.mutation,
                    tuple((v.name, len(v.blocks)) for v in block.values),
                    tuple((s.name, len(s.blocks)) for s in block.statements),
                    block.next is not None,
                )
            )

            children = [b for v in block.values for b in v.blocks]
            children.extend(b for s in block.statements for b in s.blocks)
            if block.next is not None:
                children.append(block.next)
            pending.extend(reversed(children))

        return tuple(key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Block):
            return NotImplemented
        return self is other or self._structure_key() == other._structure_key()

    def __hash__(self) -> int:
        return hash(self._structure_key())

    def __repr_args__(self):
        yield "type", self.type
        yield "x", self.x
        yield "y", self.y
        yield "values", [v.name for v in self.values]
        yield "fields", self.fields
        yield "statements", [s.name for s in self.statements]
        yield "next", self.next.type if self.next is not None else None
        yield "mutation", self.mutation


class Document(TreeNode):
    """
    Root container of a decoded program.

    Params:
        blocks: Top-level blocks in serialized order
    """

    blocks: tuple[Block, ...] = ()


BlockValue.model_rebuild()
BlockStatement.model_rebuild()
Block.model_rebuild()

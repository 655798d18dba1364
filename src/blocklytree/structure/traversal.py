"""
Read-only traversal helpers over a decoded block tree.

These cover the access patterns name-based lookup does not, such as
following a Next-chain or visiting every block of a program.
"""

from collections.abc import Iterator

from blocklytree.structure.blocks import Block, Document


def iter_chain(block: Block | None) -> Iterator[Block]:
    """
    Iterate a vertical stack of statement blocks.

    Params:
        block: Head of the stack; None yields nothing

    Returns:
        Iterator over the head and each following block, in order
    """
    current = block
    while current is not None:
        yield current
        current = current.next


def walk(root: Block | Document) -> Iterator[Block]:
    """
    Visit every block reachable from a block or document, depth first.

    Within a block, value sockets are visited before statement sockets,
    each in serialized order, and the block's `next` successor comes last.

    Params:
        root: Block or Document to start from

    Returns:
        Iterator over blocks in pre-order
    """
    pending = list(reversed(root.blocks)) if isinstance(root, Document) else [root]

    while pending:
        block = pending.pop()
        yield block

        children: list[Block] = []
        for value in block.values:
            children.extend(value.blocks)
        for statement in block.statements:
            children.extend(statement.blocks)
        if block.next is not None:
            children.append(block.next)

        pending.extend(reversed(children))

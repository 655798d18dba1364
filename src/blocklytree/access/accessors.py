"""
Name-keyed lookups over decoded blocks.

The lookups come in two flavours. The plain ones (`field_with_name`,
`block_value_with_name`, `block_statement_with_name`) return the matching
child or None and never report anything, so callers can look up optional
sockets. The `single_*` ones resolve a name to exactly the shape the caller
needs; when the tree does not provide it they report to the failure channel
and return a safe default ("" or None) instead of raising.

All lookups scan in serialized order and the first match by name wins.
"""

from blocklytree.diagnostics import FailureChannel
from blocklytree.structure.blocks import Block, BlockField, BlockStatement, BlockValue

SOCKET_ARITY_MESSAGE = "Block socket does not have exactly one block attached to it."


def field_with_name(block: Block, name: str) -> BlockField | None:
    """
    Fetch the field with the given name.

    Params:
        block: Block whose fields are searched
        name: Field name

    Returns:
        First field named `name`, or None if the block has none
    """
    for field in block.fields:
        if field.name == name:
            return field
    return None


def single_field_with_name(channel: FailureChannel, block: Block, name: str) -> str:
    """
    Fetch the text of the field with the given name.

    Params:
        channel: Failure channel notified when the field is missing
        block: Block whose fields are searched
        name: Field name

    Returns:
        The field's text, or "" if the field does not exist
    """
    field = field_with_name(block, name)
    if field is None:
        channel.fail(f"No field named {name}")
        return ""
    return field.value


def block_value_with_name(block: Block, name: str) -> BlockValue | None:
    """
    Fetch the value socket with the given name.

    Params:
        block: Block whose value sockets are searched
        name: Socket name

    Returns:
        First value socket named `name`, or None if the block has none
    """
    for value in block.values:
        if value.name == name:
            return value
    return None


def block_statement_with_name(block: Block, name: str) -> BlockStatement | None:
    """
    Fetch the statement socket with the given name.

    Params:
        block: Block whose statement sockets are searched
        name: Socket name

    Returns:
        First statement socket named `name`, or None if the block has none
    """
    for statement in block.statements:
        if statement.name == name:
            return statement
    return None


def single_block_value_with_name(
    channel: FailureChannel, block: Block, name: str
) -> Block | None:
    """
    Resolve a value socket to the one block attached to it.

    Params:
        channel: Failure channel notified when the socket is missing or
            does not hold exactly one block
        block: Block whose value sockets are searched
        name: Socket name

    Returns:
        The attached block itself, or None on failure
    """
    value = block_value_with_name(block, name)
    if value is None:
        channel.fail(f"No block with value {name}")
        return None
    if len(value.blocks) != 1:
        channel.fail(SOCKET_ARITY_MESSAGE)
        return None
    return value.blocks[0]


def single_block_statement_with_name(
    channel: FailureChannel, block: Block, name: str
) -> Block | None:
    """
    Resolve a statement socket to the head of its stack.

    Params:
        channel: Failure channel notified when the socket is missing or
            does not hold exactly one block
        block: Block whose statement sockets are searched
        name: Socket name

    Returns:
        The first block of the stack, or None on failure
    """
    statement = block_statement_with_name(block, name)
    if statement is None:
        channel.fail(f"No statement with name {name}")
        return None
    if len(statement.blocks) != 1:
        channel.fail(SOCKET_ARITY_MESSAGE)
        return None
    return statement.blocks[0]

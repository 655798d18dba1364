"""
Tests for the name-keyed block accessors.

Focus Areas:
1. Non-failing lookups return the first match or None without reporting
2. Single-shape lookups report exactly one failure per violated contract
3. Resolved blocks are the objects held by the tree, not copies
"""

from blocklytree.access import (
    SOCKET_ARITY_MESSAGE,
    block_statement_with_name,
    block_value_with_name,
    field_with_name,
    single_block_statement_with_name,
    single_block_value_with_name,
    single_field_with_name,
)
from blocklytree.structure import Block, BlockField, BlockStatement, BlockValue


class TestFieldWithName:
    """Test plain field lookup."""

    def test_existing_field_returns_verbatim_text(self, controls_if_block):
        condition = controls_if_block.values[0].blocks[0]

        field = field_with_name(condition, "BOOL")

        assert field is not None
        assert field.value == "TRUE"

    def test_empty_field_text_is_kept(self):
        block = Block(type="text", fields=(BlockField(name="TEXT", value=""),))

        field = field_with_name(block, "TEXT")

        assert field is not None
        assert field.value == ""

    def test_missing_field_returns_none_without_reporting(self, collector):
        block = Block(type="math_number")

        assert field_with_name(block, "NUM") is None
        assert collector.count == 0

    def test_first_duplicate_wins(self):
        block = Block(
            type="math_number",
            fields=(BlockField(name="NUM", value="1"), BlockField(name="NUM", value="2")),
        )

        assert field_with_name(block, "NUM").value == "1"


class TestSingleFieldWithName:
    """Test field text lookup with failure reporting."""

    def test_returns_field_text(self, collector):
        block = Block(type="math_number", fields=(BlockField(name="NUM", value="42"),))

        assert single_field_with_name(collector, block, "NUM") == "42"
        assert not collector.failed

    def test_missing_field_reports_once_and_returns_empty(self, collector):
        block = Block(type="math_number")

        result = single_field_with_name(collector, block, "X")

        assert result == ""
        assert collector.count == 1
        assert "X" in collector.reasons[0]
        assert collector.reasons[0] == "No field named X"

    def test_empty_field_is_not_a_failure(self, collector):
        block = Block(type="text", fields=(BlockField(name="TEXT"),))

        assert single_field_with_name(collector, block, "TEXT") == ""
        assert collector.count == 0


class TestBlockValueWithName:
    """Test plain value socket lookup."""

    def test_existing_socket_returned(self, controls_if_block):
        value = block_value_with_name(controls_if_block, "IF0")

        assert value is controls_if_block.values[0]

    def test_missing_socket_returns_none(self, controls_if_block):
        assert block_value_with_name(controls_if_block, "IF1") is None

    def test_statement_names_are_not_values(self, controls_if_block):
        assert block_value_with_name(controls_if_block, "DO0") is None


class TestBlockStatementWithName:
    """Test plain statement socket lookup."""

    def test_existing_socket_returned(self, controls_if_block):
        statement = block_statement_with_name(controls_if_block, "DO0")

        assert statement is controls_if_block.statements[0]

    def test_missing_socket_returns_none(self, controls_if_block):
        assert block_statement_with_name(controls_if_block, "ELSE") is None


class TestSingleBlockValueWithName:
    """Test value socket resolution to exactly one block."""

    def test_single_block_returned_by_identity(self, collector):
        operand = Block(type="math_number", fields=(BlockField(name="NUM", value="3"),))
        block = Block(type="math_single", values=(BlockValue(name="A", blocks=(operand,)),))

        result = single_block_value_with_name(collector, block, "A")

        assert result is operand
        assert collector.count == 0

    def test_two_blocks_report_arity_violation(self, collector, malformed_block):
        result = single_block_value_with_name(collector, malformed_block, "A")

        assert result is None
        assert collector.reasons == [SOCKET_ARITY_MESSAGE]

    def test_empty_socket_reports_arity_violation(self, collector, malformed_block):
        result = single_block_value_with_name(collector, malformed_block, "B")

        assert result is None
        assert collector.reasons == [SOCKET_ARITY_MESSAGE]

    def test_missing_socket_reports_name(self, collector, malformed_block):
        result = single_block_value_with_name(collector, malformed_block, "C")

        assert result is None
        assert collector.reasons == ["No block with value C"]

    def test_first_duplicate_socket_decides(self, collector):
        first = Block(type="math_number")
        block = Block(
            type="math_single",
            values=(
                BlockValue(name="A", blocks=(first,)),
                BlockValue(name="A", blocks=()),
            ),
        )

        assert single_block_value_with_name(collector, block, "A") is first
        assert collector.count == 0


class TestSingleBlockStatementWithName:
    """Test statement socket resolution to the head of its stack."""

    def test_returns_head_of_stack(self, collector, controls_if_block):
        head = single_block_statement_with_name(collector, controls_if_block, "DO0")

        assert head is controls_if_block.statements[0].blocks[0]
        assert head.type == "variables_set"
        assert head.next.type == "text_print"
        assert collector.count == 0

    def test_empty_statement_reports_once(self, collector):
        block = Block(type="controls_repeat", statements=(BlockStatement(name="DO"),))

        result = single_block_statement_with_name(collector, block, "DO")

        assert result is None
        assert collector.count == 1
        assert collector.reasons[0] == SOCKET_ARITY_MESSAGE

    def test_missing_statement_reports_name(self, collector):
        block = Block(type="controls_repeat")

        result = single_block_statement_with_name(collector, block, "DO")

        assert result is None
        assert collector.reasons == ["No statement with name DO"]

    def test_two_heads_report_arity_violation(self, collector):
        block = Block(
            type="controls_repeat",
            statements=(
                BlockStatement(name="DO", blocks=(Block(type="a"), Block(type="b"))),
            ),
        )

        assert single_block_statement_with_name(collector, block, "DO") is None
        assert collector.reasons == [SOCKET_ARITY_MESSAGE]


class TestControlsIfScenario:
    """An if block resolves its condition and body without any failure."""

    def test_condition_and_body_resolve(self, collector, controls_if_block):
        assert controls_if_block.type == "controls_if"
        assert controls_if_block.mutation.elseif == 0
        assert controls_if_block.mutation.else_ == 0

        condition = single_block_value_with_name(collector, controls_if_block, "IF0")
        body = single_block_statement_with_name(collector, controls_if_block, "DO0")

        assert condition is controls_if_block.values[0].blocks[0]
        assert condition.type == "logic_boolean"
        assert body is controls_if_block.statements[0].blocks[0]
        assert collector.count == 0

    def test_failures_accumulate_across_lookups(self, collector, malformed_block):
        single_field_with_name(collector, malformed_block, "MISSING")
        single_block_value_with_name(collector, malformed_block, "A")
        single_block_value_with_name(collector, malformed_block, "B")
        single_block_statement_with_name(collector, malformed_block, "DO")

        assert collector.count == 4
        assert collector.reasons[0] == "No field named MISSING"

"""
Shared test fixtures and utilities for the blocklytree test suite.
"""

import pytest

from blocklytree.diagnostics import DiagnosticCollector
from blocklytree.parsing import decode_document

CONTROLS_IF_XML = """
<xml xmlns="https://developers.google.com/blockly/xml">
  <block type="controls_if" x="38" y="-12">
    <mutation elseif="0" else="0"></mutation>
    <value name="IF0">
      <block type="logic_boolean">
        <field name="BOOL">TRUE</field>
      </block>
    </value>
    <statement name="DO0">
      <block type="variables_set">
        <field name="VAR">count</field>
        <value name="VALUE">
          <block type="math_number">
            <field name="NUM">1</field>
          </block>
        </value>
        <next>
          <block type="text_print">
            <value name="TEXT">
              <block type="text">
                <field name="TEXT"></field>
              </block>
            </value>
          </block>
        </next>
      </block>
    </statement>
  </block>
  <block type="math_number" x="200" y="40">
    <field name="NUM">42</field>
  </block>
</xml>
"""

MALFORMED_SOCKETS_XML = """
<xml>
  <block type="math_arithmetic">
    <field name="OP">ADD</field>
    <value name="A">
      <block type="math_number"><field name="NUM">1</field></block>
      <block type="math_number"><field name="NUM">2</field></block>
    </value>
    <value name="B"></value>
    <statement name="DO"></statement>
  </block>
</xml>
"""


@pytest.fixture
def collector():
    """Fresh failure channel that records every report."""
    return DiagnosticCollector()


@pytest.fixture
def controls_if_document():
    """Decoded program with an if block, a two-statement body and a loose number."""
    return decode_document(CONTROLS_IF_XML)


@pytest.fixture
def controls_if_block(controls_if_document):
    return controls_if_document.blocks[0]


@pytest.fixture
def malformed_block():
    """Block whose sockets violate the single-block contract in several ways."""
    return decode_document(MALFORMED_SOCKETS_XML).blocks[0]

"""
Decoder configuration.
"""

from attrs import field, frozen
from attrs.validators import ge, instance_of, le

BLOCKLY_XML_NAMESPACE = "https://developers.google.com/blockly/xml"

# Each nesting level costs three interpreter frames while decoding
MAX_DECODE_DEPTH = 250


@frozen
class DecodeOptions:
    """Settings controlling how strictly serialized programs are decoded.

    Params:
        require_xml_root: Reject documents whose root element is not <xml>.
        max_depth: Deepest value or statement nesting accepted; deeper
            programs are rejected instead of exhausting the interpreter
            stack. Next-chains do not add to the depth. At most
            MAX_DECODE_DEPTH.
    """

    require_xml_root: bool = field(default=True, validator=instance_of(bool))
    max_depth: int = field(
        default=200, validator=[instance_of(int), ge(1), le(MAX_DECODE_DEPTH)]
    )


DEFAULT_OPTIONS = DecodeOptions()

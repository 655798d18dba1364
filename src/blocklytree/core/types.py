"""
Core type definitions for the blocklytree framework.

This module contains type aliases shared by the tree model, the decoder
and the encoder.
"""

# Positions are kept verbatim as serialized; consumers decide how to parse them
Position = str

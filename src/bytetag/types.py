"""
Core types for byte parsing, counting and tag substitution.
"""

from collections.abc import Hashable

type Byte = int
type ByteList = bytes
type Token = Hashable
type Tag = Hashable
type FreqMap = dict[Token, int]
type FreqList = list[int]

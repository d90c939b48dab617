"""ByteTag: byte parsing and frequency-preserving tag substitution."""

from .codec import parse_bytes, print_byte, print_bytes, split_tokens
from .config import PipelineConfig
from .errors import (
    ByteTagError,
    EmptyInputError,
    EmptySourceError,
    NotEnoughTagsError,
    ParseError,
    RadixError,
    TagInvariantError,
)
from .frequency import make_freq_list, make_freq_map, same_distribution
from .pipeline import PipelineReport, run_pipeline, run_text
from .radix import ConversionMode, PrintMode, list_modes
from .source import get_sample
from .tags import TagAssignment, assign_tags, make_replace_list, replace_with_tags

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("bytetag")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "ConversionMode",
    "PrintMode",
    "PipelineConfig",
    "PipelineReport",
    "TagAssignment",
    "ByteTagError",
    "EmptyInputError",
    "EmptySourceError",
    "NotEnoughTagsError",
    "ParseError",
    "RadixError",
    "TagInvariantError",
    "parse_bytes",
    "print_byte",
    "print_bytes",
    "split_tokens",
    "get_sample",
    "make_freq_map",
    "make_freq_list",
    "same_distribution",
    "make_replace_list",
    "assign_tags",
    "replace_with_tags",
    "run_text",
    "run_pipeline",
    "list_modes",
]

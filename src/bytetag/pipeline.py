"""End-to-end parse -> render -> substitute -> count pipeline."""

from dataclasses import dataclass
import logging

from ._decorators import measure_time
from .codec import parse_bytes, print_bytes, split_tokens
from .config import PipelineConfig
from .frequency import make_freq_list, make_freq_map
from .source import get_sample
from .tags import TagAssignment, assign_tags, make_replace_list
from .types import FreqMap

log = logging.getLogger(__name__)


@dataclass
class PipelineReport:
    """Everything produced by one pipeline run."""

    rendered: str
    byte_tokens: list[str]
    byte_occurrences: FreqMap
    assignment: TagAssignment
    tag_occurrences: FreqMap
    preserved: bool

    @property
    def tag_string(self) -> str:
        """Tags joined into one string."""
        return "".join(str(tag) for tag in self.assignment.tags)


@measure_time
def run_text(text: str, config: PipelineConfig | None = None) -> PipelineReport:
    """
    Run the pipeline over an in-memory sample.

    The text is parsed under ``config.conv_mode``, rendered under
    ``config.print_mode`` and the rendered tokens are substituted with tags
    from ``config.tag_start``..``config.tag_end``.

    :raises EmptyInputError: If the text or any intermediate sequence is empty.
    :raises ParseError: If a token is not a byte under the parse mode.
    :raises NotEnoughTagsError: If there are more tokens than tags.
    """
    config = config or PipelineConfig()

    data = parse_bytes(text, config.conv_mode)
    rendered = print_bytes(data, config.print_mode)
    log.info(f"rendered {len(data)} bytes as {config.print_mode.name.lower()}")

    byte_tokens = split_tokens(rendered)
    byte_occurrences = make_freq_map(byte_tokens)

    alphabet = make_replace_list(config.tag_start, config.tag_end)
    assignment = assign_tags(byte_tokens, alphabet)
    tag_occurrences = make_freq_map(assignment.tags)

    preserved = make_freq_list(byte_occurrences) == make_freq_list(tag_occurrences)
    if not preserved:
        log.warning("tag substitution changed the frequency distribution")

    return PipelineReport(
        rendered=rendered,
        byte_tokens=byte_tokens,
        byte_occurrences=byte_occurrences,
        assignment=assignment,
        tag_occurrences=tag_occurrences,
        preserved=preserved,
    )


def run_pipeline(config: PipelineConfig | None = None) -> PipelineReport:
    """
    Load ``config.sample_path`` and run the pipeline on it.

    :raises EmptySourceError: If the sample file is empty.
    :raises OSError: If the sample file cannot be read.
    """
    config = config or PipelineConfig()
    log.info(f"loading sample from {config.sample_path}")
    return run_text(get_sample(config.sample_path), config)


__all__ = ["PipelineReport", "run_text", "run_pipeline"]

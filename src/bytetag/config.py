"""Pipeline configuration with environment variable overrides."""

from dataclasses import dataclass, replace
import os
from pathlib import Path
from typing import Final

from .radix import ConversionMode, PrintMode

DEFAULT_SAMPLE: Final[str] = "sample.txt"
ENV_PREFIX: Final[str] = "BYTETAG_"


@dataclass(frozen=True)
class PipelineConfig:
    """Settings for one parse -> render -> substitute run."""

    sample_path: Path = Path(DEFAULT_SAMPLE)
    conv_mode: ConversionMode = ConversionMode.BINARY
    print_mode: PrintMode = PrintMode.DECIMAL
    tag_start: str = "a"
    tag_end: str = "z"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "PipelineConfig":
        """
        Build a config from ``BYTETAG_*`` variables over the defaults.

        Recognised variables: ``BYTETAG_SAMPLE``, ``BYTETAG_PARSE_MODE``,
        ``BYTETAG_PRINT_MODE`` and ``BYTETAG_TAGS`` (two characters, e.g. ``az``).

        :raises RadixError: If a mode variable names an unknown mode.
        :raises ValueError: If ``BYTETAG_TAGS`` is not exactly two characters.
        """
        env = os.environ if environ is None else environ
        config = cls()

        if sample := env.get(f"{ENV_PREFIX}SAMPLE", "").strip():
            config = replace(config, sample_path=Path(sample))
        if parse_mode := env.get(f"{ENV_PREFIX}PARSE_MODE", "").strip():
            config = replace(config, conv_mode=ConversionMode.get(parse_mode))
        if print_mode := env.get(f"{ENV_PREFIX}PRINT_MODE", "").strip():
            config = replace(config, print_mode=PrintMode.get(print_mode))
        if tag_range := env.get(f"{ENV_PREFIX}TAGS", "").strip():
            if len(tag_range) != 2:
                raise ValueError(
                    f"{ENV_PREFIX}TAGS must be two characters, got {tag_range!r}"
                )
            config = replace(config, tag_start=tag_range[0], tag_end=tag_range[1])

        return config


__all__ = ["DEFAULT_SAMPLE", "PipelineConfig"]

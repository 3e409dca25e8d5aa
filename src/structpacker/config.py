"""Configuration for the pack and unpack engines.

This module provides the options dataclass accepted by every public codec
operation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

NarrowingPolicy = Literal["wrap", "strict"]


@dataclass(frozen=True)
class CodecOptions:
    """Options controlling format parsing and numeric conversion.

    Attributes:
        narrowing: How integers that do not fit a target type are handled.
            - ``"wrap"``: truncate to the target width using two's complement
              (e.g. 300 packed as ``B`` becomes 44, 0xFFFF decoded into an
              INT16 slot becomes -1). This is the default.
            - ``"strict"``: raise ValueOutOfRangeError instead.

        ignore_whitespace: Accept ASCII whitespace between directives and
            skip it (default True). When False, whitespace is rejected like
            any other unknown format character.

    Examples:
        ```python
        from structpacker import CodecOptions, pack

        strict = CodecOptions(narrowing="strict")
        pack("<B", 255, options=strict)   # ok
        pack("<B", 256, options=strict)   # raises ValueOutOfRangeError
        ```
    """

    narrowing: NarrowingPolicy = "wrap"
    ignore_whitespace: bool = True

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.narrowing not in ("wrap", "strict"):
            raise ValueError(f"narrowing must be 'wrap' or 'strict', got {self.narrowing!r}")

        if not isinstance(self.ignore_whitespace, bool):
            raise ValueError(
                f"ignore_whitespace must be a bool, got {type(self.ignore_whitespace).__name__}"
            )


DEFAULT_OPTIONS = CodecOptions()

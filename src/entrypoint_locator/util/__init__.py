from entrypoint_locator.util.source_reader import (
    EntryPointError,
    SourceReadError,
    read_first_line,
    read_source_lines,
    read_source_text,
)

__all__ = [
    "EntryPointError",
    "SourceReadError",
    "read_first_line",
    "read_source_lines",
    "read_source_text",
]

from entrypoint_locator.locator.entry_point_locator import (
    JAVA_MAIN_MARKER,
    EntryPointLocator,
    MalformedSourceError,
    facade_class_name,
    parse_package_line,
)

__all__ = [
    "EntryPointLocator",
    "MalformedSourceError",
    "JAVA_MAIN_MARKER",
    "facade_class_name",
    "parse_package_line",
]

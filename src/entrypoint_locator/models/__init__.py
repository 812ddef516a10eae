"""
데이터 모델 모듈
"""

from entrypoint_locator.models.entry_point import EntryPoint, SourceDialect
from entrypoint_locator.models.kotlin_file import FunctionInfo, KotlinFile, ParameterInfo
from entrypoint_locator.models.source_file import SourceFile
from entrypoint_locator.models.source_tree import SourceDirectory, SourceTree

__all__ = [
    "SourceFile",
    "SourceDirectory",
    "SourceTree",
    "SourceDialect",
    "EntryPoint",
    "KotlinFile",
    "FunctionInfo",
    "ParameterInfo",
]

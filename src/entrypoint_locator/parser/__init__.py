"""
Parser 모듈

Kotlin AST 파서와 main 함수 판별기를 제공합니다.
"""

from entrypoint_locator.parser.kotlin_ast_parser import KotlinASTParser
from entrypoint_locator.parser.kotlin_main_detector import KotlinMainDetector

__all__ = ["KotlinASTParser", "KotlinMainDetector"]

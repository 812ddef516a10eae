"""
Kotlin AST Parser

tree-sitter를 사용하여 Kotlin 소스 코드를 추상 구문 트리(AST)로 파싱하고,
패키지와 최상위 함수 정보를 추출하는 모듈입니다.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

import tree_sitter_kotlin as tskotlin
from tree_sitter import Language, Node, Parser

from entrypoint_locator.models.kotlin_file import (
    FunctionInfo,
    KotlinFile,
    ParameterInfo,
)
from entrypoint_locator.models.source_file import SourceFile
from entrypoint_locator.util.source_reader import read_source_text

logger = logging.getLogger(__name__)

# Kotlin 언어 설정
KOTLIN_LANGUAGE = Language(tskotlin.language())

# 문법 버전에 따라 식별자 노드 이름이 다름
IDENTIFIER_TYPES = ("simple_identifier", "identifier")


def _text(node: Node) -> str:
    return node.text.decode("utf8")


def _compact(text: str) -> str:
    """타입 표기에서 공백 제거 (Array< String > -> Array<String>)"""
    return "".join(text.split())


class KotlinASTParser:
    """
    Kotlin AST 파서 클래스

    tree-sitter를 사용하여 Kotlin 소스 코드를 파싱하고,
    패키지명과 최상위 함수 선언을 추출합니다.
    """

    def __init__(self):
        self.parser = Parser(KOTLIN_LANGUAGE)

    def parse_file(self, file_path: Union[Path, str, SourceFile]) -> KotlinFile:
        """
        Kotlin 파일을 파싱

        Args:
            file_path: Kotlin 파일 경로 (SourceFile 객체도 허용)

        Returns:
            KotlinFile: 파싱 결과

        Raises:
            SourceReadError: 파일을 읽을 수 없는 경우
        """
        if isinstance(file_path, SourceFile):
            file_path = file_path.path
        path = Path(file_path)

        source_code = read_source_text(path)
        return self.parse_source(source_code, path)

    def parse_source(self, source_code: str, file_path: Union[Path, str]) -> KotlinFile:
        """
        Kotlin 소스 문자열을 파싱

        Args:
            source_code: 소스 코드
            file_path: 결과에 기록할 파일 경로

        Returns:
            KotlinFile: 파싱 결과
        """
        tree = self.parser.parse(bytes(source_code, "utf8"))
        root_node = tree.root_node

        kotlin_file = KotlinFile(
            path=Path(file_path),
            package=self._extract_package(root_node),
            has_errors=root_node.has_error,
        )
        if root_node.has_error:
            logger.debug(f"구문 오류가 포함된 Kotlin 파일: {file_path}")

        # 최상위 함수만 추출 (클래스/object 내부 함수는 진입점이 될 수 없음)
        for child in root_node.children:
            if child.type == "function_declaration":
                function = self._extract_function_info(child)
                if function:
                    kotlin_file.functions.append(function)

        return kotlin_file

    def _extract_package(self, root_node: Node) -> str:
        """
        패키지명 추출

        Args:
            root_node: 루트 노드

        Returns:
            str: 패키지명 (선언이 없으면 빈 문자열)
        """
        for child in root_node.children:
            if child.type != "package_header":
                continue
            for subchild in child.children:
                if subchild.type in ("identifier", "qualified_identifier"):
                    return _compact(_text(subchild))
            text = _text(child).strip()
            if text.startswith("package"):
                text = text[len("package"):]
            return _compact(text).rstrip(";")
        return ""

    def _extract_function_info(self, node: Node) -> Optional[FunctionInfo]:
        """
        함수 선언 노드에서 함수 정보 추출

        Args:
            node: function_declaration 노드

        Returns:
            Optional[FunctionInfo]: 함수 정보 (이름이 없으면 None)
        """
        function = FunctionInfo(name="")

        name_node = node.child_by_field_name("name")
        if name_node is not None:
            function.name = _text(name_node)

        seen_fun = False
        seen_parameters = False
        expect_return_type = False

        for child in node.children:
            if child.type == "modifiers":
                function.modifiers = self._extract_modifiers(child)
            elif child.type == "fun":
                seen_fun = True
            elif child.type == "type_parameters":
                function.has_type_parameters = True
            elif child.type == "." and not seen_parameters:
                # fun String.main() 형태의 확장 함수
                function.has_receiver = True
            elif child.type in IDENTIFIER_TYPES and seen_fun and not function.name:
                function.name = _text(child)
            elif child.type == "function_value_parameters":
                function.parameters = self._extract_parameters(child)
                seen_parameters = True
            elif child.type == ":" and seen_parameters:
                expect_return_type = True
            elif expect_return_type and child.is_named:
                function.return_type = _compact(_text(child))
                expect_return_type = False

        return function if function.name else None

    def _extract_modifiers(self, node: Node) -> List[str]:
        """
        수정자 추출 (어노테이션 제외)

        Args:
            node: modifiers 노드

        Returns:
            List[str]: 수정자 목록 (예: ["private", "suspend"])
        """
        modifiers = []
        for child in node.children:
            if child.type == "annotation":
                continue
            modifiers.extend(_text(child).split())
        return modifiers

    def _extract_parameters(self, node: Node) -> List[ParameterInfo]:
        """
        파라미터 추출

        Args:
            node: function_value_parameters 노드

        Returns:
            List[ParameterInfo]: 파라미터 목록
        """
        params = []
        pending_vararg = False

        for child in node.children:
            if child.type == "parameter_modifiers":
                # 문법 버전에 따라 vararg가 parameter 앞의 형제 노드로 옴
                pending_vararg = "vararg" in _text(child).split()
            elif child.type == "parameter":
                param = self._parse_parameter(child)
                param.is_vararg = param.is_vararg or pending_vararg
                pending_vararg = False
                params.append(param)

        return params

    def _parse_parameter(self, node: Node) -> ParameterInfo:
        # "vararg args: String" -> 이름 앞부분과 타입 부분으로 분리
        head, _, type_text = _text(node).partition(":")
        head_tokens = head.split()
        return ParameterInfo(
            name=head_tokens[-1] if head_tokens else "",
            type=_compact(type_text),
            is_vararg="vararg" in head_tokens,
        )

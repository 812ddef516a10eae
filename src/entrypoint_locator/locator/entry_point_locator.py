"""
Entry Point Locator 모듈

소스 트리에서 프로그램 진입점을 가진 파일을 찾고,
실행에 사용할 완전한(fully-qualified) 메인 클래스명을 계산합니다.

- Java: 어떤 줄이든 "public static void main(" 문자열을 포함하면 진입점으로 간주합니다.
  파싱이 아닌 문자열 검사이므로 주석이나 문자열 리터럴 안의 같은 문자열에도 일치합니다.
- Kotlin: 모든 .kt 파일을 파싱한 뒤 KotlinMainDetector가 최상위 main 함수를 찾습니다.
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from entrypoint_locator.models.entry_point import EntryPoint, SourceDialect
from entrypoint_locator.models.kotlin_file import KotlinFile
from entrypoint_locator.models.source_file import SourceFile
from entrypoint_locator.models.source_tree import SourceTree
from entrypoint_locator.parser.kotlin_ast_parser import KotlinASTParser
from entrypoint_locator.parser.kotlin_main_detector import KotlinMainDetector
from entrypoint_locator.util.source_reader import (
    EntryPointError,
    read_first_line,
    read_source_lines,
)

logger = logging.getLogger(__name__)

JAVA_MAIN_MARKER = "public static void main("
PACKAGE_KEYWORD = "package"
STATEMENT_SEPARATOR = ";"
KOTLIN_FACADE_SUFFIX = "Kt"


class MalformedSourceError(EntryPointError):
    """첫 줄이 패키지 선언 형식이 아니어서 클래스명을 만들 수 없을 때 발생하는 예외"""

    def __init__(self, path: Union[str, Path], line: str):
        self.path = Path(path)
        self.line = line
        super().__init__(
            f"첫 줄에서 패키지 선언을 찾을 수 없습니다: {self.path} (첫 줄: {line!r})"
        )


def parse_package_line(line: str, path: Union[str, Path]) -> str:
    """
    첫 줄에서 패키지명을 추출합니다.

    "package com.example;" -> "com.example"
    공백 하나로 나눈 첫 토큰이 package여야 하며, 두 번째 토큰을 ; 앞에서 자릅니다.
    앞쪽 주석이나 빈 줄은 처리하지 않습니다.

    Args:
        line: 파일의 첫 줄
        path: 에러 메시지에 사용할 파일 경로

    Returns:
        str: 패키지명

    Raises:
        MalformedSourceError: 패키지 선언 형식이 아닌 경우
    """
    tokens = line.rstrip("\r\n").split(" ")
    if len(tokens) < 2 or tokens[0] != PACKAGE_KEYWORD:
        raise MalformedSourceError(path, line)

    package = tokens[1].split(STATEMENT_SEPARATOR)[0]
    if not package:
        raise MalformedSourceError(path, line)
    return package


def facade_class_name(file_stem: str) -> str:
    """최상위 선언만 가진 Kotlin 파일의 파사드 클래스명 (app -> AppKt)"""
    if not file_stem:
        return KOTLIN_FACADE_SUFFIX
    return file_stem[0].upper() + file_stem[1:] + KOTLIN_FACADE_SUFFIX


class EntryPointLocator:
    """
    진입점 탐색기

    상태를 갖지 않으며, 주어진 SourceTree 스냅샷에 대한 조회만 수행합니다.
    탐색 순서는 SourceTree의 순서(깊이 우선, 이름순)를 따르므로
    같은 트리에 대해서는 항상 같은 결과를 반환합니다.
    """

    def __init__(
        self,
        kotlin_parser: Optional[KotlinASTParser] = None,
        main_detector: Optional[KotlinMainDetector] = None,
    ):
        """
        EntryPointLocator 초기화

        Args:
            kotlin_parser: Kotlin 파서 (선택적)
            main_detector: Kotlin main 함수 판별기 (선택적)
        """
        self.kotlin_parser = kotlin_parser or KotlinASTParser()
        self.main_detector = main_detector or KotlinMainDetector()

    def find_entry_point(
        self, tree: SourceTree, dialect: SourceDialect
    ) -> Optional[EntryPoint]:
        """
        소스 트리에서 진입점을 가진 파일을 찾습니다.

        Args:
            tree: 소스 트리 스냅샷
            dialect: 검색할 소스 언어

        Returns:
            Optional[EntryPoint]: 진입점 (없으면 None)

        Raises:
            SourceReadError: 파일을 읽을 수 없는 경우
        """
        if dialect is SourceDialect.JAVA:
            entry_point = self._find_java_main(tree)
        else:
            entry_point = self._find_kotlin_main(tree)

        if entry_point is None:
            logger.debug(f"{dialect.value} 진입점을 찾지 못했습니다: {tree.root}")
        else:
            logger.info(
                f"{dialect.value} 진입점 발견: {entry_point.source_file.relative_path}"
            )
        return entry_point

    def _find_java_main(self, tree: SourceTree) -> Optional[EntryPoint]:
        for source_file in tree.iter_files():
            if not SourceDialect.JAVA.accepts(source_file):
                continue

            lines = read_source_lines(source_file.path)
            if not any(JAVA_MAIN_MARKER in line for line in lines):
                continue

            package = None
            if lines:
                try:
                    package = parse_package_line(lines[0], source_file.path)
                except MalformedSourceError:
                    # 클래스명 계산 시점에 에러로 보고됨
                    package = None

            return EntryPoint(
                source_file=source_file,
                dialect=SourceDialect.JAVA,
                package=package,
            )
        return None

    def _find_kotlin_main(self, tree: SourceTree) -> Optional[EntryPoint]:
        # 탐색 전에 트리의 모든 Kotlin 파일을 먼저 파싱
        parsed: List[Tuple[SourceFile, KotlinFile]] = []
        for source_file in tree.iter_files():
            if SourceDialect.KOTLIN.accepts(source_file):
                parsed.append((source_file, self.kotlin_parser.parse_file(source_file)))

        main_file = self.main_detector.get_main_function_file(
            kotlin_file for _, kotlin_file in parsed
        )
        if main_file is None:
            return None

        for source_file, kotlin_file in parsed:
            if kotlin_file is main_file:
                return EntryPoint(
                    source_file=source_file,
                    dialect=SourceDialect.KOTLIN,
                    package=kotlin_file.package or None,
                )
        return None

    def derive_main_class_name(self, entry_point: EntryPoint) -> str:
        """
        진입점 파일의 완전한 메인 클래스명을 계산합니다.

        - Java: <package>.<파일명>
        - Kotlin: <package>.<첫 글자를 대문자로 바꾼 파일명>Kt

        패키지는 항상 파일의 첫 줄에서 다시 읽습니다.

        Args:
            entry_point: find_entry_point()의 결과

        Returns:
            str: 메인 클래스명 (예: com.example.AppKt)

        Raises:
            MalformedSourceError: 첫 줄이 패키지 선언이 아닌 경우
            SourceReadError: 파일을 읽을 수 없는 경우
        """
        path = entry_point.source_file.path
        package = parse_package_line(read_first_line(path), path)

        if entry_point.dialect is SourceDialect.KOTLIN:
            return f"{package}.{facade_class_name(entry_point.local_name)}"
        return f"{package}.{entry_point.local_name}"

    def resolve_main_class(self, tree: SourceTree) -> Optional[str]:
        """
        Kotlin 진입점을 먼저 찾고, 없으면 Java 진입점을 찾아 메인 클래스명을 반환합니다.

        Args:
            tree: 소스 트리 스냅샷

        Returns:
            Optional[str]: 메인 클래스명 (진입점이 없으면 None)

        Raises:
            MalformedSourceError: 진입점 파일의 첫 줄이 패키지 선언이 아닌 경우
            SourceReadError: 파일을 읽을 수 없는 경우
        """
        for dialect in (SourceDialect.KOTLIN, SourceDialect.JAVA):
            entry_point = self.find_entry_point(tree, dialect)
            if entry_point is not None:
                return self.derive_main_class_name(entry_point)
        return None

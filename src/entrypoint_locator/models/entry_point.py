"""
EntryPoint 데이터 모델

프로그램 진입점을 가진 소스 파일과 그 언어(Java/Kotlin)를 나타냅니다.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from entrypoint_locator.models.source_file import SourceFile


class SourceDialect(Enum):
    """진입점 규칙이 서로 다른 소스 언어"""

    JAVA = "java"
    KOTLIN = "kotlin"

    @property
    def extensions(self) -> Tuple[str, ...]:
        """이 언어로 검사할 파일 확장자 (소문자)"""
        if self is SourceDialect.JAVA:
            return (".java",)
        return (".kt",)

    def accepts(self, source_file: SourceFile) -> bool:
        return source_file.extension.lower() in self.extensions


@dataclass(frozen=True)
class EntryPoint:
    """
    진입점 정보

    트리 스냅샷으로부터 필요할 때 계산되며 저장되지 않습니다.
    트리가 바뀐 뒤에는 호출자가 다시 계산해야 합니다.

    Attributes:
        source_file: 진입점을 가진 파일
        dialect: 소스 언어
        package: 선언된 패키지명 (알아낼 수 없으면 None)
        local_name: 확장자를 제외한 파일명
    """

    source_file: SourceFile
    dialect: SourceDialect
    package: Optional[str] = None

    @property
    def local_name(self) -> str:
        return self.source_file.stem

"""
Kotlin 파일 데이터 모델

tree-sitter로 파싱한 Kotlin 소스 파일의 최상위 선언 정보를 저장합니다.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass
class ParameterInfo:
    """
    함수 파라미터 정보

    Attributes:
        name: 파라미터명
        type: 타입 표기 (공백 제거, 예: Array<String>)
        is_vararg: vararg 파라미터 여부
    """

    name: str
    type: str = ""
    is_vararg: bool = False


@dataclass
class FunctionInfo:
    """
    최상위 함수 정보

    Attributes:
        name: 함수명
        parameters: 파라미터 목록
        return_type: 반환 타입 (생략된 경우 None)
        modifiers: 수정자 목록 (예: private, suspend)
        has_receiver: 확장 함수 여부 (fun String.main())
        has_type_parameters: 타입 파라미터 여부 (fun <T> main())
    """

    name: str
    parameters: List[ParameterInfo] = field(default_factory=list)
    return_type: Optional[str] = None
    modifiers: List[str] = field(default_factory=list)
    has_receiver: bool = False
    has_type_parameters: bool = False


@dataclass
class KotlinFile:
    """
    파싱된 Kotlin 소스 파일

    Attributes:
        path: 파일 경로
        package: 패키지명 (선언이 없으면 빈 문자열)
        functions: 최상위 함수 목록
        has_errors: 구문 오류 노드 포함 여부
    """

    path: Path
    package: str = ""
    functions: List[FunctionInfo] = field(default_factory=list)
    has_errors: bool = False

    @property
    def name(self) -> str:
        """확장자를 포함한 파일명"""
        return self.path.name

"""
Kotlin Main Detector

파싱된 Kotlin 파일 목록에서 프로그램 진입점(최상위 main 함수)을 선언한 파일을 찾습니다.
"""

import logging
from typing import Iterable, List, Optional

from entrypoint_locator.models.kotlin_file import FunctionInfo, KotlinFile

logger = logging.getLogger(__name__)


def _normalize_type(type_text: Optional[str]) -> str:
    """kotlin. 접두사를 제거한 타입 표기 (kotlin.Array<kotlin.String> -> Array<String>)"""
    if not type_text:
        return ""
    return type_text.replace("kotlin.", "")


class KotlinMainDetector:
    """
    Kotlin main 함수 판별기

    다음 조건을 모두 만족하는 최상위 함수를 진입점으로 인정합니다:
    1. 이름이 main
    2. 확장 함수가 아니고 타입 파라미터가 없음
    3. private이 아님
    4. 파라미터가 없거나, Array<String> 하나이거나, vararg String 하나
    5. 반환 타입이 생략되었거나 Unit
    """

    MAIN_FUNCTION_NAME = "main"

    def is_main_function(self, function: FunctionInfo) -> bool:
        if function.name != self.MAIN_FUNCTION_NAME:
            return False
        if function.has_receiver or function.has_type_parameters:
            return False
        if "private" in function.modifiers:
            return False

        return_type = _normalize_type(function.return_type)
        if return_type and return_type != "Unit":
            return False

        if not function.parameters:
            return True
        if len(function.parameters) != 1:
            return False

        param = function.parameters[0]
        param_type = _normalize_type(param.type)
        if param.is_vararg:
            return param_type == "String"
        return param_type == "Array<String>"

    def has_main_function(self, kotlin_file: KotlinFile) -> bool:
        return any(self.is_main_function(f) for f in kotlin_file.functions)

    def get_main_function_file(
        self, files: Iterable[KotlinFile]
    ) -> Optional[KotlinFile]:
        """
        main 함수를 선언한 파일을 찾습니다.

        여러 파일이 main을 선언하면 경고를 남기고 순서상 첫 번째 파일을 반환합니다.

        Args:
            files: 파싱된 Kotlin 파일 목록 (탐색 순서대로)

        Returns:
            Optional[KotlinFile]: main 함수를 가진 파일 (없으면 None)
        """
        candidates: List[KotlinFile] = []
        for kotlin_file in files:
            if kotlin_file.has_errors:
                # 오류 복구된 구문 트리이므로 함수 목록이 불완전할 수 있음
                logger.debug(
                    f"구문 오류가 있는 파일을 검사합니다: {kotlin_file.name} ({kotlin_file.path})"
                )
            if self.has_main_function(kotlin_file):
                candidates.append(kotlin_file)
        if not candidates:
            return None

        if len(candidates) > 1:
            others = ", ".join(str(f.path) for f in candidates[1:])
            logger.warning(
                f"main 함수가 여러 파일에 선언되어 있습니다. 첫 번째 파일을 사용합니다: "
                f"{candidates[0].path} (무시됨: {others})"
            )
        return candidates[0]

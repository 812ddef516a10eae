"""
Configuration Manager 모듈

JSON 설정 파일 또는 환경 변수로부터 설정을 로드하고 검증합니다.
대상 프로젝트 경로, 수집할 파일 타입, 제외 규칙, Kotlin 설치 경로(KOTLIN_HOME)를 다룹니다.
"""

import json
import os
from pathlib import Path
from typing import List, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

KOTLIN_HOME_ENV_VARS = ("KOTLIN_HOME", "KT_HOME")


class ConfigurationError(Exception):
    """설정 관련 에러를 나타내는 사용자 정의 예외 클래스"""

    pass


class Configuration(BaseModel):
    target_project: Optional[str] = Field(None, description="대상 프로젝트 루트 경로")
    kotlin_home: Optional[str] = Field(None, description="Kotlin 컴파일러 설치 경로")
    source_file_types: List[str] = Field(
        default_factory=lambda: [".java", ".kt"],
        description="수집할 소스 파일 확장자 목록",
    )
    exclude_dirs: List[str] = Field(
        default_factory=list, description="제외할 디렉터리 이름 목록"
    )
    exclude_files: List[str] = Field(
        default_factory=list, description="제외할 파일 패턴 목록"
    )
    build_dir_name: str = Field("build", description="빌드 결과물 디렉터리 이름")
    lib_dir_name: str = Field("lib", description="라이브러리 디렉터리 이름")
    lib_extension: str = Field("jar", description="라이브러리 파일 확장자 (점 제외)")

    def get_kotlin_home(self) -> Path:
        """
        Kotlin 설치 경로를 반환합니다.

        Returns:
            Path: Kotlin 설치 경로

        Raises:
            ConfigurationError: kotlin_home이 설정되지 않은 경우
        """
        if not self.kotlin_home:
            raise ConfigurationError(
                "Kotlin 설치 경로가 설정되지 않았습니다. "
                f"{' 또는 '.join(KOTLIN_HOME_ENV_VARS)} 환경 변수를 지정하세요."
            )
        return Path(self.kotlin_home)


def resolve_kotlin_home(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """
    환경 변수에서 Kotlin 설치 경로를 찾습니다.

    KOTLIN_HOME을 우선 사용하고, 없으면 KT_HOME을 사용합니다.

    Args:
        environ: 조회할 환경 변수 매핑 (기본값: os.environ)

    Returns:
        Optional[str]: Kotlin 설치 경로 (둘 다 없으면 None)
    """
    if environ is None:
        environ = os.environ

    for name in KOTLIN_HOME_ENV_VARS:
        value = environ.get(name)
        if value:
            return value
    return None


def _format_validation_error(error: ValidationError) -> str:
    error_messages = []
    for item in error.errors():
        loc = " -> ".join(map(str, item["loc"]))
        msg = item["msg"]
        if item["type"] == "missing":
            msg = "필수 항목이 누락되었습니다"
        elif "valid" in msg:
            msg = f"유효한 값이 아닙니다 ({msg})"
        error_messages.append(f"  - 필드: {loc}, 원인: {msg}")
    return "\n".join(error_messages)


def load_config(config_file_path: str) -> Configuration:
    """
    JSON 설정 파일을 로드합니다.

    설정 파일에 kotlin_home이 없으면 환경 변수(KOTLIN_HOME, KT_HOME)에서 보충합니다.

    Args:
        config_file_path: 설정 파일 경로

    Returns:
        Configuration: 로드된 설정 객체

    Raises:
        ConfigurationError: 설정 로드 실패 시
    """
    path = Path(config_file_path)
    if not path.exists():
        raise ConfigurationError(f"설정 파일을 찾을 수 없습니다: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            config_data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"설정 파일의 JSON 형식이 올바르지 않습니다: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"설정 파일을 읽는 중 오류가 발생했습니다: {e}") from e

    if not isinstance(config_data, dict):
        raise ConfigurationError("설정 파일의 최상위 값은 JSON 객체여야 합니다")

    if not config_data.get("kotlin_home"):
        config_data["kotlin_home"] = resolve_kotlin_home()

    try:
        return Configuration(**config_data)
    except ValidationError as e:
        raise ConfigurationError(
            f"설정 파일 검증 실패:\n{_format_validation_error(e)}"
        ) from e


def load_config_from_env(env_file: Optional[str] = None, **overrides) -> Configuration:
    """
    환경 변수로부터 설정을 생성합니다.

    .env 파일이 있으면 먼저 로드한 뒤(이미 설정된 환경 변수는 덮어쓰지 않음)
    KOTLIN_HOME, KT_HOME 순서로 Kotlin 설치 경로를 결정합니다.

    Args:
        env_file: .env 파일 경로 (기본값: 현재 디렉터리에서 탐색)
        **overrides: Configuration 필드 값

    Returns:
        Configuration: 생성된 설정 객체

    Raises:
        ConfigurationError: 설정값 검증 실패 시
    """
    load_dotenv(env_file)

    values = dict(overrides)
    if not values.get("kotlin_home"):
        values["kotlin_home"] = resolve_kotlin_home()

    try:
        return Configuration(**values)
    except ValidationError as e:
        raise ConfigurationError(
            f"설정 검증 실패:\n{_format_validation_error(e)}"
        ) from e

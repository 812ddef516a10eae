"""
entrypoint-locator

Java/Kotlin 프로젝트의 소스 트리에서 프로그램 진입점을 찾고
실행할 메인 클래스명을 계산하는 라이브러리입니다.
"""

from entrypoint_locator.collector import SourceTreeCollector
from entrypoint_locator.config import (
    Configuration,
    ConfigurationError,
    load_config,
    load_config_from_env,
)
from entrypoint_locator.locator import EntryPointLocator, MalformedSourceError
from entrypoint_locator.models import EntryPoint, SourceDialect, SourceFile, SourceTree
from entrypoint_locator.project import ProjectLayout
from entrypoint_locator.util import EntryPointError, SourceReadError

__all__ = [
    "Configuration",
    "ConfigurationError",
    "load_config",
    "load_config_from_env",
    "SourceTreeCollector",
    "SourceTree",
    "SourceFile",
    "SourceDialect",
    "EntryPoint",
    "EntryPointLocator",
    "EntryPointError",
    "MalformedSourceError",
    "SourceReadError",
    "ProjectLayout",
]

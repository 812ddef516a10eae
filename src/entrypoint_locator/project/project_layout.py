"""
Project Layout 모듈

프로젝트 디렉터리 기준의 빌드 결과물 경로, 라이브러리 목록, Kotlin 라이브러리 경로를 계산하고
빌드 디렉터리를 정리합니다. 클래스패스 구성이나 컴파일러 실행은 하지 않습니다.
"""

import logging
import shutil
from pathlib import Path
from typing import List, Union

from entrypoint_locator.config.config_manager import Configuration

logger = logging.getLogger(__name__)


class ProjectLayout:
    """
    프로젝트 디렉터리 구조 헬퍼

    Attributes:
        project_dir: 프로젝트 루트 디렉터리
        config: 설정 (빌드/라이브러리 디렉터리 이름, Kotlin 설치 경로)
    """

    def __init__(self, project_dir: Union[str, Path], config: Configuration):
        self.project_dir = Path(project_dir)
        self.config = config

    @property
    def build_dir(self) -> Path:
        return self.project_dir / self.config.build_dir_name

    @property
    def lib_dir(self) -> Path:
        return self.project_dir / self.config.lib_dir_name

    def output_jar_path(self) -> Path:
        """
        빌드 결과 jar 파일 경로를 반환합니다.

        빌드 디렉터리가 없으면 생성하며, 생성에 실패해도 경로는 반환합니다.

        Returns:
            Path: <프로젝트>/build/<프로젝트명>.jar
        """
        if not self.build_dir.exists():
            try:
                self.build_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                logger.error(f"빌드 디렉터리를 생성할 수 없습니다: {self.build_dir} - {e}")

        return self.build_dir / f"{self.project_dir.name}.jar"

    def clean(self) -> bool:
        """
        빌드 디렉터리를 삭제합니다.

        Returns:
            bool: 삭제했거나 삭제할 디렉터리가 없으면 True, 삭제 실패 시 False
        """
        if not self.build_dir.exists():
            return True

        try:
            shutil.rmtree(self.build_dir)
            logger.info(f"빌드 디렉터리 삭제: {self.build_dir}")
            return True
        except OSError as e:
            logger.error(f"빌드 디렉터리 삭제 실패: {self.build_dir} - {e}")
            return False

    def list_libs(self) -> List[str]:
        """
        라이브러리 디렉터리의 jar 파일명 목록을 반환합니다.

        Returns:
            List[str]: 이름순으로 정렬된 파일명 (디렉터리가 없으면 빈 리스트)
        """
        if not self.lib_dir.is_dir():
            return []

        suffix = f".{self.config.lib_extension}".lower()
        return sorted(
            entry.name
            for entry in self.lib_dir.iterdir()
            if entry.is_file() and entry.suffix.lower() == suffix
        )

    def build_lib_path(self, lib_name: str) -> Path:
        """
        Kotlin 설치 경로 아래의 라이브러리 jar 경로를 반환합니다.

        Args:
            lib_name: 확장자를 제외한 라이브러리 이름 (예: kotlin-stdlib)

        Returns:
            Path: <KOTLIN_HOME>/lib/<lib_name>.jar

        Raises:
            ConfigurationError: Kotlin 설치 경로가 설정되지 않은 경우
        """
        kotlin_home = self.config.get_kotlin_home()
        return kotlin_home / "lib" / f"{lib_name}.{self.config.lib_extension}"

"""
Source Tree Collector 모듈

프로젝트 디렉터리를 재귀적으로 탐색하여 불변 SourceTree 스냅샷을 만듭니다.
진입점 탐색은 살아있는 파일 시스템이 아니라 이 스냅샷 위에서 수행됩니다.
"""

import fnmatch
import logging
from pathlib import Path
from typing import List, Optional, Set, Tuple

from entrypoint_locator.config.config_manager import Configuration
from entrypoint_locator.models.source_file import SourceFile
from entrypoint_locator.models.source_tree import (
    SourceDirectory,
    SourceNode,
    SourceTree,
    sort_key,
)

logger = logging.getLogger(__name__)


class SourceTreeCollector:
    """
    소스 트리를 수집하는 클래스

    주요 기능:
    1. 재귀적 디렉터리 탐색 (자식은 이름 사전순)
    2. 설정 기반 파일 필터링
    3. 메타데이터 추출
    4. 심볼릭 링크 중복 제거
    """

    # 제외할 디렉터리 목록 (빌드 디렉터리 및 버전 관리 디렉터리)
    EXCLUDED_DIRS = {
        ".git",
        ".svn",
        ".hg",  # 버전 관리
        "target",
        "build",
        "out",
        "bin",  # 빌드 결과물
        ".idea",
        ".vscode",
        ".settings",  # IDE 설정
        "node_modules",
        "__pycache__",
        ".gradle",
        ".mvn",  # 빌드 도구
    }

    def __init__(self, config: Configuration):
        """
        SourceTreeCollector 초기화

        Args:
            config: Configuration 인스턴스
        """
        self._config = config
        self._source_file_types = [ext.lower() for ext in config.source_file_types]

        # 기본 제외 디렉터리는 프로젝트 루트 바로 아래에서만 적용
        # (src/com/acme/build 같은 패키지 디렉터리는 탐색 대상)
        self._root_excluded_dirs = self.EXCLUDED_DIRS.copy()
        self._root_excluded_dirs.add(config.build_dir_name)

        # config의 exclude_dirs는 모든 깊이에서 적용
        self._excluded_dirs = set(config.exclude_dirs)

        self._exclude_file_patterns = config.exclude_files

    def collect(self, project_path: Optional[Path] = None) -> SourceTree:
        """
        프로젝트 디렉터리의 스냅샷을 생성

        Args:
            project_path: 프로젝트 루트 (기본값: config.target_project)

        Returns:
            SourceTree: 수집된 소스 트리

        Raises:
            ValueError: 경로가 없거나 디렉터리가 아닌 경우
        """
        if project_path is None:
            if not self._config.target_project:
                raise ValueError("프로젝트 경로가 지정되지 않았습니다")
            project_path = Path(self._config.target_project)
        project_path = Path(project_path)

        if not project_path.exists():
            raise ValueError(f"프로젝트 경로가 존재하지 않습니다: {project_path}")

        if not project_path.is_dir():
            raise ValueError(
                f"프로젝트 경로가 디렉터리가 아닙니다: {project_path}"
            )

        root = project_path.resolve()
        seen_files: Set[Path] = set()
        children = self._collect_children(root, root, seen_files)

        tree = SourceTree(root=root, children=children)
        logger.debug(f"소스 트리 수집 완료: {root} ({len(seen_files)}개 파일)")
        return tree

    def _collect_children(
        self, directory: Path, root: Path, seen_files: Set[Path]
    ) -> Tuple[SourceNode, ...]:
        """
        디렉터리의 자식 노드를 재귀적으로 수집

        Args:
            directory: 탐색할 디렉터리
            root: 프로젝트 루트
            seen_files: 이미 수집한 파일의 정규화 경로

        Returns:
            Tuple[SourceNode, ...]: 이름순으로 정렬된 자식 노드
        """
        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as e:
            logger.warning(f"디렉터리를 읽을 수 없어 건너뜁니다: {directory} - {e}")
            return ()

        nodes: List[SourceNode] = []
        for entry in entries:
            # 숨김 파일/디렉터리 제외
            if entry.name.startswith("."):
                continue

            if entry.is_dir():
                if entry.name in self._excluded_dirs:
                    continue
                if directory == root and entry.name in self._root_excluded_dirs:
                    continue
                # 심볼릭 링크 디렉터리는 순환 가능성이 있으므로 따라가지 않음
                if entry.is_symlink():
                    logger.debug(f"심볼릭 링크 디렉터리 건너뜀: {entry}")
                    continue
                nodes.append(
                    SourceDirectory(
                        path=entry.absolute(),
                        relative_path=entry.relative_to(root),
                        children=self._collect_children(entry, root, seen_files),
                    )
                )
                continue

            if not entry.is_file() or not self._should_collect(entry, root):
                continue

            normalized_path = self._normalize_path(entry)
            if normalized_path in seen_files:
                continue
            seen_files.add(normalized_path)

            try:
                nodes.append(SourceFile.from_path(entry, root))
            except OSError as e:
                logger.warning(f"파일 정보를 가져올 수 없어 건너뜁니다: {entry} - {e}")

        nodes.sort(key=sort_key)
        return tuple(nodes)

    def _should_collect(self, file_path: Path, root: Path) -> bool:
        """
        파일이 수집 대상인지 확인 (설정 기반 필터링)

        Args:
            file_path: 확인할 파일 경로
            root: 프로젝트 루트

        Returns:
            bool: 수집 대상이면 True
        """
        if self._exclude_file_patterns:
            relative_path_str = file_path.relative_to(root).as_posix()
            for pattern in self._exclude_file_patterns:
                if fnmatch.fnmatch(file_path.name, pattern):
                    return False
                # 상대 경로 패턴 매칭 (예: "test/**/*.java")
                if fnmatch.fnmatch(relative_path_str, pattern):
                    return False

        return file_path.suffix.lower() in self._source_file_types

    def _normalize_path(self, file_path: Path) -> Path:
        try:
            return file_path.resolve()
        except (OSError, RuntimeError):
            return file_path.absolute()

"""
SourceFile 데이터 모델

소스 파일의 메타데이터를 저장하는 데이터 모델입니다.
"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


@dataclass(frozen=True)
class SourceFile:
    """
    소스 파일 메타데이터를 저장하는 데이터 모델

    Attributes:
        path: 파일의 절대 경로
        relative_path: 프로젝트 루트 기준 상대 경로
        filename: 파일명 (확장자 포함)
        extension: 파일 확장자 (예: .java, .kt)
        size: 파일 크기 (바이트)
        modified_time: 파일 수정 시간
    """

    path: Path
    relative_path: Path
    filename: str
    extension: str
    size: int
    modified_time: datetime

    def __post_init__(self):
        """타입 변환 (frozen이므로 object.__setattr__ 사용)"""
        if isinstance(self.path, str):
            object.__setattr__(self, "path", Path(self.path))
        if isinstance(self.relative_path, str):
            object.__setattr__(self, "relative_path", Path(self.relative_path))

    @property
    def stem(self) -> str:
        """확장자를 제외한 파일명"""
        return self.path.stem

    @classmethod
    def from_path(cls, file_path: Path, project_root: Path) -> "SourceFile":
        """
        파일 경로로부터 SourceFile 객체 생성

        Args:
            file_path: 소스 파일 경로
            project_root: 상대 경로 계산 기준이 되는 프로젝트 루트

        Returns:
            SourceFile: 생성된 SourceFile 객체

        Raises:
            OSError: 파일 정보를 가져올 수 없는 경우
        """
        stat_info = file_path.stat()
        absolute_path = file_path.resolve()

        try:
            relative_path = absolute_path.relative_to(project_root.resolve())
        except ValueError:
            # 프로젝트 루트 밖을 가리키는 심볼릭 링크
            relative_path = absolute_path

        return cls(
            path=absolute_path,
            relative_path=relative_path,
            filename=file_path.name,
            extension=file_path.suffix,
            size=stat_info.st_size,
            modified_time=datetime.fromtimestamp(stat_info.st_mtime),
        )

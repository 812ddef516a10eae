"""
SourceTree 데이터 모델

프로젝트 디렉터리의 불변 스냅샷입니다. 각 디렉터리의 자식은 이름의 사전순으로
정렬되어 있으므로, 동일한 트리에 대한 탐색 순서는 항상 같습니다.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Tuple, Union

from entrypoint_locator.models.source_file import SourceFile


@dataclass(frozen=True)
class SourceDirectory:
    """
    소스 트리의 디렉터리 노드

    Attributes:
        path: 디렉터리의 절대 경로
        relative_path: 프로젝트 루트 기준 상대 경로
        children: 이름순으로 정렬된 자식 노드 (SourceDirectory 또는 SourceFile)
    """

    path: Path
    relative_path: Path
    children: Tuple[Union["SourceDirectory", SourceFile], ...] = field(
        default_factory=tuple
    )

    @property
    def name(self) -> str:
        return self.path.name


SourceNode = Union[SourceDirectory, SourceFile]


def sort_key(node: SourceNode) -> str:
    """노드 정렬 키 (파일/디렉터리 구분 없이 이름 사전순)"""
    if isinstance(node, SourceFile):
        return node.filename
    return node.name


@dataclass(frozen=True)
class SourceTree:
    """
    소스 트리 스냅샷

    Attributes:
        root: 프로젝트 루트의 절대 경로
        children: 루트 바로 아래의 노드 (이름순)
    """

    root: Path
    children: Tuple[SourceNode, ...] = field(default_factory=tuple)

    def iter_files(self) -> Iterator[SourceFile]:
        """
        깊이 우선(전위) 순서로 모든 파일을 순회하는 제너레이터

        디렉터리는 탐색만 하고 반환하지 않습니다.

        Yields:
            SourceFile: 트리의 각 파일
        """
        yield from _walk(self.children)

    def file_count(self) -> int:
        return sum(1 for _ in self.iter_files())

    def is_empty(self) -> bool:
        return next(self.iter_files(), None) is None


def _walk(nodes: Tuple[SourceNode, ...]) -> Iterator[SourceFile]:
    for node in nodes:
        if isinstance(node, SourceDirectory):
            yield from _walk(node.children)
        else:
            yield node

"""
Source Tree Collector 단위 테스트

다음 시나리오를 검증합니다:
1. 지정된 확장자 파일만 수집
2. 재귀적 탐색이 모든 하위 디렉터리 포함
3. 빌드/숨김 디렉터리 제외
4. exclude_dirs / exclude_files 설정 적용
5. 이름순 정렬과 반복 수집 시 동일한 순서
6. 잘못된 프로젝트 경로 처리
"""

import tempfile
from datetime import datetime
from pathlib import Path

import pytest

from entrypoint_locator.collector.source_tree_collector import SourceTreeCollector
from entrypoint_locator.config.config_manager import Configuration
from entrypoint_locator.models.source_file import SourceFile
from entrypoint_locator.models.source_tree import SourceDirectory


@pytest.fixture
def temp_project_dir():
    """임시 프로젝트 디렉터리를 생성하는 픽스처"""
    with tempfile.TemporaryDirectory() as tmpdir:
        project_path = Path(tmpdir) / "test_project"
        project_path.mkdir()

        (project_path / "src" / "main" / "java").mkdir(parents=True)
        (project_path / "src" / "main" / "kotlin").mkdir(parents=True)
        (project_path / "build").mkdir()  # 빌드 디렉터리 (제외 대상)
        (project_path / ".git").mkdir()  # 버전 관리 디렉터리 (제외 대상)

        (project_path / "src" / "main" / "java" / "Main.java").write_text(
            "package com.example;\npublic class Main {}\n"
        )
        (project_path / "src" / "main" / "java" / "Service.java").write_text(
            "package com.example;\npublic class Service {}\n"
        )
        (project_path / "src" / "main" / "kotlin" / "app.kt").write_text(
            "package com.example\n\nfun main() {}\n"
        )

        # 제외할 파일들
        (project_path / "build" / "Main.java").write_text("generated")
        (project_path / ".git" / "config").write_text("git config")
        (project_path / "README.txt").write_text("readme")
        (project_path / ".Hidden.java").write_text("hidden")

        yield project_path


@pytest.fixture
def collector():
    return SourceTreeCollector(Configuration())


def relative_paths(tree):
    return [f.relative_path.as_posix() for f in tree.iter_files()]


def test_collect_specified_extensions(collector, temp_project_dir):
    """지정된 확장자 파일만 수집되는지 확인"""
    tree = collector.collect(temp_project_dir)

    extensions = {f.extension for f in tree.iter_files()}
    assert extensions == {".java", ".kt"}


def test_recursive_directory_traversal(collector, temp_project_dir):
    """재귀적 탐색이 모든 하위 디렉터리를 포함하는지 확인"""
    tree = collector.collect(temp_project_dir)

    assert relative_paths(tree) == [
        "src/main/java/Main.java",
        "src/main/java/Service.java",
        "src/main/kotlin/app.kt",
    ]


def test_exclude_build_and_hidden(collector, temp_project_dir):
    """빌드 디렉터리와 숨김 파일이 제외되는지 확인"""
    tree = collector.collect(temp_project_dir)

    paths = relative_paths(tree)
    assert not any(p.startswith("build/") for p in paths)
    assert not any(".git" in p for p in paths)
    assert ".Hidden.java" not in paths


def test_tree_structure(collector, temp_project_dir):
    """디렉터리 노드와 파일 노드 구조 확인"""
    tree = collector.collect(temp_project_dir)

    assert tree.root == temp_project_dir.resolve()
    assert len(tree.children) == 1
    src = tree.children[0]
    assert isinstance(src, SourceDirectory)
    assert src.name == "src"
    assert src.relative_path == Path("src")


def test_metadata_extraction(collector, temp_project_dir):
    """메타데이터가 정확히 추출되는지 확인"""
    tree = collector.collect(temp_project_dir)

    for source_file in tree.iter_files():
        assert isinstance(source_file, SourceFile)
        assert source_file.path.is_absolute()
        assert not source_file.relative_path.is_absolute()
        assert source_file.filename.endswith(source_file.extension)
        assert source_file.size > 0
        assert isinstance(source_file.modified_time, datetime)


def test_lexicographic_order(collector, temp_project_dir):
    """파일과 디렉터리가 이름순으로 정렬되는지 확인"""
    (temp_project_dir / "b").mkdir()
    (temp_project_dir / "b" / "B.java").write_text("class B {}")
    (temp_project_dir / "a.java").write_text("class A {}")
    (temp_project_dir / "c.java").write_text("class C {}")

    tree = collector.collect(temp_project_dir)

    top_level = [getattr(node, "filename", None) or node.name for node in tree.children]
    assert top_level == ["a.java", "b", "c.java", "src"]
    assert relative_paths(tree)[:3] == ["a.java", "b/B.java", "c.java"]


def test_repeated_collection_is_deterministic(collector, temp_project_dir):
    """같은 디렉터리를 여러 번 수집해도 순서가 같은지 확인"""
    first = relative_paths(collector.collect(temp_project_dir))
    second = relative_paths(collector.collect(temp_project_dir))

    assert first == second


def test_exclude_dirs_and_files(temp_project_dir):
    """exclude_dirs와 exclude_files 설정 적용 확인"""
    (temp_project_dir / "generated").mkdir()
    (temp_project_dir / "generated" / "Gen.java").write_text("class Gen {}")
    (temp_project_dir / "src" / "main" / "java" / "MainTest.java").write_text(
        "class MainTest {}"
    )

    config = Configuration(exclude_dirs=["generated"], exclude_files=["*Test.java"])
    tree = SourceTreeCollector(config).collect(temp_project_dir)

    paths = relative_paths(tree)
    assert "generated/Gen.java" not in paths
    assert "src/main/java/MainTest.java" not in paths
    assert "src/main/java/Main.java" in paths


def test_relative_path_pattern(temp_project_dir):
    """상대 경로 패턴으로 제외"""
    config = Configuration(exclude_files=["src/main/kotlin/*"])
    tree = SourceTreeCollector(config).collect(temp_project_dir)

    assert "src/main/kotlin/app.kt" not in relative_paths(tree)


def test_extension_case_insensitive(temp_project_dir):
    """확장자 비교는 대소문자를 구분하지 않음"""
    (temp_project_dir / "Upper.JAVA").write_text("class Upper {}")

    tree = SourceTreeCollector(Configuration()).collect(temp_project_dir)

    assert "Upper.JAVA" in relative_paths(tree)


def test_collect_uses_configured_project(temp_project_dir):
    """인자가 없으면 config.target_project 사용"""
    config = Configuration(target_project=str(temp_project_dir))
    tree = SourceTreeCollector(config).collect()

    assert tree.file_count() == 3


def test_empty_project(collector):
    with tempfile.TemporaryDirectory() as tmpdir:
        tree = collector.collect(Path(tmpdir))
        assert tree.is_empty()
        assert tree.file_count() == 0


def test_invalid_project_path(collector):
    """존재하지 않는 프로젝트 경로 처리 확인"""
    with pytest.raises(ValueError):
        collector.collect(Path("/nonexistent/path"))


def test_project_path_is_file(collector, temp_project_dir):
    with pytest.raises(ValueError):
        collector.collect(temp_project_dir / "README.txt")


def test_missing_project_path(collector):
    """경로 인자도 설정도 없으면 ValueError"""
    with pytest.raises(ValueError):
        collector.collect()


def test_nested_build_named_package_is_traversed(collector, temp_project_dir):
    """build/out 같은 이름도 루트가 아닌 패키지 디렉터리라면 탐색"""
    write_dir = temp_project_dir / "src" / "com" / "acme"
    (write_dir / "build").mkdir(parents=True)
    (write_dir / "out").mkdir()
    (write_dir / "build" / "App.java").write_text(
        "package com.acme.build;\npublic class App {}\n"
    )
    (write_dir / "out" / "Main.kt").write_text("package com.acme.out\n\nfun main() {}\n")

    paths = relative_paths(collector.collect(temp_project_dir))

    assert "src/com/acme/build/App.java" in paths
    assert "src/com/acme/out/Main.kt" in paths
    # 루트 바로 아래의 build 디렉터리는 여전히 제외
    assert "build/Main.java" not in paths


def test_exclude_dirs_applies_at_any_depth(temp_project_dir):
    """설정의 exclude_dirs는 깊이와 관계없이 적용"""
    (temp_project_dir / "src" / "main" / "java" / "generated").mkdir()
    (temp_project_dir / "src" / "main" / "java" / "generated" / "Gen.java").write_text(
        "class Gen {}"
    )

    config = Configuration(exclude_dirs=["generated"])
    paths = relative_paths(SourceTreeCollector(config).collect(temp_project_dir))

    assert "src/main/java/generated/Gen.java" not in paths

"""
Kotlin AST Parser 테스트

tree-sitter 기반 Kotlin 파서의 패키지/최상위 함수 추출 기능을 테스트합니다.
"""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from entrypoint_locator.parser.kotlin_ast_parser import KotlinASTParser
from entrypoint_locator.util.source_reader import SourceReadError


@pytest.fixture
def temp_dir():
    """임시 디렉터리 생성"""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def kotlin_parser():
    """Kotlin AST 파서 생성"""
    return KotlinASTParser()


@pytest.fixture
def sample_kotlin_file(temp_dir):
    """샘플 Kotlin 파일 생성"""
    kotlin_code = """package com.example.demo

import kotlin.system.exitProcess

class Greeter(private val name: String) {
    fun main(args: Array<String>) {
        println("not top-level")
    }
}

private fun helper(value: Int): String = value.toString()

fun main(args: Array<String>) {
    println(Greeter("world"))
}
"""
    file_path = temp_dir / "app.kt"
    file_path.write_text(kotlin_code, encoding="utf-8")
    return file_path


def test_parse_file(kotlin_parser, sample_kotlin_file):
    """파일 파싱 테스트"""
    kotlin_file = kotlin_parser.parse_file(sample_kotlin_file)

    assert kotlin_file.path == sample_kotlin_file
    assert kotlin_file.name == "app.kt"
    assert kotlin_file.package == "com.example.demo"


def test_extract_top_level_functions(kotlin_parser, sample_kotlin_file):
    """최상위 함수만 추출되는지 확인 (클래스 내부 main 제외)"""
    kotlin_file = kotlin_parser.parse_file(sample_kotlin_file)

    names = [f.name for f in kotlin_file.functions]
    assert names == ["helper", "main"]


def test_extract_modifiers_and_return_type(kotlin_parser, sample_kotlin_file):
    kotlin_file = kotlin_parser.parse_file(sample_kotlin_file)
    helper = kotlin_file.functions[0]

    assert "private" in helper.modifiers
    assert helper.return_type == "String"
    assert helper.parameters[0].name == "value"
    assert helper.parameters[0].type == "Int"


def test_extract_main_parameters(kotlin_parser, sample_kotlin_file):
    kotlin_file = kotlin_parser.parse_file(sample_kotlin_file)
    main = kotlin_file.functions[1]

    assert len(main.parameters) == 1
    assert main.parameters[0].name == "args"
    assert main.parameters[0].type == "Array<String>"
    assert main.parameters[0].is_vararg is False
    assert main.return_type is None
    assert main.has_receiver is False


def test_vararg_parameter(kotlin_parser):
    kotlin_file = kotlin_parser.parse_source(
        "package a\n\nfun main(vararg args: String) {}\n", "main.kt"
    )

    param = kotlin_file.functions[0].parameters[0]
    assert param.is_vararg is True
    assert param.type == "String"


def test_type_parameters(kotlin_parser):
    kotlin_file = kotlin_parser.parse_source(
        "package a\n\nfun <T> main() {}\n", "generic.kt"
    )

    assert kotlin_file.functions[0].has_type_parameters is True


def test_no_package(kotlin_parser):
    """패키지 선언이 없으면 빈 문자열"""
    kotlin_file = kotlin_parser.parse_source("fun main() {}\n", "nopkg.kt")

    assert kotlin_file.package == ""
    assert [f.name for f in kotlin_file.functions] == ["main"]


def test_unreadable_file(kotlin_parser, temp_dir):
    """존재하지 않는 파일은 SourceReadError"""
    with pytest.raises(SourceReadError):
        kotlin_parser.parse_file(temp_dir / "missing.kt")


def test_euc_kr_encoded_file(kotlin_parser, temp_dir):
    """UTF-8이 아닌 인코딩 파일도 파싱"""
    file_path = temp_dir / "hangul.kt"
    file_path.write_bytes(
        'package com.example\n\nfun main() {\n    println("안녕하세요")\n}\n'.encode("euc-kr")
    )

    kotlin_file = kotlin_parser.parse_file(file_path)

    assert kotlin_file.package == "com.example"
    assert [f.name for f in kotlin_file.functions] == ["main"]


def test_has_errors_flag(kotlin_parser, sample_kotlin_file):
    """구문 오류 여부가 KotlinFile에 기록되는지 확인"""
    assert kotlin_parser.parse_file(sample_kotlin_file).has_errors is False

    broken = kotlin_parser.parse_source("package a\n\nfun main( {\n", "broken.kt")
    assert broken.has_errors is True
    assert broken.name == "broken.kt"

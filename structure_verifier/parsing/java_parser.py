"""
Java 소스 파일 파서 모듈.

tree-sitter와 tree-sitter-java 바인딩을 사용하여
Java 소스 코드를 AST(Abstract Syntax Tree)로 변환한다.

tree-sitter는 문법 오류가 있어도 예외 없이 트리를 만들고,
오류 위치에 ERROR / MISSING 노드를 끼워 넣는다.
이 모듈은 그런 트리를 받아들이지 않고 SourceParseError로 거부한다.

사용 예:
    parser = JavaParser()
    tree, source = parser.parse_file(Path("GreetingController.java"))
    # tree.root_node로 AST 순회 가능
"""

from pathlib import Path

import tree_sitter_java as tsjava
from tree_sitter import Language, Node, Parser, Tree

from structure_verifier.errors import SourceParseError
from structure_verifier.loader import load_source

# tree-sitter-java의 언어 객체를 모듈 수준에서 한 번만 초기화.
# 읽기 전용이므로 여러 JavaParser 인스턴스가 공유해도 안전하다.
JAVA_LANGUAGE = Language(tsjava.language())


class JavaParser:
    """
    Java 소스를 tree-sitter AST로 변환하는 파서.

    tree-sitter Parser는 바이트 단위로 소스를 파싱하므로,
    반환되는 source도 bytes 타입이다. 노드의 start_byte/end_byte를
    사용하여 원본 소스에서 텍스트를 추출할 수 있다.
    """

    def __init__(self):
        # Parser는 인스턴스마다 따로 생성한다 (파싱 상태를 공유하지 않음)
        self.parser = Parser(JAVA_LANGUAGE)

    def parse_file(self, file_path: Path, encoding: str = "utf-8") -> tuple[Tree, bytes]:
        """
        Java 파일을 읽어 AST와 원본 바이트를 반환한다.

        Raises:
            SourceNotFoundError: 파일이 없을 때
            SourceParseError: 문법 오류가 있을 때
        """
        text = load_source(file_path, encoding=encoding)
        source = text.encode("utf-8")
        return self.parse_source(source, origin=str(file_path)), source

    def parse_source(self, source: bytes, origin: str = "<source>") -> Tree:
        """
        바이트 문자열을 파싱하여 AST를 반환한다.

        Args:
            source: Java 소스 코드의 바이트 문자열
            origin: 오류 메시지에 표시할 출처 (파일 경로 등)

        Returns:
            tree-sitter AST Tree 객체

        Raises:
            SourceParseError: 트리에 ERROR 또는 MISSING 노드가 있을 때
        """
        tree = self.parser.parse(source)
        if tree.root_node.has_error:
            row, column = _first_error_point(tree.root_node)
            raise SourceParseError(f"Java 문법 오류: {origin} ({row + 1}행 {column + 1}열)")
        return tree


def _first_error_point(node: Node) -> tuple[int, int]:
    """첫 번째 ERROR/MISSING 노드의 (row, column)을 찾는다. 0-based."""
    if node.type == "ERROR" or node.is_missing:
        return node.start_point[0], node.start_point[1]
    for child in node.children:
        if child.has_error:
            return _first_error_point(child)
    return node.start_point[0], node.start_point[1]

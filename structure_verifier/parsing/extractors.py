"""
선언 구조 추출 모듈.

tree-sitter AST를 순회하여 Java 소스 파일의 최상위 타입 선언 하나를
SourceUnit / TypeDeclaration 모델로 변환한다.
이 모듈은 파싱 파이프라인에서 가장 복잡한 핵심 모듈이다.

추출 대상:
- 파일명과 같은 이름의 최상위 클래스/인터페이스/enum 선언
- 선언의 어노테이션과 수정자
- 필드 선언 (변수별 타입, 선언문 어노테이션의 fan-out)
- 생성자 선언 (파라미터 목록, 파라미터별 어노테이션)
- 메서드 선언 (이름, 반환타입, 파라미터 목록, 어노테이션)

AST 순회 흐름:
    program
    ├── package_declaration → 패키지명 추출
    ├── import_declaration  → 무시
    └── class_declaration (이름이 기대 이름과 일치하는 것만)
        └── class_body
            ├── field_declaration → FieldDeclaration
            ├── constructor_declaration → ConstructorDeclaration
            ├── method_declaration → MethodDeclaration
            └── class_declaration (중첩 클래스) → 무시

메서드 본문은 순회하지 않는다 (선언과 시그니처만 검사 대상).
"""

from pathlib import Path

from tree_sitter import Node, Tree

from structure_verifier.errors import TypeNotFoundError
from structure_verifier.models import (
    ConstructorDeclaration,
    FieldDeclaration,
    MethodDeclaration,
    Parameter,
    SourceUnit,
    TypeDeclaration,
    VariableBinding,
)
from structure_verifier.parsing.annotation_extractor import (
    extract_annotations,
    extract_modifiers,
    node_text,
)
from structure_verifier.parsing.java_parser import JavaParser

# 노드 타입 → TypeDeclaration.kind 매핑
TYPE_DECLARATION_KINDS = {
    "class_declaration": "class",
    "interface_declaration": "interface",
    "enum_declaration": "enum",
}


class DeclarationExtractor:
    """
    tree-sitter AST에서 기대 이름의 최상위 타입 선언을 추출하는 추출기.

    추출 과정:
    1. 패키지 선언 추출
    2. 루트 직속 선언 중 이름이 일치하는 것 탐색 (없으면 TypeNotFoundError)
    3. 본문 멤버를 순회하며 필드/생성자/메서드 모델 생성
    """

    def extract(
        self,
        tree: Tree,
        source: bytes,
        expected_type_name: str,
        file_path: Path | None = None,
    ) -> SourceUnit:
        """
        AST에서 SourceUnit을 생성한다.

        Args:
            tree: tree-sitter 파싱 결과 AST (문법 오류 없음)
            source: 원본 소스 바이트
            expected_type_name: 파일명에서 얻은 기대 선언 이름
            file_path: 메타데이터용 파일 경로

        Raises:
            TypeNotFoundError: 기대 이름의 최상위 선언이 없을 때
        """
        root = tree.root_node
        package_name = self._extract_package(root, source)

        type_node = self._find_top_level_type(root, source, expected_type_name)
        if type_node is None:
            where = file_path if file_path is not None else "<source>"
            raise TypeNotFoundError(f"최상위 선언 '{expected_type_name}'을(를) 찾을 수 없습니다: {where}")

        return SourceUnit(
            path=str(file_path) if file_path is not None else None,
            package_name=package_name,
            declaration=self._extract_type(type_node, source),
        )

    def _extract_package(self, root: Node, source: bytes) -> str | None:
        """
        루트 노드에서 package 선언을 찾아 패키지명을 반환한다.

        Java AST 구조:
            program
            └── package_declaration
                └── scoped_identifier ("com.yaksha.assignment.controller")
                    또는 identifier ("util")
        """
        for child in root.children:
            if child.type == "package_declaration":
                for sub in child.children:
                    if sub.type in ("scoped_identifier", "identifier"):
                        return node_text(sub, source)
        return None

    def _find_top_level_type(self, root: Node, source: bytes, expected_type_name: str) -> Node | None:
        """루트 직속 자식 중 이름이 일치하는 타입 선언 노드를 찾는다. 중첩 선언은 보지 않는다."""
        for child in root.children:
            if child.type in TYPE_DECLARATION_KINDS and self._get_name(child, source) == expected_type_name:
                return child
        return None

    def _extract_type(self, node: Node, source: bytes) -> TypeDeclaration:
        """
        타입 선언 노드에서 TypeDeclaration을 생성한다.

        본문 노드 타입은 선언 종류마다 다르다:
        - class_body: 멤버가 직속 자식
        - interface_body: 필드는 constant_declaration으로 나타남
        - enum_body: 상수 목록 뒤 enum_body_declarations 안에 멤버가 있음
        """
        fields: list[FieldDeclaration] = []
        constructors: list[ConstructorDeclaration] = []
        methods: list[MethodDeclaration] = []

        for member in self._body_members(node):
            if member.type in ("field_declaration", "constant_declaration"):
                fields.append(self._extract_field(member, source))
            elif member.type == "constructor_declaration":
                constructors.append(self._extract_constructor(member, source))
            elif member.type == "method_declaration":
                methods.append(self._extract_method(member, source))
            # 중첩 타입, 초기화 블록 등은 검사 대상이 아니다

        return TypeDeclaration(
            name=self._get_name(node, source),
            kind=TYPE_DECLARATION_KINDS[node.type],
            annotations=extract_annotations(node, source),
            modifiers=extract_modifiers(node, source),
            fields=fields,
            constructors=constructors,
            methods=methods,
        )

    def _body_members(self, node: Node) -> list[Node]:
        body = node.child_by_field_name("body")
        if body is None:
            return []
        if body.type == "enum_body":
            members = []
            for child in body.children:
                if child.type == "enum_body_declarations":
                    members.extend(child.children)
            return members
        return list(body.children)

    def _extract_field(self, node: Node, source: bytes) -> FieldDeclaration:
        """
        필드 선언에서 FieldDeclaration을 추출한다.

        Java AST 구조:
            field_declaration
            ├── modifiers (어노테이션, private 등)
            ├── type (필드 타입, 예: PaymentGateway)
            ├── variable_declarator (declarator)
            │   ├── name (identifier)
            │   └── dimensions (선택, "int a[]"의 "[]")
            └── variable_declarator (declarator, "a, b"처럼 여러 개일 수 있음)

        어노테이션은 선언문 전체에 붙으므로 "@Autowired private Order a, b;"에서
        a와 b는 각자 어노테이션 사본을 받는다 (fan-out).
        """
        annotations = extract_annotations(node, source)
        type_node = node.child_by_field_name("type")
        type_name = node_text(type_node, source) if type_node else ""

        variables = []
        for declarator in node.children_by_field_name("declarator"):
            name_node = declarator.child_by_field_name("name")
            if not name_node:
                continue
            variables.append(VariableBinding(
                name=node_text(name_node, source),
                type_name=type_name + self._dimensions(declarator, source),
                annotations=[a.model_copy(deep=True) for a in annotations],
            ))

        return FieldDeclaration(
            type_name=type_name,
            variables=variables,
            annotations=annotations,
            modifiers=extract_modifiers(node, source),
        )

    def _extract_constructor(self, node: Node, source: bytes) -> ConstructorDeclaration:
        return ConstructorDeclaration(
            name=self._get_name(node, source),
            parameters=self._extract_parameters(node, source),
            annotations=extract_annotations(node, source),
            modifiers=extract_modifiers(node, source),
        )

    def _extract_method(self, node: Node, source: bytes) -> MethodDeclaration:
        """
        메서드 선언에서 MethodDeclaration을 추출한다.

        tree-sitter에서 반환 타입은 method_declaration의 type 필드이다.
        인터페이스의 추상 메서드처럼 본문이 없어도 동일하게 처리된다.
        """
        type_node = node.child_by_field_name("type")
        return MethodDeclaration(
            name=self._get_name(node, source),
            return_type=node_text(type_node, source) if type_node else None,
            parameters=self._extract_parameters(node, source),
            annotations=extract_annotations(node, source),
            modifiers=extract_modifiers(node, source),
        )

    def _extract_parameters(self, node: Node, source: bytes) -> list[Parameter]:
        """
        메서드/생성자의 파라미터 목록을 추출한다.

        formal_parameter: 일반 파라미터
            ├── modifiers (@RequestParam, final 등)
            ├── type
            ├── name
            └── dimensions (선택)
        spread_parameter: 가변 인수 (String... args)
            ├── modifiers
            ├── 타입 노드 (필드명 없음)
            └── variable_declarator (name)
        receiver_parameter(this)는 실제 파라미터가 아니므로 제외한다.
        """
        params = []
        params_node = node.child_by_field_name("parameters")
        if not params_node:
            return params
        for child in params_node.children:
            if child.type == "formal_parameter":
                params.append(self._formal_parameter(child, source))
            elif child.type == "spread_parameter":
                params.append(self._spread_parameter(child, source))
        return params

    def _formal_parameter(self, node: Node, source: bytes) -> Parameter:
        type_node = node.child_by_field_name("type")
        name_node = node.child_by_field_name("name")
        return Parameter(
            name=node_text(name_node, source) if name_node else "",
            type_name=(node_text(type_node, source) if type_node else "") + self._dimensions(node, source),
            annotations=extract_annotations(node, source),
        )

    def _spread_parameter(self, node: Node, source: bytes) -> Parameter:
        type_name = ""
        name = ""
        for child in node.named_children:
            if child.type == "variable_declarator":
                name_node = child.child_by_field_name("name")
                name = node_text(name_node, source) if name_node else ""
            elif child.type not in ("modifiers", "line_comment", "block_comment") and not type_name:
                type_name = node_text(child, source)
        return Parameter(
            name=name,
            type_name=type_name,
            annotations=extract_annotations(node, source),
            varargs=True,
        )

    def _dimensions(self, node: Node, source: bytes) -> str:
        """이름 뒤에 붙은 배열 차원 ("[]", "[][]")을 공백 없이 반환한다."""
        dims = node.child_by_field_name("dimensions")
        if dims is None:
            return ""
        return "".join(node_text(dims, source).split())

    def _get_name(self, node: Node, source: bytes) -> str | None:
        """노드의 name 필드에서 식별자를 추출한다."""
        name_node = node.child_by_field_name("name")
        if name_node:
            return node_text(name_node, source)
        return None


def parse_declaration(text: str, expected_type_name: str, path: Path | None = None) -> SourceUnit:
    """
    소스 텍스트를 파싱하여 기대 이름의 SourceUnit을 반환한다.

    Raises:
        SourceParseError: 문법 오류
        TypeNotFoundError: 기대 이름의 최상위 선언 없음
    """
    source = text.encode("utf-8")
    tree = JavaParser().parse_source(source, origin=str(path) if path is not None else "<source>")
    return DeclarationExtractor().extract(tree, source, expected_type_name, path)


def parse_unit(path: str | Path, encoding: str = "utf-8") -> SourceUnit:
    """
    파일을 읽고 파싱한다. 기대 선언 이름은 확장자를 뗀 파일명이다.

    예: ".../controller/GreetingController.java" → "GreetingController"
    """
    file_path = Path(path)
    tree, source = JavaParser().parse_file(file_path, encoding=encoding)
    return DeclarationExtractor().extract(tree, source, expected_type_name(file_path), file_path)


def expected_type_name(path: str | Path) -> str:
    """파일명에서 확장자를 뗀 부분을 기대 선언 이름으로 사용한다."""
    return Path(path).stem

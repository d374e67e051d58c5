"""
어노테이션 및 수정자 추출 모듈.

tree-sitter AST 노드에서 다음 요소를 추출하는 헬퍼 함수들:
- 어노테이션 (@Controller, @GetMapping("/greet") 등) → Annotation 모델
- 수정자 키워드 (public, static, final 등)

이 모듈의 함수들은 extractors.py에서 선언 추출 시 호출된다.

tree-sitter AST 구조 (Java):
    method_declaration
    ├── modifiers
    │   ├── marker_annotation (@Override처럼 인수 없는 어노테이션)
    │   ├── annotation (@GetMapping("/greet")처럼 인수 있는 어노테이션)
    │   │   ├── name (identifier / scoped_identifier)
    │   │   └── arguments (annotation_argument_list)
    │   └── "public", "static" 등의 키워드 노드
    ├── type
    ├── name (identifier)
    └── parameters (formal_parameters)
"""

from tree_sitter import Node

from structure_verifier.models import Annotation

ANNOTATION_NODE_TYPES = ("marker_annotation", "annotation")
COMMENT_NODE_TYPES = ("line_comment", "block_comment")


def node_text(node: Node, source: bytes) -> str:
    """노드가 차지하는 원본 소스 구간을 문자열로 반환한다."""
    return source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def extract_annotations(node: Node, source: bytes) -> list[Annotation]:
    """
    선언 노드의 modifiers에서 어노테이션을 추출한다.

    클래스/메서드/생성자/필드 선언뿐 아니라 formal_parameter,
    spread_parameter도 같은 modifiers 구조를 가지므로 그대로 사용할 수 있다.

    Args:
        node: 선언 또는 파라미터 노드
        source: 원본 소스 바이트

    Returns:
        소스 순서대로 정렬된 Annotation 리스트
    """
    annotations = []
    for child in node.children:
        if child.type == "modifiers":
            for mod_child in child.children:
                if mod_child.type in ANNOTATION_NODE_TYPES:
                    annotation = _to_annotation(mod_child, source)
                    if annotation:
                        annotations.append(annotation)
    return annotations


def _to_annotation(node: Node, source: bytes) -> Annotation | None:
    """
    marker_annotation / annotation 노드를 Annotation 모델로 변환한다.

    인수는 평가하지 않는다:
        @GetMapping("/greet")              → arguments=['"/greet"']
        @RequestMapping(path = "/api", method = GET)
                                           → arguments=['path = "/api"', 'method = GET']
    argument_text에는 괄호 안 원문 전체가 공백 정리 없이 그대로 들어간다.
    """
    name_node = node.child_by_field_name("name")
    if not name_node:
        return None

    arguments = []
    argument_text = ""
    args_node = node.child_by_field_name("arguments")
    if args_node:
        # 괄호 자체는 제외하고 안쪽 원문만 보관
        argument_text = source[args_node.start_byte + 1:args_node.end_byte - 1].decode(
            "utf-8", errors="replace"
        ).strip()
        for arg in args_node.named_children:
            if arg.type not in COMMENT_NODE_TYPES:
                arguments.append(node_text(arg, source))

    return Annotation(
        name=node_text(name_node, source),
        arguments=arguments,
        argument_text=argument_text,
    )


def extract_modifiers(node: Node, source: bytes) -> list[str]:
    """
    선언 노드의 modifiers에서 수정자 키워드를 추출한다.

    어노테이션과 주석을 제외한 순수 수정자만 반환한다:
    public, private, protected, static, final, abstract 등
    """
    modifiers = []
    for child in node.children:
        if child.type == "modifiers":
            for mod_child in child.children:
                if mod_child.type not in ANNOTATION_NODE_TYPES + COMMENT_NODE_TYPES:
                    modifiers.append(node_text(mod_child, source))
    return modifiers

"""
뷰(JSP/HTML) 검사 모듈.

뷰 파일은 객체 모델로 파싱하지 않고 원문 텍스트로 다룬다.
- 태그 존재: 원문에 대한 부분 문자열 포함 여부 ("<form", "<input", "<h2>")
- 태그 닫힘: 표준 라이브러리 html.parser로 시작/종료 태그 짝을 센다

JSP 지시어(<%@ ... %>)와 스크립틀릿은 HTMLParser가 텍스트로 취급하므로
태그 집계에 영향을 주지 않는다.
"""

from html.parser import HTMLParser
from pathlib import Path

from structure_verifier.errors import InspectionError
from structure_verifier.loader import load_source
from structure_verifier.models import CheckResult

# 종료 태그가 없는 void 요소: 시작 태그만으로 닫힌 것으로 본다
VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
})


class TagClosureParser(HTMLParser):
    """
    태그 이름별로 열린 개수와 올바르게 닫힌 개수를 집계한다.

    종료 태그는 같은 이름의 열린 태그가 남아 있을 때만 닫힘으로 센다.
    짝 없는 종료 태그(</p>만 있는 경우)는 무시한다.
    """

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.open_counts: dict[str, int] = {}
        self.closed_counts: dict[str, int] = {}

    def handle_starttag(self, tag: str, attrs) -> None:
        if tag in VOID_ELEMENTS:
            self._close(tag)
            return
        self.open_counts[tag] = self.open_counts.get(tag, 0) + 1

    def handle_startendtag(self, tag: str, attrs) -> None:
        # <br/>, <div/> 같은 자기 닫힘 태그
        self._close(tag)

    def handle_endtag(self, tag: str) -> None:
        if self.open_counts.get(tag, 0) > 0:
            self.open_counts[tag] -= 1
            self._close(tag)

    def _close(self, tag: str) -> None:
        self.closed_counts[tag] = self.closed_counts.get(tag, 0) + 1


def _tag_name(tag: str) -> str:
    """태그 표기(<div>, </div>, div)를 소문자 이름 div로 정규화한다."""
    return tag.strip().strip("<>/").strip().lower()


def check_tag_presence(path: str | Path, tag: str, encoding: str = "utf-8") -> CheckResult:
    """뷰 원문에 tag 문자열이 그대로 포함되는지 검사한다."""
    try:
        content = load_source(path, encoding=encoding)
    except InspectionError as exc:
        return CheckResult(
            name="check_tag_presence", path=str(path), passed=False,
            message=f"[{exc.kind}] {exc}", error_kind=exc.kind,
        )

    if tag in content:
        return CheckResult(
            name="check_tag_presence", path=str(path), passed=True,
            message=f"[{tag}] 태그가 {path}에 있습니다",
        )
    return CheckResult(
        name="check_tag_presence", path=str(path), passed=False,
        message=f"[{tag}] 태그가 {path}에 없습니다",
    )


def check_tag_closed(path: str | Path, tag: str, encoding: str = "utf-8") -> CheckResult:
    """
    뷰에 올바르게 닫힌 <tag> 요소가 하나 이상 있는지 검사한다.

    Args:
        path: JSP/HTML 파일 경로
        tag: 태그 이름 ("h2", "<h2>" 모두 허용)
    """
    name = _tag_name(tag)
    try:
        content = load_source(path, encoding=encoding)
    except InspectionError as exc:
        return CheckResult(
            name="check_tag_closed", path=str(path), passed=False,
            message=f"[{exc.kind}] {exc}", error_kind=exc.kind,
        )

    parser = TagClosureParser()
    parser.feed(content)
    parser.close()

    closed = parser.closed_counts.get(name, 0)
    if closed:
        return CheckResult(
            name="check_tag_closed", path=str(path), passed=True,
            message=f"올바르게 닫힌 <{name}> 태그 {closed}개가 {path}에 있습니다",
        )
    return CheckResult(
        name="check_tag_closed", path=str(path), passed=False,
        message=f"올바르게 닫힌 <{name}> 태그가 {path}에 없습니다",
    )

from structure_verifier.checks.markup import TagClosureParser, check_tag_closed, check_tag_presence


def _views(greeting_app):
    webapp = greeting_app / "src/main/webapp"
    return webapp / "index.jsp", webapp / "WEB-INF/views/greeting.jsp"


def test_tag_presence(greeting_app):
    index, greeting = _views(greeting_app)

    assert check_tag_presence(index, "<form").passed
    assert check_tag_presence(index, "<input").passed
    assert check_tag_presence(greeting, "<h2>").passed
    assert not check_tag_presence(greeting, "<table").passed


def test_tag_closed(greeting_app):
    index, greeting = _views(greeting_app)

    assert check_tag_closed(greeting, "h2").passed
    assert check_tag_closed(greeting, "<h2>").passed
    assert check_tag_closed(index, "form").passed
    # void 요소는 종료 태그 없이도 닫힌 것으로 본다
    assert check_tag_closed(index, "input").passed


def test_unclosed_tag_fails(greeting_app):
    _, greeting = _views(greeting_app)
    result = check_tag_closed(greeting, "p")

    assert result.passed is False
    assert result.error_kind is None
    assert "<p>" in result.message


def test_missing_view_reports_not_found(tmp_path):
    missing = tmp_path / "missing.jsp"

    presence = check_tag_presence(missing, "<form")
    closed = check_tag_closed(missing, "form")

    assert presence.error_kind == "NotFound"
    assert closed.error_kind == "NotFound"
    assert not presence and not closed


def test_parser_ignores_stray_end_tags():
    parser = TagClosureParser()
    parser.feed("</div><div><span>text</span></div></div><br/><img src='x'>")
    parser.close()

    assert parser.closed_counts == {"span": 1, "div": 1, "br": 1, "img": 1}
    assert parser.open_counts == {"div": 0, "span": 0}


def test_jsp_directives_are_not_tags(tmp_path):
    view = tmp_path / "page.jsp"
    view.write_text('<%@ page language="java" %>\n<h2>${message}</h2>', encoding="utf-8")

    assert check_tag_closed(view, "h2").passed

"""
선언 구조 추출 테스트.

CheckoutService 픽스처와 임시 소스로 파서가 만드는 모델을 검증한다.
"""

import pytest

from structure_verifier.errors import SourceParseError, TypeNotFoundError
from structure_verifier.parsing.extractors import expected_type_name, parse_declaration, parse_unit


@pytest.fixture
def checkout(checkout_file):
    return parse_unit(checkout_file)


def test_top_level_declaration(checkout, checkout_file):
    decl = checkout.declaration

    assert checkout.package_name == "com.example.shop"
    assert checkout.path == str(checkout_file)
    assert decl.name == "CheckoutService"
    assert decl.kind == "class"
    assert decl.modifiers == ["public"]
    assert [a.name for a in decl.annotations] == ["Service", "Transactional"]


def test_annotation_arguments_are_raw_text(checkout):
    service, transactional = checkout.declaration.annotations

    assert service.arguments == []
    assert service.argument_text == ""
    assert transactional.arguments == ["readOnly = true"]
    assert transactional.argument_text == "readOnly = true"


def test_multi_variable_field_fans_out_annotations(checkout):
    field = checkout.declaration.fields[0]

    assert field.type_name == "Order"
    assert [v.name for v in field.variables] == ["current", "previous"]
    for variable in field.variables:
        assert variable.type_name == "Order"
        assert [a.name for a in variable.annotations] == ["Autowired"]


def test_array_dimensions_after_variable_name(checkout):
    field = checkout.declaration.fields[1]

    assert [(v.name, v.type_name) for v in field.variables] == [("counts", "int[]"), ("total", "int")]
    assert field.annotations == []


def test_generic_field_type_kept_verbatim(checkout):
    field = checkout.declaration.fields[2]

    assert field.type_name == "List<Item>"
    assert field.modifiers == ["protected"]


def test_constructors_and_parameters(checkout):
    first, second = checkout.declaration.constructors

    assert first.name == "CheckoutService"
    assert [a.name for a in first.annotations] == ["Autowired"]
    assert first.parameter_types() == ["PaymentGateway", "Order"]
    gateway = first.parameters[0]
    assert gateway.name == "gateway"
    assert gateway.annotations[0].name == "Qualifier"
    assert gateway.annotations[0].argument_text == '"payPalPaymentGateway"'
    assert first.parameters[1].annotations == []
    assert second.parameter_types() == ["PaymentGateway"]


def test_methods_exclude_nested_types(checkout):
    methods = checkout.declaration.methods

    # Receipt.print()는 중첩 클래스 소속이므로 제외
    assert [m.name for m in methods] == ["greet", "greet", "pay", "audit"]
    assert methods[0].return_type == "String"
    assert methods[0].parameter_types() == ["String", "int"]
    assert methods[1].annotations[0].arguments == ['value = "/greet"', 'method = "POST"']


def test_varargs_parameter(checkout):
    audit = checkout.declaration.methods[3]
    entries = audit.parameters[0]

    assert entries.name == "entries"
    assert entries.type_name == "String"
    assert entries.varargs is True
    assert entries.signature_type == "String..."
    assert audit.return_type == "void"


def test_interface_constants_and_abstract_methods():
    source = """
    package demo;

    public interface Greeter {
        @Deprecated
        String PREFIX = "Hello";

        @GetMapping("/hi")
        String greet(@RequestParam("who") String name);
    }
    """
    decl = parse_declaration(source, "Greeter").declaration

    assert decl.kind == "interface"
    assert decl.fields[0].variables[0].name == "PREFIX"
    assert decl.fields[0].variables[0].annotations[0].name == "Deprecated"
    method = decl.methods[0]
    assert method.annotations[0].argument_text == '"/hi"'
    assert method.parameters[0].annotations[0].arguments == ['"who"']


def test_enum_members_after_constants():
    source = """
    public enum Color {
        RED, GREEN;

        private final String code = "c";

        Color() {
        }

        @JsonValue
        public String code() {
            return code;
        }
    }
    """
    decl = parse_declaration(source, "Color").declaration

    assert decl.kind == "enum"
    assert decl.fields[0].variables[0].name == "code"
    assert len(decl.constructors) == 1
    assert decl.methods[0].annotations[0].name == "JsonValue"


def test_selects_declaration_matching_expected_name():
    source = """
    import java.util.Map;

    // helper first, target second
    class Helper {
        @Bean
        void helper() {}
    }

    /* block comment */
    public class Main {
        void run() {}
    }
    """
    decl = parse_declaration(source, "Main").declaration

    assert decl.name == "Main"
    assert [m.name for m in decl.methods] == ["run"]


def test_nested_type_does_not_satisfy_lookup():
    source = "public class Outer { static class Inner {} }"

    with pytest.raises(TypeNotFoundError):
        parse_declaration(source, "Inner")


def test_type_name_mismatch_with_file_name(write_java):
    path = write_java("Foo.src", "class Bar {}")

    with pytest.raises(TypeNotFoundError) as excinfo:
        parse_unit(path)

    assert excinfo.value.kind == "TypeNotFound"
    assert "Foo" in str(excinfo.value)


def test_empty_source_has_no_declaration():
    with pytest.raises(TypeNotFoundError):
        parse_declaration("", "Foo")


def test_syntax_error_raises_parse_error(write_java):
    path = write_java("Broken.java", "public class Broken { void run( { }")

    with pytest.raises(SourceParseError) as excinfo:
        parse_unit(path)

    assert excinfo.value.kind == "ParseError"
    assert "Broken.java" in str(excinfo.value)
    assert isinstance(excinfo.value, ValueError)


def test_expected_type_name_strips_extension():
    assert expected_type_name("src/main/java/GreetingController.java") == "GreetingController"
    assert expected_type_name("Foo.src") == "Foo"

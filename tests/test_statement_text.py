"""Tests for statement rendering."""

from reposcope.services.java_parser import parse_source
from reposcope.services.statement_text import normalize, render_statement


def _render_first(body: str, index: int = 0) -> str:
    unit = parse_source(f"class T {{ void m() {{ {body} }} }}")
    statement = unit.tree.types[0].methods[0].body[index]
    return render_statement(unit, statement)


class TestRenderStatement:
    def test_while_with_block(self):
        assert _render_first("while(true){ g(); }") == "while (true) { g(); }"

    def test_if_without_braces_stops_at_semicolon(self):
        assert normalize(_render_first("if(x) p(); q();")) == "if(x)p();"

    def test_if_else_chain(self):
        text = _render_first("if (a) { b(); } else if (c) d(); else { e(); } f();")
        assert normalize(text) == "if(a){b();}elseif(c)d();else{e();}"

    def test_for_loop(self):
        text = _render_first("int s = 0; for (int i = 0; i < 3; i++) s += i; s++;", index=1)
        assert text == "for (int i = 0; i < 3; i++) s += i;"

    def test_nested_statements_are_included(self):
        text = _render_first("if (x) { while (y) { z(); } } done();")
        assert normalize(text) == "if(x){while(y){z();}}"

    def test_comments_are_dropped(self):
        text = _render_first("while (ok) { /* spin */ tick(); // again\n }")
        assert normalize(text) == "while(ok){tick();}"

    def test_last_statement_stops_at_method_end(self):
        unit = parse_source("class T { void m() { if (a) b(); } void n() { c(); } }")
        statement = unit.tree.types[0].methods[0].body[0]

        assert normalize(render_statement(unit, statement)) == "if(a)b();"

    def test_lambda_body_inside_condition(self):
        text = _render_first("if (run(() -> { go(); })) stop(); after();")
        assert normalize(text) == "if(run(()->{go();}))stop();"


class TestNormalize:
    def test_ignores_all_whitespace(self):
        assert normalize("while (true) {\n    g();\n}") == normalize("while(true){ g(); }")

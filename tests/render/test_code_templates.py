"""Test Jinja template rendering of code fragments."""

import pytest

from beanforge.render.template import CodeTemplateRenderer, render_code_template


def test_basic_template_rendering():
    renderer = CodeTemplateRenderer()

    result = renderer.render("return $this->{{ getter }}();", {"getter": "getName"})
    assert result == "return $this->getName();"


def test_conditional_block_lines_are_trimmed():
    renderer = CodeTemplateRenderer()

    template = "{% if guarded %}\n    guarded\n{% else %}\n    raw\n{% endif %}\n"

    assert renderer.render(template, {"guarded": True}) == "    guarded\n"
    assert renderer.render(template, {"guarded": False}) == "    raw\n"


def test_trailing_newline_is_kept():
    assert render_code_template("{{ a }}\n\n", {"a": "x"}) == "x\n\n"


def test_no_escaping():
    assert render_code_template("{{ value }}", {"value": "'<a>' & \"b\""}) == "'<a>' & \"b\""


def test_template_syntax_error():
    renderer = CodeTemplateRenderer()

    with pytest.raises(ValueError, match="Template syntax error"):
        renderer.render("{{ unclosed", {})


def test_missing_variable_is_an_error():
    with pytest.raises(ValueError, match="Template variable error"):
        render_code_template("{{ missing }}", {})

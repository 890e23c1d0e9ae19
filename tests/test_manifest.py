import pytest

from csrgen.common.errors import TemplateError
from csrgen.storage.manifest import render_manifest


def test_render_substitutes_fields(template_file):
    text = render_manifest("acme", "QUJD", str(template_file))
    assert "  name: acme\n" in text
    assert "  request: QUJD\n" in text
    assert text.endswith("- client auth\n")


def test_render_values_not_escaped(tmp_path):
    path = tmp_path / "t.yaml"
    path.write_text("name: {{ name }}\n")
    assert render_manifest("<a&b>", "", str(path)) == "name: <a&b>\n"


def test_missing_template(tmp_path):
    with pytest.raises(TemplateError, match="no such file"):
        render_manifest("acme", "QUJD", str(tmp_path / "template.yaml"))


def test_malformed_template(tmp_path):
    path = tmp_path / "template.yaml"
    path.write_text("name: {{ name \n")
    with pytest.raises(TemplateError):
        render_manifest("acme", "QUJD", str(path))


def test_unknown_field(tmp_path):
    path = tmp_path / "template.yaml"
    path.write_text("name: {{ Name }}\n")
    with pytest.raises(TemplateError):
        render_manifest("acme", "QUJD", str(path))

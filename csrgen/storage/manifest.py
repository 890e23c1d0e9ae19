"""YAML manifest rendering for a generated certificate request.

The template is an external file rendered with Jinja2. It receives two
fields:
	name     the identifier
	request  the base64-encoded PEM CSR

Values are substituted as-is; nothing is escaped or validated.
"""
import os

import jinja2

from csrgen.common.errors import TemplateError


def load_template(template_path: str) -> jinja2.Template:
	directory, filename = os.path.split(os.path.abspath(template_path))
	env = jinja2.Environment(
		loader=jinja2.FileSystemLoader(directory),
		undefined=jinja2.StrictUndefined,
		keep_trailing_newline=True,
		autoescape=False,
	)
	try:
		return env.get_template(filename)
	except jinja2.TemplateNotFound as e:
		raise TemplateError(f"template {template_path}: no such file") from e
	except jinja2.TemplateSyntaxError as e:
		raise TemplateError(f"template {template_path}:{e.lineno}: {e.message}") from e
	except (OSError, UnicodeDecodeError) as e:
		raise TemplateError(f"template {template_path}: {e}") from e


def render_manifest(name: str, encoded_request: str, template_path: str) -> str:
	"""Render the manifest template for name and the encoded request."""
	template = load_template(template_path)
	try:
		return template.render(name=name, request=encoded_request)
	except (jinja2.TemplateError, TypeError, ValueError) as e:
		raise TemplateError(f"rendering {template_path}: {e}") from e


__all__ = ["load_template", "render_manifest"]

"""Template rendering for generated code fragments."""

from jinja2 import Environment, StrictUndefined, TemplateSyntaxError, UndefinedError


class CodeTemplateRenderer:
    """Renderer for Jinja2 templates producing source code.

    Templates are compiled once and cached per template string.
    """

    def __init__(self):
        """Initialize template environment with code-friendly settings."""
        self.env = Environment(
            # Don't auto-escape since we're generating source code
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self._cache = {}

    def render(self, template_str: str, context: dict) -> str:
        """Render a Jinja template with given context.

        Args:
            template_str: Template string with Jinja syntax
            context: Dictionary of variables to make available in template

        Returns:
            Rendered source text

        Raises:
            ValueError: If the template has syntax errors or references a missing variable

        Examples:
            >>> renderer = CodeTemplateRenderer()
            >>> renderer.render("return {{ value }};", {"value": 1})
            'return 1;'
        """
        try:
            template = self._cache.get(template_str)
            if template is None:
                template = self.env.from_string(template_str)
                self._cache[template_str] = template
            return template.render(**context)
        except TemplateSyntaxError as e:
            raise ValueError(f"Template syntax error: {e}") from e
        except UndefinedError as e:
            raise ValueError(f"Template variable error: {e}") from e


# Global renderer instance
_renderer = CodeTemplateRenderer()


def render_code_template(template_str: str, context: dict) -> str:
    """Render a code template with the shared renderer.

    Args:
        template_str: Template string with Jinja syntax
        context: Dictionary of variables for template

    Returns:
        Rendered source text
    """
    return _renderer.render(template_str, context)

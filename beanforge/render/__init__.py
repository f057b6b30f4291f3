"""Code renderers, one per target language."""

from beanforge.render.base import CodeRenderer
from beanforge.render.php import PhpRenderer
from beanforge.render.python import PythonRenderer

__all__ = ["CodeRenderer", "PhpRenderer", "PythonRenderer", "get_renderer", "register_renderer"]

_RENDERERS: dict[str, type[CodeRenderer]] = {
    PhpRenderer.target: PhpRenderer,
    PythonRenderer.target: PythonRenderer,
}


def register_renderer(target: str, renderer_cls: type[CodeRenderer]) -> None:
    """Register a renderer class for a target language."""
    _RENDERERS[target] = renderer_cls


def get_renderer(target: str = "php") -> CodeRenderer:
    """Instantiate the renderer for a target language.

    Raises:
        ValueError: If no renderer is registered for the target
    """
    if target not in _RENDERERS:
        raise ValueError(f"Unknown target: {target}. Use one of: {', '.join(sorted(_RENDERERS))}")
    return _RENDERERS[target]()

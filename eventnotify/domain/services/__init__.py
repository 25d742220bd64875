"""Pure domain services."""

from eventnotify.domain.services.renderers import Renderer, render_table, select_renderer

__all__: list[str] = ["Renderer", "render_table", "select_renderer"]

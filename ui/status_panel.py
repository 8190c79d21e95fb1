# -*- coding: utf-8 -*-

import logging
import tkinter as tk

from tkinterweb import HtmlFrame

from domain.models import ViewSnapshot
from ui.markdown_renderer import MarkdownRenderer

log = logging.getLogger(__name__)


class HtmlPanel(tk.Frame):
    """A bordered card showing renderer output in a tkinterweb HtmlFrame."""

    def __init__(self, master, renderer: MarkdownRenderer):
        t = renderer.theme
        super().__init__(
            master, bg=t.panel, highlightthickness=1, highlightbackground=t.border
        )
        self.renderer = renderer
        self._last_html = None

        self.view = HtmlFrame(self, horizontal_scrollbar="auto")
        self.view.pack(fill="both", expand=True)

    def show_html(self, html: str):
        if html == self._last_html:
            return
        self._last_html = html
        try:
            self.view.load_html(html)
        except tk.TclError:
            log.warning("html panel could not load content", exc_info=True)


class StatusPanel(HtmlPanel):
    def render(self, snap: ViewSnapshot):
        self.show_html(self.renderer.render_status(snap))


class MascotPanel(HtmlPanel):
    def __init__(self, master, renderer: MarkdownRenderer):
        super().__init__(master, renderer)
        self.show_html(self.renderer.render_mascot())

# ui/markdown_renderer.py
# -*- coding: utf-8 -*-

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from markdown import markdown

from domain.models import ViewSnapshot


@dataclass(frozen=True)
class MarkdownTheme:
    text: str = "#E2E8F0"
    muted: str = "#94A3B8"
    border: str = "#1E293B"
    panel: str = "#0F172A"
    accent: str = "#22D3EE"
    track: str = "#1E293B"


def status_markdown(snap: ViewSnapshot) -> str:
    """Progress card text for the current session."""
    pct = round(snap.progress_fraction * 100)
    lines = [
        "#### 進行状況",
        "",
        f"**{snap.mode_label}** · `{snap.formatted_time}` ({pct}%)",
        "",
        snap.status_text,
    ]
    return "\n".join(lines)


def mascot_markdown() -> str:
    return "\n".join(
        [
            "#### マスコットスペース",
            "",
            "## Mascot Playground",
            "",
            "ここにアニメーションするマスコットを配置できます。",
            "十分な余白を確保しています。",
            "",
            "> Mascot area (640×360目安)",
        ]
    )


class MarkdownRenderer:
    """
    Single responsibility:
    - Convert MD -> HTML for tkinterweb's HtmlFrame
    - Provide CSS

    tkhtml only understands a subset of CSS, so the progress bar is a plain
    nested div with a percentage width rather than a <progress> element.
    """

    def __init__(self, theme: Optional[MarkdownTheme] = None):
        self.theme = theme or MarkdownTheme()

    def extensions(self) -> Tuple[List[str], Dict]:
        return ["extra", "sane_lists", "nl2br"], {}

    def css(self) -> str:
        t = self.theme
        return f"""
        body {{
          font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Arial, sans-serif;
          margin: 12px;
          color: {t.text};
          background: {t.panel};
          font-size: 13px;
          line-height: 1.5;
        }}
        h2 {{ font-size: 1.3em; margin: 0.4em 0; }}
        h4 {{
          font-size: 0.8em;
          letter-spacing: 0.2em;
          color: {t.accent};
          margin: 0 0 0.4em;
        }}
        p {{ margin: 0.5em 0; }}
        code {{ font-family: ui-monospace, Menlo, Consolas, monospace; }}
        blockquote {{
          margin: 0.8em 0;
          padding: 2em 0.9em;
          border: 1px dashed {t.muted};
          color: {t.muted};
          text-align: center;
        }}
        .track {{
          height: 8px;
          background: {t.track};
          border: 1px solid {t.border};
        }}
        .fill {{
          height: 8px;
          background: {t.accent};
        }}
        """

    def progress_bar_html(self, fraction: float) -> str:
        pct = max(0.0, min(1.0, fraction)) * 100
        return (
            f'<div class="track"><div class="fill" style="width: {pct:.1f}%"></div></div>'
        )

    def to_html(self, md_text: str, progress: Optional[float] = None) -> str:
        exts, cfg = self.extensions()
        body = markdown(
            md_text or "",
            extensions=exts,
            extension_configs=cfg,
            output_format="html5",
        )
        if progress is not None:
            body += self.progress_bar_html(progress)
        return f"""
        <html>
          <head>
            <meta charset="utf-8"/>
            <style>{self.css()}</style>
          </head>
          <body>{body}</body>
        </html>
        """

    def render_status(self, snap: ViewSnapshot) -> str:
        return self.to_html(status_markdown(snap), progress=snap.progress_fraction)

    def render_mascot(self) -> str:
        return self.to_html(mascot_markdown())

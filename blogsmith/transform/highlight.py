"""Highlights fenced code blocks in markdown sources with Pygments."""

from __future__ import annotations

import html
import re

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name, guess_lexer
from pygments.util import ClassNotFound

from blogsmith.models import BuildContext, RecordStore

from .render import is_markdown
from .pipeline import Step

# ```lang ... ``` at the start of a line; the info string may carry extra words.
_FENCE_RE = re.compile(
    r"^(?P<fence>`{3,}|~{3,})[ \t]*(?P<lang>[\w+#.-]*)[^\n]*\n(?P<code>.*?)^(?P=fence)[ \t]*$",
    re.MULTILINE | re.DOTALL,
)


class CodeHighlighter(Step):
    name = "highlight"

    def __init__(self, css_class: str = "highlight", guess_lang: bool = False):
        self.css_class = css_class
        self.guess_lang = guess_lang
        self._formatter = HtmlFormatter(cssclass=css_class)

    def apply(self, files: RecordStore, context: BuildContext) -> RecordStore:
        for path, record in files.items():
            if not is_markdown(path):
                continue
            text = record.text
            new_text = _FENCE_RE.sub(self._replace, text)
            if new_text != text:
                record.contents = new_text.encode("utf-8")
        return files

    def highlight_block(self, code: str, lang: str = "") -> str:
        lexer = self._lexer_for(code, lang)
        if lexer is None:
            return f'<div class="{self.css_class}"><pre><code>{html.escape(code)}</code></pre></div>\n'
        return highlight(code, lexer, self._formatter)

    def _lexer_for(self, code: str, lang: str):
        if lang:
            try:
                return get_lexer_by_name(lang)
            except ClassNotFound:
                pass
        if self.guess_lang:
            try:
                return guess_lexer(code)
            except ClassNotFound:
                return None
        return None

    def _replace(self, m: re.Match) -> str:
        # Blank lines around the block keep markdown from wrapping it in <p>.
        return "\n" + self.highlight_block(m.group("code"), m.group("lang")) + "\n"

import re

import markdown2

LINK_CLASS = "chat-link-button"
LIST_CLASSES = {
    "ul": "chat-list chat-list-disc",
    "ol": "chat-list chat-list-decimal",
}

_MARKDOWN_EXTRAS = {
    "breaks": {"on_newline": True},
    "cuddled-lists": None,
    "fenced-code-blocks": None,
    "strike": None,
}

# Attributes we always set ourselves on links
_LINK_ATTR_RE = re.compile(r'\s*\b(?:target|rel|class)="[^"]*"')
_LINK_OPEN_RE = re.compile(r"<a\s+([^>]*)>")
_LIST_OPEN_RE = re.compile(r"<(ul|ol)>")


class AnswerMarkdownPostProcessor:
    """Helper class to normalise webhook answers before markdown rendering"""

    def __init__(self, text: str):
        self._text = text

    def filter_escaped_newlines(self) -> str:
        """
        Convert literal escape sequences into real line breaks

        Some webhook answers arrive with ``\\n`` as two characters instead of
        a newline control character.

        :return: Text with escaped newlines replaced
        """
        text = self._text
        text = text.replace("\\r\\n", "\n")
        text = text.replace("\\n", "\n")
        return text

    def process(self) -> str:
        self._text = self.filter_escaped_newlines()
        return self._text

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str):
        self._text = value


def _rewrite_link(match: re.Match) -> str:
    attrs = _LINK_ATTR_RE.sub("", match.group(1)).strip()
    return f'<a {attrs} target="_blank" rel="noopener noreferrer" class="{LINK_CLASS}">'


def render_answer_html(text: str) -> str:
    """
    Render an assistant answer as HTML

    Escaped newlines are resolved first. Raw HTML in the answer is escaped,
    links open in a new tab styled as buttons and lists get list classes.

    :param text: Answer text in markdown
    :return: HTML fragment
    """
    processed = AnswerMarkdownPostProcessor(text).process()
    html = markdown2.markdown(processed, extras=_MARKDOWN_EXTRAS, safe_mode="escape")
    html = _LINK_OPEN_RE.sub(_rewrite_link, html)
    html = _LIST_OPEN_RE.sub(lambda m: f'<{m.group(1)} class="{LIST_CLASSES[m.group(1)]}">', html)
    return html.strip()

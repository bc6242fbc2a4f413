"""
Template rendering for skill files.

Skill files are written as Blade templates. Only a small subset of Blade is
used by skill authors, so the renderer translates that subset into Jinja2 and
renders it:

- @php ... @endphp blocks are dropped
- @boostsnippet("Title", "lang") ... @endboostsnippet becomes a <code-snippet>
  block whose body is emitted verbatim
- {{ $assist->method(...) }} echoes are evaluated against GuidelineAssist and
  HTML-escaped; {!! ... !!} echoes are not escaped
- @{{ ... }} is printed as a literal {{ ... }}
- {{-- ... --}} comments are dropped

Everything else is literal text, so Jinja syntax such as {% or {# in plain
markdown is printed as written. Only echo expressions of the form
$var->method(args) are understood.

Rendering never raises: on any failure the raw template text is returned.
"""

import logging
import re
from abc import ABC, abstractmethod

from jinja2 import Environment, StrictUndefined

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".blade.php"
RENDERED_SUFFIX = ".md"

_PHP_BLOCK = re.compile(r"@php\b.*?@endphp", re.DOTALL)
_BLADE_COMMENT = re.compile(r"\{\{--.*?--\}\}", re.DOTALL)
_SNIPPET = re.compile(
    r"@boostsnippet\((?P<args>\s*(?:\"[^\"]*\"|'[^']*')(?:\s*,\s*(?:\"[^\"]*\"|'[^']*'))*\s*)\)"
    r"[ \t]*\r?\n?(?P<body>.*?)@endboostsnippet",
    re.DOTALL,
)
_SNIPPET_ARG = re.compile(r"([\"'])(.*?)\1")
_ECHO = re.compile(
    r"(?P<literal>@\{\{.*?\}\})"
    r"|\{\{\s*(?P<escaped>.+?)\s*\}\}"
    r"|\{!!\s*(?P<raw>.+?)\s*!!\}",
    re.DOTALL,
)
_PHP_VARIABLE = re.compile(r"\$(\w+)")
_PHP_METHOD_CALL = re.compile(r"->(\w+)")
_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class TemplateRenderer(ABC):
    """Renders template source into plain text."""

    @abstractmethod
    def render(self, source: str) -> str:
        """Render template source.

        Implementations must not raise; on failure they return the source
        unchanged.
        """
        pass


class GuidelineAssist:
    """Helpers available to skill templates as `assist`."""

    def __init__(self, php_binary: str = "php", node_package_manager: str = "npm"):
        self.php_binary = php_binary
        self.node_package_manager = node_package_manager

    def artisan_command(self, command: str) -> str:
        return f"{self.php_binary} artisan {command}"

    def composer_command(self, command: str) -> str:
        return f"composer {command}"

    def node_package_manager_command(self, command: str) -> str:
        return f"{self.node_package_manager} run {command}"


def _snake_case(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def _translate_expression(expression: str) -> str:
    """Turn a PHP echo expression ($assist->artisanCommand('x')) into Jinja."""
    expression = _PHP_VARIABLE.sub(r"\1", expression)
    return _PHP_METHOD_CALL.sub(lambda m: "." + _snake_case(m.group(1)), expression)


def _raw(text: str) -> str:
    """Wrap literal text so Jinja prints it unchanged."""
    if not text:
        return ""
    # Split at every {% so a literal "{% endraw %}" cannot close the block
    return "{% raw %}" + text.replace("{%", "{%{% endraw %}{% raw %}") + "{% endraw %}"


def _translate_echoes(text: str) -> str:
    parts: list[str] = []
    position = 0
    for match in _ECHO.finditer(text):
        parts.append(_raw(text[position : match.start()]))
        if match.group("literal"):
            parts.append(_raw(match.group("literal")[1:]))
        elif match.group("escaped"):
            parts.append("{{ (" + _translate_expression(match.group("escaped")) + ")|e }}")
        else:
            parts.append("{{ " + _translate_expression(match.group("raw")) + " }}")
        position = match.end()
    parts.append(_raw(text[position:]))

    return "".join(parts)


def _translate_snippet(match: re.Match[str]) -> str:
    args = [value for _, value in _SNIPPET_ARG.findall(match.group("args"))]
    name = args[0] if args else ""
    lang = args[1] if len(args) > 1 else "html"
    body = match.group("body").rstrip()

    return _raw(f'<code-snippet name="{name}" lang="{lang}">\n{body}\n</code-snippet>')


def blade_to_jinja(source: str) -> str:
    """Translate the supported Blade subset into Jinja2 template source.

    Args:
        source: Blade template text.

    Returns:
        Equivalent Jinja2 template text.
    """
    source = _PHP_BLOCK.sub("", source)
    source = _BLADE_COMMENT.sub("", source)

    parts: list[str] = []
    position = 0
    for match in _SNIPPET.finditer(source):
        parts.append(_translate_echoes(source[position : match.start()]))
        parts.append(_translate_snippet(match))
        position = match.end()
    parts.append(_translate_echoes(source[position:]))

    return "".join(parts)


class BladeRenderer(TemplateRenderer):
    """Renders Blade skill templates through Jinja2."""

    def __init__(self, assist: GuidelineAssist | None = None):
        self.assist = assist or GuidelineAssist()
        self._env = Environment(
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    def render(self, source: str) -> str:
        try:
            template = self._env.from_string(blade_to_jinja(source))
            return template.render(assist=self.assist)
        except Exception as e:
            logger.debug(f"Template rendering failed, using raw source: {e}")
            return source

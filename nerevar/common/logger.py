import logging
from rich.console import Console
from rich.highlighter import RegexHighlighter
from rich.logging import RichHandler
from rich.theme import Theme

ROOT_LOGGER = "nerevar"

theme = Theme({
    "logging.level.debug": "cyan",
    "logging.level.info": "bold #FFFFFF on #61AD00",
    "logging.level.warning": "bold #FFFFFF on #DB6900",
    "logging.level.error": "bold #FFFFFF on #d70000",
    "logging.level.critical": "bold #FFFFFF on red",
    "log.time": "#A3A3A3",
    "nerevar.tag": "bold #C9A0FF",
    "nerevar.key": "bold cyan",
    "nerevar.file": "underline #A3A3A3",
})

# Logs go to stderr; stdout stays free for the desktop shell
console = Console(theme=theme, stderr=True)

class ConfigHighlighter(RegexHighlighter):
    """Service tags, `config.<name>` keys and config file names."""
    base_style = "nerevar."
    highlights = [
        r"^(?P<tag>\[\w+\])",
        r"(?P<key>\bconfig\.\w+)",
        r"(?P<file>[\w./\\-]+\.(?:cfg|lua|json))\b",
    ]

class ConfigRichHandler(RichHandler):
    def render_message(self, record, message):
        text = super().render_message(record, message)

        if record.levelno >= logging.ERROR:
            text.style = "#FF7878"
        elif record.levelno >= logging.WARNING:
            text.style = "#FFD078"

        return text

def _root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = ConfigRichHandler(
            console=console,
            highlighter=ConfigHighlighter(),
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            enable_link_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)
        root.setLevel(logging.INFO)
        root.propagate = False
    return root

def setup_logger(name: str) -> logging.Logger:
    """
    Logger for one service, e.g. `setup_logger("ServerConfig")`.

    Every service logger is a child of the `nerevar` logger, which owns the
    rich handler, so its level applies to all of them.
    """
    _root()
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")

def set_debug_mode(enabled: bool):
    _root().setLevel(logging.DEBUG if enabled else logging.INFO)

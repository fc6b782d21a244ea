"""Base logging functionality for enumeration tracing and debugging."""

import html
import logging
from pathlib import Path
from typing import Any, cast, Callable, Optional, TypeVar, Union
from functools import wraps

from finitetop.logger.html_content import CSS_LOG

F = TypeVar("F", bound=Callable[..., Any])


class AlgorithmLogger:
    """Base logger class for search tracing and debugging.

    Attributes:
        disabled: When True nothing is recorded anywhere.
        echo: When False messages only go to the HTML buffer, not the console.
        max_html_entries: Cap on buffered HTML entries; later entries are
            counted and dropped. None means unbounded.
    """

    max_html_entries: Optional[int] = 10_000

    def __init__(self, name: str):
        self.name = name
        self.disabled = False
        self.echo = True
        self._html_content = ['<div class="content">']
        self._css_content: list[str] = []
        self._section_open = False
        self._dropped_entries = 0

        self.logger = logging.getLogger(name)

        # Only add a default StreamHandler if no handlers exist, so two
        # instances sharing a name do not duplicate output.
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter("%(message)s")
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)
            self.logger.setLevel(logging.INFO)
            self.logger.propagate = False
        else:
            if self.logger.level == logging.NOTSET:
                self.logger.setLevel(logging.INFO)
            self.logger.propagate = False

        self._css_content.append(CSS_LOG)

    def _append_html(self, fragment: str):
        if (
            self.max_html_entries is not None
            and len(self._html_content) >= self.max_html_entries
        ):
            self._dropped_entries += 1
            return
        self._html_content.append(fragment)

    def _emit(self, level: int, message: str):
        if self.echo:
            self.logger.log(level, message)

    def section(self, title: str):
        """Create a new section in the log."""
        if self.disabled:
            return
        if self._section_open:
            self._append_html("</section>")
            self._section_open = False

        self._emit(logging.INFO, f"\n{'=' * 20} {title} {'=' * 20}\n")
        self._append_html(f'<section class="section"><h3>{html.escape(title)}</h3>')
        self._section_open = True

    def info(self, message: str):
        """Log info message."""
        if self.disabled:
            return
        self._emit(logging.INFO, message)
        self._append_html(f'<p class="info">{html.escape(message)}</p>')

    def warning(self, message: str):
        """Log warning message."""
        if self.disabled:
            return
        self._emit(logging.WARNING, message)
        self._append_html(f'<p class="warning">{html.escape(message)}</p>')

    def error(self, message: str):
        """Log an error message."""
        if self.disabled:
            return
        self._emit(logging.ERROR, message)
        self._append_html(f'<p class="error">{html.escape(message)}</p>')

    def debug(self, message: str):
        """Log debug message."""
        if self.disabled:
            return
        self._emit(logging.DEBUG, message)
        self._append_html(f'<p class="debug">{html.escape(message)}</p>')

    def result(self, label: str, value: Any):
        """Log a result with a label."""
        if self.disabled:
            return
        self._emit(logging.INFO, f"{label}: {value}")
        self._append_html(
            f'<div class="result"><strong>{html.escape(label)}:</strong> '
            f"{html.escape(str(value))}</div>"
        )

    def raw_html(self, html_content: str):
        """Add raw HTML content to the debug output."""
        if self.disabled:
            return
        self._append_html(html_content)

    def clear(self):
        """Clear all accumulated content."""
        self._html_content = ['<div class="content">']
        self._css_content = [CSS_LOG]
        self._section_open = False
        self._dropped_entries = 0

    @property
    def dropped_entries(self) -> int:
        return self._dropped_entries

    def get_html_content(self) -> str:
        """Get the accumulated HTML content."""
        # Build a snapshot without mutating internal buffers
        parts = list(self._html_content)
        if self._dropped_entries:
            parts.append(
                f'<p class="warning">{self._dropped_entries} further log entries '
                f"omitted (limit {self.max_html_entries})</p>"
            )
        if self._section_open:
            parts.append("</section>")
        parts.append("</div>")
        return "\n".join(parts)

    def get_css_content(self) -> str:
        """Get the accumulated CSS content."""
        return "\n".join(self._css_content)

    def write_debug_output(self, path: Union[str, Path], title: str = "") -> Path:
        """
        Write the accumulated log as a standalone HTML page.

        Args:
            path: Destination file. Parent directories are created.
            title: Page title, defaults to the logger name.

        Returns:
            The path that was written.
        """
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        page_title = html.escape(title or self.name)
        document = (
            "<!DOCTYPE html>\n<html>\n<head>\n"
            '<meta charset="utf-8">\n'
            f"<title>{page_title}</title>\n"
            f"<style>{self.get_css_content()}</style>\n"
            "</head>\n<body>\n"
            f"<h1>{page_title}</h1>\n"
            f"{self.get_html_content()}\n"
            "</body>\n</html>\n"
        )
        output_path.write_text(document, encoding="utf-8")
        return output_path

    def log_execution(self, func: F) -> F:
        """Decorator for logging function execution with type safety."""

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            self.section(f"Executing {func.__name__}")
            try:
                result = func(*args, **kwargs)
                self.info(f"{func.__name__} completed successfully")
                return result
            except Exception as e:
                self.info(f"Error in {func.__name__}: {str(e)}")
                raise

        return cast(F, wrapper)

"""Table display functionality for logs."""

import html
import logging
from typing import Any, List, Optional, Sequence
from tabulate import tabulate
from finitetop.logger.base_logger import AlgorithmLogger


class TableLogger(AlgorithmLogger):
    """Extension of AlgorithmLogger with table support."""

    def table(
        self,
        data: List[List[Any]],
        headers: Optional[List[str]] = None,
        title: Optional[str] = None,
        tablefmt: str = "grid",
        colalign: Optional[Sequence[Optional[str]]] = None,
    ) -> None:
        """Display data as a formatted table."""
        if self.disabled:
            return

        if headers is None:
            headers = []

        if title:
            self._emit(logging.INFO, f"\n{title}:")
            self._append_html(f"<h4>{html.escape(title)}</h4>")

        ascii_table = tabulate(
            data,
            headers=headers,
            tablefmt=tablefmt,
            colalign=colalign,
            showindex=False,
        )
        self._emit(logging.INFO, ascii_table)
        self.raw_html(self._create_html_table(data, headers))

    def _create_html_table(self, data: List[List[Any]], headers: List[str]) -> str:
        """Create HTML table string."""
        html_parts = ['<div class="table-container">', "<table>"]

        if headers:
            html_parts.append("<thead><tr>")
            for header in headers:
                html_parts.append(f"<th>{html.escape(str(header))}</th>")
            html_parts.append("</tr></thead>")

        html_parts.append("<tbody>")
        for row in data:
            html_parts.append("<tr>")
            for cell in row:
                html_parts.append(f"<td>{html.escape(str(cell))}</td>")
            html_parts.append("</tr>")
        html_parts.append("</tbody>")

        html_parts.append("</table>")
        html_parts.append("</div>")

        return "\n".join(html_parts)

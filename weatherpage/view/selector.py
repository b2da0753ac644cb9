"""Region selector: query-bound single-choice control."""

from collections.abc import Mapping
from html import escape
from urllib.parse import quote

from weatherpage.models.common import DEFAULT_REGION, Region

QUERY_PARAM = "city"


def selected_region(
    query: Mapping[str, str] | None, default: Region = DEFAULT_REGION
) -> Region:
    """Region the control shows for the current query.

    Absent, empty and unknown values all select the default, since the
    control can only show one of its own options.
    """
    value = (query or {}).get(QUERY_PARAM) or ""
    try:
        return Region(value)
    except ValueError:
        return default


def on_region_change(new_region: str) -> str:
    """Navigation target for a newly chosen region: the root path with ``city`` only."""
    return f"/?{QUERY_PARAM}={quote(new_region, safe='')}"


def render_selector(selected: Region) -> str:
    lines = [
        '<form class="selector" method="get" action="/">',
        '  <label for="city-select">選擇縣市：</label>',
        f'  <select id="city-select" name="{QUERY_PARAM}" '
        'onchange="window.location.assign(this.options[this.selectedIndex].dataset.href)">',
    ]
    for region in Region:
        marker = " selected" if region == selected else ""
        lines.append(
            f'    <option value="{escape(region.value)}" '
            f'data-href="{escape(on_region_change(region))}"{marker}>'
            f"{escape(region.value)}</option>"
        )
    lines.extend([
        "  </select>",
        '  <noscript><button type="submit">查詢</button></noscript>',
        "</form>",
    ])
    return "\n".join(lines)

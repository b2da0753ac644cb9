"""HTML rendering of the weather page."""

from datetime import datetime
from html import escape

from weatherpage.models.common import Region
from weatherpage.models.forecast import ForecastResult, NoData, WeatherFound
from weatherpage.view.selector import render_selector

NO_DATA_MESSAGE = "找不到該地區的天氣資料"
DATA_SOURCE = "資料來源：中央氣象署開放資料平臺"
WEEKDAYS = "一二三四五六日"

STYLE = """
body { margin: 0; font-family: system-ui, sans-serif; color: #fff;
       background: linear-gradient(135deg, #38bdf8, #2563eb); }
main { display: flex; min-height: 100vh; flex-direction: column;
       align-items: center; justify-content: center; padding: 2rem; }
.card { width: 100%; max-width: 28rem; padding: 2rem; border-radius: 0.75rem;
        background: rgba(255, 255, 255, 0.3); }
.headline { text-align: center; margin: 2rem 0; }
.headline .temp { font-size: 6rem; font-weight: 800; margin: 0; }
.headline .desc { font-size: 1.5rem; margin: 0; }
.details .row { display: flex; justify-content: space-between; padding: 1rem;
                margin-bottom: 1rem; border-radius: 0.5rem;
                background: rgba(255, 255, 255, 0.2); }
.selector { margin-bottom: 1rem; }
footer { margin-top: 2rem; font-size: 0.875rem; opacity: 0.8; }
"""


def resolve_region(city: str | None, default: Region) -> str:
    """Region to fetch and show: the query value when present and non-empty."""
    return city or str(default)


def format_long_date(d: datetime) -> str:
    """Long zh-TW date, e.g. 2026年10月19日 星期一."""
    return f"{d.year}年{d.month}月{d.day}日 星期{WEEKDAYS[d.weekday()]}"


def heading_name(region: str, result: ForecastResult) -> str:
    if isinstance(result, WeatherFound):
        return result.record.region_name
    return region


def render_page(
    region: str, result: ForecastResult, selected: Region, now: datetime
) -> str:
    """Render the full page for one request."""
    lines = [
        "<!DOCTYPE html>",
        '<html lang="zh-TW">',
        "<head>",
        '<meta charset="utf-8">',
        '<meta name="viewport" content="width=device-width, initial-scale=1">',
        f"<title>{escape(heading_name(region, result))} 天氣</title>",
        f"<style>{STYLE}</style>",
        "</head>",
        "<body>",
        "<main>",
        render_selector(selected),
        '<div class="card">',
        f"<h1>{escape(heading_name(region, result))}</h1>",
        f'<p class="date">{escape(format_long_date(now))}</p>',
    ]
    lines.extend(_render_body(result))
    lines.extend([
        "</div>",
        f"<footer>{DATA_SOURCE}</footer>",
        "</main>",
        "</body>",
        "</html>",
    ])
    return "\n".join(lines)


def _render_body(result: ForecastResult) -> list[str]:
    if isinstance(result, NoData):
        return [
            '<div class="headline">',
            f'<p class="desc">{NO_DATA_MESSAGE}</p>',
            "</div>",
        ]

    r = result.record
    return [
        '<div class="headline">',
        f'<p class="temp">{escape(r.max_temperature)}°</p>',
        f'<p class="desc">{escape(r.description)}</p>',
        "</div>",
        '<div class="details">',
        _detail_row(
            "最高/最低溫度", f"{r.min_temperature}° / {r.max_temperature}° C"
        ),
        _detail_row("降雨機率", f"{r.precipitation_probability} %"),
        _detail_row("舒適度", r.comfort_index),
        "</div>",
    ]


def _detail_row(label: str, value: str) -> str:
    return (
        f'<div class="row"><span class="label">{label}</span>'
        f'<span class="value">{escape(value)}</span></div>'
    )

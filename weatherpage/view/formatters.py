"""Output formatters for fetch results."""

import json
from dataclasses import asdict

from weatherpage.models.forecast import ForecastResult, NoData
from weatherpage.view.page import NO_DATA_MESSAGE


def format_result_text(region: str, result: ForecastResult) -> str:
    """Plain text summary for the terminal."""
    if isinstance(result, NoData):
        return f"{region}: {NO_DATA_MESSAGE} ({result.reason})"
    r = result.record
    lines = [
        f"=== {r.region_name} ===",
        f"{r.max_temperature}° {r.description}",
        f"最高/最低溫度: {r.min_temperature}° / {r.max_temperature}° C",
        f"降雨機率: {r.precipitation_probability} %",
        f"舒適度: {r.comfort_index}",
    ]
    return "\n".join(lines)


def format_result_json(region: str, result: ForecastResult) -> str:
    """JSON summary for programmatic consumption."""
    if isinstance(result, NoData):
        data = {
            "region": region,
            "found": False,
            "reason": str(result.reason),
            "detail": result.detail,
        }
    else:
        data = {"region": region, "found": True, "record": asdict(result.record)}
    return json.dumps(data, ensure_ascii=False, indent=2)

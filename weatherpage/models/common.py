"""Common types and helpers shared across models."""

from datetime import UTC, datetime
from enum import StrEnum
from zoneinfo import ZoneInfo

PLACEHOLDER = "-"


class Region(StrEnum):
    TAIPEI_CITY = "臺北市"
    NEW_TAIPEI_CITY = "新北市"
    TAOYUAN_CITY = "桃園市"
    TAICHUNG_CITY = "臺中市"
    TAINAN_CITY = "臺南市"
    KAOHSIUNG_CITY = "高雄市"
    KEELUNG_CITY = "基隆市"
    HSINCHU_COUNTY = "新竹縣"
    HSINCHU_CITY = "新竹市"
    MIAOLI_COUNTY = "苗栗縣"
    CHANGHUA_COUNTY = "彰化縣"
    NANTOU_COUNTY = "南投縣"
    YUNLIN_COUNTY = "雲林縣"
    CHIAYI_COUNTY = "嘉義縣"
    CHIAYI_CITY = "嘉義市"
    PINGTUNG_COUNTY = "屏東縣"
    YILAN_COUNTY = "宜蘭縣"
    HUALIEN_COUNTY = "花蓮縣"
    TAITUNG_COUNTY = "臺東縣"
    PENGHU_COUNTY = "澎湖縣"
    KINMEN_COUNTY = "金門縣"
    LIENCHIANG_COUNTY = "連江縣"


DEFAULT_REGION = Region.TAIPEI_CITY


def utc_now() -> datetime:
    return datetime.now(UTC)


def local_now(timezone: str) -> datetime:
    """Current wall-clock time in the given IANA timezone."""
    return utc_now().astimezone(ZoneInfo(timezone))

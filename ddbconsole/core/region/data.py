"""
core/region/data.py - Region catalog

Commercial regions offered by the region selector, with display names.
"""

from __future__ import annotations

# Regions offered by the region selector (sorted)
ALL_REGIONS = [
    "af-south-1",
    "ap-east-1",
    "ap-northeast-1",
    "ap-northeast-2",
    "ap-northeast-3",
    "ap-south-1",
    "ap-south-2",
    "ap-southeast-1",
    "ap-southeast-2",
    "ap-southeast-3",
    "ap-southeast-4",
    "ca-central-1",
    "ca-west-1",
    "eu-central-1",
    "eu-central-2",
    "eu-north-1",
    "eu-south-1",
    "eu-south-2",
    "eu-west-1",
    "eu-west-2",
    "eu-west-3",
    "me-central-1",
    "me-south-1",
    "sa-east-1",
    "us-east-1",
    "us-east-2",
    "us-west-1",
    "us-west-2",
]

DEFAULT_REGION = "us-east-1"

REGION_NAMES = {
    "af-south-1": "케이프타운",
    "ap-east-1": "홍콩",
    "ap-northeast-1": "도쿄",
    "ap-northeast-2": "서울",
    "ap-northeast-3": "오사카",
    "ap-south-1": "뭄바이",
    "ap-south-2": "하이데라바드",
    "ap-southeast-1": "싱가포르",
    "ap-southeast-2": "시드니",
    "ap-southeast-3": "자카르타",
    "ap-southeast-4": "멜버른",
    "ca-central-1": "캐나다 중부",
    "ca-west-1": "캘거리",
    "eu-central-1": "프랑크푸르트",
    "eu-central-2": "취리히",
    "eu-north-1": "스톡홀름",
    "eu-south-1": "밀라노",
    "eu-south-2": "스페인",
    "eu-west-1": "유럽 (아일랜드)",
    "eu-west-2": "런던",
    "eu-west-3": "파리",
    "me-central-1": "UAE",
    "me-south-1": "바레인",
    "sa-east-1": "상파울루",
    "us-east-1": "미국 버지니아 북부",
    "us-east-2": "미국 오하이오",
    "us-west-1": "미국 캘리포니아 북부",
    "us-west-2": "미국 오레곤",
}

REGION_NAMES_EN = {
    "af-south-1": "Cape Town",
    "ap-east-1": "Hong Kong",
    "ap-northeast-1": "Tokyo",
    "ap-northeast-2": "Seoul",
    "ap-northeast-3": "Osaka",
    "ap-south-1": "Mumbai",
    "ap-south-2": "Hyderabad",
    "ap-southeast-1": "Singapore",
    "ap-southeast-2": "Sydney",
    "ap-southeast-3": "Jakarta",
    "ap-southeast-4": "Melbourne",
    "ca-central-1": "Canada (Central)",
    "ca-west-1": "Calgary",
    "eu-central-1": "Frankfurt",
    "eu-central-2": "Zurich",
    "eu-north-1": "Stockholm",
    "eu-south-1": "Milan",
    "eu-south-2": "Spain",
    "eu-west-1": "Ireland",
    "eu-west-2": "London",
    "eu-west-3": "Paris",
    "me-central-1": "UAE",
    "me-south-1": "Bahrain",
    "sa-east-1": "Sao Paulo",
    "us-east-1": "N. Virginia",
    "us-east-2": "Ohio",
    "us-west-1": "N. California",
    "us-west-2": "Oregon",
}


def get_region_name(region: str, lang: str = "ko") -> str:
    """Display name of a region ("" when unknown)"""
    names = REGION_NAMES_EN if lang == "en" else REGION_NAMES
    return names.get(region, "")

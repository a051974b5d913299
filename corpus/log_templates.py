# /corpus/log_templates.py

import re
from typing import Optional

from corpus.models import ParsedLog

# Vendor log layouts, tried in order; the first matching pattern wins.
VENDOR_TEMPLATES = {
    "huawei": [
        (re.compile(r"ALARM:(?P<code>\w+):(?P<message>.+)"), "ALARM:{code}:{message}"),
        (
            re.compile(r"(?P<timestamp>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}) (?P<level>\w+) (?P<message>.+)"),
            "{timestamp} {level} {message}",
        ),
    ],
    "zte": [
        (re.compile(r"Warning: (?P<message>.+) - (?P<code>\w+)"), "Warning: {message} - {code}"),
        (re.compile(r"Error (?P<code>\d+): (?P<message>.+)"), "Error {code}: {message}"),
    ],
}


def detect_vendor(log: str) -> str:
    if "ALARM" in log:
        return "huawei"
    if "Warning" in log or "Error" in log:
        return "zte"
    return "unknown"


def process_log_template(log: str, vendor: Optional[str] = None) -> ParsedLog:
    """Matches a raw device log line against the known templates of its vendor."""
    vendor = vendor.lower() if vendor else detect_vendor(log)

    for pattern, template in VENDOR_TEMPLATES.get(vendor, []):
        match = pattern.search(log)
        if match:
            return ParsedLog(vendor=vendor, template=template, params=match.groupdict(), original=log)

    return ParsedLog(vendor=vendor, template=None, params={}, original=log)

import json
from datetime import datetime, timezone
from typing import Any, Optional


def received_at(now: Optional[datetime] = None) -> str:
	now = now or datetime.now(timezone.utc)
	return now.strftime("%Y-%m-%d %H:%M:%S")


def pretty_json(value: Any) -> str:
	return json.dumps(value, indent=2, ensure_ascii=False)

from typing import Optional


def is_nonempty_string(value: Optional[str]) -> bool:
	return bool(value and value.strip())

from typing import Optional


SUBSCRIBE_MODE = "subscribe"


def verify_subscription(
	verify_token: Optional[str],
	mode: Optional[str],
	token: Optional[str],
	challenge: Optional[str],
) -> Optional[str]:
	"""Return the challenge to echo back, or None if the handshake is refused.

	An unconfigured ``verify_token`` refuses every handshake.
	"""
	if verify_token is None:
		return None
	if mode == SUBSCRIBE_MODE and token == verify_token:
		return challenge or ""
	return None

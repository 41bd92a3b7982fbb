from typing import Literal

from pydantic import BaseModel, ConfigDict


class HealthResponse(BaseModel):
	status: Literal["ok"] = "ok"


class VerificationResult(BaseModel):
	"""Outcome of a signature check. Logged, never returned to the sender."""

	model_config = ConfigDict(frozen=True)

	valid: bool
	reason: str

	@classmethod
	def ok(cls) -> "VerificationResult":
		return cls(valid=True, reason="OK")

	@classmethod
	def rejected(cls, reason: str) -> "VerificationResult":
		return cls(valid=False, reason=reason)

import json
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.responses import PlainTextResponse

from ..config import Settings
from ..services.handshake import verify_subscription
from ..services.signature import SignatureVerifier
from ..utils.formatting import pretty_json, received_at

router = APIRouter(tags=["webhooks"])


def get_app_settings(request: Request) -> Settings:
	return request.app.state.settings


def get_verifier(request: Request) -> SignatureVerifier:
	return request.app.state.verifier


def get_webhook_logger(request: Request):
	return request.app.state.logger


@router.get("/")
def verify(
	mode: Optional[str] = Query(default=None, alias="hub.mode"),
	challenge: Optional[str] = Query(default=None, alias="hub.challenge"),
	verify_token: Optional[str] = Query(default=None, alias="hub.verify_token"),
	settings: Settings = Depends(get_app_settings),
	logger=Depends(get_webhook_logger),
) -> Response:
	answer = verify_subscription(settings.VERIFY_TOKEN, mode, verify_token, challenge)
	if answer is None:
		return Response(status_code=403)
	logger.info("webhook_verified")
	return PlainTextResponse(answer, status_code=200)


@router.post("/")
async def receive(
	request: Request,
	verifier: SignatureVerifier = Depends(get_verifier),
	logger=Depends(get_webhook_logger),
) -> Response:
	# Hash the bytes as delivered; the parsed body is only for display
	raw = await request.body()

	logger.info(
		"webhook_received",
		received_at=received_at(),
		headers=pretty_json(dict(request.headers)),
	)

	try:
		# An empty delivery is shown as an empty object
		payload = json.loads(raw) if raw else {}
		logger.info("webhook_body", body=pretty_json(payload))
	except (ValueError, TypeError, RecursionError) as exc:
		logger.error("body_parse_failed", error=str(exc), size=len(raw))

	result = await verifier.verify_headers(raw, request.headers)
	logger.info("signature_validation", valid=result.valid, reason=result.reason)

	return Response(status_code=200)

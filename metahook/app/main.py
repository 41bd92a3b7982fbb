from typing import Optional

import uvicorn
from fastapi import FastAPI

from .config import Settings, get_settings
from .schemas import HealthResponse
from .services.hmac_backends import probe_backends, select_backend
from .services.signature import SignatureVerifier
from .utils.logging import configure_logging, get_logger
from .webhooks.graph import router as graph_router


def create_app(settings: Optional[Settings] = None, logger=None) -> FastAPI:
	settings = settings or get_settings()
	logger = logger or get_logger(__name__)

	backend = select_backend(settings.HMAC_BACKEND)
	logger.info(
		"hmac_backends_probed",
		available=probe_backends(),
		preference=settings.HMAC_BACKEND,
		selected=backend.name if backend else None,
	)
	if backend is None:
		logger.warning("hmac_backend_unavailable", preference=settings.HMAC_BACKEND)
	if not settings.signature_checks_enabled:
		logger.warning("signature_verification_disabled", reason="APP_TOKEN not set")
	if settings.VERIFY_TOKEN is None:
		logger.warning("handshake_disabled", reason="VERIFY_TOKEN not set")

	app = FastAPI(title="MetaHook", version="0.1.0")
	app.state.settings = settings
	app.state.logger = logger
	app.state.verifier = SignatureVerifier(settings.APP_TOKEN, backend)

	@app.get("/health", response_model=HealthResponse)
	def health() -> HealthResponse:
		return HealthResponse()

	app.include_router(graph_router)
	return app


def run() -> None:
	settings = get_settings()
	configure_logging(settings)
	logger = get_logger(__name__)
	app = create_app(settings, logger)
	logger.info("listening", host=settings.HOST, port=settings.PORT)
	uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
	run()

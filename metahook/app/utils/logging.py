import logging
import sys
from typing import List

import structlog

from ..config import Settings


def resolve_level(name: str) -> int:
	level = logging.getLevelName(name.upper())
	return level if isinstance(level, int) else logging.INFO


def _renderers(app_env: str) -> List:
	if app_env == "dev":
		return [
			structlog.processors.CallsiteParameterAdder(
				parameters=[
					structlog.processors.CallsiteParameter.PATHNAME,
					structlog.processors.CallsiteParameter.LINENO,
				]
			),
			structlog.dev.ConsoleRenderer(),
		]
	return [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]


def configure_logging(settings: Settings) -> None:
	"""Route structlog events to stdout, rendered for ``settings.APP_ENV``.

	Webhook blocks (headers, body, verdict) are emitted as keyword fields, so
	outside ``dev`` each delivery becomes one JSON line.
	"""
	log_level = resolve_level(settings.LOG_LEVEL)

	structlog.configure(
		processors=[
			structlog.processors.add_log_level,
			structlog.processors.TimeStamper(fmt="iso", utc=True),
			*_renderers(settings.APP_ENV),
		],
		wrapper_class=structlog.make_filtering_bound_logger(log_level),
		logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
		cache_logger_on_first_use=True,
	)

	# uvicorn logs through stdlib logging
	logging.basicConfig(level=log_level)


def get_logger(module_name: str):
	return structlog.get_logger(module_name)

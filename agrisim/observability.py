"""Structured logging for the engine, the runner and the CLI.

The library never configures logging on import; ``agrisim`` CLI commands
call ``configure_structured_logging`` and embedding applications may call
it or install their own structlog setup. Engine ticks bind ``run_id`` as a
context variable, so pipeline events carry it once ``merge_contextvars``
is in the processor chain.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any

import structlog

from agrisim.config import LogFormat, Settings, get_settings

_configured = False


def configure_structured_logging(settings: Settings | None = None, *, force: bool = False) -> None:
	"""Install the agrisim processor chain; later calls are no-ops unless ``force``."""
	global _configured
	if _configured and not force:
		return

	settings = settings or get_settings()
	log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

	if settings.log_format == LogFormat.json:
		renderer: Any = structlog.processors.JSONRenderer()
	else:
		renderer = structlog.dev.ConsoleRenderer(colors=False)
	logging.basicConfig(level=log_level, format="%(message)s")

	structlog.configure(
		processors=[
			structlog.contextvars.merge_contextvars,
			structlog.processors.add_log_level,
			structlog.processors.TimeStamper(fmt="iso", utc=True),
			structlog.processors.format_exc_info,
			renderer,
		],
		wrapper_class=structlog.make_filtering_bound_logger(log_level),
		logger_factory=structlog.PrintLoggerFactory(),
		# Module-level loggers must follow later reconfiguration (tests, embedders).
		cache_logger_on_first_use=False,
	)
	_configured = True


def new_run_id() -> str:
	return uuid.uuid4().hex[:12]

import json
import logging
import sys
from datetime import UTC, datetime

# Attributes callers pass through ``extra=`` that belong in structured output.
CONTEXT_FIELDS = ('session_id', 'corridor')


class ComparisonLogFormatter(logging.Formatter):
	"""Renders one JSON object per record, lifting session context to top-level keys."""

	def format(self, record: logging.LogRecord) -> str:
		entry = {
			'time': datetime.fromtimestamp(record.created, UTC).isoformat(),
			'level': record.levelname,
			'logger': record.name,
			'message': record.getMessage(),
		}
		for name in CONTEXT_FIELDS:
			value = getattr(record, name, None)
			if value is not None:
				entry[name] = value

		if record.exc_info:
			exc_type, exc, _ = record.exc_info
			entry['error'] = {'type': exc_type.__name__, 'detail': str(exc)}
			entry['traceback'] = self.formatException(record.exc_info)

		return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(level: str = 'INFO', json_logs: bool = False) -> None:
	handler = logging.StreamHandler(sys.stdout)
	if json_logs:
		handler.setFormatter(ComparisonLogFormatter())
	else:
		handler.setFormatter(
			logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
		)

	root_logger = logging.getLogger()
	root_logger.handlers.clear()
	root_logger.addHandler(handler)
	root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

	logging.getLogger('httpx').setLevel(logging.WARNING)

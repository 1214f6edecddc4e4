# utils/logger.py

import inspect
import logging
import sys

_LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s%(tag)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

class TaggedFormatter(logging.Formatter):
	"""
	Formatter that tolerates records without a 'tag' attribute.

	Third party libraries (uvicorn, pymongo, httpx) log through plain loggers,
	so the tag is filled with an empty string before formatting.
	"""
	def __init__(self, fmt=_LOG_FORMAT, datefmt=_DATE_FORMAT, **kwargs):
		super().__init__(fmt, datefmt, **kwargs)

	def format(self, record: logging.LogRecord) -> str:
		if not hasattr(record, "tag"):
			record.tag = ""
		return super().format(record)

def setup_logging(
	level: int | str = logging.INFO,
	stream=sys.stdout
) -> None:
	"""
	Attaches a single tagged stream handler to the root logger.

	Safe to call more than once; later calls only adjust the level.

	Args:
		level: Minimum level, either a logging constant or a name such as "DEBUG".
		stream: Where log lines are written.
	"""
	root_logger = logging.getLogger()
	if isinstance(level, str):
		level = logging.getLevelName(level.upper())
	root_logger.setLevel(level)

	if any(isinstance(h.formatter, TaggedFormatter) for h in root_logger.handlers):
		return

	handler = logging.StreamHandler(stream=stream)
	handler.setFormatter(TaggedFormatter())
	root_logger.addHandler(handler)
	root_logger.debug("Logging configured")

def logger(
	tag: str | None = None,
	*,
	name: str | None = None
) -> logging.LoggerAdapter:
	"""
	Returns a LoggerAdapter that stamps every record with a tag.

	The logger name defaults to the calling module, so
	`logger(tag="create").info("...")` inside `clinic.api.routes.patients`
	prints as `clinic.api.routes.patients:create`.
	"""
	logger_name = name
	if logger_name is None:
		module = inspect.getmodule(inspect.stack()[1][0])
		logger_name = module.__name__ if module else "clinic"
	return logging.LoggerAdapter(
		logging.getLogger(logger_name),
		{"tag": f":{tag}" if tag is not None else ""}
	)

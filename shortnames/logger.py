import logging
import sys

_handler = None


def configure_logging(verbose: bool = False):
	"""Send library logs to stderr, at debug level when verbose."""
	global _handler

	level = logging.DEBUG if verbose else logging.WARNING
	root = logging.getLogger()
	root.setLevel(level)

	if _handler is None:
		_handler = logging.StreamHandler()
		_handler.setFormatter(logging.Formatter(
			fmt='%(asctime)s %(levelname)s %(name)s: %(message)s',
			datefmt='%H:%M:%S'
		))
		root.addHandler(_handler)
	else:
		_handler.setStream(sys.stderr)
	_handler.setLevel(level)

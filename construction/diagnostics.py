"""
Tracing for the construction protocol.

Nothing here is needed for correct operation. It exists so that
a confused caller can see which constructor got resolved for which
type, and what argument list a patch turned into, without having
to step through the code in a debugger.

Output goes to stderr, and only when the verbosity is positive.
The initial level comes from the CONSTRUCTION_VERBOSE environment
variable; after that, call set_verbosity().
"""
import os, sys

def _initial_level() -> int:
	text = os.environ.get("CONSTRUCTION_VERBOSE", "").strip()
	try: return int(text) if text else 0
	except ValueError: return 0

_level = _initial_level()

def verbosity() -> int:
	return _level

def set_verbosity(level:int) -> int:
	""" Change the verbosity; returns the prior level so tests can put it back. """
	global _level
	prior, _level = _level, level or 0   # Because None is incomparable.
	return prior

def info(*args):
	""" Occasional events: cache fills, registrations. """
	if _level >= 1:
		print("construction:", *args, file=sys.stderr)

def trace(*args):
	""" Per-call chatter: every patch assembled. """
	if _level >= 2:
		print("construction:", *args, file=sys.stderr)

import logging


class Quiet(object):
	"""Context manager for silencing the plotting back-end.  Usage:
	with Quiet(level = logging.INFO + 1):
	   foo_that_makes_output

	You can set a higher or lower level to ignore different kinds of
	messages.  After the end of indentation, the level is set back to
	what it was previously.
	"""
	def __init__(self, level=logging.INFO + 1, logger='matplotlib'):
		self.level = level
		self.logger = logging.getLogger(logger)

	def __enter__(self):
		self.oldlevel = self.logger.level
		self.logger.setLevel(self.level)

	def __exit__(self, type, value, traceback):
		self.logger.setLevel(self.oldlevel)


class QuietWarning(Quiet):
	def __init__(self):
		super().__init__(logging.WARNING + 1)

class GenericObject(object):
	"""Attribute bag for driver settings. A dict passed as args is
	unpacked into attributes; a setting that was never given reads as
	None, so defaults can be filled in after loading."""
	max_chars = 1000
	def __init__(self, **kwargs):
		self.args = None
		for key, value in kwargs.items():
			self.__setattr__(key, value)
		if self.args:
			self.configure_from_dict(self.args)

	def configure_from_dict(self, d):
		for k in d:
			if d[k] is None:
				continue
			self.__setattr__(k, d[k])

	def set_defaults(self, **defaults):
		for key, value in defaults.items():
			if getattr(self, key) is None:
				self.__setattr__(key, value)

	def __getattr__(self, key):
		if key.startswith('__'):
			raise AttributeError(key)
		return None

	def __str__(self):
		s = ['[i] {}'.format(self.__class__.__name__)]
		for a in sorted(self.__dict__):
			if a[0] == '_' or a == 'args':
				continue
			sval = str(getattr(self, a))
			if len(sval) > self.max_chars:
				sval = sval[:self.max_chars - 4] + '...'
			s.append('   {} = {}'.format(a, sval))
		return '\n'.join(s)

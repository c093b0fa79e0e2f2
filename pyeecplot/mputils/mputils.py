import sys


class ColorS(object):
	def str(*args):
		_s = ' '.join([str(s) for s in args])
		return _s
	def red(*s):
		return '\033[91m{}\033[00m'.format(ColorS.str(*s))
	def green(*s):
		return '\033[92m{}\033[00m'.format(ColorS.str(*s))
	def yellow(*s):
		return '\033[93m{}\033[00m'.format(ColorS.str(*s))
	def no_color(*s):
		return '\033[00m{}\033[00m'.format(ColorS.str(*s))


# fatal contract violations of a plot routine
def ppanic(*args, file=sys.stderr):
	print(ColorS.red('PANIC:', *args), file=file)

# option fallbacks; plotting continues with a default
def pwarning(*args, file=sys.stderr):
	print(ColorS.yellow('WARNING:', *args), file=file)

def perror(*args, file=sys.stderr):
	print(ColorS.red('[e]', *args), file=file)

def pinfo(*args, file=sys.stdout):
	print(ColorS.green('[i]', *args), file=file)

def pindent(*args, file=sys.stdout):
	print(ColorS.no_color('   ', *args), file=file)


class UniqueString(object):
	locked_strings = []

	def str(base=None):
		i = 0
		if base is None:
			base = 'UniqueString'
		retstring = '{}_{}'.format(str(base), i)
		while retstring in UniqueString.locked_strings:
			i = i + 1
			retstring = '{}_{}'.format(str(base), i)
		UniqueString.locked_strings.append(retstring)
		return retstring


class MPBase(object):
	"""Base of routines, the registry and figure sets: keyword arguments
	become attributes and every instance gets a unique name."""
	def __init__(self, **kwargs):
		self.name = None
		self.configure_from_args(**kwargs)
		if self.name is None:
			self.name = UniqueString.str(self.__class__.__name__)

	def configure_from_args(self, **kwargs):
		for key, value in kwargs.items():
			self.__setattr__(key, value)

	def __str__(self):
		s = ['{} ({}) = {}'.format(k, type(v).__name__, v) for k, v in self.__dict__.items()]
		return '[i] {} ({}) with\n -  {}'.format(self.name, type(self).__name__, '\n -  '.join(s))

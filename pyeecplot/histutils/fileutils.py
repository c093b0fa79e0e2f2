import io
import os
import h5py
import numpy as np

from pyeecplot.errors import MissingInput
from pyeecplot.histutils.hist import Hist1D, Hist2D
from pyeecplot.histutils.quiet import QuietWarning

_h5modes = {
	'read': 'r',
	'create': 'w-',
	'append': 'a',
	'overwrite': 'w',
}

_hist_attrs = ['title_font', 'line_color', 'line_style', 'line_width', 'fill_color', 'fill_style',
	'marker_color', 'marker_style', 'marker_size']

_axis_attrs = ['label_color', 'label_font', 'label_size', 'label_offset', 'title_color', 'title_font',
	'title_size', 'title_offset', 'center_title']

# string lists stored per pad
_pad_lists = ['primitives', 'options', 'legend_entries', 'text_lines']


class PadRecord(object):
	def __init__(self, name='', label='', vertices=(0, 0, 1, 1), margins=(0.1, 0.1, 0.1, 0.1),
			primitives=None, options=None, legend_entries=None, text_lines=None):
		self.name = name
		self.label = label
		self.vertices = tuple(vertices)
		self.margins = tuple(margins)
		self.primitives = primitives if primitives is not None else []
		self.options = options if options is not None else []
		self.legend_entries = legend_entries if legend_entries is not None else []
		self.text_lines = text_lines if text_lines is not None else []

	def __repr__(self):
		return 'PadRecord({}, label={}, primitives={})'.format(self.name, self.label, self.primitives)


class CanvasRecord(object):
	"""What a written canvas leaves in the store: geometry, the list of
	primitives drawn per pad and the rendered image."""
	def __init__(self, name='', title='', width=750, height=750, pads=None, image=b''):
		self.name = name
		self.title = title
		self.width = width
		self.height = height
		self.pads = pads if pads is not None else []
		self.image = image

	def get_pad(self, label):
		for pad in self.pads:
			if pad.label == label or pad.name == label:
				return pad
		raise MissingInput('no pad {} in canvas {}'.format(label, self.name))


class HistFile(object):
	"""Object store for histograms and canvases backed by an hdf5 file.

	Each object lives in its own top-level group; the group attribute
	'kind' says how to read it back (TH1, TH2 or TCanvas).
	"""
	def __init__(self, path, mode='read', plot_dir=None, formats=('pdf',)):
		if mode not in _h5modes:
			raise ValueError('unknown file mode {} (use one of {})'.format(mode, list(_h5modes.keys())))
		if mode == 'read' and not os.path.isfile(path):
			raise MissingInput('couldn\'t open file {}'.format(path))
		if mode != 'read':
			_dir = os.path.dirname(path)
			if _dir and not os.path.exists(_dir):
				os.makedirs(_dir)
		self.path = path
		self.mode = mode
		self.plot_dir = plot_dir
		self.formats = list(formats)
		self.h5 = h5py.File(path, _h5modes[mode])

	def __enter__(self):
		return self

	def __exit__(self, type, value, traceback):
		self.close()

	@property
	def is_open(self):
		return self.h5 is not None and bool(self.h5)

	def keys(self):
		return list(self.h5.keys())

	def __contains__(self, key):
		return key in self.h5

	def close(self):
		if self.h5 is not None:
			self.h5.close()
			self.h5 = None

	def get_object(self, key):
		if key not in self.h5:
			raise MissingInput('couldn\'t grab object {} from {}'.format(key, self.path))
		g = self.h5[key]
		kind = g.attrs['kind']
		if kind == 'TCanvas':
			return self._read_canvas(key, g)
		return self._read_hist(key, g)

	def write(self, obj, name=None):
		if name is None:
			name = obj.name
		if name in self.h5:
			del self.h5[name]
		g = self.h5.create_group(name)
		g.attrs['kind'] = 'TH{}'.format(obj.ndim)
		g.attrs['title'] = obj.title
		for a in _hist_attrs:
			g.attrs[a] = getattr(obj, a)
		g.create_dataset('values', data=obj.values)
		g.create_dataset('variances', data=obj.variances)
		for tag, axis in zip('xyz', obj.axes()):
			g.attrs[tag + 'title'] = axis.title
			for a in _axis_attrs:
				g.attrs['{}_{}'.format(tag, a)] = getattr(axis, a)
			if axis.edges is not None:
				g.create_dataset(tag + 'edges', data=axis.edges)

	def write_canvas(self, record, figure):
		if record.name in self.h5:
			del self.h5[record.name]
		buf = io.BytesIO()
		with QuietWarning():
			figure.savefig(buf, format='png')
			if self.plot_dir:
				if not os.path.exists(self.plot_dir):
					os.makedirs(self.plot_dir)
				for fmt in self.formats:
					figure.savefig(os.path.join(self.plot_dir, '{}.{}'.format(record.name, fmt)))
		record.image = buf.getvalue()
		g = self.h5.create_group(record.name)
		g.attrs['kind'] = 'TCanvas'
		g.attrs['title'] = record.title
		g.attrs['width'] = record.width
		g.attrs['height'] = record.height
		g.attrs['npads'] = len(record.pads)
		g.create_dataset('image', data=np.void(record.image))
		for i, pad in enumerate(record.pads):
			p = g.create_group('pad{}'.format(i))
			p.attrs['name'] = pad.name
			p.attrs['label'] = pad.label
			p.attrs['vertices'] = pad.vertices
			p.attrs['margins'] = pad.margins
			for a in _pad_lists:
				p.create_dataset(a, data=np.array([str(v) for v in getattr(pad, a)], dtype=object),
					dtype=h5py.string_dtype())

	def _read_hist(self, key, g):
		kind = g.attrs['kind']
		if kind == 'TH1':
			h = Hist1D(key, g['xedges'][()], g['values'][()], g['variances'][()], title=g.attrs['title'])
		else:
			h = Hist2D(key, g['xedges'][()], g['yedges'][()], g['values'][()], g['variances'][()], title=g.attrs['title'])
		for a in _hist_attrs:
			setattr(h, a, g.attrs[a].item())
		for tag, axis in zip('xyz', h.axes()):
			axis.title = g.attrs[tag + 'title']
			for a in _axis_attrs:
				setattr(axis, a, g.attrs['{}_{}'.format(tag, a)].item())
		return h

	def _read_canvas(self, key, g):
		pads = []
		for i in range(int(g.attrs['npads'])):
			p = g['pad{}'.format(i)]
			lists = dict([(a, list(p[a].asstr()[()])) for a in _pad_lists])
			pads.append(PadRecord(
				name=p.attrs['name'],
				label=p.attrs['label'],
				vertices=p.attrs['vertices'],
				margins=p.attrs['margins'],
				**lists))
		return CanvasRecord(
			name=key,
			title=g.attrs['title'],
			width=int(g.attrs['width']),
			height=int(g.attrs['height']),
			pads=pads,
			image=g['image'][()].tobytes())


def open_read(path):
	return HistFile(path, 'read')

def open_write(path, mode='overwrite', **kwargs):
	return HistFile(path, mode, **kwargs)

def get_object(handle, key):
	return handle.get_object(key)

def write(sink, obj, name=None):
	sink.write(obj, name)

def close(handle):
	handle.close()

def close_files(handles):
	for h in handles:
		h.close()

import copy
import numpy as np

from pyeecplot.errors import BinMismatch


def divide_contents(num, num_var, den, den_var):
	# bins with an empty denominator are set to zero
	ratio = np.zeros_like(num, dtype=float)
	variance = np.zeros_like(num, dtype=float)
	ok = den != 0
	ratio[ok] = num[ok] / den[ok]
	variance[ok] = (num_var[ok] * den[ok] ** 2 + den_var[ok] * num[ok] ** 2) / den[ok] ** 4
	return ratio, variance


class Axis(object):
	"""Binned (or value) axis with the text attributes of a drawn frame.

	Sizes are fractions of the pad height, offsets are relative units,
	fonts are ROOT-style codes (see plotting.colors).
	"""
	def __init__(self, edges=None, title=''):
		self.edges = None if edges is None else np.asarray(edges, dtype=float)
		self.title = title
		self.label_color = 1
		self.label_font = 42
		self.label_size = 0.035
		self.label_offset = 0.005
		self.title_color = 1
		self.title_font = 42
		self.title_size = 0.035
		self.title_offset = 1.0
		self.center_title = False
		self.user_range = None

	@property
	def nbins(self):
		if self.edges is None:
			return 0
		return len(self.edges) - 1

	@property
	def xmin(self):
		return self.edges[0]

	@property
	def xmax(self):
		return self.edges[-1]

	@property
	def centers(self):
		return 0.5 * (self.edges[1:] + self.edges[:-1])

	def find_bin(self, x):
		# clamps under/overflow onto the first/last bin
		ibin = int(np.searchsorted(self.edges, x, side='right')) - 1
		return min(max(ibin, 0), self.nbins - 1)

	def bin_low_edge(self, ibin):
		return self.edges[ibin]

	def bin_up_edge(self, ibin):
		return self.edges[ibin + 1]

	def set_range_user(self, lo, hi):
		self.user_range = (min(lo, hi), max(lo, hi))

	def is_compatible(self, other):
		if self.nbins != other.nbins:
			return False
		if self.edges is None:
			return True
		return np.allclose(self.edges, other.edges)

	def rebinned(self, ngroup):
		nkeep = (self.nbins // ngroup) * ngroup
		new_axis = copy.copy(self)
		new_axis.edges = self.edges[:nkeep + 1:ngroup].copy()
		return new_axis


class Hist(object):
	"""Common attributes of 1D and 2D histograms."""
	ndim = 0
	def __init__(self, name='', title=''):
		self.name = name
		self.title = title
		self.title_font = 42
		self.line_color = 1
		self.line_style = 1
		self.line_width = 1
		self.fill_color = 0
		self.fill_style = 0
		self.marker_color = 1
		self.marker_style = 1
		self.marker_size = 1.0
		self.values = None
		self.variances = None

	@property
	def errors(self):
		return np.sqrt(self.variances)

	def axes(self):
		return [self.xaxis, self.yaxis]

	def get_axis(self, iaxis):
		return self.axes()[iaxis]

	def clone(self, name=None):
		h = copy.deepcopy(self)
		if name is not None:
			h.name = name
		return h

	def scale(self, factor):
		self.values = self.values * factor
		self.variances = self.variances * factor * factor

	def _init_contents(self, shape, values, variances):
		if values is None:
			self.values = np.zeros(shape)
		else:
			self.values = np.asarray(values, dtype=float).reshape(shape).copy()
		if variances is None:
			self.variances = np.abs(self.values)
		else:
			self.variances = np.asarray(variances, dtype=float).reshape(shape).copy()

	def is_compatible(self, other):
		if self.ndim != other.ndim:
			return False
		return all([a.is_compatible(b) for a, b in zip(self.binned_axes(), other.binned_axes())])

	def divide(self, other, name=None):
		if not self.is_compatible(other):
			raise BinMismatch('cannot divide {} by {}: binning differs ({} vs. {} bins)'.format(
				self.name, other.name,
				[a.nbins for a in self.binned_axes()],
				[a.nbins for a in other.binned_axes()]))
		h = self.clone(name)
		h.values, h.variances = divide_contents(self.values, self.variances, other.values, other.variances)
		return h

	def __repr__(self):
		return '{}({}, bins={})'.format(self.__class__.__name__, self.name, [a.nbins for a in self.binned_axes()])


class Hist1D(Hist):
	ndim = 1
	def __init__(self, name, edges, values=None, variances=None, title='', xtitle='', ytitle=''):
		super(Hist1D, self).__init__(name=name, title=title)
		self.xaxis = Axis(edges, xtitle)
		self.yaxis = Axis(None, ytitle)
		self._init_contents((self.xaxis.nbins,), values, variances)

	def binned_axes(self):
		return [self.xaxis]

	def fill(self, x, weight=1.0):
		x = np.atleast_1d(x)
		w = np.broadcast_to(weight, x.shape)
		inside = (x >= self.xaxis.xmin) & (x < self.xaxis.xmax)
		ibins = np.searchsorted(self.xaxis.edges, x[inside], side='right') - 1
		np.add.at(self.values, ibins, w[inside])
		np.add.at(self.variances, ibins, w[inside] ** 2)

	def integral(self, xlo=None, xhi=None):
		ilo = 0 if xlo is None else self.xaxis.find_bin(xlo)
		ihi = self.xaxis.nbins - 1 if xhi is None else self.xaxis.find_bin(xhi)
		return float(np.sum(self.values[ilo:ihi + 1]))

	def rebin(self, ngroup):
		nkeep = (self.xaxis.nbins // ngroup) * ngroup
		self.values = self.values[:nkeep].reshape(-1, ngroup).sum(axis=1)
		self.variances = self.variances[:nkeep].reshape(-1, ngroup).sum(axis=1)
		self.xaxis = self.xaxis.rebinned(ngroup)
		return self


class Hist2D(Hist):
	ndim = 2
	def __init__(self, name, xedges, yedges, values=None, variances=None, title='', xtitle='', ytitle='', ztitle=''):
		super(Hist2D, self).__init__(name=name, title=title)
		self.xaxis = Axis(xedges, xtitle)
		self.yaxis = Axis(yedges, ytitle)
		self.zaxis = Axis(None, ztitle)
		self._init_contents((self.xaxis.nbins, self.yaxis.nbins), values, variances)

	def axes(self):
		return [self.xaxis, self.yaxis, self.zaxis]

	def binned_axes(self):
		return [self.xaxis, self.yaxis]

	def fill(self, x, y, weight=1.0):
		x = np.atleast_1d(x)
		y = np.atleast_1d(y)
		w = np.broadcast_to(weight, x.shape)
		inside = (x >= self.xaxis.xmin) & (x < self.xaxis.xmax) & (y >= self.yaxis.xmin) & (y < self.yaxis.xmax)
		ix = np.searchsorted(self.xaxis.edges, x[inside], side='right') - 1
		iy = np.searchsorted(self.yaxis.edges, y[inside], side='right') - 1
		np.add.at(self.values, (ix, iy), w[inside])
		np.add.at(self.variances, (ix, iy), w[inside] ** 2)

	def _bin_window(self, axis, lo, hi):
		ilo = 0 if lo is None else axis.find_bin(lo)
		ihi = axis.nbins - 1 if hi is None else axis.find_bin(hi)
		return ilo, ihi + 1

	def integral(self, xlo=None, xhi=None, ylo=None, yhi=None):
		ix0, ix1 = self._bin_window(self.xaxis, xlo, xhi)
		iy0, iy1 = self._bin_window(self.yaxis, ylo, yhi)
		return float(np.sum(self.values[ix0:ix1, iy0:iy1]))

	def rebin(self, ngroup, iaxis=0):
		axis = self.xaxis if iaxis == 0 else self.yaxis
		nkeep = (axis.nbins // ngroup) * ngroup
		values = np.moveaxis(self.values, iaxis, 0)[:nkeep]
		variances = np.moveaxis(self.variances, iaxis, 0)[:nkeep]
		shape = (-1, ngroup) + values.shape[1:]
		self.values = np.moveaxis(values.reshape(shape).sum(axis=1), 0, iaxis)
		self.variances = np.moveaxis(variances.reshape(shape).sum(axis=1), 0, iaxis)
		if iaxis == 0:
			self.xaxis = self.xaxis.rebinned(ngroup)
		else:
			self.yaxis = self.yaxis.rebinned(ngroup)
		return self

	def projection(self, iaxis, name, lo=None, hi=None):
		"""Sum onto axis iaxis, restricting the other axis to (lo, hi)."""
		if iaxis == 0:
			i0, i1 = self._bin_window(self.yaxis, lo, hi)
			values = self.values[:, i0:i1].sum(axis=1)
			variances = self.variances[:, i0:i1].sum(axis=1)
			axis = self.xaxis
		else:
			i0, i1 = self._bin_window(self.xaxis, lo, hi)
			values = self.values[i0:i1, :].sum(axis=0)
			variances = self.variances[i0:i1, :].sum(axis=0)
			axis = self.yaxis
		h = Hist1D(name, axis.edges, values, variances, title=self.title, xtitle=axis.title, ytitle=self.zaxis.title)
		h.xaxis = copy.copy(axis)
		return h

	def projection_x(self, name, ylo=None, yhi=None):
		return self.projection(0, name, ylo, yhi)

	def projection_y(self, name, xlo=None, xhi=None):
		return self.projection(1, name, xlo, xhi)

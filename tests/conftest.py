import numpy as np
import pytest

from pyeecplot.histutils.fileutils import HistFile
from pyeecplot.histutils.hist import Hist1D, Hist2D


def flat_hist_1d(name, value, nbins=10, lo=0., hi=1.):
	return Hist1D(name, np.linspace(lo, hi, nbins + 1), np.full(nbins, value))


def flat_hist_2d(name, value, nx=4, ny=5):
	return Hist2D(name, np.linspace(0., 1., nx + 1), np.linspace(0., 1., ny + 1), np.full((nx, ny), value))


@pytest.fixture
def make_store(tmp_path):
	"""Write histograms to a fresh store and return its path."""
	def _make_store(name, hists):
		path = str(tmp_path / '{}.h5'.format(name))
		with HistFile(path, 'overwrite') as f:
			for h in hists:
				f.write(h, h.name)
		return path
	return _make_store


@pytest.fixture
def ofile(tmp_path):
	f = HistFile(str(tmp_path / 'output.h5'), 'overwrite')
	yield f
	f.close()

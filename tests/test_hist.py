import numpy as np
import pytest

from pyeecplot.errors import BinMismatch, ZeroIntegral
from pyeecplot.histutils.hist import Hist1D, Hist2D, divide_contents
from pyeecplot.plotting import tools
from pyeecplot.plotting.range import Range

from conftest import flat_hist_1d, flat_hist_2d


def test_integral_over_subrange():
	h = Hist1D('h', np.linspace(0., 1., 11), np.arange(10.))
	assert h.integral() == pytest.approx(45.)
	# (0.25, 0.45) touches bins 2, 3 and 4
	assert h.integral(0.25, 0.45) == pytest.approx(2. + 3. + 4.)


def test_fill_ignores_overflow():
	h = Hist1D('h', np.linspace(0., 1., 5))
	h.fill([0.1, 0.1, 0.6, 1.5, -0.2])
	assert list(h.values) == [2., 0., 1., 0.]
	assert list(h.variances) == [2., 0., 1., 0.]


def test_divide_values_and_zero_denominator():
	num = Hist1D('num', np.linspace(0., 1., 4), [4., 6., 1.], [4., 6., 1.])
	den = Hist1D('den', np.linspace(0., 1., 4), [2., 3., 0.], [2., 3., 0.])
	ratio = num.divide(den, 'num_Ratio')
	assert ratio.name == 'num_Ratio'
	assert list(ratio.values) == [2., 2., 0.]
	assert ratio.variances[2] == 0.
	# uncorrelated errors: (v_n d^2 + v_d n^2) / d^4
	assert ratio.variances[0] == pytest.approx((4. * 4. + 2. * 16.) / 16.)
	assert num.name == 'num'


def test_divide_contents_does_not_warn_on_empty_bins():
	values, variances = divide_contents(np.array([1., 0.]), np.array([1., 0.]), np.array([0., 0.]), np.array([0., 0.]))
	assert list(values) == [0., 0.]
	assert np.all(np.isfinite(variances))


def test_divide_incompatible_binning():
	num = flat_hist_1d('num', 1., nbins=10)
	den = flat_hist_1d('den', 1., nbins=20)
	with pytest.raises(BinMismatch):
		num.divide(den)
	with pytest.raises(BinMismatch):
		tools.divide_hist(num, flat_hist_2d('den2', 1.))


def test_rebin_1d():
	h = Hist1D('h', np.linspace(0., 1., 7), np.arange(6.))
	h.rebin(2)
	assert h.xaxis.nbins == 3
	assert list(h.values) == [1., 5., 9.]
	assert list(h.xaxis.edges) == pytest.approx([0., 1. / 3., 2. / 3., 1.])


def test_rebin_2d_along_y():
	h = flat_hist_2d('h', 1., nx=4, ny=6)
	h.rebin(3, Range.Y)
	assert h.values.shape == (4, 2)
	assert np.all(h.values == 3.)
	assert h.xaxis.nbins == 4


def test_projection():
	values = np.arange(20.).reshape(4, 5)
	h = Hist2D('h', np.linspace(0., 1., 5), np.linspace(0., 1., 6), values)
	px = h.projection_x('px')
	assert px.ndim == 1
	assert list(px.values) == list(values.sum(axis=1))
	py = h.projection_y('py', 0., 0.3)
	assert list(py.values) == list(values[:2, :].sum(axis=0))


def test_normalize_by_integral():
	h = flat_hist_1d('h', 2., nbins=10)
	tools.normalize_by_integral(h, 1., 0., 1.)
	assert h.integral(0., 1.) == pytest.approx(1.)
	h2 = flat_hist_2d('h2', 1.)
	tools.normalize_by_integral(h2, 5., 0., 1., 0., 1.)
	assert h2.integral() == pytest.approx(5.)


def test_normalize_zero_integral():
	h = flat_hist_1d('h', 0.)
	with pytest.raises(ZeroIntegral) as e:
		tools.normalize_by_integral(h, 1., 0., 1.)
	assert 'h' in str(e.value)


def test_draw_range_clamps_to_bin_edges():
	axis = flat_hist_1d('h', 1., nbins=10).xaxis
	assert tools.get_draw_range((0.003, 3.), axis) == pytest.approx((0., 1.))
	assert tools.get_draw_range((0.25, 0.55), axis) == pytest.approx((0.2, 0.6))
	# an upper limit on a bin edge does not reach into the next bin
	assert tools.get_draw_range((0.2, 0.5), axis) == pytest.approx((0.2, 0.5))


def test_draw_range_without_overlap(monkeypatch):
	warnings = []
	monkeypatch.setattr(tools, 'pwarning', lambda *args: warnings.append(args))
	axis = flat_hist_1d('h', 1., nbins=10).xaxis
	assert tools.get_draw_range((2., 3.), axis) == pytest.approx((0., 1.))
	assert len(warnings) == 1

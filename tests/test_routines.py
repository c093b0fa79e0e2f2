import numpy as np
import pytest

import pyeecplot.maker.base_routine
from pyeecplot.errors import InsufficientLayout, MissingInput, SizeMismatch
from pyeecplot.histutils.hist import Hist1D, Hist2D
from pyeecplot.maker.correct_spectra_1d import CorrectSpectra1D
from pyeecplot.maker.correct_spectra_2d import CorrectSpectra2D
from pyeecplot.maker.maker_tools import make_correction_canvas, make_grid_canvas, make_ratio_canvas
from pyeecplot.maker.plot_ratios_1d import PlotRatios1D
from pyeecplot.maker.plot_ratios_2d import PlotRatios2D
from pyeecplot.maker.plot_spectra_1d import PlotSpectra1D
from pyeecplot.maker.plot_spectra_2d import PlotSpectra2D
from pyeecplot.maker.plot_vs_baseline_1d import PlotVsBaseline1D
from pyeecplot.maker.plot_vs_baseline_2d import PlotVsBaseline2D
from pyeecplot.plotting import tools
from pyeecplot.plotting.canvas_manager import CanvasManager
from pyeecplot.plotting.canvas import Canvas
from pyeecplot.plotting.elements import PlotInput, PlotOpts
from pyeecplot.plotting.range import Range
from pyeecplot.plotting.textbox import TextBox

from conftest import flat_hist_1d


def log_hist_2d(name, value, nx=4, ny=5):
	return Hist2D(name, np.logspace(-2., 0., nx + 1), np.linspace(0., 6.3, ny + 1), np.full((nx, ny), value))


@pytest.fixture
def panics(monkeypatch):
	messages = []
	monkeypatch.setattr(pyeecplot.maker.base_routine, 'ppanic', lambda *args: messages.append(' '.join(args)))
	return messages


@pytest.fixture
def opened(monkeypatch):
	handles = []
	open_file = tools.open_file
	def _open_file(*args, **kwargs):
		handles.append(open_file(*args, **kwargs))
		return handles[-1]
	monkeypatch.setattr(tools, 'open_file', _open_file)
	return handles


def test_overlay_normalizes_and_records_legend(make_store, ofile, opened):
	path = make_store('flat', [flat_hist_1d('hFlat', 1.)])
	inputs = [PlotInput(path, 'hFlat', 'h{}'.format(i), 'spectrum {}'.format(i), 'p') for i in range(3)]
	routine = PlotSpectra1D(text_box=TextBox(['line one']))
	routine.set_params(PlotSpectra1D.Params(inputs, options=PlotOpts(norm_range=Range((0., 1.)), canvas=Canvas('cA'))))
	routine.plot(ofile)

	for i in range(3):
		assert ofile.get_object('h{}'.format(i)).integral() == pytest.approx(1.)
	record = ofile.get_object('cA')
	assert len(record.pads) == 1
	assert record.pads[0].legend_entries == ['spectrum 0', 'spectrum 1', 'spectrum 2']
	assert record.pads[0].text_lines == ['line one']
	assert record.pads[0].options[:3] == ['p', 'p same', 'p same']
	assert len(record.image) > 0
	assert len(opened) == 3
	assert not any(f.is_open for f in opened)


def test_overlay_without_inputs(ofile, panics):
	with pytest.raises(MissingInput):
		PlotSpectra1D().plot(ofile)
	assert len(panics) == 1
	assert panics[0].startswith('PlotSpectra1D: ')


def test_missing_file_panics_and_aborts(tmp_path, ofile, panics):
	routine = PlotSpectra1D()
	routine.configure([PlotInput(str(tmp_path / 'nothing.h5'), 'hFlat', 'h0')])
	with pytest.raises(MissingInput):
		routine.plot(ofile)
	assert 'PlotSpectra1D' in panics[0]
	assert ofile.keys() == []


def test_missing_object_closes_opened_files(make_store, ofile, opened, panics):
	path = make_store('flat', [flat_hist_1d('hFlat', 1.)])
	routine = PlotSpectra1D()
	routine.configure([PlotInput(path, 'hFlat', 'h0'), PlotInput(path, 'hOther', 'h1')])
	with pytest.raises(MissingInput):
		routine.plot(ofile)
	assert len(opened) == 2
	assert not any(f.is_open for f in opened)
	assert ofile.keys() == []


def test_vs_baseline_ratio_values(make_store, ofile):
	path = make_store('spectra', [flat_hist_1d('hBase', 2., nbins=100), flat_hist_1d('hNum', 4., nbins=100)])
	options = PlotOpts(spectra_pad='spectra', ratio_pad='ratio', canvas=make_ratio_canvas('cB'), do_norm=False)
	routine = PlotVsBaseline1D()
	routine.set_params(PlotVsBaseline1D.Params(
		PlotInput(path, 'hBase', 'base', 'baseline', 'p'),
		[PlotInput(path, 'hNum', 'num', 'numerator', 'p')],
		options=options))
	routine.plot(ofile)

	ratio = ofile.get_object('num_Ratio')
	assert np.allclose(ratio.values, 2.)
	assert ofile.get_object('base').integral() == pytest.approx(200.)
	record = ofile.get_object('cB')
	assert [p.label for p in record.pads] == ['ratio', 'spectra']
	assert record.get_pad('spectra').legend_entries == ['baseline', 'numerator']
	assert 'num_Ratio' in record.get_pad('ratio').primitives
	assert 'Line2D' in record.get_pad('ratio').primitives


def test_vs_baseline_ratio_of_random_spectra(make_store, ofile):
	rng = np.random.default_rng(7)
	edges = np.linspace(0., 1., 21)
	den = Hist1D('hDen', edges, rng.uniform(1., 5., 20))
	num = Hist1D('hNum', edges, rng.uniform(0., 5., 20))
	path = make_store('random', [den, num])
	options = PlotOpts(spectra_pad='spectra', ratio_pad='ratio', canvas=make_ratio_canvas('cRandom'), do_norm=False)
	routine = PlotVsBaseline1D()
	routine.set_params(PlotVsBaseline1D.Params(PlotInput(path, 'hDen', 'den'), [PlotInput(path, 'hNum', 'num')],
		options=options))
	routine.plot(ofile)
	assert np.allclose(ofile.get_object('num_Ratio').values, num.values / den.values)


def test_ratios_size_mismatch(make_store, ofile, opened, panics):
	path = make_store('flat', [flat_hist_1d('hFlat', 1.)])
	routine = PlotRatios1D()
	routine.configure([PlotInput(path, 'hFlat', 'd{}'.format(i)) for i in range(2)],
		[PlotInput(path, 'hFlat', 'n{}'.format(i)) for i in range(3)])
	with pytest.raises(SizeMismatch):
		routine.plot(ofile)
	assert opened == []
	assert ofile.keys() == []
	assert 'PlotRatios1D' in panics[0]


def test_ratios_write_pairs_and_quotients(make_store, ofile):
	path = make_store('pairs', [flat_hist_1d('hA', 1.), flat_hist_1d('hB', 3.)])
	routine = PlotRatios1D()
	routine.configure([PlotInput(path, 'hA', 'den0', 'A'), PlotInput(path, 'hA', 'den1', 'A')],
		[PlotInput(path, 'hB', 'num0', 'B'), PlotInput(path, 'hA', 'num1', 'A again')])
	routine.get_params().options.canvas.name = 'cPairs'
	routine.get_params().options.do_norm = False
	routine.plot(ofile)
	assert np.allclose(ofile.get_object('num0_Ratio').values, 3.)
	assert np.allclose(ofile.get_object('num1_Ratio').values, 1.)
	record = ofile.get_object('cPairs')
	assert record.get_pad('spectra').legend_entries == ['A', 'B', 'A', 'A again']


def test_correction_with_identical_recon_and_truth(make_store, ofile):
	edges = np.linspace(0., 1., 11)
	truth = Hist1D('hTruth', edges, np.arange(1., 11.))
	data = Hist1D('hData', edges, 3. * np.arange(1., 11.))
	path = make_store('sim', [truth, data])
	options = PlotOpts(spectra_pad='spectra', ratio_pad='ratio', correct_pad='correct',
		canvas=make_correction_canvas('cD'), norm_range=Range((0., 1.)))
	routine = CorrectSpectra1D()
	routine.set_params(CorrectSpectra1D.Params(
		[PlotInput(path, 'hData', 'data', 'data')],
		[PlotInput(path, 'hTruth', 'recon', 'recon')],
		[PlotInput(path, 'hTruth', 'truth', 'truth')],
		options=options))
	routine.plot(ofile)

	assert np.allclose(ofile.get_object('recon_CorrectionFactor').values, 1.)
	corrected = ofile.get_object('data_Corrected')
	assert corrected.integral() == pytest.approx(1.)
	assert np.allclose(corrected.values / data.values, corrected.values[0] / data.values[0])
	assert np.allclose(ofile.get_object('data_CorrectOverTruth').values, 1.)
	record = ofile.get_object('cD')
	assert [p.label for p in record.pads] == ['correct', 'ratio', 'spectra']
	assert record.get_pad('spectra').legend_entries == ['data', 'truth']


def test_correction_needs_matching_triplets(ofile, panics):
	routine = CorrectSpectra1D()
	routine.configure([PlotInput('a.h5', 'h')], [], [PlotInput('a.h5', 'h')])
	with pytest.raises(SizeMismatch):
		routine.plot(ofile)
	assert 'CorrectSpectra1D' in panics[0]


def test_grid_too_small(make_store, ofile, opened, panics):
	path = make_store('grid', [log_hist_2d('h2', 1.)])
	inputs = [PlotInput(path, 'h2', 'h{}'.format(i)) for i in range(4)]
	routine = PlotSpectra2D()
	routine.configure(inputs)
	routine.get_params().options.canvas = make_grid_canvas('cE', 'pE', 3, 3)
	with pytest.raises(InsufficientLayout):
		routine.plot(ofile)
	assert opened == []
	assert ofile.keys() == []


def test_2d_grid_puts_text_on_last_pad(make_store, ofile):
	path = make_store('grid', [log_hist_2d('h2', 1.)])
	inputs = [PlotInput(path, 'h2', 'h{}'.format(i), 'spectrum {}'.format(i)) for i in range(3)]
	routine = PlotSpectra2D(text_box=TextBox(['grid text']))
	routine.configure(inputs, 'cGrid', ncolumn=2)
	routine.plot(ofile)
	record = ofile.get_object('cGrid')
	assert len(record.pads) == 4
	assert record.pads[-1].text_lines == ['grid text']
	assert record.pads[0].options == ['colz']
	h0 = ofile.get_object('h0')
	assert h0.title == 'spectrum 0'
	assert h0.integral() == pytest.approx(1.)


def test_2d_vs_baseline_ratio_grid(make_store, ofile):
	values = np.arange(1., 21.).reshape(4, 5)
	base = Hist2D('hBase', np.logspace(-2., 0., 5), np.linspace(0., 6.3, 6), values)
	num = Hist2D('hNum', np.logspace(-2., 0., 5), np.linspace(0., 6.3, 6), values * values)
	path = make_store('base2d', [base, num])
	routine = PlotVsBaseline2D()
	routine.configure(PlotInput(path, 'hBase', 'base', 'baseline'), [PlotInput(path, 'hNum', 'num', 'squared')], 'cVsBase2D')
	routine.get_params().options.do_norm = False
	routine.plot(ofile)
	ratio = ofile.get_object('num_Ratio')
	assert np.allclose(ratio.values, values)
	assert ratio.title == 'squared / baseline'
	record = ofile.get_object('cVsBase2D')
	# baseline and spectrum on the top row, ratio below
	assert len(record.pads) == 4
	assert record.pads[2].primitives == ['num_Ratio']
	assert 'Line2D' not in record.pads[2].primitives


@pytest.fixture
def pad_limits(monkeypatch):
	"""Axis limits of every pad, read when the canvas is written."""
	limits = {}
	write = CanvasManager.write
	def _write(manager, ofile):
		for handle in manager.pads:
			limits[handle.label] = (handle.ax.get_xlim(), handle.ax.get_ylim())
		write(manager, ofile)
	monkeypatch.setattr(CanvasManager, 'write', _write)
	return limits


def contains(interval, *values):
	return all(min(interval) <= v <= max(interval) for v in values)


def test_vs_baseline_ratio_pad_shows_ratios_and_unity(make_store, ofile, pad_limits):
	path = make_store('spectra', [flat_hist_1d('hBase', 2.), flat_hist_1d('hNum', 4.)])
	routine = PlotVsBaseline1D()
	routine.configure(PlotInput(path, 'hBase', 'base'), [PlotInput(path, 'hNum', 'num')], 'cRatioRange')
	routine.get_params().options.do_norm = False
	routine.plot(ofile)
	assert contains(pad_limits['ratio'][1], 1., 2.)
	assert pad_limits['spectra'][1] == pytest.approx((0.00003, 0.7))


def test_ratios_pad_shows_ratios_and_unity(make_store, ofile, pad_limits):
	path = make_store('pairs', [flat_hist_1d('hA', 1.), flat_hist_1d('hB', 3.)])
	routine = PlotRatios1D()
	routine.configure([PlotInput(path, 'hA', 'den')], [PlotInput(path, 'hB', 'num')], 'cPairsRange')
	routine.get_params().options.do_norm = False
	routine.plot(ofile)
	assert contains(pad_limits['ratio'][1], 1., 3.)


def test_correction_pads_show_factors_and_residuals(make_store, ofile, pad_limits):
	edges = np.linspace(0., 1., 11)
	path = make_store('sim', [
		Hist1D('hData', edges, np.arange(1., 11.)),
		Hist1D('hRecon', edges, 2. * np.ones(10)),
		Hist1D('hTruth', edges, np.ones(10))])
	routine = CorrectSpectra1D()
	routine.configure([PlotInput(path, 'hData', 'data')], [PlotInput(path, 'hRecon', 'recon')],
		[PlotInput(path, 'hTruth', 'truth')], 'cCorrectRange')
	routine.plot(ofile)
	residual = ofile.get_object('data_CorrectOverTruth')
	assert contains(pad_limits['correct'][1], 1.)
	assert contains(pad_limits['ratio'][1], 1., residual.values.min(), residual.values.max())


def test_2d_ratios_grid(make_store, ofile):
	path = make_store('ratios2d', [log_hist_2d('hA', 2.), log_hist_2d('hB', 6.)])
	routine = PlotRatios2D()
	routine.configure([PlotInput(path, 'hA', 'den', 'pp')], [PlotInput(path, 'hB', 'num', 'pAu')], 'cRatios2DGrid')
	routine.get_params().options.do_norm = False
	routine.plot(ofile)
	ratio = ofile.get_object('num_Ratio')
	assert np.allclose(ratio.values, 3.)
	assert ratio.title == 'pAu / pp'
	record = ofile.get_object('cRatios2DGrid')
	# denominator, numerator and ratio, one row each
	assert len(record.pads) == 3
	assert [p.vertices[0] for p in record.pads] == [0., 0., 0.]
	assert record.pads[0].vertices[1] > record.pads[1].vertices[1] > record.pads[2].vertices[1]
	assert [p.primitives[0] for p in record.pads] == ['den', 'num', 'num_Ratio']


def test_2d_correction_with_identical_recon_and_truth(make_store, ofile):
	values = np.arange(1., 21.).reshape(4, 5)
	truth = Hist2D('hTruth', np.logspace(-2., 0., 5), np.linspace(0., 6.3, 6), values)
	data = Hist2D('hData', np.logspace(-2., 0., 5), np.linspace(0., 6.3, 6), 5. * values)
	path = make_store('sim2d', [truth, data])
	routine = CorrectSpectra2D()
	routine.configure([PlotInput(path, 'hData', 'data', 'data')], [PlotInput(path, 'hTruth', 'recon', 'recon')],
		[PlotInput(path, 'hTruth', 'truth', 'truth')], 'cCorrect2DGrid')
	routine.plot(ofile)
	assert np.allclose(ofile.get_object('recon_CorrectionFactor').values, 1.)
	assert np.allclose(ofile.get_object('data_CorrectOverTruth').values, 1.)
	assert ofile.get_object('data_Corrected').integral() == pytest.approx(1.)
	record = ofile.get_object('cCorrect2DGrid')
	assert [p.primitives[0] for p in record.pads] == ['data_Corrected', 'recon_CorrectionFactor', 'data_CorrectOverTruth']
	assert record.pads[-1].text_lines == routine.text_box.text

import os

import numpy as np
import pytest
import yaml

from pyeecplot.errors import UnknownOption
from pyeecplot.histutils.hist import Hist1D
from pyeecplot.inout.catalog import InFiles, InHists
from pyeecplot.inout.input_output import InputOutput, PlotIndex
from pyeecplot.inout.outputs import Output
from pyeecplot.maker.maker_tools import RangeOpt
from pyeecplot.maker.plot_maker import PlotMaker
from pyeecplot.run_plotter import PlotterRunner

EDGES = np.logspace(-2., 0.4, 25)


def eec(key, scale):
	return Hist1D(key, EDGES, scale * np.linspace(1., 2., 24))


@pytest.fixture
def io(make_store):
	"""p+p stores holding the EEC of every pt bin for one charge and spin."""
	files = []
	hists = InHists()
	for level, scale in zip((InFiles.DATA, InFiles.RECO, InFiles.TRUE), (1., 2., 4.)):
		keys = []
		for pt in range(hists.n_pt()):
			index = PlotIndex(InFiles.PP, level, pt, InHists.NEG, InHists.INT)
			keys.append(InputOutput().hist_key('EEC', index))
		files.append(make_store('level{}'.format(level), [eec(k, scale) for k in keys]))
	return InputOutput(InFiles([files, files]))


def test_sim_vs_data(io, ofile):
	output = Output(PlotMaker(), io)
	output.update_index(PlotIndex(InFiles.PP, -1, InHists.PT5, InHists.NEG, InHists.INT))
	output.get('SimVsData').make_plot_1d('EEC', RangeOpt.SIDE, ofile)

	keys = ofile.keys()
	assert 'cDataVsSimEEC_PP_pt0ch0spInt' in keys
	assert 'hDataVsSimPP_TrueJetEECStat_pt0cf0ch0spInt' in keys
	data_ratio = ofile.get_object('hDataVsSimPP_DataJetEECStat_pt0cf0ch0spInt_Ratio')
	# every level has the same shape, so normalized ratios are flat
	assert np.allclose(data_ratio.values, 1.)
	record = ofile.get_object('cDataVsSimEEC_PP_pt0ch0spInt')
	assert len(record.get_pad('spectra').legend_entries) == 3


def test_vs_pt_jet(io, ofile):
	output = Output(PlotMaker(), io)
	output.update_index(PlotIndex(InFiles.PP, InFiles.RECO, -1, InHists.NEG, InHists.INT))
	output.get('VsPtJet').make_plot_1d('EEC', RangeOpt.SIDE, ofile, nrebin=2)
	spectrum = ofile.get_object('hVsPtJetPP_RecoJetEECStat_pt2cf0ch0spInt')
	assert spectrum.xaxis.nbins == 12
	assert 'cVsPtJetEEC_PPRecoJet_ch0spInt' in ofile.keys()


def test_correct_spectra(io, ofile):
	output = Output(PlotMaker(), io)
	output.update_index(PlotIndex(InFiles.PP, -1, -1, InHists.NEG, InHists.INT))
	output.get('CorrectSpectra').make_plot_1d('EEC', RangeOpt.SIDE, ofile)
	residual = ofile.get_object('hCorrect1DPP_DataJetEECStat_pt1cf0ch0spInt_CorrectOverTruth')
	assert np.allclose(residual.values, 1.)


def test_unknown_figure_set(io):
	with pytest.raises(UnknownOption):
		Output(PlotMaker(), io).get('AllThePlots')


def write_config(tmp_path, **entries):
	config = {
		'input_files': [[str(tmp_path / 'missing.h5')] * 3] * 2,
		'output_dir': str(tmp_path / 'output'),
		'output_label': 'test',
	}
	config.update(entries)
	path = str(tmp_path / 'config.yaml')
	with open(path, 'w') as stream:
		yaml.safe_dump(config, stream)
	return path


def test_runner_defaults(tmp_path):
	runner = PlotterRunner(write_config(tmp_path), 'SimVsData')
	assert runner.config.zrange == 'wide'
	assert runner.config.nrebin == 1
	assert runner.config.do_2d == []
	with pytest.raises(UnknownOption):
		PlotterRunner(write_config(tmp_path), 'Everything')


def test_runner_indices(tmp_path):
	spin = PlotterRunner(write_config(tmp_path, skip_pau=True), 'SpinRatios')
	assert len(spin.indices()) == 3 * 2
	assert all(index.species == InFiles.PP for index in spin.indices())

	pp_vs_pau = PlotterRunner(write_config(tmp_path), 'PPVsPAu')
	assert len(pp_vs_pau.indices()) == 3 * 2 * 3

	sim = PlotterRunner(write_config(tmp_path, skip_pau=False), 'SimVsData')
	assert len(sim.indices()) == 3 * 2 * 9 + 3 * 2 * 3


def test_runner_keeps_going_after_failures(tmp_path, monkeypatch):
	monkeypatch.setattr('pyeecplot.run_plotter.perror', lambda *args: None)
	monkeypatch.setattr('pyeecplot.maker.base_routine.ppanic', lambda *args: None)
	runner = PlotterRunner(write_config(tmp_path, skip_pau=True), 'SpinRatios')
	runner.run()
	# 6 indices, 5 variables each
	assert runner.n_failed == 30
	assert sorted(os.listdir(str(tmp_path / 'output'))) == [
		'spinRatiosBoerMulders.test.h5', 'spinRatiosCollins.test.h5', 'spinRatiosEEC.test.h5']

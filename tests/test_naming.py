import pytest

from pyeecplot.errors import UnknownOption
from pyeecplot.inout.catalog import InFiles, InHists
from pyeecplot.inout.input_output import InputOutput, PlotIndex


@pytest.fixture
def io():
	return InputOutput(InFiles([['pp_data.h5', 'pp_sim.h5', 'pp_sim.h5'], ['pa_data.h5', 'pa_sim.h5', 'pa_sim.h5']]))


def test_hist_key(io):
	index = PlotIndex(InFiles.PP, InFiles.DATA, InHists.PT10, InHists.NEG, InHists.BUYU)
	assert io.hist_key('EEC', index) == 'hDataJetEECStat_pt1cf0ch0spBUYU'


def test_hist_key_prefix_follows_leading_h(io):
	index = PlotIndex(InFiles.PAu, InFiles.TRUE, InHists.PT5, InHists.POS, InHists.INT)
	plain = io.hist_key('CollinsBlue', index)
	tagged = io.hist_key('CollinsBlue', index, 'VsPtJetPAu_')
	assert plain == 'hTrueJetCollinsBlueStat_pt0cf0ch1spInt'
	assert tagged == 'hVsPtJetPAu_TrueJetCollinsBlueStat_pt0cf0ch1spInt'
	assert tagged.replace('VsPtJetPAu_', '', 1) == plain


def test_hist_key_rejects_wildcards(io):
	with pytest.raises(UnknownOption):
		io.hist_key('EEC', PlotIndex(InFiles.PP, InFiles.DATA, -1, 0, 0))
	with pytest.raises(UnknownOption):
		io.hist_key('EEC', PlotIndex(InFiles.PP, InFiles.DATA, 3, 0, 0))


def test_canvas_name_skips_wildcards(io):
	assert io.canvas_name('cVsPtJetEEC', PlotIndex(InFiles.PP, InFiles.RECO, -1, 1, 0)) == 'cVsPtJetEEC_PPRecoJet_ch1spBU'
	assert io.canvas_name('cPPVsPAuEEC', PlotIndex(level=InFiles.DATA, charge=0, spin=8)) == 'cPPVsPAuEECDataJet_ch0spInt'
	assert io.canvas_name('cAll', PlotIndex()) == 'cAll_'


def test_legend(io):
	index = PlotIndex(InFiles.PP, -1, InHists.PT15, InHists.POS, InHists.INT)
	legend = io.legend(index)
	assert legend.startswith(r'$\bf{[p+p]}$ Integrated, ')
	assert 'jet charge > 0' in legend
	assert '(15, 20)' in legend
	with pytest.raises(UnknownOption):
		io.legend(PlotIndex(InFiles.PP, -1, -1, 0, 0))


def test_files_by_species_and_level(io):
	assert io.get_file(PlotIndex(InFiles.PAu, InFiles.RECO)) == 'pa_sim.h5'
	assert io.get_file(PlotIndex(InFiles.PP, InFiles.DATA)) == 'pp_data.h5'
	with pytest.raises(UnknownOption):
		io.get_file(PlotIndex(2, InFiles.DATA))
	assert io.species_tag('Correct1D', InFiles.PAu) == 'Correct1DPAu'


def test_blue_beam_spins(io):
	blue = [s for s in range(InHists().n_spin()) if io.is_blue_polarization(PlotIndex(spin=s))]
	assert blue == [InHists.BU, InHists.BD, InHists.INT]
	assert io.is_pau(PlotIndex(species=InFiles.PAu))
	assert not io.is_pau(PlotIndex(species=InFiles.PP))


def test_catalog_sizes():
	files = InFiles()
	hists = InHists()
	assert (files.n_species(), files.n_levels()) == (2, 3)
	assert (hists.n_pt(), hists.n_charge(), hists.n_spin()) == (3, 2, 9)
	assert all(f.endswith('.h5') for species in files.files for f in species)

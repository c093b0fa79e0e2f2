import pytest

from pyeecplot.errors import UnknownOption
from pyeecplot.maker import base_options
from pyeecplot.maker.base_routine import BaseRoutine
from pyeecplot.maker.plot_maker import DEFAULT_ROUTINES, PlotMaker
from pyeecplot.maker.plot_spectra_1d import PlotSpectra1D
from pyeecplot.plotting.textbox import TextBox


def test_default_routines_installed():
	maker = PlotMaker()
	assert maker.n_routines() == 8
	for name, routine_type in DEFAULT_ROUTINES:
		assert name in maker
		assert isinstance(maker.get(name), routine_type)
		assert maker[name] is maker.get(name)


def test_unknown_routine():
	with pytest.raises(UnknownOption) as e:
		PlotMaker().get('PlotSpectra3D')
	assert str(e.value).startswith('PlotMaker: ')
	assert 'PlotSpectra3D' in str(e.value)


def test_add_routine_replaces():
	maker = PlotMaker()
	custom = PlotSpectra1D()
	maker.add_routine('PlotSpectra1D', custom)
	maker.add_routine('MyRoutine', BaseRoutine())
	assert maker.get('PlotSpectra1D') is custom
	assert maker.n_routines() == 9


def test_routines_share_styles_and_text():
	plot_style = base_options.base_plot_style()
	text_style = base_options.base_text_style()
	maker = PlotMaker(plot_style, text_style, base_options.text())
	routine = maker.get('CorrectSpectra1D')
	assert routine.base_plot_style is plot_style
	assert routine.base_text_style is text_style

	text = TextBox(['another system'])
	maker.set_text_box(text)
	assert all(maker.get(name).text_box is text for name, _ in DEFAULT_ROUTINES)


def test_base_routine_has_no_plot():
	with pytest.raises(NotImplementedError):
		BaseRoutine().plot(None)


def test_params_round_trip():
	routine = PlotSpectra1D()
	params = routine.configure([], 'cEmpty')
	assert routine.get_params() is params
	assert params.options.canvas.name == 'cEmpty'
	assert params.options.canvas.opts.logx == 1

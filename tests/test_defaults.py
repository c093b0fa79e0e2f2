import pytest

from pyeecplot.histutils.hist import Axis
from pyeecplot.inout.catalog import InFiles
from pyeecplot.maker import base_options, maker_default
from pyeecplot.maker.maker_tools import RangeOpt
from pyeecplot.plotting import colors
from pyeecplot.plotting.elements import PlotShape
from pyeecplot.plotting.primitives import Pave, PaveText
from pyeecplot.plotting.range import Range
from pyeecplot.plotting.shape import Shape
from pyeecplot.plotting.style import Style

from conftest import flat_hist_1d, flat_hist_2d


def test_plot_ranges():
	assert maker_default.plot_range(RangeOpt.SIDE) == Range((0.003, 3.), (0.00003, 0.7), (0.00003, 33.))
	assert maker_default.plot_range(RangeOpt.ANGLE).x == (0., 6.3)
	assert maker_default.plot_range(RangeOpt.SIDE, maker_default.Z_RANGES['narrow']).z == (0.00003, 0.7)
	assert maker_default.norm_range(RangeOpt.ANGLE).x == (0., 6.3)


def test_unknown_range_option(monkeypatch):
	warnings = []
	monkeypatch.setattr(maker_default, 'pwarning', lambda *args: warnings.append(args))
	assert maker_default.plot_range(7) == Range()
	assert len(warnings) == 1


def test_range_option_from_name(monkeypatch):
	monkeypatch.setattr('pyeecplot.maker.maker_tools.pwarning', lambda *args: None)
	assert RangeOpt.from_name('Angle') == RangeOpt.ANGLE
	assert RangeOpt.from_name('side') == RangeOpt.SIDE
	assert RangeOpt.from_name('energy') is None


def test_2d_range_uses_angle_on_y():
	plot_range = maker_default.plot_range_2d()
	assert plot_range.x == (0.003, 3.)
	assert plot_range.y == (0., 6.3)


def test_unity_line():
	unity = maker_default.unity(RangeOpt.ANGLE)
	line = unity.make()
	assert list(line.get_xdata()) == [0., 6.3]
	assert list(line.get_ydata()) == [1., 1.]
	assert line.get_linewidth() == 2


def test_range_apply_sets_user_range():
	axis = Axis([0., 1., 2.])
	Range((0.5, 1.5), (2., 3.)).apply(Range.Y, axis)
	assert axis.user_range == (2., 3.)


def test_style_copies_are_independent():
	base = base_options.base_plot_style()
	style = base.copy()
	style.set_plot_style(Style.Plot(899, 24))
	assert base.plot.color == 1
	assert style.plot == Style.Plot(899, 24)
	h = flat_hist_2d('h', 1.)
	style.apply(h)
	assert (h.marker_color, h.marker_style) == (899, 24)
	assert h.zaxis.title_offset == pytest.approx(1.2)
	assert h.xaxis.label_size == pytest.approx(0.03)


def test_text_box_per_species(monkeypatch):
	warnings = []
	monkeypatch.setattr(base_options, 'pwarning', lambda *args: warnings.append(args))
	assert base_options.text(InFiles.PAu).text[1] == 'p+Au collisions'
	assert base_options.text().text[1] == 'p+p collisions'
	assert warnings == []
	base_options.text(5)
	assert len(warnings) == 1


def test_shape_kinds():
	box = PlotShape(Shape((0., 1.), (0., 2.)), Style.Plot(2, 1, 1001), kind='box').make()
	assert box.get_height() == 2.
	assert box.get_fill()
	arc = PlotShape(Shape.ellipse((0., 0.), (1., 1.), (0., 90.)), kind='ellipse').make()
	assert type(arc).__name__ == 'Arc'


def test_colors():
	assert colors.to_rgb(1) == (0., 0., 0.)
	assert colors.to_rgb(923) == (0.2, 0.2, 0.2)
	lighter = colors.to_rgb(colors.kAzure - 1)
	assert all(0. <= c <= 1. for c in lighter)
	assert colors.to_marker(24) == ('o', False)
	assert colors.to_fill(3004) == (False, '///', 1.0)
	assert colors.to_alignment(12) == ('left', 'center')
	assert colors.is_pixel_font(43)
	assert not colors.is_pixel_font(42)


def test_per_axis_setters():
	style = Style()
	style.set_label_style(Range.Y, Style.Label(size=0.06))
	style.set_title_style(Range.Y, Style.Title(offset=1.4))
	assert style.get_label_style(Range.Y).size == 0.06
	assert style.get_label_style().size == 0.04
	assert style.get_title_style(Range.Y).offset == 1.4

	shape = Shape((0., 1.), (1., 1.))
	shape.set_yrange((0., 2.))
	assert shape.center == (0.5, 1.)
	shape.set_xrange((2., 4.))
	assert shape.radii == (1., 1.)


def styled_attributes(obj):
	if isinstance(obj, Pave):
		return dict(vars(obj))
	attrs = dict([(a, getattr(obj, a)) for a in ('fill_color', 'fill_style', 'line_color', 'line_style',
		'line_width', 'marker_color', 'marker_style', 'title_font')])
	for iaxis, axis in enumerate(obj.axes()):
		for a, value in vars(axis).items():
			if a != 'edges':
				attrs['{}_{}'.format(iaxis, a)] = value
	return attrs


@pytest.mark.parametrize('make', [
	lambda: flat_hist_1d('h1', 1.),
	lambda: flat_hist_2d('h2', 1.),
	lambda: PaveText(['line'])])
def test_style_applied_twice_is_unchanged(make):
	style = Style(Style.Plot(899, 24, 3004, 2, 3), Style.Text(2, 62, 22, 0.06),
		labels=Style.Label(size=0.05), titles=Style.Title(center=1, offset=1.3))
	obj = make()
	style.apply(obj)
	once = styled_attributes(obj)
	style.apply(obj)
	assert styled_attributes(obj) == once
	assert once != styled_attributes(make())

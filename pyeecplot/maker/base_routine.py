#!/usr/bin/env python3

"""
  Base class for plot routines.

  A routine owns a Params record, the base plot/text styles and the
  text box shared by all routines, and implements plot(ofile). Every
  handle a routine opens (input stores, derived histograms, canvas) is
  released before plot() returns, on failure too.
"""

import functools

from pyeecplot.errors import PlotterError, MissingInput
from pyeecplot.histutils.hist import Hist2D
from pyeecplot.mputils import MPBase, ppanic, pinfo, pindent
from pyeecplot.plotting import tools
from pyeecplot.plotting.elements import PlotShape
from pyeecplot.plotting.legend import Legend
from pyeecplot.plotting.range import Range
from pyeecplot.plotting.shape import Shape
from pyeecplot.plotting.style import Style
from pyeecplot.plotting.textbox import TextBox

#---------------------------------------------------------------
# Report a failed contract on the error channel, naming the
# routine, then abort
#---------------------------------------------------------------
def panic_on_failure(plot):
  @functools.wraps(plot)
  def wrapper(self, *args, **kwargs):
    try:
      return plot(self, *args, **kwargs)
    except PlotterError as e:
      if e.routine is None:
        e.routine = self.__class__.__name__
      ppanic(str(e))
      raise
  return wrapper

#---------------------------------------------------------------
# Add the overlay hint to a draw option
#---------------------------------------------------------------
def same(option=''):
  return '{} same'.format(option).strip()


################################################################
class BaseRoutine(MPBase):

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, base_plot_style=None, base_text_style=None, text_box=None, **kwargs):
    super(BaseRoutine, self).__init__(**kwargs)
    self.base_plot_style = base_plot_style if base_plot_style is not None else Style()
    self.base_text_style = base_text_style if base_text_style is not None else Style()
    self.text_box = text_box if text_box is not None else TextBox()

  #---------------------------------------------------------------
  def set_base_plot_style(self, style):
    self.base_plot_style = style

  #---------------------------------------------------------------
  def set_base_text_style(self, style):
    self.base_text_style = style

  #---------------------------------------------------------------
  def set_text_box(self, text_box):
    self.text_box = text_box

  #---------------------------------------------------------------
  def set_params(self, params):
    self.params = params

  #---------------------------------------------------------------
  def get_params(self):
    return self.params

  #---------------------------------------------------------------
  # One copy of the base plot style per input, carrying the
  # input's plot attributes
  #---------------------------------------------------------------
  def generate_styles(self, inputs):
    styles = []
    for inp in inputs:
      style = self.base_plot_style.copy()
      style.set_plot_style(inp.style)
      styles.append(style)
    return styles

  #---------------------------------------------------------------
  # Open each input, grab its histogram, project and rebin it if
  # asked and rename it. Opened stores are appended to files
  # so that the caller can close them.
  #---------------------------------------------------------------
  def load_inputs(self, inputs, files, kind='', title_from_legend=False):
    hists = []
    for inp in inputs:
      if not inp.file or not inp.object:
        raise MissingInput('input {} has no file or no object'.format(inp))
      files.append(tools.open_file(inp.file, 'read'))
      hist = tools.grab_object(inp.object, files[-1])
      if inp.projection is not None:
        hist = inp.projection.apply(hist)
      if inp.rebin.rebin:
        inp.rebin.apply(hist)
      if inp.rename:
        hist.name = inp.rename
      if title_from_legend:
        hist.title = inp.legend
      pindent('File {}= {}'.format(kind, inp.file))
      pindent('Hist {}= {}'.format(kind, inp.object))
      hists.append(hist)
    return hists

  #---------------------------------------------------------------
  # Normalize over norm_range.x (and norm_range.y for 2D)
  #---------------------------------------------------------------
  def normalize(self, hists, options):
    xlo, xhi = options.norm_range.x
    ylo, yhi = options.norm_range.y
    for hist in hists:
      if isinstance(hist, Hist2D):
        tools.normalize_by_integral(hist, options.norm_to, xlo, xhi, ylo, yhi)
      else:
        tools.normalize_by_integral(hist, options.norm_to, xlo, xhi)

  #---------------------------------------------------------------
  # Bin-by-bin quotients, named after the numerators
  #---------------------------------------------------------------
  def divide(self, nums, dens, suffix='_Ratio'):
    return [tools.divide_hist(num, den, num.name + suffix) for num, den in zip(nums, dens)]

  #---------------------------------------------------------------
  # Legend in the lower left of the pad, tall enough for its
  # entries and header
  #---------------------------------------------------------------
  def make_legend(self, entries, header='', option='PF'):
    legend = Legend()
    for obj, label in entries:
      legend.add_entry(Legend.Entry(obj, label, option))
    if header:
      legend.set_header(header)
    height = tools.get_height(legend.n_lines(), self.base_text_style.text.spacing)
    legend.set_vertices((0.3, 0.1, 0.5, 0.1 + height))
    return legend

  #---------------------------------------------------------------
  # Style a histogram and set its plot range; ratios only get
  # the x range
  #---------------------------------------------------------------
  def style_hist(self, style, hist, plot_range, axes=(Range.X, Range.Y)):
    style.apply(hist)
    for axis in axes:
      plot_range.apply(axis, hist.get_axis(axis))

  #---------------------------------------------------------------
  # Unit-ratio line clipped to the binned extent of hist_axis
  #---------------------------------------------------------------
  def make_unity(self, unity, plot_range, hist_axis):
    xspan = tools.get_draw_range(plot_range.x, hist_axis)
    line = PlotShape(Shape(xspan, unity.shape.yrange), unity.style, unity.pad, unity.legend, unity.kind)
    return line.make()

  #---------------------------------------------------------------
  # Bring the x and y axis text of hists drawn on pad dst to
  # the visual weight of text on pad src
  #---------------------------------------------------------------
  def scale_text(self, manager, src, dst, hists):
    for hist in hists:
      for axis in (hist.xaxis, hist.yaxis):
        manager.scale_axis_text(src, dst, axis)

  #---------------------------------------------------------------
  # Draw additional shapes on their pad, or on the default pad
  #---------------------------------------------------------------
  def draw_shapes(self, manager, shapes, default_pad=0):
    for plot_shape in shapes:
      pad = plot_shape.pad if plot_shape.pad else default_pad
      manager.get_pad(pad).draw(plot_shape.make())

  #---------------------------------------------------------------
  def announce(self, what):
    pinfo('Beginning {}!'.format(what))
    pindent('Opening inputs:')

  #---------------------------------------------------------------
  def plot(self, ofile):
    raise NotImplementedError('{} does not implement plot()'.format(self.__class__.__name__))

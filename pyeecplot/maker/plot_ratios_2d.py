#!/usr/bin/env python3

"""
  PlotRatios2D: pairs of 2D spectra and their ratios; denominators,
  numerators and ratios fill one row each of a grid canvas.
"""

from pyeecplot.errors import MissingInput, SizeMismatch, InsufficientLayout
from pyeecplot.maker import maker_default
from pyeecplot.maker.base_routine import BaseRoutine, panic_on_failure
from pyeecplot.maker.maker_tools import make_grid_canvas
from pyeecplot.maker.plot_ratios_1d import PlotRatios1D
from pyeecplot.maker.plot_spectra_2d import DRAW_2D
from pyeecplot.mputils import pinfo
from pyeecplot.plotting import tools
from pyeecplot.plotting.canvas_manager import CanvasManager
from pyeecplot.plotting.elements import PlotOpts
from pyeecplot.plotting.pad_opts import PadOpts
from pyeecplot.plotting.range import Range

################################################################
class PlotRatios2D(BaseRoutine):

  Params = PlotRatios1D.Params

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, base_plot_style=None, base_text_style=None, text_box=None, **kwargs):
    super(PlotRatios2D, self).__init__(base_plot_style, base_text_style, text_box, **kwargs)
    self.params = PlotRatios2D.Params()

  #---------------------------------------------------------------
  def configure(self, denominators, numerators, canvas_name='cRatios2D', zrange=None, header='', shapes=None):
    canvas = make_grid_canvas(canvas_name, 'pRatio', 3 * len(numerators), max(len(numerators), 1),
                              opts=PadOpts(logx=1, logz=1))
    plot_range = maker_default.plot_range_2d(zrange)
    options = PlotOpts(
      header=header,
      canvas=canvas,
      plot_range=plot_range,
      norm_range=Range(plot_range.x, plot_range.y)
    )
    self.params = PlotRatios2D.Params(denominators, numerators, None, shapes, options)
    return self.params

  #---------------------------------------------------------------
  @panic_on_failure
  def plot(self, ofile):
    denominators = self.params.denominators
    numerators = self.params.numerators
    options = self.params.options
    if len(denominators) != len(numerators):
      raise SizeMismatch('{} denominators but {} numerators'.format(len(denominators), len(numerators)))
    if len(numerators) == 0:
      raise MissingInput('no ratios to plot')
    npads = len(options.canvas.layout())
    if npads < 3 * len(numerators):
      raise InsufficientLayout('{} pairs and their ratios but canvas {} declares only {} pad(s)'.format(
        len(numerators), options.canvas.name, npads))

    self.announce('2D ratio plotting routine')
    files = []
    manager = None
    try:
      dens = self.load_inputs(denominators, files, 'denominator ', title_from_legend=True)
      nums = self.load_inputs(numerators, files, 'numerator ', title_from_legend=True)
      if options.do_norm:
        self.normalize(dens + nums, options)

      axes = (Range.X, Range.Y, Range.Z)
      styles = self.generate_styles(denominators + numerators)
      for style, hist in zip(styles, dens + nums):
        self.style_hist(style, hist, options.plot_range, axes)

      ratios = self.divide(nums, dens)
      for ratio, dinp, ninp in zip(ratios, denominators, numerators):
        ratio.title = '{} / {}'.format(ninp.legend, dinp.legend)
        ratio.zaxis.user_range = None

      text = self.text_box.make_text()
      self.base_text_style.apply(text)

      manager = CanvasManager(options.canvas)
      manager.make_plot()
      manager.draw()
      for ihist, hist in enumerate(dens + nums + ratios):
        manager.get_pad(ihist).draw(hist, DRAW_2D)
      self.draw_shapes(manager, self.params.shapes)
      manager.get_pad(manager.n_pads() - 1).draw(text)

      for hist in dens + nums + ratios:
        ofile.write(hist, hist.name)
      manager.write(ofile)
      pinfo('Finished 2D ratio plotting routine!')
    finally:
      if manager is not None:
        manager.close()
      tools.close_files(files)

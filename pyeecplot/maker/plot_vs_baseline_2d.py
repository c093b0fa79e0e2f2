#!/usr/bin/env python3

"""
  PlotVsBaseline2D: 2D spectra next to a baseline, with the ratio of
  each spectrum to the baseline on the pads that follow.
"""

from pyeecplot.errors import MissingInput, InsufficientLayout
from pyeecplot.maker import maker_default
from pyeecplot.maker.base_routine import BaseRoutine, panic_on_failure
from pyeecplot.maker.maker_tools import make_grid_canvas
from pyeecplot.maker.plot_spectra_2d import DRAW_2D
from pyeecplot.maker.plot_vs_baseline_1d import PlotVsBaseline1D
from pyeecplot.mputils import pinfo
from pyeecplot.plotting import tools
from pyeecplot.plotting.canvas_manager import CanvasManager
from pyeecplot.plotting.elements import PlotOpts
from pyeecplot.plotting.pad_opts import PadOpts
from pyeecplot.plotting.range import Range

################################################################
class PlotVsBaseline2D(BaseRoutine):

  Params = PlotVsBaseline1D.Params

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, base_plot_style=None, base_text_style=None, text_box=None, **kwargs):
    super(PlotVsBaseline2D, self).__init__(base_plot_style, base_text_style, text_box, **kwargs)
    self.params = PlotVsBaseline2D.Params()

  #---------------------------------------------------------------
  # Default parameters: baseline and spectra on the first row,
  # ratios on the second
  #---------------------------------------------------------------
  def configure(self, denominator, numerators, canvas_name='cSpectraVsBaseline2D', zrange=None, header='', shapes=None):
    ncolumn = len(numerators) + 1
    canvas = make_grid_canvas(canvas_name, 'pVsBase', 2 * len(numerators) + 1, ncolumn, opts=PadOpts(logx=1, logz=1))
    plot_range = maker_default.plot_range_2d(zrange)
    options = PlotOpts(
      header=header,
      canvas=canvas,
      plot_range=plot_range,
      norm_range=Range(plot_range.x, plot_range.y)
    )
    self.params = PlotVsBaseline2D.Params(denominator, numerators, None, shapes, options)
    return self.params

  #---------------------------------------------------------------
  @panic_on_failure
  def plot(self, ofile):
    denominator = self.params.denominator
    numerators = self.params.numerators
    options = self.params.options
    if len(numerators) == 0:
      raise MissingInput('no numerators to compare to baseline {}'.format(denominator))
    npads = len(options.canvas.layout())
    if npads < 2 * len(numerators) + 1:
      raise InsufficientLayout('baseline, {} spectra and their ratios but canvas {} declares only {} pad(s)'.format(
        len(numerators), options.canvas.name, npads))

    self.announce('2D spectra vs. baseline plotting routine')
    files = []
    manager = None
    try:
      baseline = self.load_inputs([denominator], files, 'baseline ', title_from_legend=True)[0]
      spectra = self.load_inputs(numerators, files, title_from_legend=True)
      if options.do_norm:
        self.normalize([baseline] + spectra, options)

      axes = (Range.X, Range.Y, Range.Z)
      styles = self.generate_styles([denominator] + numerators)
      for style, hist in zip(styles, [baseline] + spectra):
        self.style_hist(style, hist, options.plot_range, axes)

      ratios = self.divide(spectra, [baseline] * len(spectra))
      for ratio, inp in zip(ratios, numerators):
        ratio.title = '{} / {}'.format(inp.legend, denominator.legend)
        ratio.zaxis.user_range = None

      text = self.text_box.make_text()
      self.base_text_style.apply(text)

      manager = CanvasManager(options.canvas)
      manager.make_plot()
      manager.draw()
      for ihist, hist in enumerate([baseline] + spectra + ratios):
        manager.get_pad(ihist).draw(hist, DRAW_2D)
      self.draw_shapes(manager, self.params.shapes)
      manager.get_pad(manager.n_pads() - 1).draw(text)

      for hist in [baseline] + spectra + ratios:
        ofile.write(hist, hist.name)
      manager.write(ofile)
      pinfo('Finished 2D spectra vs. baseline plotting routine!')
    finally:
      if manager is not None:
        manager.close()
      tools.close_files(files)

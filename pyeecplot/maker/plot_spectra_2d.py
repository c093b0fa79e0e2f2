#!/usr/bin/env python3

"""
  PlotSpectra2D: one 2D spectrum per pad of a grid canvas.
"""

from pyeecplot.errors import MissingInput, InsufficientLayout
from pyeecplot.maker import maker_default
from pyeecplot.maker.base_routine import BaseRoutine, panic_on_failure
from pyeecplot.maker.maker_tools import make_grid_canvas
from pyeecplot.mputils import pinfo
from pyeecplot.plotting import tools
from pyeecplot.plotting.canvas_manager import CanvasManager
from pyeecplot.plotting.elements import PlotOpts
from pyeecplot.plotting.pad_opts import PadOpts
from pyeecplot.plotting.range import Range

# heatmap with a color scale
DRAW_2D = 'colz'

################################################################
class PlotSpectra2D(BaseRoutine):

  ################################################################
  class Params(object):
    def __init__(self, inputs=None, shapes=None, options=None):
      self.inputs = list(inputs) if inputs is not None else []
      self.shapes = list(shapes) if shapes is not None else []
      self.options = options if options is not None else PlotOpts()

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, base_plot_style=None, base_text_style=None, text_box=None, **kwargs):
    super(PlotSpectra2D, self).__init__(base_plot_style, base_text_style, text_box, **kwargs)
    self.params = PlotSpectra2D.Params()

  #---------------------------------------------------------------
  # Default parameters: a grid with ncolumn columns, log x and z
  #---------------------------------------------------------------
  def configure(self, inputs, canvas_name='cSpectra2D', ncolumn=2, zrange=None, header='', shapes=None):
    canvas = make_grid_canvas(canvas_name, 'pSpec', len(inputs), ncolumn, opts=PadOpts(logx=1, logz=1))
    plot_range = maker_default.plot_range_2d(zrange)
    options = PlotOpts(
      header=header,
      canvas=canvas,
      plot_range=plot_range,
      norm_range=Range(plot_range.x, plot_range.y)
    )
    self.params = PlotSpectra2D.Params(inputs, shapes, options)
    return self.params

  #---------------------------------------------------------------
  @panic_on_failure
  def plot(self, ofile):
    inputs = self.params.inputs
    options = self.params.options
    if len(inputs) == 0:
      raise MissingInput('no inputs to plot')
    npads = len(options.canvas.layout())
    if npads < len(inputs):
      raise InsufficientLayout('{} inputs but canvas {} declares only {} pad(s)'.format(
        len(inputs), options.canvas.name, npads))

    self.announce('2D spectra plotting routine')
    files = []
    manager = None
    try:
      hists = self.load_inputs(inputs, files, title_from_legend=True)
      if options.do_norm:
        self.normalize(hists, options)

      styles = self.generate_styles(inputs)
      for style, hist in zip(styles, hists):
        self.style_hist(style, hist, options.plot_range, (Range.X, Range.Y, Range.Z))

      text = self.text_box.make_text()
      self.base_text_style.apply(text)

      manager = CanvasManager(options.canvas)
      manager.make_plot()
      manager.draw()
      for ihist, (hist, inp) in enumerate(zip(hists, inputs)):
        manager.get_pad(ihist).draw(hist, inp.draw if inp.draw else DRAW_2D)
      self.draw_shapes(manager, self.params.shapes)
      manager.get_pad(manager.n_pads() - 1).draw(text)

      for hist in hists:
        ofile.write(hist, hist.name)
      manager.write(ofile)
      pinfo('Finished 2D spectra plotting routine!')
    finally:
      if manager is not None:
        manager.close()
      tools.close_files(files)

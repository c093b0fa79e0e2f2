#!/usr/bin/env python3

"""
  PlotSpectra1D: overlay several 1D spectra on one pad.
"""

from pyeecplot.errors import MissingInput
from pyeecplot.maker import maker_default
from pyeecplot.maker.base_routine import BaseRoutine, panic_on_failure, same
from pyeecplot.maker.maker_tools import RangeOpt
from pyeecplot.mputils import pinfo
from pyeecplot.plotting import tools
from pyeecplot.plotting.canvas import Canvas
from pyeecplot.plotting.canvas_manager import CanvasManager
from pyeecplot.plotting.elements import PlotOpts
from pyeecplot.plotting.pad import Margins
from pyeecplot.plotting.pad_opts import PadOpts

################################################################
class PlotSpectra1D(BaseRoutine):

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
    super(PlotSpectra1D, self).__init__(base_plot_style, base_text_style, text_box, **kwargs)
    self.params = PlotSpectra1D.Params()

  #---------------------------------------------------------------
  # Default parameters for a list of inputs: one pad, log-log
  # for side-length observables
  #---------------------------------------------------------------
  def configure(self, inputs, canvas_name='cSpectra1D', range_opt=RangeOpt.SIDE, header='', shapes=None):
    log = 1 if range_opt == RangeOpt.SIDE else 0
    canvas = Canvas(canvas_name, '', (maker_default.SMALL, maker_default.SMALL),
                    PadOpts(logx=log, logy=log),
                    Margins(left=0.15, right=0.02, bottom=0.15, top=0.02))
    options = PlotOpts(
      header=header,
      canvas=canvas,
      plot_range=maker_default.plot_range(range_opt),
      norm_range=maker_default.norm_range(range_opt)
    )
    self.params = PlotSpectra1D.Params(inputs, shapes, options)
    return self.params

  #---------------------------------------------------------------
  @panic_on_failure
  def plot(self, ofile):
    inputs = self.params.inputs
    options = self.params.options
    if len(inputs) == 0:
      raise MissingInput('no inputs to plot')

    self.announce('spectra plotting routine')
    files = []
    manager = None
    try:
      hists = self.load_inputs(inputs, files)
      if options.do_norm:
        self.normalize(hists, options)

      styles = self.generate_styles(inputs)
      for style, hist in zip(styles, hists):
        self.style_hist(style, hist, options.plot_range)

      legend = self.make_legend([(h, inp.legend) for h, inp in zip(hists, inputs)], options.header)
      leg_box = legend.make_legend()
      self.base_text_style.apply(leg_box)
      text = self.text_box.make_text()
      self.base_text_style.apply(text)

      manager = CanvasManager(options.canvas)
      manager.make_plot()
      manager.draw()
      pad = manager.get_pad(0)
      for ihist, (hist, inp) in enumerate(zip(hists, inputs)):
        pad.draw(hist, inp.draw if ihist == 0 else same(inp.draw))
      self.draw_shapes(manager, self.params.shapes)
      pad.draw(leg_box)
      pad.draw(text)

      for hist in hists:
        ofile.write(hist, hist.name)
      manager.write(ofile)
      pinfo('Finished spectra plotting routine!')
    finally:
      if manager is not None:
        manager.close()
      tools.close_files(files)

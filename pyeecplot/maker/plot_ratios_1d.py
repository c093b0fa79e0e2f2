#!/usr/bin/env python3

"""
  PlotRatios1D: overlay pairs of spectra and show the ratio of each
  pair in a panel below.
"""

from pyeecplot.errors import MissingInput, SizeMismatch
from pyeecplot.maker import maker_default
from pyeecplot.maker.base_routine import BaseRoutine, panic_on_failure, same
from pyeecplot.maker.maker_tools import RangeOpt, make_ratio_canvas
from pyeecplot.mputils import pinfo
from pyeecplot.plotting import tools
from pyeecplot.plotting.canvas_manager import CanvasManager
from pyeecplot.plotting.elements import PlotOpts
from pyeecplot.plotting.pad_opts import PadOpts
from pyeecplot.plotting.range import Range

################################################################
class PlotRatios1D(BaseRoutine):

  ################################################################
  class Params(object):
    def __init__(self, denominators=None, numerators=None, unity=None, shapes=None, options=None):
      self.denominators = list(denominators) if denominators is not None else []
      self.numerators = list(numerators) if numerators is not None else []
      self.unity = unity if unity is not None else maker_default.unity()
      self.shapes = list(shapes) if shapes is not None else []
      self.options = options if options is not None else PlotOpts(spectra_pad='spectra', ratio_pad='ratio')

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, base_plot_style=None, base_text_style=None, text_box=None, **kwargs):
    super(PlotRatios1D, self).__init__(base_plot_style, base_text_style, text_box, **kwargs)
    self.params = PlotRatios1D.Params()

  #---------------------------------------------------------------
  def configure(self, denominators, numerators, canvas_name='cRatios', range_opt=RangeOpt.SIDE,
                header='', shapes=None):
    log = 1 if range_opt == RangeOpt.SIDE else 0
    canvas = make_ratio_canvas(canvas_name,
                               spectra_opts=PadOpts(logx=log, logy=log),
                               ratio_opts=PadOpts(logx=log))
    options = PlotOpts(
      header=header,
      ratio_pad='ratio',
      spectra_pad='spectra',
      canvas=canvas,
      plot_range=maker_default.plot_range(range_opt),
      norm_range=maker_default.norm_range(range_opt)
    )
    self.params = PlotRatios1D.Params(denominators, numerators, maker_default.unity(range_opt), shapes, options)
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

    self.announce('ratio plotting routine')
    files = []
    manager = None
    try:
      dens = self.load_inputs(denominators, files, 'denominator ')
      nums = self.load_inputs(numerators, files, 'numerator ')
      if options.do_norm:
        self.normalize(dens + nums, options)

      den_styles = self.generate_styles(denominators)
      num_styles = self.generate_styles(numerators)
      for style, hist in zip(den_styles + num_styles, dens + nums):
        self.style_hist(style, hist, options.plot_range)

      ratios = self.divide(nums, dens)
      # ratios keep the x range only; y follows their own extent
      for style, ratio in zip(num_styles, ratios):
        ratio.yaxis.user_range = None
        self.style_hist(style, ratio, options.plot_range, (Range.X,))

      entries = []
      for den, num, dinp, ninp in zip(dens, nums, denominators, numerators):
        entries.append((den, dinp.legend))
        entries.append((num, ninp.legend))
      legend = self.make_legend(entries, options.header)
      leg_box = legend.make_legend()
      self.base_text_style.apply(leg_box)
      text = self.text_box.make_text()
      self.base_text_style.apply(text)

      manager = CanvasManager(options.canvas)
      manager.make_plot()
      manager.draw()
      self.scale_text(manager, options.spectra_pad, options.ratio_pad, ratios)

      ratio_pad = manager.get_pad(options.ratio_pad)
      for iratio, (ratio, inp) in enumerate(zip(ratios, numerators)):
        ratio_pad.draw(ratio, inp.draw if iratio == 0 else same(inp.draw))
      ratio_pad.draw(self.make_unity(self.params.unity, options.plot_range, ratios[0].xaxis))

      spectra_pad = manager.get_pad(options.spectra_pad)
      for ipair, (den, num, dinp, ninp) in enumerate(zip(dens, nums, denominators, numerators)):
        spectra_pad.draw(den, dinp.draw if ipair == 0 else same(dinp.draw))
        spectra_pad.draw(num, same(ninp.draw))
      self.draw_shapes(manager, self.params.shapes, options.spectra_pad)
      spectra_pad.draw(leg_box)
      spectra_pad.draw(text)

      for hist in dens + nums + ratios:
        ofile.write(hist, hist.name)
      manager.write(ofile)
      pinfo('Finished ratio plotting routine!')
    finally:
      if manager is not None:
        manager.close()
      tools.close_files(files)

#!/usr/bin/env python3

"""
  CorrectSpectra2D: bin-by-bin correction of 2D spectra. Corrected
  spectra, correction factors and residuals fill one row each of a
  grid canvas.
"""

from pyeecplot.errors import MissingInput, SizeMismatch, InsufficientLayout
from pyeecplot.maker import maker_default
from pyeecplot.maker.base_routine import panic_on_failure
from pyeecplot.maker.correct_spectra_1d import CorrectSpectra1D
from pyeecplot.maker.maker_tools import make_grid_canvas
from pyeecplot.maker.plot_spectra_2d import DRAW_2D
from pyeecplot.mputils import pinfo, pindent
from pyeecplot.plotting import tools
from pyeecplot.plotting.canvas_manager import CanvasManager
from pyeecplot.plotting.elements import PlotOpts
from pyeecplot.plotting.pad_opts import PadOpts
from pyeecplot.plotting.range import Range

################################################################
class CorrectSpectra2D(CorrectSpectra1D):

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, base_plot_style=None, base_text_style=None, text_box=None, **kwargs):
    super(CorrectSpectra2D, self).__init__(base_plot_style, base_text_style, text_box, **kwargs)

  #---------------------------------------------------------------
  def configure(self, data, recon, truth, canvas_name='cCorrect2D', zrange=None, header='', shapes=None):
    canvas = make_grid_canvas(canvas_name, 'pCorrect', 3 * len(data), len(data), opts=PadOpts(logx=1, logz=1))
    plot_range = maker_default.plot_range_2d(zrange)
    options = PlotOpts(
      header=header,
      canvas=canvas,
      plot_range=plot_range,
      norm_range=Range(plot_range.x, plot_range.y)
    )
    self.params = CorrectSpectra1D.Params(data, recon, truth, None, shapes, options)
    return self.params

  #---------------------------------------------------------------
  @panic_on_failure
  def plot(self, ofile):
    data_inputs = self.params.data
    recon_inputs = self.params.recon
    truth_inputs = self.params.truth
    options = self.params.options
    if not (len(data_inputs) == len(recon_inputs) == len(truth_inputs)):
      raise SizeMismatch('need as many data as recon and truth inputs (data = {}, recon = {}, truth = {})'.format(
        len(data_inputs), len(recon_inputs), len(truth_inputs)))
    if len(data_inputs) == 0:
      raise MissingInput('no spectra to correct')
    npads = len(options.canvas.layout())
    if npads < 3 * len(data_inputs):
      raise InsufficientLayout('{} corrected spectra, factors and residuals but canvas {} declares only {} pad(s)'.format(
        3 * len(data_inputs), options.canvas.name, npads))

    self.announce('2D spectrum correction routine')
    files = []
    manager = None
    try:
      data = self.load_inputs(data_inputs, files, 'data ', title_from_legend=True)
      recon = self.load_inputs(recon_inputs, files, 'recon ', title_from_legend=True)
      truth = self.load_inputs(truth_inputs, files, 'truth ', title_from_legend=True)

      axes = (Range.X, Range.Y, Range.Z)
      data_styles = self.generate_styles(data_inputs)
      recon_styles = self.generate_styles(recon_inputs)
      truth_styles = self.generate_styles(truth_inputs)
      for style, hist in zip(data_styles + recon_styles + truth_styles, data + recon + truth):
        self.style_hist(style, hist, options.plot_range, axes)

      pindent('Correcting {} spectra'.format(len(data)))
      factors, corrected, residuals = self.correct(data, recon, truth, options)
      for hist, inp in zip(factors, recon_inputs):
        hist.title = '{} correction'.format(inp.legend)
      for hist, inp in zip(residuals, data_inputs):
        hist.title = '{} / truth'.format(inp.legend)
      # ratios are drawn over their own z extent
      for hist in factors + residuals:
        hist.zaxis.user_range = None

      text = self.text_box.make_text()
      self.base_text_style.apply(text)

      manager = CanvasManager(options.canvas)
      manager.make_plot()
      manager.draw()
      for ihist, hist in enumerate(corrected + factors + residuals):
        manager.get_pad(ihist).draw(hist, DRAW_2D)
      self.draw_shapes(manager, self.params.shapes)
      manager.get_pad(manager.n_pads() - 1).draw(text)

      for hist in corrected + recon + truth + factors + residuals:
        ofile.write(hist, hist.name)
      manager.write(ofile)
      pinfo('Finished 2D spectrum correction routine!')
    finally:
      if manager is not None:
        manager.close()
      tools.close_files(files)

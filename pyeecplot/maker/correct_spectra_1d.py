#!/usr/bin/env python3

"""
  CorrectSpectra1D: bin-by-bin correction of measured spectra.

  For each (data, recon, truth) triplet the correction factor
  c = recon / truth is computed after normalizing recon and truth,
  the data are corrected as data / c, and the residual
  f = corrected / truth is shown. Three pads: correction factors at
  the bottom, residuals in the middle, spectra on top.
"""

from pyeecplot.errors import MissingInput, SizeMismatch
from pyeecplot.maker import maker_default
from pyeecplot.maker.base_routine import BaseRoutine, panic_on_failure, same
from pyeecplot.maker.maker_tools import RangeOpt, make_correction_canvas
from pyeecplot.mputils import pinfo, pindent
from pyeecplot.plotting import tools
from pyeecplot.plotting.canvas_manager import CanvasManager
from pyeecplot.plotting.elements import PlotOpts
from pyeecplot.plotting.pad_opts import PadOpts
from pyeecplot.plotting.range import Range

DRAW_HIST = 'hist'

################################################################
class CorrectSpectra1D(BaseRoutine):

  ################################################################
  class Params(object):
    def __init__(self, data=None, recon=None, truth=None, unity=None, shapes=None, options=None):
      self.data = list(data) if data is not None else []
      self.recon = list(recon) if recon is not None else []
      self.truth = list(truth) if truth is not None else []
      self.unity = unity if unity is not None else maker_default.unity()
      self.shapes = list(shapes) if shapes is not None else []
      self.options = options if options is not None else PlotOpts(
        spectra_pad='spectra', ratio_pad='ratio', correct_pad='correct')

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, base_plot_style=None, base_text_style=None, text_box=None, **kwargs):
    super(CorrectSpectra1D, self).__init__(base_plot_style, base_text_style, text_box, **kwargs)
    self.params = CorrectSpectra1D.Params()

  #---------------------------------------------------------------
  def configure(self, data, recon, truth, canvas_name='cCorrect', range_opt=RangeOpt.SIDE,
                header='', shapes=None):
    log = 1 if range_opt == RangeOpt.SIDE else 0
    canvas = make_correction_canvas(canvas_name,
                                    correct_opts=PadOpts(logx=log),
                                    ratio_opts=PadOpts(logx=log),
                                    spectra_opts=PadOpts(logx=log, logy=log))
    options = PlotOpts(
      header=header,
      ratio_pad='ratio',
      spectra_pad='spectra',
      correct_pad='correct',
      canvas=canvas,
      plot_range=maker_default.plot_range(range_opt),
      norm_range=maker_default.norm_range(range_opt)
    )
    self.params = CorrectSpectra1D.Params(data, recon, truth, maker_default.unity(range_opt), shapes, options)
    return self.params

  #---------------------------------------------------------------
  # Correct each data spectrum with its recon / truth factor;
  # returns (factors, corrected, residuals)
  #---------------------------------------------------------------
  def correct(self, data, recon, truth, options):
    self.normalize(recon + truth, options)
    factors = [tools.divide_hist(r, t, r.name + '_CorrectionFactor') for r, t in zip(recon, truth)]
    corrected = [tools.divide_hist(d, c, d.name + '_Corrected') for d, c in zip(data, factors)]
    if options.do_norm:
      self.normalize(corrected, options)
    residuals = [tools.divide_hist(d, t, name + '_CorrectOverTruth')
                 for d, t, name in zip(corrected, truth, [h.name for h in data])]
    return factors, corrected, residuals

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

    self.announce('spectrum correction routine')
    files = []
    manager = None
    try:
      data = self.load_inputs(data_inputs, files, 'data ')
      recon = self.load_inputs(recon_inputs, files, 'recon ')
      truth = self.load_inputs(truth_inputs, files, 'truth ')

      data_styles = self.generate_styles(data_inputs)
      recon_styles = self.generate_styles(recon_inputs)
      truth_styles = self.generate_styles(truth_inputs)
      for style, hist in zip(data_styles + recon_styles + truth_styles, data + recon + truth):
        self.style_hist(style, hist, options.plot_range)

      pindent('Correcting {} spectra'.format(len(data)))
      factors, corrected, residuals = self.correct(data, recon, truth, options)
      # factors and residuals keep the x range only; y follows their own extent
      for hist in factors + residuals:
        hist.yaxis.user_range = None
      for style, hist in zip(recon_styles, factors):
        self.style_hist(style, hist, options.plot_range, (Range.X,))
      for style, hist in zip(data_styles, residuals):
        self.style_hist(style, hist, options.plot_range, (Range.X,))

      entries = []
      for cor, tru, dinp, tinp in zip(corrected, truth, data_inputs, truth_inputs):
        entries.append((cor, dinp.legend))
        entries.append((tru, tinp.legend))
      legend = self.make_legend(entries, options.header)
      leg_box = legend.make_legend()
      self.base_text_style.apply(leg_box)
      text = self.text_box.make_text()
      self.base_text_style.apply(text)

      manager = CanvasManager(options.canvas)
      manager.make_plot()
      manager.draw()
      self.scale_text(manager, options.spectra_pad, options.correct_pad, factors)
      self.scale_text(manager, options.spectra_pad, options.ratio_pad, residuals)

      correct_pad = manager.get_pad(options.correct_pad)
      for ifactor, factor in enumerate(factors):
        correct_pad.draw(factor, DRAW_HIST if ifactor == 0 else same(DRAW_HIST))
      correct_pad.draw(self.make_unity(self.params.unity, options.plot_range, factors[0].xaxis))

      ratio_pad = manager.get_pad(options.ratio_pad)
      for iresidual, (residual, inp) in enumerate(zip(residuals, data_inputs)):
        ratio_pad.draw(residual, inp.draw if iresidual == 0 else same(inp.draw))
      ratio_pad.draw(self.make_unity(self.params.unity, options.plot_range, factors[0].xaxis))

      spectra_pad = manager.get_pad(options.spectra_pad)
      for ipair, (cor, tru, dinp) in enumerate(zip(corrected, truth, data_inputs)):
        spectra_pad.draw(cor, dinp.draw if ipair == 0 else same(dinp.draw))
        spectra_pad.draw(tru, same(DRAW_HIST))
      self.draw_shapes(manager, self.params.shapes, options.spectra_pad)
      spectra_pad.draw(leg_box)
      spectra_pad.draw(text)

      for hist in corrected + recon + truth + factors + residuals:
        ofile.write(hist, hist.name)
      manager.write(ofile)
      pinfo('Finished spectrum correction routine!')
    finally:
      if manager is not None:
        manager.close()
      tools.close_files(files)

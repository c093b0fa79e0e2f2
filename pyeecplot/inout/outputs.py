#!/usr/bin/env python3

"""
  Figure sets: wiring from an analysis index to plot inputs and the
  routine that draws them.

  Each output builds PlotInputs for the indices it compares, configures
  the matching routine of a PlotMaker and runs it against an output
  store.
"""

from pyeecplot.errors import UnknownOption
from pyeecplot.inout.catalog import InFiles, InHists
from pyeecplot.mputils import MPBase, pwarning
from pyeecplot.plotting.elements import PlotInput, Rebin
from pyeecplot.plotting.style import Style

DRAW_2D = 'colz'

################################################################
class BaseOutput(MPBase):

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, index=None, maker=None, io=None, zrange=None, **kwargs):
    super(BaseOutput, self).__init__(**kwargs)
    self.index = index
    self.maker = maker
    self.io = io
    self.zrange = zrange

  #---------------------------------------------------------------
  def set_index(self, index):
    self.index = index

  #---------------------------------------------------------------
  # Plot input for one index
  #---------------------------------------------------------------
  def make_input(self, variable, index, tag, style=None, draw='', nrebin=1):
    return PlotInput(
      self.io.get_file(index),
      self.io.hist_key(variable, index),
      self.io.hist_key(variable, index, tag),
      self.io.legend(index),
      draw,
      style,
      Rebin(nrebin > 1, nrebin)
    )

  #---------------------------------------------------------------
  def make_plot_1d(self, variable, opt, ofile, nrebin=1):
    pwarning('{} has no 1D plot of {}'.format(self.__class__.__name__, variable))

  #---------------------------------------------------------------
  def make_plot_2d(self, variable, ofile):
    pwarning('{} has no 2D plot of {}'.format(self.__class__.__name__, variable))


################################################################
class SimVsData(BaseOutput):
  """Data and reconstructed simulation against the simulated truth."""

  colors = (899, 859, 923)
  markers = (24, 25, 29)

  #---------------------------------------------------------------
  def _inputs(self, variable, nrebin=1, draw=''):
    tag = self.io.species_tag('DataVsSim', self.index.species) + '_'
    inputs = []
    for level, color, marker in zip((InFiles.DATA, InFiles.RECO, InFiles.TRUE), self.colors, self.markers):
      index = self.index._replace(level=level)
      inputs.append(self.make_input(variable, index, tag, Style.Plot(color, marker), draw, nrebin))
    return inputs

  #---------------------------------------------------------------
  def make_plot_1d(self, variable, opt, ofile, nrebin=1):
    data, reco, truth = self._inputs(variable, nrebin)
    canvas = self.io.canvas_name('cDataVsSim' + variable, self.index)
    routine = self.maker.get('PlotVsBaseline1D')
    routine.configure(truth, [data, reco], canvas, opt)
    routine.plot(ofile)

  #---------------------------------------------------------------
  def make_plot_2d(self, variable, ofile):
    data, reco, truth = self._inputs(variable, draw=DRAW_2D)
    canvas = self.io.canvas_name('cDataVsSim' + variable, self.index)
    routine = self.maker.get('PlotVsBaseline2D')
    routine.configure(truth, [data, reco], canvas, self.zrange)
    routine.plot(ofile)


################################################################
class RecoVsData(BaseOutput):
  """Data over reconstructed simulation."""

  #---------------------------------------------------------------
  def _inputs(self, variable, nrebin=1, draw=''):
    tag = self.io.species_tag('DataVsReco', self.index.species) + '_'
    data = self.make_input(variable, self.index._replace(level=InFiles.DATA), tag, Style.Plot(923, 20), draw, nrebin)
    reco = self.make_input(variable, self.index._replace(level=InFiles.RECO), tag, Style.Plot(899, 24), draw, nrebin)
    return data, reco

  #---------------------------------------------------------------
  def make_plot_1d(self, variable, opt, ofile, nrebin=1):
    data, reco = self._inputs(variable, nrebin)
    canvas = self.io.canvas_name('cDataVsReco' + variable, self.index)
    routine = self.maker.get('PlotRatios1D')
    routine.configure([data], [reco], canvas, opt)
    routine.plot(ofile)

  #---------------------------------------------------------------
  def make_plot_2d(self, variable, ofile):
    data, reco = self._inputs(variable, draw=DRAW_2D)
    canvas = self.io.canvas_name('cDataVsReco' + variable, self.index)
    routine = self.maker.get('PlotRatios2D')
    routine.configure([data], [reco], canvas, self.zrange)
    routine.plot(ofile)


################################################################
class VsPtJet(BaseOutput):
  """One spectrum per jet pt bin."""

  colors = (799, 899, 879)
  markers = (26, 24, 32)

  #---------------------------------------------------------------
  def _inputs(self, variable, nrebin=1, draw=''):
    tag = self.io.species_tag('VsPtJet', self.index.species) + '_'
    inputs = []
    for pt, color, marker in zip((InHists.PT5, InHists.PT10, InHists.PT15), self.colors, self.markers):
      index = self.index._replace(pt=pt)
      inputs.append(self.make_input(variable, index, tag, Style.Plot(color, marker), draw, nrebin))
    return inputs

  #---------------------------------------------------------------
  def make_plot_1d(self, variable, opt, ofile, nrebin=1):
    canvas = self.io.canvas_name('cVsPtJet' + variable, self.index)
    routine = self.maker.get('PlotSpectra1D')
    routine.configure(self._inputs(variable, nrebin), canvas, opt)
    routine.plot(ofile)

  #---------------------------------------------------------------
  def make_plot_2d(self, variable, ofile):
    canvas = self.io.canvas_name('cVsPtJet' + variable, self.index)
    routine = self.maker.get('PlotSpectra2D')
    routine.configure(self._inputs(variable, draw=DRAW_2D), canvas, zrange=self.zrange)
    routine.plot(ofile)


################################################################
class PPVsPAu(BaseOutput):
  """p+Au over p+p, one pair per jet pt bin."""

  colors = ((809, 799), (899, 909), (889, 879))
  markers = ((22, 26), (20, 24), (23, 32))

  #---------------------------------------------------------------
  # Inputs differ in their file (species); keys are shared
  #---------------------------------------------------------------
  def _inputs(self, variable, nrebin=1, draw=''):
    dens = []
    nums = []
    for pt, color, marker in zip((InHists.PT5, InHists.PT10, InHists.PT15), self.colors, self.markers):
      ipp = self.index._replace(pt=pt, species=InFiles.PP)
      ipa = self.index._replace(pt=pt, species=InFiles.PAu)
      dens.append(self.make_input(variable, ipp, 'PPVsPAu_PP_', Style.Plot(color[0], marker[0]), draw, nrebin))
      nums.append(self.make_input(variable, ipa, 'PPVsPAu_PAu_', Style.Plot(color[1], marker[1]), draw, nrebin))
    return dens, nums

  #---------------------------------------------------------------
  def make_plot_1d(self, variable, opt, ofile, nrebin=1):
    dens, nums = self._inputs(variable, nrebin)
    canvas = self.io.canvas_name('cPPVsPAu' + variable, self.index)
    routine = self.maker.get('PlotRatios1D')
    routine.configure(dens, nums, canvas, opt)
    routine.plot(ofile)

  #---------------------------------------------------------------
  def make_plot_2d(self, variable, ofile):
    dens, nums = self._inputs(variable, draw=DRAW_2D)
    canvas = self.io.canvas_name('cPPVsPAu' + variable, self.index)
    routine = self.maker.get('PlotRatios2D')
    routine.configure(dens, nums, canvas, self.zrange)
    routine.plot(ofile)


################################################################
class CorrectSpectra(BaseOutput):
  """Bin-by-bin corrected data, one triplet per jet pt bin."""

  colors = ((799, 797, 809), (899, 909, 907), (889, 879, 877))
  markers = ((22, 22, 26), (20, 24, 24), (23, 23, 32))

  #---------------------------------------------------------------
  # Returns the (data, recon, truth) input lists
  #---------------------------------------------------------------
  def _inputs(self, variable, nrebin=1, draw=''):
    tag = self.io.species_tag('Correct1D', self.index.species) + '_'
    levels = ([], [], [])
    for pt, color, marker in zip((InHists.PT5, InHists.PT10, InHists.PT15), self.colors, self.markers):
      for ilevel, level in enumerate((InFiles.DATA, InFiles.RECO, InFiles.TRUE)):
        index = self.index._replace(pt=pt, level=level)
        style = Style.Plot(color[ilevel], marker[ilevel])
        levels[ilevel].append(self.make_input(variable, index, tag, style, draw, nrebin))
    return levels

  #---------------------------------------------------------------
  def make_plot_1d(self, variable, opt, ofile, nrebin=1):
    data, recon, truth = self._inputs(variable, nrebin)
    canvas = self.io.canvas_name('cCorrect' + variable, self.index)
    routine = self.maker.get('CorrectSpectra1D')
    routine.configure(data, recon, truth, canvas, opt)
    routine.plot(ofile)

  #---------------------------------------------------------------
  def make_plot_2d(self, variable, ofile):
    data, recon, truth = self._inputs(variable, draw=DRAW_2D)
    canvas = self.io.canvas_name('cCorrect2D' + variable, self.index)
    routine = self.maker.get('CorrectSpectra2D')
    routine.configure(data, recon, truth, canvas, self.zrange)
    routine.plot(ofile)


################################################################
class SpinRatios(BaseOutput):
  """Ratios of opposite spin states for data, reco and truth."""

  spins = ((InHists.BD, InHists.YU), (InHists.BU, InHists.YD))
  spin_tags = ('BDDivYU', 'BUDivYD')
  colors = ((898, 899), (858, 859), (921, 923))
  markers = ((24, 20), (25, 21), (30, 29))

  #---------------------------------------------------------------
  def make_plot_1d(self, variable, opt, ofile, nrebin=1):
    tag = self.io.species_tag('SpinRatio', self.index.species) + '_'
    for (num_spin, den_spin), spin_tag in zip(self.spins, self.spin_tags):
      nums = []
      dens = []
      for level, color, marker in zip((InFiles.DATA, InFiles.RECO, InFiles.TRUE), self.colors, self.markers):
        inum = self.index._replace(level=level, spin=num_spin)
        iden = self.index._replace(level=level, spin=den_spin)
        nums.append(self.make_input(variable, inum, tag, Style.Plot(color[0], marker[0]), nrebin=nrebin))
        dens.append(self.make_input(variable, iden, tag, Style.Plot(color[1], marker[1]), nrebin=nrebin))
      canvas = self.io.canvas_name('cSpinRatio' + spin_tag + variable, self.index)
      routine = self.maker.get('PlotRatios1D')
      routine.configure(dens, nums, canvas, opt)
      routine.plot(ofile)


################################################################
class Output(object):
  """Figure sets by name."""

  figure_sets = {
    'SimVsData': SimVsData,
    'RecoVsData': RecoVsData,
    'VsPtJet': VsPtJet,
    'PPVsPAu': PPVsPAu,
    'CorrectSpectra': CorrectSpectra,
    'SpinRatios': SpinRatios,
  }

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, maker, io, zrange=None):
    self.outputs = {}
    for name, output_type in Output.figure_sets.items():
      self.outputs[name] = output_type(maker=maker, io=io, zrange=zrange)

  #---------------------------------------------------------------
  def update_index(self, index):
    for output in self.outputs.values():
      output.set_index(index)

  #---------------------------------------------------------------
  def get(self, name):
    if name not in self.outputs:
      raise UnknownOption('unknown figure set {} (use one of {})'.format(name, sorted(self.outputs.keys())), 'Output')
    return self.outputs[name]

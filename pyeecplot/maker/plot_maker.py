#!/usr/bin/env python3

"""
  PlotMaker: registry of named plot routines sharing one set of base
  styles and one text box.
"""

from pyeecplot.errors import UnknownOption
from pyeecplot.maker.correct_spectra_1d import CorrectSpectra1D
from pyeecplot.maker.correct_spectra_2d import CorrectSpectra2D
from pyeecplot.maker.plot_ratios_1d import PlotRatios1D
from pyeecplot.maker.plot_ratios_2d import PlotRatios2D
from pyeecplot.maker.plot_spectra_1d import PlotSpectra1D
from pyeecplot.maker.plot_spectra_2d import PlotSpectra2D
from pyeecplot.maker.plot_vs_baseline_1d import PlotVsBaseline1D
from pyeecplot.maker.plot_vs_baseline_2d import PlotVsBaseline2D
from pyeecplot.mputils import MPBase
from pyeecplot.plotting.style import Style
from pyeecplot.plotting.textbox import TextBox

DEFAULT_ROUTINES = [
  ('PlotSpectra1D', PlotSpectra1D),
  ('PlotSpectra2D', PlotSpectra2D),
  ('PlotVsBaseline1D', PlotVsBaseline1D),
  ('PlotVsBaseline2D', PlotVsBaseline2D),
  ('PlotRatios1D', PlotRatios1D),
  ('PlotRatios2D', PlotRatios2D),
  ('CorrectSpectra1D', CorrectSpectra1D),
  ('CorrectSpectra2D', CorrectSpectra2D),
]

################################################################
class PlotMaker(MPBase):

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, base_plot_style=None, base_text_style=None, text_box=None, **kwargs):
    super(PlotMaker, self).__init__(**kwargs)
    self.base_plot_style = base_plot_style if base_plot_style is not None else Style()
    self.base_text_style = base_text_style if base_text_style is not None else Style()
    self.text_box = text_box if text_box is not None else TextBox()
    self.routines = {}
    self.init()

  #---------------------------------------------------------------
  # Install the default routines with the shared styles
  #---------------------------------------------------------------
  def init(self):
    for name, routine_type in DEFAULT_ROUTINES:
      self.add_routine(name, routine_type(self.base_plot_style, self.base_text_style, self.text_box))

  #---------------------------------------------------------------
  # Insert or replace a routine
  #---------------------------------------------------------------
  def add_routine(self, name, routine):
    self.routines[name] = routine

  #---------------------------------------------------------------
  def get(self, name):
    if name not in self.routines:
      raise UnknownOption('no routine named {} (known: {})'.format(name, sorted(self.routines.keys())), 'PlotMaker')
    return self.routines[name]

  #---------------------------------------------------------------
  def __getitem__(self, name):
    return self.get(name)

  #---------------------------------------------------------------
  def __contains__(self, name):
    return name in self.routines

  #---------------------------------------------------------------
  def n_routines(self):
    return len(self.routines)

  #---------------------------------------------------------------
  # Setters propagate to every registered routine
  #---------------------------------------------------------------
  def set_base_plot_style(self, style):
    self.base_plot_style = style
    for routine in self.routines.values():
      routine.set_base_plot_style(style)

  #---------------------------------------------------------------
  def set_base_text_style(self, style):
    self.base_text_style = style
    for routine in self.routines.values():
      routine.set_base_text_style(style)

  #---------------------------------------------------------------
  def set_text_box(self, text_box):
    self.text_box = text_box
    for routine in self.routines.values():
      routine.set_text_box(text_box)

#!/usr/bin/env python3

"""
  Materialized annotation drawables (legends and text boxes), i.e. what
  Legend.make_legend() and TextBox.make_text() hand to a pad.
"""

################################################################
class Pave(object):
  """Box in pad NDC with fill, border and text attributes."""

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, vertices=(0.1, 0.1, 0.3, 0.3)):
    self.vertices = tuple(vertices)
    self.fill_color = 0
    self.fill_style = 0
    self.line_color = 0
    self.line_style = 0
    self.text_color = 1
    self.text_font = 42
    self.text_align = 12
    self.text_size = None

  #---------------------------------------------------------------
  def n_lines(self):
    return 0


################################################################
class LegendBox(Pave):

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, entries=None, header='', vertices=(0.3, 0.1, 0.5, 0.3)):
    super(LegendBox, self).__init__(vertices)
    self.entries = list(entries) if entries is not None else []
    self.header = header

  #---------------------------------------------------------------
  def n_lines(self):
    return len(self.entries) + (1 if self.header else 0)

  #---------------------------------------------------------------
  def labels(self):
    return [e.label for e in self.entries]


################################################################
class PaveText(Pave):

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, lines=None, vertices=(0.1, 0.1, 0.3, 0.3), opt='NDC NB'):
    super(PaveText, self).__init__(vertices)
    self.lines = list(lines) if lines is not None else []
    self.opt = opt

  #---------------------------------------------------------------
  def n_lines(self):
    return len(self.lines)

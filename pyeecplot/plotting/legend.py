#!/usr/bin/env python3

"""
  Legend definition: ordered (object, label, option) entries, an
  optional header and NDC vertices.
"""

from pyeecplot.plotting.primitives import LegendBox

################################################################
class Legend(object):

  ################################################################
  class Entry(object):
    def __init__(self, obj=None, label='', option='PF'):
      self.object = obj
      self.label = label
      self.option = option

    def __repr__(self):
      return 'Legend.Entry({}, {})'.format(self.label, self.option)

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, entries=None, vertices=(0.3, 0.1, 0.5, 0.3), header=''):
    self.entries = list(entries) if entries is not None else []
    self.vertices = tuple(vertices)
    self.header = header

  #---------------------------------------------------------------
  def add_entry(self, entry):
    self.entries.append(entry)

  #---------------------------------------------------------------
  def set_header(self, header):
    self.header = header

  #---------------------------------------------------------------
  def set_vertices(self, vertices):
    self.vertices = tuple(vertices)

  #---------------------------------------------------------------
  def n_lines(self):
    return len(self.entries) + (1 if self.header else 0)

  #---------------------------------------------------------------
  def make_legend(self):
    return LegendBox(self.entries, self.header, self.vertices)

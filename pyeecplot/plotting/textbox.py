#!/usr/bin/env python3

"""
  Text box definition: lines of text placed in pad NDC.
"""

from pyeecplot.plotting.primitives import PaveText

################################################################
class TextBox(object):

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, text=None, vertices=(0.1, 0.1, 0.3, 0.3), opt='NDC NB'):
    self.text = list(text) if text is not None else []
    self.vertices = tuple(vertices)
    self.opt = opt

  #---------------------------------------------------------------
  def add_text(self, line):
    self.text.append(line)

  #---------------------------------------------------------------
  def set_vertices(self, vertices):
    self.vertices = tuple(vertices)

  #---------------------------------------------------------------
  def make_text(self):
    return PaveText(self.text, self.vertices, self.opt)

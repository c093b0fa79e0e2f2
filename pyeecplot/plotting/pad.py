#!/usr/bin/env python3

"""
  Pad definition: a rectangular sub-surface of a canvas, placed with
  NDC vertices (x0, y0, x1, y1).
"""

import collections

from pyeecplot.plotting.pad_opts import PadOpts

# pad margins, as fractions of the pad
Margins = collections.namedtuple('Margins', ['left', 'right', 'bottom', 'top'])

DefaultMargins = Margins(left=0.1, right=0.1, bottom=0.1, top=0.1)


################################################################
class Pad(object):

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, name='', title='', vertices=(0., 0., 1., 1.), margins=None, opts=None):
    self.name = name
    self.title = title
    self.vertices = tuple(vertices)
    self.margins = Margins(*margins) if margins is not None else DefaultMargins
    self.opts = opts if opts is not None else PadOpts()
    if not (0. <= self.vertices[0] < self.vertices[2] <= 1. and 0. <= self.vertices[1] < self.vertices[3] <= 1.):
      raise ValueError('pad {} has vertices {} outside the unit square'.format(name, self.vertices))

  #---------------------------------------------------------------
  @property
  def width(self):
    return self.vertices[2] - self.vertices[0]

  #---------------------------------------------------------------
  @property
  def height(self):
    return self.vertices[3] - self.vertices[1]

  #---------------------------------------------------------------
  # Figure-fraction rectangle [left, bottom, width, height] of the
  # frame inside the margins
  #---------------------------------------------------------------
  def frame_rect(self):
    x0, y0, x1, y1 = self.vertices
    m = self.margins
    left = x0 + m.left * self.width
    bottom = y0 + m.bottom * self.height
    width = self.width * (1. - m.left - m.right)
    height = self.height * (1. - m.bottom - m.top)
    return [left, bottom, width, height]

  #---------------------------------------------------------------
  def __repr__(self):
    return 'Pad({}, vertices={})'.format(self.name, self.vertices)

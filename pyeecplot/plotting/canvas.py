#!/usr/bin/env python3

"""
  Canvas definition: the outer drawing surface and its ordered list of
  labelled pads.
"""

from pyeecplot.errors import MissingInput
from pyeecplot.plotting.pad import Pad, Margins, DefaultMargins
from pyeecplot.plotting.pad_opts import PadOpts

################################################################
class Canvas(object):

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, name='', title='', dimensions=(750, 750), opts=None, margins=None):
    self.name = name
    self.title = title
    self.dimensions = tuple(dimensions)
    self.opts = opts if opts is not None else PadOpts()
    self.margins = Margins(*margins) if margins is not None else DefaultMargins
    self.pads = []
    self.labels = []

  #---------------------------------------------------------------
  @property
  def width(self):
    return self.dimensions[0]

  #---------------------------------------------------------------
  @property
  def height(self):
    return self.dimensions[1]

  #---------------------------------------------------------------
  # Add a pad; the label defaults to its index
  #---------------------------------------------------------------
  def add_pad(self, pad, label=None):
    if label is None or label == '':
      label = str(len(self.pads))
    if label in self.labels:
      raise ValueError('canvas {} already has a pad labelled {}'.format(self.name, label))
    self.pads.append(pad)
    self.labels.append(label)

  #---------------------------------------------------------------
  def set_margins(self, margins):
    self.margins = Margins(*margins)

  #---------------------------------------------------------------
  def n_pads(self):
    return len(self.pads)

  #---------------------------------------------------------------
  # Pads are addressed by index or by label
  #---------------------------------------------------------------
  def get_pad_index(self, key):
    if isinstance(key, int):
      if key < 0 or key >= len(self.pads):
        raise MissingInput('canvas {} has no pad {} (n pads = {})'.format(self.name, key, len(self.pads)))
      return key
    if key not in self.labels:
      raise MissingInput('canvas {} has no pad labelled {} (labels = {})'.format(self.name, key, self.labels))
    return self.labels.index(key)

  #---------------------------------------------------------------
  def get_pad(self, key):
    return self.pads[self.get_pad_index(key)]

  #---------------------------------------------------------------
  # Pads to materialize: a canvas without declared pads is drawn
  # as a single pad with the canvas margins and options
  #---------------------------------------------------------------
  def layout(self):
    if self.pads:
      return list(zip(self.pads, self.labels))
    return [(Pad(name=self.name, title=self.title, margins=self.margins, opts=self.opts), '0')]

  #---------------------------------------------------------------
  def __repr__(self):
    return 'Canvas({}, dimensions={}, pads={})'.format(self.name, self.dimensions, self.labels)

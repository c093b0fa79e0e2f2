#!/usr/bin/env python3

"""
  Declarative per-object and per-routine plotting parameters.
"""

from pyeecplot.errors import UnknownOption
from pyeecplot.histutils.hist import Hist2D
from pyeecplot.plotting.canvas import Canvas
from pyeecplot.plotting.range import Range
from pyeecplot.plotting.shape import Shape
from pyeecplot.plotting.style import Style

################################################################
class Rebin(object):
  """Merge groups of num bins along an axis when rebin is set."""

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, rebin=False, num=2, axis=Range.X):
    self.rebin = rebin
    self.num = num
    self.axis = axis

  #---------------------------------------------------------------
  def apply(self, hist):
    if isinstance(hist, Hist2D):
      hist.rebin(self.num, Range.Y if self.axis == Range.Y else Range.X)
    else:
      hist.rebin(self.num)
    return hist


################################################################
class Projection(object):
  """Project a 2D histogram onto one axis over a range of the other."""

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, axis=Range.X, range=None, rename='', legend='', draw='', style=None):
    self.axis = axis
    self.range = tuple(range) if range is not None else (0., 1.)
    self.rename = rename
    self.legend = legend
    self.draw = draw
    self.style = style if style is not None else Style.Plot()

  #---------------------------------------------------------------
  def apply(self, hist):
    if not isinstance(hist, Hist2D):
      raise TypeError('can only project a 2D histogram, got {}'.format(type(hist).__name__))
    name = self.rename if self.rename else '{}_proj{}'.format(hist.name, 'xy'[self.axis])
    return hist.projection(self.axis, name, self.range[0], self.range[1])


################################################################
class PlotInput(object):

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, file='', object='', rename='', legend='', draw='', style=None, rebin=None, projection=None):
    self.file = file
    self.object = object
    self.rename = rename
    self.legend = legend
    self.draw = draw
    self.style = style if style is not None else Style.Plot()
    self.rebin = rebin if rebin is not None else Rebin()
    self.projection = projection

  #---------------------------------------------------------------
  def __repr__(self):
    return 'PlotInput({}:{} -> {})'.format(self.file, self.object, self.rename)


################################################################
class PlotShape(object):

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, shape=None, style=None, pad='', legend='', kind='line'):
    self.shape = shape if shape is not None else Shape()
    if isinstance(style, Style.Plot):
      style = Style(plot=style)
    self.style = style if style is not None else Style()
    self.pad = pad
    self.legend = legend
    self.kind = kind

  #---------------------------------------------------------------
  # Materialize the shape as a line, box or ellipse and style it
  #---------------------------------------------------------------
  def make(self):
    makers = {
      'line': self.shape.make_line,
      'box': self.shape.make_box,
      'ellipse': self.shape.make_ellipse,
    }
    if self.kind not in makers:
      raise UnknownOption('unknown shape kind {} (use one of {})'.format(self.kind, list(makers.keys())))
    artist = makers[self.kind]()
    self.style.apply(artist)
    return artist


################################################################
class PlotOpts(object):

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, header='', ratio_pad='', spectra_pad='', correct_pad='', canvas=None,
               plot_range=None, norm_range=None, norm_to=1.0, do_norm=True):
    self.header = header
    self.ratio_pad = ratio_pad
    self.spectra_pad = spectra_pad
    self.correct_pad = correct_pad
    self.canvas = canvas if canvas is not None else Canvas()
    self.plot_range = plot_range if plot_range is not None else Range()
    self.norm_range = norm_range if norm_range is not None else Range()
    self.norm_to = norm_to
    self.do_norm = do_norm

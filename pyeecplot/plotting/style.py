#!/usr/bin/env python3

"""
  Style model: plot, text, axis-label and axis-title attributes, and the
  rules to apply them to histograms, shapes, legends and text boxes.

  Attribute values are ROOT-style codes; see plotting.colors for how
  they are rendered.
"""

import copy
import matplotlib.artist
import matplotlib.lines
import matplotlib.patches

from pyeecplot.histutils.hist import Hist, Hist2D
from pyeecplot.plotting import colors
from pyeecplot.plotting.primitives import Pave
from pyeecplot.plotting.range import Range

################################################################
class Style(object):

  ################################################################
  class Plot(object):
    def __init__(self, color=1, marker=1, fill=0, line=1, width=1):
      self.color = color
      self.marker = marker
      self.fill = fill
      self.line = line
      self.width = width

    def __eq__(self, other):
      return isinstance(other, Style.Plot) and self.__dict__ == other.__dict__

    def __repr__(self):
      return 'Style.Plot({})'.format(self.__dict__)

  ################################################################
  class Text(object):
    def __init__(self, color=1, font=42, align=12, spacing=0.05):
      self.color = color
      self.font = font
      self.align = align
      self.spacing = spacing

    def __eq__(self, other):
      return isinstance(other, Style.Text) and self.__dict__ == other.__dict__

  ################################################################
  class Label(object):
    def __init__(self, color=1, font=42, size=0.04, offset=0.005):
      self.color = color
      self.font = font
      self.size = size
      self.offset = offset

    def __eq__(self, other):
      return isinstance(other, Style.Label) and self.__dict__ == other.__dict__

  ################################################################
  class Title(object):
    def __init__(self, color=1, center=0, font=42, size=0.04, offset=1.0):
      self.color = color
      self.center = center
      self.font = font
      self.size = size
      self.offset = offset

    def __eq__(self, other):
      return isinstance(other, Style.Title) and self.__dict__ == other.__dict__

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, plot=None, text=None, labels=None, titles=None):
    self.plot = plot if plot is not None else Style.Plot()
    self.text = text if text is not None else Style.Text()
    self.labels = [Style.Label(), Style.Label(), Style.Label()]
    self.titles = [Style.Title(), Style.Title(), Style.Title()]
    if labels is not None:
      self.set_label_styles(labels)
    if titles is not None:
      self.set_title_styles(titles)

  #---------------------------------------------------------------
  def set_plot_style(self, plot):
    self.plot = copy.copy(plot)

  #---------------------------------------------------------------
  def set_text_style(self, text):
    self.text = copy.copy(text)

  #---------------------------------------------------------------
  # Set label styles for all axes, from one style or a per-axis list
  #---------------------------------------------------------------
  def set_label_styles(self, labels):
    if isinstance(labels, Style.Label):
      labels = [labels, labels, labels]
    self.labels = [copy.copy(l) for l in labels]

  #---------------------------------------------------------------
  def set_label_style(self, axis, label):
    self.labels[axis] = copy.copy(label)

  #---------------------------------------------------------------
  def set_title_styles(self, titles):
    if isinstance(titles, Style.Title):
      titles = [titles, titles, titles]
    self.titles = [copy.copy(t) for t in titles]

  #---------------------------------------------------------------
  def set_title_style(self, axis, title):
    self.titles[axis] = copy.copy(title)

  #---------------------------------------------------------------
  def get_label_style(self, axis=Range.X):
    return self.labels[axis]

  #---------------------------------------------------------------
  def get_title_style(self, axis=Range.X):
    return self.titles[axis]

  #---------------------------------------------------------------
  def copy(self):
    return copy.deepcopy(self)

  #---------------------------------------------------------------
  # Apply style to a drawable
  #---------------------------------------------------------------
  def apply(self, obj):
    if isinstance(obj, Hist):
      self._apply_to_hist(obj)
    elif isinstance(obj, Pave):
      self._apply_to_pave(obj)
    elif isinstance(obj, matplotlib.artist.Artist):
      self._apply_to_artist(obj)
    else:
      raise TypeError('don\'t know how to apply a style to {}'.format(type(obj).__name__))

  #---------------------------------------------------------------
  def _apply_to_hist(self, hist):
    hist.fill_color = self.plot.color
    hist.fill_style = self.plot.fill
    hist.line_color = self.plot.color
    hist.line_style = self.plot.line
    hist.line_width = self.plot.width
    hist.marker_color = self.plot.color
    hist.marker_style = self.plot.marker
    hist.title_font = self.text.font

    # x, y and (for 2D) z axes
    naxes = 3 if isinstance(hist, Hist2D) else 2
    for iaxis in range(naxes):
      axis = hist.get_axis(iaxis)
      title = self.titles[iaxis]
      label = self.labels[iaxis]
      axis.center_title = bool(title.center)
      axis.title_color = title.color
      axis.title_font = title.font
      axis.title_size = title.size
      axis.title_offset = title.offset
      axis.label_color = label.color
      axis.label_font = label.font
      axis.label_size = label.size
      axis.label_offset = label.offset

  #---------------------------------------------------------------
  def _apply_to_pave(self, pave):
    pave.fill_color = self.plot.color
    pave.fill_style = self.plot.fill
    pave.line_color = self.plot.color
    pave.line_style = self.plot.line
    pave.text_color = self.text.color
    pave.text_font = self.text.font
    pave.text_align = self.text.align

  #---------------------------------------------------------------
  # Lines, boxes and ellipses made from shapes
  #---------------------------------------------------------------
  def _apply_to_artist(self, artist):
    rgb = colors.to_rgb(self.plot.color)
    if isinstance(artist, matplotlib.lines.Line2D):
      artist.set_color(rgb)
      artist.set_linestyle(colors.to_linestyle(self.plot.line))
      artist.set_linewidth(self.plot.width)
      marker, filled = colors.to_marker(self.plot.marker)
      if self.plot.marker > 1:
        artist.set_marker(marker)
        artist.set_markerfacecolor(rgb if filled else 'none')
    elif isinstance(artist, matplotlib.patches.Patch):
      filled, hatch, alpha = colors.to_fill(self.plot.fill)
      artist.set_edgecolor(rgb)
      artist.set_linestyle(colors.to_linestyle(self.plot.line))
      artist.set_linewidth(self.plot.width)
      # arcs are never filled
      if isinstance(artist, matplotlib.patches.Arc):
        return
      artist.set_fill(filled)
      if filled:
        artist.set_facecolor(rgb + (alpha,))
      artist.set_hatch(hatch)
    else:
      artist.set_color(rgb)

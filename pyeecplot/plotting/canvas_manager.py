#!/usr/bin/env python3

"""
  Canvas manager: materializes a Canvas definition into a matplotlib
  figure with one axes per pad, draws histograms, shapes, legends and
  text boxes onto the pads, and writes the result to an object store.
"""

import numpy as np
import matplotlib
# Prevent matplotlib from opening windows when plotting
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import matplotlib.artist
import matplotlib.lines
import matplotlib.patches
from matplotlib.colors import LogNorm, Normalize

from pyeecplot.errors import MissingInput
from pyeecplot.histutils.fileutils import CanvasRecord, PadRecord
from pyeecplot.histutils.hist import Hist, Hist2D
from pyeecplot.mputils import pwarning
from pyeecplot.plotting import colors
from pyeecplot.plotting.primitives import LegendBox, PaveText

DPI = 100
PT_PER_PX = 72. / DPI

################################################################
class PadHandle(object):
  """A materialized pad: its matplotlib axes and what was drawn on it."""

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, pad, label, canvas):
    self.pad = pad
    self.label = label
    self.figure = None
    self.ax = None
    self.width_px = pad.width * canvas.width
    self.height_px = pad.height * canvas.height
    self.primitives = []
    self.options = []
    self.legend_entries = []
    self.text_lines = []
    self._framed = False

  #---------------------------------------------------------------
  # Create the axes inside the pad margins
  #---------------------------------------------------------------
  def materialize(self, figure):
    self.figure = figure
    self.ax = figure.add_axes(self.pad.frame_rect(), label=self.label)
    self.pad.opts.apply(self.ax)

  #---------------------------------------------------------------
  # Text sizes are fractions of the smaller pad dimension unless
  # a pixel font is used
  #---------------------------------------------------------------
  def to_points(self, size, font=42):
    if colors.is_pixel_font(font):
      return size * PT_PER_PX
    return size * min(self.width_px, self.height_px) * PT_PER_PX

  #---------------------------------------------------------------
  # Pad NDC to figure fraction
  #---------------------------------------------------------------
  def to_figure(self, u, v):
    x0, y0, x1, y1 = self.pad.vertices
    return (x0 + u * (x1 - x0), y0 + v * (y1 - y0))

  #---------------------------------------------------------------
  def draw(self, obj, option=''):
    if self.ax is None:
      raise RuntimeError('pad {} drawn before the canvas was drawn'.format(self.pad.name))
    if isinstance(obj, Hist2D):
      self._draw_hist_2d(obj, option)
      name = obj.name
    elif isinstance(obj, Hist):
      self._draw_hist_1d(obj, option)
      name = obj.name
    elif isinstance(obj, LegendBox):
      self._draw_legend(obj)
      name = 'Legend'
    elif isinstance(obj, PaveText):
      self._draw_text(obj)
      name = 'PaveText'
    elif isinstance(obj, matplotlib.artist.Artist):
      self._draw_artist(obj)
      name = type(obj).__name__
    else:
      raise TypeError('don\'t know how to draw {}'.format(type(obj).__name__))
    self.primitives.append(name)
    self.options.append(option)

  #---------------------------------------------------------------
  def record(self):
    return PadRecord(
      name=self.pad.name,
      label=self.label,
      vertices=self.pad.vertices,
      margins=tuple(self.pad.margins),
      primitives=self.primitives,
      options=self.options,
      legend_entries=self.legend_entries,
      text_lines=self.text_lines
    )

  #---------------------------------------------------------------
  # Axis titles, labels and user ranges come from the first
  # histogram drawn on the pad
  #---------------------------------------------------------------
  def _frame(self, hist):
    if self._framed:
      return
    self._framed = True
    pad_px = min(self.width_px, self.height_px)
    for tag, axis in (('x', hist.xaxis), ('y', hist.yaxis)):
      font = colors.to_font(axis.title_font)
      size = self.to_points(axis.title_size, axis.title_font)
      loc = 'center'
      if not axis.center_title:
        loc = 'right' if tag == 'x' else 'top'
      setter = self.ax.set_xlabel if tag == 'x' else self.ax.set_ylabel
      setter(axis.title, fontsize=size, color=colors.to_rgb(axis.title_color),
             labelpad=axis.title_offset * 0.025 * pad_px * PT_PER_PX, loc=loc, **font)
      self.ax.tick_params(axis=tag, which='both',
                          labelsize=self.to_points(axis.label_size, axis.label_font),
                          labelcolor=colors.to_rgb(axis.label_color),
                          pad=axis.label_offset * pad_px * PT_PER_PX)
    if hist.title and hist.ndim == 2:
      self.ax.set_title(hist.title, fontsize=self.to_points(0.05), **colors.to_font(hist.title_font))
    self._apply_user_range(hist)

  #---------------------------------------------------------------
  def _apply_user_range(self, hist):
    opts = self.pad.opts
    for axis, log, setter in ((hist.xaxis, opts.logx, self.ax.set_xlim), (hist.yaxis, opts.logy, self.ax.set_ylim)):
      if axis.user_range is None:
        continue
      lo, hi = axis.user_range
      if log and lo <= 0.:
        lo = None
      setter(lo, hi)

  #---------------------------------------------------------------
  def _draw_hist_1d(self, hist, option):
    opt = option.lower().replace('same', '')
    line_rgb = colors.to_rgb(hist.line_color)
    if 'hist' in opt:
      filled, hatch, alpha = colors.to_fill(hist.fill_style)
      fill_rgb = colors.to_rgb(hist.fill_color) + (alpha,)
      self.ax.stairs(hist.values, hist.xaxis.edges,
                     fill=filled,
                     facecolor=fill_rgb,
                     edgecolor=line_rgb,
                     hatch=hatch,
                     linestyle=colors.to_linestyle(hist.line_style),
                     linewidth=hist.line_width)
    else:
      marker_rgb = colors.to_rgb(hist.marker_color)
      marker, filled = colors.to_marker(hist.marker_style)
      self.ax.errorbar(hist.xaxis.centers, hist.values,
                       yerr=hist.errors,
                       marker=marker,
                       markersize=6. * hist.marker_size,
                       color=marker_rgb,
                       markerfacecolor=marker_rgb if filled else 'none',
                       ecolor=line_rgb,
                       elinewidth=hist.line_width,
                       linestyle=colors.to_linestyle(hist.line_style) if 'l' in opt else 'none')
    self._frame(hist)

  #---------------------------------------------------------------
  def _draw_hist_2d(self, hist, option):
    opt = option.lower().replace('same', '')
    zrange = hist.zaxis.user_range
    positive = hist.values[hist.values > 0.]
    if self.pad.opts.logz and positive.size > 0:
      values = np.ma.masked_where(hist.values <= 0., hist.values)
      vmin = zrange[0] if zrange is not None and zrange[0] > 0. else positive.min()
      vmax = zrange[1] if zrange is not None else positive.max()
      norm = LogNorm(vmin=vmin, vmax=max(vmax, vmin))
    else:
      if self.pad.opts.logz:
        pwarning('{} has no positive bins, drawing with a linear z scale'.format(hist.name))
      values = hist.values
      norm = Normalize(vmin=zrange[0], vmax=zrange[1]) if zrange is not None else None
    mesh = self.ax.pcolormesh(hist.xaxis.edges, hist.yaxis.edges, values.T, norm=norm, cmap='viridis')
    if 'z' in opt:
      cbar = self.figure.colorbar(mesh, ax=self.ax)
      zaxis = hist.zaxis
      cbar.set_label(zaxis.title, fontsize=self.to_points(zaxis.title_size, zaxis.title_font), **colors.to_font(zaxis.title_font))
      cbar.ax.tick_params(labelsize=self.to_points(zaxis.label_size, zaxis.label_font))
    self._frame(hist)

  #---------------------------------------------------------------
  # Legend handles are proxies built from the drawn attributes
  #---------------------------------------------------------------
  def _legend_handle(self, entry):
    obj = entry.object
    opt = entry.option.upper()
    if isinstance(obj, matplotlib.artist.Artist):
      return obj
    line_rgb = colors.to_rgb(obj.line_color)
    if 'P' in opt:
      marker_rgb = colors.to_rgb(obj.marker_color)
      marker, filled = colors.to_marker(obj.marker_style)
      return matplotlib.lines.Line2D([], [], color=marker_rgb, marker=marker,
                                     markerfacecolor=marker_rgb if filled else 'none',
                                     linestyle=colors.to_linestyle(obj.line_style) if 'L' in opt else 'none')
    if 'F' in opt:
      filled, hatch, alpha = colors.to_fill(obj.fill_style)
      return matplotlib.patches.Patch(facecolor=colors.to_rgb(obj.fill_color) + (alpha,), edgecolor=line_rgb,
                                      fill=filled, hatch=hatch)
    return matplotlib.lines.Line2D([], [], color=line_rgb, linestyle=colors.to_linestyle(obj.line_style),
                                   linewidth=obj.line_width)

  #---------------------------------------------------------------
  def _pave_geometry(self, pave):
    u0, v0, u1, v1 = pave.vertices
    fx0, fy0 = self.to_figure(u0, v0)
    fx1, fy1 = self.to_figure(u1, v1)
    nlines = max(pave.n_lines(), 1)
    if pave.text_size is not None:
      size = self.to_points(pave.text_size, pave.text_font)
    else:
      size = 0.6 * (v1 - v0) * self.height_px / nlines * PT_PER_PX
    return (fx0, fy0, fx1, fy1), size

  #---------------------------------------------------------------
  def _draw_legend(self, legend):
    (fx0, fy0, fx1, fy1), size = self._pave_geometry(legend)
    font = colors.to_font(legend.text_font)
    handles = [self._legend_handle(e) for e in legend.entries]
    drawn = self.ax.legend(handles, legend.labels(),
                           loc='upper left',
                           bbox_to_anchor=(fx0, fy0, fx1 - fx0, fy1 - fy0),
                           bbox_transform=self.figure.transFigure,
                           mode='expand',
                           borderaxespad=0.,
                           title=legend.header if legend.header else None,
                           prop={'size': size, 'family': font['family'], 'weight': font['weight'], 'style': font['style']},
                           labelcolor=colors.to_rgb(legend.text_color),
                           frameon=legend.line_style > 0 or legend.fill_style > 0)
    filled, hatch, alpha = colors.to_fill(legend.fill_style)
    frame = drawn.get_frame()
    frame.set_facecolor(colors.to_rgb(legend.fill_color) + (alpha,) if filled else 'none')
    frame.set_edgecolor(colors.to_rgb(legend.line_color))
    self.legend_entries = legend.labels()

  #---------------------------------------------------------------
  def _draw_text(self, text):
    (fx0, fy0, fx1, fy1), size = self._pave_geometry(text)
    ha, va = colors.to_alignment(text.text_align)
    x = {'left': fx0, 'center': 0.5 * (fx0 + fx1), 'right': fx1}[ha]
    step = (fy1 - fy0) / max(len(text.lines), 1)
    for iline, line in enumerate(text.lines):
      y = fy1 - (iline + 0.5) * step
      self.figure.text(x, y, line, ha=ha, va='center', fontsize=size,
                       color=colors.to_rgb(text.text_color), **colors.to_font(text.text_font))
    self.text_lines = self.text_lines + list(text.lines)

  #---------------------------------------------------------------
  def _draw_artist(self, artist):
    if isinstance(artist, matplotlib.lines.Line2D):
      self.ax.add_line(artist)
    else:
      self.ax.add_patch(artist)


################################################################
class CanvasManager(object):

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, canvas):
    self.canvas = canvas
    self.figure = None
    self.pads = []
    self.label_to_index = {}

  #---------------------------------------------------------------
  # Create the figure and the pad handles
  #---------------------------------------------------------------
  def make_plot(self):
    self.figure = plt.figure(figsize=(self.canvas.width / DPI, self.canvas.height / DPI), dpi=DPI)
    self.figure.set_label(self.canvas.name)
    self.pads = []
    self.label_to_index = {}
    for ipad, (pad, label) in enumerate(self.canvas.layout()):
      self.pads.append(PadHandle(pad, label, self.canvas))
      self.label_to_index[label] = ipad

  #---------------------------------------------------------------
  # Draw the pads onto the canvas
  #---------------------------------------------------------------
  def draw(self):
    for handle in self.pads:
      handle.materialize(self.figure)

  #---------------------------------------------------------------
  def get_pad_index(self, key):
    if isinstance(key, int):
      if key < 0 or key >= len(self.pads):
        raise MissingInput('canvas {} has no pad {} (n pads = {})'.format(self.canvas.name, key, len(self.pads)))
      return key
    if key not in self.label_to_index:
      raise MissingInput('canvas {} has no pad labelled {} (labels = {})'.format(
        self.canvas.name, key, list(self.label_to_index.keys())))
    return self.label_to_index[key]

  #---------------------------------------------------------------
  def get_pad(self, key):
    return self.pads[self.get_pad_index(key)]

  #---------------------------------------------------------------
  def n_pads(self):
    return len(self.pads)

  #---------------------------------------------------------------
  # Factor to bring text on pad dst to the visual weight of text
  # on pad src: the height ratio, optionally times the width ratio
  #---------------------------------------------------------------
  def get_text_scale(self, src, dst, use_width=False):
    psrc = self.get_pad(src).pad
    pdst = self.get_pad(dst).pad
    scale = psrc.height / pdst.height
    if use_width:
      scale = scale * (psrc.width / pdst.width)
    return scale

  #---------------------------------------------------------------
  # Scale sizes and offsets of a histogram axis drawn on pad dst
  # relative to pad src; invert undoes a previous scaling
  #---------------------------------------------------------------
  def scale_axis_text(self, src, dst, hist_axis, invert=False, use_width=False):
    scale = self.get_text_scale(src, dst, use_width)
    if invert:
      scale = 1. / scale
    hist_axis.title_size = hist_axis.title_size * scale
    hist_axis.title_offset = hist_axis.title_offset * scale
    hist_axis.label_size = hist_axis.label_size * scale
    hist_axis.label_offset = hist_axis.label_offset * scale

  #---------------------------------------------------------------
  def write(self, ofile):
    record = CanvasRecord(
      name=self.canvas.name,
      title=self.canvas.title,
      width=self.canvas.width,
      height=self.canvas.height,
      pads=[handle.record() for handle in self.pads]
    )
    ofile.write_canvas(record, self.figure)

  #---------------------------------------------------------------
  def close(self):
    if self.figure is not None:
      plt.close(self.figure)
      self.figure = None

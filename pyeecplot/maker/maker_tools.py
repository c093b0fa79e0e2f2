#!/usr/bin/env python3

"""
  Canvas layouts used by the plot routines: ratio (two pads),
  correction (three pads) and N x M grids.
"""

import copy
import math

from pyeecplot.mputils import pwarning
from pyeecplot.plotting.canvas import Canvas
from pyeecplot.plotting.pad import Pad, Margins
from pyeecplot.plotting.pad_opts import PadOpts

################################################################
class RangeOpt(object):
  """Axis range selector: side-length or angular observables."""

  SIDE = 0
  ANGLE = 1

  #---------------------------------------------------------------
  # Selector from a config string, e.g. 'side' or 'Angle'
  #---------------------------------------------------------------
  @staticmethod
  def from_name(name):
    options = {'side': RangeOpt.SIDE, 'angle': RangeOpt.ANGLE}
    if str(name).lower() not in options:
      pwarning('unknown range option {}'.format(name))
      return None
    return options[str(name).lower()]

#---------------------------------------------------------------
# Rows needed to hold nhist cells in ncol columns
#---------------------------------------------------------------
def get_row_number(nhist, ncol):
  if nhist <= 0 or ncol <= 0:
    raise ValueError('need at least one cell and one column (cells = {}, columns = {})'.format(nhist, ncol))
  return int(math.ceil(nhist / float(ncol)))

#---------------------------------------------------------------
# Two pads: ratio below, spectra above
#---------------------------------------------------------------
def make_ratio_canvas(name, spectra_pad='pSpectra', ratio_pad='pRatio', height=0.35,
                      dimensions=(750, 1125), spectra_opts=None, ratio_opts=None):
  canvas = Canvas(name, '', dimensions)
  canvas.add_pad(
    Pad(ratio_pad, '', (0., 0., 1., height),
        Margins(left=0.15, right=0.02, bottom=0.25, top=0.005),
        ratio_opts if ratio_opts is not None else PadOpts()),
    'ratio'
  )
  canvas.add_pad(
    Pad(spectra_pad, '', (0., height, 1., 1.),
        Margins(left=0.15, right=0.02, bottom=0.005, top=0.02),
        spectra_opts if spectra_opts is not None else PadOpts()),
    'spectra'
  )
  return canvas

#---------------------------------------------------------------
# Three pads: correction factors at the bottom, corrected over
# truth in the middle, spectra on top
#---------------------------------------------------------------
def make_correction_canvas(name, correct_pad='pCorrect', ratio_pad='pRatio', spectra_pad='pSpectra',
                           heights=(0.25, 0.50), dimensions=(750, 1500),
                           correct_opts=None, ratio_opts=None, spectra_opts=None):
  lo, mid = heights
  canvas = Canvas(name, '', dimensions)
  canvas.add_pad(
    Pad(correct_pad, '', (0., 0., 1., lo),
        Margins(left=0.15, right=0.02, bottom=0.25, top=0.005),
        correct_opts if correct_opts is not None else PadOpts()),
    'correct'
  )
  canvas.add_pad(
    Pad(ratio_pad, '', (0., lo, 1., mid),
        Margins(left=0.15, right=0.02, bottom=0.005, top=0.005),
        ratio_opts if ratio_opts is not None else PadOpts()),
    'ratio'
  )
  canvas.add_pad(
    Pad(spectra_pad, '', (0., mid, 1., 1.),
        Margins(left=0.15, right=0.02, bottom=0.005, top=0.02),
        spectra_opts if spectra_opts is not None else PadOpts()),
    'spectra'
  )
  return canvas

#---------------------------------------------------------------
# Grid of pads filled row-major from the top left; every cell
# of the last row gets a pad so that the grid tiles the canvas
#---------------------------------------------------------------
def make_grid_canvas(name, pad_name, npad, ncolumn, margins=None, opts=None, dim=375):
  nrow = get_row_number(npad, ncolumn)
  canvas = Canvas(name, '', (ncolumn * dim, nrow * dim))
  if margins is None:
    margins = Margins(left=0.15, right=0.15, bottom=0.15, top=0.15)
  for icell in range(nrow * ncolumn):
    irow = icell // ncolumn
    icol = icell % ncolumn
    vertices = (
      icol / float(ncolumn),
      (nrow - 1 - irow) / float(nrow),
      (icol + 1) / float(ncolumn),
      (nrow - irow) / float(nrow)
    )
    canvas.add_pad(
      Pad('{}{}'.format(pad_name, icell), '', vertices, margins,
          copy.copy(opts) if opts is not None else PadOpts())
    )
  return canvas

#!/usr/bin/env python3

"""
  Default canvas sizes, plot/normalization ranges and the unit-ratio
  line for the plot routines.
"""

from pyeecplot.maker.maker_tools import RangeOpt
from pyeecplot.mputils import pwarning
from pyeecplot.plotting.elements import PlotShape
from pyeecplot.plotting.range import Range
from pyeecplot.plotting.shape import Shape
from pyeecplot.plotting.style import Style

# canvas dimensions
SMALL = 750
MEDIUM = 1150
BIG = 1500

# z ranges of 2D spectra: 'wide' for raw spectra, 'narrow'
# for spectra normalized to unity
Z_RANGES = {
  'wide': (0.00003, 33.),
  'narrow': (0.00003, 0.7),
}

#---------------------------------------------------------------
def unity_style():
  return Style.Plot(923, 1, 0, 9, 2)

#---------------------------------------------------------------
# Plot range for a range selector; an unknown selector falls
# back to the default Range
#---------------------------------------------------------------
def plot_range(opt=RangeOpt.SIDE, zrange=None):
  if zrange is None:
    zrange = Z_RANGES['wide']
  if opt == RangeOpt.SIDE:
    return Range((0.003, 3.), (0.00003, 0.7), zrange)
  if opt == RangeOpt.ANGLE:
    return Range((0.0, 6.30), (-0.007, 0.07), zrange)
  pwarning('unknown range option {}, using default range'.format(opt))
  return Range()

#---------------------------------------------------------------
def norm_range(opt=RangeOpt.SIDE):
  return Range(plot_range(opt).x)

#---------------------------------------------------------------
# Range for 2D spectra: side-length on x, angle on y
#---------------------------------------------------------------
def plot_range_2d(zrange=None):
  return Range(
    plot_range(RangeOpt.SIDE).x,
    plot_range(RangeOpt.ANGLE).x,
    plot_range(RangeOpt.SIDE, zrange).z
  )

#---------------------------------------------------------------
def unity(opt=RangeOpt.SIDE):
  return PlotShape(Shape(plot_range(opt).x, (1., 1.)), unity_style())

#!/usr/bin/env python3

"""
  Numerical and I/O helpers shared by the plot routines.
"""

from pyeecplot.errors import BinMismatch, ZeroIntegral
from pyeecplot.histutils import fileutils
from pyeecplot.histutils.hist import Hist2D
from pyeecplot.mputils import pwarning

#---------------------------------------------------------------
# Open an object store; mode is one of read, create, append
# or overwrite
#---------------------------------------------------------------
def open_file(path, mode='read', **kwargs):
  if mode == 'read':
    return fileutils.open_read(path)
  return fileutils.open_write(path, mode, **kwargs)

#---------------------------------------------------------------
def grab_object(key, handle):
  return fileutils.get_object(handle, key)

#---------------------------------------------------------------
def close_files(files):
  fileutils.close_files(files)

#---------------------------------------------------------------
# Height of a legend or text box with nlines lines
#---------------------------------------------------------------
def get_height(nlines, spacing, off=0.):
  return nlines * spacing + off

#---------------------------------------------------------------
# Scale a histogram so that its integral over the given range
# equals norm_to; a 2D histogram is normalized over x and y
#---------------------------------------------------------------
def normalize_by_integral(hist, norm_to, xlo, xhi, ylo=None, yhi=None):
  if isinstance(hist, Hist2D):
    integral = hist.integral(xlo, xhi, ylo, yhi)
  else:
    integral = hist.integral(xlo, xhi)
  if integral == 0.:
    raise ZeroIntegral('integral of {} over x = ({}, {}){} is zero, cannot normalize to {}'.format(
      hist.name, xlo, xhi,
      ', y = ({}, {})'.format(ylo, yhi) if isinstance(hist, Hist2D) else '',
      norm_to))
  hist.scale(norm_to / integral)
  return hist

#---------------------------------------------------------------
# Bin-by-bin division; empty denominator bins give zero and
# errors are propagated as uncorrelated
#---------------------------------------------------------------
def divide_hist(num, den, name=None):
  if num.ndim != den.ndim:
    raise BinMismatch('cannot divide {} ({}D) by {} ({}D)'.format(num.name, num.ndim, den.name, den.ndim))
  return num.divide(den, name)

#---------------------------------------------------------------
# Intersection of a requested interval with the extent of a
# binned axis, snapped out to the edges of the bins it touches
#---------------------------------------------------------------
def get_draw_range(interval, axis):
  lo = max(min(interval), axis.xmin)
  hi = min(max(interval), axis.xmax)
  if lo > hi:
    pwarning('interval {} does not overlap axis ({}, {}), drawing over the full axis'.format(interval, axis.xmin, axis.xmax))
    return (axis.xmin, axis.xmax)
  ilo = axis.find_bin(lo)
  ihi = axis.find_bin(hi)
  if ihi > ilo and axis.bin_low_edge(ihi) == hi:
    ihi = ihi - 1
  return (axis.bin_low_edge(ilo), axis.bin_up_edge(ihi))

#!/usr/bin/env python3

"""
  Plotting ranges: up to three (lo, hi) intervals, one per axis.
"""

################################################################
class Range(object):

  X = 0
  Y = 1
  Z = 2

  #---------------------------------------------------------------
  # Constructor; a missing axis defaults to the unit interval
  #---------------------------------------------------------------
  def __init__(self, x=None, y=None, z=None):
    self.x = tuple(x) if x is not None else (0., 1.)
    self.y = tuple(y) if y is not None else (0., 1.)
    self.z = tuple(z) if z is not None else (0., 1.)

  #---------------------------------------------------------------
  def get(self, axis):
    return [self.x, self.y, self.z][axis]

  #---------------------------------------------------------------
  def set(self, axis, interval):
    if axis == Range.X:
      self.x = tuple(interval)
    elif axis == Range.Y:
      self.y = tuple(interval)
    else:
      self.z = tuple(interval)

  #---------------------------------------------------------------
  # Set the user range of a histogram axis to the interval of
  # the given axis of this range
  #---------------------------------------------------------------
  def apply(self, axis, hist_axis):
    lo, hi = self.get(axis)
    hist_axis.set_range_user(lo, hi)

  #---------------------------------------------------------------
  def __eq__(self, other):
    return isinstance(other, Range) and (self.x, self.y, self.z) == (other.x, other.y, other.z)

  #---------------------------------------------------------------
  def __repr__(self):
    return 'Range(x={}, y={}, z={})'.format(self.x, self.y, self.z)

#!/usr/bin/env python3

"""
  Parametric 2D shapes (lines, boxes, ellipses) drawn in user
  coordinates on a pad.
"""

import math
import matplotlib.lines
import matplotlib.patches

################################################################
class Shape(object):

  #---------------------------------------------------------------
  # Constructor: line or box spanning xrange and yrange
  #---------------------------------------------------------------
  def __init__(self, xrange=(0., 1.), yrange=(0., 1.), phirange=(0., 360.)):
    self.phirange = tuple(phirange)
    self.theta = 0.
    self.set_ranges(xrange, yrange)

  #---------------------------------------------------------------
  # Alternate constructor: ellipse with center, radii (r1, r2),
  # angular span in degrees and rotation theta in degrees
  #---------------------------------------------------------------
  @classmethod
  def ellipse(cls, center, radii, phirange=(0., 360.), theta=0.):
    shape = cls(phirange=phirange)
    shape.center = tuple(center)
    shape.radii = tuple(radii)
    shape.theta = theta

    # bounding box of the rotated ellipse
    t = math.radians(theta)
    dx = math.hypot(radii[0] * math.cos(t), radii[1] * math.sin(t))
    dy = math.hypot(radii[0] * math.sin(t), radii[1] * math.cos(t))
    shape.xrange = (center[0] - dx, center[0] + dx)
    shape.yrange = (center[1] - dy, center[1] + dy)
    return shape

  #---------------------------------------------------------------
  def set_ranges(self, xrange, yrange):
    self.xrange = tuple(xrange)
    self.yrange = tuple(yrange)
    self.center = (0.5 * (xrange[0] + xrange[1]), 0.5 * (yrange[0] + yrange[1]))
    self.radii = (0.5 * abs(xrange[1] - xrange[0]), 0.5 * abs(yrange[1] - yrange[0]))

  #---------------------------------------------------------------
  def set_xrange(self, xrange):
    self.set_ranges(xrange, self.yrange)

  #---------------------------------------------------------------
  def set_yrange(self, yrange):
    self.set_ranges(self.xrange, yrange)

  #---------------------------------------------------------------
  def make_line(self):
    return matplotlib.lines.Line2D([self.xrange[0], self.xrange[1]], [self.yrange[0], self.yrange[1]])

  #---------------------------------------------------------------
  def make_box(self):
    return matplotlib.patches.Rectangle(
      (min(self.xrange), min(self.yrange)),
      abs(self.xrange[1] - self.xrange[0]),
      abs(self.yrange[1] - self.yrange[0])
    )

  #---------------------------------------------------------------
  # Full ellipses can be filled, partial ones are drawn as arcs
  #---------------------------------------------------------------
  def make_ellipse(self):
    width = 2. * self.radii[0]
    height = 2. * self.radii[1]
    if tuple(self.phirange) == (0., 360.):
      return matplotlib.patches.Ellipse(self.center, width, height, angle=self.theta)
    return matplotlib.patches.Arc(
      self.center, width, height,
      angle=self.theta,
      theta1=self.phirange[0],
      theta2=self.phirange[1]
    )

  #---------------------------------------------------------------
  def __repr__(self):
    return 'Shape(x={}, y={}, phi={})'.format(self.xrange, self.yrange, self.phirange)

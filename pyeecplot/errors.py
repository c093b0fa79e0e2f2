#!/usr/bin/env python3

"""
  Error kinds raised by the plot routines and the indexing layer.

  Every kind is fatal to the routine that raises it: the routine reports
  a PANIC diagnostic and aborts, and the driver may move on to the next
  figure.
"""

################################################################
class PlotterError(Exception):

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, message='', routine=None):
    super(PlotterError, self).__init__(message)
    self.message = message
    self.routine = routine

  #---------------------------------------------------------------
  def __str__(self):
    if self.routine:
      return '{}: {}'.format(self.routine, self.message)
    return self.message


################################################################
class MissingInput(PlotterError):
  """File or object not found in an object store."""
  pass

################################################################
class SizeMismatch(PlotterError):
  """Paired input lists of unequal length."""
  pass

################################################################
class InsufficientLayout(PlotterError):
  """More drawables than declared pads."""
  pass

################################################################
class BinMismatch(PlotterError):
  """Division between incompatibly binned histograms."""
  pass

################################################################
class ZeroIntegral(PlotterError):
  """Normalization denominator is zero."""
  pass

################################################################
class UnknownOption(PlotterError):
  """Selector, index or name outside the known catalog."""
  pass

#!/usr/bin/env python3

"""
  Pad options: log scales, ticks on the opposite sides and grids.
"""

################################################################
class PadOpts(object):

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, logx=0, logy=0, logz=0, tickx=1, ticky=1, gridx=0, gridy=0):
    self.logx = logx
    self.logy = logy
    self.logz = logz
    self.tickx = tickx
    self.ticky = ticky
    self.gridx = gridx
    self.gridy = gridy

  #---------------------------------------------------------------
  # Apply log scales, ticks and grids to a matplotlib axes;
  # the z scale is applied when a 2D histogram is drawn
  #---------------------------------------------------------------
  def apply(self, ax):
    if self.logx:
      ax.set_xscale('log')
    if self.logy:
      ax.set_yscale('log')
    ax.tick_params(axis='both', which='both', direction='in', top=bool(self.tickx), right=bool(self.ticky))
    if self.gridx:
      ax.grid(True, axis='x', linestyle=':')
    if self.gridy:
      ax.grid(True, axis='y', linestyle=':')

  #---------------------------------------------------------------
  def __eq__(self, other):
    return isinstance(other, PadOpts) and self.__dict__ == other.__dict__

  #---------------------------------------------------------------
  def __repr__(self):
    return 'PadOpts({})'.format(', '.join(['{}={}'.format(k, v) for k, v in self.__dict__.items()]))

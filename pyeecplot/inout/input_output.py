#!/usr/bin/env python3

"""
  Composition of object keys, legends, canvas names and file
  selections from an analysis index.

  A PlotIndex field of -1 is a wildcard. Wildcards are allowed when
  composing canvas names (the field is left out) and in the species /
  level fields of a legend, and rejected everywhere a concrete index
  is needed.
"""

from collections import namedtuple

from pyeecplot.errors import UnknownOption
from pyeecplot.inout.catalog import InFiles, InHists

WILDCARD = -1

PlotIndex = namedtuple('PlotIndex', ['species', 'level', 'pt', 'charge', 'spin'],
                       defaults=(WILDCARD, WILDCARD, WILDCARD, WILDCARD, WILDCARD))

################################################################
class InputOutput(object):

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, files=None, hists=None):
    self.files = files if files is not None else InFiles()
    self.hists = hists if hists is not None else InHists()

  #---------------------------------------------------------------
  # Concrete index along one field; wildcards and values outside
  # the catalog are rejected
  #---------------------------------------------------------------
  def _check(self, field, value, size):
    if value < 0 or value >= size:
      raise UnknownOption('{} index {} is outside the catalog (0 - {})'.format(field, value, size - 1), 'InputOutput')
    return value

  #---------------------------------------------------------------
  def species_tag(self, base, species):
    return base + self.files.get_species_tag(self._check('species', species, self.files.n_species()))

  #---------------------------------------------------------------
  # Key of an input histogram, e.g. hDataJetEECStat_pt1cf0ch0spBUYU;
  # prefix goes right after the leading h
  #---------------------------------------------------------------
  def hist_key(self, variable, index, prefix=''):
    level = self._check('level', index.level, self.files.n_levels())
    pt = self._check('pt', index.pt, self.hists.n_pt())
    charge = self._check('charge', index.charge, self.hists.n_charge())
    spin = self._check('spin', index.spin, self.hists.n_spin())
    base = 'h' + prefix + self.files.get_level_tag(level) + variable + 'Stat_'
    tags = self.hists.get_pt_tag(pt) + 'cf0' + self.hists.get_charge_tag(charge) + self.hists.get_spin_tag(spin)
    return base + tags

  #---------------------------------------------------------------
  def legend(self, index):
    legend = ''
    if index.species != WILDCARD:
      legend += self.files.get_species_legend(self._check('species', index.species, self.files.n_species())) + ' '
    if index.level != WILDCARD:
      legend += self.files.get_level_legend(self._check('level', index.level, self.files.n_levels())) + ' '
    pt = self._check('pt', index.pt, self.hists.n_pt())
    charge = self._check('charge', index.charge, self.hists.n_charge())
    spin = self._check('spin', index.spin, self.hists.n_spin())
    legend += '{}, {}, {}'.format(
      self.hists.get_spin_legend(spin),
      self.hists.get_pt_legend(pt),
      self.hists.get_charge_legend(charge)
    )
    return legend

  #---------------------------------------------------------------
  def canvas_name(self, base, index):
    name = base
    if index.species != WILDCARD:
      name += '_' + self.files.get_species_tag(self._check('species', index.species, self.files.n_species()))
    if index.level != WILDCARD:
      name += self.files.get_level_tag(self._check('level', index.level, self.files.n_levels()))
    name += '_'
    if index.pt != WILDCARD:
      name += self.hists.get_pt_tag(self._check('pt', index.pt, self.hists.n_pt()))
    if index.charge != WILDCARD:
      name += self.hists.get_charge_tag(self._check('charge', index.charge, self.hists.n_charge()))
    if index.spin != WILDCARD:
      name += self.hists.get_spin_tag(self._check('spin', index.spin, self.hists.n_spin()))
    return name

  #---------------------------------------------------------------
  def get_file(self, index):
    species = self._check('species', index.species, self.files.n_species())
    level = self._check('level', index.level, self.files.n_levels())
    return self.files.get_file(species, level)

  #---------------------------------------------------------------
  def is_pau(self, index):
    return index.species == InFiles.PAu

  #---------------------------------------------------------------
  # Spin states defined by the blue beam alone
  #---------------------------------------------------------------
  def is_blue_polarization(self, index):
    return index.spin in (InHists.BU, InHists.BD, InHists.INT)

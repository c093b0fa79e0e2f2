#!/usr/bin/env python3

"""
  Catalog of inputs: the files per collision species and level, and
  the histogram tags and legends per jet pt bin, jet charge bin and
  spin state.
"""

################################################################
class InFiles(object):
  """Input files and their species / level strings."""

  PP = 0
  PAu = 1

  DATA = 0
  RECO = 1
  TRUE = 2

  #---------------------------------------------------------------
  # Constructor; files is a [species][level] matrix of paths
  #---------------------------------------------------------------
  def __init__(self, files=None):
    self.files = files if files is not None else InFiles.default_files()
    self.tags_species = ['PP', 'PAu']
    self.tags_levels = ['DataJet', 'RecoJet', 'TrueJet']
    self.legs_species = [r'$\bf{[p+p]}$', r'$\bf{[p+Au]}$']
    self.legs_levels = [r'$\bf{[Data]}$', r'$\bf{[Reco.]}$', r'$\bf{[Truth]}$']

  #---------------------------------------------------------------
  @staticmethod
  def default_files():
    pp_files = [
      './input/ppRun15_dataWithBetterWraps_r03all.d6m2y2025.h5',
      './input/ppRun15_simWithBetterWraps_r03all.d6m2y2025.h5',
      './input/ppRun15_simWithBetterWraps_r03all.d6m2y2025.h5',
    ]
    pa_files = [
      './input/paRun15_dataWithJetCharge_r03all_084.d27m1y2025.h5',
      './input/paRun15_simWithJetCharge_r03all_084.d27m1y2025.h5',
      './input/paRun15_simWithJetCharge_r03all_084.d27m1y2025.h5',
    ]
    return [pp_files, pa_files]

  #---------------------------------------------------------------
  def n_species(self):
    return len(self.tags_species)

  #---------------------------------------------------------------
  def n_levels(self):
    return len(self.tags_levels)

  #---------------------------------------------------------------
  def get_species_tag(self, species):
    return self.tags_species[species]

  #---------------------------------------------------------------
  def get_level_tag(self, level):
    return self.tags_levels[level]

  #---------------------------------------------------------------
  def get_species_legend(self, species):
    return self.legs_species[species]

  #---------------------------------------------------------------
  def get_level_legend(self, level):
    return self.legs_levels[level]

  #---------------------------------------------------------------
  def get_file(self, species, level):
    return self.files[species][level]


################################################################
class InHists(object):
  """Histogram tags and legends per pt bin, charge bin and spin."""

  PT5 = 0
  PT10 = 1
  PT15 = 2

  NEG = 0
  POS = 1

  BU = 0
  BD = 1
  YU = 2
  YD = 3
  BUYU = 4
  BUYD = 5
  BDYU = 6
  BDYD = 7
  INT = 8

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self):
    self.tags_pt = ['pt0', 'pt1', 'pt2']
    self.legs_pt = [
      r'$p_{T}^{jet} \in (5, 10)$ GeV/c',
      r'$p_{T}^{jet} \in (10, 15)$ GeV/c',
      r'$p_{T}^{jet} \in (15, 20)$ GeV/c',
    ]
    self.tags_ch = ['ch0', 'ch1']
    self.legs_ch = ['jet charge < 0', 'jet charge > 0']
    self.tags_sp = ['spBU', 'spBD', 'spYU', 'spYD', 'spBUYU', 'spBUYD', 'spBDYU', 'spBDYD', 'spInt']
    self.legs_sp = [
      r'B$\uparrow$',
      r'B$\downarrow$',
      r'Y$\uparrow$',
      r'Y$\downarrow$',
      r'B$\uparrow$Y$\uparrow$',
      r'B$\uparrow$Y$\downarrow$',
      r'B$\downarrow$Y$\uparrow$',
      r'B$\downarrow$Y$\downarrow$',
      'Integrated',
    ]

  #---------------------------------------------------------------
  def n_pt(self):
    return len(self.tags_pt)

  #---------------------------------------------------------------
  def n_charge(self):
    return len(self.tags_ch)

  #---------------------------------------------------------------
  def n_spin(self):
    return len(self.tags_sp)

  #---------------------------------------------------------------
  def get_pt_tag(self, pt):
    return self.tags_pt[pt]

  #---------------------------------------------------------------
  def get_charge_tag(self, charge):
    return self.tags_ch[charge]

  #---------------------------------------------------------------
  def get_spin_tag(self, spin):
    return self.tags_sp[spin]

  #---------------------------------------------------------------
  def get_pt_legend(self, pt):
    return self.legs_pt[pt]

  #---------------------------------------------------------------
  def get_charge_legend(self, charge):
    return self.legs_ch[charge]

  #---------------------------------------------------------------
  def get_spin_legend(self, spin):
    return self.legs_sp[spin]

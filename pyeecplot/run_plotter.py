#!/usr/bin/env python3

"""
  Driver for the plot routines: loops over the analysis index for one
  figure set and writes the figures for each variable family to its
  own output store.

  Usage: run_plotter.py -c config/plotter_config.yaml -p SimVsData
"""

import os
import sys
import argparse
import itertools

import yaml
from tqdm import tqdm

from pyeecplot.errors import PlotterError, UnknownOption
from pyeecplot.inout.catalog import InFiles
from pyeecplot.inout.input_output import InputOutput, PlotIndex
from pyeecplot.inout.outputs import Output
from pyeecplot.maker import base_options
from pyeecplot.maker.maker_default import Z_RANGES
from pyeecplot.maker.maker_tools import RangeOpt
from pyeecplot.maker.plot_maker import PlotMaker
from pyeecplot.mputils import GenericObject, pinfo, pindent, pwarning, perror
from pyeecplot.plotting import tools

# variable families, one output store each
FAMILIES = ['EEC', 'Collins', 'BoerMulders']

# (variable, range option, family, needs yellow beam)
VARIABLES_1D = [
  ('EEC', RangeOpt.SIDE, 'EEC', False),
  ('CollinsBlue', RangeOpt.ANGLE, 'Collins', False),
  ('BoerMuldersBlue', RangeOpt.ANGLE, 'BoerMulders', False),
  ('CollinsYell', RangeOpt.ANGLE, 'Collins', True),
  ('BoerMuldersYell', RangeOpt.ANGLE, 'BoerMulders', True),
]

VARIABLES_2D = [
  ('CollinsBlueVsR', 'Collins', False),
  ('BoerMuldersBlueVsR', 'BoerMulders', False),
  ('CollinsYellVsR', 'Collins', True),
  ('BoerMuldersYellVsR', 'BoerMulders', True),
]

# index fields each figure set iterates over
LOOPS = {
  'SimVsData': ['species', 'pt', 'charge', 'spin'],
  'RecoVsData': ['species', 'pt', 'charge', 'spin'],
  'VsPtJet': ['species', 'level', 'charge', 'spin'],
  'PPVsPAu': ['level', 'charge', 'spin'],
  'CorrectSpectra': ['species', 'charge', 'spin'],
  'SpinRatios': ['species', 'pt', 'charge'],
}

################################################################
class PlotterRunner(object):

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, config_file, figure_set, **kwargs):
    if figure_set not in LOOPS:
      raise UnknownOption('unknown figure set {} (use one of {})'.format(figure_set, sorted(LOOPS.keys())))
    self.figure_set = figure_set
    self.initialize_config(config_file)

    self.io = InputOutput(InFiles(self.config.input_files))
    self.maker = PlotMaker(base_options.base_plot_style(), base_options.base_text_style(), base_options.text())
    self.output = Output(self.maker, self.io, Z_RANGES[self.config.zrange])
    self.n_failed = 0

  #---------------------------------------------------------------
  # Read config file and set defaults for missing entries
  #---------------------------------------------------------------
  def initialize_config(self, config_file):
    with open(config_file, 'r') as stream:
      config = yaml.safe_load(stream)
    self.config = GenericObject(args=config if config is not None else {})
    self.config.set_defaults(
      input_files=InFiles.default_files(),
      output_dir='.',
      output_label='plots',
      zrange='wide',
      nrebin=1,
      plot_formats=['pdf'],
      skip_pau=False,
      do_2d=[]
    )
    if self.config.zrange not in Z_RANGES:
      pwarning('unknown z range {}, using wide'.format(self.config.zrange))
      self.config.zrange = 'wide'

  #---------------------------------------------------------------
  # All indices for the figure set, p+Au only with blue-beam spins
  #---------------------------------------------------------------
  def indices(self):
    sizes = {
      'species': self.io.files.n_species(),
      'level': self.io.files.n_levels(),
      'pt': self.io.hists.n_pt(),
      'charge': self.io.hists.n_charge(),
      'spin': self.io.hists.n_spin(),
    }
    fields = LOOPS[self.figure_set]
    indices = []
    for values in itertools.product(*[range(sizes[f]) for f in fields]):
      index = PlotIndex(**dict(zip(fields, values)))
      if self.figure_set == 'PPVsPAu':
        if not self.io.is_blue_polarization(index):
          continue
      elif self.io.is_pau(index):
        if self.config.skip_pau:
          continue
        if index.spin != -1 and not self.io.is_blue_polarization(index):
          continue
      indices.append(index)
    return indices

  #---------------------------------------------------------------
  def open_outputs(self):
    ofiles = {}
    for family in FAMILIES:
      path = os.path.join(self.config.output_dir, '{}{}.{}.h5'.format(
        self.figure_set[0].lower() + self.figure_set[1:], family, self.config.output_label))
      ofiles[family] = tools.open_file(path, 'overwrite', plot_dir=self.config.plot_dir,
                                       formats=self.config.plot_formats)
      pindent('Opened output file {}'.format(path))
    return ofiles

  #---------------------------------------------------------------
  # Run one figure; a failed figure is reported and skipped
  #---------------------------------------------------------------
  def make_figure(self, method, *args):
    try:
      method(*args)
    except PlotterError as e:
      perror('figure not produced: {}'.format(e))
      self.n_failed += 1

  #---------------------------------------------------------------
  def run(self):
    pinfo('Beginning {} plots.'.format(self.figure_set))
    ofiles = self.open_outputs()
    output = self.output.get(self.figure_set)
    try:
      for index in tqdm(self.indices(), self.figure_set):
        is_pau = self.io.is_pau(index)
        if index.species != -1:
          self.maker.set_text_box(base_options.text(index.species))
        self.output.update_index(index)
        for variable, opt, family, yellow in VARIABLES_1D:
          if yellow and is_pau:
            continue
          self.make_figure(output.make_plot_1d, variable, opt, ofiles[family], self.config.nrebin)
        if self.figure_set not in self.config.do_2d:
          continue
        for variable, family, yellow in VARIABLES_2D:
          if yellow and is_pau:
            continue
          self.make_figure(output.make_plot_2d, variable, ofiles[family])
    finally:
      tools.close_files(ofiles.values())
    pinfo('Completed {} plots ({} figure(s) failed).'.format(self.figure_set, self.n_failed))


#---------------------------------------------------------------
def main():
  parser = argparse.ArgumentParser(description='Make comparison figures of EEC spectra')
  parser.add_argument('-c', '--configFile', action='store',
                      type=str, metavar='configFile',
                      default='config/plotter_config.yaml',
                      help='Path of config file for the plots')
  parser.add_argument('-p', '--plots', action='store',
                      type=str, metavar='plots',
                      default='SimVsData',
                      help='Figure set to make: {}'.format(', '.join(sorted(LOOPS.keys()))))

  # Parse the arguments
  args = parser.parse_args()

  print('Configuring...')
  print('configFile: \'{0}\''.format(args.configFile))
  print('plots: \'{0}\''.format(args.plots))
  print('----------------------------------------------------------------')

  # If invalid configFile is given, exit
  if not os.path.exists(args.configFile):
    print('File \"{0}\" does not exist! Exiting!'.format(args.configFile))
    sys.exit(0)

  runner = PlotterRunner(config_file=args.configFile, figure_set=args.plots)
  print(runner.config)
  runner.run()

#----------------------------------------------------------------------
if __name__ == '__main__':
  main()

#!/usr/bin/env python3

"""
  Plotting options shared by all routines: the base plot style, the
  base text style (legends and text boxes) and the text box naming
  the collision system.
"""

from pyeecplot.inout.catalog import InFiles
from pyeecplot.mputils import pwarning
from pyeecplot.plotting import tools
from pyeecplot.plotting.style import Style
from pyeecplot.plotting.textbox import TextBox

#---------------------------------------------------------------
# Style of histograms, graphs and functions
#---------------------------------------------------------------
def base_plot_style():
  titles = [
    Style.Title(1, 1, 42, 0.04, 1.0),
    Style.Title(1, 1, 42, 0.04, 1.2),
    Style.Title(1, 1, 42, 0.04, 1.2),
  ]
  style = Style()
  style.set_text_style(Style.Text(1, 42))
  style.set_label_styles(Style.Label(1, 42, 0.03))
  style.set_title_styles(titles)
  return style

#---------------------------------------------------------------
# Style of legends and text boxes; the marker is unused
#---------------------------------------------------------------
def base_text_style():
  style = Style()
  style.set_plot_style(Style.Plot(0, 1, 0, 0, 1))
  style.set_text_style(Style.Text(1, 42, 12, 0.05))
  return style

#---------------------------------------------------------------
# Text box with the experiment and the collision system
#---------------------------------------------------------------
def text(species=InFiles.PP):
  systems = {InFiles.PP: 'p+p collisions', InFiles.PAu: 'p+Au collisions'}
  if species not in systems:
    pwarning('unknown option {}!'.format(species))
  lines = [r'$\bf{PHENIX}$ Run-15', systems.get(species, '')]
  height = tools.get_height(len(lines), base_text_style().text.spacing)
  return TextBox(lines, (0.1, 0.1, 0.3, 0.1 + height))

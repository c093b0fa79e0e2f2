from .maker_tools import RangeOpt, get_row_number, make_ratio_canvas, make_correction_canvas, make_grid_canvas
from . import maker_default
from . import base_options
from .base_routine import BaseRoutine, panic_on_failure
from .plot_spectra_1d import PlotSpectra1D
from .plot_spectra_2d import PlotSpectra2D
from .plot_vs_baseline_1d import PlotVsBaseline1D
from .plot_vs_baseline_2d import PlotVsBaseline2D
from .plot_ratios_1d import PlotRatios1D
from .plot_ratios_2d import PlotRatios2D
from .correct_spectra_1d import CorrectSpectra1D
from .correct_spectra_2d import CorrectSpectra2D
from .plot_maker import PlotMaker

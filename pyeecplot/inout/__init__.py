from .catalog import InFiles, InHists
from .input_output import InputOutput, PlotIndex, WILDCARD
from .outputs import BaseOutput, SimVsData, RecoVsData, VsPtJet, PPVsPAu, CorrectSpectra, SpinRatios, Output

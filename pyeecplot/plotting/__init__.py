from .range import Range
from .pad_opts import PadOpts
from .pad import Pad, Margins, DefaultMargins
from .canvas import Canvas
from .canvas_manager import CanvasManager, PadHandle
from .style import Style
from .shape import Shape
from .legend import Legend
from .textbox import TextBox
from .elements import PlotInput, PlotShape, PlotOpts, Rebin, Projection
from . import colors
from . import tools

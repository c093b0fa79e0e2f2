#!/usr/bin/env python3

"""
  Translation of ROOT-style attribute codes (colors, markers, line and
  fill styles, fonts) into matplotlib keywords.

  Styles throughout the package are expressed with the integer codes
  analysts already use (kAzure-1 = 859, open circle = 24, ...), and only
  the drawing layer converts them.
"""

import numpy as np

from pyeecplot.mputils import pwarning

kWhite = 0
kBlack = 1
kGray = 920
kRed = 632
kGreen = 416
kBlue = 600
kYellow = 400
kMagenta = 616
kCyan = 432
kOrange = 800
kSpring = 820
kTeal = 840
kAzure = 860
kViolet = 880
kPink = 900

# 0-9 are the classic palette
_basic = {
  0: (1.0, 1.0, 1.0),
  1: (0.0, 0.0, 0.0),
  2: (1.0, 0.0, 0.0),
  3: (0.0, 1.0, 0.0),
  4: (0.0, 0.0, 1.0),
  5: (1.0, 1.0, 0.0),
  6: (1.0, 0.0, 1.0),
  7: (0.0, 1.0, 1.0),
  8: (0.35, 0.83, 0.33),
  9: (0.35, 0.33, 0.85),
}

# centre of each wheel family
_wheel = {
  kYellow: (1.0, 1.0, 0.0),
  kGreen: (0.0, 1.0, 0.0),
  kCyan: (0.0, 1.0, 1.0),
  kBlue: (0.0, 0.0, 1.0),
  kMagenta: (1.0, 0.0, 1.0),
  kRed: (1.0, 0.0, 0.0),
  kOrange: (1.0, 0.8, 0.0),
  kSpring: (0.8, 1.0, 0.0),
  kTeal: (0.0, 1.0, 0.8),
  kAzure: (0.0, 0.8, 1.0),
  kViolet: (0.8, 0.0, 1.0),
  kPink: (1.0, 0.0, 0.8),
}

_grays = {
  kGray: (0.8, 0.8, 0.8),
  kGray + 1: (0.6, 0.6, 0.6),
  kGray + 2: (0.4, 0.4, 0.4),
  kGray + 3: (0.2, 0.2, 0.2),
}

_markers = {
  1: ('.', True),
  2: ('+', True),
  3: ('*', True),
  4: ('o', False),
  5: ('x', True),
  6: ('.', True),
  7: ('.', True),
  8: ('o', True),
  20: ('o', True),
  21: ('s', True),
  22: ('^', True),
  23: ('v', True),
  24: ('o', False),
  25: ('s', False),
  26: ('^', False),
  27: ('D', False),
  28: ('P', False),
  29: ('*', True),
  30: ('*', False),
  32: ('v', False),
  33: ('D', True),
  34: ('P', True),
  46: ('X', False),
  47: ('X', True),
}

_lines = {
  1: '-',
  2: '--',
  3: ':',
  4: '-.',
  5: (0, (6, 2, 1, 2, 1, 2)),
  6: (0, (6, 2, 1, 2, 1, 2, 1, 2)),
  7: (0, (4, 4)),
  8: (0, (6, 2, 1, 2, 1, 2)),
  9: (0, (10, 4)),
  10: (0, (10, 4, 1, 4)),
}

_hatches = {
  3001: '...',
  3002: '..',
  3003: '.',
  3004: '///',
  3005: '\\\\\\',
  3006: '|||',
  3007: '---',
  3144: '//',
  3244: 'xx',
  3344: '\\\\',
}

# font number -> (family, weight, style); precision is the last digit
_fonts = {
  1: ('serif', 'normal', 'italic'),
  2: ('serif', 'bold', 'normal'),
  3: ('serif', 'bold', 'italic'),
  4: ('sans-serif', 'normal', 'normal'),
  5: ('sans-serif', 'normal', 'oblique'),
  6: ('sans-serif', 'bold', 'normal'),
  7: ('sans-serif', 'bold', 'oblique'),
  8: ('monospace', 'normal', 'normal'),
  9: ('monospace', 'normal', 'oblique'),
  10: ('monospace', 'bold', 'normal'),
  11: ('monospace', 'bold', 'oblique'),
  12: ('serif', 'normal', 'normal'),
  13: ('serif', 'normal', 'normal'),
}


#---------------------------------------------------------------
# Shade a wheel color: negative offsets go towards white,
# positive offsets towards black
#---------------------------------------------------------------
def _shade(rgb, offset):
  rgb = np.array(rgb, dtype=float)
  if offset < 0:
    frac = min(-offset / 11., 1.)
    rgb = rgb + (1. - rgb) * frac
  elif offset > 0:
    rgb = rgb * max(1. - 0.07 * offset, 0.2)
  return tuple(float(c) for c in rgb)

#---------------------------------------------------------------
def to_rgb(code):
  if code in _basic:
    return _basic[code]
  if code in _grays:
    return _grays[code]
  for base in sorted(_wheel.keys()):
    if base - 10 <= code <= base + 10:
      return _shade(_wheel[base], code - base)
  pwarning('unknown color code {}, using black'.format(code))
  return _basic[1]

#---------------------------------------------------------------
# Returns (matplotlib marker, filled)
#---------------------------------------------------------------
def to_marker(code):
  if code in _markers:
    return _markers[code]
  pwarning('unknown marker style {}, using a filled circle'.format(code))
  return ('o', True)

#---------------------------------------------------------------
def to_linestyle(code):
  if code in _lines:
    return _lines[code]
  return '-'

#---------------------------------------------------------------
# Returns (filled, hatch, alpha) for a fill style code
#---------------------------------------------------------------
def to_fill(code):
  if code == 0:
    return (False, None, 1.0)
  if code == 1001:
    return (True, None, 1.0)
  if 4000 <= code <= 4100:
    return (True, None, (code - 4000) / 100.)
  if code in _hatches:
    return (False, _hatches[code], 1.0)
  if 3000 <= code < 4000:
    return (False, '//', 1.0)
  return (False, None, 1.0)

#---------------------------------------------------------------
# Returns a dict of matplotlib font properties
#---------------------------------------------------------------
def to_font(code):
  family, weight, style = _fonts.get(code // 10, _fonts[4])
  return {'family': family, 'weight': weight, 'style': style}

#---------------------------------------------------------------
# Precision 3 fonts give sizes in pixels, the others a fraction
# of the pad
#---------------------------------------------------------------
def is_pixel_font(code):
  return code % 10 == 3

#---------------------------------------------------------------
# Text alignment code 10*horizontal + vertical
#---------------------------------------------------------------
def to_alignment(code):
  ha = {1: 'left', 2: 'center', 3: 'right'}.get(code // 10, 'left')
  va = {1: 'bottom', 2: 'center', 3: 'top'}.get(code % 10, 'center')
  return ha, va

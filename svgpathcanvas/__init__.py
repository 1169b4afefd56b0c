'''
The MIT License (MIT)

Copyright (c) 2015 Andrew Allan Port
Copyright (c) 2013-2014 Lennart Regebro

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
'''

from .errors import (PathError, NoCurrentPointError, NoSmoothContextError,
                     ArgumentCountError, MalformedPathError,
                     UnknownAttributeError)
from .geometry import (RADIANS, DEGREES, angle_between, rotate, clamp,
                       to_radians, unit_vector)
from .arc import (CenterArc, endpoint_to_center, center_to_endpoint,
                  normalize_sweep)
from .state import PathState, GraphicsSnapshot
from .style import Style
from .parser import Command, tokenize_path, parse_path
from .surface import DrawingSurface, RecordingSurface
from .svgsurface import SVGSurface
from .canvas import PathCanvas
from .misctools import hex2rgb, rgb2hex

## construction-time errors for hopoint
## Copyright (c) 2026 hopoint contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Exceptions raised by hopoint.

Only one failure class exists in the algebra: two functions whose
parameter shapes disagree are combined, lifted, or evaluated with a
value of the wrong shape.  Numeric degeneracy (division by zero,
``diff(0.0)``, the norm of a zero vector) is *not* an error; it
propagates ``inf``/``nan`` the way floating point does.
"""

from typing import Optional


class ShapeError(ValueError):
    """Parameter shapes that cannot be reconciled.

    ``shapes`` holds the offending shapes (or values) for tooling, and
    ``operation`` names what was being built when the mismatch was
    found.
    """

    def __init__(self, message: str, *shapes, operation: Optional[str] = None):
        self.shapes = shapes
        self.operation = operation
        if operation:
            message = "{}: {}".format(operation, message)
        super().__init__(message)


__all__ = ['ShapeError']

## base class of drawable for hopoint sampled geometry
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

from hopoint.point import Point, PointFunc
from hopoint.sampling import DEFAULT_SAMPLES, Sampler, grid, polyline

## Generic drawing functions -- a back end only has to draw points
## and straight lines.  Curves and surfaces are sampled here and
## handed over as points and line segments.

class Drawable:
    """Base class for hopoint drawables"""

    ## pure virtual functions -- override for specific rendering
    ## system
    def draw_point(self,p):
        print("pure virtual draw_point called: {}".format(p))
        return

    def draw_line(self,p1,p2):
        print("pure virtual draw_line called: {}, {}".format(p1,p2))
        return

    def display(self):
        print("pure virtual display called")
        return

    ## non-virtual utility drawing functions

    def draw_polyline(self,pts):
        for p1, p2 in zip(pts[:-1],pts[1:]):
            self.draw_line(p1,p2)

    ## sample a 1-parameter point-function over [0,1] and draw it as
    ## a polyline
    def draw_curve(self,pf,n=DEFAULT_SAMPLES,closed=False):
        if not isinstance(pf,PointFunc):
            raise ValueError('bad (non-PointFunc) curve: {}'.format(pf))
        self.draw_polyline(polyline(pf,n,closed))

    ## sample a 2-parameter point-function over [0,1]x[0,1] and draw
    ## it as a wireframe of rows and columns
    def draw_surface(self,pf,n=(10,10)):
        if not isinstance(pf,PointFunc):
            raise ValueError('bad (non-PointFunc) surface: {}'.format(pf))
        rows = grid(pf,n)
        for row in rows:
            self.draw_polyline(row)
        for j in range(len(rows[0])):
            self.draw_polyline([row[j] for row in rows])

    ## draw the accumulated samples of a Sampler as points
    def draw_samples(self,sampler):
        if not isinstance(sampler,Sampler):
            raise ValueError('bad (non-Sampler) samples: {}'.format(sampler))
        for p in sampler:
            self.draw_point(p)

    ## draw a point, a point-function, or a sampler, picking the
    ## sensible default for each
    def draw(self,x):
        if isinstance(x,Point):
            self.draw_point(x)
        elif isinstance(x,PointFunc):
            self.draw_curve(x)
        elif isinstance(x,Sampler):
            self.draw_samples(x)
        elif isinstance(x,list):
            for e in x:
                self.draw(e)
        else:
            raise ValueError('bad thing passed to draw: {}'.format(x))

    def __init__(self):
        self.__linecolor = False
        self.__layer = False
        self.__layerlist = [False, 'default']

    ## layer and color state, validated on assignment

    @property
    def layerlist(self):
        return self.__layerlist

    @layerlist.setter
    def layerlist(self,lst):
        if not isinstance(lst,list):
            raise ValueError('bad layer list {!r}'.format(lst))
        self.__layerlist = lst

    @property
    def layer(self):
        return self.__layer

    @layer.setter
    def layer(self,lyr):
        if lyr not in self.layerlist:
            raise ValueError('layer {!r} not in {}'.format(lyr, self.layerlist))
        self.__layer = lyr

    ## line color is either False (by layer) or an AutoCAD color
    ## index in the range 0-256
    @property
    def linecolor(self):
        return self.__linecolor

    @linecolor.setter
    def linecolor(self,c):
        bylayer = c is False
        index = isinstance(c,int) and not isinstance(c,bool) and 0 <= c <= 256
        if not (bylayer or index):
            raise ValueError('bad linecolor {!r}'.format(c))
        self.__linecolor = c

    def __repr__(self):
        return 'an instance of Drawable'
